from __future__ import annotations

import logging

import pytest

from partialdate.common.logging import DATE_FORMAT, LOG_FORMAT, configure_logging


def test_configure_logging_uses_cli_format(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)

    configure_logging(level=logging.DEBUG, force=True)

    assert captured == {
        "level": logging.DEBUG,
        "format": LOG_FORMAT,
        "datefmt": DATE_FORMAT,
        "force": True,
    }


def test_configure_logging_defaults_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)

    configure_logging()

    assert captured["level"] == logging.INFO
    assert captured["force"] is False
