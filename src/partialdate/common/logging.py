"""Root logger setup for the ``partialdate`` command line."""

from __future__ import annotations

import logging
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT: Final[str] = "%H:%M:%S"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Attach a stderr handler to the root logger for CLI runs.

    The library modules only create loggers; handlers are installed here by
    ``partialdate.ui.cli.main``. Clamping and cascade details are logged at DEBUG,
    so ``--verbose`` passes ``logging.DEBUG`` to surface them. A root logger that
    already has handlers is left alone unless ``force`` is set.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT, force=force)
