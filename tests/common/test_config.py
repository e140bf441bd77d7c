from __future__ import annotations

from datetime import UTC, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from partialdate.config import (
    CALENDAR_ENV_VAR,
    TIMEZONE_ENV_VAR,
    CalendarConfig,
    ConfigurationError,
    get_calendar_config,
    optional_env_var,
    serialize_timezone,
)
from partialdate.domain.calendar import GregorianCalendar


def test_get_calendar_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(TIMEZONE_ENV_VAR, raising=False)
    monkeypatch.delenv(CALENDAR_ENV_VAR, raising=False)

    config = get_calendar_config()

    assert config == CalendarConfig(timezone_name="UTC", calendar_name="gregorian")
    context = config.context()
    assert context.timezone is UTC
    assert isinstance(context.calendar, GregorianCalendar)


def test_get_calendar_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(TIMEZONE_ENV_VAR, "  utc  ")
    monkeypatch.setenv(CALENDAR_ENV_VAR, "Gregorian")

    context = get_calendar_config().context()

    assert context.timezone is UTC
    assert context.identifier == "gregorian"


def test_blank_environment_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(TIMEZONE_ENV_VAR, "   ")

    assert optional_env_var(TIMEZONE_ENV_VAR) is None
    assert get_calendar_config().timezone_name == "UTC"


def test_named_timezone_is_loaded() -> None:
    try:
        expected = ZoneInfo("Europe/Berlin")
    except ZoneInfoNotFoundError:
        pytest.skip("tz database not available")

    assert CalendarConfig(timezone_name="Europe/Berlin").timezone() == expected


def test_unknown_timezone_raises() -> None:
    with pytest.raises(ConfigurationError) as exc:
        CalendarConfig(timezone_name="Mars/Olympus_Mons").timezone()

    assert "Mars/Olympus_Mons" in str(exc.value)


def test_unsupported_calendar_raises() -> None:
    with pytest.raises(ConfigurationError) as exc:
        CalendarConfig(calendar_name="hebrew").context()

    assert "gregorian" in str(exc.value)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("+03:00", timezone(timedelta(hours=3))),
        ("-05:30", timezone(-timedelta(hours=5, minutes=30))),
        ("+00:00", UTC),
    ],
)
def test_fixed_offset_timezones(name: str, expected: timezone) -> None:
    assert CalendarConfig(timezone_name=name).timezone() == expected


def test_out_of_range_offset_raises() -> None:
    with pytest.raises(ConfigurationError):
        CalendarConfig(timezone_name="+24:00").timezone()


def test_serialize_timezone_reads_back() -> None:
    offsets = [timezone(timedelta(hours=3)), timezone(-timedelta(hours=5, minutes=30)), UTC]

    names = [serialize_timezone(zone) for zone in offsets]

    assert names == ["+03:00", "-05:30", "UTC"]
    assert [CalendarConfig(timezone_name=name).timezone() for name in names] == offsets


def test_serialize_timezone_keeps_iana_key() -> None:
    try:
        zone = ZoneInfo("Europe/Berlin")
    except ZoneInfoNotFoundError:
        pytest.skip("tz database not available")

    assert serialize_timezone(zone) == "Europe/Berlin"
