"""Calendar context defaults for application entry points."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, timedelta, timezone, tzinfo
from typing import Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from partialdate.domain.calendar import GregorianCalendar
from partialdate.domain.model.primitives import CalendarContext

from .env import optional_env_var
from .errors import ConfigurationError

TIMEZONE_ENV_VAR: Final[str] = "PARTIALDATE_TIMEZONE"
CALENDAR_ENV_VAR: Final[str] = "PARTIALDATE_CALENDAR"
DEFAULT_TIMEZONE: Final[str] = "UTC"
DEFAULT_CALENDAR: Final[str] = GregorianCalendar.identifier

_CALENDARS: Final[dict[str, type[GregorianCalendar]]] = {
    GregorianCalendar.identifier: GregorianCalendar,
}

# Fixed UTC offsets such as "+03:00" or "-05:30".
_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(r"([+-])(\d{2}):(\d{2})")


def serialize_timezone(zone: tzinfo) -> str:
    """Return a timezone name that ``CalendarConfig.timezone`` reads back unchanged.

    IANA zones keep their key, fixed offsets become ``±HH:MM`` and a zero offset
    becomes ``UTC``.
    """

    key = getattr(zone, "key", None)
    if isinstance(key, str):
        return key
    offset = zone.utcoffset(None)
    if offset is None:
        return zone.tzname(None) or DEFAULT_TIMEZONE
    if not offset:
        return DEFAULT_TIMEZONE
    sign = "-" if offset < timedelta(0) else "+"
    hours, minutes = divmod(abs(offset) // timedelta(minutes=1), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


@dataclass(frozen=True, slots=True)
class CalendarConfig:
    timezone_name: str = DEFAULT_TIMEZONE
    calendar_name: str = DEFAULT_CALENDAR

    def timezone(self) -> tzinfo:
        if self.timezone_name.upper() == "UTC":
            return UTC
        offset = _OFFSET_PATTERN.fullmatch(self.timezone_name)
        if offset is not None:
            sign, hours, minutes = offset.groups()
            delta = timedelta(hours=int(hours), minutes=int(minutes))
            try:
                return timezone(-delta if sign == "-" else delta)
            except ValueError as exc:
                raise ConfigurationError(f"Invalid UTC offset: {self.timezone_name}") from exc
        try:
            return ZoneInfo(self.timezone_name)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ConfigurationError(f"Unknown timezone: {self.timezone_name}") from exc

    def context(self) -> CalendarContext:
        calendar_type = _CALENDARS.get(self.calendar_name.lower())
        if calendar_type is None:
            supported = ", ".join(sorted(_CALENDARS))
            raise ConfigurationError(
                f"Unsupported calendar: {self.calendar_name} (supported: {supported})"
            )
        return CalendarContext(timezone=self.timezone(), calendar=calendar_type())


def get_calendar_config() -> CalendarConfig:
    return CalendarConfig(
        timezone_name=optional_env_var(TIMEZONE_ENV_VAR) or DEFAULT_TIMEZONE,
        calendar_name=optional_env_var(CALENDAR_ENV_VAR) or DEFAULT_CALENDAR,
    )
