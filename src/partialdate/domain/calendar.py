"""Proleptic Gregorian calendar service backed by :mod:`datetime`.

Absent fields resolve to the calendar defaults (January, day 1, midnight) and a
missing year to the leap reference year 2000, so a partial value such as
``month=12, day=15`` still maps to an instant and can carry backwards across
January. Years are limited to what :class:`datetime.datetime` can represent.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, UTC, datetime, timedelta
from typing import TYPE_CHECKING, ClassVar, Final, assert_never

from partialdate.domain.model.enums import Component
from partialdate.domain.model.primitives import ComponentValues

if TYPE_CHECKING:
    from datetime import tzinfo

    from partialdate.domain.model.primitives import Instant
    from partialdate.domain.ports.calendar import Clock

DAYS_IN_MONTH: Final[tuple[int, ...]] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Leap year, so a year-less February 29 stays valid.
REFERENCE_YEAR: Final[int] = 2000

_DEFAULTS: Final[dict[Component, int]] = {
    Component.YEAR: REFERENCE_YEAR,
    Component.MONTH: 1,
    Component.DAY: 1,
    Component.HOUR: 0,
    Component.MINUTE: 0,
    Component.SECOND: 0,
    Component.MILLISECOND: 0,
}

# Inclusive bounds for fields whose range does not depend on other fields.
FIELD_RANGES: Final[dict[Component, tuple[int, int]]] = {
    Component.MONTH: (1, 12),
    Component.HOUR: (0, 23),
    Component.MINUTE: (0, 59),
    Component.SECOND: (0, 59),
    Component.MILLISECOND: (0, 999),
}


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` (1-12) of ``year``."""

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _value_or_default(components: ComponentValues, component: Component) -> int:
    value = components.get(component)
    return _DEFAULTS[component] if value is None else value


@dataclass(frozen=True, slots=True)
class GregorianCalendar:
    """Stateless Gregorian implementation of the calendar port."""

    identifier: ClassVar[str] = "gregorian"

    def is_valid(self, components: ComponentValues, timezone: tzinfo) -> bool:  # noqa: ARG002
        if components.is_empty:
            return False
        year = _value_or_default(components, Component.YEAR)
        if not MINYEAR <= year <= MAXYEAR:
            return False
        for component, (low, high) in FIELD_RANGES.items():
            value = components.get(component)
            if value is not None and not low <= value <= high:
                return False
        if components.day is None:
            return True
        month = _value_or_default(components, Component.MONTH)
        return 1 <= components.day <= days_in_month(year, month)

    def resolve_instant(self, components: ComponentValues, timezone: tzinfo) -> Instant | None:
        if components.is_empty:
            return None

        carry, month_index = divmod(_value_or_default(components, Component.MONTH) - 1, 12)
        year = _value_or_default(components, Component.YEAR) + carry
        if not MINYEAR <= year <= MAXYEAR:
            return None

        try:
            offset = timedelta(
                days=_value_or_default(components, Component.DAY) - 1,
                hours=_value_or_default(components, Component.HOUR),
                minutes=_value_or_default(components, Component.MINUTE),
                seconds=_value_or_default(components, Component.SECOND),
                milliseconds=_value_or_default(components, Component.MILLISECOND),
            )
            wall = datetime(year, month_index + 1, 1) + offset  # noqa: DTZ001
        except OverflowError:
            return None
        return wall.replace(tzinfo=timezone)

    def extract_component(self, instant: Instant, component: Component, timezone: tzinfo) -> int:
        local = instant.astimezone(timezone)
        match component:
            case Component.YEAR:
                return local.year
            case Component.MONTH:
                return local.month
            case Component.DAY:
                return local.day
            case Component.HOUR:
                return local.hour
            case Component.MINUTE:
                return local.minute
            case Component.SECOND:
                return local.second
            case Component.MILLISECOND:
                return local.microsecond // 1000
            case _:
                assert_never(component)

    def weekday(self, instant: Instant, timezone: tzinfo) -> int:
        """Return the weekday with 1 = Sunday ... 7 = Saturday."""

        return instant.astimezone(timezone).isoweekday() % 7 + 1

    def is_leap_month(self, components: ComponentValues) -> bool | None:
        # Gregorian has no leap months; the flag is only meaningful with a month.
        return None if components.month is None else False

    def now(self, timezone: tzinfo, clock: Clock | None = None) -> ComponentValues:
        current = (clock or _utcnow)()
        if current.tzinfo is None:
            current = current.replace(tzinfo=UTC)
        local = current.astimezone(timezone)
        return ComponentValues(
            year=local.year,
            month=local.month,
            day=local.day,
            hour=local.hour,
            minute=local.minute,
            second=local.second,
            millisecond=local.microsecond // 1000,
        )


__all__ = [
    "FIELD_RANGES",
    "REFERENCE_YEAR",
    "GregorianCalendar",
    "days_in_month",
    "is_leap_year",
]
