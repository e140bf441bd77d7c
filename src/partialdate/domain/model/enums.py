"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Component(StrEnum):
    """Calendar field selector; doubles as a validation-order token."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"


# Day comes last: clamping it depends on month and year already being in range.
VALIDATION_ORDER: tuple[Component, ...] = (
    Component.YEAR,
    Component.MONTH,
    Component.HOUR,
    Component.MINUTE,
    Component.SECOND,
    Component.MILLISECOND,
    Component.DAY,
)


class DateFormat(StrEnum):
    """Well-known LDML patterns. Any other string is accepted as a custom pattern."""

    DAY_MONTH_YEAR = "dd.MM.yyyy"
    DAY_MONTH = "dd.MM"
    MONTH_YEAR_LOCALE = "LLLL yyyy"
    YEAR = "yyyy"
    YEAR_MONTH_DAY_TIME = "yyyy-MM-dd'T'HH:mm:ss"
