"""Nil-safe comparison predicates over partial dates.

Every predicate is total: whenever either side lacks the data it needs (an absent
field or an unresolvable instant) the answer is ``False`` rather than an error.
``earlier_of`` / ``later_of`` return ``None`` instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from partialdate.domain.model.enums import Component

if TYPE_CHECKING:
    from partialdate.domain.model.partial_date import PartialDate


def _both_equal(first: int | None, second: int | None) -> bool:
    if first is None or second is None:
        return False
    return first == second


def is_equal(component: Component, left: PartialDate, right: PartialDate) -> bool:
    return _both_equal(left.get(component), right.get(component))


def is_same_year(left: PartialDate, right: PartialDate) -> bool:
    return is_equal(Component.YEAR, left, right)


def is_same_month(left: PartialDate, right: PartialDate) -> bool:
    return is_equal(Component.MONTH, left, right) and is_same_year(left, right)


def is_same_calendar_day(left: PartialDate, right: PartialDate) -> bool:
    return is_equal(Component.DAY, left, right) and is_same_month(left, right)


def is_same_instant(left: PartialDate, right: PartialDate) -> bool:
    first, second = left.instant, right.instant
    if first is None or second is None:
        return False
    return first == second


def is_earlier(left: PartialDate, right: PartialDate) -> bool:
    """``left`` resolves strictly before ``right``; unresolvable sides give ``False``."""

    first, second = left.instant, right.instant
    if first is None or second is None:
        return False
    return first < second


def is_later(left: PartialDate, right: PartialDate) -> bool:
    first, second = left.instant, right.instant
    if first is None or second is None:
        return False
    return first > second


def earlier_of(first: PartialDate, second: PartialDate) -> PartialDate | None:
    """Return the operand with the earlier instant; ties go to ``first``."""

    first_instant, second_instant = first.instant, second.instant
    if first_instant is None or second_instant is None:
        return None
    return first if first_instant <= second_instant else second


def later_of(first: PartialDate, second: PartialDate) -> PartialDate | None:
    """Return the operand with the later instant; ties go to ``first``."""

    first_instant, second_instant = first.instant, second.instant
    if first_instant is None or second_instant is None:
        return None
    return first if first_instant >= second_instant else second


__all__ = [
    "earlier_of",
    "is_earlier",
    "is_equal",
    "is_later",
    "is_same_calendar_day",
    "is_same_instant",
    "is_same_month",
    "is_same_year",
    "later_of",
]
