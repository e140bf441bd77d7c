from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from partialdate.domain.model import (
    CalendarContext,
    Component,
    ComponentValues,
    DateFormat,
    PartialDate,
    convert,
)

if TYPE_CHECKING:
    from partialdate.domain.ports import Clock


def test_constructor_validates_components(context: CalendarContext) -> None:
    value = PartialDate(context=context, year=2023, month=2, day=31)

    assert (value.year, value.month, value.day) == (2023, 2, 28)
    assert value.hour is None


def test_tracked_fields_are_those_present_at_construction(context: CalendarContext) -> None:
    value = PartialDate(context=context, month=5, day=1, minute=30)

    assert value.tracked == {Component.MONTH, Component.DAY, Component.MINUTE}
    assert value.get(Component.MINUTE) == 30
    assert value.get(Component.YEAR) is None


def test_from_components_validates(context: CalendarContext) -> None:
    value = PartialDate.from_components(ComponentValues(year=2023, month=4, day=31), context=context)

    assert value.day == 30


def test_change_month_rolls_over_tracked_year(context: CalendarContext) -> None:
    value = PartialDate(context=context, year=2023, month=12, day=15)

    changed = value.change(Component.MONTH, 1)

    assert (changed.year, changed.month, changed.day) == (2024, 1, 15)


def test_change_month_never_promotes_absent_year(context: CalendarContext) -> None:
    value = PartialDate(context=context, month=12, day=15)

    changed = value.change(Component.MONTH, 1)

    assert changed.month == 1
    assert changed.day == 15
    assert changed.year is None
    assert changed.tracked == {Component.MONTH, Component.DAY}


def test_change_month_backwards_without_year(context: CalendarContext) -> None:
    value = PartialDate(context=context, month=1, day=15)

    changed = value.change(Component.MONTH, 1, increase=False)

    assert (changed.year, changed.month, changed.day) == (None, 12, 15)
    assert changed.instant is not None


def test_change_day_backwards_across_january_without_year(context: CalendarContext) -> None:
    value = PartialDate(context=context, month=1, day=1)

    changed = value.change(Component.DAY, 1, increase=False)

    assert (changed.year, changed.month, changed.day) == (None, 12, 31)


def test_change_returns_new_value(context: CalendarContext) -> None:
    value = PartialDate(context=context, year=2023, month=12, day=15)

    value.change(Component.DAY, 30)

    assert (value.year, value.month, value.day) == (2023, 12, 15)


def test_change_decrease_crosses_leap_day(context: CalendarContext) -> None:
    value = PartialDate(context=context, year=2024, month=3, day=1)

    changed = value.change(Component.DAY, 1, increase=False)

    assert (changed.year, changed.month, changed.day) == (2024, 2, 29)


def test_change_day_cascades_into_tracked_month(context: CalendarContext) -> None:
    value = PartialDate(context=context, month=1, day=15)

    changed = value.change(Component.DAY, 20)

    assert (changed.month, changed.day) == (2, 4)


def test_change_hour_cascades_across_year_end(context: CalendarContext) -> None:
    value = PartialDate(context=context, year=2024, month=12, day=31, hour=22)

    changed = value.change(Component.HOUR, 5)

    assert (changed.year, changed.month, changed.day, changed.hour) == (2025, 1, 1, 3)
    assert changed.minute is None


def test_change_millisecond_cascades_through_all_fields(context: CalendarContext) -> None:
    value = PartialDate(
        context=context,
        year=2024,
        month=1,
        day=1,
        hour=23,
        minute=59,
        second=59,
        millisecond=999,
    )

    changed = value.change(Component.MILLISECOND, 1)

    assert changed.components == ComponentValues(
        year=2024, month=1, day=2, hour=0, minute=0, second=0, millisecond=0
    )


def test_change_on_absent_field_is_a_no_op(context: CalendarContext) -> None:
    value = PartialDate(context=context, year=2024, month=1, day=1)

    assert value.change(Component.HOUR, 3) is value


def test_change_keeps_raw_value_when_unresolvable(context: CalendarContext) -> None:
    value = PartialDate(context=context, year=9999, month=12, day=31)

    changed = value.change(Component.DAY, 1)

    assert changed.components == ComponentValues(year=9999, month=12, day=32)
    assert changed.instant is None
    assert changed.weekday is None
    assert changed.format(DateFormat.DAY_MONTH_YEAR) == ""


def test_now_tracks_every_field(context: CalendarContext, fixed_clock: Clock) -> None:
    value = PartialDate.now(context=context, clock=fixed_clock)

    assert value.tracked == set(Component)
    assert value.components == ComponentValues(
        year=2024, month=5, day=6, hour=7, minute=8, second=9, millisecond=987
    )


def test_from_string_tracks_only_pattern_fields(context: CalendarContext) -> None:
    value = PartialDate.from_string("15.03.2024", DateFormat.DAY_MONTH_YEAR, context=context)

    assert value is not None
    assert value.tracked == {Component.YEAR, Component.MONTH, Component.DAY}
    assert (value.year, value.month, value.day) == (2024, 3, 15)


def test_from_string_year_pattern(context: CalendarContext) -> None:
    value = PartialDate.from_string("2024", DateFormat.YEAR, context=context)

    assert value is not None
    assert value.tracked == {Component.YEAR}


def test_from_string_revalidates(context: CalendarContext) -> None:
    value = PartialDate.from_string("31.02.2023", DateFormat.DAY_MONTH_YEAR, context=context)

    assert value is not None
    assert value.day == 28


def test_from_string_rejects_malformed_text(context: CalendarContext) -> None:
    assert PartialDate.from_string("15/03/2024", DateFormat.DAY_MONTH_YEAR, context=context) is None
    assert PartialDate.from_string("", DateFormat.YEAR, context=context) is None


def test_format_named_and_custom_patterns(context: CalendarContext) -> None:
    value = PartialDate(context=context, year=2024, month=3, day=5, hour=9, minute=7, second=3)

    assert value.format(DateFormat.DAY_MONTH_YEAR) == "05.03.2024"
    assert value.format(DateFormat.DAY_MONTH) == "05.03"
    assert value.format(DateFormat.YEAR) == "2024"
    assert value.format(DateFormat.YEAR_MONTH_DAY_TIME) == "2024-03-05T09:07:03"
    assert value.format("yyyy/MM/dd HH:mm") == "2024/03/05 09:07"


def test_format_capitalises_first_letter(context: CalendarContext) -> None:
    value = PartialDate(context=context, year=2024, month=3, day=5)

    assert value.format("'day' d 'of' yyyy") == "Day 5 of 2024"


def test_format_is_empty_without_instant(context: CalendarContext) -> None:
    assert PartialDate(context=context).format(DateFormat.YEAR) == ""


def test_instant_respects_context_timezone(plus_three_context: CalendarContext) -> None:
    value = PartialDate(context=plus_three_context, year=2024, month=1, day=15, hour=10)

    assert value.instant == datetime(2024, 1, 15, 7, tzinfo=UTC)


def test_weekday_and_leap_month(context: CalendarContext) -> None:
    value = PartialDate(context=context, year=2024, month=1, day=14)

    assert value.weekday == 1
    assert value.is_leap_month is False
    assert PartialDate(context=context, year=2024).is_leap_month is None


def test_values_compare_by_components_and_context(context: CalendarContext) -> None:
    first = PartialDate(context=context, year=2024, month=1)
    second = PartialDate(context=context, year=2024, month=1)

    assert first == second
    assert hash(first) == hash(second)
    assert first != PartialDate(context=context, year=2024)
    assert repr(first) == "PartialDate(year=2024, month=1)"


def test_convert_between_patterns(context: CalendarContext) -> None:
    result = convert("15.03.2024", DateFormat.DAY_MONTH_YEAR, "yyyy-MM-dd", context=context)

    assert result == "2024-03-15"
    assert convert("garbage", DateFormat.DAY_MONTH_YEAR, "yyyy", context=context) is None
