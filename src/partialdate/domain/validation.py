"""Repair out-of-range or impossible component combinations.

``validate`` never raises. It walks :data:`VALIDATION_ORDER`, clamps one present
field at a time and stops as soon as the whole set is calendar-valid. When no
repair succeeds the last clamped state is returned; callers notice the
invalidity later because the value has no resolvable instant.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final, assert_never

from partialdate.domain import calendar as _calendar
from partialdate.domain.model.enums import VALIDATION_ORDER, Component

if TYPE_CHECKING:
    from partialdate.domain.model.primitives import CalendarContext, ComponentValues

log = logging.getLogger(__name__)

MIN_YEAR: Final[int] = 1
MIN_DAY: Final[int] = 1
MAX_DAY: Final[int] = 31


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def _clamp_day(components: ComponentValues, day: int, context: CalendarContext) -> ComponentValues:
    candidate = components.with_value(Component.DAY, _clamp(day, MIN_DAY, MAX_DAY))
    calendar = context.calendar
    while not calendar.is_valid(candidate, context.timezone):
        current = candidate.day
        if current is None or current <= MIN_DAY:
            break
        candidate = candidate.with_value(Component.DAY, current - 1)
    return candidate


def clamp_component(
    components: ComponentValues,
    component: Component,
    context: CalendarContext,
) -> ComponentValues:
    """Apply the clamp rule of a single field. Absent fields are left alone."""

    value = components.get(component)
    if value is None:
        return components

    match component:
        case Component.YEAR:
            return components.with_value(component, max(value, MIN_YEAR))
        case Component.DAY:
            return _clamp_day(components, value, context)
        case (
            Component.MONTH
            | Component.HOUR
            | Component.MINUTE
            | Component.SECOND
            | Component.MILLISECOND
        ):
            low, high = _calendar.FIELD_RANGES[component]
            return components.with_value(component, _clamp(value, low, high))
        case _:
            assert_never(component)


def validate(components: ComponentValues, context: CalendarContext) -> ComponentValues:
    """Return ``components`` made calendar-valid where a repair exists."""

    calendar = context.calendar
    if calendar.is_valid(components, context.timezone):
        return components

    current = components
    for component in VALIDATION_ORDER:
        clamped = clamp_component(current, component, context)
        if clamped != current:
            log.debug(
                "Clamped %s from %s to %s",
                component,
                current.get(component),
                clamped.get(component),
            )
        current = clamped
        if calendar.is_valid(current, context.timezone):
            return current

    log.debug("Components remain invalid after clamping: %s", current.as_dict())
    return current


__all__ = ["clamp_component", "validate"]
