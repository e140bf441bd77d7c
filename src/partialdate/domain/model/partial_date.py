"""The partial date value object.

A :class:`PartialDate` holds any subset of the seven calendar fields together with
the :class:`CalendarContext` used to resolve them. The fields present at
construction are *tracked*: arithmetic may change their values but never adds or
removes a field. Values are immutable; :meth:`PartialDate.change` returns a new
value.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from partialdate.domain import comparison
from partialdate.domain.formatting import DEFAULT_FORMATTER, capitalize_first
from partialdate.domain.model.primitives import ComponentValues
from partialdate.domain.validation import validate

if TYPE_CHECKING:
    from partialdate.domain.model.enums import Component
    from partialdate.domain.model.primitives import CalendarContext, Instant
    from partialdate.domain.ports.calendar import Clock, FormatService

log = logging.getLogger(__name__)


class PartialDate:
    """Partial calendar date/time with clamping, arithmetic and comparisons."""

    __slots__ = ("_components", "_context")

    _components: ComponentValues
    _context: CalendarContext

    def __init__(
        self,
        *,
        context: CalendarContext,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        millisecond: int | None = None,
    ) -> None:
        raw = ComponentValues(
            year=year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            millisecond=millisecond,
        )
        self._components = validate(raw, context)
        self._context = context

    @classmethod
    def from_components(
        cls,
        components: ComponentValues,
        *,
        context: CalendarContext,
    ) -> PartialDate:
        """Build a value from a raw component set; the set is validated first."""

        return cls._restore(validate(components, context), context)

    @classmethod
    def now(cls, *, context: CalendarContext, clock: Clock | None = None) -> PartialDate:
        """Snapshot of the current wall-clock reading with all seven fields tracked."""

        return cls._restore(context.calendar.now(context.timezone, clock), context)

    @classmethod
    def from_string(
        cls,
        text: str,
        pattern: str,
        *,
        context: CalendarContext,
        formatter: FormatService = DEFAULT_FORMATTER,
    ) -> PartialDate | None:
        """Parse ``text`` with a named or custom pattern.

        Only the fields the pattern carries become tracked. Returns ``None`` when
        the text does not match the pattern.
        """

        components = formatter.parse(text, pattern)
        if components is None or components.is_empty:
            return None
        return cls.from_components(components, context=context)

    @classmethod
    def _restore(cls, components: ComponentValues, context: CalendarContext) -> PartialDate:
        value = cls.__new__(cls)
        value._components = components
        value._context = context
        return value

    @property
    def components(self) -> ComponentValues:
        return self._components

    @property
    def context(self) -> CalendarContext:
        return self._context

    @property
    def tracked(self) -> frozenset[Component]:
        return self._components.present

    def get(self, component: Component) -> int | None:
        return self._components.get(component)

    @property
    def year(self) -> int | None:
        return self._components.year

    @property
    def month(self) -> int | None:
        return self._components.month

    @property
    def day(self) -> int | None:
        return self._components.day

    @property
    def hour(self) -> int | None:
        return self._components.hour

    @property
    def minute(self) -> int | None:
        return self._components.minute

    @property
    def second(self) -> int | None:
        return self._components.second

    @property
    def millisecond(self) -> int | None:
        return self._components.millisecond

    @property
    def instant(self) -> Instant | None:
        """Absolute instant denoted by the fields, or ``None`` when unresolvable."""

        return self._context.calendar.resolve_instant(self._components, self._context.timezone)

    @property
    def weekday(self) -> int | None:
        """1 = Sunday ... 7 = Saturday."""

        instant = self.instant
        if instant is None:
            return None
        return self._context.calendar.weekday(instant, self._context.timezone)

    @property
    def is_leap_month(self) -> bool | None:
        return self._context.calendar.is_leap_month(self._components)

    def format(self, pattern: str, *, formatter: FormatService = DEFAULT_FORMATTER) -> str:
        """Render with a named or custom pattern; ``""`` when there is no instant."""

        instant = self.instant
        if instant is None:
            return ""
        return capitalize_first(formatter.format(instant, pattern))

    def change(self, component: Component, by: int, *, increase: bool = True) -> PartialDate:
        """Shift one tracked field and cascade the result into the other tracked fields.

        Changing an absent field is a no-op. When the shifted set cannot be
        resolved, only the raw shifted value is kept.
        """

        current = self._components.get(component)
        if current is None:
            return self

        value = current + by if increase else current - by
        shifted = self._components.with_value(component, value)
        calendar, timezone = self._context.calendar, self._context.timezone
        instant = calendar.resolve_instant(shifted, timezone)
        if instant is None:
            log.debug("Cannot resolve %s after changing %s; keeping raw value", shifted, component)
            return self._restore(shifted, self._context)

        refreshed = shifted
        for tracked in shifted.present:
            refreshed = refreshed.with_value(
                tracked, calendar.extract_component(instant, tracked, timezone)
            )
        return self._restore(refreshed, self._context)

    def is_equal(self, component: Component, other: PartialDate) -> bool:
        return comparison.is_equal(component, self, other)

    def is_same_year(self, other: PartialDate) -> bool:
        return comparison.is_same_year(self, other)

    def is_same_month(self, other: PartialDate) -> bool:
        return comparison.is_same_month(self, other)

    def is_same_calendar_day(self, other: PartialDate) -> bool:
        return comparison.is_same_calendar_day(self, other)

    def is_same_instant(self, other: PartialDate) -> bool:
        return comparison.is_same_instant(self, other)

    def is_earlier(self, than: PartialDate) -> bool:
        return comparison.is_earlier(self, than)

    def is_later(self, than: PartialDate) -> bool:
        return comparison.is_later(self, than)

    earlier_of = staticmethod(comparison.earlier_of)
    later_of = staticmethod(comparison.later_of)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PartialDate):
            return NotImplemented
        return self._components == other._components and self._context == other._context

    def __hash__(self) -> int:
        return hash((self._components, self._context))

    def __repr__(self) -> str:
        present = self._components.as_dict().items()
        fields = ", ".join(f"{name}={value}" for name, value in present if value is not None)
        return f"PartialDate({fields})"


def convert(
    text: str,
    from_pattern: str,
    to_pattern: str,
    *,
    context: CalendarContext,
    formatter: FormatService = DEFAULT_FORMATTER,
) -> str | None:
    """Re-render ``text`` from one pattern into another; ``None`` if it does not parse."""

    value = PartialDate.from_string(text, from_pattern, context=context, formatter=formatter)
    if value is None:
        return None
    instant = value.instant
    if instant is None:
        return None
    return formatter.format(instant, to_pattern)


__all__ = ["PartialDate", "convert"]
