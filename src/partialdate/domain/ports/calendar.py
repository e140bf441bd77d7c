"""Ports for the calendar and formatting collaborators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime, tzinfo

    from partialdate.domain.model.enums import Component
    from partialdate.domain.model.primitives import ComponentValues, Instant


class Clock(Protocol):
    def __call__(self) -> datetime: ...


@runtime_checkable
class CalendarService(Protocol):
    """Resolves component sets to instants and reads fields back out of them."""

    @property
    def identifier(self) -> str: ...

    def is_valid(self, components: ComponentValues, timezone: tzinfo) -> bool:
        """Strict check: the present fields denote a real point in calendar time."""
        ...

    def resolve_instant(self, components: ComponentValues, timezone: tzinfo) -> Instant | None:
        """Lenient resolution; out-of-range fields are normalised by carrying."""
        ...

    def extract_component(self, instant: Instant, component: Component, timezone: tzinfo) -> int:
        ...

    def weekday(self, instant: Instant, timezone: tzinfo) -> int:
        ...

    def is_leap_month(self, components: ComponentValues) -> bool | None:
        ...

    def now(self, timezone: tzinfo, clock: Clock | None = None) -> ComponentValues:
        ...


@runtime_checkable
class FormatService(Protocol):
    """Stateless pattern-based rendering and parsing."""

    def format(self, instant: Instant, pattern: str) -> str:
        ...

    def parse(self, text: str, pattern: str) -> ComponentValues | None:
        ...


__all__ = ["CalendarService", "Clock", "FormatService"]
