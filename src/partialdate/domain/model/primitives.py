"""Domain primitives: scalar aliases + small value objects.

Scalar aliases may be promoted to proper value objects later without changing imports.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import TYPE_CHECKING, TypeAlias, assert_never

from partialdate.domain.model.enums import Component

if TYPE_CHECKING:
    from datetime import tzinfo

    from partialdate.domain.ports.calendar import CalendarService

Instant: TypeAlias = datetime  # always timezone-aware
Pattern: TypeAlias = str  # LDML pattern; DateFormat members are accepted as-is


@dataclass(frozen=True, slots=True)
class ComponentValues:
    """A set of calendar fields, each independently present (int) or absent (None).

    No consistency is implied: ``day=31`` with ``month=4`` is representable here and
    is only repaired by validation.
    """

    year: int | None = None
    month: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    millisecond: int | None = None

    def get(self, component: Component) -> int | None:
        match component:
            case Component.YEAR:
                return self.year
            case Component.MONTH:
                return self.month
            case Component.DAY:
                return self.day
            case Component.HOUR:
                return self.hour
            case Component.MINUTE:
                return self.minute
            case Component.SECOND:
                return self.second
            case Component.MILLISECOND:
                return self.millisecond
            case _:
                assert_never(component)

    def with_value(self, component: Component, value: int | None) -> ComponentValues:
        return replace(self, **{component.value: value})

    @property
    def present(self) -> frozenset[Component]:
        return frozenset(c for c in Component if self.get(c) is not None)

    @property
    def is_empty(self) -> bool:
        return not self.present

    def as_dict(self) -> dict[str, int | None]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True, slots=True)
class CalendarContext:
    """Calendar system + timezone used to resolve components to instants.

    Immutable; one context may be shared by any number of values and threads.
    Both fields are required; configured defaults are applied by the caller.
    """

    timezone: tzinfo
    calendar: CalendarService

    @property
    def identifier(self) -> str:
        return self.calendar.identifier
