"""Application entry points that supply configured calendar defaults."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from partialdate.config import get_calendar_config
from partialdate.domain.model import PartialDate, convert

if TYPE_CHECKING:
    from partialdate.config import CalendarConfig
    from partialdate.domain.model import CalendarContext, Component
    from partialdate.domain.ports import Clock

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ComparisonSummary:
    """Outcome of comparing two parsed dates; ``None`` fields mean "did not parse"."""

    first: PartialDate | None
    second: PartialDate | None
    is_earlier: bool
    is_later: bool
    is_same_instant: bool
    is_same_calendar_day: bool
    earlier: PartialDate | None


def default_context(*, config: CalendarConfig | None = None) -> CalendarContext:
    """Calendar context built from configuration (``PARTIALDATE_TIMEZONE`` etc.)."""

    return (config or get_calendar_config()).context()


def parse_date(
    text: str,
    pattern: str,
    *,
    context: CalendarContext | None = None,
) -> PartialDate | None:
    value = PartialDate.from_string(text, pattern, context=context or default_context())
    if value is None:
        log.debug("Text %r does not match pattern %r", text, pattern)
    return value


def current_date(
    *,
    context: CalendarContext | None = None,
    clock: Clock | None = None,
) -> PartialDate:
    return PartialDate.now(context=context or default_context(), clock=clock)


def shift_date(  # noqa: PLR0913
    text: str,
    pattern: str,
    component: Component,
    by: int,
    *,
    increase: bool = True,
    output_pattern: str | None = None,
    context: CalendarContext | None = None,
) -> str | None:
    """Parse ``text``, shift one field and render the result."""

    value = parse_date(text, pattern, context=context)
    if value is None:
        return None
    if component not in value.tracked:
        log.info("Pattern %r does not carry %s; value left unchanged", pattern, component)
    shifted = value.change(component, by, increase=increase)
    return shifted.format(output_pattern or pattern)


def convert_date(
    text: str,
    from_pattern: str,
    to_pattern: str,
    *,
    context: CalendarContext | None = None,
) -> str | None:
    return convert(text, from_pattern, to_pattern, context=context or default_context())


def compare_dates(
    first_text: str,
    second_text: str,
    pattern: str,
    *,
    context: CalendarContext | None = None,
) -> ComparisonSummary:
    effective_context = context or default_context()
    first = parse_date(first_text, pattern, context=effective_context)
    second = parse_date(second_text, pattern, context=effective_context)
    if first is None or second is None:
        return ComparisonSummary(
            first=first,
            second=second,
            is_earlier=False,
            is_later=False,
            is_same_instant=False,
            is_same_calendar_day=False,
            earlier=None,
        )
    return ComparisonSummary(
        first=first,
        second=second,
        is_earlier=first.is_earlier(second),
        is_later=first.is_later(second),
        is_same_instant=first.is_same_instant(second),
        is_same_calendar_day=first.is_same_calendar_day(second),
        earlier=PartialDate.earlier_of(first, second),
    )
