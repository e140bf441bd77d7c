"""Translate between partial dates and their JSON payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from partialdate.config import CalendarConfig, serialize_timezone
from partialdate.domain.model import ComponentValues, PartialDate

from .schema import ComponentsPayload, PartialDatePayload

if TYPE_CHECKING:
    from partialdate.domain.model import CalendarContext


def to_payload(value: PartialDate) -> PartialDatePayload:
    return PartialDatePayload(
        components=ComponentsPayload(**value.components.as_dict()),
        timezone=serialize_timezone(value.context.timezone),
        calendar=value.context.identifier,
        instant=value.instant,
        weekday=value.weekday,
    )


def from_payload(
    payload: PartialDatePayload | Mapping[str, object],
    *,
    context: CalendarContext | None = None,
) -> PartialDate:
    """Rebuild a partial date; the components are validated like any other input.

    Without an explicit ``context`` the payload's timezone and calendar are used,
    which raises ``ConfigurationError`` when either is unknown.
    """

    model = (
        payload
        if isinstance(payload, PartialDatePayload)
        else PartialDatePayload.model_validate(payload)
    )
    effective_context = context or CalendarConfig(
        timezone_name=model.timezone,
        calendar_name=model.calendar,
    ).context()
    components = ComponentValues(**model.components.model_dump())
    return PartialDate.from_components(components, context=effective_context)
