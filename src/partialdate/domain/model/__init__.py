"""Public domain model surface."""

from __future__ import annotations

from partialdate.domain.model.enums import VALIDATION_ORDER, Component, DateFormat
from partialdate.domain.model.partial_date import PartialDate, convert
from partialdate.domain.model.primitives import (
    CalendarContext,
    ComponentValues,
    Instant,
    Pattern,
)

__all__ = [  # noqa: RUF022
    # enums
    "Component",
    "DateFormat",
    "VALIDATION_ORDER",
    # primitives
    "CalendarContext",
    "ComponentValues",
    "Instant",
    "Pattern",
    # value
    "PartialDate",
    "convert",
]
