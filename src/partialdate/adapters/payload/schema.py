"""Pydantic models describing the JSON payload of a partial date."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PayloadBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class ComponentsPayload(PayloadBaseModel):
    year: int | None = None
    month: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    millisecond: int | None = None


class PartialDatePayload(PayloadBaseModel):
    """Serialised partial date.

    ``instant`` and ``weekday`` are derived on output and ignored on input.
    """

    components: ComponentsPayload
    timezone: str
    calendar: str = "gregorian"
    instant: datetime | None = None
    weekday: int | None = Field(default=None, ge=1, le=7)
