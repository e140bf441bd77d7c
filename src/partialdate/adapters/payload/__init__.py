"""Public interface for the JSON payload adapter."""

from __future__ import annotations

from .schema import ComponentsPayload, PartialDatePayload
from .translator import from_payload, to_payload

__all__ = [
    "ComponentsPayload",
    "PartialDatePayload",
    "from_payload",
    "to_payload",
]
