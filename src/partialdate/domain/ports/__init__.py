"""Domain port definitions for collaborators."""

from __future__ import annotations

from .calendar import CalendarService, Clock, FormatService

__all__ = [
    "CalendarService",
    "Clock",
    "FormatService",
]
