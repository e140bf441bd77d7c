"""Application configuration helpers."""

from __future__ import annotations

from .calendar import (
    CALENDAR_ENV_VAR,
    DEFAULT_TIMEZONE,
    TIMEZONE_ENV_VAR,
    CalendarConfig,
    get_calendar_config,
    serialize_timezone,
)
from .env import optional_env_var
from .errors import ConfigurationError

__all__ = [
    "CALENDAR_ENV_VAR",
    "DEFAULT_TIMEZONE",
    "TIMEZONE_ENV_VAR",
    "CalendarConfig",
    "ConfigurationError",
    "get_calendar_config",
    "optional_env_var",
    "serialize_timezone",
]
