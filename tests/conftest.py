from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone
from typing import TYPE_CHECKING

import pytest

from partialdate.domain.calendar import GregorianCalendar
from partialdate.domain.model import CalendarContext

if TYPE_CHECKING:
    from partialdate.domain.ports import Clock


@pytest.fixture
def context() -> CalendarContext:
    return CalendarContext(timezone=UTC, calendar=GregorianCalendar())


@pytest.fixture
def plus_three_context() -> CalendarContext:
    return CalendarContext(timezone=timezone(timedelta(hours=3)), calendar=GregorianCalendar())


@pytest.fixture
def fixed_clock() -> Clock:
    reference = datetime(2024, 5, 6, 7, 8, 9, 987654, tzinfo=UTC)

    def _clock() -> datetime:
        return reference

    return _clock
