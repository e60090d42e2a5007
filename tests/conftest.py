"""Shared test fixtures."""

from __future__ import annotations

import datetime as dt
from typing import Callable

import pytest

from agenda import Event, EventCalendar


@pytest.fixture
def make_event() -> Callable[..., Event]:
    """Factory for events with sensible defaults.

    2026-03-02 is a Monday.
    """

    def _make(
        name: str = "Event",
        day: dt.date = dt.date(2026, 3, 2),
        start: str = "09:00",
        duration: int = 60,
    ) -> Event:
        hour, minute = (int(part) for part in start.split(":"))
        return Event(name=name, date=day, start_time=dt.time(hour, minute), duration=duration)

    return _make


@pytest.fixture
def calendar() -> EventCalendar:
    """Return an empty calendar."""
    return EventCalendar()
