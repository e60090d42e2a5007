"""In-memory event calendar grouped by month."""

from .calendar import EventCalendar
from .loader import EventLoader
from .models import Event, Month, Weekday

__all__ = ["Event", "EventCalendar", "EventLoader", "Month", "Weekday"]
