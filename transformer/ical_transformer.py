"""iCalendar transformer for calendar events."""

import hashlib
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from icalendar import Calendar, Event

from agenda.calendar import EventCalendar
from agenda.logging_config import get_logger
from agenda.models import Event as CalendarEvent
from .base import BaseTransformer

logger = get_logger(__name__)


class ICalTransformer(BaseTransformer):
    """Transformer that converts calendar events to iCalendar format."""

    UID_DOMAIN = "event-calendar"

    def __init__(self, timezone: str = "UTC") -> None:
        """Initialize the iCalendar transformer.

        Args:
            timezone: IANA name of the zone event times are given in.

        Raises:
            ValueError: If the timezone is unknown.
        """
        self._calendar: Optional[Calendar] = None
        try:
            self._timezone = ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone: '{timezone}'") from None

    def _generate_uid(self, event: CalendarEvent, index: int) -> str:
        """Generate a unique identifier for an event.

        Args:
            event: The calendar event.
            index: Position of the event in the export, to tell apart
                otherwise identical events.

        Returns:
            Unique identifier string.
        """
        unique_string = (
            f"{event.name}-{event.start.isoformat()}-{event.duration}-{index}"
        )
        return hashlib.md5(unique_string.encode()).hexdigest() + f"@{self.UID_DOMAIN}"

    def transform(self, calendar: EventCalendar) -> Calendar:
        """Transform calendar events into iCalendar format.

        Args:
            calendar: Calendar whose events are exported.

        Returns:
            iCalendar Calendar object.
        """
        self._calendar = Calendar()
        self._calendar.add("prodid", "-//Event Calendar//event-calendar//EN")
        self._calendar.add("version", "2.0")
        self._calendar.add("calscale", "GREGORIAN")
        self._calendar.add("method", "PUBLISH")
        self._calendar.add("x-wr-calname", "Events")
        self._calendar.add("x-wr-timezone", self._timezone.key)

        dtstamp = datetime.now(self._timezone)
        for index, calendar_event in enumerate(calendar):
            ical_event = Event()
            ical_event.add("uid", self._generate_uid(calendar_event, index))
            ical_event.add("dtstart", calendar_event.start.replace(tzinfo=self._timezone))
            ical_event.add("dtend", calendar_event.end.replace(tzinfo=self._timezone))
            ical_event.add("dtstamp", dtstamp)
            ical_event.add("summary", calendar_event.name)
            self._calendar.add_component(ical_event)

        logger.debug("calendar_transformed", events=len(calendar))
        return self._calendar

    def save(self, output_path: str) -> None:
        """Save the calendar to an .ics file.

        Args:
            output_path: Path to the output file.

        Raises:
            RuntimeError: If transform() hasn't been called yet.
        """
        if self._calendar is None:
            raise RuntimeError("No calendar data. Call transform() first.")

        with open(output_path, "wb") as f:
            f.write(self._calendar.to_ical())
        logger.info("calendar_exported", path=output_path)
