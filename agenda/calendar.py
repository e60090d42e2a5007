"""Month-indexed event calendar."""

from typing import Iterable, Iterator, Union

from .logging_config import get_logger
from .models import Event, Month, Weekday

logger = get_logger(__name__)


class EventCalendar:
    """In-memory calendar of non-overlapping, non-repeating events.

    Events are grouped by month. Each month keeps its events sorted by
    start so the earliest event always comes first, and a month only has
    an entry while it holds at least one event. Months are visited in
    calendar order.

    Overlapping events are accepted as given; nothing here checks for them.
    """

    def __init__(self) -> None:
        self._events: dict[Month, list[Event]] = {}

    def _entries(self) -> list[tuple[Month, list[Event]]]:
        return sorted(self._events.items())

    def add_event(self, event: Event) -> None:
        """Insert an event into its month, keeping the month sorted.

        The event goes before the first stored event that starts strictly
        later, so events with the same start keep insertion order.

        Args:
            event: The event to add.
        """
        events = self._events.get(event.month)
        if events is None:
            self._events[event.month] = [event]
        else:
            events.insert(self._position(events, event), event)
        logger.debug("event_added", name=event.name, month=str(event.month))

    @staticmethod
    def _position(events: list[Event], new: Event) -> int:
        index = 0
        while index < len(events) and not new.comes_before(events[index]):
            index += 1
        return index

    def total_events_in_month(self, month: Month) -> int:
        """Return the number of events in ``month`` (0 if it has none)."""
        return len(self._events.get(month, ()))

    def months_with_most_events(self) -> list[Month]:
        """Return the months holding the most events, in calendar order.

        Empty for an empty calendar; several months when they tie.
        """
        months: list[Month] = []
        max_total = 0
        for month in sorted(self._events):
            total = self.total_events_in_month(month)
            if total > max_total:
                max_total = total
                months = [month]
            elif total == max_total:
                months.append(month)
        return months

    def longest_event(self) -> str:
        """Return the name of the longest event, or "" if there are none.

        On ties the first one found, in calendar order, wins.
        """
        name = ""
        max_duration = 0
        for event in self:
            if event.duration > max_duration:
                max_duration = event.duration
                name = event.name
        return name

    def cancel_events(self, months: Iterable[Month], weekday: Union[Weekday, int]) -> int:
        """Remove every event on ``weekday`` from each of ``months``.

        Months without events are skipped. A month left with no events is
        removed from the calendar.

        Args:
            months: Months to cancel from, in any order. Repeats are allowed.
            weekday: Day of the week, as a Weekday or its 1-7 number.

        Returns:
            Number of events removed.

        Raises:
            ValueError: If ``weekday`` is outside 1-7.
        """
        day = Weekday.from_index(weekday)
        removed = 0
        for month in months:
            events = self._events.get(month)
            if events is None:
                continue
            kept = [event for event in events if event.weekday != day]
            removed += len(events) - len(kept)
            if kept:
                self._events[month] = kept
            else:
                del self._events[month]
        logger.info("events_cancelled", weekday=str(day), removed=removed)
        return removed

    def events_in_month(self, month: Month) -> tuple[Event, ...]:
        return tuple(self._events.get(month, ()))

    def months(self) -> list[Month]:
        return sorted(self._events)

    def items(self) -> Iterator[tuple[Month, tuple[Event, ...]]]:
        for month, events in self._entries():
            yield month, tuple(events)

    def __iter__(self) -> Iterator[Event]:
        for _, events in self._entries():
            yield from events

    def __len__(self) -> int:
        return sum(len(events) for events in self._events.values())

    def __contains__(self, month: object) -> bool:
        return month in self._events

    def __str__(self) -> str:
        lines = []
        for month, events in self._entries():
            lines.append(f"{month}\n\n")
            for event in events:
                lines.append(f"{event}\n")
        return "".join(lines)
