"""Data models for calendar events."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import IntEnum


class Month(IntEnum):
    """Calendar month, ordered January to December."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def from_date(cls, day: date) -> "Month":
        return cls(day.month)

    @classmethod
    def from_name(cls, name: str) -> "Month":
        """Look up a month by name, ignoring case and surrounding spaces.

        Raises:
            ValueError: If the name is not a month.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown month: '{name}'") from None

    def __str__(self) -> str:
        return self.name


class Weekday(IntEnum):
    """Day of the week, 1 (Monday) through 7 (Sunday)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def from_date(cls, day: date) -> "Weekday":
        return cls(day.isoweekday())

    @classmethod
    def from_index(cls, index: int) -> "Weekday":
        """Convert a 1-7 day number into a Weekday.

        Raises:
            ValueError: If the number is outside 1-7.
        """
        if isinstance(index, bool) or not 1 <= index <= 7:
            raise ValueError(f"Weekday must be 1-7 (Mon-Sun), got {index}")
        return cls(index)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Event:
    """A single non-repeating event on a given day."""

    name: str
    date: date
    start_time: time
    duration: int  # minutes

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Event name cannot be empty")
        if not isinstance(self.duration, int) or isinstance(self.duration, bool):
            raise ValueError(f"Duration must be a whole number of minutes, got {self.duration!r}")
        if self.duration <= 0:
            raise ValueError(f"Duration must be positive, got {self.duration}")

    @property
    def month(self) -> Month:
        return Month.from_date(self.date)

    @property
    def weekday(self) -> Weekday:
        return Weekday.from_date(self.date)

    @property
    def start(self) -> datetime:
        return datetime.combine(self.date, self.start_time)

    @property
    def end(self) -> datetime:
        return self.start + timedelta(minutes=self.duration)

    def comes_before(self, other: "Event") -> bool:
        """Return True if this event starts strictly earlier than ``other``."""
        return self.start < other.start

    def __str__(self) -> str:
        return (
            f"{self.name} {self.date:%d/%m/%Y} {self.weekday} "
            f"{self.start_time:%H:%M} ({self.duration} min)"
        )
