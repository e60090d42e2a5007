"""CSV event loader."""

import csv
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .calendar import EventCalendar
from .logging_config import get_logger
from .models import Event

logger = get_logger(__name__)


class EventLoader:
    """Loads events from a CSV file into an EventCalendar.

    The file needs a header row with ``name``, ``date``, ``start`` and
    ``duration`` columns::

        name,date,start,duration
        Team meeting,2026-03-02,09:00,60

    Rows may come in any order. Blank lines and rows starting with ``#``
    are skipped.
    """

    COLUMNS = ("name", "date", "start", "duration")
    DATE_FORMAT = "%Y-%m-%d"
    TIME_FORMAT = "%H:%M"

    def __init__(self, encoding: str = "utf-8-sig") -> None:
        self._encoding = encoding

    def parse_row(self, row: dict[str, str]) -> Event:
        """Build an Event from one CSV row.

        Args:
            row: Mapping of column name to raw cell text.

        Returns:
            The parsed event.

        Raises:
            ValueError: If a cell is missing or malformed.
        """
        missing = [column for column in self.COLUMNS if not (row.get(column) or "").strip()]
        if missing:
            raise ValueError(f"Missing value for {', '.join(missing)}")

        try:
            day = datetime.strptime(row["date"].strip(), self.DATE_FORMAT).date()
        except ValueError:
            raise ValueError(f"Invalid date '{row['date']}', expected YYYY-MM-DD") from None
        try:
            start_time = datetime.strptime(row["start"].strip(), self.TIME_FORMAT).time()
        except ValueError:
            raise ValueError(f"Invalid start time '{row['start']}', expected HH:MM") from None
        try:
            duration = int(row["duration"].strip())
        except ValueError:
            raise ValueError(f"Invalid duration '{row['duration']}'") from None

        return Event(
            name=row["name"].strip(),
            date=day,
            start_time=start_time,
            duration=duration,
        )

    def load(
        self,
        path: Union[str, Path],
        calendar: Optional[EventCalendar] = None,
    ) -> EventCalendar:
        """Read every event in ``path`` and add it to ``calendar``.

        Args:
            path: CSV file to read.
            calendar: Calendar to fill. A new one is created when omitted.

        Returns:
            The populated calendar.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            ValueError: If the header or a row is malformed.
        """
        if calendar is None:
            calendar = EventCalendar()

        count = 0
        with open(path, "r", encoding=self._encoding, newline="") as f:
            reader = csv.DictReader(
                line for line in f if line.strip() and not line.lstrip().startswith("#")
            )
            header = reader.fieldnames or []
            if not set(self.COLUMNS) <= {column.strip() for column in header}:
                raise ValueError(
                    f"{path}: header must contain columns {', '.join(self.COLUMNS)}"
                )
            for number, row in enumerate(reader, start=1):
                row = {key.strip(): value for key, value in row.items() if key is not None}
                try:
                    event = self.parse_row(row)
                except ValueError as e:
                    raise ValueError(f"{path}, row {number}: {e}") from None
                calendar.add_event(event)
                count += 1

        logger.info("events_loaded", path=str(path), count=count)
        return calendar
