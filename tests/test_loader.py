"""Tests for the CSV event loader."""

from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest

from agenda import EventCalendar, EventLoader, Month


def write_csv(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "events.csv"
    path.write_text(body, encoding="utf-8")
    return path


class TestParseRow:
    """Tests for single-row parsing."""

    def test_valid_row(self) -> None:
        """A complete row becomes an Event."""
        event = EventLoader().parse_row(
            {"name": " Dentist ", "date": "2026-04-14", "start": "16:30", "duration": "45"}
        )
        assert event.name == "Dentist"
        assert event.date == dt.date(2026, 4, 14)
        assert event.start_time == dt.time(16, 30)
        assert event.duration == 45
        assert event.month is Month.APRIL

    @pytest.mark.parametrize(
        "field, value, message",
        [
            ("date", "14/04/2026", "Invalid date"),
            ("start", "4pm", "Invalid start time"),
            ("duration", "long", "Invalid duration"),
            ("duration", "0", "Duration must be positive"),
            ("name", "", "Missing value for name"),
        ],
    )
    def test_invalid_row(self, field: str, value: str, message: str) -> None:
        """Malformed cells raise ValueError."""
        row = {"name": "Dentist", "date": "2026-04-14", "start": "16:30", "duration": "45"}
        row[field] = value
        with pytest.raises(ValueError, match=message):
            EventLoader().parse_row(row)


class TestLoad:
    """Tests for loading whole files."""

    def test_load_unsorted_file(self, tmp_path: Path) -> None:
        """Rows in any order end up sorted by month and start."""
        path = write_csv(
            tmp_path,
            "name,date,start,duration\n"
            "# comment line\n"
            "Review,2026-03-02,09:00,30\n"
            "\n"
            "Kickoff,2026-01-12,10:00,60\n"
            "Breakfast,2026-03-02,08:00,20\n"
            "Retro,2026-03-02,10:00,50\n",
        )
        calendar = EventLoader().load(path)

        assert len(calendar) == 4
        assert calendar.months() == [Month.JANUARY, Month.MARCH]
        names = [e.name for e in calendar.events_in_month(Month.MARCH)]
        assert names == ["Breakfast", "Review", "Retro"]

    def test_load_into_existing_calendar(self, tmp_path: Path, make_event) -> None:
        """Loaded events are added to the calendar that was passed in."""
        calendar = EventCalendar()
        calendar.add_event(make_event(name="existing"))
        path = write_csv(tmp_path, "name,date,start,duration\nNew,2026-03-02,07:00,10\n")

        result = EventLoader().load(path, calendar)

        assert result is calendar
        assert [e.name for e in calendar] == ["New", "existing"]

    def test_utf8_bom(self, tmp_path: Path) -> None:
        """Files saved with a UTF-8 byte order mark load normally."""
        path = tmp_path / "events.csv"
        path.write_text(
            "name,date,start,duration\nCaf\u00e9,2026-03-02,09:00,60\n", encoding="utf-8-sig"
        )
        calendar = EventLoader().load(path)
        assert [e.name for e in calendar] == ["Caf\u00e9"]

    def test_header_only(self, tmp_path: Path) -> None:
        """A file with only a header gives an empty calendar."""
        calendar = EventLoader().load(write_csv(tmp_path, "name,date,start,duration\n"))
        assert len(calendar) == 0

    def test_bad_header(self, tmp_path: Path) -> None:
        """Missing columns are reported."""
        path = write_csv(tmp_path, "title,date\nReview,2026-03-02\n")
        with pytest.raises(ValueError, match="header must contain"):
            EventLoader().load(path)

    def test_bad_row_reports_row_number(self, tmp_path: Path) -> None:
        """Errors name the failing data row."""
        path = write_csv(
            tmp_path,
            "name,date,start,duration\n"
            "Review,2026-03-02,09:00,30\n"
            "Broken,2026-03-02,09:00,-5\n",
        )
        with pytest.raises(ValueError, match="row 2: Duration must be positive"):
            EventLoader().load(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file propagates FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            EventLoader().load(tmp_path / "nope.csv")
