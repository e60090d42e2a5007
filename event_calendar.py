#!/usr/bin/env python3
"""Event calendar report.

Loads events from a CSV file, prints the calendar along with a few
summaries, cancels the events of one weekday in the chosen months and
optionally exports what is left as an iCalendar (.ics) file.
"""

import argparse
import sys
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from agenda import EventCalendar, EventLoader, Month, Weekday
from agenda.logging_config import setup_logging
from transformer import ICalTransformer


def parse_months(months_str: str) -> list[Month]:
    """Parse a comma-separated list of month names."""
    try:
        return [Month.from_name(name) for name in months_str.split(",") if name.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_weekday(day_str: str) -> Weekday:
    """Parse a weekday number, 1 (Monday) through 7 (Sunday)."""
    try:
        return Weekday.from_index(int(day_str))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid weekday: '{day_str}'. Expected a number from 1 (Monday) to 7 (Sunday)."
        )


def parse_timezone(timezone: str) -> str:
    """Check that an IANA timezone name is known."""
    try:
        ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError):
        raise argparse.ArgumentTypeError(f"Unknown timezone: '{timezone}'")
    return timezone


def format_months(months: list[Month]) -> str:
    return "[" + ", ".join(str(month) for month in months) + "]"


def print_report(
    calendar: EventCalendar,
    months: list[Month],
    cancel_months: list[Month],
    cancel_day: Weekday,
) -> None:
    """Print the calendar summaries and cancel the requested events."""
    print(calendar)
    print()

    for month in months:
        print(f"Events in {month} = {calendar.total_events_in_month(month)}")
    print(f"Month(s) with most events {format_months(calendar.months_with_most_events())}")

    print()
    print(f"Longest event: {calendar.longest_event()}")

    print()
    print(f"Cancel {cancel_day} events in {format_months(cancel_months)}")
    cancelled = calendar.cancel_events(cancel_months, cancel_day)
    print(f"Cancelled {cancelled} events")
    print()
    print("After cancelling events ...")
    print(calendar)


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the calendar report."""
    parser = argparse.ArgumentParser(
        description="Summarize a CSV file of events grouped by month.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 event_calendar.py events.csv
  python3 event_calendar.py events.csv --cancel-months MARCH,APRIL --cancel-day 1 -o remaining.ics
        """
    )

    parser.add_argument(
        "input",
        help="CSV file with name,date,start,duration columns"
    )

    parser.add_argument(
        "--months",
        type=parse_months,
        default=[Month.FEBRUARY, Month.MARCH],
        help="Comma-separated months to count events in (default: FEBRUARY,MARCH)"
    )

    parser.add_argument(
        "--cancel-months",
        type=parse_months,
        default=[Month.FEBRUARY, Month.MARCH, Month.MAY, Month.JUNE],
        help="Comma-separated months to cancel events from "
             "(default: FEBRUARY,MARCH,MAY,JUNE)"
    )

    parser.add_argument(
        "--cancel-day",
        type=parse_weekday,
        default=Weekday.SATURDAY,
        help="Weekday of the events to cancel, 1 (Monday) to 7 (Sunday) (default: 6)"
    )

    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Export the remaining events to this iCalendar file"
    )

    parser.add_argument(
        "--timezone",
        type=parse_timezone,
        default="UTC",
        help="Timezone of the event times in the export (default: UTC)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    # Ensure output file has .ics extension
    output_path = args.output
    if output_path and not output_path.lower().endswith(".ics"):
        output_path = f"{output_path}.ics"

    try:
        calendar = EventLoader().load(args.input)

        if not len(calendar):
            print("Warning: No events found.", file=sys.stderr)

        print_report(calendar, args.months, args.cancel_months, args.cancel_day)

        if output_path:
            transformer = ICalTransformer(timezone=args.timezone)
            transformer.transform(calendar)
            transformer.save(output_path)
            print(f"Calendar saved to: {output_path}")

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)
    except OSError as e:
        print(f"Error: {e.strerror}: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
