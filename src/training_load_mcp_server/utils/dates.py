"""Date helpers shared by the analyzer and the tools."""

from datetime import date, datetime, timedelta
from typing import Iterator


def parse_date(value: date | datetime | str) -> date:
    """Coerce a date, datetime or ISO-8601 string into a date.

    Datetime strings (``2026-02-21T07:30:00``) are truncated to their date part.

    Raises:
        ValueError: If the value cannot be interpreted as a calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return datetime.strptime(value.strip().split("T")[0], "%Y-%m-%d").date()
    raise ValueError(f"Unsupported date value: {value!r}")


def days_ago(today: date, days: int) -> date:
    """Return the date ``days`` before ``today``."""
    return today - timedelta(days=days)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end, both inclusive.

    Yields nothing when start is after end.
    """
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
