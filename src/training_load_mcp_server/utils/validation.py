"""Validation helpers for MCP tool arguments."""

import logging
from datetime import date, timedelta
from typing import Any

from training_load_mcp_server.utils.dates import parse_date
from training_load_mcp_server.utils.records import DailyRecord, parse_records

logger = logging.getLogger(__name__)


def validate_date(date_str: str) -> str:
    """Validate a YYYY-MM-DD date string.

    Raises:
        ValueError: If the string is not a valid date
    """
    try:
        parse_date(date_str)
    except (TypeError, ValueError) as e:
        raise ValueError("Invalid date format. Please use YYYY-MM-DD.") from e
    return date_str


def resolve_date_params(
    start_date: str | None,
    end_date: str | None,
    today: date,
    default_start_days_ago: int = 13,
) -> tuple[str, str]:
    """Fill in missing start/end dates.

    End defaults to today; start defaults to ``default_start_days_ago`` days
    before the end date.

    Returns:
        Tuple of (start_date, end_date) as YYYY-MM-DD strings

    Raises:
        ValueError: If a supplied date is malformed
    """
    end = parse_date(validate_date(end_date)) if end_date else today
    if start_date:
        start = parse_date(validate_date(start_date))
    else:
        start = end - timedelta(days=default_start_days_ago)
    return start.isoformat(), end.isoformat()


def resolve_records(
    records: list[dict[str, Any]] | None,
) -> tuple[list[DailyRecord], str | None]:
    """Parse tool input into daily records.

    Returns:
        Tuple of (records, error_message). error_message is None if successful.
    """
    if records is None:
        return [], None
    if not isinstance(records, list):
        return [], "Error parsing records: expected a list of daily records"
    try:
        return parse_records(records), None
    except (TypeError, ValueError, AttributeError) as e:
        logger.warning("Rejected daily records: %s", e)
        return [], f"Error parsing records: {e}"
