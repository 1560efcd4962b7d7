"""Daily recommendation and calendar tools."""

from typing import Any

from training_load_mcp_server.analytics.analyzer import WorkloadAnalyzer
from training_load_mcp_server.utils.formatting import (
    format_calendar,
    format_daily_recommendation,
)
from training_load_mcp_server.utils.validation import (
    resolve_date_params,
    resolve_records,
    validate_date,
)

# Import mcp instance from shared module for tool registration
from training_load_mcp_server.mcp_instance import mcp  # noqa: F401

analyzer = WorkloadAnalyzer()


@mcp.tool()
async def get_daily_recommendation(
    records: list[dict[str, Any]],
    date: str | None = None,
) -> str:
    """Get the training recommendation for one day.

    The recommendation comes from that day's recovery score:
    - Excellent: hard training or long run
    - Good: moderate training
    - Fair: easy run or cross-training
    - Poor: rest day

    Args:
        records: Daily records with date, sleepScore and readinessScore
        date: Day to recommend for (YYYY-MM-DD, default: today)
    """
    parsed, error_msg = resolve_records(records)
    if error_msg:
        return error_msg

    try:
        day = analyzer.resolve_today(validate_date(date) if date else None)
    except ValueError as e:
        return f"Error: {e}"

    return format_daily_recommendation(analyzer.get_daily_recommendation(parsed, day))


@mcp.tool()
async def get_calendar_recommendations(
    records: list[dict[str, Any]],
    start_date: str | None = None,
    end_date: str | None = None,
) -> str:
    """Get one training recommendation per day for a date range.

    Days without a record are listed as "No data available".

    Args:
        records: Daily records with date, sleepScore and readinessScore
        start_date: First day (YYYY-MM-DD, default: 13 days before end_date)
        end_date: Last day (YYYY-MM-DD, default: today)
    """
    parsed, error_msg = resolve_records(records)
    if error_msg:
        return error_msg

    try:
        start_date, end_date = resolve_date_params(start_date, end_date, today=analyzer.today())
    except ValueError as e:
        return f"Error: {e}"

    calendar = analyzer.generate_calendar_recommendations(parsed, start_date, end_date)
    return format_calendar(calendar)
