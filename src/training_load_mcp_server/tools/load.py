"""Training load (ACWR) tools."""

from typing import Any

from training_load_mcp_server.analytics.analyzer import WorkloadAnalyzer
from training_load_mcp_server.utils.formatting import format_acwr
from training_load_mcp_server.utils.validation import resolve_records, validate_date

# Import mcp instance from shared module for tool registration
from training_load_mcp_server.mcp_instance import mcp  # noqa: F401

analyzer = WorkloadAnalyzer()


@mcp.tool()
async def get_acwr(
    records: list[dict[str, Any]],
    today: str | None = None,
) -> str:
    """Get the Acute:Chronic Workload Ratio from daily running distance.

    Acute load is the distance over the last 7 days divided by 7; chronic
    load is the distance over the last 28 days divided by 28. Days without a
    record count as rest days.

    Risk bands:
    - < 0.8: Low (under-training)
    - 0.8-1.3: Optimal
    - 1.3-1.5: Moderate (elevated)
    - ≥ 1.5: High injury risk

    Args:
        records: Daily records with date (YYYY-MM-DD) and distance (miles)
        today: Last day of both windows (YYYY-MM-DD, default: today)
    """
    parsed, error_msg = resolve_records(records)
    if error_msg:
        return error_msg

    try:
        today_date = analyzer.resolve_today(validate_date(today) if today else None)
    except ValueError as e:
        return f"Error: {e}"

    result = analyzer.calculate_acwr(parsed, today_date)
    if result is None:
        return (
            "ACWR unavailable: need at least 7 daily records with distance "
            "in the last 28 days."
        )

    return format_acwr(result, today_date)
