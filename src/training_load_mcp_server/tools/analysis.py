"""Full training load and recovery analysis tool."""

from typing import Any

from training_load_mcp_server.analytics.analyzer import WorkloadAnalyzer
from training_load_mcp_server.utils.formatting import format_analysis_as_json
from training_load_mcp_server.utils.validation import resolve_records, validate_date

# Import mcp instance from shared module for tool registration
from training_load_mcp_server.mcp_instance import mcp  # noqa: F401

analyzer = WorkloadAnalyzer()


@mcp.tool()
async def get_training_load_analysis(
    records: list[dict[str, Any]],
    today: str | None = None,
) -> str:
    """Get a combined training load and recovery analysis.

    Returns JSON with:
    - acwr: Acute:Chronic Workload Ratio, window loads and risk level
    - todayRecovery: today's recovery score (if today has a record)
    - todayRecommendation: today's training recommendation
    - avgRecovery: mean recovery score of the last 7 records
    - avgRecoveryLevel: recovery level of that mean

    Args:
        records: Daily records in chronological order
        today: Analysis date (YYYY-MM-DD, default: today)

    Returns:
        JSON string with the analysis
    """
    parsed, error_msg = resolve_records(records)
    if error_msg:
        return error_msg

    try:
        today_date = analyzer.resolve_today(validate_date(today) if today else None)
    except ValueError as e:
        return f"Error: {e}"

    analysis = analyzer.get_full_analysis(parsed, today_date)
    if analysis is None:
        return "No daily records supplied; analysis unavailable."

    return format_analysis_as_json(analysis, today_date)
