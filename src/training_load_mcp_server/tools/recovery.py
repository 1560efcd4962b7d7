"""Recovery and readiness tools."""

from training_load_mcp_server.analytics.analyzer import WorkloadAnalyzer
from training_load_mcp_server.utils.formatting import format_recovery, format_run_day_status

# Import mcp instance from shared module for tool registration
from training_load_mcp_server.mcp_instance import mcp  # noqa: F401

analyzer = WorkloadAnalyzer()


@mcp.tool()
async def get_recovery_score(
    sleep_score: int | None = None,
    readiness_score: int | None = None,
) -> str:
    """Get a 0-100 recovery score from sleep and readiness scores.

    When both scores are present the recovery score is
    readiness × 0.6 + sleep × 0.4, rounded. Otherwise the available score is
    used as-is.

    Recovery levels:
    - ≥ 85: Excellent
    - 70-84: Good
    - 50-69: Fair
    - < 50: Poor

    Args:
        sleep_score: Sleep score 0-100 (optional)
        readiness_score: Readiness score 0-100 (optional)
    """
    result = analyzer.calculate_recovery_score(sleep_score, readiness_score)
    if result is None:
        return "No recovery data available: provide a sleep or readiness score."

    level = analyzer.get_recovery_level(result.score)
    return f"{format_recovery(result)}\n  Level: {level.value}"


@mcp.tool()
async def get_run_day_status(
    sleep_score: int | None = None,
    readiness_score: int | None = None,
) -> str:
    """Check whether sleep and readiness support a quality training day.

    - Optimal: sleep ≥ 85 and readiness ≥ 80
    - Not optimal: sleep < 70 or readiness < 65
    - Otherwise moderate: light to moderate training okay

    Args:
        sleep_score: Sleep score 0-100 (optional)
        readiness_score: Readiness score 0-100 (optional)
    """
    status = analyzer.is_optimal_run_day(sleep_score, readiness_score)
    return format_run_day_status(status)
