"""
Formatting utilities for Training Load MCP Server

This module renders analyzer results as readable text for the MCP tools.
"""

import json
from datetime import date
from typing import Any

from training_load_mcp_server.analytics.analyzer import FullAnalysis
from training_load_mcp_server.analytics.recommendations import DailyRecommendation
from training_load_mcp_server.analytics.recovery import RecoveryResult, RunDayStatus
from training_load_mcp_server.analytics.workload import ACWRResult


def format_date_with_day_of_week(date_value: date) -> str:
    """Format a date with its day of week (e.g., "Saturday, 2026-02-21")."""
    return f"{date_value.strftime('%A')}, {date_value.isoformat()}"


def _add_field(lines: list[str], label: str, value: Any, unit: str = "") -> None:
    """Add a field to lines only if value is not None/empty."""
    if value is not None and value != "":
        lines.append(f"{label}: {value}{unit}")


def format_acwr(result: ACWRResult, today: date) -> str:
    """Format an ACWR result."""
    lines = [f"Training Load (ACWR) as of {format_date_with_day_of_week(today)}:", ""]
    lines.append(f"  Acute load (7d): {result.acute_load:.1f} mi ({result.acute_avg:.2f} mi/day)")
    lines.append(f"  Chronic load (28d): {result.chronic_load:.1f} mi ({result.chronic_avg:.2f} mi/day)")
    lines.append(f"  ACWR: {result.ratio:.2f} - {result.risk_level.value}")
    lines.append("")
    lines.append(result.recommendation)
    return "\n".join(lines)


def format_recovery(result: RecoveryResult) -> str:
    """Format a recovery score."""
    lines = [f"Recovery Score: {result.score}/100 (source: {result.source.value})"]
    _add_field(lines, "  Sleep score", result.sleep_score)
    _add_field(lines, "  Readiness score", result.readiness_score)
    return "\n".join(lines)


def format_run_day_status(status: RunDayStatus) -> str:
    """Format an optimal run day check."""
    if status.optimal is True:
        verdict = "Optimal"
    elif status.optimal is False:
        verdict = "Not optimal"
    else:
        verdict = "Moderate"
    lines = [f"Run Day: {verdict}", f"  {status.reason}"]
    _add_field(lines, "  Color", status.color)
    return "\n".join(lines)


def format_daily_recommendation(recommendation: DailyRecommendation) -> str:
    """Format a single day's recommendation, showing only non-empty fields."""
    lines = [f"Date: {format_date_with_day_of_week(recommendation.date)}"]
    lines.append(f"  Recommendation: {recommendation.recommendation}")
    lines.append(f"  Intensity: {recommendation.training_intensity.value}")
    lines.append(f"  Color: {recommendation.color}")
    if recommendation.has_record:
        _add_field(lines, "  Recovery score", recommendation.recovery_score)
        _add_field(lines, "  Sleep score", recommendation.sleep_score)
        _add_field(lines, "  Readiness score", recommendation.readiness_score)
        _add_field(lines, "  Distance", recommendation.distance, " mi")
    return "\n".join(lines)


def format_calendar(recommendations: list[DailyRecommendation]) -> str:
    """Format a calendar of daily recommendations, one line per day."""
    if not recommendations:
        return "No days in the requested range."

    start = recommendations[0].date.isoformat()
    end = recommendations[-1].date.isoformat()
    lines = [f"Training Calendar ({start} to {end}):", ""]
    for day in recommendations:
        line = f"{day.date.isoformat()} [{day.training_intensity.value}] {day.recommendation}"
        if day.recovery_score is not None:
            line += f" (recovery {day.recovery_score})"
        lines.append(line)
    return "\n".join(lines)


def format_analysis_as_json(analysis: FullAnalysis, today: date) -> str:
    """Format a full analysis as JSON string.

    Args:
        analysis: Full analysis
        today: Date the analysis was computed for

    Returns:
        JSON string
    """
    payload = {"date": today.isoformat(), **analysis.to_dict()}
    return json.dumps(payload, indent=2, default=str, ensure_ascii=False)
