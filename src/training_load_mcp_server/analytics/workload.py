"""Acute:Chronic Workload Ratio metrics."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Sequence

from training_load_mcp_server.analytics.thresholds import (
    ACUTE_WINDOW_DAYS,
    ACWR_HIGH_RISK,
    ACWR_OPTIMAL_MAX,
    ACWR_OPTIMAL_MIN,
    CHRONIC_WINDOW_DAYS,
    MIN_RECORDS_FOR_ACWR,
)
from training_load_mcp_server.utils.dates import days_ago
from training_load_mcp_server.utils.records import DailyRecord


class RiskLevel(str, Enum):
    """Injury risk band for an ACWR value."""

    LOW = "low"
    OPTIMAL = "optimal"
    MODERATE = "moderate"
    HIGH = "high"
    UNKNOWN = "unknown"


ACWR_RECOMMENDATIONS: dict[RiskLevel, str] = {
    RiskLevel.LOW: "Your training load is lower than usual. Consider gradually increasing volume.",
    RiskLevel.OPTIMAL: "Your training load is in the optimal range. Great job managing your training!",
    RiskLevel.MODERATE: "Your training load is elevated. Monitor for fatigue and consider a lighter week.",
    RiskLevel.HIGH: "⚠️ High injury risk! Your training load has increased too quickly. Take an easy week.",
}

NO_RATIO_RECOMMENDATION = "Need more data to calculate training load ratio."
DEFAULT_ACWR_RECOMMENDATION = "Continue monitoring your training load."


@dataclass(frozen=True)
class ACWRResult:
    """Acute:Chronic Workload Ratio with its window totals."""

    ratio: float
    acute_load: float
    chronic_load: float
    acute_avg: float
    chronic_avg: float
    risk_level: RiskLevel
    recommendation: str

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary."""
        return {
            "ratio": self.ratio,
            "acuteLoad": self.acute_load,
            "chronicLoad": self.chronic_load,
            "acuteAvg": self.acute_avg,
            "chronicAvg": self.chronic_avg,
            "riskLevel": self.risk_level.value,
            "recommendation": self.recommendation,
        }


def get_risk_level(ratio: float | None) -> RiskLevel:
    """Classify an ACWR value.

    Bands:
      < 0.8      = low
      0.8 - 1.3  = optimal (inclusive)
      1.3 - 1.5  = moderate
      >= 1.5     = high

    Args:
        ratio: ACWR value, or None when it could not be computed

    Returns:
        Risk level (UNKNOWN for a missing ratio)
    """
    if ratio is None:
        return RiskLevel.UNKNOWN
    if ratio < ACWR_OPTIMAL_MIN:
        return RiskLevel.LOW
    if ACWR_OPTIMAL_MIN <= ratio <= ACWR_OPTIMAL_MAX:
        return RiskLevel.OPTIMAL
    if ACWR_OPTIMAL_MAX < ratio < ACWR_HIGH_RISK:
        return RiskLevel.MODERATE
    return RiskLevel.HIGH


def get_acwr_recommendation(ratio: float | None) -> str:
    """Get the recommendation text for an ACWR value."""
    if ratio is None:
        return NO_RATIO_RECOMMENDATION
    return ACWR_RECOMMENDATIONS.get(get_risk_level(ratio), DEFAULT_ACWR_RECOMMENDATION)


def window_records(
    records: Sequence[DailyRecord],
    today: date,
    window_days: int,
) -> list[DailyRecord]:
    """Select records dated within ``[today - window_days, today]``."""
    start = days_ago(today, window_days)
    return [record for record in records if start <= record.date <= today]


def total_distance(records: Sequence[DailyRecord]) -> float:
    """Sum distance over records, counting missing distance as zero."""
    return sum((record.distance or 0) for record in records)


def calculate_acwr(records: Sequence[DailyRecord], today: date) -> ACWRResult | None:
    """Calculate the Acute:Chronic Workload Ratio ending on ``today``.

    Acute = distance over the last 7 days / 7
    Chronic = distance over the last 28 days / 28

    Averages divide by the fixed window length, so days without a record
    count as zero-distance days.

    Args:
        records: Daily records, in any order
        today: Last day of both windows

    Returns:
        ACWRResult, or None when fewer than 7 records are supplied, the
        chronic window holds no records, or the chronic average is zero
    """
    if records is None or len(records) < MIN_RECORDS_FOR_ACWR:
        return None

    acute_records = window_records(records, today, ACUTE_WINDOW_DAYS)
    chronic_records = window_records(records, today, CHRONIC_WINDOW_DAYS)

    if not chronic_records:
        return None

    acute_load = total_distance(acute_records)
    chronic_load = total_distance(chronic_records)

    acute_avg = acute_load / ACUTE_WINDOW_DAYS
    chronic_avg = chronic_load / CHRONIC_WINDOW_DAYS

    if chronic_avg == 0:
        return None

    ratio = acute_avg / chronic_avg

    return ACWRResult(
        ratio=ratio,
        acute_load=acute_load,
        chronic_load=chronic_load,
        acute_avg=acute_avg,
        chronic_avg=chronic_avg,
        risk_level=get_risk_level(ratio),
        recommendation=get_acwr_recommendation(ratio),
    )
