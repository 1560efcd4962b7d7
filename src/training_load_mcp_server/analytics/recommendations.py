"""Daily training recommendations keyed by recovery level."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any

from training_load_mcp_server.analytics.recovery import (
    BLUE,
    GREEN,
    GREY,
    ORANGE,
    RED,
    RecoveryLevel,
)


class TrainingIntensity(str, Enum):
    """Suggested training intensity for a day."""

    HARD = "hard"
    MODERATE = "moderate"
    EASY = "easy"
    REST = "rest"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Recommendation:
    """Text, intensity and display color for one recommendation."""

    text: str
    intensity: TrainingIntensity
    color: str


RECOVERY_RECOMMENDATIONS: dict[RecoveryLevel, Recommendation] = {
    RecoveryLevel.EXCELLENT: Recommendation(
        "💪 Perfect day for hard training or long run", TrainingIntensity.HARD, GREEN
    ),
    RecoveryLevel.GOOD: Recommendation(
        "✓ Good for moderate training", TrainingIntensity.MODERATE, BLUE
    ),
    RecoveryLevel.FAIR: Recommendation(
        "⚡ Easy run or cross-training recommended", TrainingIntensity.EASY, ORANGE
    ),
    RecoveryLevel.POOR: Recommendation(
        "🛑 Rest day recommended", TrainingIntensity.REST, RED
    ),
}

NO_DATA = Recommendation("No data available", TrainingIntensity.UNKNOWN, GREY)
NO_RECOVERY_DATA = Recommendation("No recovery data available", TrainingIntensity.UNKNOWN, GREY)
MONITOR_RECOVERY = Recommendation("Monitor your recovery", TrainingIntensity.UNKNOWN, GREY)


def recommendation_for_level(level: RecoveryLevel) -> Recommendation:
    """Look up the recommendation for a recovery level."""
    return RECOVERY_RECOMMENDATIONS.get(level, MONITOR_RECOVERY)


@dataclass(frozen=True)
class DailyRecommendation:
    """Recommendation for one calendar day.

    The score and input fields are only populated when a record exists for
    the day.
    """

    date: date
    recommendation: str
    training_intensity: TrainingIntensity
    color: str
    has_record: bool = False
    recovery_score: int | float | None = None
    sleep_score: int | float | None = None
    readiness_score: int | float | None = None
    distance: float | None = None

    @classmethod
    def from_entry(cls, on_date: date, entry: Recommendation, **fields: Any) -> "DailyRecommendation":
        """Build a daily recommendation from a table entry."""
        return cls(
            date=on_date,
            recommendation=entry.text,
            training_intensity=entry.intensity,
            color=entry.color,
            **fields,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert recommendation to dictionary."""
        result: dict[str, Any] = {
            "date": self.date.isoformat(),
            "recommendation": self.recommendation,
            "trainingIntensity": self.training_intensity.value,
            "color": self.color,
        }
        if self.has_record:
            result.update(
                {
                    "recoveryScore": self.recovery_score,
                    "sleepScore": self.sleep_score,
                    "readinessScore": self.readiness_score,
                    "distance": self.distance,
                }
            )
        return result
