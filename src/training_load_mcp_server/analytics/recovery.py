"""Recovery and readiness metrics."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from training_load_mcp_server.analytics.thresholds import (
    LOW_READINESS_THRESHOLD,
    LOW_SLEEP_THRESHOLD,
    OPTIMAL_READINESS_MIN,
    OPTIMAL_SLEEP_MIN,
    READINESS_WEIGHT,
    RECOVERY_EXCELLENT_MIN,
    RECOVERY_FAIR_MIN,
    RECOVERY_GOOD_MIN,
    SLEEP_WEIGHT,
)

# Dashboard palette
GREEN = "#27ae60"
BLUE = "#3498db"
ORANGE = "#f39c12"
RED = "#e74c3c"
GREY = "#95a5a6"


class RecoverySource(str, Enum):
    """Which inputs a recovery score was derived from."""

    SLEEP = "sleep"
    READINESS = "readiness"
    COMBINED = "combined"


class RecoveryLevel(str, Enum):
    """Recovery classification of a 0-100 score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    UNKNOWN = "unknown"


# Checked in order; first lower bound the score reaches wins
RECOVERY_LEVEL_BANDS: tuple[tuple[float, RecoveryLevel], ...] = (
    (RECOVERY_EXCELLENT_MIN, RecoveryLevel.EXCELLENT),
    (RECOVERY_GOOD_MIN, RecoveryLevel.GOOD),
    (RECOVERY_FAIR_MIN, RecoveryLevel.FAIR),
)


@dataclass(frozen=True)
class RecoveryResult:
    """Recovery score and the inputs it came from."""

    score: int | float
    source: RecoverySource
    sleep_score: int | float | None = None
    readiness_score: int | float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary."""
        result: dict[str, Any] = {"score": self.score, "source": self.source.value}
        if self.source is RecoverySource.COMBINED:
            result["sleepScore"] = self.sleep_score
            result["readinessScore"] = self.readiness_score
        return result


@dataclass(frozen=True)
class RunDayStatus:
    """Whether a day suits quality training (None = moderate/undetermined)."""

    optimal: bool | None
    reason: str
    color: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert status to dictionary."""
        result: dict[str, Any] = {"optimal": self.optimal, "reason": self.reason}
        if self.color is not None:
            result["color"] = self.color
        return result


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return math.floor(value + 0.5)


def calculate_recovery_score(
    sleep_score: int | float | None,
    readiness_score: int | float | None,
) -> RecoveryResult | None:
    """Calculate a 0-100 recovery score from sleep and readiness.

    Score = readiness * 0.6 + sleep * 0.4 when both are present, otherwise
    whichever one is present. A score of 0 counts as not recorded.

    Args:
        sleep_score: Sleep score (0-100)
        readiness_score: Readiness score (0-100)

    Returns:
        RecoveryResult, or None if neither score is available
    """
    if not sleep_score and not readiness_score:
        return None

    if not sleep_score:
        return RecoveryResult(score=readiness_score, source=RecoverySource.READINESS)
    if not readiness_score:
        return RecoveryResult(score=sleep_score, source=RecoverySource.SLEEP)

    score = readiness_score * READINESS_WEIGHT + sleep_score * SLEEP_WEIGHT

    return RecoveryResult(
        score=round_half_up(score),
        source=RecoverySource.COMBINED,
        sleep_score=sleep_score,
        readiness_score=readiness_score,
    )


def get_recovery_level(score: float | None) -> RecoveryLevel:
    """Classify a recovery score.

    Bands:
      >= 85   = excellent
      70-84   = good
      50-69   = fair
      < 50    = poor

    Args:
        score: Recovery score, or None

    Returns:
        Recovery level (UNKNOWN for a missing score)
    """
    if score is None:
        return RecoveryLevel.UNKNOWN
    for lower_bound, level in RECOVERY_LEVEL_BANDS:
        if score >= lower_bound:
            return level
    return RecoveryLevel.POOR


def is_optimal_run_day(
    sleep_score: int | float | None,
    readiness_score: int | float | None,
) -> RunDayStatus:
    """Decide whether today suits quality training.

    The optimal check runs first; the low-recovery check only applies when
    the optimal check did not match.

    Args:
        sleep_score: Sleep score (0-100)
        readiness_score: Readiness score (0-100)

    Returns:
        RunDayStatus with optimal True, False or None (moderate)
    """
    if not sleep_score and not readiness_score:
        return RunDayStatus(optimal=None, reason="No recovery data available")

    has_sleep = bool(sleep_score) and sleep_score >= OPTIMAL_SLEEP_MIN
    has_readiness = bool(readiness_score) and readiness_score >= OPTIMAL_READINESS_MIN

    if has_sleep and has_readiness:
        return RunDayStatus(
            optimal=True,
            reason="Excellent recovery! Great day for quality training.",
            color=GREEN,
        )

    low_sleep = bool(sleep_score) and sleep_score < LOW_SLEEP_THRESHOLD
    low_readiness = bool(readiness_score) and readiness_score < LOW_READINESS_THRESHOLD

    if low_sleep or low_readiness:
        return RunDayStatus(
            optimal=False,
            reason="Low recovery. Consider rest or easy effort.",
            color=RED,
        )

    return RunDayStatus(
        optimal=None,
        reason="Moderate recovery. Light to moderate training okay.",
        color=ORANGE,
    )
