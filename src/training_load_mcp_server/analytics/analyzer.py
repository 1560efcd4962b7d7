"""Training load and recovery analyzer.

Combines the workload and recovery metrics into the views a dashboard shows:
the ACWR card, daily recommendations, the recommendation calendar and the
overall summary. Every call recomputes from the records it is given; the
only ambient input is the clock that supplies "today".
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Sequence

from training_load_mcp_server.analytics import workload
from training_load_mcp_server.analytics.recommendations import (
    NO_DATA,
    NO_RECOVERY_DATA,
    DailyRecommendation,
    recommendation_for_level,
)
from training_load_mcp_server.analytics.recovery import (
    RecoveryLevel,
    RecoveryResult,
    RunDayStatus,
    calculate_recovery_score,
    get_recovery_level,
    is_optimal_run_day,
    round_half_up,
)
from training_load_mcp_server.analytics.thresholds import AVG_RECOVERY_RECORDS
from training_load_mcp_server.analytics.workload import ACWRResult, RiskLevel
from training_load_mcp_server.config import get_config
from training_load_mcp_server.utils.dates import iter_days, parse_date
from training_load_mcp_server.utils.records import DailyRecord, find_record

logger = logging.getLogger(__name__)

Clock = Callable[[], date]


@dataclass(frozen=True)
class FullAnalysis:
    """Summary of load and recovery for the dashboard."""

    acwr: ACWRResult | None
    today_recovery: RecoveryResult | None
    today_recommendation: DailyRecommendation | None
    avg_recovery: int | None
    avg_recovery_level: RecoveryLevel

    def to_dict(self) -> dict[str, Any]:
        """Convert analysis to dictionary."""
        return {
            "acwr": self.acwr.to_dict() if self.acwr else None,
            "todayRecovery": self.today_recovery.to_dict() if self.today_recovery else None,
            "todayRecommendation": (
                self.today_recommendation.to_dict() if self.today_recommendation else None
            ),
            "avgRecovery": self.avg_recovery,
            "avgRecoveryLevel": self.avg_recovery_level.value,
        }


def _default_clock() -> date:
    return get_config().today()


class WorkloadAnalyzer:
    """Derives ACWR, recovery scores and recommendations from daily records."""

    def __init__(self, clock: Clock | None = None):
        """Initialize analyzer.

        Args:
            clock: Callable returning "today" (default: configured clock)
        """
        self._clock = clock or _default_clock

    def today(self) -> date:
        """Return the analyzer's current date."""
        return self._clock()

    def resolve_today(self, today: date | str | None) -> date:
        """Parse an explicit date, falling back to the clock."""
        return parse_date(today) if today is not None else self.today()

    def calculate_acwr(
        self,
        records: Sequence[DailyRecord],
        today: date | str | None = None,
    ) -> ACWRResult | None:
        """Calculate the ACWR with both windows ending today.

        Args:
            records: Daily records
            today: Override for the analyzer clock

        Returns:
            ACWRResult, or None when there is not enough data
        """
        today_date = self.resolve_today(today)
        result = workload.calculate_acwr(records, today_date)
        if result is None:
            logger.debug(
                "ACWR unavailable for %s (%d records supplied)",
                today_date,
                len(records) if records is not None else 0,
            )
        return result

    @staticmethod
    def get_risk_level(ratio: float | None) -> RiskLevel:
        """Classify an ACWR value."""
        return workload.get_risk_level(ratio)

    @staticmethod
    def get_acwr_recommendation(ratio: float | None) -> str:
        """Recommendation text for an ACWR value."""
        return workload.get_acwr_recommendation(ratio)

    @staticmethod
    def calculate_recovery_score(
        sleep_score: int | float | None,
        readiness_score: int | float | None,
    ) -> RecoveryResult | None:
        """Blend sleep and readiness into a recovery score."""
        return calculate_recovery_score(sleep_score, readiness_score)

    @staticmethod
    def get_recovery_level(score: float | None) -> RecoveryLevel:
        """Classify a recovery score."""
        return get_recovery_level(score)

    @staticmethod
    def is_optimal_run_day(
        sleep_score: int | float | None,
        readiness_score: int | float | None,
    ) -> RunDayStatus:
        """Check whether the scores support quality training."""
        return is_optimal_run_day(sleep_score, readiness_score)

    def get_daily_recommendation(
        self,
        records: Sequence[DailyRecord],
        on_date: date | str,
    ) -> DailyRecommendation:
        """Recommendation for a single day.

        Args:
            records: Daily records
            on_date: Day to recommend for

        Returns:
            DailyRecommendation; a "No data available" entry when no record
            exists for the day
        """
        day = parse_date(on_date)
        record = find_record(records, day)

        if record is None:
            return DailyRecommendation.from_entry(day, NO_DATA)

        recovery = calculate_recovery_score(record.sleep_score, record.readiness_score)

        if recovery is None or recovery.score is None:
            entry = NO_RECOVERY_DATA
        else:
            entry = recommendation_for_level(get_recovery_level(recovery.score))

        return DailyRecommendation.from_entry(
            day,
            entry,
            has_record=True,
            recovery_score=recovery.score if recovery else None,
            sleep_score=record.sleep_score,
            readiness_score=record.readiness_score,
            distance=record.distance,
        )

    def generate_calendar_recommendations(
        self,
        records: Sequence[DailyRecord],
        start_date: date | str,
        end_date: date | str,
    ) -> list[DailyRecommendation]:
        """One recommendation per day from start_date to end_date inclusive.

        Returns an empty list when start_date is after end_date.
        """
        return [
            self.get_daily_recommendation(records, day)
            for day in iter_days(parse_date(start_date), parse_date(end_date))
        ]

    def get_average_recovery(self, records: Sequence[DailyRecord]) -> float | None:
        """Mean recovery score of the last 7 records by position.

        Records without a computable score are skipped.
        """
        scores = [
            result.score
            for result in (
                calculate_recovery_score(record.sleep_score, record.readiness_score)
                for record in records[-AVG_RECOVERY_RECORDS:]
            )
            if result is not None and result.score is not None
        ]
        if not scores:
            return None
        return sum(scores) / len(scores)

    def get_full_analysis(
        self,
        records: Sequence[DailyRecord] | None,
        today: date | str | None = None,
    ) -> FullAnalysis | None:
        """Bundle ACWR, today's recovery and the recent recovery average.

        Args:
            records: Daily records in chronological order
            today: Override for the analyzer clock

        Returns:
            FullAnalysis, or None for empty input
        """
        if not records:
            logger.debug("No records supplied; analysis unavailable")
            return None

        today_date = self.resolve_today(today)
        acwr = self.calculate_acwr(records, today_date)

        today_recovery = None
        today_recommendation = None
        today_record = find_record(records, today_date)
        if today_record is not None:
            today_recovery = calculate_recovery_score(
                today_record.sleep_score, today_record.readiness_score
            )
            today_recommendation = self.get_daily_recommendation(records, today_date)

        avg_recovery = self.get_average_recovery(records)

        return FullAnalysis(
            acwr=acwr,
            today_recovery=today_recovery,
            today_recommendation=today_recommendation,
            avg_recovery=round_half_up(avg_recovery) if avg_recovery else None,
            avg_recovery_level=(
                get_recovery_level(avg_recovery) if avg_recovery else RecoveryLevel.UNKNOWN
            ),
        )
