"""
Unit tests for ACWR calculation and risk classification.
"""

import os
import pathlib
import sys
from datetime import date, timedelta

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))
os.environ.setdefault("TRAINING_LOAD_TODAY", "2026-02-21")

from training_load_mcp_server.analytics.workload import (  # pylint: disable=wrong-import-position
    NO_RATIO_RECOMMENDATION,
    RiskLevel,
    calculate_acwr,
    get_acwr_recommendation,
    get_risk_level,
)
from training_load_mcp_server.utils.records import DailyRecord  # pylint: disable=wrong-import-position

TODAY = date(2026, 2, 21)


def _record(days_back: int, distance: float | None) -> DailyRecord:
    return DailyRecord(date=TODAY - timedelta(days=days_back), distance=distance)


def test_acwr_requires_seven_records():
    """Test ACWR is unavailable with fewer than 7 records."""
    records = [_record(i, 5.0) for i in range(6)]
    assert calculate_acwr(records, TODAY) is None


def test_acwr_with_empty_records():
    """Test ACWR is unavailable without records."""
    assert calculate_acwr([], TODAY) is None


def test_acwr_divides_by_fixed_window_length():
    """Test sparse records are averaged over 7 and 28 days, not record count."""
    records = [
        _record(0, 5.0),
        _record(3, 5.0),
        # Older runs only count towards the chronic window
        _record(20, 4.0),
        _record(18, 4.0),
        _record(16, 4.0),
        _record(14, 4.0),
        _record(12, 4.0),
    ]

    result = calculate_acwr(records, TODAY)

    assert result is not None
    assert result.acute_load == pytest.approx(10.0)
    assert result.chronic_load == pytest.approx(30.0)
    assert result.acute_avg == pytest.approx(10.0 / 7)
    assert result.chronic_avg == pytest.approx(30.0 / 28)
    # (10 / 7) / (30 / 28) = 4 / 3
    assert result.ratio == pytest.approx(4 / 3)
    assert result.risk_level is RiskLevel.MODERATE


def test_acwr_window_boundaries_are_inclusive():
    """Test records exactly 7 and 28 days back are inside their windows."""
    records = [
        _record(7, 7.0),  # Acute and chronic
        _record(28, 7.0),  # Chronic only
        _record(29, 100.0),  # Outside both windows
        _record(1, 0.0),
        _record(2, 0.0),
        _record(3, None),
        _record(4, None),
    ]

    result = calculate_acwr(records, TODAY)

    assert result is not None
    assert result.acute_load == pytest.approx(7.0)
    assert result.chronic_load == pytest.approx(14.0)
    # acute 7/7 = 1.0, chronic 14/28 = 0.5
    assert result.ratio == pytest.approx(2.0)
    assert result.risk_level is RiskLevel.HIGH
    assert result.recommendation.startswith("⚠️ High injury risk!")


def test_acwr_steady_training_is_optimal():
    """Test a steady 28-day block lands in the optimal band."""
    records = [_record(i, 3.0) for i in range(28)]

    result = calculate_acwr(records, TODAY)

    assert result is not None
    assert result.risk_level is RiskLevel.OPTIMAL
    assert 0.8 <= result.ratio <= 1.3


def test_acwr_ignores_future_records():
    """Test records after today are excluded from both windows."""
    records = [_record(i, 3.0) for i in range(28)]
    records.append(DailyRecord(date=TODAY + timedelta(days=1), distance=500.0))

    result = calculate_acwr(records, TODAY)

    assert result is not None
    assert result.chronic_load == pytest.approx(84.0)


def test_acwr_empty_chronic_window():
    """Test ACWR is unavailable when every record is older than 28 days."""
    records = [_record(30 + i, 5.0) for i in range(10)]
    assert calculate_acwr(records, TODAY) is None


def test_acwr_zero_chronic_average():
    """Test ACWR is unavailable when the chronic window has no distance."""
    records = [_record(i, 0.0) for i in range(7)] + [_record(8, None)]
    assert calculate_acwr(records, TODAY) is None


def test_acwr_record_order_does_not_matter():
    """Test shuffled records give the same ratio."""
    records = [_record(i, float(i % 4)) for i in range(20)]
    forward = calculate_acwr(records, TODAY)
    backward = calculate_acwr(list(reversed(records)), TODAY)

    assert forward is not None and backward is not None
    assert forward.ratio == pytest.approx(backward.ratio)


@pytest.mark.parametrize(
    "ratio, expected",
    [
        (0.0, RiskLevel.LOW),
        (0.79, RiskLevel.LOW),
        (0.8, RiskLevel.OPTIMAL),
        (1.0, RiskLevel.OPTIMAL),
        (1.3, RiskLevel.OPTIMAL),
        (1.31, RiskLevel.MODERATE),
        (1.49, RiskLevel.MODERATE),
        (1.5, RiskLevel.HIGH),
        (2.4, RiskLevel.HIGH),
        (None, RiskLevel.UNKNOWN),
    ],
)
def test_risk_level_bands(ratio, expected):
    """Test risk level thresholds including the 0.8, 1.3 and 1.5 boundaries."""
    assert get_risk_level(ratio) is expected


def test_acwr_recommendation_text():
    """Test recommendation text follows the risk level."""
    assert get_acwr_recommendation(None) == NO_RATIO_RECOMMENDATION
    assert "lower than usual" in get_acwr_recommendation(0.5)
    assert "optimal range" in get_acwr_recommendation(1.0)
    assert "elevated" in get_acwr_recommendation(1.4)
    assert "High injury risk" in get_acwr_recommendation(1.5)


def test_acwr_result_to_dict():
    """Test ACWR result serialises with dashboard keys."""
    records = [_record(i, 3.0) for i in range(28)]
    result = calculate_acwr(records, TODAY)

    assert result is not None
    data = result.to_dict()
    assert set(data) == {
        "ratio",
        "acuteLoad",
        "chronicLoad",
        "acuteAvg",
        "chronicAvg",
        "riskLevel",
        "recommendation",
    }
    assert data["riskLevel"] == "optimal"


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
