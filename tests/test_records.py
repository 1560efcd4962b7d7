"""
Unit tests for daily record parsing and date helpers.
"""

import os
import pathlib
import sys
from datetime import date, datetime

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))
os.environ.setdefault("TRAINING_LOAD_TODAY", "2026-02-21")

from training_load_mcp_server.utils.dates import iter_days, parse_date  # pylint: disable=wrong-import-position
from training_load_mcp_server.utils.records import (  # pylint: disable=wrong-import-position
    DailyRecord,
    find_record,
    parse_records,
)


def test_from_dict_dashboard_keys():
    """Test parsing camelCase dashboard keys."""
    record = DailyRecord.from_dict(
        {"date": "2026-02-21", "distance": 6.2, "sleepScore": 82, "readinessScore": 77}
    )

    assert record.date == date(2026, 2, 21)
    assert record.distance == 6.2
    assert record.sleep_score == 82
    assert record.readiness_score == 77


def test_from_dict_aliases():
    """Test snake_case keys and an 'id' date are accepted."""
    record = DailyRecord.from_dict({"id": "2026-02-20", "sleep_score": 70, "readiness_score": 65})

    assert record.date == date(2026, 2, 20)
    assert record.distance is None
    assert record.sleep_score == 70
    assert record.readiness_score == 65


def test_from_dict_numeric_strings():
    """Test numeric strings are converted."""
    record = DailyRecord.from_dict({"date": "2026-02-21", "distance": "5.5", "sleepScore": "80"})

    assert record.distance == 5.5
    assert record.sleep_score == 80
    assert isinstance(record.sleep_score, int)


def test_from_dict_datetime_string():
    """Test a datetime string is truncated to its date."""
    record = DailyRecord.from_dict({"date": "2026-02-21T07:30:00"})
    assert record.date == date(2026, 2, 21)


def test_from_dict_missing_date():
    """Test a record without a date is rejected."""
    with pytest.raises(ValueError, match="no date"):
        DailyRecord.from_dict({"distance": 3.0})


def test_from_dict_invalid_date():
    """Test a malformed date is rejected."""
    with pytest.raises(ValueError):
        DailyRecord.from_dict({"date": "21/02/2026"})


def test_from_dict_negative_distance():
    """Test negative distance is rejected."""
    with pytest.raises(ValueError, match="negative"):
        DailyRecord.from_dict({"date": "2026-02-21", "distance": -1})


def test_from_dict_non_numeric_score():
    """Test a non-numeric score is rejected."""
    with pytest.raises(ValueError, match="sleepScore"):
        DailyRecord.from_dict({"date": "2026-02-21", "sleepScore": "great"})


def test_from_dict_score_above_hundred():
    """Test scores outside the 0-100 scale are rejected."""
    with pytest.raises(ValueError, match="sleepScore must be at most 100"):
        DailyRecord.from_dict({"date": "2026-02-21", "sleepScore": 250})
    with pytest.raises(ValueError, match="readinessScore must be at most 100"):
        DailyRecord.from_dict({"date": "2026-02-21", "readinessScore": "100.5"})

    record = DailyRecord.from_dict({"date": "2026-02-21", "sleepScore": 100})
    assert record.sleep_score == 100


def test_from_dict_distance_has_no_upper_bound():
    """Test long distances are kept."""
    record = DailyRecord.from_dict({"date": "2026-02-21", "distance": 250})
    assert record.distance == 250


@pytest.mark.parametrize(
    "field,value",
    [
        ("readinessScore", "nan"),
        ("sleepScore", "inf"),
        ("sleepScore", float("nan")),
        ("distance", "nan"),
        ("distance", "inf"),
        ("distance", float("inf")),
        ("distance", "-inf"),
    ],
)
def test_from_dict_non_finite_values(field, value):
    """Test NaN and infinity are rejected for every numeric field."""
    with pytest.raises(ValueError, match=f"{field} must be a finite number"):
        DailyRecord.from_dict({"date": "2026-02-21", field: value})


def test_to_dict_uses_dashboard_keys():
    """Test records serialise back to dashboard keys."""
    record = DailyRecord(date=date(2026, 2, 21), distance=4.0, sleep_score=88)

    assert record.to_dict() == {
        "date": "2026-02-21",
        "distance": 4.0,
        "sleepScore": 88,
        "readinessScore": None,
    }


def test_parse_records_preserves_order_and_passes_records_through():
    """Test parse_records keeps order and accepts parsed records."""
    existing = DailyRecord(date=date(2026, 2, 19))
    records = parse_records([{"date": "2026-02-21"}, existing, {"date": "2026-02-20"}])

    assert [r.date.day for r in records] == [21, 19, 20]
    assert records[1] is existing


def test_find_record_returns_first_match():
    """Test duplicate dates resolve to the first record."""
    records = [
        DailyRecord(date=date(2026, 2, 21), distance=1.0),
        DailyRecord(date=date(2026, 2, 21), distance=2.0),
    ]

    assert find_record(records, date(2026, 2, 21)).distance == 1.0
    assert find_record(records, date(2026, 2, 20)) is None


def test_parse_date_variants():
    """Test dates, datetimes and strings all parse."""
    assert parse_date(date(2026, 2, 21)) == date(2026, 2, 21)
    assert parse_date(datetime(2026, 2, 21, 8, 0)) == date(2026, 2, 21)
    assert parse_date(" 2026-02-21 ") == date(2026, 2, 21)
    with pytest.raises(ValueError):
        parse_date(20260221)


def test_iter_days_inclusive():
    """Test day iteration includes both ends and handles reversed ranges."""
    days = list(iter_days(date(2026, 2, 27), date(2026, 3, 2)))

    assert days == [
        date(2026, 2, 27),
        date(2026, 2, 28),
        date(2026, 3, 1),
        date(2026, 3, 2),
    ]
    assert not list(iter_days(date(2026, 3, 2), date(2026, 3, 1)))


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
