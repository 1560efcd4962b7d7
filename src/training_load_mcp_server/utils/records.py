"""Daily record type and parsing from plain dictionaries."""

import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Sequence

from training_load_mcp_server.utils.dates import parse_date

# Wire keys used by the dashboard, followed by accepted aliases
_DATE_KEYS = ("date", "id")
_DISTANCE_KEYS = ("distance",)
_SLEEP_KEYS = ("sleepScore", "sleep_score")
_READINESS_KEYS = ("readinessScore", "readiness_score")

MAX_SCORE = 100


@dataclass(frozen=True)
class DailyRecord:
    """One calendar day of training and recovery inputs."""

    date: date
    distance: float | None = None
    sleep_score: int | float | None = None
    readiness_score: int | float | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DailyRecord":
        """Build a record from a dashboard dictionary.

        Args:
            data: Dictionary with a ``date`` (or ``id``) key and optional
                ``distance``, ``sleepScore`` and ``readinessScore`` keys

        Returns:
            Parsed DailyRecord

        Raises:
            ValueError: If the date is missing or malformed, or a numeric field
                is not a finite non-negative number, or a score is above 100
        """
        raw_date = _first_present(data, _DATE_KEYS)
        if raw_date is None:
            raise ValueError(f"Record has no date: {data!r}")

        return cls(
            date=parse_date(raw_date),
            distance=_coerce_number(_first_present(data, _DISTANCE_KEYS), "distance"),
            sleep_score=_coerce_number(
                _first_present(data, _SLEEP_KEYS), "sleepScore", maximum=MAX_SCORE
            ),
            readiness_score=_coerce_number(
                _first_present(data, _READINESS_KEYS), "readinessScore", maximum=MAX_SCORE
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert record to dashboard dictionary."""
        return {
            "date": self.date.isoformat(),
            "distance": self.distance,
            "sleepScore": self.sleep_score,
            "readinessScore": self.readiness_score,
        }


def _first_present(data: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _coerce_number(
    value: Any, field: str, maximum: int | None = None
) -> int | float | None:
    """Convert a numeric field, keeping whole numbers as int."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        number = value
    else:
        try:
            number = float(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"{field} must be a number, got {value!r}") from e
        if number.is_integer():
            number = int(number)
    if not math.isfinite(number):
        raise ValueError(f"{field} must be a finite number, got {value!r}")
    if number < 0:
        raise ValueError(f"{field} must not be negative, got {value!r}")
    if maximum is not None and number > maximum:
        raise ValueError(f"{field} must be at most {maximum}, got {value!r}")
    return number


def parse_records(data: Iterable[dict[str, Any] | DailyRecord]) -> list[DailyRecord]:
    """Parse a sequence of dictionaries into records, preserving order.

    Already-parsed DailyRecord values pass through unchanged.
    """
    return [
        item if isinstance(item, DailyRecord) else DailyRecord.from_dict(item)
        for item in data
    ]


def find_record(records: Sequence[DailyRecord], on_date: date) -> DailyRecord | None:
    """Return the first record for a date, or None."""
    return next((record for record in records if record.date == on_date), None)
