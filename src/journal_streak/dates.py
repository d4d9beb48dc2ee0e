"""Day-granularity date helpers for journal-streak."""

from __future__ import annotations

from datetime import date, datetime
from typing import Sequence


class DateOrderError(ValueError):
    """Raised in strict mode when entry dates are unsorted or duplicated."""

    def __init__(self, previous: date, current: date) -> None:
        self.previous = previous
        self.current = current
        problem = "duplicate" if previous == current else "out of order"
        super().__init__(
            f"Entry dates must be strictly ascending: {current.isoformat()} "
            f"follows {previous.isoformat()} ({problem})"
        )


def normalize_date(value: date | datetime | str) -> date:
    """Strip time-of-day from a date-like value.

    Accepts date, datetime, or an ISO string ("2024-01-05" or
    "2024-01-05T21:30:00").
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    if len(text) == 10:
        return date.fromisoformat(text)
    return datetime.fromisoformat(text).date()


def validate_dates(dates: Sequence[date]) -> None:
    """Raise DateOrderError unless dates are strictly ascending."""
    for i in range(1, len(dates)):
        if dates[i] <= dates[i - 1]:
            raise DateOrderError(dates[i - 1], dates[i])
