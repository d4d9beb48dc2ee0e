"""Date-range helpers for completion and calendar views.

Pure functions: the reference day is always passed in by the caller.
"""

from __future__ import annotations

from calendar import monthrange
from datetime import MAXYEAR, MINYEAR, date, timedelta

PERIODS = ("week", "month", "year", "all-time")


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return (first_day, last_day) of a calendar month."""
    last = monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last)


def parse_month(value: str) -> tuple[int, int]:
    """Parse "YYYY-MM" into (year, month)."""
    year_str, month_str = value.strip().split("-")
    year, month = int(year_str), int(month_str)
    if not 1 <= month <= 12 or not MINYEAR <= year <= MAXYEAR:
        raise ValueError(f"Invalid month: {value}")
    return year, month


def get_period_dates(period: str, today: date, oldest: date | None = None) -> tuple[date, date]:
    """Return (start, end) for a named period ending on or around today.

    period: "week" | "month" | "year" | "all-time"
    "week" is the 7 days ending today. "all-time" starts at the oldest entry
    (or today when there are no entries).
    """
    if period == "week":
        return today - timedelta(days=6), today

    if period == "month":
        return month_bounds(today.year, today.month)

    if period == "year":
        return date(today.year, 1, 1), date(today.year, 12, 31)

    if period == "all-time":
        return (oldest or today), today

    raise ValueError(f"Unknown period: {period!r}. Must be one of: {', '.join(PERIODS)}")

