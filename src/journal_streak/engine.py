"""Streak engine: composes the finders into a StreakResult.

Every function takes the entry dates and reference day explicitly and keeps
no state between calls. Dates must be ascending and duplicate-free; pass
strict=True to have that checked.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Sequence

from journal_streak.dates import normalize_date, validate_dates
from journal_streak.status import NO_ENTRIES_MESSAGE, generate_status_message
from journal_streak.streaks import (
    CurrentStreak,
    LongestStreak,
    find_current_streak,
    find_longest_streak,
    find_missed_days,
    round_one_decimal,
    streak_statistics,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StreakResult:
    current_streak: int = 0
    current_streak_start_date: date | None = None
    is_streak_active: bool = False
    longest_streak: int = 0
    longest_streak_start_date: date | None = None
    longest_streak_end_date: date | None = None
    total_days_with_entries: int = 0
    missed_days: int = 0
    missed_days_list: tuple[date, ...] = field(default_factory=tuple)
    most_recent_entry_date: date | None = None
    oldest_entry_date: date | None = None
    total_days_span: int = 0
    completion_percentage: float = 0.0
    total_streaks: int = 0
    average_streak_length: float = 0.0
    days_until_streak_lost: int = 0
    status_message: str = NO_ENTRIES_MESSAGE

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dict with dates as ISO strings."""

        def iso(d: date | None) -> str | None:
            return d.isoformat() if d else None

        return {
            "current_streak": self.current_streak,
            "current_streak_start_date": iso(self.current_streak_start_date),
            "is_streak_active": self.is_streak_active,
            "longest_streak": self.longest_streak,
            "longest_streak_start_date": iso(self.longest_streak_start_date),
            "longest_streak_end_date": iso(self.longest_streak_end_date),
            "total_days_with_entries": self.total_days_with_entries,
            "missed_days": self.missed_days,
            "missed_days_list": [d.isoformat() for d in self.missed_days_list],
            "most_recent_entry_date": iso(self.most_recent_entry_date),
            "oldest_entry_date": iso(self.oldest_entry_date),
            "total_days_span": self.total_days_span,
            "completion_percentage": self.completion_percentage,
            "total_streaks": self.total_streaks,
            "average_streak_length": self.average_streak_length,
            "days_until_streak_lost": self.days_until_streak_lost,
            "status_message": self.status_message,
        }


def calculate_streak(
    dates: Sequence[date], today: date, *, strict: bool = False
) -> StreakResult:
    """Calculate all streak statistics for the given entry dates."""
    if strict:
        validate_dates(dates)

    if not dates:
        return StreakResult()

    oldest = dates[0]
    most_recent = dates[-1]
    total_days = len(dates)
    span = (most_recent - oldest).days + 1

    current = find_current_streak(dates, today)
    longest = find_longest_streak(dates)
    missed = find_missed_days(dates)
    total_streaks, average_length = streak_statistics(dates)

    completion = round_one_decimal(total_days / span * 100) if span > 0 else 0.0

    message = generate_status_message(
        total_days_with_entries=total_days,
        is_streak_active=current.is_active,
        current_streak=current.length,
        longest_streak=longest.length,
        most_recent_entry_date=most_recent,
        today=today,
    )

    logger.debug(
        "streak for %s: current=%d longest=%d entries=%d missed=%d",
        today.isoformat(), current.length, longest.length, total_days, len(missed),
    )

    return StreakResult(
        current_streak=current.length,
        current_streak_start_date=current.start_date,
        is_streak_active=current.is_active,
        longest_streak=longest.length,
        longest_streak_start_date=longest.start_date,
        longest_streak_end_date=longest.end_date,
        total_days_with_entries=total_days,
        missed_days=len(missed),
        missed_days_list=tuple(missed),
        most_recent_entry_date=most_recent,
        oldest_entry_date=oldest,
        total_days_span=span,
        completion_percentage=completion,
        total_streaks=total_streaks,
        average_streak_length=average_length,
        days_until_streak_lost=1 if current.is_active else 0,
        status_message=message,
    )


def current_streak_only(dates: Sequence[date], today: date) -> CurrentStreak:
    return find_current_streak(dates, today)


def longest_streak_only(dates: Sequence[date]) -> LongestStreak:
    return find_longest_streak(dates)


def missed_days_only(dates: Sequence[date]) -> list[date]:
    return find_missed_days(dates)


def has_entry(dates: Sequence[date], day: date | datetime | str) -> bool:
    """Check whether the given day has an entry."""
    return normalize_date(day) in set(dates)


def entry_dates_in_range(
    dates: Sequence[date],
    start: date | datetime | str,
    end: date | datetime | str,
) -> list[date]:
    """Return the entry dates within [start, end], ascending."""
    start_day = normalize_date(start)
    end_day = normalize_date(end)
    return [d for d in dates if start_day <= d <= end_day]


def completion_percentage(
    dates: Sequence[date],
    start: date | datetime | str,
    end: date | datetime | str,
) -> float:
    """Percentage of days in [start, end] that have an entry.

    Returns 0.0 when end is before start.
    """
    start_day = normalize_date(start)
    end_day = normalize_date(end)
    total_days = (end_day - start_day).days + 1
    if total_days <= 0:
        return 0.0
    in_range = len(entry_dates_in_range(dates, start_day, end_day))
    return round_one_decimal(in_range / total_days * 100)
