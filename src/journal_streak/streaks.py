"""Streak finders for journal-streak.

Pure functions over an ascending, duplicate-free list of entry dates.
No side effects, no DB access.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class CurrentStreak:
    length: int
    start_date: date | None
    is_active: bool  # entry today or yesterday


@dataclass(frozen=True)
class LongestStreak:
    length: int
    start_date: date | None
    end_date: date | None


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, halves away from zero (2.25 -> 2.3)."""
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def find_current_streak(dates: Sequence[date], today: date) -> CurrentStreak:
    """Count consecutive entry days backwards from today.

    The scan anchors at today: with no entry today the length is 0 even if
    yesterday has one. is_active is computed separately and is True when
    today or yesterday has an entry.
    """
    if not dates:
        return CurrentStreak(length=0, start_date=None, is_active=False)

    length = 0
    start_date: date | None = None
    check_date = today

    for d in reversed(dates):
        if d == check_date:
            length += 1
            start_date = d
            check_date -= ONE_DAY
        elif d < check_date:
            break
        # d > check_date: a date after today, skipped

    yesterday = today - ONE_DAY
    is_active = today in dates or yesterday in dates

    return CurrentStreak(length=length, start_date=start_date, is_active=is_active)


def find_longest_streak(dates: Sequence[date]) -> LongestStreak:
    """Find the longest run of consecutive days. Ties go to the earliest run."""
    if not dates:
        return LongestStreak(length=0, start_date=None, end_date=None)

    if len(dates) == 1:
        return LongestStreak(length=1, start_date=dates[0], end_date=dates[0])

    longest_length = 1
    longest_start = dates[0]
    longest_end = dates[0]
    current_length = 1
    current_start = dates[0]

    for i in range(1, len(dates)):
        if (dates[i] - dates[i - 1]).days == 1:
            current_length += 1
        else:
            if current_length > longest_length:
                longest_length = current_length
                longest_start = current_start
                longest_end = dates[i - 1]
            current_length = 1
            current_start = dates[i]

    # Run reaching the end of the list
    if current_length > longest_length:
        longest_length = current_length
        longest_start = current_start
        longest_end = dates[-1]

    return LongestStreak(length=longest_length, start_date=longest_start, end_date=longest_end)


def find_missed_days(dates: Sequence[date]) -> list[date]:
    """Return every day between the first and last entry that has no entry."""
    if len(dates) < 2:
        return []

    date_set = set(dates)
    missed: list[date] = []
    current = dates[0]
    last = dates[-1]
    while current <= last:
        if current not in date_set:
            missed.append(current)
        current += ONE_DAY
    return missed


def segment_streaks(dates: Sequence[date]) -> list[int]:
    """Split dates into maximal consecutive runs and return their lengths.

    Lengths are in chronological order of the runs, e.g.
    [Mar 1, Mar 2, Mar 4, Mar 5, Mar 6] -> [2, 3].
    """
    if not dates:
        return []

    lengths: list[int] = []
    current_length = 1
    for i in range(1, len(dates)):
        if (dates[i] - dates[i - 1]).days == 1:
            current_length += 1
        else:
            lengths.append(current_length)
            current_length = 1
    lengths.append(current_length)
    return lengths


def streak_statistics(dates: Sequence[date]) -> tuple[int, float]:
    """Return (total_streaks, average_streak_length)."""
    lengths = segment_streaks(dates)
    if not lengths:
        return 0, 0.0
    return len(lengths), round_one_decimal(sum(lengths) / len(lengths))
