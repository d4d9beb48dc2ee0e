"""Status message selection for streak results."""

from __future__ import annotations

from datetime import date, timedelta

NO_ENTRIES_MESSAGE = "No entries yet. Start journaling today!"


def generate_status_message(
    total_days_with_entries: int,
    is_streak_active: bool,
    current_streak: int,
    longest_streak: int,
    most_recent_entry_date: date | None,
    today: date,
) -> str:
    """Pick the status line shown above the streak stats.

    Active streaks cite the current streak (and the personal best when it is
    not the current one). Broken streaks cite the current streak when it is
    non-zero. The "journaled yesterday" branch only fires when the caller
    passes is_streak_active=False with a most recent entry of yesterday;
    calculate_streak never does, since an entry yesterday keeps the streak
    active.
    """
    if total_days_with_entries == 0:
        return NO_ENTRIES_MESSAGE

    if is_streak_active:
        if current_streak == 1:
            return "You journaled today! Keep it up!"
        if current_streak == longest_streak:
            return f"Amazing! You're on a {current_streak}-day streak! This is your best!"
        return (
            f"Awesome! {current_streak} days strong. "
            f"Your personal best is {longest_streak} days."
        )

    if most_recent_entry_date is not None and most_recent_entry_date == today - timedelta(days=1):
        return "You journaled yesterday! Write today to keep your streak alive."
    if current_streak == 0:
        return "Your streak is broken. Start fresh today!"
    return f"Your streak is broken. Your last streak was {current_streak} days."
