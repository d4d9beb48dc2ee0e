"""Tests for status message selection."""

from datetime import date

from journal_streak.status import NO_ENTRIES_MESSAGE, generate_status_message

TODAY = date(2024, 6, 10)


def _message(total=5, active=True, current=0, longest=0, most_recent=TODAY):
    return generate_status_message(
        total_days_with_entries=total,
        is_streak_active=active,
        current_streak=current,
        longest_streak=longest,
        most_recent_entry_date=most_recent,
        today=TODAY,
    )


class TestGenerateStatusMessage:
    def test_no_entries(self):
        assert _message(total=0, active=False, most_recent=None) == NO_ENTRIES_MESSAGE

    def test_no_entries_wins_over_other_fields(self):
        assert _message(total=0, active=True, current=3, longest=3) == NO_ENTRIES_MESSAGE

    def test_active_first_day(self):
        assert _message(current=1, longest=5) == "You journaled today! Keep it up!"

    def test_active_personal_best(self):
        message = _message(current=7, longest=7)
        assert "7-day streak" in message
        assert "best" in message

    def test_active_below_best_cites_both(self):
        message = _message(current=3, longest=9)
        assert "3 days strong" in message
        assert "9 days" in message

    def test_active_yesterday_only_falls_to_progress_branch(self):
        message = _message(current=0, longest=4, most_recent=date(2024, 6, 9))
        assert "0 days strong" in message

    def test_inactive_last_entry_yesterday(self):
        message = _message(active=False, current=0, longest=4, most_recent=date(2024, 6, 9))
        assert message == "You journaled yesterday! Write today to keep your streak alive."

    def test_inactive_zero_streak(self):
        message = _message(active=False, current=0, longest=4, most_recent=date(2024, 6, 1))
        assert message == "Your streak is broken. Start fresh today!"

    def test_inactive_nonzero_streak_cites_it(self):
        message = _message(active=False, current=2, longest=4, most_recent=date(2024, 6, 1))
        assert message == "Your streak is broken. Your last streak was 2 days."
