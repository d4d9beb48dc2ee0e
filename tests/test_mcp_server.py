"""Tests for the MCP server tool functions."""
from datetime import date
from unittest.mock import patch

import pytest

from journal_streak import mcp_server
from journal_streak.db import Database
from journal_streak.mcp_server import (
    check_entry,
    get_completion,
    get_entry,
    get_missed_days,
    get_month,
    get_streak,
    search_journal,
)


@pytest.fixture
def journal(tmp_path):
    """Patch the server to open a temporary journal seeded by the test."""
    db_path = tmp_path / "journal.db"

    def seed(*days: str) -> None:
        database = Database(db_path)
        try:
            for day in days:
                database.upsert_entry(day)
        finally:
            database.close()

    with patch("journal_streak.mcp_server._get_db", side_effect=lambda: Database(db_path)), \
            patch("journal_streak.mcp_server._today", return_value=date(2024, 3, 6)):
        yield seed


class TestGetStreak:
    def test_empty_journal(self, journal):
        result = get_streak()
        assert result["current_streak"] == 0
        assert result["status_message"].startswith("No entries yet")

    def test_uses_today_by_default(self, journal):
        journal("2024-03-04", "2024-03-05", "2024-03-06")
        result = get_streak()
        assert result["current_streak"] == 3
        assert result["current_streak_start_date"] == "2024-03-04"

    def test_explicit_reference_date(self, journal):
        journal("2024-03-01", "2024-03-02")
        result = get_streak(today="2024-03-05")
        assert result["current_streak"] == 0
        assert result["is_streak_active"] is False
        assert result["longest_streak"] == 2

    def test_invalid_date(self, journal):
        assert "error" in get_streak(today="someday")


class TestGetMissedDays:
    def test_no_entries(self, journal):
        assert "error" in get_missed_days()

    def test_gaps(self, journal):
        journal("2024-03-01", "2024-03-04")
        result = get_missed_days()
        assert result["missed_days"] == ["2024-03-02", "2024-03-03"]
        assert result["count"] == 2
        assert result["oldest_entry_date"] == "2024-03-01"


class TestGetMonth:
    def test_current_month(self, journal):
        journal("2024-03-01", "2024-03-03")
        result = get_month()
        assert result["month"] == 3
        assert result["entry_dates"] == ["2024-03-01", "2024-03-03"]
        assert result["missed_days"] == ["2024-03-02"]

    def test_invalid_month(self, journal):
        assert "error" in get_month(month="2024-00")

    def test_year_out_of_range(self, journal):
        assert "error" in get_month(month="10000-01")


class TestGetCompletion:
    def test_week(self, journal):
        journal("2024-03-05", "2024-03-06")
        result = get_completion(period="week")
        assert result["start"] == "2024-02-29"
        assert result["end"] == "2024-03-06"
        assert result["completion_percentage"] == 28.6

    def test_custom_range(self, journal):
        journal("2024-03-01")
        result = get_completion(start="2024-03-01", end="2024-03-02")
        assert result["completion_percentage"] == 50.0

    def test_invalid_period(self, journal):
        assert "error" in get_completion(period="decade")

    def test_reversed_range(self, journal):
        journal("2024-03-01")
        result = get_completion(start="2024-03-05", end="2024-03-01")
        assert "error" in result
        assert "completion_percentage" not in result


class TestCheckEntry:
    def test_today(self, journal):
        journal("2024-03-06")
        assert check_entry() == {"date": "2024-03-06", "has_entry": True}

    def test_missing_day(self, journal):
        journal("2024-03-06")
        assert check_entry(day="2024-03-05")["has_entry"] is False


def _write(day: str, title: str | None = None, content: str | None = None) -> None:
    database = mcp_server._get_db()
    try:
        database.upsert_entry(day, title=title, content=content)
    finally:
        database.close()


class TestGetEntry:
    def test_found(self, journal):
        _write("2024-03-06", title="Rain", content="Stayed in.")
        result = get_entry()
        assert result["entry_date"] == "2024-03-06"
        assert result["title"] == "Rain"
        assert result["content"] == "Stayed in."

    def test_missing(self, journal):
        assert "error" in get_entry(day="2024-03-01")

    def test_invalid_date(self, journal):
        assert "error" in get_entry(day="someday")


class TestSearchJournal:
    def test_text_match(self, journal):
        _write("2024-03-01", title="Rainy walk")
        _write("2024-03-02", title="Sunny")
        result = search_journal(query="rain")
        assert result["count"] == 1
        assert result["entries"][0]["entry_date"] == "2024-03-01"

    def test_date_bounds(self, journal):
        journal("2024-02-28", "2024-03-01", "2024-03-04")
        result = search_journal(start="2024-03-01", end="2024-03-03")
        assert [e["entry_date"] for e in result["entries"]] == ["2024-03-01"]

    def test_invalid_date(self, journal):
        assert "error" in search_journal(start="last week")
