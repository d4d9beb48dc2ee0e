"""MCP server for journal-streak.

Exposes journal streak stats as MCP tools so an assistant can query them
mid-conversation.
Run via: python3 -m journal_streak.mcp_server
"""
from __future__ import annotations

from datetime import date
from typing import Any

from mcp.server.fastmcp import FastMCP

from journal_streak.config import get_db_path
from journal_streak.dates import normalize_date
from journal_streak.engine import (
    calculate_streak,
    completion_percentage,
    entry_dates_in_range,
    has_entry,
    missed_days_only,
)
from journal_streak.periods import PERIODS, get_period_dates, month_bounds, parse_month

mcp = FastMCP(name="journal-streak")


def _get_db():
    from journal_streak.db import Database
    return Database(get_db_path())


def _today() -> date:
    return date.today()


def _load_dates() -> list[date]:
    db = _get_db()
    try:
        return db.get_entry_dates()
    finally:
        db.close()


@mcp.tool()
def get_streak(today: str = "") -> dict[str, Any]:
    """Get streak statistics: current and longest streak, missed days, completion.

    today: reference date (YYYY-MM-DD). Defaults to the current date.
    """
    try:
        reference = normalize_date(today) if today else _today()
    except ValueError:
        return {"error": f"Invalid date: {today}. Use YYYY-MM-DD."}
    result = calculate_streak(_load_dates(), reference)
    return result.to_dict()


@mcp.tool()
def get_missed_days() -> dict[str, Any]:
    """Get every day without an entry between the first and last journal entry."""
    dates = _load_dates()
    if not dates:
        return {"error": "No entries yet. Run journal-streak write first."}
    missed = missed_days_only(dates)
    return {
        "missed_days": [d.isoformat() for d in missed],
        "count": len(missed),
        "oldest_entry_date": dates[0].isoformat(),
        "most_recent_entry_date": dates[-1].isoformat(),
    }


@mcp.tool()
def get_month(month: str = "") -> dict[str, Any]:
    """Get the entry days and missed days of one calendar month (YYYY-MM)."""
    today = _today()
    try:
        year, month_num = parse_month(month) if month else (today.year, today.month)
        start, end = month_bounds(year, month_num)
    except ValueError:
        return {"error": f"Invalid month: {month}. Use YYYY-MM."}
    dates = _load_dates()
    return {
        "year": year,
        "month": month_num,
        "entry_dates": [d.isoformat() for d in entry_dates_in_range(dates, start, end)],
        "missed_days": [d.isoformat() for d in missed_days_only(dates) if start <= d <= end],
    }


@mcp.tool()
def get_completion(period: str = "month", start: str = "", end: str = "") -> dict[str, Any]:
    """Get the percentage of days with an entry.

    period: week, month, year, or all-time. start/end (YYYY-MM-DD) override it.
    """
    if period not in PERIODS:
        return {"error": f"Invalid period. Must be one of: {', '.join(PERIODS)}"}
    today = _today()
    dates = _load_dates()
    period_start, period_end = get_period_dates(period, today, oldest=dates[0] if dates else None)
    try:
        range_start = normalize_date(start) if start else period_start
        range_end = normalize_date(end) if end else min(period_end, today)
    except ValueError:
        return {"error": "Invalid date range. Use YYYY-MM-DD."}
    if range_end < range_start:
        return {"error": f"Range end {range_end.isoformat()} is before start {range_start.isoformat()}"}
    return {
        "start": range_start.isoformat(),
        "end": range_end.isoformat(),
        "entries": len(entry_dates_in_range(dates, range_start, range_end)),
        "completion_percentage": completion_percentage(dates, range_start, range_end),
    }


@mcp.tool()
def check_entry(day: str = "") -> dict[str, Any]:
    """Check whether a day (YYYY-MM-DD, default today) has a journal entry."""
    try:
        target = normalize_date(day) if day else _today()
    except ValueError:
        return {"error": f"Invalid date: {day}. Use YYYY-MM-DD."}
    return {"date": target.isoformat(), "has_entry": has_entry(_load_dates(), target)}


@mcp.tool()
def get_entry(day: str = "") -> dict[str, Any]:
    """Get the journal entry (title and content) for a day, default today."""
    try:
        target = normalize_date(day) if day else _today()
    except ValueError:
        return {"error": f"Invalid date: {day}. Use YYYY-MM-DD."}
    db = _get_db()
    try:
        entry = db.get_entry(target)
    finally:
        db.close()
    if entry is None:
        return {"error": f"No entry for {target.isoformat()}."}
    return entry


@mcp.tool()
def search_journal(query: str = "", start: str = "", end: str = "") -> dict[str, Any]:
    """Search journal entries by title/content text and optional YYYY-MM-DD bounds."""
    try:
        range_start = normalize_date(start) if start else None
        range_end = normalize_date(end) if end else None
    except ValueError:
        return {"error": "Invalid date range. Use YYYY-MM-DD."}
    db = _get_db()
    try:
        entries = db.search_entries(query=query or None, start=range_start, end=range_end)
    finally:
        db.close()
    return {"entries": entries, "count": len(entries)}


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
