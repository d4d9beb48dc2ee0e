"""CLI commands for journal-streak."""

from __future__ import annotations

import argparse
import json
import logging
from datetime import date
from pathlib import Path

from journal_streak.config import get_db_path, set_db_path
from journal_streak.dates import normalize_date
from journal_streak.db import Database
from journal_streak.display import (
    console,
    print_completion,
    print_entry,
    print_entry_list,
    print_entry_saved,
    print_error,
    print_missed_days,
    print_month_calendar,
    print_no_entries_message,
    print_streak_dashboard,
)
from journal_streak.engine import (
    calculate_streak,
    completion_percentage,
    current_streak_only,
    entry_dates_in_range,
    missed_days_only,
)
from journal_streak.periods import PERIODS, get_period_dates, month_bounds, parse_month

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10


def _today() -> date:
    return date.today()


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="journal-streak",
        description="Daily journal with streak tracking",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")
    write_parser = subparsers.add_parser("write", help="Record or update a journal entry")
    write_parser.add_argument("date", nargs="?", default=None, help="Entry date (YYYY-MM-DD), default today")
    write_parser.add_argument("--title", "-t", default=None, help="Entry title")
    write_parser.add_argument("--content", "-c", default=None, help="Entry text")
    remove_parser = subparsers.add_parser("remove", help="Delete the entry for a date")
    remove_parser.add_argument("date", help="Entry date (YYYY-MM-DD)")
    streak_parser = subparsers.add_parser("streak", help="Show streak statistics")
    streak_parser.add_argument("--today", default=None, help="Reference date (YYYY-MM-DD)")
    streak_parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    show_parser = subparsers.add_parser("show", help="Show the entry for a date")
    show_parser.add_argument("date", nargs="?", default=None, help="Entry date (YYYY-MM-DD), default today")
    list_parser = subparsers.add_parser("list", help="List entries, newest first")
    list_parser.add_argument("--page", "-p", type=int, default=1, help="Page number (from 1)")
    list_parser.add_argument("--size", "-s", type=int, default=DEFAULT_PAGE_SIZE, help="Entries per page")
    search_parser = subparsers.add_parser("search", help="Search entries by text and date range")
    search_parser.add_argument("query", nargs="?", default=None, help="Text to find in title or content")
    search_parser.add_argument("--from", dest="start", default=None, help="Range start (YYYY-MM-DD)")
    search_parser.add_argument("--to", dest="end", default=None, help="Range end (YYYY-MM-DD)")
    subparsers.add_parser("missed", help="List days without an entry")
    calendar_parser = subparsers.add_parser("calendar", help="Show a month calendar")
    calendar_parser.add_argument("--month", "-m", default=None, help="Month to show (YYYY-MM)")
    completion_parser = subparsers.add_parser("completion", help="Completion percentage for a period")
    completion_parser.add_argument("--period", choices=list(PERIODS), default="month")
    completion_parser.add_argument("--from", dest="start", default=None, help="Range start (YYYY-MM-DD)")
    completion_parser.add_argument("--to", dest="end", default=None, help="Range end (YYYY-MM-DD)")
    config_parser = subparsers.add_parser("config", help="Configure the journal database path")
    config_parser.add_argument("--db", default=None, help="Path to the journal database")
    return parser


def main() -> None:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args()
    command = args.command or "streak"

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if command == "config":
        do_config(db_path=args.db)
        return

    db = Database(get_db_path())

    try:
        if command == "write":
            do_write(db, day=args.date, title=args.title, content=args.content)
        elif command == "remove":
            do_remove(db, day=args.date)
        elif command == "show":
            do_show(db, day=args.date)
        elif command == "list":
            do_list(db, page=args.page, size=args.size)
        elif command == "search":
            do_search(db, query=args.query, start=args.start, end=args.end)
        elif command == "streak":
            do_streak(
                db,
                today=getattr(args, "today", None),
                as_json=getattr(args, "json", False),
            )
        elif command == "missed":
            do_missed(db)
        elif command == "calendar":
            do_calendar(db, month=args.month)
        elif command == "completion":
            do_completion(db, period=args.period, start=args.start, end=args.end)
    finally:
        db.close()


def _parse_day(value: str | None, default: date) -> date:
    return normalize_date(value) if value else default


def do_write(
    db: Database,
    day: str | None = None,
    title: str | None = None,
    content: str | None = None,
) -> dict:
    """Record or update the journal entry for a day (default today)."""
    today = _today()
    try:
        entry_day = _parse_day(day, today)
    except ValueError:
        print_error(f"Invalid date: {day}. Use YYYY-MM-DD.")
        return {"ok": False, "reason": "invalid_date"}

    if entry_day > today:
        print_error(f"Cannot write an entry for a future date: {entry_day.isoformat()}")
        return {"ok": False, "reason": "future_date"}

    entry = db.upsert_entry(entry_day, title=title, content=content)
    streak = current_streak_only(db.get_entry_dates(), today)
    result = {
        "ok": True,
        "entry_date": entry["entry_date"],
        "title": entry["title"],
        "current_streak": streak.length,
    }
    print_entry_saved(result)
    return result


def do_remove(db: Database, day: str) -> dict:
    """Delete the entry for a day."""
    try:
        entry_day = normalize_date(day)
    except ValueError:
        print_error(f"Invalid date: {day}. Use YYYY-MM-DD.")
        return {"ok": False, "reason": "invalid_date"}

    if not db.delete_entry(entry_day):
        print_error(f"No entry found for {entry_day.isoformat()}")
        return {"ok": False, "reason": "not_found"}

    console.print(f"[green]Deleted entry for {entry_day.isoformat()}[/]")
    return {"ok": True, "entry_date": entry_day.isoformat()}


def do_show(db: Database, day: str | None = None) -> dict:
    """Show the full entry for a day (default today)."""
    try:
        entry_day = _parse_day(day, _today())
    except ValueError:
        print_error(f"Invalid date: {day}. Use YYYY-MM-DD.")
        return {"ok": False, "reason": "invalid_date"}

    entry = db.get_entry(entry_day)
    if entry is None:
        print_error(f"No entry found for {entry_day.isoformat()}")
        return {"ok": False, "reason": "not_found"}

    print_entry(entry)
    return {"ok": True, **entry}


def do_list(db: Database, page: int = 1, size: int = DEFAULT_PAGE_SIZE) -> dict:
    """List one page of entries, newest first."""
    if page < 1 or size < 1:
        print_error("Page and size must be at least 1.")
        return {"ok": False, "reason": "invalid_page"}

    entries = db.get_recent_entries(limit=size, offset=(page - 1) * size)
    print_entry_list(entries, title=f"Journal Entries (page {page})")
    return {"ok": True, "page": page, "size": size, "entries": entries, "count": len(entries)}


def do_search(
    db: Database,
    query: str | None = None,
    start: str | None = None,
    end: str | None = None,
) -> dict:
    """Search entries by title/content text within an optional date range."""
    try:
        range_start = normalize_date(start) if start else None
        range_end = normalize_date(end) if end else None
    except ValueError:
        print_error("Invalid date range. Use YYYY-MM-DD for --from and --to.")
        return {"ok": False, "reason": "invalid_date"}

    if range_start and range_end and range_end < range_start:
        print_error(f"Range end {range_end.isoformat()} is before start {range_start.isoformat()}")
        return {"ok": False, "reason": "empty_range"}

    entries = db.search_entries(query=query, start=range_start, end=range_end)
    title = f"Search: {query}" if query else "Search"
    print_entry_list(entries, title=title)
    return {"ok": True, "query": query, "entries": entries, "count": len(entries)}


def do_streak(
    db: Database,
    today: str | None = None,
    as_json: bool = False,
) -> dict:
    """Show full streak statistics."""
    try:
        reference = _parse_day(today, _today())
    except ValueError:
        print_error(f"Invalid date: {today}. Use YYYY-MM-DD.")
        return {"ok": False, "reason": "invalid_date"}

    result = calculate_streak(db.get_entry_dates(), reference)
    data = result.to_dict()

    if as_json:
        console.print_json(json.dumps(data))
    elif result.total_days_with_entries == 0:
        print_no_entries_message()
    else:
        print_streak_dashboard(data)
    return {"ok": True, **data}


def do_missed(db: Database) -> dict:
    """List every day without an entry between the first and last entry."""
    dates = db.get_entry_dates()
    if not dates:
        print_no_entries_message()
        return {"ok": False, "reason": "no_entries"}

    data = {
        "missed_days_list": [d.isoformat() for d in missed_days_only(dates)],
        "oldest_entry_date": dates[0].isoformat(),
        "most_recent_entry_date": dates[-1].isoformat(),
    }
    print_missed_days(data)
    return {"ok": True, "missed_days": data["missed_days_list"], "count": len(data["missed_days_list"])}


def do_calendar(db: Database, month: str | None = None) -> dict:
    """Show a month grid with entry and missed days marked."""
    today = _today()
    try:
        year, month_num = parse_month(month) if month else (today.year, today.month)
        start, end = month_bounds(year, month_num)
    except ValueError:
        print_error(f"Invalid month: {month}. Use YYYY-MM.")
        return {"ok": False, "reason": "invalid_month"}

    dates = db.get_entry_dates()
    in_month = db.get_entry_dates_range(start, end)
    missed = [d for d in missed_days_only(dates) if start <= d <= end]

    data = {
        "year": year,
        "month": month_num,
        "today": today.isoformat(),
        "entry_dates": [d.isoformat() for d in in_month],
        "missed_days": [d.isoformat() for d in missed],
    }
    print_month_calendar(data)
    return {"ok": True, **data}


def do_completion(
    db: Database,
    period: str = "month",
    start: str | None = None,
    end: str | None = None,
) -> dict:
    """Show the percentage of days with an entry over a period or custom range."""
    today = _today()
    dates = db.get_entry_dates()
    oldest = dates[0] if dates else None
    period_start, period_end = get_period_dates(period, today, oldest=oldest)
    # Days after today cannot have entries yet
    period_end = min(period_end, today)

    try:
        range_start = _parse_day(start, period_start)
        range_end = _parse_day(end, period_end)
    except ValueError:
        print_error("Invalid date range. Use YYYY-MM-DD for --from and --to.")
        return {"ok": False, "reason": "invalid_date"}

    if range_end < range_start:
        print_error(f"Range end {range_end.isoformat()} is before start {range_start.isoformat()}")
        return {"ok": False, "reason": "empty_range"}

    data = {
        "period": "custom" if (start or end) else period,
        "start": range_start.isoformat(),
        "end": range_end.isoformat(),
        "entries": len(entry_dates_in_range(dates, range_start, range_end)),
        "total_days": (range_end - range_start).days + 1,
        "completion_percentage": completion_percentage(dates, range_start, range_end),
    }
    print_completion(data)
    return {"ok": True, **data}


def do_config(db_path: str | None = None, config_path: Path | None = None) -> dict:
    """Persist the database path and report the current setting."""
    if db_path:
        set_db_path(Path(db_path).expanduser().resolve(), config_path)

    configured = get_db_path(config_path)
    result = {"ok": True, "db_path": str(configured) if configured else None}
    logger.debug("config updated: %s", result)
    console.print(f"[green]Database:[/] {result['db_path'] or 'default'}")
    return result
