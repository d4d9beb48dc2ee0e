"""SQLite journal store for journal-streak."""

import logging
import sqlite3
from datetime import date, datetime, timezone
from pathlib import Path

from journal_streak.dates import normalize_date


DEFAULT_DB_PATH = Path.home() / ".journal-streak" / "journal.db"

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(tz=timezone.utc).isoformat()


class Database:
    """SQLite journal with one entry per calendar day, WAL mode."""

    def __init__(self, db_path: Path | None = None) -> None:
        self.db_path = db_path or DEFAULT_DB_PATH
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(str(self.db_path))
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA journal_mode=WAL")
        self.init_db()

    def init_db(self) -> None:
        """Create tables if they do not exist."""
        self.conn.executescript("""
            CREATE TABLE IF NOT EXISTS entries (
                entry_date TEXT PRIMARY KEY,
                title TEXT,
                content TEXT,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            );
        """)
        self.conn.commit()

    def upsert_entry(
        self,
        day: date | datetime | str,
        title: str | None = None,
        content: str | None = None,
    ) -> dict:
        """Insert or update the entry for a day. Keeps created_at on update."""
        key = normalize_date(day).isoformat()
        now = _now()
        self.conn.execute(
            "INSERT INTO entries (entry_date, title, content, created_at, updated_at) "
            "VALUES (?, ?, ?, ?, ?) "
            "ON CONFLICT(entry_date) DO UPDATE SET "
            "title = excluded.title, content = excluded.content, updated_at = excluded.updated_at",
            (key, title, content, now, now),
        )
        self.conn.commit()
        logger.debug("saved entry for %s", key)
        return self.get_entry(key)

    def get_entry(self, day: date | datetime | str) -> dict | None:
        """Get the entry for a specific day."""
        row = self.conn.execute(
            "SELECT * FROM entries WHERE entry_date = ?",
            (normalize_date(day).isoformat(),),
        ).fetchone()
        return dict(row) if row else None

    def delete_entry(self, day: date | datetime | str) -> bool:
        """Delete the entry for a day. Returns False if there was none."""
        key = normalize_date(day).isoformat()
        cursor = self.conn.execute("DELETE FROM entries WHERE entry_date = ?", (key,))
        self.conn.commit()
        if cursor.rowcount:
            logger.debug("deleted entry for %s", key)
        return cursor.rowcount > 0

    def get_entry_dates(self) -> list[date]:
        """Return all distinct entry dates, ascending."""
        rows = self.conn.execute(
            "SELECT DISTINCT entry_date FROM entries ORDER BY entry_date"
        ).fetchall()
        return [normalize_date(row["entry_date"]) for row in rows]

    def get_entry_dates_range(
        self, start: date | datetime | str, end: date | datetime | str
    ) -> list[date]:
        """Get entry dates for a date range (inclusive), ascending."""
        rows = self.conn.execute(
            "SELECT DISTINCT entry_date FROM entries "
            "WHERE entry_date >= ? AND entry_date <= ? ORDER BY entry_date",
            (normalize_date(start).isoformat(), normalize_date(end).isoformat()),
        ).fetchall()
        return [normalize_date(row["entry_date"]) for row in rows]

    def get_recent_entries(self, limit: int = 10, offset: int = 0) -> list[dict]:
        """Return one page of entries, newest first."""
        rows = self.conn.execute(
            "SELECT * FROM entries ORDER BY entry_date DESC LIMIT ? OFFSET ?",
            (limit, offset),
        ).fetchall()
        return [dict(row) for row in rows]

    def search_entries(
        self,
        query: str | None = None,
        start: date | datetime | str | None = None,
        end: date | datetime | str | None = None,
    ) -> list[dict]:
        """Search entries by title/content substring and date bounds, newest first."""
        clauses: list[str] = []
        params: list[str] = []
        if query:
            clauses.append("(COALESCE(title, '') LIKE ? OR COALESCE(content, '') LIKE ?)")
            pattern = f"%{query}%"
            params.extend([pattern, pattern])
        if start is not None:
            clauses.append("entry_date >= ?")
            params.append(normalize_date(start).isoformat())
        if end is not None:
            clauses.append("entry_date <= ?")
            params.append(normalize_date(end).isoformat())
        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
        rows = self.conn.execute(
            f"SELECT * FROM entries{where} ORDER BY entry_date DESC", params
        ).fetchall()
        return [dict(row) for row in rows]

    def close(self) -> None:
        """Close the database connection."""
        self.conn.close()
