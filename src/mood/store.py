"""SQLite persistence for mood entries."""

import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Optional

import structlog

from dates import parse_timestamp
from db import dump_list, load_list, wal_connect

from .models import MoodEntry

logger = structlog.get_logger()

_UPSERT_SQL = """INSERT OR REPLACE INTO mood_entries
    (id, mood, intensity, activities, notes, timestamp, created_at, updated_at)
    VALUES (?, ?, ?, ?, ?, ?, ?, ?)"""


class MoodStore:
    """SQLite persistence for mood entries. One row per entry, keyed by id."""

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path).expanduser()
        self._init_tables()

    def _init_tables(self):
        with wal_connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS mood_entries (
                    id TEXT PRIMARY KEY,
                    mood TEXT NOT NULL,
                    intensity REAL,
                    activities TEXT DEFAULT '[]',
                    notes TEXT DEFAULT '',
                    timestamp TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_mood_timestamp ON mood_entries(timestamp)")

    def save(self, entry: MoodEntry) -> str:
        """Insert or replace entry by id, return id."""
        try:
            with wal_connect(self.db_path) as conn:
                conn.execute(_UPSERT_SQL, self._entry_to_row(entry))
        except sqlite3.Error as e:
            logger.error("mood_save_error", entry_id=entry.id, error=str(e))
            raise
        logger.debug("mood_saved", entry_id=entry.id, mood=entry.mood)
        return entry.id

    def save_many(self, entries: list[MoodEntry]) -> int:
        """Insert or replace several entries in one transaction. All or nothing."""
        rows = [self._entry_to_row(e) for e in entries]
        try:
            with wal_connect(self.db_path) as conn:
                conn.executemany(_UPSERT_SQL, rows)
        except sqlite3.Error as e:
            logger.error("mood_save_many_error", count=len(rows), error=str(e))
            raise
        logger.debug("moods_saved", count=len(rows))
        return len(rows)

    def update(self, entry: MoodEntry) -> bool:
        """Replace an existing entry. Returns False if the id is unknown."""
        try:
            with wal_connect(self.db_path) as conn:
                cur = conn.execute(
                    """UPDATE mood_entries
                    SET mood = ?, intensity = ?, activities = ?, notes = ?,
                        timestamp = ?, created_at = ?, updated_at = ?
                    WHERE id = ?""",
                    (*self._entry_to_row(entry)[1:], entry.id),
                )
                return cur.rowcount > 0
        except sqlite3.Error as e:
            logger.error("mood_update_error", entry_id=entry.id, error=str(e))
            raise

    def get(self, entry_id: str) -> Optional[MoodEntry]:
        with wal_connect(self.db_path, row_factory=True) as conn:
            row = conn.execute("SELECT * FROM mood_entries WHERE id = ?", (entry_id,)).fetchone()
            return self._row_to_entry(row) if row else None

    def list_all(self) -> list[MoodEntry]:
        """All entries, oldest first."""
        with wal_connect(self.db_path, row_factory=True) as conn:
            rows = conn.execute("SELECT * FROM mood_entries ORDER BY timestamp ASC").fetchall()
            return [self._row_to_entry(r) for r in rows]

    def get_by_date_range(self, start: datetime, end: datetime) -> list[MoodEntry]:
        """Entries whose timestamp falls within [start, end].

        Bounds are compared as naive UTC. Unparseable timestamps are skipped.
        """
        start = parse_timestamp(start)
        end = parse_timestamp(end)
        if start is None or end is None:
            return []

        result = []
        for entry in self.list_all():
            ts = parse_timestamp(entry.timestamp)
            if ts is not None and start <= ts <= end:
                result.append(entry)
        return result

    def delete(self, entry_id: str) -> bool:
        try:
            with wal_connect(self.db_path) as conn:
                cur = conn.execute("DELETE FROM mood_entries WHERE id = ?", (entry_id,))
                return cur.rowcount > 0
        except sqlite3.Error as e:
            logger.error("mood_delete_error", entry_id=entry_id, error=str(e))
            raise

    def clear(self) -> int:
        """Remove every entry, return number removed."""
        try:
            with wal_connect(self.db_path) as conn:
                cur = conn.execute("DELETE FROM mood_entries")
                removed = cur.rowcount
        except sqlite3.Error as e:
            logger.error("mood_clear_error", error=str(e))
            raise
        logger.info("mood_entries_cleared", removed=removed)
        return removed

    def count(self) -> int:
        with wal_connect(self.db_path) as conn:
            return conn.execute("SELECT COUNT(*) FROM mood_entries").fetchone()[0]

    @staticmethod
    def _entry_to_row(entry: MoodEntry) -> tuple:
        try:
            intensity = float(entry.intensity)
        except (TypeError, ValueError, OverflowError):
            intensity = None
        return (
            entry.id,
            str(entry.mood),
            intensity,
            dump_list(entry.activities),
            entry.notes or "",
            str(entry.timestamp),
            str(entry.created_at),
            str(entry.updated_at),
        )

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> MoodEntry:
        # SQLite stores NaN as NULL; None flows through as a non-finite intensity
        return MoodEntry(
            id=row["id"],
            mood=row["mood"],
            intensity=row["intensity"],
            activities=load_list(row["activities"]),
            notes=row["notes"] or "",
            timestamp=row["timestamp"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
