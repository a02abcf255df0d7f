"""Shared SQLite helpers: WAL mode, row_factory defaults, JSON list columns."""

import json
import sqlite3
from pathlib import Path


def wal_connect(db_path: str | Path, row_factory: bool = False) -> sqlite3.Connection:
    """Open SQLite connection with WAL journal mode.

    Args:
        db_path: Path to database file. Parent directory is created if missing.
        row_factory: If True, set conn.row_factory = sqlite3.Row.
    """
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.execute("PRAGMA journal_mode=WAL")
    if row_factory:
        conn.row_factory = sqlite3.Row
    return conn


def dump_list(values) -> str:
    """Serialize a list column."""
    return json.dumps(list(values or []))


def load_list(raw) -> list:
    """Deserialize a list column. Corrupt or non-list values read back empty."""
    if not raw:
        return []
    try:
        values = json.loads(raw)
    except (TypeError, ValueError):
        return []
    return values if isinstance(values, list) else []
