"""ISO-8601 helpers shared by stores and analytics."""

from datetime import datetime, timezone
from typing import Optional


def now_iso() -> str:
    """Current UTC time as an ISO-8601 string with a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value) -> Optional[datetime]:
    """Parse an ISO-8601 string into a naive UTC datetime. None if unparseable."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str) and value.strip():
        try:
            dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    if dt.tzinfo:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def date_part(value) -> str:
    """Calendar date portion (YYYY-MM-DD) of an ISO string, no parsing involved."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if not isinstance(value, str):
        return ""
    return value.split("T", 1)[0].split(" ", 1)[0]


def chronological_key(value) -> tuple:
    """Sort key placing unparseable timestamps last."""
    dt = parse_timestamp(value)
    if dt is None:
        return (1, datetime.max)
    return (0, dt)
