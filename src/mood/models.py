"""Mood entry record."""

import uuid
from dataclasses import asdict, dataclass, field

from dates import now_iso


def _new_id() -> str:
    return uuid.uuid4().hex[:8]


def _as_list(value) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [str(v) for v in value]


@dataclass
class MoodEntry:
    """A single mood observation.

    ``timestamp`` is when the mood occurred; all date filtering and trend
    ordering use it. ``intensity`` is nominally 0-1 but stored as given.
    """

    id: str = field(default_factory=_new_id)
    mood: str = "neutral"
    intensity: float = 0.5
    activities: list[str] = field(default_factory=list)
    notes: str = ""
    timestamp: str = field(default_factory=now_iso)
    created_at: str = field(default_factory=now_iso)
    updated_at: str = field(default_factory=now_iso)

    @classmethod
    def from_dict(cls, data: dict) -> "MoodEntry":
        """Build from a stored or exported dict (snake_case or camelCase keys)."""
        now = now_iso()
        timestamp = data.get("timestamp") or data.get("created_at") or data.get("createdAt") or now
        return cls(
            id=str(data.get("id") or _new_id()),
            mood=data.get("mood", "neutral"),
            intensity=data.get("intensity", 0.5),
            activities=_as_list(data.get("activities")),
            notes=str(data.get("notes") or ""),
            timestamp=timestamp,
            created_at=data.get("created_at") or data.get("createdAt") or timestamp,
            updated_at=data.get("updated_at") or data.get("updatedAt") or timestamp,
        )

    def to_dict(self) -> dict:
        return asdict(self)
