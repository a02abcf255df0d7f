"""Journal entry record and search filter."""

import uuid
from dataclasses import asdict, dataclass, field
from typing import Optional

from dates import now_iso


def _as_list(value) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [str(v) for v in value]


@dataclass
class JournalEntry:
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])
    title: str = ""
    content: str = ""
    mood: str = "neutral"
    activities: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    created_at: str = field(default_factory=now_iso)
    updated_at: str = field(default_factory=now_iso)

    @classmethod
    def from_dict(cls, data: dict) -> "JournalEntry":
        """Build from a stored or exported dict (snake_case or camelCase keys)."""
        created = data.get("created_at") or data.get("createdAt") or data.get("date") or now_iso()
        content = data.get("content")
        return cls(
            id=str(data.get("id") or uuid.uuid4().hex[:8]),
            title=str(data.get("title") or ""),
            content=content if isinstance(content, str) else "",
            mood=data.get("mood", "neutral"),
            activities=_as_list(data.get("activities")),
            tags=_as_list(data.get("tags")),
            created_at=created,
            updated_at=data.get("updated_at") or data.get("updatedAt") or created,
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class JournalFilter:
    """Multi-criteria search. Unset fields do not filter."""

    search_text: Optional[str] = None
    moods: Optional[list[str]] = None
    tags: Optional[list[str]] = None
    activities: Optional[list[str]] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    def matches(self, entry: JournalEntry) -> bool:
        if self.search_text:
            needle = self.search_text.lower()
            haystacks = [entry.title.lower(), entry.content.lower(), *(t.lower() for t in entry.tags)]
            if not any(needle in h for h in haystacks):
                return False

        if self.moods and entry.mood not in self.moods:
            return False

        if self.tags and not any(t in entry.tags for t in self.tags):
            return False

        if self.activities and not any(a in entry.activities for a in self.activities):
            return False

        # ISO strings compare chronologically when formats agree
        if self.start_date and str(entry.created_at) < self.start_date:
            return False

        if self.end_date and str(entry.created_at) > self.end_date:
            return False

        return True
