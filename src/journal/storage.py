"""Markdown journal CRUD operations."""

import re
from datetime import date, datetime
from pathlib import Path
from typing import Optional

import frontmatter
import structlog
import yaml

from .models import JournalEntry, JournalFilter

logger = structlog.get_logger()

MAX_CONTENT_LENGTH = 100_000  # 100KB
MAX_TAG_LENGTH = 50
MAX_TAGS = 20
_VALID_ID = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def _sanitize_tag(tag: str) -> str:
    """Sanitize a single tag."""
    return re.sub(r"[^\w\s-]", "", tag).strip()[:MAX_TAG_LENGTH]


def _as_iso(value) -> str:
    """YAML may hand back datetimes for unquoted timestamps."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value) if value is not None else ""


def _as_str_list(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value]


class JournalStorage:
    """Manages one markdown file per journal entry, metadata in YAML frontmatter."""

    def __init__(self, journal_dir: str | Path):
        self.journal_dir = Path(journal_dir).expanduser().resolve()
        self.journal_dir.mkdir(parents=True, exist_ok=True)

    def _path_for(self, entry_id: str) -> Path:
        """Resolve entry file path, ensuring it stays inside journal_dir."""
        if not isinstance(entry_id, str) or not _VALID_ID.match(entry_id):
            raise ValueError(f"Invalid entry id: {entry_id!r}")
        resolved = (self.journal_dir / f"{entry_id}.md").resolve()
        if not resolved.is_relative_to(self.journal_dir):
            raise ValueError(f"Path escapes journal directory: {entry_id}")
        return resolved

    def validate(self, entry: JournalEntry) -> Path:
        """Check an entry can be saved, without writing it.

        Returns:
            Path the entry would be written to

        Raises:
            ValueError: If content too long or id is not a safe filename
        """
        if len(entry.content) > MAX_CONTENT_LENGTH:
            raise ValueError(f"Content exceeds max length ({MAX_CONTENT_LENGTH} chars)")
        return self._path_for(entry.id)

    def save(self, entry: JournalEntry) -> Path:
        """Create or replace entry by id.

        Returns:
            Path to the written file

        Raises:
            ValueError: If content too long or id is not a safe filename
        """
        filepath = self.validate(entry)
        tags = [_sanitize_tag(t) for t in entry.tags[:MAX_TAGS] if t.strip()]

        post = frontmatter.Post(entry.content)
        post["id"] = entry.id
        post["title"] = entry.title
        post["mood"] = str(entry.mood)
        post["activities"] = list(entry.activities)
        post["tags"] = [t for t in tags if t]
        post["created"] = _as_iso(entry.created_at)
        post["updated"] = _as_iso(entry.updated_at)

        try:
            with open(filepath, "w") as f:
                f.write(frontmatter.dumps(post))
        except OSError as e:
            logger.error("journal_save_error", entry_id=entry.id, error=str(e))
            raise

        logger.debug("journal_saved", entry_id=entry.id, mood=post["mood"])
        return filepath

    def get(self, entry_id: str) -> Optional[JournalEntry]:
        """Read entry by id. None if missing."""
        filepath = self._path_for(entry_id)
        if not filepath.exists():
            return None
        return self._load(filepath)

    def list_all(self) -> list[JournalEntry]:
        """All readable entries, newest first."""
        entries = []
        for f in self.journal_dir.glob("*.md"):
            try:
                entries.append(self._load(f))
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.warning("journal_unreadable", file=f.name, error=str(e))
                continue
        entries.sort(key=lambda e: str(e.created_at), reverse=True)
        return entries

    def search(self, journal_filter: JournalFilter) -> list[JournalEntry]:
        """Entries matching every set filter criterion, newest first."""
        return [e for e in self.list_all() if journal_filter.matches(e)]

    def delete(self, entry_id: str) -> bool:
        """Delete journal entry."""
        filepath = self._path_for(entry_id)
        if filepath.exists():
            filepath.unlink()
            return True
        return False

    def clear(self) -> int:
        """Delete every entry, return number removed."""
        removed = 0
        for f in self.journal_dir.glob("*.md"):
            f.unlink()
            removed += 1
        logger.info("journal_entries_cleared", removed=removed)
        return removed

    def count(self) -> int:
        return sum(1 for _ in self.journal_dir.glob("*.md"))

    @staticmethod
    def _load(filepath: Path) -> JournalEntry:
        post = frontmatter.load(filepath)
        created = _as_iso(post.get("created"))
        return JournalEntry(
            id=str(post.get("id") or filepath.stem),
            title=str(post.get("title") or ""),
            content=post.content or "",
            mood=str(post.get("mood") or "neutral"),
            activities=_as_str_list(post.get("activities")),
            tags=_as_str_list(post.get("tags")),
            created_at=created,
            updated_at=_as_iso(post.get("updated")) or created,
        )
