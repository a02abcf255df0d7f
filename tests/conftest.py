"""Shared test fixtures for mood journey."""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from journal.models import JournalEntry  # noqa: E402
from mood.models import MoodEntry  # noqa: E402

FIXED_NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
TODAY = "2024-01-15"
YESTERDAY = "2024-01-14"


def make_mood(mood="neutral", intensity=0.5, activities=None, timestamp=None) -> MoodEntry:
    timestamp = timestamp or datetime.now(timezone.utc).isoformat()
    return MoodEntry(
        mood=mood,
        intensity=intensity,
        activities=list(activities or []),
        timestamp=timestamp,
        created_at=timestamp,
        updated_at=timestamp,
    )


def make_journal(content="", mood="neutral", activities=None, tags=None, created_at=None, title="Test Entry"):
    created_at = created_at or datetime.now(timezone.utc).isoformat()
    return JournalEntry(
        title=title,
        content=content,
        mood=mood,
        activities=list(activities or []),
        tags=list(tags or []),
        created_at=created_at,
        updated_at=created_at,
    )


@pytest.fixture
def fixed_now():
    """Clock used for "today" in summary tests: 2024-01-15 12:00 UTC."""
    return FIXED_NOW


@pytest.fixture
def mood_entry():
    """Factory for MoodEntry records."""
    return make_mood


@pytest.fixture
def journal_entry():
    """Factory for JournalEntry records."""
    return make_journal


@pytest.fixture
def temp_dirs(tmp_path):
    """Create temp locations for journal files and the mood database."""
    journal_dir = tmp_path / "journal"
    journal_dir.mkdir()

    return {
        "journal_dir": journal_dir,
        "mood_db": tmp_path / "moods.db",
    }


@pytest.fixture
def mood_store(temp_dirs):
    from mood.store import MoodStore

    return MoodStore(temp_dirs["mood_db"])


@pytest.fixture
def journal_storage(temp_dirs):
    from journal.storage import JournalStorage

    return JournalStorage(temp_dirs["journal_dir"])


@pytest.fixture
def sample_mood_entries():
    """A week of activity-tagged moods, oldest first."""
    start = datetime(2024, 1, 8, 9, 0, tzinfo=timezone.utc)
    rows = [
        ("sadness", 0.3, ["Work"]),
        ("joy", 0.9, ["Exercise"]),
        ("neutral", 0.5, ["Work", "Reading"]),
        ("calm", 0.7, ["Exercise", "Nature"]),
        ("anger", 0.6, ["Work"]),
        ("joy", 0.8, ["Exercise", "Friends"]),
        ("calm", 0.6, ["Reading"]),
    ]
    return [
        make_mood(mood, intensity, activities, (start + timedelta(days=i)).isoformat())
        for i, (mood, intensity, activities) in enumerate(rows)
    ]


@pytest.fixture
def sample_journal_entries():
    """Pre-populated test journal entries."""
    return [
        make_journal(
            "Went for a run and felt happy and grateful afterwards.",
            mood="joy",
            activities=["Exercise"],
            tags=["running"],
            created_at=f"{TODAY}T08:30:00Z",
            title="Morning run",
        ),
        make_journal(
            "Deadline pressure. I was anxious and worried all afternoon.",
            mood="fear",
            activities=["Work"],
            tags=["work", "deadline"],
            created_at=f"{YESTERDAY}T17:00:00Z",
            title="Work stress",
        ),
        make_journal(
            "A regular day. Everything was fine.",
            mood="neutral",
            tags=["daily"],
            created_at="2024-01-10T20:00:00Z",
            title="Quiet day",
        ),
    ]


@pytest.fixture
def populated_journal(journal_storage, sample_journal_entries):
    for entry in sample_journal_entries:
        journal_storage.save(entry)
    return journal_storage
