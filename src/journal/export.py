"""JSON export/import of mood and journal entries."""

import json
from datetime import datetime
from pathlib import Path

import structlog

from mood.models import MoodEntry
from mood.store import MoodStore

from .models import JournalEntry
from .storage import JournalStorage

logger = structlog.get_logger()

# Keys used by the mobile app's local storage dump
APP_MOOD_KEY = "@MoodJourney:moodEntries"
APP_JOURNAL_KEY = "@MoodJourney:journalEntries"


class DataExporter:
    """Export and import entries as a single JSON document."""

    def __init__(self, mood_store: MoodStore, journal_storage: JournalStorage):
        self.mood_store = mood_store
        self.journal_storage = journal_storage

    def export_json(self, output_path: Path) -> dict:
        """Write every entry to JSON.

        Returns:
            {"mood_entries": n, "journal_entries": m}
        """
        moods = [e.to_dict() for e in self.mood_store.list_all()]
        journals = [e.to_dict() for e in self.journal_storage.list_all()]

        export_data = {
            "exported_at": datetime.now().isoformat(),
            "mood_entries": moods,
            "journal_entries": journals,
        }

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w") as f:
            json.dump(export_data, f, indent=2, default=str)

        counts = {"mood_entries": len(moods), "journal_entries": len(journals)}
        logger.info("data_exported", path=str(output_path), **counts)
        return counts

    def import_json(self, input_path: Path) -> dict:
        """Load entries from an export file or a mobile app storage dump.

        Records replace existing ones with the same id. A journal record
        that cannot be saved rejects the whole file; nothing is written.

        Raises:
            ValueError: If the file is not valid JSON, has neither shape,
                or holds a journal record the storage would refuse
        """
        try:
            with open(input_path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {input_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError("Import file must contain a JSON object")

        moods = data.get("mood_entries", data.get(APP_MOOD_KEY))
        journals = data.get("journal_entries", data.get(APP_JOURNAL_KEY))
        if moods is None and journals is None:
            raise ValueError("No mood or journal entries found in import file")

        # The app stores each collection as a JSON string
        moods = self._decode_collection(moods)
        journals = self._decode_collection(journals)

        mood_entries = [MoodEntry.from_dict(r) for r in moods]
        journal_entries = [JournalEntry.from_dict(r) for r in journals]

        # Reject the whole file before anything is written
        for entry in journal_entries:
            try:
                self.journal_storage.validate(entry)
            except ValueError as e:
                raise ValueError(f"Journal entry {entry.id!r} rejected: {e}")

        self.mood_store.save_many(mood_entries)
        for entry in journal_entries:
            self.journal_storage.save(entry)

        counts = {"mood_entries": len(moods), "journal_entries": len(journals)}
        logger.info("data_imported", path=str(input_path), **counts)
        return counts

    @staticmethod
    def _decode_collection(value) -> list[dict]:
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid embedded JSON collection: {e}")
        if not isinstance(value, list):
            return []
        return [r for r in value if isinstance(r, dict)]
