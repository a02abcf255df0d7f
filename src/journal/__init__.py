from .export import DataExporter
from .models import JournalEntry, JournalFilter
from .sentiment import analyze_entry, analyze_timeline
from .storage import JournalStorage

__all__ = ["JournalEntry", "JournalFilter", "JournalStorage", "DataExporter", "analyze_entry", "analyze_timeline"]
