"""CLI command modules."""

from .export import export_data, import_data
from .journal import journal
from .mood import mood
from .today import today

__all__ = [
    "journal",
    "mood",
    "today",
    "export_data",
    "import_data",
]
