"""Shared CLI utilities."""

import structlog
from rich.console import Console

from shared_types import ACTIVITY_TAGS, canonical_activity

console = Console()
logger = structlog.get_logger()


def get_components() -> dict:
    """Initialize stores from config. One instance of each per invocation."""
    from cli.config import load_config
    from journal import DataExporter, JournalStorage
    from mood import MoodStore

    config = load_config()

    mood_store = MoodStore(config.paths.mood_db)
    journal_storage = JournalStorage(config.paths.journal_dir)

    return {
        "config": config,
        "mood_store": mood_store,
        "journal_storage": journal_storage,
        "exporter": DataExporter(mood_store, journal_storage),
    }


def cap_entries(entries: list, max_entries: int) -> list:
    """Keep the most recent max_entries of a chronologically ordered list."""
    if len(entries) <= max_entries:
        return entries
    logger.info("entries_capped", total=len(entries), kept=max_entries)
    return entries[-max_entries:]


def parse_list_option(values) -> list[str]:
    """Flatten repeated and comma-separated option values."""
    result = []
    for value in values or ():
        result.extend(v.strip() for v in value.split(",") if v.strip())
    return result


def parse_activity_option(values) -> list[str]:
    """Like parse_list_option, with known activity tags in their standard spelling."""
    return [canonical_activity(tag) for tag in parse_list_option(values)]


def print_custom_activities(activities: list[str]) -> None:
    """Note any tags outside the standard activity list."""
    custom = [a for a in activities if a not in ACTIVITY_TAGS]
    if custom:
        console.print(f"[dim]Custom activities: {', '.join(custom)}[/]")
