"""Today's dashboard summary CLI command."""

import click
from rich.console import Console
from rich.panel import Panel

from cli.utils import cap_entries, get_components

console = Console()


@click.command()
def today():
    """Summarize what you logged today."""
    from mood.summary import TodaySummaryService

    c = get_components()
    max_entries = c["config"].analytics.max_entries
    moods = cap_entries(c["mood_store"].list_all(), max_entries)
    journals = c["journal_storage"].list_all()[:max_entries]

    summary = TodaySummaryService.calculate_todays_summary(moods, journals)
    if not summary.has_data:
        console.print("[yellow]Nothing logged today yet. Try `mood log` or `journal add`.[/]")
        return

    text = TodaySummaryService.format_summary_text(summary)
    lines = [
        f"[bold]{text.mood_text}[/]",
        text.activity_text,
        text.trend_text,
    ]
    if text.intensity_text:
        lines.append(text.intensity_text)
    lines.append(f"[dim]{summary.mood_count} moods, {summary.journal_count} journal entries[/]")

    console.print(Panel("\n".join(lines), title="Today", expand=False))
