"""Journal CLI commands."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import click
import structlog
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from cli.utils import (
    cap_entries,
    get_components,
    parse_activity_option,
    parse_list_option,
    print_custom_activities,
)
from shared_types import EmotionCategory, MoodType, TimelinePeriod

console = Console()
logger = structlog.get_logger()

EMOTION_STYLE = {
    EmotionCategory.JOY: "green",
    EmotionCategory.SADNESS: "blue",
    EmotionCategory.ANGER: "red",
    EmotionCategory.FEAR: "yellow",
    EmotionCategory.SURPRISE: "magenta",
    EmotionCategory.NEUTRAL: "dim",
}

MOOD_CHOICES = click.Choice([m.value for m in MoodType])


def _print_analysis(result) -> None:
    style = EMOTION_STYLE[result.dominant_emotion]
    console.print(f"Dominant emotion: [{style}]{result.dominant_emotion}[/]")

    shares = [
        f"{emotion} {share:.0f}%"
        for emotion, share in sorted(result.emotion_distribution.items(), key=lambda kv: -kv[1])
        if share > 0
    ]
    console.print(f"[dim]{', '.join(shares)}[/]")

    if result.highlighted_words:
        words = sorted({w.word for w in result.highlighted_words})
        console.print(f"Emotion words: {', '.join(words)}")
    console.print(f"Mood alignment: {result.mood_alignment:.0%}")
    if result.suggested_tags:
        console.print(f"Suggested activities: {', '.join(result.suggested_tags)}")


@click.group()
def journal():
    """Manage journal entries."""
    pass


@journal.command("add")
@click.option("--title", help="Entry title (defaults to date)")
@click.option("-m", "--mood", "mood_type", default="neutral", type=MOOD_CHOICES, help="How you feel")
@click.option("-a", "--activity", "activities", multiple=True, help="Activity tag (repeatable)")
@click.option("-t", "--tag", "tags", multiple=True, help="Free-form tag (repeatable)")
@click.argument("content", required=False)
def journal_add(title: str, mood_type: str, activities: tuple, tags: tuple, content: str):
    """Add new journal entry. Opens editor if no content provided."""
    from journal.models import JournalEntry
    from journal.sentiment import analyze_entry

    c = get_components()

    if not content:
        content = click.edit("# Write your entry here\n\n")
        if not content:
            console.print("[yellow]No content provided, cancelled.[/]")
            return

    entry = JournalEntry(
        title=title or datetime.now().strftime("%B %d, %Y"),
        content=content,
        mood=mood_type,
        activities=parse_activity_option(activities),
        tags=parse_list_option(tags),
    )

    try:
        c["journal_storage"].save(entry)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1)

    logger.info("journal_entry_created", entry_id=entry.id, mood=entry.mood, chars=len(entry.content))
    console.print(f"[green]Created:[/] {entry.title} [dim]{entry.id}[/]")
    print_custom_activities(entry.activities)
    _print_analysis(analyze_entry(entry))


@journal.command("list")
@click.option("--tag", help="Filter by tag")
@click.option("-n", "--limit", default=10, help="Max entries to show")
def journal_list(tag: Optional[str], limit: int):
    """List recent journal entries."""
    c = get_components()
    entries = c["journal_storage"].list_all()

    if tag:
        entries = [e for e in entries if tag in e.tags]
    entries = entries[:limit]

    if not entries:
        console.print("[yellow]No entries found.[/]")
        return

    _print_entry_table(entries)


def _print_entry_table(entries) -> None:
    table = Table(show_header=True)
    table.add_column("Date", style="cyan")
    table.add_column("Mood", style="green")
    table.add_column("Title")
    table.add_column("Tags", style="dim")
    table.add_column("ID", style="dim")

    for e in entries:
        date = str(e.created_at)[:10] or "?"
        tags = ", ".join(e.tags[:3])
        table.add_row(date, e.mood, e.title[:40], tags, e.id)

    console.print(table)


@journal.command("view")
@click.argument("entry_id")
def journal_view(entry_id: str):
    """View a journal entry."""
    c = get_components()
    try:
        entry = c["journal_storage"].get(entry_id)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1)

    if entry is None:
        console.print(f"[red]Not found:[/] {entry_id}")
        raise SystemExit(1)

    console.print(f"[bold cyan]{entry.title}[/]  [dim]{str(entry.created_at)[:16]}[/]")
    console.print(f"[dim]mood: {entry.mood}  activities: {', '.join(entry.activities) or '-'}[/]\n")
    console.print(Markdown(entry.content))


@journal.command("search")
@click.argument("query", required=False)
@click.option("-m", "--mood", "moods", multiple=True, type=MOOD_CHOICES, help="Mood (repeatable)")
@click.option("-t", "--tag", "tags", multiple=True, help="Tag (repeatable)")
@click.option("-a", "--activity", "activities", multiple=True, help="Activity (repeatable)")
@click.option("--since", help="Start date (YYYY-MM-DD)")
@click.option("--until", help="End date (YYYY-MM-DD), inclusive")
def journal_search(query, moods, tags, activities, since, until):
    """Search entries by text, mood, tags, activities and date."""
    from journal.models import JournalFilter

    c = get_components()
    journal_filter = JournalFilter(
        search_text=query,
        moods=list(moods) or None,
        tags=parse_list_option(tags) or None,
        activities=parse_activity_option(activities) or None,
        start_date=since,
        # Bare end dates cover the whole day
        end_date=f"{until}T23:59:59.999Z" if until and "T" not in until else until,
    )
    results = c["journal_storage"].search(journal_filter)

    if not results:
        console.print("[yellow]No matches found.[/]")
        return

    _print_entry_table(results)


@journal.command("delete")
@click.argument("entry_id")
def journal_delete(entry_id: str):
    """Delete a journal entry by id."""
    c = get_components()
    try:
        deleted = c["journal_storage"].delete(entry_id)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1)

    if deleted:
        console.print(f"[green]Deleted[/] {entry_id}")
    else:
        console.print(f"[red]Not found:[/] {entry_id}")
        raise SystemExit(1)


@journal.command("analyze")
@click.argument("entry_id")
def journal_analyze(entry_id: str):
    """Show the emotional analysis of one entry."""
    from journal.sentiment import analyze_entry

    c = get_components()
    try:
        entry = c["journal_storage"].get(entry_id)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1)

    if entry is None:
        console.print(f"[red]Not found:[/] {entry_id}")
        raise SystemExit(1)

    console.print(f"[bold cyan]{entry.title}[/]")
    _print_analysis(analyze_entry(entry))


def _recent_entries(c: dict, days: Optional[int]) -> list:
    analytics = c["config"].analytics
    days = days or analytics.history_days
    cutoff = (datetime.now(timezone.utc) - timedelta(days=days)).date().isoformat()
    entries = [e for e in c["journal_storage"].list_all() if str(e.created_at) >= cutoff]
    entries.reverse()  # oldest first
    return cap_entries(entries, analytics.max_entries)


@journal.command("timeline")
@click.option("-d", "--days", type=int, help="Lookback days (default from config)")
@click.option(
    "-p",
    "--period",
    default=TimelinePeriod.DAY.value,
    type=click.Choice([p.value for p in TimelinePeriod]),
    help="Display period label",
)
def journal_timeline(days: Optional[int], period: str):
    """Emotion distribution per day."""
    from journal.sentiment import analyze_timeline

    c = get_components()
    entries = _recent_entries(c, days)
    timeline = analyze_timeline(entries, period)

    if not timeline.emotion_trends:
        console.print("[yellow]No entries found. Add journal entries to track emotions.[/]")
        return

    table = Table(show_header=True, title=f"Emotions by {timeline.period}")
    table.add_column("Date", style="dim")
    for emotion in EmotionCategory:
        table.add_column(emotion.value.capitalize(), justify="right", style=EMOTION_STYLE[emotion])

    for trend in timeline.emotion_trends:
        table.add_row(trend.date, *(f"{trend.emotions[e]:.0f}%" for e in EmotionCategory))

    console.print(table)


@journal.command("insights")
@click.option("-d", "--days", type=int, help="Lookback days (default from config)")
def journal_insights(days: Optional[int]):
    """Patterns across recent entries."""
    from journal.sentiment import analyze_entry, get_insights

    c = get_components()
    results = [analyze_entry(e) for e in _recent_entries(c, days)]
    insights = get_insights(results)

    if not insights:
        console.print("[yellow]Not enough entries for insights.[/]")
        return

    for line in insights:
        console.print(f"  • {line}")
