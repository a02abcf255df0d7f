"""Mood tracking CLI commands."""

from datetime import datetime, timedelta, timezone

import click
from rich.console import Console
from rich.table import Table

from cli.utils import cap_entries, get_components, parse_activity_option, print_custom_activities
from shared_types import ActivityTrend, Confidence, InsightType, MoodType

console = Console()

MOOD_BAR = {
    MoodType.JOY: "[green]██[/]",
    MoodType.CALM: "[cyan]██[/]",
    MoodType.SURPRISE: "[magenta]██[/]",
    MoodType.NEUTRAL: "[dim]██[/]",
    MoodType.FEAR: "[yellow]██[/]",
    MoodType.ANGER: "[red]██[/]",
    MoodType.SADNESS: "[blue]██[/]",
}

CONFIDENCE_STYLE = {
    Confidence.LOW: "[dim]Low[/]",
    Confidence.MEDIUM: "[yellow]Medium[/]",
    Confidence.HIGH: "[green]High[/]",
}

TREND_MARK = {
    ActivityTrend.IMPROVING: "[green]+[/]",
    ActivityTrend.DECLINING: "[red]-[/]",
    ActivityTrend.STABLE: "[dim]=[/]",
}

INSIGHT_ICON = {
    InsightType.BOOST: "[green]▲[/]",
    InsightType.CHALLENGE: "[red]▼[/]",
    InsightType.TREND: "[cyan]↗[/]",
    InsightType.COMBINATION: "[magenta]+[/]",
}


@click.group()
def mood():
    """Log moods and see which activities help."""
    pass


@mood.command("log")
@click.argument("mood_type", metavar="MOOD", type=click.Choice([m.value for m in MoodType]))
@click.option(
    "-i", "--intensity", default=0.5, type=click.FloatRange(0.0, 1.0), help="Intensity from 0 to 1"
)
@click.option("-a", "--activity", "activities", multiple=True, help="Activity tag (repeatable)")
@click.option("-n", "--notes", default="", help="Optional notes")
def mood_log(mood_type: str, intensity: float, activities: tuple, notes: str):
    """Log a mood entry."""
    from mood.models import MoodEntry

    c = get_components()
    entry = MoodEntry(
        mood=mood_type,
        intensity=intensity,
        activities=parse_activity_option(activities),
        notes=notes,
    )
    c["mood_store"].save(entry)
    console.print(f"[green]Logged:[/] {mood_type} ({intensity:.1f}) [dim]{entry.id}[/]")
    print_custom_activities(entry.activities)


@mood.command("list")
@click.option("-d", "--days", default=7, help="Lookback days")
def mood_list(days: int):
    """Show mood entries from the last N days."""
    c = get_components()
    end = datetime.now(timezone.utc)
    entries = c["mood_store"].get_by_date_range(end - timedelta(days=days), end)

    if not entries:
        console.print("[yellow]No mood entries found. Log one with `mood log`.[/]")
        return

    table = Table(show_header=True, title=f"Moods - last {days} days")
    table.add_column("When", style="dim")
    table.add_column("Mood")
    table.add_column("Intensity", justify="right")
    table.add_column("Activities")
    table.add_column("ID", style="dim")

    for e in entries:
        bar = MOOD_BAR.get(e.mood, "[dim]██[/]")
        intensity = f"{e.intensity:.1f}" if isinstance(e.intensity, (int, float)) else "?"
        table.add_row(
            str(e.timestamp)[:16].replace("T", " "),
            f"{bar} {e.mood}",
            intensity,
            ", ".join(e.activities[:4]),
            e.id,
        )

    console.print(table)


@mood.command("delete")
@click.argument("entry_id")
def mood_delete(entry_id: str):
    """Delete a mood entry by id."""
    c = get_components()
    if c["mood_store"].delete(entry_id):
        console.print(f"[green]Deleted[/] {entry_id}")
    else:
        console.print(f"[red]Not found:[/] {entry_id}")
        raise SystemExit(1)


@mood.command("clear")
@click.option("--yes", is_flag=True, help="Skip confirmation")
def mood_clear(yes: bool):
    """Delete every mood entry."""
    if not yes:
        click.confirm("Delete all mood entries?", abort=True)
    c = get_components()
    removed = c["mood_store"].clear()
    console.print(f"[green]Removed {removed} mood entries[/]")


@mood.command("correlations")
def mood_correlations():
    """Rank activities by their effect on your mood."""
    from mood.correlation import ActivityCorrelationAnalyzer

    c = get_components()
    analytics = c["config"].analytics
    entries = cap_entries(c["mood_store"].list_all(), analytics.max_entries)

    analyzer = ActivityCorrelationAnalyzer()
    correlations = analyzer.analyze_activity_correlations(entries)

    if not correlations:
        console.print("[yellow]No activity data yet. Tag mood entries with activities.[/]")
        return

    table = Table(show_header=True, title="Activity effects")
    table.add_column("Activity")
    table.add_column("Entries", justify="right")
    table.add_column("Avg score", justify="right")
    table.add_column("vs baseline", justify="right")
    table.add_column("Share", justify="right")
    table.add_column("Confidence")
    table.add_column("Trend", justify="center")

    for corr in correlations:
        style = "green" if corr.improvement_score > 0 else "red" if corr.improvement_score < 0 else "dim"
        table.add_row(
            corr.activity,
            str(corr.total_entries),
            f"{corr.average_mood_score:.1f}",
            f"[{style}]{corr.improvement_score:+.2f}[/]",
            f"{corr.frequency:.0%}",
            CONFIDENCE_STYLE[corr.confidence],
            TREND_MARK.get(corr.trend, ""),
        )

    console.print(table)

    insights = analyzer.generate_insights(correlations, limit=analytics.insight_limit)
    if insights:
        console.print("\n[bold]Insights[/]")
        for insight in insights:
            console.print(f"  {INSIGHT_ICON[insight.type]} {insight.message}")
