"""Data export and import CLI commands."""

from pathlib import Path

import click
from rich.console import Console

from cli.utils import get_components

console = Console()


@click.command("export")
@click.argument("output", type=click.Path(dir_okay=False))
def export_data(output: str):
    """Export all mood and journal entries to a JSON file."""
    c = get_components()
    with console.status("Exporting..."):
        counts = c["exporter"].export_json(Path(output))
    console.print(
        f"[green]Exported[/] {counts['mood_entries']} mood and "
        f"{counts['journal_entries']} journal entries to {output}"
    )


@click.command("import")
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
def import_data(source: str):
    """Import entries from an export file or a mobile app storage dump."""
    c = get_components()
    try:
        counts = c["exporter"].import_json(Path(source))
    except ValueError as e:
        console.print(f"[red]Import failed:[/] {e}")
        raise SystemExit(1)
    console.print(
        f"[green]Imported[/] {counts['mood_entries']} mood and "
        f"{counts['journal_entries']} journal entries"
    )
