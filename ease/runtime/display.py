"""Rich rendering of the attached-artifacts registry."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table

from ease.runtime.attachments import AttachedArtifacts


def attachments_table(registry: AttachedArtifacts, title: Optional[str] = None) -> Table:
    """Build a table with one row per attached artifact, in attachment order."""
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Coordinate", style="cyan")
    table.add_column("File")
    table.add_column("Exists", justify="center")

    for index, artifact in enumerate(registry, start=1):
        exists = artifact.file is not None and artifact.file.is_file()
        table.add_row(
            str(index),
            artifact.id,
            str(artifact.file) if artifact.file is not None else "-",
            "[green]✓[/green]" if exists else "[red]✗[/red]",
        )
    return table


def print_attachments(
    registry: AttachedArtifacts,
    console: Optional[Console] = None,
    title: Optional[str] = None,
) -> None:
    console = console or Console()
    if not len(registry):
        console.print("No artifacts attached.")
        return
    console.print(attachments_table(registry, title=title))


__all__ = ["attachments_table", "print_attachments"]
