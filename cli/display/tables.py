"""
Rich table displays for pattern information.
"""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.markup import escape

from splicedrum.models.pattern import Pattern
from splicedrum.printout import format_tempo
from cli.display.formatters import display_text, step_grid, value_bar


console = Console()


def display_pattern_info(pattern: Pattern, file_info: Optional[dict] = None) -> None:
    """Display pattern header information with Rich formatting."""
    lines = []
    if file_info is not None:
        lines.append(f"[bold]File Size:[/bold] {file_info['size']} bytes")
        lines.append(f"[bold]Payload Size:[/bold] {file_info['payload_size']} bytes")
        if file_info["trailing_bytes"]:
            lines.append(
                f"[bold]Trailing Data:[/bold] [yellow]{file_info['trailing_bytes']} bytes (ignored)[/yellow]"
            )

    lines.append(f"[bold]HW Version:[/bold] {escape(display_text(pattern.version)) or '[dim]N/A[/dim]'}")
    lines.append(f"[bold]Tempo:[/bold] {format_tempo(pattern.tempo)} BPM")
    lines.append(f"[bold]Tracks:[/bold] {pattern.track_count}")

    console.print(
        Panel(
            "\n".join(lines),
            title="[bold blue]SPLICE Pattern Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )


def create_tracks_table(pattern: Pattern) -> Table:
    """Build a table with one row per track."""
    table = Table(
        title="Tracks",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Steps", no_wrap=True)
    table.add_column("Active", no_wrap=True)

    for track in pattern.tracks:
        active = len(track.active_steps)
        table.add_row(
            str(track.id),
            escape(display_text(track.name)) or "[dim](unnamed)[/dim]",
            step_grid(track.steps),
            value_bar(active, width=8) if active else "[dim] 0 silent[/dim]",
        )

    return table


def display_tracks(pattern: Pattern) -> None:
    """Display all tracks of a pattern."""
    if not pattern.tracks:
        console.print("[yellow]Pattern has no tracks[/yellow]")
        return

    console.print(create_tracks_table(pattern))
