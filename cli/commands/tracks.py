"""
Tracks command - step grid table for every track.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.display.tables import display_tracks
from cli.loader import load_pattern
from splicedrum.models.pattern import Pattern

console = Console()


def tracks(
    file: Path = typer.Argument(..., help="SPLICE file to analyze"),
    track_id: Optional[int] = typer.Option(None, "--id", "-i", help="Show only this track id"),
    hide_silent: bool = typer.Option(
        False, "--hide-silent", "-s", help="Hide tracks with no active steps"
    ),
) -> None:
    """
    Show the step grid of every track.

    Examples:

        splicedrum tracks pattern_1.splice

        splicedrum tracks pattern_1.splice --id 3

        splicedrum tracks pattern_1.splice --hide-silent
    """
    pattern = load_pattern(file)

    selected = pattern.tracks
    if track_id is not None:
        selected = tuple(t for t in selected if t.id == track_id)
        if not selected:
            console.print(f"[red]No track with id {track_id}[/red]")
            raise typer.Exit(1)
    if hide_silent:
        selected = tuple(t for t in selected if not t.is_silent)

    display_tracks(Pattern(version=pattern.version, tempo=pattern.tempo, tracks=selected))
