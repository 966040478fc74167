"""
Info command - display pattern header information.
"""

from pathlib import Path

import typer

from cli.display.tables import display_pattern_info, display_tracks
from cli.loader import load_pattern
from splicedrum.formats.splice.reader import SpliceReader


def info(
    file: Path = typer.Argument(..., help="SPLICE file to analyze"),
    tracks: bool = typer.Option(False, "--tracks", "-t", help="Also show the track table"),
) -> None:
    """
    Show version, tempo and size information for a pattern.

    Examples:

        splicedrum info pattern_1.splice

        splicedrum info pattern_1.splice --tracks
    """
    pattern = load_pattern(file)
    file_info = SpliceReader.get_file_info(file)

    display_pattern_info(pattern, file_info)

    if tracks:
        display_tracks(pattern)
