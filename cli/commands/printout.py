"""
Print command - canonical text printout of a pattern.
"""

from pathlib import Path

import typer

from cli.loader import load_pattern
from splicedrum.formats.splice.decoder import encode_text
from splicedrum.printout import render_pattern


def printout(
    file: Path = typer.Argument(..., help="SPLICE file to print"),
) -> None:
    """
    Print a pattern as text step grids.

    The output is plain text with no colors. Names and the version are
    written back as the bytes stored in the file:

        Saved with HW Version: 0.808-alpha
        Tempo: 120
        (0) kick	|x---|x---|x---|x---|

    Examples:

        splicedrum print pattern_1.splice
    """
    pattern = load_pattern(file)
    typer.echo(encode_text(render_pattern(pattern)), nl=False)
