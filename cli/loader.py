"""
Shared file loading for CLI commands.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from splicedrum.formats.splice.decoder import decode_file
from splicedrum.models.pattern import Pattern
from splicedrum.utils.errors import SpliceError, describe_error

console = Console(stderr=True)


def check_exists(file: Path) -> None:
    """Exit with an error if the file does not exist."""
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)


def load_pattern(file: Path) -> Pattern:
    """
    Decode a SPLICE file, exiting with code 1 on failure.

    Args:
        file: Path to .splice file

    Returns:
        Decoded Pattern
    """
    check_exists(file)

    try:
        return decode_file(file)
    except SpliceError as e:
        console.print(f"[red]Error: {escape(describe_error(e, str(file)))}[/red]", highlight=False)
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Error: cannot read {file}: {escape(str(e.strerror or e))}[/red]", highlight=False)
        raise typer.Exit(1)
