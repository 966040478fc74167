"""
splicedrum - Decoder for SPLICE drum machine pattern files.

A small CLI for printing and inspecting .splice patterns.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from splicedrum import __version__
from cli.commands.printout import printout
from cli.commands.info import info
from cli.commands.tracks import tracks
from cli.commands.dump import dump

console = Console()

# Main app
app = typer.Typer(
    name="splicedrum",
    help="Decode and inspect SPLICE drum machine pattern files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="print")(printout)
app.command(name="info")(info)
app.command(name="tracks")(tracks)
app.command(name="dump")(dump)


def setup_logging() -> None:
    """Send library log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]splicedrum[/bold] version {__version__}")
    console.print("[dim]Decoder for SPLICE drum machine pattern files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log decoding steps"),
) -> None:
    """
    splicedrum - Decode SPLICE drum machine patterns.

    [bold]Quick Start:[/bold]

        splicedrum print pattern_1.splice    # Text printout
        splicedrum info pattern_1.splice     # Header information

    [bold]Analysis Commands:[/bold]

        splicedrum tracks pattern_1.splice   # Step grid table
        splicedrum dump pattern_1.splice     # Annotated hex dump

    Use --help with any command for more details.
    """
    if verbose:
        setup_logging()

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
