"""
Dump command - annotated hex dump of a SPLICE file.
"""

import struct
from pathlib import Path
from typing import List, Tuple

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from cli.loader import check_exists
from splicedrum.formats.splice.layout import SpliceLayout

console = Console()

Region = Tuple[int, int, str, str, str]

# Fixed regions with start, end, name, description, and color
HEADER_REGIONS: List[Region] = [
    (SpliceLayout.MAGIC_OFFSET, SpliceLayout.PAYLOAD_SIZE_OFFSET, "MAGIC", "Identifier \"SPLICE\"", "bright_blue"),
    (SpliceLayout.PAYLOAD_SIZE_OFFSET, SpliceLayout.VERSION_OFFSET, "SIZE", "Payload size (big-endian)", "cyan"),
    (SpliceLayout.VERSION_OFFSET, SpliceLayout.TEMPO_OFFSET, "VERSION", "HW version string", "green"),
    (SpliceLayout.TEMPO_OFFSET, SpliceLayout.TRACKS_OFFSET, "TEMPO", "Tempo (little-endian float)", "yellow"),
]


def build_regions(data: bytes) -> List[Region]:
    """
    Build the region map for a file.

    The track region ends where the declared payload ends; anything after
    it is reported as trailing data.
    """
    regions = [r for r in HEADER_REGIONS if r[0] < len(data)]

    payload_end = len(data)
    if len(data) >= SpliceLayout.HEADER_SIZE:
        payload_size = struct.unpack(
            SpliceLayout.PAYLOAD_SIZE_FORMAT,
            data[SpliceLayout.PAYLOAD_SIZE_OFFSET : SpliceLayout.HEADER_SIZE],
        )[0]
        payload_end = min(len(data), SpliceLayout.HEADER_SIZE + max(0, payload_size))

    if payload_end > SpliceLayout.TRACKS_OFFSET:
        regions.append((SpliceLayout.TRACKS_OFFSET, payload_end, "TRACKS", "Track records", "magenta"))

    trailing_start = max(payload_end, SpliceLayout.TRACKS_OFFSET)
    if len(data) > trailing_start:
        regions.append((trailing_start, len(data), "TRAILING", "Data after payload (ignored)", "dim"))

    return regions


def get_region_for_offset(regions: List[Region], offset: int) -> Tuple[str, str, str]:
    """Get region name, description, and color for an offset."""
    for start, end, name, desc, color in regions:
        if start <= offset < end:
            return name, desc, color
    return "UNKNOWN", "Unknown region", "white"


def format_hex_line(data: bytes, offset: int, regions: List[Region], bytes_per_line: int = 16) -> Text:
    """
    Format a single line of hex dump.

    Each byte is colored by the region it belongs to; the line is tagged
    with the region of its first byte.
    """
    region_name, _, _ = get_region_for_offset(regions, offset)

    text = Text()
    text.append(f"0x{offset:04X} ", style="dim")
    text.append(f"[{region_name:8s}] ")

    for i, byte in enumerate(data):
        _, _, color = get_region_for_offset(regions, offset + i)
        style = "dim" if byte == 0x00 else color
        text.append(f"{byte:02X}", style=style)
        text.append(" ")

    if len(data) < bytes_per_line:
        text.append("   " * (bytes_per_line - len(data)))

    text.append(" ", style="dim")
    for byte in data:
        if 32 <= byte < 127:
            text.append(chr(byte), style="green")
        elif byte == 0x01:
            text.append("•", style="bold yellow")
        else:
            text.append(".", style="dim")

    return text


def create_legend(regions: List[Region]) -> Table:
    """Create a legend for the hex dump colors."""
    table = Table(title="Legend", box=box.SIMPLE, show_header=False, expand=False)
    table.add_column("Region", width=10)
    table.add_column("Description", width=44)

    for start, end, name, desc, color in regions:
        table.add_row(
            Text(name, style=color),
            f"{desc} ({end - start} bytes, 0x{start:04X}-0x{end - 1:04X})",
        )

    return table


def dump(
    file: Path = typer.Argument(..., help="SPLICE file to dump"),
    width: int = typer.Option(16, "--width", "-w", min=1, help="Bytes per line"),
    max_lines: int = typer.Option(0, "--max-lines", "-m", min=0, help="Maximum lines (0=all)"),
    no_legend: bool = typer.Option(False, "--no-legend", help="Hide the legend"),
) -> None:
    """
    Annotated hex dump of a SPLICE file.

    Works on damaged files too, since nothing is decoded.

    Examples:

        splicedrum dump pattern_1.splice

        splicedrum dump pattern_1.splice --width 8 --max-lines 10
    """
    check_exists(file)

    with open(file, "rb") as f:
        data = f.read()

    regions = build_regions(data)

    if not no_legend:
        console.print(create_legend(regions))
        console.print()

    console.print(
        Panel(
            f"[bold]File:[/bold] {file}\n[bold]Size:[/bold] {len(data)} bytes",
            title="[bold]SPLICE Hex Dump[/bold]",
            border_style="blue",
            expand=False,
        )
    )

    lines_shown = 0
    for offset in range(0, len(data), width):
        if max_lines and lines_shown >= max_lines:
            remaining = len(data) - offset
            console.print(f"[dim]... {remaining} more bytes ...[/dim]")
            break
        console.print(format_hex_line(data[offset : offset + width], offset, regions, width), soft_wrap=True)
        lines_shown += 1

    console.print(f"[dim]Total: {lines_shown} lines displayed[/dim]")
