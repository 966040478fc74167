"""
Text printout of decoded patterns.

Produces the canonical text form:

    Saved with HW Version: 0.808-alpha
    Tempo: 120
    (0) kick	|x---|x---|x---|x---|
    (1) snare	|----|x---|----|x---|
"""

import math
import struct
from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from splicedrum.models.pattern import Pattern
from splicedrum.models.track import Track


@dataclass(frozen=True)
class PrintoutStyle:
    """
    Symbols used to draw step grids.
    """

    block_size: int = 4
    separator: str = "|"
    step_on: str = "x"
    step_off: str = "-"


DEFAULT_STYLE = PrintoutStyle()


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _shortest_digits(value: float) -> str:
    """Shortest %g string that reads back as the same float32."""
    try:
        target = _to_float32(value)
    except OverflowError:
        return repr(value)

    for precision in range(1, 10):
        digits = f"{target:.{precision}g}"
        if _to_float32(float(digits)) == target:
            return digits
    return repr(target)


def format_tempo(tempo: float) -> str:
    """
    Format a tempo value.

    Uses the shortest decimal form of the 32-bit float, with no trailing
    ".0" (120.0 -> "120", 98.4 -> "98.4"). Exponent form is used below 1e-4
    and from 1e6 upward (1e6 -> "1e+06").
    """
    if math.isnan(tempo):
        return "NaN"
    if math.isinf(tempo):
        return "+Inf" if tempo > 0 else "-Inf"

    digits = _shortest_digits(tempo)
    number = Decimal(digits)
    exponent = number.adjusted()

    if exponent < -4 or exponent >= 6:
        significant = len(number.normalize().as_tuple().digits)
        return f"{float(digits):.{significant - 1}e}"

    text = format(number, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_steps(steps: Sequence[bool], style: PrintoutStyle = DEFAULT_STYLE) -> str:
    """
    Draw a step grid.

    Returns:
        String like "|x---|x---|x---|x---|"
    """
    parts = []
    for i, enabled in enumerate(steps):
        if i % style.block_size == 0:
            parts.append(style.separator)
        parts.append(style.step_on if enabled else style.step_off)
    parts.append(style.separator)
    return "".join(parts)


def format_track(track: Track, style: PrintoutStyle = DEFAULT_STYLE) -> str:
    """Format one track line (without newline)."""
    return f"({track.id}) {track.name}\t{format_steps(track.steps, style)}"


def render_pattern(pattern: Pattern, style: PrintoutStyle = DEFAULT_STYLE) -> str:
    """
    Render a pattern in the printout format.

    Args:
        pattern: Decoded pattern
        style: Step grid symbols

    Returns:
        Multi-line string, each line terminated by a newline
    """
    lines = [
        f"Saved with HW Version: {pattern.version}",
        f"Tempo: {format_tempo(pattern.tempo)}",
    ]
    for track in pattern.tracks:
        lines.append(format_track(track, style))
    return "\n".join(lines) + "\n"
