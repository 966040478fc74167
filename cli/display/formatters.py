"""
Display formatting utilities for CLI output.

Provides step grid and bar graphics, and terminal-safe text.
"""

from typing import Sequence

from rich.text import Text

from splicedrum.formats.splice.decoder import encode_text
from splicedrum.printout import DEFAULT_STYLE, PrintoutStyle


def display_text(text: str) -> str:
    """Replace bytes that are not valid UTF-8 with U+FFFD for display."""
    return encode_text(text).decode("utf-8", "replace")


def step_grid(steps: Sequence[bool], style: PrintoutStyle = DEFAULT_STYLE) -> Text:
    """
    Create a colored step grid.

    Downbeats (first step of each block) are drawn brighter than the
    other steps.

    Returns:
        Rich Text like "|x---|x---|x---|x---|"
    """
    text = Text()
    for i, enabled in enumerate(steps):
        if i % style.block_size == 0:
            text.append(style.separator, style="dim")
        if enabled:
            text.append(style.step_on, style="bold green" if i % style.block_size == 0 else "green")
        else:
            text.append(style.step_off, style="dim")
    text.append(style.separator, style="dim")
    return text


def value_bar(
    value: int,
    max_value: int = 16,
    width: int = 16,
    filled_char: str = "█",
    empty_char: str = "░",
    show_value: bool = True,
) -> str:
    """
    Create a text-based bar graphic.

    Args:
        value: Current value
        max_value: Maximum value (default 16 steps)
        width: Bar width in characters
        filled_char: Character for filled portion
        empty_char: Character for empty portion
        show_value: Show numeric value

    Returns:
        Formatted string like " 4 [████░░░░░░░░░░░░]"
    """
    if max_value <= 0:
        max_value = 1

    clamped = max(0, min(value, max_value))
    fill_count = int((clamped / max_value) * width)
    bar = filled_char * fill_count + empty_char * (width - fill_count)

    if show_value:
        return f"{value:2d} [{bar}]"
    return f"[{bar}]"
