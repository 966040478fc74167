"""
CLI display modules.
"""

from cli.display.tables import (
    display_pattern_info,
    display_tracks,
    create_tracks_table,
)
from cli.display.formatters import display_text, step_grid, value_bar

__all__ = [
    "display_pattern_info",
    "display_tracks",
    "create_tracks_table",
    "display_text",
    "step_grid",
    "value_bar",
]
