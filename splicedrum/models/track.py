"""
Track data model for SPLICE patterns.
"""

from dataclasses import dataclass, field
from typing import Tuple

STEPS_PER_TRACK = 16


def _empty_steps() -> Tuple[bool, ...]:
    return (False,) * STEPS_PER_TRACK


@dataclass(frozen=True)
class Track:
    """
    A single percussion track.

    Each track plays one sound on a grid of 16 sixteenth-note steps
    (one bar of 4/4).

    Attributes:
        id: Track id as stored in the file
        name: Instrument name (e.g. "kick", "hh-open")
        steps: 16 on/off flags, one per step
    """

    id: int = 0
    name: str = ""
    steps: Tuple[bool, ...] = field(default_factory=_empty_steps)

    def __post_init__(self):
        if len(self.steps) != STEPS_PER_TRACK:
            raise ValueError(
                f"Track needs {STEPS_PER_TRACK} steps, got {len(self.steps)}"
            )

    @property
    def active_steps(self) -> Tuple[int, ...]:
        """Indices (0-15) of the steps that are on."""
        return tuple(i for i, on in enumerate(self.steps) if on)

    @property
    def is_silent(self) -> bool:
        """Check if no step is on."""
        return not any(self.steps)
