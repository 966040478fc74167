"""Data models for SPLICE pattern representation."""

from splicedrum.models.pattern import Pattern
from splicedrum.models.track import Track, STEPS_PER_TRACK

__all__ = [
    "Pattern",
    "Track",
    "STEPS_PER_TRACK",
]
