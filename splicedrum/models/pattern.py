"""
Pattern data model - the decoded contents of a SPLICE file.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from splicedrum.models.track import Track


@dataclass(frozen=True)
class Pattern:
    """
    A drum machine pattern.

    Patterns are built once by the decoder and never modified.

    Attributes:
        version: HW version string the file was saved with
        tempo: Tempo in BPM (not range checked)
        tracks: Tracks in file order
    """

    version: str = ""
    tempo: float = 0.0
    tracks: Tuple[Track, ...] = ()

    @property
    def track_count(self) -> int:
        """Number of tracks in the pattern."""
        return len(self.tracks)

    def get_track(self, track_id: int) -> Optional[Track]:
        """Get the first track with the given id."""
        for track in self.tracks:
            if track.id == track_id:
                return track
        return None

    def __str__(self) -> str:
        from splicedrum.printout import render_pattern

        return render_pattern(self)
