"""Test configuration and fixtures."""

import struct
from typing import List, Optional, Sequence, Tuple

import pytest

PATTERN_1_TRACKS = [
    (0, "kick", "x---|x---|x---|x---"),
    (1, "snare", "----|x---|----|x---"),
    (2, "clap", "----|x-x-|----|----"),
    (3, "hh-open", "--x-|--x-|x-x-|--x-"),
    (4, "hh-close", "x---|x---|----|x--x"),
    (5, "cowbell", "----|----|--x-|----"),
]

PATTERN_1_PRINTOUT = """Saved with HW Version: 0.808-alpha
Tempo: 120
(0) kick\t|x---|x---|x---|x---|
(1) snare\t|----|x---|----|x---|
(2) clap\t|----|x-x-|----|----|
(3) hh-open\t|--x-|--x-|x-x-|--x-|
(4) hh-close\t|x---|x---|----|x--x|
(5) cowbell\t|----|----|--x-|----|
"""

PATTERN_2_TRACKS = [
    (0, "kick", "x---|----|x---|----"),
    (1, "snare", "----|x---|----|x---"),
    (3, "hh-open", "--x-|--x-|x-x-|--x-"),
    (5, "cowbell", "----|----|x---|----"),
]

PATTERN_2_PRINTOUT = """Saved with HW Version: 0.808-alpha
Tempo: 98.4
(0) kick\t|x---|----|x---|----|
(1) snare\t|----|x---|----|x---|
(3) hh-open\t|--x-|--x-|x-x-|--x-|
(5) cowbell\t|----|----|x---|----|
"""


def grid_to_bytes(grid: str) -> bytes:
    """Convert "x---|x---|..." to 16 step bytes."""
    cells = grid.replace("|", "")
    assert len(cells) == 16
    return bytes(1 if c == "x" else 0 for c in cells)


def encode_track(track_id: int, name: bytes, steps: bytes) -> bytes:
    """Encode a single track record."""
    return struct.pack("<I", track_id) + bytes([len(name)]) + name + steps


def build_splice(
    version: bytes = b"0.808-alpha",
    tempo: float = 120.0,
    tracks: Sequence[Tuple[int, str, str]] = (),
    payload_size: Optional[int] = None,
    trailing: bytes = b"",
    raw_tracks: bytes = b"",
) -> bytes:
    """
    Build a SPLICE file in memory.

    Args:
        version: Version bytes, zero padded to 32
        tempo: Tempo written as little-endian float32
        tracks: (id, name, grid) tuples
        payload_size: Declared payload size (default: actual size)
        trailing: Bytes appended after the payload
        raw_tracks: Pre-encoded track bytes appended after `tracks`

    Returns:
        File contents
    """
    payload = version.ljust(32, b"\x00") + struct.pack("<f", tempo)
    for track_id, name, grid in tracks:
        payload += encode_track(track_id, name.encode("ascii"), grid_to_bytes(grid))
    payload += raw_tracks

    if payload_size is None:
        payload_size = len(payload)

    return b"SPLICE" + struct.pack(">q", payload_size) + payload + trailing


@pytest.fixture
def pattern_1_data() -> bytes:
    """Six track pattern at 120 BPM."""
    return build_splice(tracks=PATTERN_1_TRACKS)


@pytest.fixture
def pattern_2_data() -> bytes:
    """Four track pattern at 98.4 BPM."""
    return build_splice(tempo=98.4, tracks=PATTERN_2_TRACKS)


@pytest.fixture
def splice_file(tmp_path, pattern_1_data):
    """Return path to a SPLICE file on disk."""
    path = tmp_path / "pattern_1.splice"
    path.write_bytes(pattern_1_data)
    return path
