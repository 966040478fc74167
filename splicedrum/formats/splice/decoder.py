"""
SPLICE pattern decoder.

Decodes the payload of a SPLICE file into a Pattern. All reads go through
a BoundedReader, so a track that runs past the declared payload size fails
on whichever field came up short.
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, Iterator, Tuple, Union

from splicedrum.formats.splice.framing import BoundedReader, open_payload
from splicedrum.formats.splice.layout import SpliceField, SpliceLayout
from splicedrum.models.pattern import Pattern
from splicedrum.models.track import Track
from splicedrum.utils.binary import read_exact, read_struct

logger = logging.getLogger(__name__)

# Names and versions are unvalidated bytes; undecodable bytes survive as surrogates
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"


def crop_to_string(data: bytes) -> str:
    """
    Convert a zero padded field to a string.

    Args:
        data: Raw field bytes

    Returns:
        Text before the first zero byte, or the whole field if there is none
    """
    end = data.find(b"\x00")
    if end >= 0:
        data = data[:end]
    return data.decode(TEXT_ENCODING, TEXT_ERRORS)


def encode_text(text: str) -> bytes:
    """Turn decoded text back into the exact bytes it came from."""
    return text.encode(TEXT_ENCODING, TEXT_ERRORS)


def decode_steps(data: bytes) -> Tuple[bool, ...]:
    """
    Convert step bytes to on/off flags.

    Only 0x01 means on. Any other value, including 0x02 or 0xFF, is off.
    """
    return tuple(b == SpliceLayout.STEP_ON for b in data)


def decode_track(reader: BinaryIO) -> Track:
    """
    Decode a single track.

    Args:
        reader: Reader positioned at the start of a track

    Returns:
        Decoded Track

    Raises:
        TruncatedFieldError: If any track field is short
    """
    track_id = read_struct(reader, SpliceLayout.TRACK_ID_FORMAT, SpliceField.TRACK_ID)
    name_length = read_exact(reader, SpliceLayout.NAME_LENGTH_SIZE, SpliceField.TRACK_NAME_LENGTH)[0]
    name = read_exact(reader, name_length, SpliceField.TRACK_NAME).decode(TEXT_ENCODING, TEXT_ERRORS)
    steps = read_exact(reader, SpliceLayout.STEP_COUNT, SpliceField.STEPS)

    return Track(id=track_id, name=name, steps=decode_steps(steps))


def iter_tracks(reader: BoundedReader) -> Iterator[Track]:
    """
    Yield tracks until the payload is used up.

    The iterator consumes the reader and cannot be restarted.
    """
    while reader.remaining > 0:
        track = decode_track(reader)
        logger.debug(
            "Track %d %r: %d active steps, %d bytes left",
            track.id,
            track.name,
            len(track.active_steps),
            reader.remaining,
        )
        yield track


def decode_pattern(reader: BoundedReader) -> Pattern:
    """
    Decode a framed payload into a Pattern.

    Args:
        reader: Reader over the payload, as returned by open_payload()

    Returns:
        Decoded Pattern

    Raises:
        TruncatedFieldError: If any field is short
    """
    version = crop_to_string(read_exact(reader, SpliceLayout.VERSION_SIZE, SpliceField.VERSION))
    tempo = read_struct(reader, SpliceLayout.TEMPO_FORMAT, SpliceField.TEMPO)
    tracks = tuple(iter_tracks(reader))

    logger.debug("Decoded pattern %r: tempo %s, %d tracks", version, tempo, len(tracks))
    return Pattern(version=version, tempo=tempo, tracks=tracks)


def decode(source: BinaryIO) -> Pattern:
    """
    Decode a SPLICE pattern from a binary stream.

    Args:
        source: Object with a binary read(n) method

    Returns:
        Decoded Pattern

    Raises:
        UnsupportedFormatError: If the stream is not a SPLICE file
        TruncatedHeaderError: If the header is short
        TruncatedFieldError: If the payload is short
    """
    return decode_pattern(open_payload(source))


def decode_bytes(data: bytes) -> Pattern:
    """Decode a SPLICE pattern held in memory."""
    return decode(io.BytesIO(data))


def decode_file(path: Union[str, Path]) -> Pattern:
    """
    Decode the SPLICE file at the given path.

    Errors opening the file (missing path, permissions) are raised as-is.

    Args:
        path: Path to a .splice file

    Returns:
        Decoded Pattern
    """
    with open(path, "rb") as f:
        return decode(f)
