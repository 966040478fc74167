"""
SPLICE file layout.

File Structure:
    Offset  Size    Description
    0x00    6       Identifier "SPLICE"
    0x06    8       Payload size (big-endian, signed)
    0x0E    32      HW version (zero padded ASCII)
    0x2E    4       Tempo (little-endian float32)
    0x32    ...     Tracks, repeated until the payload is exhausted

Track Structure:
    Size    Description
    4       Track id (little-endian uint32)
    1       Name length L
    L       Name
    16      Steps, one byte per sixteenth note (0x01 = on)

The payload size counts every byte after the size field, so the version
and tempo are part of the payload. Anything after the payload is ignored.
"""

from splicedrum.utils.fields import SpliceField

__all__ = ["SpliceField", "SpliceLayout"]


class SpliceLayout:
    """
    Field widths and offsets for SPLICE files.
    """

    # Header
    MAGIC = b"SPLICE"
    MAGIC_SIZE = 6
    PAYLOAD_SIZE_FORMAT = ">q"
    PAYLOAD_SIZE_SIZE = 8
    HEADER_SIZE = MAGIC_SIZE + PAYLOAD_SIZE_SIZE  # 14

    # Pattern fields (inside the payload)
    VERSION_SIZE = 32
    TEMPO_FORMAT = "<f"

    # Track fields
    TRACK_ID_FORMAT = "<I"
    NAME_LENGTH_SIZE = 1
    STEP_COUNT = 16
    STEP_ON = 0x01

    # Absolute offsets
    MAGIC_OFFSET = 0x00
    PAYLOAD_SIZE_OFFSET = 0x06
    VERSION_OFFSET = 0x0E
    TEMPO_OFFSET = 0x2E
    TRACKS_OFFSET = 0x32
