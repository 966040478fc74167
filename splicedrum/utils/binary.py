"""
Binary read helpers shared by the framer and the pattern decoder.
"""

import struct
from typing import BinaryIO

from splicedrum.utils.fields import SpliceField
from splicedrum.utils.errors import truncated


def read_exact(source: BinaryIO, size: int, field: SpliceField) -> bytes:
    """
    Read exactly `size` bytes from a stream.

    Keeps reading until the count is reached, since a stream may return
    fewer bytes than asked for without being exhausted.

    Args:
        source: Object with a binary read(n) method
        size: Number of bytes to read
        field: Field being parsed, reported if the read comes up short

    Returns:
        The bytes read

    Raises:
        TruncatedHeaderError: If a header field ends early
        TruncatedFieldError: If a payload field ends early
    """
    buf = bytearray()
    while len(buf) < size:
        chunk = source.read(size - len(buf))
        if not chunk:
            raise truncated(field, size, len(buf))
        buf += chunk
    return bytes(buf)


def read_struct(source: BinaryIO, fmt: str, field: SpliceField):
    """Read and unpack a single struct value."""
    data = read_exact(source, struct.calcsize(fmt), field)
    return struct.unpack(fmt, data)[0]
