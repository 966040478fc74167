"""
SPLICE header framing.

Checks the identifier, reads the declared payload size and hands back a
reader limited to exactly that many bytes.
"""

import logging
from typing import BinaryIO

from splicedrum.formats.splice.layout import SpliceField, SpliceLayout
from splicedrum.utils.binary import read_exact, read_struct
from splicedrum.utils.errors import UnsupportedFormatError

logger = logging.getLogger(__name__)


class BoundedReader:
    """
    Reader that yields at most `limit` bytes from an underlying stream.

    Once the limit is used up, read() returns b"" even if the stream has
    more data.

    Example:
        reader = BoundedReader(stream, 36)
        while reader.remaining > 0:
            chunk = reader.read(4)
    """

    def __init__(self, source: BinaryIO, limit: int):
        self._source = source
        self.limit = max(0, limit)
        self.remaining = self.limit

    @property
    def consumed(self) -> int:
        """Number of bytes read so far."""
        return self.limit - self.remaining

    def read(self, size: int = -1) -> bytes:
        if self.remaining <= 0:
            return b""
        if size < 0 or size > self.remaining:
            size = self.remaining
        data = self._source.read(size)
        self.remaining -= len(data)
        return data

    def __repr__(self) -> str:
        return f"BoundedReader(limit={self.limit}, remaining={self.remaining})"


def read_header(source: BinaryIO) -> int:
    """
    Read the SPLICE identifier and payload size.

    Args:
        source: Binary stream positioned at the start of the file

    Returns:
        Declared payload size in bytes

    Raises:
        TruncatedHeaderError: If the identifier or size field is short
        UnsupportedFormatError: If the identifier is not "SPLICE"
    """
    magic = read_exact(source, SpliceLayout.MAGIC_SIZE, SpliceField.MAGIC)
    if magic != SpliceLayout.MAGIC:
        raise UnsupportedFormatError(magic, SpliceLayout.MAGIC)

    return read_struct(source, SpliceLayout.PAYLOAD_SIZE_FORMAT, SpliceField.PAYLOAD_SIZE)


def open_payload(source: BinaryIO) -> BoundedReader:
    """
    Validate the header and return a reader over the payload.

    A negative payload size gives an empty payload.

    Args:
        source: Binary stream positioned at the start of the file

    Returns:
        BoundedReader limited to the declared payload size
    """
    payload_size = read_header(source)
    logger.debug("SPLICE header ok, payload size %d", payload_size)
    return BoundedReader(source, payload_size)
