"""SPLICE format handlers."""

from splicedrum.formats.splice.reader import SpliceReader
from splicedrum.formats.splice.decoder import decode, decode_bytes, decode_file
from splicedrum.formats.splice.framing import BoundedReader, open_payload
from splicedrum.formats.splice.layout import SpliceField, SpliceLayout

__all__ = [
    "SpliceReader",
    "decode",
    "decode_bytes",
    "decode_file",
    "BoundedReader",
    "open_payload",
    "SpliceField",
    "SpliceLayout",
]
