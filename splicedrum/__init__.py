"""
splicedrum - Decoder for SPLICE drum machine pattern files.

This library provides tools to:
- Decode .splice binary pattern files
- Print patterns as text step grids

Example usage:
    from splicedrum import decode_file

    pattern = decode_file("pattern_1.splice")
    print(pattern)
"""

__version__ = "0.1.0"
__author__ = "splicedrum Contributors"

from splicedrum.formats.splice.reader import SpliceReader
from splicedrum.formats.splice.decoder import decode, decode_bytes, decode_file
from splicedrum.models.pattern import Pattern
from splicedrum.models.track import Track
from splicedrum.printout import render_pattern
from splicedrum.utils.errors import (
    SpliceError,
    UnsupportedFormatError,
    TruncatedHeaderError,
    TruncatedFieldError,
)

__all__ = [
    "SpliceReader",
    "decode",
    "decode_bytes",
    "decode_file",
    "Pattern",
    "Track",
    "render_pattern",
    "SpliceError",
    "UnsupportedFormatError",
    "TruncatedHeaderError",
    "TruncatedFieldError",
]
