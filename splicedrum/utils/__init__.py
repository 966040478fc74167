"""Utility functions for splicedrum."""

from splicedrum.utils.fields import SpliceField
from splicedrum.utils.errors import (
    SpliceError,
    UnsupportedFormatError,
    TruncatedError,
    TruncatedHeaderError,
    TruncatedFieldError,
)
from splicedrum.utils.binary import read_exact, read_struct

__all__ = [
    "SpliceField",
    "SpliceError",
    "UnsupportedFormatError",
    "TruncatedError",
    "TruncatedHeaderError",
    "TruncatedFieldError",
    "read_exact",
    "read_struct",
]
