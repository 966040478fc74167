"""
Exceptions raised while decoding SPLICE files.
"""

from typing import Optional

from splicedrum.utils.fields import SpliceField


class SpliceError(ValueError):
    """Base class for SPLICE decoding failures."""

    pass


class UnsupportedFormatError(SpliceError):
    """Raised when the data does not start with the SPLICE identifier."""

    def __init__(self, found: bytes, expected: bytes = b"SPLICE"):
        self.found = found
        self.expected = expected
        super().__init__(f"unsupported file format: expected {expected!r}, found {found!r}")


class TruncatedError(SpliceError):
    """
    Raised when a field could not be read in full.

    Attributes:
        field: Field that was being parsed
        expected: Number of bytes the field needs
        actual: Number of bytes that were available
    """

    def __init__(self, field: SpliceField, expected: int, actual: int):
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(f"parse {field.value}: {self._describe()}")

    def _describe(self) -> str:
        if self.actual == 0:
            return "EOF"
        return f"unexpected EOF ({self.actual} of {self.expected} bytes)"


class TruncatedHeaderError(TruncatedError):
    """Raised when the identifier or the payload size field is short."""

    pass


class TruncatedFieldError(TruncatedError):
    """Raised when a pattern or track field inside the payload is short."""

    pass


def truncated(field: SpliceField, expected: int, actual: int) -> TruncatedError:
    """
    Build the right truncation error for a field.

    Args:
        field: Field that came up short
        expected: Bytes needed
        actual: Bytes read

    Returns:
        TruncatedHeaderError for header fields, TruncatedFieldError otherwise
    """
    if field.is_header:
        return TruncatedHeaderError(field, expected, actual)
    return TruncatedFieldError(field, expected, actual)


def describe_error(error: Exception, path: Optional[str] = None) -> str:
    """Format an error for display, prefixed with the file path if given."""
    if path:
        return f"{path}: {error}"
    return str(error)
