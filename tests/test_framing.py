"""Tests for SPLICE header framing."""

import io
import struct
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from splicedrum.formats.splice.framing import BoundedReader, open_payload, read_header
from splicedrum.formats.splice.layout import SpliceField
from splicedrum.utils import fields
from splicedrum.utils.errors import (
    TruncatedHeaderError,
    UnsupportedFormatError,
)


class TestBoundedReader:
    """Test cases for the size limited reader."""

    def test_stops_at_limit(self):
        """Test that reads stop at the limit even with more data available."""
        reader = BoundedReader(io.BytesIO(b"abcdefgh"), 5)

        assert reader.read(3) == b"abc"
        assert reader.read(10) == b"de"
        assert reader.read(1) == b""
        assert reader.remaining == 0

    def test_consumed_tracks_reads(self):
        """Test consumed/remaining bookkeeping."""
        reader = BoundedReader(io.BytesIO(bytes(10)), 8)
        reader.read(3)

        assert reader.consumed == 3
        assert reader.remaining == 5
        assert reader.limit == 8

    def test_read_all(self):
        """Test that read() with no size returns the rest of the window."""
        reader = BoundedReader(io.BytesIO(b"0123456789"), 4)

        assert reader.read() == b"0123"

    def test_underlying_eof(self):
        """Test that a short source leaves bytes remaining."""
        reader = BoundedReader(io.BytesIO(b"ab"), 10)

        assert reader.read(5) == b"ab"
        assert reader.read(5) == b""
        assert reader.remaining == 8

    def test_negative_limit_is_empty(self):
        """Test that a negative limit gives an empty window."""
        reader = BoundedReader(io.BytesIO(b"data"), -5)

        assert reader.limit == 0
        assert reader.read(4) == b""


class TestPayloadFramer:
    """Test cases for identifier and payload size handling."""

    def test_valid_header(self):
        """Test reading a valid header."""
        source = io.BytesIO(b"SPLICE" + struct.pack(">q", 42) + b"rest")

        assert read_header(source) == 42
        assert source.tell() == 14

    def test_open_payload_limit(self):
        """Test that the payload reader is limited to the declared size."""
        source = io.BytesIO(b"SPLICE" + struct.pack(">q", 3) + b"abcdef")
        reader = open_payload(source)

        assert reader.limit == 3
        assert reader.read(10) == b"abc"

    def test_payload_size_is_big_endian(self):
        """Test the byte order of the size field."""
        source = io.BytesIO(b"SPLICE" + bytes([0, 0, 0, 0, 0, 0, 0x01, 0x02]))

        assert read_header(source) == 0x0102

    def test_wrong_identifier(self):
        """Test that a non-SPLICE identifier is rejected."""
        source = io.BytesIO(b"RIFF\x00\x00" + bytes(40))

        with pytest.raises(UnsupportedFormatError) as exc_info:
            open_payload(source)

        assert exc_info.value.found == b"RIFF\x00\x00"
        assert "unsupported file format" in str(exc_info.value)

    def test_wrong_identifier_consumes_only_identifier(self):
        """Test that nothing past the identifier is read on mismatch."""
        source = io.BytesIO(b"splice" + struct.pack(">q", 10) + bytes(10))

        with pytest.raises(UnsupportedFormatError):
            open_payload(source)

        assert source.tell() == 6

    def test_empty_source(self):
        """Test that an empty source is a truncated header."""
        with pytest.raises(TruncatedHeaderError) as exc_info:
            open_payload(io.BytesIO(b""))

        assert exc_info.value.field is SpliceField.MAGIC
        assert exc_info.value.actual == 0
        assert str(exc_info.value) == "parse type header: EOF"

    def test_short_identifier(self):
        """Test that a short identifier is a truncated header, not a mismatch."""
        with pytest.raises(TruncatedHeaderError) as exc_info:
            open_payload(io.BytesIO(b"SPL"))

        assert exc_info.value.field is SpliceField.MAGIC
        assert exc_info.value.expected == 6
        assert exc_info.value.actual == 3

    def test_short_payload_size(self):
        """Test that a short size field is a truncated header."""
        with pytest.raises(TruncatedHeaderError) as exc_info:
            open_payload(io.BytesIO(b"SPLICE\x00\x00\x00"))

        assert exc_info.value.field is SpliceField.PAYLOAD_SIZE
        assert exc_info.value.actual == 3
        assert "parse payload size" in str(exc_info.value)

    def test_header_errors_are_value_errors(self):
        """Test that framing errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            open_payload(io.BytesIO(b"NOPE!!"))

    def test_unsupported_reports_expected_identifier(self):
        """Test that the mismatch error names the identifier it wanted."""
        with pytest.raises(UnsupportedFormatError) as exc_info:
            open_payload(io.BytesIO(b"MThd\x00\x00" + bytes(8)))

        assert exc_info.value.expected == b"SPLICE"


class TestFieldNames:
    """Test cases for the field name enum shared by errors and layout."""

    def test_layout_reexports_fields(self):
        """Test that layout and utils expose the same enum."""
        assert SpliceField is fields.SpliceField

    def test_header_fields(self):
        """Test which fields belong to the fixed header."""
        assert SpliceField.MAGIC.is_header
        assert SpliceField.PAYLOAD_SIZE.is_header
        assert not SpliceField.VERSION.is_header

    def test_utils_do_not_import_formats(self):
        """Test that the shared helpers do not depend on the format package."""
        utils_dir = Path(fields.__file__).parent

        for module in utils_dir.glob("*.py"):
            assert "splicedrum.formats" not in module.read_text(), module.name
