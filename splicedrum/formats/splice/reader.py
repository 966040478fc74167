"""
SPLICE file reader.

Reads .splice drum machine files and converts them to the Pattern model.
"""

import struct
from pathlib import Path
from typing import Union

from splicedrum.formats.splice.decoder import crop_to_string, decode_bytes
from splicedrum.formats.splice.layout import SpliceLayout
from splicedrum.models.pattern import Pattern


class SpliceReader:
    """
    Reader for SPLICE pattern files.

    Example:
        pattern = SpliceReader.read("pattern_1.splice")
        print(f"Version: {pattern.version}, Tempo: {pattern.tempo}")
    """

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Pattern:
        """
        Read a SPLICE file and return a Pattern.

        Args:
            filepath: Path to .splice file

        Returns:
            Parsed Pattern object
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Pattern:
        """
        Parse a SPLICE file.

        Args:
            filepath: Path to .splice file

        Returns:
            Parsed Pattern object
        """
        with open(filepath, "rb") as f:
            data = f.read()

        return self.parse_bytes(data)

    def parse_bytes(self, data: bytes) -> Pattern:
        """
        Parse SPLICE data from bytes.

        Args:
            data: Raw file contents

        Returns:
            Parsed Pattern object
        """
        return decode_bytes(data)

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file starts with the SPLICE identifier.

        Args:
            filepath: Path to check

        Returns:
            True if the identifier matches
        """
        try:
            with open(filepath, "rb") as f:
                header = f.read(SpliceLayout.MAGIC_SIZE)
        except OSError:
            return False

        return header == SpliceLayout.MAGIC

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about a SPLICE file without decoding tracks.

        Args:
            filepath: Path to .splice file

        Returns:
            Dictionary with file info
        """
        with open(filepath, "rb") as f:
            data = f.read()

        info = {
            "valid": False,
            "size": len(data),
            "payload_size": None,
            "trailing_bytes": 0,
            "version": None,
        }

        info["valid"] = data[: SpliceLayout.MAGIC_SIZE] == SpliceLayout.MAGIC

        if len(data) >= SpliceLayout.HEADER_SIZE:
            payload_size = struct.unpack(
                SpliceLayout.PAYLOAD_SIZE_FORMAT,
                data[SpliceLayout.PAYLOAD_SIZE_OFFSET : SpliceLayout.HEADER_SIZE],
            )[0]
            info["payload_size"] = payload_size
            info["trailing_bytes"] = max(0, len(data) - SpliceLayout.HEADER_SIZE - max(0, payload_size))

        version_end = SpliceLayout.VERSION_OFFSET + SpliceLayout.VERSION_SIZE
        if len(data) >= version_end:
            info["version"] = crop_to_string(data[SpliceLayout.VERSION_OFFSET : version_end])

        return info
