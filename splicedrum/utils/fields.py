"""
Field names of a SPLICE file, as reported in decoding errors.
"""

from enum import Enum


class SpliceField(Enum):
    """
    Named fields of a SPLICE file.

    Values are the labels used in error messages.
    """

    MAGIC = "type header"
    PAYLOAD_SIZE = "payload size"
    VERSION = "version"
    TEMPO = "tempo"
    TRACK_ID = "track id"
    TRACK_NAME_LENGTH = "track name length"
    TRACK_NAME = "track name"
    STEPS = "steps"

    @property
    def is_header(self) -> bool:
        """Check if the field belongs to the fixed header before the payload."""
        return self in (SpliceField.MAGIC, SpliceField.PAYLOAD_SIZE)
