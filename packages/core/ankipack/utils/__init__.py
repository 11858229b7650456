"""Utility functions."""

from ankipack.utils.hashing import base91, field_checksum, guid_for
from ankipack.utils.logging import get_logger

__all__ = [
    "base91",
    "field_checksum",
    "get_logger",
    "guid_for",
]
