"""Antennas Bounded Context - Error Hierarchy.

Custom exceptions for persistence adapters.

Core collection operations do not raise for expected rejections (out of
bounds, duplicate, not found, empty); they return an Outcome or a bool.
These exceptions cover failures of the outer I/O layer only.
"""

from __future__ import annotations


class AntennaError(Exception):
    """Base error for antenna operations."""


class InvalidGridFileError(AntennaError):
    """File is not a valid grid file: wrong extension, symlink or undecodable."""


class CorruptedRecordError(AntennaError):
    """Binary record stream is truncated or not a whole number of records.

    Attributes:
        size: File size in bytes
        record_size: Width of a single record in bytes
    """

    def __init__(self, size: int, record_size: int) -> None:
        self.size = size
        self.record_size = record_size
        super().__init__(
            f"File size {size}B is not a multiple of the {record_size}B record width"
        )


class InsufficientMemoryError(AntennaError):
    """Operation requires more memory than allowed or available."""
