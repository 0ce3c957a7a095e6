"""Infrastructure adapters for the antennas bounded context.

This module provides the infrastructure layer implementations for antenna
persistence: a plain-text character grid and a fixed-width binary record
stream. Both implement domain.antennas.repositories.AntennaRepository.
"""

from .binary_records import BinaryRecordAdapter
from .text_grid import TextGridAdapter

__all__ = ["BinaryRecordAdapter", "TextGridAdapter"]
