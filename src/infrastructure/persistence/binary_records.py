"""Binary record adapter for AntennaRepository.

File format: a headerless stream of fixed-width packed records, one per
antenna, in storage order:

    offset 0  frequency  1 byte  (ASCII)
    offset 1  x          int32   little-endian
    offset 5  y          int32   little-endian

Records are encoded and decoded through a numpy structured dtype. An empty
file is a valid stream of zero records. Effects are never stored: they are
derived data and are recomputed after loading.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import numpy as np
from pydantic import ValidationError

from domain.antennas.errors import (
    CorruptedRecordError,
    InsufficientMemoryError,
    InvalidGridFileError,
)
from domain.antennas.value_objects import Antenna, EffectPoint

from .paths import check_extension, stat_readable

logger = logging.getLogger(__name__)

BINARY_SUFFIXES = (".bin",)

# Packed (align=False) so that the on-disk width is exactly 9 bytes
RECORD_DTYPE = np.dtype([("frequency", "S1"), ("x", "<i4"), ("y", "<i4")])


class BinaryRecordAdapter:
    """Infrastructure adapter storing antennas as fixed-width binary records.

    Parameters
    ----------
    max_bytes: int | None
        Optional budget for the file being loaded. Files above it raise
        InsufficientMemoryError before anything is allocated.
    """

    def __init__(self, max_bytes: int | None = None) -> None:
        self.max_bytes = max_bytes

    def load_antennas(self, file_path: Path | str) -> list[Antenna]:
        path = Path(file_path)
        st = stat_readable(path, BINARY_SUFFIXES)

        if st.st_size % RECORD_DTYPE.itemsize != 0:
            raise CorruptedRecordError(st.st_size, RECORD_DTYPE.itemsize)
        # Pre-flight size check - fail fast before allocation
        if self.max_bytes is not None and st.st_size > self.max_bytes:
            raise InsufficientMemoryError(
                f"File size {st.st_size}B exceeds memory budget {self.max_bytes}B"
            )

        try:
            records = np.frombuffer(path.read_bytes(), dtype=RECORD_DTYPE)
        except PermissionError as e:
            raise PermissionError(path.name) from e
        except MemoryError as e:
            raise InsufficientMemoryError("Insufficient memory to load records") from e

        antennas: list[Antenna] = []
        invalid = 0
        for raw_frequency, x, y in records.tolist():
            try:
                antennas.append(
                    Antenna(frequency=raw_frequency.decode("ascii"), x=int(x), y=int(y))
                )
            except (UnicodeDecodeError, ValidationError):
                invalid += 1

        if invalid:
            logger.warning("Records %s: Skipped %d invalid record(s)", path.name, invalid)
        logger.info("Records %s: Loaded %d antenna(s)", path.name, len(antennas))
        return antennas

    def save_antennas(
        self,
        antennas: Iterable[Antenna],
        file_path: Path | str,
        effects: Iterable[EffectPoint] = (),
    ) -> None:
        """Write one record per antenna. Effects are not part of this format."""
        path = Path(file_path)
        check_extension(path, BINARY_SUFFIXES)

        try:
            rows = [(a.frequency.encode("ascii"), a.x, a.y) for a in antennas]
        except UnicodeEncodeError as e:
            raise InvalidGridFileError(
                "Binary records only store ASCII frequencies"
            ) from e

        records = np.array(rows, dtype=RECORD_DTYPE)
        try:
            path.write_bytes(records.tobytes())
        except PermissionError as e:
            raise PermissionError(path.name) from e

        logger.info("Records %s: Saved %d antenna(s)", path.name, len(records))
