"""Domain Port(s) for Antenna I/O.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from .value_objects import Antenna, EffectPoint


class AntennaRepository(Protocol):
    """Port for persisting antenna placements to external storage.

    Implementations live in infrastructure (text grid, binary records).
    Loaders may return off-grid antennas; collections skip them on load.
    """

    def load_antennas(self, file_path: Path | str) -> list[Antenna]:
        """Load every stored antenna in storage order."""
        ...

    def save_antennas(
        self,
        antennas: Iterable[Antenna],
        file_path: Path | str,
        effects: Iterable[EffectPoint] = (),
    ) -> None:
        """Persist antennas (and, where the format supports it, effects)."""
        ...
