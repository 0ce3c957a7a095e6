"""Antennas Bounded Context - AntennaRegistry entity.

Collection of uniquely positioned antennas on the fixed grid. Entries are
keyed by (x, y); iteration follows insertion order, which carries no meaning
for any domain rule.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from domain.antennas.value_objects import GRID_SIZE, Antenna, Outcome, is_within_grid

logger = logging.getLogger(__name__)


class AntennaRegistry:
    """Mutable set of antennas with grid-bound and unique-position invariants.

    Invariants:
        AR-1: every antenna satisfies 0 <= x < size and 0 <= y < size
        AR-2: no two antennas share (x, y)
    """

    def __init__(self, size: int = GRID_SIZE) -> None:
        self.size = size
        self._by_position: dict[tuple[int, int], Antenna] = {}

    def __len__(self) -> int:
        return len(self._by_position)

    def __iter__(self) -> Iterator[Antenna]:
        return iter(tuple(self._by_position.values()))

    def __contains__(self, position: object) -> bool:
        return position in self._by_position

    def __repr__(self) -> str:
        return f"AntennaRegistry(size={self.size}, antennas={len(self)})"

    def at(self, x: int, y: int) -> Antenna | None:
        """Return the antenna occupying (x, y), if any."""
        return self._by_position.get((x, y))

    def antennas(self) -> tuple[Antenna, ...]:
        return tuple(self._by_position.values())

    def insert(self, frequency: str, x: int, y: int) -> Outcome:
        """Place a new antenna.

        The bounds check precedes the duplicate check, so an off-grid
        coordinate is always reported as OUT_OF_BOUNDS. Rejections leave the
        registry untouched.

        Raises:
            ValueError: If frequency is not a valid antenna symbol
        """
        if not is_within_grid(x, y, self.size):
            logger.debug("Rejected %s at (%d, %d): out of bounds", frequency, x, y)
            return Outcome.OUT_OF_BOUNDS
        if (x, y) in self._by_position:
            logger.debug("Rejected %s at (%d, %d): position occupied", frequency, x, y)
            return Outcome.DUPLICATE

        self._by_position[(x, y)] = Antenna(frequency=frequency, x=x, y=y)
        logger.debug("Inserted antenna %s at (%d, %d)", frequency, x, y)
        return Outcome.INSERTED

    def remove(self, frequency: str, x: int, y: int) -> Outcome:
        """Remove the antenna matching frequency AND coordinates exactly."""
        if not self._by_position:
            return Outcome.EMPTY

        current = self._by_position.get((x, y))
        if current is None or current.frequency != frequency:
            return Outcome.NOT_FOUND

        del self._by_position[(x, y)]
        logger.debug("Removed antenna %s at (%d, %d)", frequency, x, y)
        return Outcome.REMOVED

    def clear(self) -> bool:
        """Release every antenna. Returns False if there was nothing to clear."""
        if not self._by_position:
            return False
        self._by_position.clear()
        return True

    def load(self, triples: Iterable[tuple[str, int, int]]) -> int:
        """Fold (frequency, x, y) triples into the registry.

        Out-of-bounds, duplicate and invalid-frequency entries are skipped.
        Returns the number of antennas actually inserted.
        """
        inserted = 0
        skipped = 0
        for frequency, x, y in triples:
            try:
                outcome = self.insert(frequency, x, y)
            except ValueError:
                outcome = None
            if outcome is Outcome.INSERTED:
                inserted += 1
            else:
                skipped += 1
        if skipped:
            logger.warning("Skipped %d rejected antenna(s) during load", skipped)
        return inserted
