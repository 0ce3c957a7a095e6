"""Antennas Bounded Context - Domain Services.

Pure domain logic for harmonic effects and grid rendering.
NO I/O operations - file persistence is implemented by infrastructure
adapters under `src/infrastructure/persistence/` via domain ports.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations

import numpy as np
from numpy.typing import NDArray

from domain.antennas.value_objects import (
    EFFECT_GLYPH,
    EMPTY_GLYPH,
    GRID_SIZE,
    Antenna,
    EffectPoint,
    is_within_grid,
)


# ---------------------------------------------------------------------------
# Harmonic Effects
# ---------------------------------------------------------------------------
def project_pair(a: Antenna, b: Antenna) -> tuple[EffectPoint, EffectPoint] | None:
    """Project the two harmonic points implied by an equal-frequency pair.

    Each endpoint is mirrored across the other: the effect lies on the line
    through the pair, one pair-spacing beyond each antenna.

    Returns None when the antennas share a position (no line is defined).
    Frequency equality is the caller's concern.
    """
    if a.x == b.x and a.y == b.y:
        return None

    if a.x == b.x:
        # Vertical alignment
        d = a.y - b.y
        return EffectPoint(x=a.x, y=a.y + d), EffectPoint(x=b.x, y=b.y - d)

    if a.y == b.y:
        # Horizontal alignment
        d = a.x - b.x
        return EffectPoint(x=a.x + d, y=a.y), EffectPoint(x=b.x - d, y=b.y)

    dx = a.x - b.x
    dy = a.y - b.y
    return (
        EffectPoint(x=a.x + dx, y=a.y + dy),
        EffectPoint(x=b.x - dx, y=b.y - dy),
    )


def derive_effects(antennas: Iterable[Antenna]) -> tuple[EffectPoint, ...]:
    """Derive every harmonic effect point from a set of antennas.

    Examines every unordered pair with equal frequency (O(n^2), not limited to
    graph-adjacent pairs). Effects are NOT filtered by grid bounds. Points
    emitted by several pairs collapse to one entry, kept in first-emission
    order.

    Example:
        >>> a = Antenna(frequency="A", x=2, y=2)
        >>> b = Antenna(frequency="A", x=4, y=2)
        >>> [p.position for p in derive_effects([a, b])]
        [(0, 2), (6, 2)]
    """
    effects: dict[tuple[int, int], EffectPoint] = {}

    for a, b in combinations(tuple(antennas), 2):
        if a.frequency != b.frequency:
            continue
        projected = project_pair(a, b)
        if projected is None:
            continue
        for point in projected:
            effects.setdefault(point.position, point)

    return tuple(effects.values())


# ---------------------------------------------------------------------------
# Grid Rendering
# ---------------------------------------------------------------------------
def render_grid(
    antennas: Iterable[Antenna],
    effects: Iterable[EffectPoint] = (),
    size: int = GRID_SIZE,
) -> NDArray[np.str_]:
    """Build the dense size x size character grid, indexed [y, x].

    Precedence: antenna frequency > effect glyph > empty glyph. Positions
    outside the grid are ignored for both antennas and effects.
    """
    grid = np.full((size, size), EMPTY_GLYPH, dtype="<U1")

    for antenna in antennas:
        if is_within_grid(antenna.x, antenna.y, size):
            grid[antenna.y, antenna.x] = antenna.frequency

    for point in effects:
        if is_within_grid(point.x, point.y, size) and grid[point.y, point.x] == EMPTY_GLYPH:
            grid[point.y, point.x] = EFFECT_GLYPH

    return grid


def format_grid(grid: NDArray[np.str_], separator: str = " ") -> str:
    """Return one text line per grid row, cells joined by separator."""
    return "\n".join(separator.join(row) for row in grid.tolist())
