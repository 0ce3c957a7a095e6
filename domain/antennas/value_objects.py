"""Antennas Bounded Context - Value Objects.

Immutable data structures representing grid placement concepts.
All validation occurs at construction time via Pydantic.

Grid bounds are not an Antenna invariant: collections (AntennaRegistry,
AntennaGraph) own the bounds rule and report off-grid placements through an
explicit Outcome or None.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# Grid Constants
# ---------------------------------------------------------------------------
GRID_SIZE = 10  # Side N of the fixed N x N grid

EMPTY_GLYPH = "."  # Unoccupied cell
EFFECT_GLYPH = "#"  # Harmonic effect cell not covered by an antenna
RESERVED_GLYPHS = frozenset({EMPTY_GLYPH, EFFECT_GLYPH})


def is_within_grid(x: int, y: int, size: int = GRID_SIZE) -> bool:
    """Check if (x, y) lies on the grid (half-open range [0, size))."""
    return 0 <= x < size and 0 <= y < size


# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------
class Outcome(str, Enum):
    """Result of a registry mutation.

    Core operations never raise for expected rejections; they return one of
    these members so callers can branch on an explicit value.
    """

    INSERTED = "inserted"
    REMOVED = "removed"
    OUT_OF_BOUNDS = "out_of_bounds"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    EMPTY = "empty"

    @property
    def ok(self) -> bool:
        """True when the registry was mutated."""
        return self in (Outcome.INSERTED, Outcome.REMOVED)


# ---------------------------------------------------------------------------
# Antenna
# ---------------------------------------------------------------------------
class Antenna(BaseModel):
    """Frequency-labeled grid position (Value Object).

    Invariants:
        AN-1: frequency is exactly one character
        AN-2: frequency is printable ASCII, not whitespace and not a reserved
              glyph ('.', '#'); binary records store it in a single byte

    Pydantic frozen models compare and hash by value, so two antennas with the
    same frequency and coordinates are interchangeable.
    """

    frequency: str = Field(min_length=1, max_length=1)
    x: int
    y: int

    model_config = ConfigDict(frozen=True)

    @field_validator("frequency")
    @classmethod
    def validate_frequency(cls, value: str) -> str:
        if value.isspace():
            raise ValueError("frequency cannot be whitespace")
        if not (value.isascii() and value.isprintable()):
            raise ValueError(f"frequency {value!r} must be a printable ASCII character")
        if value in RESERVED_GLYPHS:
            raise ValueError(f"frequency {value!r} is a reserved grid glyph")
        return value

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


# ---------------------------------------------------------------------------
# EffectPoint
# ---------------------------------------------------------------------------
class EffectPoint(BaseModel):
    """Harmonic effect position derived from an equal-frequency pair.

    May lie outside the grid; renderers and adapters filter by bounds.
    """

    x: int
    y: int

    model_config = ConfigDict(frozen=True)

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)
