"""Tests for AntennaRegistry (insert, remove, clear, load)."""

from __future__ import annotations

import pytest

from domain.antennas.registry import AntennaRegistry
from domain.antennas.value_objects import GRID_SIZE, Antenna, Outcome


# ===========================================================================
# Insert
# ===========================================================================
def test_insert_happy_path(registry):
    outcome = registry.insert("A", 3, 4)

    assert outcome is Outcome.INSERTED
    assert outcome.ok
    assert len(registry) == 1
    assert registry.at(3, 4) == Antenna(frequency="A", x=3, y=4)
    assert (3, 4) in registry


@pytest.mark.parametrize(
    ("x", "y"),
    [(-1, 0), (GRID_SIZE, 0), (0, -1), (0, GRID_SIZE), (-1, -1), (GRID_SIZE, GRID_SIZE)],
)
def test_insert_out_of_bounds_always_rejected(populated_registry, x, y):
    before = populated_registry.antennas()

    assert populated_registry.insert("A", x, y) is Outcome.OUT_OF_BOUNDS
    assert populated_registry.antennas() == before


@pytest.mark.parametrize(("x", "y"), [(0, 0), (GRID_SIZE - 1, GRID_SIZE - 1), (0, GRID_SIZE - 1)])
def test_insert_on_grid_edges_accepted(registry, x, y):
    assert registry.insert("z", x, y) is Outcome.INSERTED


def test_insert_duplicate_position_leaves_registry_unchanged(populated_registry):
    before = populated_registry.antennas()

    outcome = populated_registry.insert("B", 2, 2)

    assert outcome is Outcome.DUPLICATE
    assert not outcome.ok
    assert populated_registry.antennas() == before
    assert populated_registry.at(2, 2).frequency == "A"


def test_bounds_check_precedes_duplicate_check():
    reg = AntennaRegistry(size=3)
    reg.insert("A", 2, 2)

    # (3, 2) is off-grid; reported as OUT_OF_BOUNDS regardless of occupancy
    assert reg.insert("A", 3, 2) is Outcome.OUT_OF_BOUNDS


@pytest.mark.parametrize("frequency", ["", "AB", " ", ".", "#", "é", "\x01"])
def test_insert_invalid_frequency_raises(registry, frequency):
    with pytest.raises(ValueError):
        registry.insert(frequency, 1, 1)
    assert len(registry) == 0


# ===========================================================================
# Remove
# ===========================================================================
def test_insert_then_remove_round_trip(populated_registry):
    before = populated_registry.antennas()

    assert populated_registry.insert("c", 9, 0) is Outcome.INSERTED
    assert populated_registry.remove("c", 9, 0) is Outcome.REMOVED

    assert set(populated_registry.antennas()) == set(before)


def test_remove_requires_matching_frequency(populated_registry):
    assert populated_registry.remove("B", 2, 2) is Outcome.NOT_FOUND
    assert populated_registry.at(2, 2) is not None


def test_remove_requires_matching_coordinates(populated_registry):
    assert populated_registry.remove("A", 3, 2) is Outcome.NOT_FOUND
    assert len(populated_registry) == 3


def test_remove_from_empty_registry_reports_empty(registry):
    assert registry.remove("A", 0, 0) is Outcome.EMPTY


# ===========================================================================
# Clear / Load
# ===========================================================================
def test_clear_is_idempotent(populated_registry):
    assert populated_registry.clear() is True
    assert len(populated_registry) == 0
    assert populated_registry.clear() is False


def test_load_skips_rejected_entries(registry, caplog):
    triples = [("A", 1, 1), ("B", 1, 1), ("C", 10, 0), ("D", 2, -1), ("E", 5, 5)]

    with caplog.at_level("WARNING"):
        inserted = registry.load(triples)

    assert inserted == 2
    assert {a.frequency for a in registry} == {"A", "E"}
    assert "Skipped 2 rejected antenna(s)" in caplog.text


def test_load_skips_invalid_frequencies(registry, caplog):
    with caplog.at_level("WARNING"):
        inserted = registry.load([("A", 1, 1), ("AB", 2, 2), ("C", 3, 3)])

    assert inserted == 2
    assert {a.frequency for a in registry} == {"A", "C"}
    assert registry.at(2, 2) is None
    assert "Skipped 1 rejected antenna(s)" in caplog.text


def test_iteration_is_a_snapshot(populated_registry):
    for antenna in populated_registry:
        populated_registry.remove(antenna.frequency, antenna.x, antenna.y)

    assert len(populated_registry) == 0
