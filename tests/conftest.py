"""Root pytest configuration for all tests.

Provides small, fully in-memory collections shared across bounded contexts.
Domain tests never touch the filesystem; persistence tests use tmp_path.
"""

from __future__ import annotations

import pytest

from domain.antennas.registry import AntennaRegistry
from domain.network.graph import AntennaGraph


@pytest.fixture
def registry() -> AntennaRegistry:
    """Empty 10x10 registry."""
    return AntennaRegistry()


@pytest.fixture
def populated_registry() -> AntennaRegistry:
    """Registry with two 'A' antennas on a row and one lone '0' antenna.

    Layout (x, y): A(2, 2), A(4, 2), 0(7, 7)
    """
    reg = AntennaRegistry()
    reg.load([("A", 2, 2), ("A", 4, 2), ("0", 7, 7)])
    return reg


@pytest.fixture
def graph() -> AntennaGraph:
    """Empty 10x10 graph."""
    return AntennaGraph()


@pytest.fixture
def mixed_graph() -> AntennaGraph:
    """Graph with three fully linked 'A' vertices and two linked 'B' vertices.

    Ids: A -> 1, 2, 3; B -> 4, 5 (load assigns ids in input order).
    """
    g = AntennaGraph()
    g.load([("A", 0, 0), ("A", 1, 1), ("A", 2, 2), ("B", 5, 5), ("B", 6, 6)])
    return g
