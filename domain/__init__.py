"""Antenna Planner Domain Layer.

This package contains the core business logic organized by bounded contexts:
- antennas: Grid placement, harmonic effect derivation, grid rendering
- network: Same-frequency adjacency graph and reachability traversals
"""

# Imports alphabetized per project style (isort)
from domain import antennas, network

__all__ = ["antennas", "network"]
