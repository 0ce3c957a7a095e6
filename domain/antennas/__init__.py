"""Antennas Bounded Context.

Responsible for antenna placement on the fixed grid:
- Value Objects: Antenna, EffectPoint, Outcome
- Entities: AntennaRegistry
- Services: derive_effects (harmonic effects), render_grid, format_grid
"""
