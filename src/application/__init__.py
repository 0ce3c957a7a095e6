"""Interactive console for the antenna planner.

Run with ``python -m application``.
"""

from .console import AntennaConsole
from .settings import ConsoleSettings

__all__ = ["AntennaConsole", "ConsoleSettings"]
