"""Command-line entry point: ``python -m application``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from .console import AntennaConsole
from .settings import LOG_LEVELS, ConsoleSettings

logger = logging.getLogger(__name__)


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="antenna-planner",
        description="Place antennas on a grid, inspect harmonic effects and query the same-frequency graph.",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("."),
        help="Directory holding the antenna and graph files (default: current directory)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = ConsoleSettings(data_dir=args.data_dir, log_level=args.log_level)
    except ValidationError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 2

    _configure_logging(settings.numeric_log_level)
    logger.debug("Using data directory %s", settings.data_dir)

    console = AntennaConsole(settings)
    console.load_state()
    console.cmdloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
