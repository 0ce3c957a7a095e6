"""Shared pre-flight checks for persistence adapters."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from domain.antennas.errors import InvalidGridFileError

logger = logging.getLogger(__name__)


def check_extension(path: Path, suffixes: tuple[str, ...]) -> None:
    """Reject files outside the adapter's extension allowlist."""
    if path.suffix.lower() not in suffixes:
        raise InvalidGridFileError(f"Unsupported file extension: {path.suffix}")


def stat_readable(path: Path, suffixes: tuple[str, ...]) -> os.stat_result:
    """Validate a file before reading it and return its stat result.

    Order matters: a missing file always surfaces as FileNotFoundError, even
    when its extension is wrong.

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidGridFileError: On a disallowed extension or a symlink
        OSError: If the file cannot be stat'ed (logged, then re-raised)
    """
    if not path.exists():
        raise FileNotFoundError(str(path))

    check_extension(path, suffixes)

    if path.is_symlink():
        raise InvalidGridFileError("Symlinks are not permitted")

    try:
        return path.stat()
    except OSError as e:
        # Log only the file name, never the full path
        logger.error(
            "Failed to stat %s (errno=%s, strerror=%s)",
            path.name,
            getattr(e, "errno", "unknown"),
            getattr(e, "strerror", "unknown"),
        )
        raise
