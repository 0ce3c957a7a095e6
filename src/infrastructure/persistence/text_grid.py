"""Text grid adapter for AntennaRepository.

File format: one line per grid row (row index = y), one character per cell
(column index = x). '.' marks an empty cell, '#' a harmonic effect cell and
any other non-whitespace character an antenna of that frequency.

Loading is lenient: reserved glyphs, whitespace and characters that are not
valid frequencies (non-ASCII) are skipped. Cells beyond the grid are returned
as off-grid antennas so that the collection's load step can reject and
count them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from domain.antennas.errors import InvalidGridFileError
from domain.antennas.services import format_grid, render_grid
from domain.antennas.value_objects import GRID_SIZE, RESERVED_GLYPHS, Antenna, EffectPoint

from .paths import check_extension, stat_readable

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = (".txt",)


class TextGridAdapter:
    """Infrastructure adapter storing antennas as a plain-text character grid.

    Parameters
    ----------
    size: int
        Side of the grid written by save_antennas.
    encoding: str
        Text encoding used for both reading and writing.
    """

    def __init__(self, size: int = GRID_SIZE, encoding: str = "utf-8") -> None:
        self.size = size
        self.encoding = encoding

    def load_antennas(self, file_path: Path | str) -> list[Antenna]:
        path = Path(file_path)
        stat_readable(path, TEXT_SUFFIXES)

        try:
            text = path.read_text(encoding=self.encoding)
        except PermissionError as e:
            raise PermissionError(path.name) from e
        except UnicodeDecodeError as e:
            raise InvalidGridFileError(f"Undecodable grid file: {e.reason}") from e

        antennas: list[Antenna] = []
        invalid = 0
        for y, row in enumerate(text.splitlines()):
            for x, cell in enumerate(row):
                if cell in RESERVED_GLYPHS or cell.isspace():
                    continue
                try:
                    antennas.append(Antenna(frequency=cell, x=x, y=y))
                except ValidationError:
                    invalid += 1

        if invalid:
            logger.warning("Grid %s: Skipped %d invalid cell(s)", path.name, invalid)
        logger.info("Grid %s: Loaded %d antenna(s)", path.name, len(antennas))
        return antennas

    def save_antennas(
        self,
        antennas: Iterable[Antenna],
        file_path: Path | str,
        effects: Iterable[EffectPoint] = (),
    ) -> None:
        path = Path(file_path)
        check_extension(path, TEXT_SUFFIXES)

        grid = render_grid(antennas, effects, self.size)
        try:
            path.write_text(format_grid(grid, separator="") + "\n", encoding=self.encoding)
        except PermissionError as e:
            raise PermissionError(path.name) from e

        logger.info("Grid %s: Saved %dx%d grid", path.name, self.size, self.size)
