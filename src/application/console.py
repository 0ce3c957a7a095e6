"""Interactive antenna console.

Line-oriented command shell over an AntennaRegistry and an AntennaGraph.
Every command maps to exactly one core operation and reports its result.
Successful mutations are persisted immediately to both the binary and the
text file of the affected collection.
"""

from __future__ import annotations

import cmd
import logging
from collections.abc import Callable
from pathlib import Path
from typing import IO

from domain.antennas.errors import AntennaError
from domain.antennas.registry import AntennaRegistry
from domain.antennas.repositories import AntennaRepository
from domain.antennas.services import derive_effects, format_grid, render_grid
from domain.antennas.value_objects import Antenna, Outcome
from domain.network.graph import AntennaGraph, Vertex
from domain.network.traversal import breadth_first, depth_first
from infrastructure.persistence import BinaryRecordAdapter, TextGridAdapter

from .settings import ConsoleSettings

logger = logging.getLogger(__name__)

_INSERT_MESSAGES = {
    Outcome.INSERTED: "Antenna inserted.",
    Outcome.OUT_OF_BOUNDS: "Coordinates outside the {size}x{size} grid.",
    Outcome.DUPLICATE: "An antenna already exists at ({x}, {y}).",
}

_REMOVE_MESSAGES = {
    Outcome.REMOVED: "Antenna removed.",
    Outcome.NOT_FOUND: "Antenna not found.",
    Outcome.EMPTY: "No antennas to remove.",
}


def _parse_placement(arg: str) -> tuple[str, int, int] | None:
    parts = arg.split()
    if len(parts) != 3:
        return None
    frequency, raw_x, raw_y = parts
    try:
        return frequency, int(raw_x), int(raw_y)
    except ValueError:
        return None


def _parse_id(arg: str) -> int | None:
    try:
        return int(arg.strip())
    except ValueError:
        return None


def _describe(vertex: Vertex) -> str:
    return f"{vertex.id}: {vertex.frequency} ({vertex.x}, {vertex.y})"


class AntennaConsole(cmd.Cmd):
    """Command surface for antenna placement and graph queries."""

    intro = "Antenna planner. Type help or ? to list commands."
    prompt = "(antennas) "

    def __init__(
        self,
        settings: ConsoleSettings | None = None,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.settings = settings or ConsoleSettings()
        self.registry = AntennaRegistry()
        self.graph = AntennaGraph()
        self.binary = BinaryRecordAdapter()
        self.text = TextGridAdapter()

    def say(self, message: str) -> None:
        self.stdout.write(message + "\n")

    # -----------------------------------------------------------------------
    # Persistence
    # -----------------------------------------------------------------------
    def _load_first(
        self, candidates: list[tuple[AntennaRepository, Path]]
    ) -> tuple[list[Antenna] | None, bool]:
        """Return the antennas of the first candidate file that loads.

        The flag is True when at least one candidate existed but failed to
        load, so callers can tell "no file" from "unreadable file".
        """
        failed = False
        for adapter, path in candidates:
            try:
                return adapter.load_antennas(path), failed
            except FileNotFoundError:
                continue
            except (AntennaError, OSError) as e:
                logger.warning("Could not load %s: %s", path.name, e)
                failed = True
        return None, failed

    def load_state(self) -> None:
        """Populate registry and graph from disk, binary file first."""
        antennas, failed = self._load_first(
            [(self.binary, self.settings.antennas_bin), (self.text, self.settings.antennas_txt)]
        )
        if antennas is None and failed:
            self.say("Antenna files could not be loaded. Starting with an empty list.")
        elif antennas is None:
            self.say("No antenna file found. Starting with an empty list.")
        else:
            count = self.registry.load((a.frequency, a.x, a.y) for a in antennas)
            self.say(f"Loaded {count} antenna(s).")

        vertices, failed = self._load_first(
            [(self.binary, self.settings.graph_bin), (self.text, self.settings.graph_txt)]
        )
        if vertices is None and failed:
            self.say("Graph files could not be loaded. Starting with an empty graph.")
        elif vertices is None:
            self.say("No graph file found. Starting with an empty graph.")
        else:
            count = self.graph.load((a.frequency, a.x, a.y) for a in vertices)
            self.say(f"Loaded {count} vertex(es).")

    def _save(self, antennas: tuple[Antenna, ...], binary_path: Path, text_path: Path) -> None:
        # Each file is written independently; one failing never blocks the other
        for adapter, path in ((self.binary, binary_path), (self.text, text_path)):
            try:
                adapter.save_antennas(antennas, path)
            except (AntennaError, OSError) as e:
                logger.error("Failed to save %s: %s", path.name, e)
                self.say(f"Could not save {path.name}: {e}")

    def save_registry(self) -> None:
        self._save(self.registry.antennas(), self.settings.antennas_bin, self.settings.antennas_txt)

    def save_graph(self) -> None:
        self._save(self.graph.antennas(), self.settings.graph_bin, self.settings.graph_txt)

    # -----------------------------------------------------------------------
    # Antenna commands
    # -----------------------------------------------------------------------
    def do_insert(self, arg: str) -> None:
        """insert F X Y  Place an antenna of frequency F at (X, Y)."""
        placement = _parse_placement(arg)
        if placement is None:
            self.say("Usage: insert F X Y")
            return
        frequency, x, y = placement
        try:
            outcome = self.registry.insert(frequency, x, y)
        except ValueError as e:
            self.say(f"Invalid frequency {frequency!r}: {e}")
            return
        self.say(_INSERT_MESSAGES[outcome].format(size=self.registry.size, x=x, y=y))
        if outcome.ok:
            self.save_registry()

    def do_remove(self, arg: str) -> None:
        """remove F X Y  Remove the antenna of frequency F at (X, Y)."""
        placement = _parse_placement(arg)
        if placement is None:
            self.say("Usage: remove F X Y")
            return
        outcome = self.registry.remove(*placement)
        self.say(_REMOVE_MESSAGES[outcome])
        if outcome.ok:
            self.save_registry()

    def do_list(self, arg: str) -> None:
        """list  Show the antenna grid with harmonic effects ('#')."""
        antennas = self.registry.antennas()
        grid = render_grid(antennas, derive_effects(antennas), self.registry.size)
        self.say(format_grid(grid))

    # -----------------------------------------------------------------------
    # Graph commands
    # -----------------------------------------------------------------------
    def do_vinsert(self, arg: str) -> None:
        """vinsert F X Y  Add a vertex and link it to every same-frequency vertex."""
        placement = _parse_placement(arg)
        if placement is None:
            self.say("Usage: vinsert F X Y")
            return
        try:
            vertex = self.graph.insert_vertex(*placement)
        except ValueError as e:
            self.say(f"Invalid frequency {placement[0]!r}: {e}")
            return
        if vertex is None:
            self.say("Position is outside the grid or already occupied.")
            return
        links = self.graph.connect_peers(vertex.id)
        self.say(f"Vertex inserted! ID: {vertex.id} ({links} link(s) created).")
        self.save_graph()

    def do_vremove(self, arg: str) -> None:
        """vremove ID  Remove a vertex and every edge touching it."""
        vertex_id = _parse_id(arg)
        if vertex_id is None:
            self.say("Usage: vremove ID")
            return
        if self.graph.remove_vertex(vertex_id):
            self.say("Vertex removed.")
            self.save_graph()
        else:
            self.say("Vertex not found.")

    def do_graph(self, arg: str) -> None:
        """graph  Show the graph's antennas on the grid with harmonic effects."""
        antennas = self.graph.antennas()
        grid = render_grid(antennas, derive_effects(antennas), self.graph.size)
        self.say(format_grid(grid))

    def do_vertices(self, arg: str) -> None:
        """vertices  List every vertex with its neighbor ids."""
        if not self.graph.vertex_count:
            self.say("Graph is empty.")
            return
        for vertex in self.graph.vertices():
            neighbors = ", ".join(str(n) for n in vertex.adjacency) or "-"
            self.say(f"{_describe(vertex)} -> {neighbors}")

    def _traverse(
        self, arg: str, name: str, search: Callable[[AntennaGraph, int], tuple[Vertex, ...]]
    ) -> None:
        start_id = _parse_id(arg)
        if start_id is None:
            self.say(f"Usage: {name.lower()} ID")
            return
        visited = search(self.graph, start_id)
        if not visited:
            self.say("Origin vertex not found.")
            return
        self.say(f"{name} from {start_id}:")
        for vertex in visited:
            self.say(f"  {_describe(vertex)}")

    def do_dfs(self, arg: str) -> None:
        """dfs ID  Depth-first search from vertex ID."""
        self._traverse(arg, "DFS", depth_first)

    def do_bfs(self, arg: str) -> None:
        """bfs ID  Breadth-first search from vertex ID."""
        self._traverse(arg, "BFS", breadth_first)

    # -----------------------------------------------------------------------
    # Shell plumbing
    # -----------------------------------------------------------------------
    def do_quit(self, arg: str) -> bool:
        """quit  Leave the console."""
        self.say("Bye.")
        return True

    do_EOF = do_quit

    def emptyline(self) -> bool:
        return False

    def default(self, line: str) -> None:
        self.say(f"Unknown command: {line.split()[0]}")
