"""Network Bounded Context - Graph Model.

Antennas promoted to vertices of an undirected graph whose edges connect
vertices sharing a frequency.

Storage is an arena: a dict from stable integer id to Vertex. Adjacency holds
id references only, so removing a vertex can never leave a dangling object
reference behind, only ids that the removal step purges.

Ids are handed out by the graph itself (starting at 1, never reused within
the lifetime of one graph), which rules out duplicate ids.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from pydantic import BaseModel, Field, PrivateAttr

from domain.antennas.value_objects import GRID_SIZE, Antenna, is_within_grid

logger = logging.getLogger(__name__)

FIRST_VERTEX_ID = 1


class Vertex(BaseModel):
    """Graph vertex wrapping an antenna (Entity).

    Identity is the id; the antenna is the immutable placement. Adjacency is
    the ordered neighbor ids without duplicates, in link order, which is the
    order traversals follow. It is read-only here: only AntennaGraph edits
    the underlying list, which keeps every edge symmetric.
    """

    id: int = Field(ge=FIRST_VERTEX_ID)
    antenna: Antenna

    _adjacency: list[int] = PrivateAttr(default_factory=list)

    @property
    def adjacency(self) -> tuple[int, ...]:
        return tuple(self._adjacency)

    @property
    def frequency(self) -> str:
        return self.antenna.frequency

    @property
    def x(self) -> int:
        return self.antenna.x

    @property
    def y(self) -> int:
        return self.antenna.y

    @property
    def position(self) -> tuple[int, int]:
        return self.antenna.position

    def is_adjacent(self, other_id: int) -> bool:
        return other_id in self._adjacency


class AntennaGraph:
    """Undirected same-frequency adjacency graph over grid antennas.

    Invariants:
        AG-1: adjacency is symmetric (u in v.adjacency <=> v in u.adjacency)
        AG-2: every vertex position is on the grid and unique
        AG-3: edges only join distinct vertices of equal frequency
        AG-4: adjacency never references an id absent from the graph
    """

    def __init__(self, size: int = GRID_SIZE) -> None:
        self.size = size
        self._vertices: dict[int, Vertex] = {}
        self._positions: dict[tuple[int, int], int] = {}
        self._next_id = FIRST_VERTEX_ID

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(tuple(self._vertices.values()))

    def __repr__(self) -> str:
        return f"AntennaGraph(vertices={len(self)}, edges={len(self.edges())})"

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    def vertices(self) -> tuple[Vertex, ...]:
        return tuple(self._vertices.values())

    def antennas(self) -> tuple[Antenna, ...]:
        return tuple(v.antenna for v in self._vertices.values())

    def edges(self) -> tuple[tuple[int, int], ...]:
        """Return each undirected edge once as (lower id, higher id)."""
        return tuple(
            (vertex.id, neighbor)
            for vertex in self._vertices.values()
            for neighbor in vertex.adjacency
            if vertex.id < neighbor
        )

    # -----------------------------------------------------------------------
    # Vertices
    # -----------------------------------------------------------------------
    def find_vertex(self, vertex_id: int) -> Vertex | None:
        return self._vertices.get(vertex_id)

    def insert_vertex(self, frequency: str, x: int, y: int) -> Vertex | None:
        """Create a vertex with the next free id.

        Returns None (no mutation, no id consumed) when (x, y) is off the grid
        or already occupied. The new vertex has no edges; see connect_peers.

        Raises:
            ValueError: If frequency is not a valid antenna symbol
        """
        if not is_within_grid(x, y, self.size):
            logger.debug("Rejected vertex %s at (%d, %d): out of bounds", frequency, x, y)
            return None
        if (x, y) in self._positions:
            logger.debug("Rejected vertex %s at (%d, %d): position occupied", frequency, x, y)
            return None

        vertex = Vertex(id=self._next_id, antenna=Antenna(frequency=frequency, x=x, y=y))
        self._vertices[vertex.id] = vertex
        self._positions[(x, y)] = vertex.id
        self._next_id += 1
        logger.debug("Inserted vertex %d (%s at %d, %d)", vertex.id, frequency, x, y)
        return vertex

    def remove_vertex(self, vertex_id: int) -> bool:
        """Purge every incident edge, then drop the vertex.

        Returns False if the graph is empty or the id is absent.
        """
        if not self._vertices:
            return False
        vertex = self._vertices.get(vertex_id)
        if vertex is None:
            return False

        self.remove_edges_of(vertex_id)
        del self._vertices[vertex_id]
        del self._positions[vertex.position]
        logger.debug("Removed vertex %d", vertex_id)
        return True

    # -----------------------------------------------------------------------
    # Edges
    # -----------------------------------------------------------------------
    def insert_edge(self, vertex_id: int, other_id: int) -> bool:
        """Link two distinct same-frequency vertices with one undirected edge.

        Returns False for unknown ids, self loops, frequency mismatch, or an
        edge that already exists.
        """
        if vertex_id == other_id:
            return False
        vertex = self._vertices.get(vertex_id)
        other = self._vertices.get(other_id)
        if vertex is None or other is None:
            return False
        if vertex.frequency != other.frequency or vertex.is_adjacent(other_id):
            return False

        vertex._adjacency.append(other_id)
        other._adjacency.append(vertex_id)
        return True

    def connect_peers(self, vertex_id: int) -> int:
        """Link a vertex to every same-frequency vertex it is not yet linked to.

        Peers are visited in id order. Returns the number of new edges.
        """
        vertex = self._vertices.get(vertex_id)
        if vertex is None:
            return 0

        created = 0
        for other in tuple(self._vertices.values()):
            if other.frequency == vertex.frequency and self.insert_edge(vertex_id, other.id):
                created += 1
        if created:
            logger.debug("Vertex %d linked to %d peer(s)", vertex_id, created)
        return created

    def remove_edges_of(self, vertex_id: int) -> bool:
        """Remove every edge incident to a vertex, in both directions.

        Returns True if at least one edge was removed.
        """
        vertex = self._vertices.get(vertex_id)
        if vertex is None:
            return False

        removed = bool(vertex._adjacency)
        for neighbor_id in vertex._adjacency:
            neighbor = self._vertices.get(neighbor_id)
            if neighbor is not None and vertex_id in neighbor._adjacency:
                neighbor._adjacency.remove(vertex_id)
        vertex._adjacency.clear()
        return removed

    # -----------------------------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------------------------
    def clear(self) -> bool:
        """Drop all edges, then all vertices. False if already empty.

        The id counter keeps running so ids stay unique for the graph's life.
        """
        if not self._vertices:
            return False
        for vertex in self._vertices.values():
            vertex._adjacency.clear()
        self._vertices.clear()
        self._positions.clear()
        return True

    def load(self, triples: Iterable[tuple[str, int, int]]) -> int:
        """Insert (frequency, x, y) triples, connecting each to its peers.

        Rejected placements and invalid frequencies are skipped. Returns the
        number of vertices added.
        """
        inserted = 0
        skipped = 0
        for frequency, x, y in triples:
            try:
                vertex = self.insert_vertex(frequency, x, y)
            except ValueError:
                vertex = None
            if vertex is None:
                skipped += 1
                continue
            self.connect_peers(vertex.id)
            inserted += 1
        if skipped:
            logger.warning("Skipped %d rejected vertex placement(s) during load", skipped)
        return inserted
