"""Network Bounded Context - Traversal Services.

Depth-first and breadth-first reachability over an AntennaGraph.

Both traversals return the visited vertices in visitation order. A missing
origin yields an empty tuple; a present origin always appears first, so an
empty result unambiguously means "origin not found".
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator

from domain.network.graph import AntennaGraph, Vertex

logger = logging.getLogger(__name__)


def depth_first(graph: AntennaGraph, start_id: int) -> tuple[Vertex, ...]:
    """Visit every vertex reachable from start_id in depth-first pre-order.

    Produces the same order as the textbook recursive DFS (neighbors explored
    in adjacency order) using an explicit stack of neighbor iterators, so the
    depth of the graph is not bounded by the interpreter recursion limit.
    """
    start = graph.find_vertex(start_id)
    if start is None:
        logger.warning("DFS origin vertex %d not found", start_id)
        return ()

    visited: set[int] = {start.id}
    order: list[Vertex] = [start]
    stack: list[Iterator[int]] = [iter(tuple(start.adjacency))]

    while stack:
        neighbor_id = next(stack[-1], None)
        if neighbor_id is None:
            stack.pop()
            continue
        if neighbor_id in visited:
            continue
        neighbor = graph.find_vertex(neighbor_id)
        if neighbor is None:
            continue
        visited.add(neighbor_id)
        order.append(neighbor)
        stack.append(iter(tuple(neighbor.adjacency)))

    return tuple(order)


def breadth_first(graph: AntennaGraph, start_id: int) -> tuple[Vertex, ...]:
    """Visit every vertex reachable from start_id in breadth-first order.

    Vertices are marked visited when enqueued, so each is queued once.
    """
    start = graph.find_vertex(start_id)
    if start is None:
        logger.warning("BFS origin vertex %d not found", start_id)
        return ()

    visited: set[int] = {start.id}
    order: list[Vertex] = []
    queue: deque[Vertex] = deque([start])

    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbor_id in vertex.adjacency:
            if neighbor_id in visited:
                continue
            neighbor = graph.find_vertex(neighbor_id)
            if neighbor is None:
                continue
            visited.add(neighbor_id)
            queue.append(neighbor)

    return tuple(order)
