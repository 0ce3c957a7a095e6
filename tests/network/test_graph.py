"""Tests for AntennaGraph vertex and edge maintenance."""

from __future__ import annotations

import pytest

from domain.network.graph import FIRST_VERTEX_ID, AntennaGraph


def assert_symmetric(g: AntennaGraph) -> None:
    ids = {v.id for v in g}
    for vertex in g:
        assert len(vertex.adjacency) == len(set(vertex.adjacency))
        for neighbor in vertex.adjacency:
            assert neighbor in ids
            assert vertex.id in g.find_vertex(neighbor).adjacency


# ===========================================================================
# Vertices
# ===========================================================================
def test_insert_vertex_assigns_sequential_ids(graph):
    first = graph.insert_vertex("A", 0, 0)
    second = graph.insert_vertex("B", 1, 0)

    assert first.id == FIRST_VERTEX_ID
    assert second.id == FIRST_VERTEX_ID + 1
    assert graph.vertex_count == 2
    assert first.adjacency == ()


def test_find_vertex_returns_matching_fields(graph):
    created = graph.insert_vertex("x", 4, 7)

    found = graph.find_vertex(created.id)

    assert found is created
    assert (found.frequency, found.x, found.y) == ("x", 4, 7)


def test_find_vertex_absent_is_none(graph):
    assert graph.find_vertex(42) is None


@pytest.mark.parametrize(("x", "y"), [(-1, 0), (10, 0), (0, -1), (0, 10)])
def test_insert_vertex_out_of_bounds_rejected(graph, x, y):
    assert graph.insert_vertex("A", x, y) is None
    assert graph.vertex_count == 0


def test_insert_vertex_duplicate_position_rejected_without_consuming_id(graph):
    graph.insert_vertex("A", 3, 3)

    assert graph.insert_vertex("B", 3, 3) is None
    assert graph.insert_vertex("B", 4, 3).id == 2


def test_remove_vertex_then_find_is_none(mixed_graph):
    assert mixed_graph.remove_vertex(2) is True

    assert mixed_graph.find_vertex(2) is None
    assert mixed_graph.vertex_count == 4
    assert_symmetric(mixed_graph)
    assert all(2 not in v.adjacency for v in mixed_graph)


def test_remove_vertex_frees_its_position(mixed_graph):
    mixed_graph.remove_vertex(1)

    vertex = mixed_graph.insert_vertex("C", 0, 0)

    assert vertex is not None
    assert vertex.id == 6  # ids are never reused


def test_remove_vertex_absent_or_empty(graph, mixed_graph):
    assert graph.remove_vertex(1) is False
    assert mixed_graph.remove_vertex(99) is False
    assert mixed_graph.vertex_count == 5


# ===========================================================================
# Edges
# ===========================================================================
def test_connect_peers_links_every_same_frequency_vertex(graph):
    a1 = graph.insert_vertex("A", 0, 0)
    a2 = graph.insert_vertex("A", 1, 1)
    a3 = graph.insert_vertex("A", 2, 2)
    graph.insert_vertex("B", 3, 3)

    assert graph.connect_peers(a3.id) == 2

    assert a3.adjacency == (a1.id, a2.id)
    assert a1.adjacency == (a3.id,)
    assert_symmetric(graph)


def test_connect_peers_is_idempotent(mixed_graph):
    assert mixed_graph.connect_peers(1) == 0
    assert mixed_graph.connect_peers(404) == 0


def test_load_builds_full_same_frequency_cliques(mixed_graph):
    assert set(mixed_graph.edges()) == {(1, 2), (1, 3), (2, 3), (4, 5)}
    assert_symmetric(mixed_graph)


def test_insert_edge_rules(mixed_graph):
    assert mixed_graph.insert_edge(1, 1) is False  # self loop
    assert mixed_graph.insert_edge(1, 4) is False  # frequency mismatch
    assert mixed_graph.insert_edge(1, 2) is False  # already linked
    assert mixed_graph.insert_edge(1, 99) is False  # unknown id


def test_insert_edge_single_link(graph):
    a = graph.insert_vertex("A", 0, 0)
    b = graph.insert_vertex("A", 0, 5)

    assert graph.insert_edge(a.id, b.id) is True

    assert graph.edges() == ((a.id, b.id),)
    assert_symmetric(graph)


def test_remove_edges_of_purges_all_incident_edges(mixed_graph):
    assert mixed_graph.remove_edges_of(1) is True

    assert mixed_graph.find_vertex(1).adjacency == ()
    assert set(mixed_graph.edges()) == {(2, 3), (4, 5)}
    assert_symmetric(mixed_graph)


def test_remove_edges_of_without_edges(graph):
    v = graph.insert_vertex("A", 0, 0)

    assert graph.remove_edges_of(v.id) is False
    assert graph.remove_edges_of(99) is False


def test_adjacency_is_a_read_only_view(graph):
    a = graph.insert_vertex("A", 0, 0)
    b = graph.insert_vertex("A", 1, 0)
    graph.connect_peers(b.id)

    view = b.adjacency
    assert view == (a.id,)
    with pytest.raises(AttributeError):
        view.append(a.id)

    assert graph.remove_edges_of(a.id) is True
    assert b.adjacency == ()
    assert view == (a.id,)
    assert_symmetric(graph)


# ===========================================================================
# Lifecycle
# ===========================================================================
def test_clear_drops_everything(mixed_graph):
    vertices = mixed_graph.vertices()

    assert mixed_graph.clear() is True

    assert mixed_graph.vertex_count == 0
    assert mixed_graph.edges() == ()
    assert all(v.adjacency == () for v in vertices)
    assert mixed_graph.clear() is False


def test_clear_keeps_id_counter_running(mixed_graph):
    mixed_graph.clear()

    assert mixed_graph.insert_vertex("A", 0, 0).id == 6


def test_load_skips_rejected_placements(graph, caplog):
    with caplog.at_level("WARNING"):
        inserted = graph.load([("A", 0, 0), ("A", 0, 0), ("A", 10, 10), ("A", 9, 9)])

    assert inserted == 2
    assert graph.edges() == ((1, 2),)
    assert "Skipped 2 rejected vertex placement(s)" in caplog.text


def test_antennas_view_feeds_effect_derivation(mixed_graph):
    from domain.antennas.services import derive_effects

    effects = derive_effects(mixed_graph.antennas())

    # B(5, 5) and B(6, 6) project onto (4, 4) and (7, 7)
    assert {(4, 4), (7, 7)} <= {p.position for p in effects}


def test_load_skips_invalid_frequencies(graph, caplog):
    with caplog.at_level("WARNING"):
        inserted = graph.load([("A", 1, 1), ("AB", 2, 2), ("A", 3, 3)])

    assert inserted == 2
    assert [v.frequency for v in graph] == ["A", "A"]
    assert graph.edges() == ((1, 2),)
    assert "Skipped 1 rejected vertex placement(s)" in caplog.text
