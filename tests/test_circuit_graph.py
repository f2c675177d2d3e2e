import sys
from itertools import combinations
from pathlib import Path

import networkx as nx
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "solver"))

from circuit_errors import VertexError
from circuit_graph import Graph


def complete_graph(n):
    return Graph.from_edges(n, combinations(range(1, n + 1), 2))


def cycle_graph(n):
    return Graph.from_edges(n, [(i, i % n + 1) for i in range(1, n + 1)])


def test_vertex_lookup_by_id():
    g = Graph(5)
    assert [g.vertex(i).id for i in range(1, 6)] == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("vid", [0, 6, -1])
def test_vertex_lookup_out_of_range(vid):
    g = Graph(5)
    with pytest.raises(VertexError):
        g.vertex(vid)


def test_add_remove_round_trip_restores_degrees():
    g = cycle_graph(5)
    before = (g.degree(1), g.degree(3))

    g.add_edge(1, 3)
    assert g.has_edge(1, 3) and g.has_edge(3, 1)
    assert (g.degree(1), g.degree(3)) == (before[0] + 1, before[1] + 1)

    g.remove_edge(1, 3)
    assert (g.degree(1), g.degree(3)) == before
    assert not g.has_edge(1, 3)
    assert not g.has_edge(3, 1)


def test_remove_missing_edge_is_noop():
    g = cycle_graph(4)
    g.remove_edge(1, 3)
    assert g.edge_count() == 4


def test_remove_edge_from_either_endpoint():
    g = cycle_graph(4)
    g.remove_edge(2, 1)
    assert not g.has_edge(1, 2)
    assert g.neighbors(1) == [4]
    assert g.neighbors(2) == [3]


@pytest.mark.parametrize("n", [2, 3, 4, 7])
def test_density_of_complete_graph_is_one(n):
    g = complete_graph(n)
    assert g.edge_count() == n * (n - 1) // 2
    assert g.density() == pytest.approx(1.0)


def test_density_convention_is_not_halved():
    g = Graph.from_edges(4, [(1, 2), (2, 3), (3, 1)])
    # sum of degrees 6 over 4 * 3
    assert g.density() == pytest.approx(0.5)


def test_density_of_tiny_graphs():
    assert Graph(0).density() == 0.0
    assert Graph(1).density() == 0.0


def test_edge_count_matches_half_degree_sum():
    g = complete_graph(6)
    g.remove_edge(1, 2)
    g.remove_edge(3, 5)
    assert g.edge_count() == sum(g.degree(v) for v in range(1, 7)) // 2 == 13


def test_connectivity():
    g = cycle_graph(6)
    assert g.is_connected()
    assert g.unreached_vertices() == set()

    g.remove_edge(1, 2)
    assert g.is_connected()
    g.remove_edge(4, 5)
    assert not g.is_connected()
    assert g.unreached_vertices() == {2, 3, 4}
    assert g.unreached_vertices(start=3) == {1, 5, 6}


def test_connectivity_handles_deep_paths():
    n = 5000
    g = Graph.from_edges(n, [(i, i + 1) for i in range(1, n)])
    assert g.is_connected()


def test_empty_and_single_vertex_are_connected():
    assert Graph(0).is_connected()
    assert Graph(1).is_connected()
    assert not Graph(2).is_connected()


def test_eulerian_and_isolated_checks():
    g = cycle_graph(5)
    assert g.is_eulerian()
    assert not g.has_isolated_vertex()
    assert g.odd_vertices() == []

    g.remove_edge(5, 1)
    assert not g.is_eulerian()
    assert g.odd_vertices() == [1, 5]

    h = Graph.from_edges(4, [(1, 2), (2, 3), (3, 1)])
    assert h.is_eulerian()
    assert h.has_isolated_vertex()


def test_copy_is_independent_and_keeps_order():
    g = Graph.from_edges(4, [(1, 3), (1, 2), (2, 3), (4, 1)])
    h = g.copy()

    assert [h.neighbors(v) for v in range(1, 5)] == [g.neighbors(v) for v in range(1, 5)]

    h.remove_edge(1, 3)
    assert g.has_edge(1, 3)
    assert g.edge_count() == 4 and h.edge_count() == 3


def test_edges_and_networkx_view():
    edges = [(1, 2), (2, 3), (3, 1), (3, 4)]
    g = Graph.from_edges(5, edges)

    assert list(g.edges()) == edges
    G = g.to_networkx()
    assert sorted(G.nodes()) == [1, 2, 3, 4, 5]
    assert G.number_of_edges() == 4
    assert nx.is_connected(G) == g.is_connected()


def test_add_edge_rejects_loops_and_duplicates():
    g = Graph(3)
    with pytest.raises(ValueError):
        g.add_edge(2, 2)
    g.add_edge(1, 2)
    with pytest.raises(ValueError):
        g.add_edge(2, 1)
    with pytest.raises(VertexError):
        g.add_edge(1, 4)


def test_str_lists_adjacency():
    g = Graph.from_edges(3, [(1, 2), (1, 3)])
    assert str(g) == "1: 2 -> 3\n2: 1\n3: 1"
    assert len(g) == 3
