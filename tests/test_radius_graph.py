import pytest
from graph_radius.incidence import IncidenceStore
from graph_radius.metrics import compute_metrics
from graph_radius.radius_graph import build_radius_graph, radius_edges


def connected_to(store, vertex):
    return sorted({v for u, v in store.edges if u == vertex} | {u for u, v in store.edges if v == vertex})


def test_path_graph_radius_two(path_graph):
    result = build_radius_graph(path_graph, 2)
    assert result.vertex_count == 5
    assert connected_to(result, 2) == [0, 1, 3, 4]
    assert connected_to(result, 0) == [1, 2]
    assert connected_to(result, 4) == [2, 3]


def test_ordered_pairs_are_emitted_per_direction(path_graph):
    edges = radius_edges(path_graph, 2)
    assert edges[:5] == [(0, 1), (0, 2), (1, 0), (1, 2), (1, 3)]
    assert len(edges) == 14
    assert (0, 1) in edges and (1, 0) in edges


def test_deduplicate_halves_edge_count(path_graph):
    both = build_radius_graph(path_graph, 2)
    once = build_radius_graph(path_graph, 2, deduplicate=True)
    assert once.edge_count * 2 == both.edge_count
    assert all(u < v for u, v in once.edges)
    assert {frozenset(edge) for edge in once.edges} == {frozenset(edge) for edge in both.edges}


def test_star_graph_at_radius(star_graph):
    rad = compute_metrics(star_graph).radius
    result = build_radius_graph(star_graph, rad)
    assert result.edge_count == 8
    assert connected_to(result, 0) == [1, 2, 3, 4]
    assert connected_to(result, 1) == [0]


def test_cycle_graph_becomes_complete(cycle_graph):
    result = build_radius_graph(cycle_graph, 2, deduplicate=True)
    assert result.edge_count == 10


def test_rows_have_two_bits(path_graph):
    result = build_radius_graph(path_graph, 2)
    assert all(sum(row) == 2 for row in result.matrix())


def test_source_store_is_untouched(path_graph):
    before = path_graph.matrix()
    build_radius_graph(path_graph, 3)
    assert path_graph.matrix() == before
    assert path_graph.edge_count == 4


def test_single_vertex_yields_no_edges():
    result = build_radius_graph(IncidenceStore(1), 0)
    assert result.vertex_count == 1
    assert result.edge_count == 0
    assert result.matrix() == []


def test_negative_radius():
    with pytest.raises(ValueError):
        radius_edges(IncidenceStore.from_edges(2, [(0, 1)]), -1)
