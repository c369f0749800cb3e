"""Unit tests for DirectedGraph construction and traversals."""

import math

import pytest

from pathway_graph.domain.errors import InvalidEdgeError, InvalidWeightError
from pathway_graph.domain.models import Edge
from pathway_graph.graph import DirectedGraph


def make_graph(*edges):
    graph = DirectedGraph()
    for edge in edges:
        graph.add_edge(*edge)
    return graph


# --- Construction ------------------------------------------------------------


def test_add_vertex_is_idempotent():
    graph = make_graph(("a", "b"))

    graph.add_vertex("a")
    graph.add_vertex("a")

    assert len(graph) == 2
    assert graph.neighbors("a") == (Edge("b", 1.0),)


def test_add_edge_creates_both_endpoints_one_direction_only():
    graph = make_graph(("a", "b", 2.5))

    assert graph.vertices() == ["a", "b"]
    assert graph.neighbors("a") == (Edge("b", 2.5),)
    assert graph.neighbors("b") == ()


def test_self_loop_rejected_without_mutation():
    graph = DirectedGraph()

    with pytest.raises(InvalidEdgeError) as excinfo:
        graph.add_edge("a", "a")

    assert excinfo.value.reason == "self-loop"
    assert "a" not in graph
    assert graph.revision == 0


def test_duplicate_edge_rejected():
    graph = make_graph(("a", "b", 1))

    with pytest.raises(InvalidEdgeError) as excinfo:
        graph.add_edge("a", "b", 7)

    assert excinfo.value.reason == "duplicate edge"
    assert len(graph.neighbors("a")) == 1
    assert graph.neighbors("a")[0].weight == 1.0


def test_opposite_directions_are_distinct_edges():
    graph = make_graph(("a", "b"), ("b", "a"))

    assert graph.has_edge("a", "b")
    assert graph.has_edge("b", "a")
    assert graph.edge_count == 2


@pytest.mark.parametrize("weight", ["3", None, True])
def test_non_numeric_weight_rejected(weight):
    graph = DirectedGraph()

    with pytest.raises(InvalidWeightError) as excinfo:
        graph.add_edge("a", "b", weight)

    assert excinfo.value.weight is weight
    assert (excinfo.value.source, excinfo.value.target) == ("a", "b")
    assert len(graph) == 0


def test_nan_weight_rejected():
    graph = DirectedGraph()

    with pytest.raises(InvalidWeightError) as excinfo:
        graph.add_edge("a", "b", float("nan"))

    assert math.isnan(excinfo.value.weight)
    assert len(graph) == 0


def test_negative_weight_accepted_on_insertion():
    graph = make_graph(("a", "b", -3))

    assert graph.neighbors("a") == (Edge("b", -3.0),)


def test_revision_tracks_successful_mutations_only():
    graph = make_graph(("a", "b"))
    before = graph.revision

    graph.add_vertex("a")
    with pytest.raises(InvalidEdgeError):
        graph.add_edge("a", "b")
    assert graph.revision == before

    graph.add_edge("b", "c")
    assert graph.revision > before


def test_copy_is_independent():
    graph = make_graph(("a", "b"))
    clone = graph.copy()

    clone.add_edge("b", "c")

    assert "c" not in graph
    assert graph.neighbors("b") == ()
    assert clone.vertices() == ["a", "b", "c"]


def test_degree_maps_follow_insertion_order():
    graph = make_graph(("a", "b"), ("a", "c"), ("c", "b"))

    assert graph.out_degrees() == {"a": 2, "b": 0, "c": 1}
    assert graph.in_degrees() == {"a": 0, "b": 2, "c": 1}


# --- BFS -----------------------------------------------------------------------


def test_bfs_levels_use_fewest_hops():
    graph = make_graph(("a", "b"), ("b", "c"), ("a", "c"))

    result = graph.bfs("a")

    assert dict(result.levels) == {"a": 0, "b": 1, "c": 1}
    assert result.path == ("a", "b", "c")


def test_bfs_path_to_destination():
    graph = make_graph(("a", "b"), ("b", "c"), ("c", "d"), ("a", "e"))

    result = graph.bfs("a", "d")

    assert result.path == ("a", "b", "c", "d")
    assert result.levels["d"] == 3


def test_bfs_stops_when_destination_dequeued():
    graph = make_graph(("a", "b"), ("a", "c"), ("b", "d"), ("c", "e"))

    result = graph.bfs("a", "b")

    assert result.path == ("a", "b")
    assert dict(result.levels) == {"a": 0, "b": 1, "c": 1}


def test_bfs_unreachable_destination_gives_empty_path():
    graph = make_graph(("a", "b"), ("c", "a"))

    result = graph.bfs("a", "c")

    assert result.path == ()
    assert result.is_empty
    assert "c" not in result.levels


def test_bfs_destination_equal_to_start():
    graph = make_graph(("a", "b"))

    assert graph.bfs("a", "a").path == ("a",)


def test_bfs_unknown_start_is_degenerate():
    graph = make_graph(("a", "b"))

    result = graph.bfs("zz")

    assert result.path == ()
    assert dict(result.levels) == {}


# --- Dijkstra --------------------------------------------------------------------


def test_dijkstra_prefers_lighter_detour():
    graph = make_graph(("a", "b", 4), ("a", "c", 1), ("c", "b", 1))

    assert graph.dijkstra("a", "b") == ["a", "c", "b"]


def test_dijkstra_unreachable_destination():
    graph = make_graph(("a", "b", 1))
    graph.add_vertex("z")

    assert graph.dijkstra("a", "z") == []
    assert graph.dijkstra("a", "missing") == []
    assert graph.dijkstra("missing", "a") == []


def test_dijkstra_start_is_destination():
    graph = make_graph(("a", "b", 1))

    assert graph.dijkstra("a", "a") == ["a"]


def test_dijkstra_ties_follow_insertion_order():
    graph = make_graph(("a", "b", 1), ("a", "c", 1), ("b", "d", 1), ("c", "d", 1))

    assert graph.dijkstra("a", "d") == ["a", "b", "d"]


def test_dijkstra_rejects_negative_weights():
    graph = make_graph(("a", "b", 1), ("b", "c", -2))

    with pytest.raises(InvalidWeightError) as excinfo:
        graph.dijkstra("a", "c")

    assert excinfo.value.source == "b"
    assert excinfo.value.weight == -2.0


# --- Topological sort --------------------------------------------------------------


def test_topological_sort_respects_every_edge():
    graph = make_graph(
        ("a", "b"), ("a", "c"), ("b", "d"), ("c", "d"), ("e", "c"), ("f", "a")
    )

    order = graph.topological_sort()

    assert sorted(order) == sorted(graph.vertices())
    position = {vertex: i for i, vertex in enumerate(order)}
    for source, edge in graph.edges():
        assert position[source] < position[edge.target]


def test_topological_sort_matches_recursive_order():
    graph = make_graph(("a", "b"), ("a", "c"), ("c", "b"), ("b", "d"))

    assert graph.topological_sort() == ["a", "c", "b", "d"]


def test_topological_sort_handles_deep_chains():
    graph = DirectedGraph()
    for i in range(5000):
        graph.add_edge(f"v{i}", f"v{i + 1}")

    order = graph.topological_sort()

    assert order[0] == "v0"
    assert order[-1] == "v5000"


def test_topological_sort_terminates_on_cycle():
    graph = make_graph(("a", "b"), ("b", "a"))

    assert sorted(graph.topological_sort()) == ["a", "b"]


# --- All paths ---------------------------------------------------------------------


def test_all_paths_diamond():
    graph = make_graph(("a", "b"), ("a", "c"), ("b", "d"), ("c", "d"))

    assert graph.all_paths("a", "d") == [["a", "b", "d"], ["a", "c", "d"]]


def test_all_paths_never_repeats_a_vertex():
    graph = make_graph(("a", "b"), ("b", "a"), ("b", "c"), ("c", "a"))

    assert graph.all_paths("a", "c") == [["a", "b", "c"]]


def test_all_paths_degenerate_cases():
    graph = make_graph(("a", "b"))

    assert graph.all_paths("a", "a") == [["a"]]
    assert graph.all_paths("b", "a") == []
    assert graph.all_paths("a", "missing") == []
