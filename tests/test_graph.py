import logging
import random

import pytest

from searchgraph.domain.errors import UnknownVertexError
from searchgraph.domain.models import Edge, SearchStrategy
from searchgraph.graph import GraphIndex


@pytest.fixture
def example_graph():
    graph = GraphIndex()
    for value in (5, 3, 8, 1):
        graph.add_vertex(value)
    graph.add_edge(1, 3)
    graph.add_edge(3, 5)
    graph.add_edge(5, 8)
    graph.add_edge(1, 8)
    return graph


def brute_distance(num_vertices, edges, start, end):
    """Unit-weight relaxation over the edge list, independent of BFS."""
    dist = {start: 0}
    for _ in range(num_vertices):
        for u, v in edges:
            if u in dist and dist[u] + 1 < dist.get(v, float("inf")):
                dist[v] = dist[u] + 1
    return dist.get(end)


def random_graph(seed, num_vertices=8, num_edges=12):
    rng = random.Random(seed)
    values = list(range(num_vertices))
    rng.shuffle(values)
    edges = [
        (rng.randrange(num_vertices), rng.randrange(num_vertices))
        for _ in range(num_edges)
    ]

    graph = GraphIndex(dedupe_edges=False)
    graph.add_vertices(values)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph, edges


def test_vertices_sorted(example_graph):
    assert example_graph.vertices() == [1, 3, 5, 8]
    assert list(example_graph) == [1, 3, 5, 8]
    assert len(example_graph) == 4


def test_example_shortest_path(example_graph):
    assert example_graph.shortest_path(1, 8) == [1, 8]
    assert example_graph.shortest_path(1, 5) == [1, 3, 5]


def test_edges_are_directed(example_graph):
    assert example_graph.shortest_path(3, 1) == []
    assert example_graph.neighbors(8) == []


def test_shortest_path_same_vertex(example_graph):
    assert example_graph.shortest_path(3, 3) == [3]


def test_shortest_path_unknown_vertices(example_graph):
    assert example_graph.shortest_path(1, 99) == []
    assert example_graph.shortest_path(99, 1) == []
    assert example_graph.shortest_path(99, 99) == []
    assert example_graph.shortest_path("x", 1) == []
    assert not example_graph.exists("x")
    assert "x" not in example_graph
    assert example_graph.neighbors("x") == []

    with pytest.raises(UnknownVertexError):
        example_graph.add_edge("x", 1)


def test_add_vertex_is_idempotent(example_graph):
    vertex_id = example_graph.store.id_of(5)
    assert example_graph.add_vertex(5) == vertex_id
    assert len(example_graph) == 4
    assert example_graph.neighbors(5) == [8]


def test_add_edge_unknown_vertex_raises(example_graph):
    before = example_graph.edges()

    with pytest.raises(UnknownVertexError) as excinfo:
        example_graph.add_edge(1, 99)
    assert excinfo.value.value == 99

    with pytest.raises(UnknownVertexError) as excinfo:
        example_graph.add_edge(42, 1)
    assert excinfo.value.value == 42

    assert example_graph.edges() == before
    assert 99 not in example_graph


def test_add_edge_unknown_vertex_logs_warning(example_graph, caplog):
    with caplog.at_level(logging.WARNING, logger="searchgraph"):
        with pytest.raises(UnknownVertexError):
            example_graph.add_edge(1, 2)

    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_add_edge_makes_target_one_step_away(example_graph):
    example_graph.add_edge(8, 1)
    assert example_graph.has_edge(8, 1)
    assert example_graph.shortest_path(8, 1) == [8, 1]
    assert example_graph.distance(8, 1) == 1


def test_neighbors_in_insertion_order(example_graph):
    assert example_graph.neighbors(1) == [3, 8]
    assert example_graph.neighbors(99) == []


def test_tie_break_prefers_earlier_edge():
    graph = GraphIndex()
    graph.add_vertices([1, 2, 3, 4])
    graph.add_edge(1, 3)
    graph.add_edge(1, 2)
    graph.add_edge(2, 4)
    graph.add_edge(3, 4)

    assert graph.shortest_path(1, 4) == [1, 3, 4]


def test_parallel_edges_kept_by_default():
    graph = GraphIndex()
    graph.add_vertices([1, 2])
    graph.add_edge(1, 2)
    graph.add_edge(1, 2)

    assert graph.neighbors(1) == [2, 2]
    assert graph.edge_count == 2
    assert graph.shortest_path(1, 2) == [1, 2]


def test_parallel_edges_deduped_when_enabled():
    graph = GraphIndex(dedupe_edges=True)
    graph.add_vertices([1, 2])
    graph.add_edge(1, 2)
    graph.add_edge(1, 2)

    assert graph.neighbors(1) == [2]
    assert graph.edge_count == 1


def test_self_loop_and_cycle():
    graph = GraphIndex()
    graph.add_vertices("abc")
    graph.add_edge("a", "a")
    graph.add_edge("a", "b")
    graph.add_edge("b", "c")
    graph.add_edge("c", "a")

    assert graph.shortest_path("a", "a") == ["a"]
    assert graph.shortest_path("a", "c") == ["a", "b", "c"]
    assert graph.shortest_path("c", "b") == ["c", "a", "b"]


def test_undirected_edge_adds_both_directions():
    graph = GraphIndex()
    graph.add_vertices([1, 2, 3])
    graph.add_undirected_edge(1, 2)

    assert graph.has_edge(1, 2)
    assert graph.has_edge(2, 1)
    assert graph.shortest_path(2, 1) == [2, 1]

    with pytest.raises(UnknownVertexError):
        graph.add_undirected_edge(3, 4)
    assert graph.neighbors(3) == []


def test_edges_listing(example_graph):
    assert example_graph.edges() == [
        Edge(1, 3),
        Edge(1, 8),
        Edge(3, 5),
        Edge(5, 8),
    ]


def test_depth_first_path_and_traversal():
    graph = GraphIndex()
    graph.add_vertices([1, 2, 3, 4, 5])
    graph.add_edge(1, 2)
    graph.add_edge(1, 3)
    graph.add_edge(2, 4)
    graph.add_edge(4, 5)
    graph.add_edge(3, 5)

    assert graph.depth_first_path(1, 5) == [1, 2, 4, 5]
    assert graph.find_path(1, 5, "dfs") == [1, 2, 4, 5]
    assert graph.shortest_path(1, 5) == [1, 3, 5]
    assert graph.traverse(1) == [1, 2, 3, 4, 5]
    assert graph.traverse(1, SearchStrategy.DFS) == [1, 2, 4, 5, 3]
    assert graph.reachable(4) == {4, 5}
    assert graph.reachable(9) == set()
    assert graph.distance(5, 1) is None


@pytest.mark.parametrize("seed", range(25))
def test_shortest_path_is_minimal(seed):
    graph, edges = random_graph(seed)

    for start in range(8):
        for end in range(8):
            path = graph.shortest_path(start, end)
            expected = brute_distance(8, edges, start, end)

            if expected is None:
                assert path == []
                continue

            assert path[0] == start
            assert path[-1] == end
            assert len(path) - 1 == expected
            assert all(graph.has_edge(u, v) for u, v in zip(path, path[1:]))


@pytest.mark.parametrize("seed", range(10))
def test_depth_first_path_agrees_on_reachability(seed):
    graph, edges = random_graph(seed)

    for start in range(8):
        for end in range(8):
            path = graph.depth_first_path(start, end)
            reachable = brute_distance(8, edges, start, end) is not None

            assert bool(path) == reachable
            assert all(graph.has_edge(u, v) for u, v in zip(path, path[1:]))
            assert (end in graph.reachable(start)) == reachable
