import math

import pytest

from greedylab.dijkstra import Edge, dijkstra, main


@pytest.fixture
def sample_graph():
    return [
        [Edge(1, 2), Edge(2, 4)],
        [Edge(2, 1), Edge(3, 7)],
        [Edge(4, 3)],
        [Edge(5, 1)],
        [Edge(3, 2), Edge(5, 5)],
        [],
    ]


def test_sample_graph_distances(sample_graph):
    assert dijkstra(sample_graph, 0) == [0, 2, 3, 8, 6, 9]


@pytest.mark.parametrize("source", range(6))
def test_source_is_zero_and_edges_are_relaxed(sample_graph, source):
    distances = dijkstra(sample_graph, source)
    assert distances[source] == 0
    for u, edges in enumerate(sample_graph):
        for edge in edges:
            assert distances[edge.target] <= distances[u] + edge.weight


@pytest.mark.parametrize("source", range(6))
def test_every_finite_distance_has_a_tight_edge(sample_graph, source):
    distances = dijkstra(sample_graph, source)
    for v, distance in enumerate(distances):
        if v == source or math.isinf(distance):
            continue
        assert any(
            edge.target == v and distances[u] + edge.weight == distance
            for u, edges in enumerate(sample_graph)
            for edge in edges
        )


def test_unreachable_vertex_stays_infinite():
    graph = [[Edge(1, 1)], [], []]
    distances = dijkstra(graph, 0)
    assert distances[1] == 1
    assert math.isinf(distances[2])


def test_sink_reaches_nothing(sample_graph):
    distances = dijkstra(sample_graph, 5)
    assert sum(1 for distance in distances if math.isinf(distance)) == 5


def test_invalid_source_raises(sample_graph):
    with pytest.raises(ValueError):
        dijkstra(sample_graph, 6)


def test_main_prints_sample_distances(sample_graph, capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.split() == [str(d) for d in dijkstra(sample_graph, 0)]