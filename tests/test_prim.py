import pytest

from greedylab.prim import Graph, main

SAMPLE_EDGES = [(0, 1, 10), (0, 2, 15), (0, 3, 30), (1, 3, 40), (2, 3, 50)]


@pytest.fixture
def sample_graph():
    graph = Graph(4)
    for u, v, weight in SAMPLE_EDGES:
        graph.add_edge(u, v, weight)
    return graph


def _is_graph_edge(u, v, weight):
    return (u, v, weight) in SAMPLE_EDGES or (v, u, weight) in SAMPLE_EDGES


def test_sample_tree_cost(sample_graph):
    tree = sample_graph.prim(0)
    assert len(tree) == 3
    assert sum(weight for _, _, weight in tree) == 55


@pytest.mark.parametrize("source", range(4))
def test_cost_does_not_depend_on_source(sample_graph, source):
    reference = sum(weight for _, _, weight in sample_graph.prim(0))
    assert sum(weight for _, _, weight in sample_graph.prim(source)) == reference


@pytest.mark.parametrize("source", range(4))
def test_tree_uses_graph_edges_and_reaches_source(sample_graph, source):
    tree = sample_graph.prim(source)
    assert [vertex for _, vertex, _ in tree] == [v for v in range(4) if v != source]
    parents = {vertex: parent for parent, vertex, _ in tree}
    for parent, vertex, weight in tree:
        assert _is_graph_edge(parent, vertex, weight)
    for vertex in parents:
        seen = set()
        while vertex != source:
            assert vertex not in seen
            seen.add(vertex)
            vertex = parents[vertex]


def test_unreachable_vertex_raises():
    graph = Graph(3, undirected=False)
    graph.add_edge(1, 0, 5)
    graph.add_edge(0, 2, 4)
    with pytest.raises(ValueError):
        graph.prim(0)


def test_directed_edges_are_followed_one_way():
    graph = Graph(2, undirected=False)
    graph.add_edge(0, 1, 6)
    assert graph.prim(0) == [(0, 1, 6)]
    with pytest.raises(ValueError):
        graph.prim(1)


def test_invalid_source_raises(sample_graph):
    with pytest.raises(ValueError):
        sample_graph.prim(4)


def test_main_prints_tree(sample_graph, capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    total = sum(weight for _, _, weight in sample_graph.prim(0))
    assert out.startswith("Edges in MST:\n")
    assert "0 - 1 with weight 10" in out
    assert f"Minimum cost is = {total}" in out