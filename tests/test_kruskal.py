import pytest

from greedylab.kruskal import DisjointSet, Graph, main

SAMPLE_EDGES = [(0, 1, 10), (0, 2, 15), (0, 3, 30), (1, 3, 40), (2, 3, 50)]


@pytest.fixture
def sample_graph():
    graph = Graph(4)
    for u, v, weight in SAMPLE_EDGES:
        graph.add_edge(u, v, weight)
    return graph


def test_fresh_set_elements_are_their_own_roots():
    components = DisjointSet(5)
    assert [components.find(x) for x in range(5)] == list(range(5))


def test_union_merges_once():
    components = DisjointSet(3)
    assert components.union(0, 1) is True
    assert components.union(1, 0) is False
    assert components.find(0) == components.find(1)
    assert components.find(2) != components.find(0)


def test_union_is_transitive():
    components = DisjointSet(6)
    components.union(0, 1)
    components.union(2, 3)
    components.union(1, 3)
    assert len({components.find(x) for x in range(4)}) == 1
    assert components.find(4) != components.find(0)


def test_find_out_of_range_raises():
    with pytest.raises(ValueError):
        DisjointSet(2).find(2)


def test_sample_tree_cost(sample_graph):
    tree = sample_graph.kruskal()
    assert len(tree) == 3
    assert sum(weight for _, _, weight in tree) == 55


def test_tree_edges_come_from_graph_and_are_sorted(sample_graph):
    tree = sample_graph.kruskal()
    assert all(edge in SAMPLE_EDGES for edge in tree)
    weights = [weight for _, _, weight in tree]
    assert weights == sorted(weights)


def test_tree_spans_without_cycles(sample_graph):
    components = DisjointSet(4)
    for u, v, _ in sample_graph.kruskal():
        assert components.union(u, v)
    assert len({components.find(x) for x in range(4)}) == 1


def test_disconnected_graph_gives_forest():
    graph = Graph(4)
    graph.add_edge(0, 1, 3)
    graph.add_edge(2, 3, 7)
    graph.add_edge(1, 0, 9)
    assert sorted(graph.kruskal()) == [(0, 1, 3), (2, 3, 7)]


def test_add_edge_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        Graph(2).add_edge(0, 5, 1)


def test_main_prints_tree(sample_graph, capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    total = sum(weight for _, _, weight in sample_graph.kruskal())
    assert "Edge: 0 - 1 with weight 10" in out
    assert f"Total cost of MST: {total}" in out