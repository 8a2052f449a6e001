import pytest

from datalogue.graph import Graph


def test_new_graph_has_nodes_without_edges():
    graph = Graph(4)
    assert list(graph) == [0, 1, 2, 3]
    assert all(graph.neighbours(node) == [] for node in graph)


def test_edges_are_sorted_and_deduplicated():
    graph = Graph(3)
    graph.add_edge(0, 2)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    assert graph.neighbours(0) == [1, 2]


def test_str_format():
    graph = Graph(3)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 0)
    assert str(graph) == "R0:R1,R2\nR1:R0\nR2:\n"


def test_add_edge_creates_missing_source():
    graph = Graph(1)
    graph.add_edge(5, 0)
    assert len(graph) == 2
    assert graph.neighbours(5) == [0]


def test_self_loop():
    graph = Graph(2)
    graph.add_edge(1, 1)
    assert graph.neighbours(1) == [1]
    assert str(graph).splitlines()[1] == "R1:R1"


def test_unknown_node_raises():
    with pytest.raises(KeyError):
        Graph(2).neighbours(7)


def test_empty_graph_prints_nothing():
    assert str(Graph(0)) == ""