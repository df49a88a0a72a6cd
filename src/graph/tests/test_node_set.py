"""Tests for node set extraction from edge enumeration."""

import networkx as nx
import pytest

from src.graph.adapter import NetworkXGraph
from src.graph.errors import GraphAccessError
from src.graph.node_set import extract_node_set


class _EdgeList:
    def __init__(self, edges):
        self.edges = list(edges)
        self.calls = 0

    def all_edges(self):
        self.calls += 1
        return iter(self.edges)


def test_endpoints_are_collected_once():
    graph = _EdgeList([(1, 2), (2, 3), (3, 1), (1, 2)])

    assert extract_node_set(graph) == {1, 2, 3}


def test_extra_edge_items_are_ignored():
    graph = _EdgeList([(1, 2, {"weight": 3.0}), (2, 5, {})])

    assert extract_node_set(graph) == {1, 2, 5}


def test_empty_edge_list_gives_empty_set():
    assert extract_node_set(_EdgeList([])) == set()


def test_extraction_is_repeatable_and_does_not_mutate():
    edges = [(0, 1), (1, 2)]
    graph = _EdgeList(edges)

    first = extract_node_set(graph)
    second = extract_node_set(graph)

    assert first == second == {0, 1, 2}
    assert graph.edges == edges
    assert graph.calls == 2


def test_networkx_graph_is_wrapped():
    graph = nx.Graph()
    graph.add_edges_from([("a", "b"), ("b", "c")])
    graph.add_node("lonely")

    assert extract_node_set(graph) == {"a", "b", "c"}
    assert extract_node_set(graph, include_isolated=True) == {"a", "b", "c", "lonely"}
    assert graph.number_of_nodes() == 4


def test_include_isolated_requires_node_enumeration():
    with pytest.raises(GraphAccessError):
        extract_node_set(_EdgeList([(1, 2)]), include_isolated=True)


def test_enumeration_failure_is_translated():
    class _Failing:
        def all_edges(self):
            yield (1, 2)
            raise IOError("disk unavailable")

    with pytest.raises(GraphAccessError) as excinfo:
        extract_node_set(_Failing())

    assert isinstance(excinfo.value.__cause__, IOError)


def test_adapter_distance_uses_weight_attribute():
    graph = nx.MultiGraph()
    graph.add_edge(0, 1, weight=4.0)
    graph.add_edge(0, 1, weight=2.5)
    graph.add_edge(1, 2)

    weighted = NetworkXGraph(graph)
    unweighted = NetworkXGraph(graph, weight=None)

    assert weighted.distance(0, 1, graph[0][1]) == 2.5
    assert weighted.distance(1, 2, graph[1][2]) == 1.0
    assert unweighted.distance(0, 1, graph[0][1]) == 1.0
    assert sorted(weighted.all_edges()) == [(0, 1), (0, 1), (1, 2)]


def test_adapter_distance_rejects_negative_weight():
    graph = nx.Graph()
    graph.add_edge("a", "b", weight=-1.0)

    with pytest.raises(ValueError):
        NetworkXGraph(graph).distance("a", "b", graph["a"]["b"])
