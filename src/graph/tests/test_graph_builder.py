"""Tests for GraphBuilder."""

import pytest

from src.graph.builder import GraphBuilder


def test_build_from_dict_records():
    records = [
        {"source": "a", "target": "b", "weight": "2", "label": "x"},
        {"source": "b", "target": "c", "weight": 1.5},
    ]

    graph = GraphBuilder().build_graph(records)

    assert not graph.is_directed()
    assert graph["a"]["b"]["weight"] == 2.0
    assert graph["a"]["b"]["label"] == "x"
    assert graph["b"]["c"]["weight"] == 1.5


def test_build_from_tuples_and_isolated_nodes():
    graph = GraphBuilder(directed=True).build_graph([(1, 2), (2, 3, 0.5)], nodes=[9])

    assert graph.is_directed()
    assert graph.has_edge(1, 2) and not graph.has_edge(2, 1)
    assert graph[2][3]["weight"] == 0.5
    assert 9 in graph


def test_records_missing_an_endpoint_are_skipped():
    records = [
        {"source": "a", "target": None},
        {"source": float("nan"), "target": "b"},
        {"source": "a", "target": "c"},
    ]

    graph = GraphBuilder().build_graph(records)

    assert list(graph.edges()) == [("a", "c")]


def test_malformed_tuple_raises():
    with pytest.raises(ValueError):
        GraphBuilder().build_graph([(1, 2, 3, 4)])


def test_build_from_csv(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text("source,target,weight\n1,2,0.5\n2,3,1.0\n", encoding="utf-8")

    graph = GraphBuilder().build_from_csv(str(path))

    assert graph.number_of_nodes() == 3
    assert graph.has_edge(1, 2)
    assert graph[2][3]["weight"] == 1.0


def test_build_from_csv_with_custom_columns(tmp_path):
    path = tmp_path / "channels.csv"
    path.write_text("from_node,to_node\nx,y\n", encoding="utf-8")

    builder = GraphBuilder(source_column="from_node", target_column="to_node")
    graph = builder.build_from_csv(str(path))

    assert graph.has_edge("x", "y")

    with pytest.raises(ValueError):
        GraphBuilder().build_from_csv(str(path))
