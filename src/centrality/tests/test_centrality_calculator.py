"""Tests for the config-driven CentralityCalculator."""

import logging

import networkx as nx
import pytest

from src.centrality.calculator import CentralityCalculator, DEFAULT_CLOSENESS_CONFIG
from src.routing.dijkstra import DijkstraOracle, NetworkXDijkstraOracle


@pytest.fixture
def weighted_path():
    graph = nx.Graph()
    graph.add_edge("a", "b", weight=5.0)
    graph.add_edge("b", "c", weight=5.0)
    return graph


def test_default_config_file_is_loaded():
    calculator = CentralityCalculator()

    assert calculator.closeness_config == DEFAULT_CLOSENESS_CONFIG
    assert calculator.closeness.oracle_factory is DijkstraOracle


def test_missing_config_file_falls_back_to_defaults(tmp_path):
    calculator = CentralityCalculator(config_path=str(tmp_path / "missing.yaml"))

    assert calculator.config == {}
    assert calculator.closeness_config == DEFAULT_CLOSENESS_CONFIG


def test_config_file_overrides(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "centrality:\n"
        "  closeness:\n"
        "    algorithm: bidirectional\n"
        "    weight: null\n"
        "    workers: 2\n"
        "    top_n: 1\n",
        encoding="utf-8",
    )

    calculator = CentralityCalculator(config_path=str(path))

    assert calculator.closeness.oracle_factory is NetworkXDijkstraOracle
    assert calculator.closeness.workers == 2
    assert calculator.weight is None
    assert calculator.top_n == 1
    assert calculator.closeness.include_isolated is False


def test_weight_attribute_is_used(weighted_path):
    weighted = CentralityCalculator(config={})
    hops = CentralityCalculator(config={"closeness": {"weight": None}})

    assert weighted.calculate_closeness(weighted_path)["b"] == pytest.approx(0.2)
    assert hops.calculate_closeness(weighted_path)["b"] == pytest.approx(1.0)


def test_include_isolated_from_config():
    graph = nx.Graph([(0, 1)])
    graph.add_node(2)

    calculator = CentralityCalculator(config={"closeness": {"include_isolated": True}})

    assert calculator.calculate_closeness(graph) == {0: 0.0, 1: 0.0, 2: 0.0}


def test_unknown_algorithm_raises():
    with pytest.raises(ValueError):
        CentralityCalculator(config={"closeness": {"algorithm": "floyd"}})


def test_invalid_workers_raise():
    with pytest.raises(ValueError):
        CentralityCalculator(config={"closeness": {"workers": 0}})


def test_top_nodes_uses_configured_size():
    calculator = CentralityCalculator(config={"closeness": {"top_n": 2}})
    scores = calculator.calculate_closeness(nx.star_graph(3))

    df = calculator.top_nodes(scores)

    assert len(df) == 2
    assert df.iloc[0]["node_id"] == 0
    assert df.iloc[0]["closeness"] == pytest.approx(1.0)
    assert len(calculator.top_nodes(scores, top_n=10)) == 4


def test_progress_callback_is_forwarded():
    events = []
    calculator = CentralityCalculator(config={})

    calculator.calculate_closeness(nx.path_graph(3), on_progress=events.append)

    assert len(events) == 3


def test_disconnection_warning_ignores_excluded_isolated_nodes(caplog):
    graph = nx.Graph([(0, 1)])
    graph.add_node(2)

    with caplog.at_level(logging.WARNING, logger="src.centrality.calculator"):
        scores = CentralityCalculator(config={}).calculate_closeness(graph)

    assert scores == {0: 1.0, 1: 1.0}
    assert "非連結" not in caplog.text

    caplog.clear()
    with caplog.at_level(logging.WARNING, logger="src.centrality.calculator"):
        CentralityCalculator(config={"closeness": {"include_isolated": True}}).calculate_closeness(graph)

    assert "非連結" in caplog.text


def test_disconnection_warning_for_separate_components(caplog):
    graph = nx.Graph([(0, 1), (2, 3)])

    with caplog.at_level(logging.WARNING, logger="src.centrality.calculator"):
        CentralityCalculator(config={}).calculate_closeness(graph)

    assert "非連結" in caplog.text
