"""
最短経路探索（オラクル）モジュール
"""

from .oracle import OracleFactory, PathResult, ShortestPathOracle
from .dijkstra import DijkstraOracle, NetworkXDijkstraOracle, ORACLES

__all__ = [
    'OracleFactory',
    'PathResult',
    'ShortestPathOracle',
    'DijkstraOracle',
    'NetworkXDijkstraOracle',
    'ORACLES'
]
