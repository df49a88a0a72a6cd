"""
ダイクストラ法による最短経路オラクル
"""

import networkx as nx
from typing import Any, Dict, Hashable, List, Optional
import logging

from ..graph.adapter import NetworkXGraph
from ..graph.errors import OracleQueryError
from .oracle import PathResult

logger = logging.getLogger(__name__)


def _as_adapter(graph: Any, weight: Optional[str]) -> NetworkXGraph:
    """NetworkXグラフをアダプタに変換（アダプタはそのまま返す）"""
    if isinstance(graph, NetworkXGraph):
        return graph
    if isinstance(graph, nx.Graph):
        return NetworkXGraph(graph, weight=weight)
    raise TypeError(f"NetworkXグラフが必要です: {type(graph).__name__}")


class DijkstraOracle:
    """
    NetworkXの単一始点ダイクストラ法で最短経路を求めるオラクル

    始点ごとの探索結果（距離・経路）を内部にキャッシュし、同じ始点への
    問い合わせはキャッシュから答える。reset()でキャッシュを破棄する。
    """

    def __init__(self, graph: Any, weight: Optional[str] = 'weight'):
        """
        初期化

        Args:
            graph: NetworkXGraphアダプタ、またはNetworkXグラフオブジェクト
            weight: 距離として使用するエッジ属性名（アダプタを渡した場合は無視）
        """
        self.graph = _as_adapter(graph, weight)
        self.cached_source: Optional[Hashable] = None
        self._distances: Dict[Hashable, float] = {}
        self._paths: Dict[Hashable, List[Hashable]] = {}

    def reset(self) -> None:
        """前回の問い合わせの探索結果を破棄"""
        self.cached_source = None
        self._distances = {}
        self._paths = {}

    def _search(self, source: Hashable, destination: Hashable) -> None:
        """始点からの単一始点ダイクストラ法を実行してキャッシュする"""
        try:
            self._distances, self._paths = nx.single_source_dijkstra(
                self.graph.graph, source, weight=self.graph.distance
            )
        except (nx.NetworkXException, ValueError) as e:
            self.reset()
            logger.error(f"最短経路の計算中にエラーが発生しました（{source} -> {destination}）: {e}")
            raise OracleQueryError(str(e), source, destination) from e
        self.cached_source = source

    def shortest_path(self, source: Hashable, destination: Hashable) -> PathResult:
        """
        始点から終点への最短経路を計算

        Args:
            source: 始点ノードID
            destination: 終点ノードID

        Returns:
            PathResult（到達不能の場合はreachable=False, distance=inf）
        """
        for node in (source, destination):
            if not self.graph.has_node(node):
                raise OracleQueryError(f"ノード '{node}' がグラフに存在しません",
                                       source, destination)

        if self.cached_source is None or self.cached_source != source:
            self._search(source, destination)

        if destination not in self._distances:
            return PathResult.unreachable()
        return PathResult(distance=float(self._distances[destination]), reachable=True,
                          nodes=tuple(self._paths[destination]))


class NetworkXDijkstraOracle:
    """NetworkXの双方向ダイクストラ法を使用するオラクル"""

    def __init__(self, graph: Any, weight: Optional[str] = 'weight'):
        self.graph = _as_adapter(graph, weight)
        self.last_path: Optional[PathResult] = None

    def reset(self) -> None:
        self.last_path = None

    def shortest_path(self, source: Hashable, destination: Hashable) -> PathResult:
        try:
            length, path = nx.bidirectional_dijkstra(
                self.graph.graph, source, destination, weight=self.graph.distance
            )
        except nx.NetworkXNoPath:
            self.last_path = PathResult.unreachable()
            return self.last_path
        except (nx.NetworkXException, ValueError) as e:
            logger.error(f"最短経路の計算中にエラーが発生しました（{source} -> {destination}）: {e}")
            raise OracleQueryError(str(e), source, destination) from e

        self.last_path = PathResult(distance=float(length), reachable=True, nodes=tuple(path))
        return self.last_path


ORACLES = {
    'dijkstra': DijkstraOracle,
    'bidirectional': NetworkXDijkstraOracle
}
