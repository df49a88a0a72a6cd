"""
NetworkXグラフを中心性計算用のインターフェースに適合させるモジュール
"""

import networkx as nx
from typing import Any, Dict, Hashable, Iterator, Optional, Protocol, Tuple


class EdgeGraph(Protocol):
    def all_edges(self) -> Iterator[Tuple[Hashable, Hashable]]: ...


class NetworkXGraph:
    """NetworkXグラフをエッジ列挙・隣接参照のインターフェースで包むクラス"""

    def __init__(self, graph: nx.Graph, weight: Optional[str] = 'weight'):
        """
        初期化

        Args:
            graph: NetworkXグラフオブジェクト
            weight: 距離として使用するエッジ属性名（Noneの場合はすべて1.0）
        """
        self.graph = graph
        self.weight = weight

    @classmethod
    def wrap(cls, graph: Any, weight: Optional[str] = 'weight') -> Any:
        """NetworkXグラフであればアダプタで包み、それ以外はそのまま返す"""
        if isinstance(graph, nx.Graph):
            return cls(graph, weight=weight)
        return graph

    @property
    def directed(self) -> bool:
        return self.graph.is_directed()

    def all_edges(self) -> Iterator[Tuple[Hashable, Hashable]]:
        """すべてのエッジを (始点, 終点) の組で列挙する（何度でも再列挙可能）"""
        for u, v in self.graph.edges():
            yield u, v

    def all_nodes(self) -> Iterator[Hashable]:
        """孤立ノードを含むすべてのノードを列挙する"""
        return iter(self.graph.nodes())

    def has_node(self, node: Hashable) -> bool:
        return self.graph.has_node(node)

    def edge_weight(self, data: Dict[str, Any]) -> float:
        """エッジ属性から距離を取得（属性がない場合は1.0）"""
        if self.weight is None:
            return 1.0
        return float(data.get(self.weight, 1.0))

    def distance(self, u: Hashable, v: Hashable, data: Dict[str, Any]) -> float:
        """
        NetworkXの最短経路関数に渡すエッジ距離関数

        マルチグラフでは並行エッジの最小距離を返す。負の距離はValueErrorとする。
        """
        if self.graph.is_multigraph():
            weight = min(self.edge_weight(d) for d in data.values())
        else:
            weight = self.edge_weight(data)
        if weight < 0:
            raise ValueError(f"負の重みのエッジがあります: {u} -> {v} ({weight})")
        return weight

    def __repr__(self) -> str:
        return (f"NetworkXGraph(nodes={self.graph.number_of_nodes()}, "
                f"edges={self.graph.number_of_edges()}, weight={self.weight!r})")
