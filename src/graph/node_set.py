"""
グラフのエッジからノード集合を抽出するモジュール
"""

from typing import Any, Hashable, Set
import logging

from .errors import GraphAccessError
from .adapter import NetworkXGraph

logger = logging.getLogger(__name__)


def extract_node_set(graph: Any, include_isolated: bool = False) -> Set[Hashable]:
    """
    エッジの始点・終点として現れるノードIDの集合を取得

    エッジを持たない孤立ノードはエッジ列挙からは見つからないため、
    既定では含めない。include_isolated=Trueの場合はグラフのall_nodes()で補う。

    Args:
        graph: all_edges()を持つグラフ、またはNetworkXグラフオブジェクト
        include_isolated: 孤立ノードも含めるかどうか

    Returns:
        重複のないノードIDの集合
    """
    graph = NetworkXGraph.wrap(graph)
    node_set = set()

    try:
        for edge in graph.all_edges():
            # エッジデータ等の3番目以降の要素は無視する
            node_set.add(edge[0])
            node_set.add(edge[1])
    except Exception as e:
        logger.error(f"エッジの列挙中にエラーが発生しました: {e}")
        raise GraphAccessError(f"エッジの列挙に失敗しました: {e}") from e

    if include_isolated:
        if not hasattr(graph, 'all_nodes'):
            raise GraphAccessError(
                f"孤立ノードを含めるにはall_nodes()が必要です: {type(graph).__name__}"
            )
        try:
            node_set.update(graph.all_nodes())
        except Exception as e:
            logger.error(f"ノードの列挙中にエラーが発生しました: {e}")
            raise GraphAccessError(f"ノードの列挙に失敗しました: {e}") from e

    return node_set
