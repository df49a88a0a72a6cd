"""
設定ファイルに基づいて近接中心性の計算を管理するクラス
"""

import networkx as nx
import pandas as pd
import yaml
import os
from typing import Any, Dict, Hashable, Optional
import logging

from ..analysis.summary import to_dataframe
from ..graph.adapter import NetworkXGraph
from ..routing.dijkstra import ORACLES
from .closeness import ClosenessCentrality, ProgressCallback

logger = logging.getLogger(__name__)

DEFAULT_CLOSENESS_CONFIG = {
    'algorithm': 'dijkstra',
    'weight': 'weight',
    'include_isolated': False,
    'workers': 1,
    'top_n': 10
}


class CentralityCalculator:
    """設定ファイルから近接中心性の計算条件を読み込み、計算を実行するクラス"""

    def __init__(self, config_path: Optional[str] = None, config: Optional[Dict[str, Any]] = None):
        """
        初期化

        Args:
            config_path: 設定ファイルのパス
            config: 設定の辞書（指定された場合は設定ファイルより優先）
        """
        if config is None:
            if config_path is None:
                config_path = os.path.join(
                    os.path.dirname(os.path.dirname(os.path.dirname(__file__))),
                    'config',
                    'config.yaml'
                )
            config = self._load_config(config_path)

        self.config = config
        self._initialize_calculator()

    def _load_config(self, config_path: str) -> Dict:
        """設定ファイルを読み込む"""
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
            return config.get('centrality', {})
        except Exception as e:
            logger.warning(f"設定ファイルの読み込みに失敗しました: {e}。デフォルト設定を使用します。")
            return {}

    def _initialize_calculator(self):
        """近接中心性の計算クラスを初期化"""
        closeness_config = dict(DEFAULT_CLOSENESS_CONFIG)
        closeness_config.update(self.config.get('closeness') or {})
        self.closeness_config = closeness_config

        algorithm = closeness_config['algorithm']
        if algorithm not in ORACLES:
            raise ValueError(f"未対応のアルゴリズムです: {algorithm}（{', '.join(ORACLES)}のいずれか）")

        self.weight = closeness_config['weight']
        self.top_n = closeness_config['top_n']
        self.closeness = ClosenessCentrality(
            oracle_factory=ORACLES[algorithm],
            include_isolated=closeness_config['include_isolated'],
            workers=int(closeness_config['workers'])
        )

    def calculate_closeness(self, graph: nx.Graph,
                            on_progress: Optional[ProgressCallback] = None) -> Dict[Hashable, float]:
        """
        近接中心性を計算

        Args:
            graph: NetworkXグラフオブジェクト
            on_progress: 始点ノードごとに呼ばれるコールバック

        Returns:
            ノードIDをキー、中心性スコアを値とする辞書
        """
        if isinstance(graph, nx.Graph):
            if not self._is_connected(self._target_subgraph(graph)):
                logger.warning("グラフは非連結です。到達できないノードを持つノードの近接中心性は0になります。")
            graph = NetworkXGraph(graph, weight=self.weight)
        return self.closeness.calculate(graph, on_progress=on_progress)

    def _target_subgraph(self, graph: nx.Graph) -> nx.Graph:
        """計算対象のノード（孤立ノードを含めない場合はエッジを持つノード）の部分グラフ"""
        if self.closeness.include_isolated:
            return graph
        return graph.subgraph([node for node, degree in graph.degree() if degree > 0])

    @staticmethod
    def _is_connected(graph: nx.Graph) -> bool:
        """グラフが（有向グラフの場合は強）連結かどうか"""
        if graph.number_of_nodes() <= 1:
            return True
        if graph.is_directed():
            return nx.is_strongly_connected(graph)
        return nx.is_connected(graph)

    def top_nodes(self, scores: Dict[Hashable, float], top_n: Optional[int] = None) -> pd.DataFrame:
        """近接中心性の上位ノードをDataFrameで返す（top_n未指定の場合は設定値）"""
        return to_dataframe(scores, top_n=top_n if top_n is not None else self.top_n)
