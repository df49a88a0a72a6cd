"""
エッジレコードからグラフを構築するモジュール
"""

import math

import networkx as nx
import pandas as pd
from typing import Any, Dict, Iterable, Optional, Tuple, Union
import logging

logger = logging.getLogger(__name__)

EdgeRecord = Union[Dict[str, Any], Tuple]


def _is_missing(value: Any) -> bool:
    # pandas由来の欠損値(NaN)も欠損扱い
    return value is None or (isinstance(value, float) and math.isnan(value))


class GraphBuilder:
    """エッジレコードやCSVファイルからNetworkXグラフを構築するクラス"""

    def __init__(self, directed: bool = False, weight_attribute: Optional[str] = 'weight',
                 source_column: str = 'source', target_column: str = 'target'):
        """
        初期化

        Args:
            directed: 有向グラフかどうか
            weight_attribute: エッジの重み属性名（Noneの場合は重みなし）
            source_column: 始点ノードIDのキー名
            target_column: 終点ノードIDのキー名
        """
        self.directed = directed
        self.weight_attribute = weight_attribute
        self.source_column = source_column
        self.target_column = target_column

    def _new_graph(self) -> nx.Graph:
        if self.directed:
            return nx.DiGraph()
        return nx.Graph()

    def _split_record(self, record: EdgeRecord) -> Tuple[Any, Any, Dict[str, Any]]:
        """レコードを (始点, 終点, 属性) に分解"""
        if isinstance(record, dict):
            source = record.get(self.source_column)
            target = record.get(self.target_column)
            attrs = {k: v for k, v in record.items()
                     if k not in (self.source_column, self.target_column)}
            return source, target, attrs

        if len(record) == 2:
            return record[0], record[1], {}
        if len(record) == 3 and self.weight_attribute:
            return record[0], record[1], {self.weight_attribute: record[2]}
        raise ValueError(f"エッジレコードの形式が不正です: {record!r}")

    def build_graph(self, edges: Iterable[EdgeRecord],
                    nodes: Optional[Iterable[Any]] = None) -> nx.Graph:
        """
        エッジレコードからグラフを構築

        Args:
            edges: 辞書、または (始点, 終点[, 重み]) タプルのエッジレコード
            nodes: 追加するノードID（孤立ノードを含めたい場合に指定）

        Returns:
            NetworkXグラフオブジェクト
        """
        graph = self._new_graph()

        try:
            if nodes is not None:
                graph.add_nodes_from(nodes)

            skipped = 0
            for record in edges:
                source, target, attrs = self._split_record(record)

                if _is_missing(source) or _is_missing(target):
                    skipped += 1
                    continue

                if self.weight_attribute and self.weight_attribute in attrs:
                    attrs[self.weight_attribute] = float(attrs[self.weight_attribute])
                graph.add_edge(source, target, **attrs)

            if skipped:
                logger.warning(f"始点または終点が欠けている{skipped}個のエッジをスキップしました")

            logger.info(f"グラフを構築しました（ノード数: {graph.number_of_nodes()}, エッジ数: {graph.number_of_edges()}）")
            return graph

        except Exception as e:
            logger.error(f"グラフの構築中にエラーが発生しました: {e}")
            raise

    def build_from_csv(self, path: str, **read_csv_kwargs) -> nx.Graph:
        """
        CSVのエッジリストからグラフを構築

        Args:
            path: CSVファイルのパス（source, target[, weight] 列を想定）
            read_csv_kwargs: pandas.read_csvに渡す追加引数

        Returns:
            NetworkXグラフオブジェクト
        """
        logger.info(f"エッジリストを読み込んでいます: {path}")
        df = pd.read_csv(path, **read_csv_kwargs)

        missing = [c for c in (self.source_column, self.target_column) if c not in df.columns]
        if missing:
            raise ValueError(f"必要な列がCSVにありません: {missing}")

        logger.info(f"{len(df)}個のエッジを取得しました")
        return self.build_graph(df.to_dict(orient='records'))
