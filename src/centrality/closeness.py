"""
近接中心性 (Closeness Centrality) 計算モジュール

Freemanの近接中心性: 各ノードから他の全ノードへの最短経路距離の合計
（farness）の逆数に (ノード数 - 1) を掛けた値。
到達できないノードが1つでもあれば近接中心性は0とする。

Freeman, L. C., Centrality in social networks: conceptual clarification,
Social Networks 1: 215-239, 1979.
"""

import math
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Iterable, Optional, Tuple
import logging

import numpy as np

from ..graph.adapter import NetworkXGraph
from ..graph.errors import CentralityError, OracleQueryError, UndefinedClosenessError
from ..graph.node_set import extract_node_set
from ..routing.dijkstra import DijkstraOracle
from ..routing.oracle import OracleFactory, ShortestPathOracle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressEvent:
    """1つの始点ノードの計算完了を通知するイベント"""
    source: Hashable
    closeness: float
    farness: float
    elapsed_ms: float
    index: int
    total: int


ProgressCallback = Callable[[ProgressEvent], None]


def farness_to_closeness(farness: float, num_nodes: int, source: Optional[Hashable] = None) -> float:
    """
    farnessを近接中心性に変換

    無限大の除算に頼らず、到達不能の場合は明示的に0を返す。
    farnessが0（他の全ノードに距離0で到達）の場合は近接中心性が定義できないため
    UndefinedClosenessErrorとする。
    """
    if math.isinf(farness):
        return 0.0
    if farness == 0.0:
        raise UndefinedClosenessError(
            f"ノード {source} から他の全ノードへの距離が0のため近接中心性を定義できません", source
        )
    return (num_nodes - 1) / farness


def _source_farness(oracle: ShortestPathOracle, source: Hashable,
                    destinations: Iterable[Hashable]) -> float:
    """始点から他の全ノードへの距離の合計(farness)を計算"""
    farness = 0.0

    for destination in destinations:
        if destination == source:
            continue

        oracle.reset()
        try:
            result = oracle.shortest_path(source, destination)
        except CentralityError:
            raise
        except Exception as e:
            logger.error(f"最短経路の問い合わせに失敗しました（{source} -> {destination}）: {e}")
            raise OracleQueryError(
                f"最短経路の問い合わせに失敗しました（{source} -> {destination}）: {e}",
                source, destination
            ) from e

        farness += result.distance if result.reachable else math.inf

        # 1つでも到達不能なら近接中心性は0で確定する
        if math.isinf(farness):
            break

    return farness


class ClosenessCentrality:
    """近接中心性を計算するクラス"""

    def __init__(self, oracle_factory: Optional[OracleFactory] = None,
                 include_isolated: bool = False, workers: int = 1):
        """
        初期化

        Args:
            oracle_factory: グラフを受け取り最短経路オラクルを返す関数（Noneの場合はDijkstraOracle）
            include_isolated: エッジを持たない孤立ノードも対象にするかどうか
            workers: 並列計算のワーカースレッド数（1の場合は逐次計算）
        """
        if workers < 1:
            raise ValueError(f"workersは1以上を指定してください: {workers}")
        self.oracle_factory = oracle_factory or DijkstraOracle
        self.include_isolated = include_isolated
        self.workers = workers

    def node_set(self, graph: Any) -> set:
        """計算対象のノード集合を取得"""
        return extract_node_set(graph, include_isolated=self.include_isolated)

    def calculate(self, graph: Any,
                  on_progress: Optional[ProgressCallback] = None) -> Dict[Hashable, float]:
        """
        近接中心性を計算

        Args:
            graph: all_edges()を持つグラフ、またはNetworkXグラフオブジェクト
            on_progress: 始点ノードごとに呼ばれるコールバック（Noneの場合はdebugログ出力）

        Returns:
            ノードIDをキー、中心性スコアを値とする辞書
        """
        graph = NetworkXGraph.wrap(graph)
        nodes = self.node_set(graph)
        num_nodes = len(nodes)

        logger.info(f"近接中心性の計算を開始します（ノード数: {num_nodes}）")

        if num_nodes <= 1:
            logger.warning(f"ノード数が{num_nodes}のため近接中心性を計算できません")
            return {}

        notify = on_progress or self._log_progress
        start = time.perf_counter()

        try:
            if self.workers > 1:
                centrality = self._calculate_parallel(graph, nodes, notify)
            else:
                centrality = self._calculate_sequential(graph, nodes, notify)
        except Exception as e:
            logger.error(f"近接中心性の計算中にエラーが発生しました: {e}")
            raise

        elapsed = time.perf_counter() - start
        values = list(centrality.values())
        logger.info(f"近接中心性の計算が完了しました（ノード数: {len(centrality)}, 所要時間: {elapsed:.3f}秒）")
        logger.info(f"  平均: {np.mean(values):.6f}, 最大: {np.max(values):.6f}, 最小: {np.min(values):.6f}")
        zero_count = sum(1 for v in values if v == 0.0)
        if zero_count:
            logger.warning(f"{zero_count}個のノードから到達できないノードがあります（近接中心性0）")

        return centrality

    def _score(self, oracle: ShortestPathOracle, source: Hashable,
               nodes: set) -> Tuple[float, float, float]:
        """1つの始点ノードのfarness・近接中心性・所要時間を計算"""
        start = time.perf_counter()
        farness = _source_farness(oracle, source, nodes)
        closeness = farness_to_closeness(farness, len(nodes), source)
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        return farness, closeness, elapsed_ms

    def _calculate_sequential(self, graph: Any, nodes: set,
                              notify: ProgressCallback) -> Dict[Hashable, float]:
        """1つのオラクルを共有して逐次計算"""
        oracle = self.oracle_factory(graph)
        centrality = {}

        for index, source in enumerate(nodes, start=1):
            farness, closeness, elapsed_ms = self._score(oracle, source, nodes)
            centrality[source] = closeness
            notify(ProgressEvent(source, closeness, farness, elapsed_ms, index, len(nodes)))

        return centrality

    def _calculate_parallel(self, graph: Any, nodes: set,
                            notify: ProgressCallback) -> Dict[Hashable, float]:
        """ワーカースレッドごとにオラクルを生成して並列計算"""
        # オラクルは状態を持つため、ワーカースレッドごとに生成する
        local = threading.local()

        def task(source: Hashable) -> Tuple[Hashable, float, float, float]:
            oracle = getattr(local, 'oracle', None)
            if oracle is None:
                oracle = local.oracle = self.oracle_factory(graph)
            return (source,) + self._score(oracle, source, nodes)

        centrality = {}
        pool = ThreadPoolExecutor(max_workers=self.workers)
        futures = [pool.submit(task, source) for source in nodes]
        try:
            for index, future in enumerate(futures, start=1):
                source, farness, closeness, elapsed_ms = future.result()
                centrality[source] = closeness
                notify(ProgressEvent(source, closeness, farness, elapsed_ms, index, len(nodes)))
        except BaseException:
            # 未着手の始点ノードは破棄して直ちにエラーを返す
            pool.shutdown(wait=False, cancel_futures=True)
            raise
        pool.shutdown()

        return centrality

    @staticmethod
    def _log_progress(event: ProgressEvent) -> None:
        """進捗をdebugログに出力"""
        logger.debug(f"[{event.index}/{event.total}] ノード {event.source} の計算: "
                     f"{event.elapsed_ms:.1f} ms, 近接中心性: {event.closeness}")


def compute_closeness_centrality(graph: Any, oracle_factory: Optional[OracleFactory] = None,
                                 include_isolated: bool = False, workers: int = 1,
                                 on_progress: Optional[ProgressCallback] = None) -> Dict[Hashable, float]:
    """
    グラフの全ノードの近接中心性を計算

    Args:
        graph: all_edges()を持つグラフ、またはNetworkXグラフオブジェクト
        oracle_factory: 最短経路オラクルの生成関数（Noneの場合はDijkstraOracle）
        include_isolated: 孤立ノードも対象にするかどうか
        workers: 並列計算のワーカースレッド数
        on_progress: 始点ノードごとに呼ばれるコールバック

    Returns:
        ノードIDをキー、中心性スコアを値とする辞書
    """
    calculator = ClosenessCentrality(
        oracle_factory=oracle_factory,
        include_isolated=include_isolated,
        workers=workers
    )
    return calculator.calculate(graph, on_progress=on_progress)
