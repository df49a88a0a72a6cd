"""
最短経路オラクルのインターフェース定義
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Protocol, Tuple


@dataclass(frozen=True)
class PathResult:
    """
    1組の始点・終点に対する最短経路の問い合わせ結果

    到達可能性はreachableで明示する。距離0は「到達不能」ではなく、
    重み0のエッジで到達できることを意味する。
    """
    distance: float
    reachable: bool
    nodes: Tuple[Hashable, ...] = ()

    @classmethod
    def unreachable(cls) -> 'PathResult':
        return cls(distance=math.inf, reachable=False)


class ShortestPathOracle(Protocol):
    def reset(self) -> None: ...

    def shortest_path(self, source: Hashable, destination: Hashable) -> PathResult: ...


# グラフを受け取り、そのグラフに束縛されたオラクルを返す
OracleFactory = Callable[[Any], ShortestPathOracle]
