"""
中心性計算モジュール
"""

from ..graph.errors import CentralityError, GraphAccessError, OracleQueryError, UndefinedClosenessError
from .closeness import ClosenessCentrality, ProgressEvent, compute_closeness_centrality
from .calculator import CentralityCalculator

__all__ = [
    'ClosenessCentrality',
    'ProgressEvent',
    'compute_closeness_centrality',
    'CentralityCalculator',
    'CentralityError',
    'GraphAccessError',
    'OracleQueryError',
    'UndefinedClosenessError'
]
