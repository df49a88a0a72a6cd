"""
グラフ構築・アダプタモジュール
"""

from .adapter import EdgeGraph, NetworkXGraph
from .builder import GraphBuilder
from .errors import CentralityError, GraphAccessError, OracleQueryError, UndefinedClosenessError
from .node_set import extract_node_set

__all__ = [
    'EdgeGraph',
    'NetworkXGraph',
    'GraphBuilder',
    'CentralityError',
    'GraphAccessError',
    'OracleQueryError',
    'UndefinedClosenessError',
    'extract_node_set'
]
