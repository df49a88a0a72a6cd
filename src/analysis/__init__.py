"""
分析・可視化モジュール
"""

from .summary import summarize, to_dataframe
from .visualizer import ClosenessVisualizer

__all__ = ['summarize', 'to_dataframe', 'ClosenessVisualizer']
