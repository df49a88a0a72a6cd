"""
近接中心性の可視化モジュール
"""

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import numpy as np
from typing import Dict, Hashable, Optional
import os
import logging

from .summary import to_dataframe

logger = logging.getLogger(__name__)


class ClosenessVisualizer:
    """近接中心性スコアの可視化を行うクラス"""

    def __init__(self, output_dir: str = './results'):
        """
        初期化

        Args:
            output_dir: 出力ディレクトリ
        """
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

    def plot_distribution(self, scores: Dict[Hashable, float],
                          save_path: Optional[str] = None, bins: int = 50) -> str:
        """
        近接中心性スコアの分布をヒストグラムで可視化

        Args:
            scores: ノードIDをキー、中心性スコアを値とする辞書
            save_path: 保存パス
            bins: ヒストグラムのビン数

        Returns:
            保存したファイルのパス
        """
        values = np.array(list(scores.values()), dtype=float)
        values = values[np.isfinite(values)]

        fig, ax = plt.subplots(figsize=(8, 5))
        ax.hist(values, bins=bins, edgecolor='black', alpha=0.7)
        ax.set_title('Closeness centrality')
        ax.set_xlabel('score')
        ax.set_ylabel('frequency')
        ax.grid(True, alpha=0.3)

        if save_path is None:
            save_path = os.path.join(self.output_dir, 'closeness_distribution.png')
        fig.tight_layout()
        fig.savefig(save_path, dpi=150)
        plt.close(fig)

        logger.info(f"近接中心性の分布を保存しました: {save_path}")
        return save_path

    def plot_top_nodes(self, scores: Dict[Hashable, float], top_n: int = 20,
                       save_path: Optional[str] = None) -> str:
        """
        近接中心性の上位ノードを棒グラフで可視化

        Args:
            scores: ノードIDをキー、中心性スコアを値とする辞書
            top_n: 表示するノード数
            save_path: 保存パス

        Returns:
            保存したファイルのパス
        """
        df = to_dataframe(scores, top_n=top_n)

        fig, ax = plt.subplots(figsize=(10, max(3, 0.35 * len(df))))
        labels = [str(node_id) for node_id in df['node_id']]
        ax.barh(labels[::-1], df['closeness'].tolist()[::-1], alpha=0.7)
        ax.set_title(f'Top {len(df)} nodes by closeness centrality')
        ax.set_xlabel('score')
        ax.grid(True, axis='x', alpha=0.3)

        if save_path is None:
            save_path = os.path.join(self.output_dir, 'closeness_top_nodes.png')
        fig.tight_layout()
        fig.savefig(save_path, dpi=150)
        plt.close(fig)

        logger.info(f"近接中心性の上位{len(df)}ノードを保存しました: {save_path}")
        return save_path
