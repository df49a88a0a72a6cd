"""
近接中心性の集計モジュール
"""

import math
import numpy as np
import pandas as pd
from typing import Dict, Hashable, Optional
import logging

logger = logging.getLogger(__name__)


def summarize(scores: Dict[Hashable, float]) -> Dict[str, float]:
    """
    近接中心性スコアの統計量を計算

    Args:
        scores: ノードIDをキー、中心性スコアを値とする辞書

    Returns:
        件数・平均・最大・最小・標準偏差・0の件数の辞書
    """
    if not scores:
        return {'count': 0, 'mean': 0.0, 'max': 0.0, 'min': 0.0, 'std': 0.0, 'zero_count': 0}

    values = np.array(list(scores.values()), dtype=float)
    finite = values[np.isfinite(values)]
    if len(finite) < len(values):
        logger.warning(f"{len(values) - len(finite)}個の無限大スコアを統計量から除外しました")

    summary = {
        'count': int(len(values)),
        'zero_count': int(np.sum(values == 0.0))
    }
    if len(finite):
        summary.update({
            'mean': float(np.mean(finite)),
            'max': float(np.max(finite)),
            'min': float(np.min(finite)),
            'std': float(np.std(finite))
        })
    else:
        summary.update({'mean': math.nan, 'max': math.nan, 'min': math.nan, 'std': math.nan})
    return summary


def to_dataframe(scores: Dict[Hashable, float], top_n: Optional[int] = None) -> pd.DataFrame:
    """
    近接中心性スコアを降順に並べたDataFrameに変換

    Args:
        scores: ノードIDをキー、中心性スコアを値とする辞書
        top_n: 上位何件を返すか（Noneの場合は全件）

    Returns:
        node_id, closeness, rank 列を持つDataFrame
    """
    df = pd.DataFrame(list(scores.items()), columns=['node_id', 'closeness'])
    if df.empty:
        df['rank'] = pd.Series(dtype=int)
        return df

    df = df.sort_values('closeness', ascending=False, kind='mergesort').reset_index(drop=True)
    df['rank'] = df['closeness'].rank(method='min', ascending=False).astype(int)

    if top_n is not None:
        df = df.head(top_n)

    logger.info(f"近接中心性の上位{len(df)}ノードを抽出しました")
    return df
