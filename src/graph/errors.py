"""
中心性計算で使用する例外定義モジュール
"""


class CentralityError(Exception):
    """中心性計算に関する例外の基底クラス"""


class GraphAccessError(CentralityError):
    """グラフのエッジ・ノードの列挙に失敗した場合の例外"""


class OracleQueryError(CentralityError):
    """最短経路の問い合わせが到達不能以外の理由で失敗した場合の例外"""

    def __init__(self, message: str, source=None, destination=None):
        super().__init__(message)
        self.source = source
        self.destination = destination


class UndefinedClosenessError(CentralityError):
    """farnessが0で近接中心性が定義できない場合の例外"""

    def __init__(self, message: str, source=None):
        super().__init__(message)
        self.source = source
