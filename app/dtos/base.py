"""ベースDTOクラス

すべてのDTOの基底クラスを提供
"""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class BaseDTO:
    """ベースDTOクラス

    - dataclass(frozen=True): イミュータブルなデータクラス
    - ストレージが採番したIDを保持
    """

    id: int

    def to_dict(self) -> dict:
        """辞書形式に変換（レスポンス生成・ログ出力用）"""
        return asdict(self)
