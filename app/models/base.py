"""SQLAlchemyベースモデル

すべてのモデルの基底クラスを提供
ネーミング規則を統一
"""

from typing import Any

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# 制約命名規則の統一
metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",  # インデックス
        "uq": "uq_%(table_name)s_%(column_0_name)s",  # ユニーク制約
        "ck": "ck_%(table_name)s_%(constraint_name)s",  # チェック制約
        "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",  # 外部キー
        "pk": "pk_%(table_name)s",  # プライマリキー
    }
)


class Base(DeclarativeBase):
    """SQLAlchemy 2.x準拠のベースクラス

    全てのモデルはこのクラスを継承する
    """

    metadata = metadata

    def to_dict(self) -> dict[str, Any]:
        """モデルを辞書形式に変換（シリアライゼーション用）"""
        return {column.name: getattr(self, column.name) for column in self.__table__.columns}
