"""タスクモデル

tasksテーブルの永続化表現を提供
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.constants import TaskConstants
from app.models.base import Base


class Task(Base):
    """タスクモデル

    - id: ストレージが採番する自動増分の整数（削除後も再利用しない）
    - title / status: 制約なしの文字列（空文字も許可）
    """

    __tablename__ = TaskConstants.TABLE_NAME

    # SQLiteではAUTOINCREMENTを付与し、削除済みIDの再利用を防ぐ
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, comment="プライマリキー")

    title: Mapped[str | None] = mapped_column(Text, nullable=True, comment="タスクタイトル")

    status: Mapped[str | None] = mapped_column(Text, nullable=True, comment="タスクステータス")

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, title={self.title}, status={self.status})>"
