"""タスクDTO

タスクデータの転送オブジェクト
"""

from dataclasses import dataclass

from app.core.constants import TaskConstants
from app.dtos.base import BaseDTO
from app.models.task import Task


@dataclass(frozen=True)
class TaskDTO(BaseDTO):
    """タスクDTO

    リポジトリ層から返却されるタスクエンティティ
    セッション外でも安全に参照できる
    """

    title: str
    status: str

    @classmethod
    def from_model(cls, task: Task) -> "TaskDTO":
        """SQLAlchemyモデルからDTOを生成（NULLは空文字として扱う）"""
        data = task.to_dict()
        return cls(
            id=data["id"],
            title=data["title"] if data["title"] is not None else TaskConstants.DEFAULT_TITLE,
            status=data["status"] if data["status"] is not None else TaskConstants.DEFAULT_STATUS,
        )
