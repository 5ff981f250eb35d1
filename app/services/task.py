"""タスクサービス層

リクエスト入力の検証とタスクリポジトリの呼び出しを仲介する
"""

import logging

from app.core.constants import ErrorMessages, SuccessMessages
from app.core.exceptions import TaskNotFoundError
from app.dtos.task import TaskDTO
from app.repositories.task import TaskRepositoryInterface
from app.schemas.task import MessageResponse
from app.utils.parsing import parse_task_body, parse_task_id

logger = logging.getLogger(__name__)


class TaskService:
    """タスクサービス

    IDとボディの解析は必ずストレージ呼び出しの前に行う
    リポジトリはコンストラクタで明示的に注入する
    """

    def __init__(self, repository: TaskRepositoryInterface) -> None:
        self.task_repository = repository

    async def list_tasks(self) -> list[TaskDTO]:
        """タスク一覧を取得（0件の場合は空リスト）"""
        return await self.task_repository.list_all()

    async def get_task(self, raw_id: str) -> TaskDTO:
        """タスクを取得

        Args:
            raw_id: パスパラメータのタスクID

        Raises:
            InvalidInputError: IDが不正な場合
            TaskNotFoundError: タスクが存在しない場合
        """
        task_id = parse_task_id(raw_id)
        return await self.task_repository.get_by_id(task_id)

    async def create_task(self, body: bytes | str) -> TaskDTO:
        """タスクを作成

        Args:
            body: リクエストボディ（JSON）

        Returns:
            採番済みIDを含む作成されたタスク
        """
        task_in = parse_task_body(body)
        task = await self.task_repository.insert(task_in.title, task_in.status)

        logger.info(f"タスクを作成しました: id={task.id}")
        return task

    async def update_task(self, raw_id: str, body: bytes | str) -> MessageResponse:
        """タスクを更新（タイトルとステータスを上書き）

        Raises:
            InvalidInputError: IDまたはボディが不正な場合
            TaskNotFoundError: 影響行数が0の場合
        """
        task_id = parse_task_id(raw_id)
        task_in = parse_task_body(body)

        affected = await self.task_repository.update(task_id, task_in.title, task_in.status)
        if affected == 0:
            raise TaskNotFoundError(ErrorMessages.TASK_NOT_FOUND_OR_UNCHANGED)

        logger.info(f"タスクを更新しました: id={task_id}")
        return MessageResponse(message=SuccessMessages.TASK_UPDATED)

    async def delete_task(self, raw_id: str) -> MessageResponse:
        """タスクを削除

        Raises:
            InvalidInputError: IDが不正な場合
            TaskNotFoundError: 影響行数が0の場合
        """
        task_id = parse_task_id(raw_id)

        affected = await self.task_repository.delete(task_id)
        if affected == 0:
            raise TaskNotFoundError(ErrorMessages.TASK_NOT_FOUND_OR_UNCHANGED)

        logger.info(f"タスクを削除しました: id={task_id}")
        return MessageResponse(message=SuccessMessages.TASK_DELETED)
