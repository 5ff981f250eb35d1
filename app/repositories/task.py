"""タスクリポジトリ

タスクデータアクセス層の抽象化
永続化ハンドルを所有する唯一のコンポーネントであり、
各操作は1つのパラメータ化ステートメントのみを発行する
"""

import logging
from abc import ABC, abstractmethod

from sqlalchemy import delete, select, update
from sqlalchemy.engine import CursorResult

from app.core.constants import ErrorMessages
from app.core.database import DatabaseManager
from app.core.exceptions import (
    StorageReadError,
    StorageUnavailableError,
    StorageWriteError,
    TaskNotFoundError,
)
from app.dtos.task import TaskDTO
from app.models.task import Task
from app.utils.error_handler import STORAGE_FAULTS, handle_storage_operation

logger = logging.getLogger(__name__)


class TaskRepositoryInterface(ABC):
    """タスクリポジトリのインターフェース"""

    @abstractmethod
    async def initialize(self) -> None:
        """ストレージを開き、tasksテーブルの存在を保証（冪等）"""
        pass

    @abstractmethod
    async def list_all(self) -> list[TaskDTO]:
        """全タスクを取得（順序はストレージ依存）"""
        pass

    @abstractmethod
    async def get_by_id(self, task_id: int) -> TaskDTO:
        """IDでタスクを取得"""
        pass

    @abstractmethod
    async def insert(self, title: str, status: str) -> TaskDTO:
        """タスクを作成"""
        pass

    @abstractmethod
    async def update(self, task_id: int, title: str, status: str) -> int:
        """タスクを上書き更新し、影響行数を返す"""
        pass

    @abstractmethod
    async def delete(self, task_id: int) -> int:
        """タスクを削除し、影響行数を返す"""
        pass

    @abstractmethod
    async def close(self) -> None:
        """ストレージハンドルを解放"""
        pass


class TaskRepository(TaskRepositoryInterface):
    """タスクリポジトリの実装

    DatabaseManagerを排他的に所有する
    キャッシュ・複数操作にまたがるトランザクション・リトライは行わない
    """

    def __init__(self, database: DatabaseManager) -> None:
        self._database = database

    @property
    def database(self) -> DatabaseManager:
        return self._database

    async def initialize(self) -> None:
        """ストレージを開き、tasksテーブルの存在を保証

        Raises:
            StorageUnavailableError: ストレージを開けない、またはテーブル作成に失敗した場合
        """
        try:
            self._database.create_session_factory()

            if not await self._database.check_connection():
                raise StorageUnavailableError("データベースへの接続に失敗しました")

            await self._database.create_tables()

        except StorageUnavailableError:
            logger.error("ストレージの初期化に失敗しました")
            raise
        except (*STORAGE_FAULTS, OSError) as e:
            logger.error(f"ストレージの初期化中にエラーが発生しました: {e}")
            raise StorageUnavailableError(f"ストレージの初期化に失敗しました: {e}") from e

        logger.info("ストレージの初期化が完了しました")

    @handle_storage_operation("タスク一覧取得", StorageReadError, ErrorMessages.FETCH_TASKS_FAILED)
    async def list_all(self) -> list[TaskDTO]:
        """全タスクを取得

        ORDER BYは指定しない（呼び出し側からは順不同として扱う）
        """
        async with self._database.session() as session:
            result = await session.execute(select(Task))
            return [TaskDTO.from_model(task) for task in result.scalars().all()]

    @handle_storage_operation("タスク取得", StorageReadError, ErrorMessages.FETCH_TASK_FAILED)
    async def get_by_id(self, task_id: int) -> TaskDTO:
        """IDでタスクを取得

        Raises:
            TaskNotFoundError: 該当行が存在しない場合
            StorageReadError: その他の読み取りエラー
        """
        async with self._database.session() as session:
            result = await session.execute(select(Task).where(Task.id == task_id))
            task = result.scalar_one_or_none()

        if task is None:
            raise TaskNotFoundError(ErrorMessages.TASK_NOT_FOUND)

        return TaskDTO.from_model(task)

    @handle_storage_operation("タスク作成", StorageWriteError, ErrorMessages.CREATE_TASK_FAILED)
    async def insert(self, title: str, status: str) -> TaskDTO:
        """タスクを作成し、採番されたIDを含むタスクを返す"""
        async with self._database.session() as session:
            task = Task(title=title, status=status)
            session.add(task)
            await session.commit()
            return TaskDTO.from_model(task)

    @handle_storage_operation("タスク更新", StorageWriteError, ErrorMessages.UPDATE_TASK_FAILED)
    async def update(self, task_id: int, title: str, status: str) -> int:
        """タイトルとステータスを上書きし、影響行数（0または1）を返す

        IDが存在しない場合の区別は呼び出し側が影響行数で判断する
        """
        stmt = (
            update(Task)
            .where(Task.id == task_id)
            .values(title=title, status=status)
            .execution_options(synchronize_session=False)
        )
        async with self._database.session() as session:
            result = await session.execute(stmt)
            await session.commit()

        return self._affected_rows(result, "タスク更新", task_id)

    @handle_storage_operation("タスク削除", StorageWriteError, ErrorMessages.DELETE_TASK_FAILED)
    async def delete(self, task_id: int) -> int:
        """タスクを削除し、影響行数（0または1）を返す"""
        stmt = delete(Task).where(Task.id == task_id).execution_options(synchronize_session=False)
        async with self._database.session() as session:
            result = await session.execute(stmt)
            await session.commit()

        return self._affected_rows(result, "タスク削除", task_id)

    async def close(self) -> None:
        await self._database.close()

    @staticmethod
    def _affected_rows(result: CursorResult, operation_name: str, task_id: int) -> int:
        """影響行数を取得

        ドライバーが行数を報告できない場合は0として扱う
        （呼び出し側では「該当なし」と同じ応答になる）
        """
        rowcount = result.rowcount
        if rowcount is None or rowcount < 0:
            logger.warning(f"{operation_name}: 影響行数を取得できませんでした (task_id={task_id})")
            return 0
        return int(rowcount)
