"""依存性注入設定モジュール

ライフスパンで生成したサービスをエンドポイントへ注入する
"""

from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from app.services.task import TaskService


def get_task_service(request: Request) -> "TaskService":
    """タスクサービスの依存性注入

    起動時に app.state へ格納されたインスタンスを返す
    テストでは dependency_overrides で差し替え可能
    """
    return request.app.state.task_service
