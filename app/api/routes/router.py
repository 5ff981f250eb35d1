"""APIルーター統合

すべてのAPIエンドポイントを統合
"""

from fastapi import APIRouter

from app.api.routes import system, tasks
from app.core.constants import ErrorMessages
from app.schemas.task import ErrorResponse

# メインのAPIルーター
api_router = APIRouter()

# システム関連エンドポイント
api_router.include_router(system.router, tags=["システム"])

# タスク管理エンドポイント
api_router.include_router(
    tasks.router,
    tags=["タスク管理"],
    responses={
        400: {"model": ErrorResponse, "description": ErrorMessages.INVALID_TASK_ID},
        404: {"model": ErrorResponse, "description": ErrorMessages.TASK_NOT_FOUND},
        500: {"model": ErrorResponse, "description": ErrorMessages.SERVER_ERROR},
    },
)


__all__ = ["api_router"]
