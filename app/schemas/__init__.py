"""スキーマパッケージ

APIリクエスト・レスポンスのPydanticスキーマを提供
"""

from app.schemas.task import ErrorResponse, MessageResponse, TaskResponse, TaskWrite

__all__ = [
    "TaskWrite",
    "TaskResponse",
    "MessageResponse",
    "ErrorResponse",
]
