"""タスク関連のPydanticスキーマ

タスクの作成、更新、応答のリクエスト・レスポンススキーマを提供
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.core.constants import TaskConstants
from app.dtos.task import TaskDTO


class TaskWrite(BaseModel):
    """タスク作成・更新リクエストスキーマ

    title/statusは文字列のみ受け付ける（未指定・nullは空文字）
    キー名は大文字・小文字を区別しない（"Title"も title として扱う）
    id等の未知のキーは無視する
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    title: str = Field(
        default=TaskConstants.DEFAULT_TITLE,
        description="タスクタイトル",
        examples=["buy milk"],
    )

    status: str = Field(
        default=TaskConstants.DEFAULT_STATUS,
        description="タスクステータス",
        examples=["todo"],
    )

    @model_validator(mode="before")
    @classmethod
    def fold_key_case(cls, data: Any) -> Any:
        """キーの大文字・小文字を区別せずフィールドへ対応付ける

        同じフィールドに対応するキーが複数ある場合は後勝ち
        nullは値を上書きしない
        """
        if not isinstance(data, dict):
            return data

        folded: dict[str, Any] = {}
        for key, value in data.items():
            field_name = key.casefold()
            if field_name not in cls.model_fields:
                continue
            if value is None:
                folded.setdefault(field_name, None)
                continue
            folded[field_name] = value
        return folded

    @field_validator("title", "status", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class TaskResponse(BaseModel):
    """タスクレスポンススキーマ"""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="タスクID", examples=[1])
    title: str = Field(..., description="タスクタイトル", examples=["buy milk"])
    status: str = Field(..., description="タスクステータス", examples=["todo"])

    @classmethod
    def from_dto(cls, task: TaskDTO) -> "TaskResponse":
        return cls.model_validate(task)


class MessageResponse(BaseModel):
    """メッセージレスポンススキーマ"""

    message: str = Field(..., description="処理結果メッセージ", examples=["task updated successfully"])


class ErrorResponse(BaseModel):
    """エラーレスポンススキーマ（OpenAPIドキュメント用）"""

    error: str = Field(..., description="エラーメッセージ", examples=["task not found"])
