"""エラーハンドリング関連ユーティリティ

エラーハンドリング、ログ出力、例外変換を提供
"""

import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from app.core.database import DatabaseConnectionError
from app.core.exceptions import StorageError

T = TypeVar("T")

# ストレージ障害として扱う例外
STORAGE_FAULTS: tuple[type[Exception], ...] = (SQLAlchemyError, DatabaseConnectionError)


def get_logger(name: str) -> logging.Logger:
    """統一フォーマットのロガー取得

    Args:
        name: ロガー名（通常は __name__ を渡す）

    Returns:
        設定済みのロガーインスタンス
    """
    return logging.getLogger(name)


def handle_storage_operation(
    operation_name: str, error_class: type[StorageError], public_message: str
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """ストレージ操作用デコレータ

    ストレージ操作でエラーが発生した場合の統一処理を提供
    - 内部エラー詳細のログ出力
    - ドメイン例外への変換（クライアントには public_message のみ返却）

    Args:
        operation_name: 操作名（ログ出力用）
        error_class: 変換先のストレージ例外クラス
        public_message: クライアントに返却するメッセージ

    Usage:
        @handle_storage_operation("タスク作成", StorageWriteError, ErrorMessages.CREATE_TASK_FAILED)
        async def insert(self, title: str, status: str) -> TaskDTO:
            # ストレージ操作
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            logger = get_logger(func.__module__)
            try:
                return await func(*args, **kwargs)
            except STORAGE_FAULTS as e:
                log_error(logger, operation_name, e, **kwargs)
                raise error_class(public_message) from e

        return wrapper

    return decorator


def log_error(logger: logging.Logger, operation: str, error: Exception, **context: Any) -> None:
    """統一されたエラーログ出力

    Args:
        logger: ロガーインスタンス
        operation: 操作名
        error: 発生した例外
        **context: 追加のコンテキスト情報
    """
    context_str = ", ".join(f"{k}={v}" for k, v in context.items()) if context else ""
    log_message = f"{operation}エラー: {error}"
    if context_str:
        log_message += f" (context: {context_str})"

    logger.error(log_message)
