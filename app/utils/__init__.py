"""ユーティリティモジュール

共通的な処理を提供するユーティリティ関数群
"""

from app.utils.error_handler import (
    STORAGE_FAULTS,
    get_logger,
    handle_storage_operation,
    log_error,
)
from app.utils.parsing import parse_task_body, parse_task_id

__all__ = [
    # error_handler
    "STORAGE_FAULTS",
    "get_logger",
    "handle_storage_operation",
    "log_error",
    # parsing
    "parse_task_id",
    "parse_task_body",
]
