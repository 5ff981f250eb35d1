"""リクエスト入力の解析ユーティリティ

パスパラメータのID変換とJSONボディの検証を提供
どちらもストレージ呼び出しより前に実行される
"""

import re

from pydantic import ValidationError

from app.core.constants import ErrorMessages, TaskConstants
from app.core.exceptions import InvalidInputError
from app.schemas.task import TaskWrite

# 符号付き10進整数（空白・小数・アンダースコア区切りは不可）
_TASK_ID_PATTERN = re.compile(r"^[+-]?[0-9]+$")


def parse_task_id(value: str | None) -> int:
    """安全なタスクID変換

    Args:
        value: パスパラメータの文字列

    Returns:
        整数のタスクID

    Raises:
        InvalidInputError: 整数として解釈できない、または64ビット範囲外の場合
    """
    if value is None or not _TASK_ID_PATTERN.fullmatch(value):
        raise InvalidInputError(ErrorMessages.INVALID_TASK_ID)

    task_id = int(value)
    if not (TaskConstants.ID_MIN <= task_id <= TaskConstants.ID_MAX):
        raise InvalidInputError(ErrorMessages.INVALID_TASK_ID)

    return task_id


def parse_task_body(body: bytes | str) -> TaskWrite:
    """JSONボディをタスク入力スキーマに変換

    Args:
        body: リクエストボディ（生データ）

    Returns:
        検証済みのTaskWrite

    Raises:
        InvalidInputError: JSONとして不正、またはオブジェクト形状が一致しない場合
    """
    try:
        return TaskWrite.model_validate_json(body)
    except ValidationError as e:
        raise InvalidInputError(ErrorMessages.INVALID_JSON_INPUT) from e
