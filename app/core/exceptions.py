"""アプリケーション例外定義

ドメイン例外とHTTPステータスコードの対応を一元管理
例外ハンドラーはstatus_codeとmessageのみをクライアントへ返却する
"""

from fastapi import status

from app.core.constants import ErrorMessages


class TaskTrackerError(Exception):
    """アプリケーション例外の基底クラス

    Attributes:
        status_code: 対応するHTTPステータスコード
        message: クライアントに返却するメッセージ（内部情報は含めない）
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = ErrorMessages.SERVER_ERROR

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(TaskTrackerError):
    """不正なIDまたはリクエストボディ"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = ErrorMessages.INVALID_REQUEST


class TaskNotFoundError(TaskTrackerError):
    """タスクが存在しない"""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = ErrorMessages.TASK_NOT_FOUND


class StorageError(TaskTrackerError):
    """ストレージ関連エラーの基底クラス"""

    pass


class StorageUnavailableError(StorageError):
    """ストレージを開けない、またはスキーマを作成できない（起動時は致命的）"""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = ErrorMessages.STORAGE_UNAVAILABLE


class StorageReadError(StorageError):
    """読み取り時のストレージエラー"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class StorageWriteError(StorageError):
    """書き込み時のストレージエラー"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
