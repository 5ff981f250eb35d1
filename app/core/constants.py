"""アプリケーション定数管理

バリデーション値、制限値、レスポンスメッセージを一元管理
"""

# =============================================================================
# タスク関連定数
# =============================================================================


class TaskConstants:
    """タスク関連の定数"""

    # テーブル名
    TABLE_NAME = "tasks"

    # ID範囲（符号付き64ビット整数）
    ID_MIN = -(2**63)
    ID_MAX = 2**63 - 1

    # 未指定フィールドのデフォルト値
    DEFAULT_TITLE = ""
    DEFAULT_STATUS = ""


# =============================================================================
# データベース関連定数
# =============================================================================


class DatabaseConstants:
    """データベース関連の定数"""

    DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./tasks.db"
    SQLITE_URL_PREFIX = "sqlite"

    # インメモリSQLiteの判定用
    MEMORY_MARKERS = (":memory:", "mode=memory")


# =============================================================================
# サーバー関連定数
# =============================================================================


class ServerConstants:
    """サーバー関連の定数"""

    DEFAULT_HOST = "0.0.0.0"  # nosec B104 # noqa: S104
    DEFAULT_PORT = 8080
    PORT_MIN = 1
    PORT_MAX = 65535


# =============================================================================
# レスポンスメッセージ定数
# =============================================================================


class SuccessMessages:
    """成功メッセージの定数"""

    PONG = "pong"
    TASK_UPDATED = "task updated successfully"
    TASK_DELETED = "task deleted successfully"


class ErrorMessages:
    """エラーメッセージの定数（クライアントに返却される文言）"""

    # 入力関連
    INVALID_TASK_ID = "invalid task ID"
    INVALID_JSON_INPUT = "invalid JSON input"
    INVALID_REQUEST = "invalid request"

    # タスク関連
    TASK_NOT_FOUND = "task not found"
    TASK_NOT_FOUND_OR_UNCHANGED = "task not found or no changes made"

    # ストレージ関連
    FETCH_TASKS_FAILED = "failed to fetch tasks"
    FETCH_TASK_FAILED = "failed to fetch task"
    CREATE_TASK_FAILED = "failed to create task"
    UPDATE_TASK_FAILED = "failed to update task"
    DELETE_TASK_FAILED = "failed to delete task"
    STORAGE_UNAVAILABLE = "storage unavailable"

    # 一般的なエラー
    SERVER_ERROR = "internal server error"
