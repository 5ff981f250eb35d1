"""リポジトリパッケージ

データアクセス層の抽象化を提供
ストレージ操作をカプセル化し、サービス層との分離を実現
"""

from app.repositories.task import TaskRepository, TaskRepositoryInterface

__all__ = [
    # Interfaces
    "TaskRepositoryInterface",
    # Implementations
    "TaskRepository",
]
