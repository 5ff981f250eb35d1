"""DTOパッケージ

Data Transfer Objectsを提供
各レイヤー間のデータ転送を担当する
"""

from app.dtos.base import BaseDTO
from app.dtos.task import TaskDTO

__all__ = [
    "BaseDTO",
    "TaskDTO",
]
