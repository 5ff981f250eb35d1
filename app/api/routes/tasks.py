"""タスクAPIエンドポイント

タスクの作成、取得、更新、削除のREST APIを提供
IDとボディは生の値のままサービス層へ渡し、検証はサービス層で行う
"""

# FastAPIの依存注入システム（Depends）はLint警告の対象外とする
# ruff: noqa: B008

from fastapi import APIRouter, Depends, Request
from fastapi import status as http_status

from app.core.dependencies import get_task_service
from app.schemas.task import MessageResponse, TaskResponse
from app.services.task import TaskService

router = APIRouter()


@router.get("/tasks", response_model=list[TaskResponse])
async def get_tasks(*, service: TaskService = Depends(get_task_service)) -> list[TaskResponse]:
    """タスク一覧を取得"""
    tasks = await service.list_tasks()
    return [TaskResponse.from_dto(task) for task in tasks]


@router.get("/task/{task_id}", response_model=TaskResponse)
async def get_task(*, service: TaskService = Depends(get_task_service), task_id: str) -> TaskResponse:
    """特定タスクを取得"""
    task = await service.get_task(task_id)
    return TaskResponse.from_dto(task)


@router.post("/task", response_model=TaskResponse, status_code=http_status.HTTP_201_CREATED)
async def create_task(*, service: TaskService = Depends(get_task_service), request: Request) -> TaskResponse:
    """タスクを作成"""
    body = await request.body()
    task = await service.create_task(body)
    return TaskResponse.from_dto(task)


@router.put("/task/{task_id}", response_model=MessageResponse)
async def update_task(
    *, service: TaskService = Depends(get_task_service), task_id: str, request: Request
) -> MessageResponse:
    """タスクを更新"""
    body = await request.body()
    return await service.update_task(task_id, body)


@router.delete("/task/{task_id}", response_model=MessageResponse)
async def delete_task(*, service: TaskService = Depends(get_task_service), task_id: str) -> MessageResponse:
    """タスクを削除"""
    return await service.delete_task(task_id)
