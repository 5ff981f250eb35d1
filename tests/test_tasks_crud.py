"""タスクCRUD基本動作テスト

HTTP経由でのタスクの作成・取得・更新・削除とエラー応答のテスト
"""

from typing import Any

import pytest
from fastapi.testclient import TestClient
from httpx import AsyncClient

from app.dtos.task import TaskDTO
from app.repositories.task import TaskRepository


class TestTaskLifecycle:
    """作成から削除までの一連の流れ"""

    def test_full_lifecycle(self, client: TestClient) -> None:
        """作成→取得→更新→取得→削除→取得"""
        response = client.post("/task", json={"title": "buy milk", "status": "todo"})
        assert response.status_code == 201
        assert response.json() == {"id": 1, "title": "buy milk", "status": "todo"}

        response = client.get("/task/1")
        assert response.status_code == 200
        assert response.json() == {"id": 1, "title": "buy milk", "status": "todo"}

        response = client.put("/task/1", json={"title": "buy milk", "status": "done"})
        assert response.status_code == 200
        assert response.json() == {"message": "task updated successfully"}

        response = client.get("/task/1")
        assert response.status_code == 200
        assert response.json()["status"] == "done"

        response = client.delete("/task/1")
        assert response.status_code == 200
        assert response.json() == {"message": "task deleted successfully"}

        response = client.get("/task/1")
        assert response.status_code == 404
        assert response.json() == {"error": "task not found"}


class TestTaskCreate:
    """タスク作成テスト"""

    @pytest.mark.asyncio
    async def test_create_task_success(self, async_client: AsyncClient, sample_task_data: dict[str, Any]) -> None:
        """正常なタスク作成"""
        response = await async_client.post("/task", json=sample_task_data)

        assert response.status_code == 201
        data = response.json()
        assert data["title"] == sample_task_data["title"]
        assert data["status"] == sample_task_data["status"]
        assert isinstance(data["id"], int)

    @pytest.mark.asyncio
    async def test_create_task_then_get_returns_same(
        self, async_client: AsyncClient, sample_task_data: dict[str, Any]
    ) -> None:
        """作成したタスクを取得すると同じ内容が返る"""
        created = (await async_client.post("/task", json=sample_task_data)).json()

        response = await async_client.get(f"/task/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    @pytest.mark.asyncio
    async def test_create_task_empty_fields(self, async_client: AsyncClient) -> None:
        """空文字のタイトル・ステータスも許可"""
        response = await async_client.post("/task", json={"title": "", "status": ""})

        assert response.status_code == 201
        assert response.json()["title"] == ""
        assert response.json()["status"] == ""

    @pytest.mark.asyncio
    async def test_create_task_missing_fields_default_to_empty(self, async_client: AsyncClient) -> None:
        """未指定フィールドは空文字として扱う"""
        response = await async_client.post("/task", json={"title": "only title"})

        assert response.status_code == 201
        assert response.json()["status"] == ""

    @pytest.mark.asyncio
    async def test_create_task_case_insensitive_keys(self, async_client: AsyncClient) -> None:
        """キー名の大文字・小文字を区別せずに保存"""
        response = await async_client.post("/task", json={"Title": "A", "status": "b"})

        assert response.status_code == 201
        assert response.json()["title"] == "A"
        assert response.json()["status"] == "b"

    @pytest.mark.asyncio
    async def test_create_task_ignores_client_id(self, async_client: AsyncClient) -> None:
        """クライアント指定のIDは無視される"""
        response = await async_client.post("/task", json={"id": 999, "title": "a", "status": "b"})

        assert response.status_code == 201
        assert response.json()["id"] != 999

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            "{not json",
            "[]",
            '"just a string"',
            '{"title": 123, "status": "todo"}',
            '{"title": "a", "status": ["x"]}',
            "",
        ],
    )
    async def test_create_task_invalid_json(self, async_client: AsyncClient, body: str) -> None:
        """不正なボディは400を返し、ストレージを変更しない"""
        response = await async_client.post("/task", content=body, headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json() == {"error": "invalid JSON input"}

        list_response = await async_client.get("/tasks")
        assert list_response.json() == []


class TestTaskRead:
    """タスク取得テスト"""

    @pytest.mark.asyncio
    async def test_get_tasks_empty(self, async_client: AsyncClient) -> None:
        """0件の場合は空配列を返す"""
        response = await async_client.get("/tasks")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_get_tasks_after_creates_and_deletes(self, async_client: AsyncClient) -> None:
        """N件作成・M件削除後の一覧はN-M件"""
        ids = []
        for i in range(5):
            response = await async_client.post("/task", json={"title": f"task {i}", "status": "todo"})
            ids.append(response.json()["id"])

        for task_id in ids[:2]:
            assert (await async_client.delete(f"/task/{task_id}")).status_code == 200

        response = await async_client.get("/tasks")

        assert response.status_code == 200
        remaining = {task["id"] for task in response.json()}
        assert remaining == set(ids[2:])

    @pytest.mark.asyncio
    async def test_get_task_by_id_success(
        self, async_client: AsyncClient, repository: TaskRepository, test_task: TaskDTO
    ) -> None:
        """特定タスク取得成功"""
        response = await async_client.get(f"/task/{test_task.id}")

        assert response.status_code == 200
        assert response.json() == {"id": test_task.id, "title": test_task.title, "status": test_task.status}

    @pytest.mark.asyncio
    async def test_get_task_not_found(self, async_client: AsyncClient) -> None:
        """存在しないタスク取得エラー"""
        response = await async_client.get("/task/424242")

        assert response.status_code == 404
        assert response.json() == {"error": "task not found"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("task_id", ["abc", "1.5", "1_000", "99999999999999999999", "0x10"])
    async def test_get_task_invalid_id(self, async_client: AsyncClient, task_id: str) -> None:
        """整数でないIDは400"""
        response = await async_client.get(f"/task/{task_id}")

        assert response.status_code == 400
        assert response.json() == {"error": "invalid task ID"}


class TestTaskUpdate:
    """タスク更新テスト"""

    @pytest.mark.asyncio
    async def test_update_task_success(
        self,
        async_client: AsyncClient,
        repository: TaskRepository,
        test_task: TaskDTO,
        updated_task_data: dict[str, str],
    ) -> None:
        """タスク更新成功（タイトル・ステータスを上書き）"""
        response = await async_client.put(f"/task/{test_task.id}", json=updated_task_data)

        assert response.status_code == 200
        assert response.json() == {"message": "task updated successfully"}

        stored = await repository.get_by_id(test_task.id)
        assert stored.title == updated_task_data["title"]
        assert stored.status == updated_task_data["status"]

    @pytest.mark.asyncio
    async def test_update_task_not_found(self, async_client: AsyncClient, updated_task_data: dict[str, str]) -> None:
        """存在しないタスクの更新は404"""
        response = await async_client.put("/task/424242", json=updated_task_data)

        assert response.status_code == 404
        assert response.json() == {"error": "task not found or no changes made"}

    @pytest.mark.asyncio
    async def test_update_task_invalid_id(self, async_client: AsyncClient, updated_task_data: dict[str, str]) -> None:
        """整数でないIDは400"""
        response = await async_client.put("/task/abc", json=updated_task_data)

        assert response.status_code == 400
        assert response.json() == {"error": "invalid task ID"}

    @pytest.mark.asyncio
    async def test_update_task_invalid_json(
        self, async_client: AsyncClient, repository: TaskRepository, test_task: TaskDTO
    ) -> None:
        """不正なボディは400を返し、既存タスクは変更されない"""
        response = await async_client.put(
            f"/task/{test_task.id}", content="{broken", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "invalid JSON input"}

        stored = await repository.get_by_id(test_task.id)
        assert stored == test_task


class TestTaskDelete:
    """タスク削除テスト"""

    @pytest.mark.asyncio
    async def test_delete_task_success(
        self, async_client: AsyncClient, repository: TaskRepository, test_task: TaskDTO
    ) -> None:
        """タスク削除成功"""
        response = await async_client.delete(f"/task/{test_task.id}")

        assert response.status_code == 200
        assert response.json() == {"message": "task deleted successfully"}

        get_response = await async_client.get(f"/task/{test_task.id}")
        assert get_response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_task_twice(self, async_client: AsyncClient, test_task: TaskDTO) -> None:
        """削除済みタスクの再削除は404"""
        await async_client.delete(f"/task/{test_task.id}")

        response = await async_client.delete(f"/task/{test_task.id}")

        assert response.status_code == 404
        assert response.json() == {"error": "task not found or no changes made"}

    @pytest.mark.asyncio
    async def test_delete_task_invalid_id(self, async_client: AsyncClient) -> None:
        """整数でないIDは400"""
        response = await async_client.delete("/task/not-a-number")

        assert response.status_code == 400
        assert response.json() == {"error": "invalid task ID"}


class TestSystemEndpoints:
    """システムエンドポイントとルーティングのテスト"""

    def test_ping(self, client: TestClient) -> None:
        response = client.get("/ping")

        assert response.status_code == 200
        assert response.json() == {"message": "pong"}

    def test_health_check(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["services"]["database"]["database"] == "connected"

    def test_unknown_route(self, client: TestClient) -> None:
        """未定義ルートもエラー形式で返す"""
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_method_not_allowed(self, client: TestClient) -> None:
        response = client.patch("/task/1", json={})

        assert response.status_code == 405
        assert response.json() == {"error": "Method Not Allowed"}

    def test_security_headers(self, client: TestClient) -> None:
        response = client.get("/ping")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
