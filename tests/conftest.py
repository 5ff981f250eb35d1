"""pytest設定とテスト環境インフラ

基本的なフィクスチャとテスト設定のエントリーポイント
"""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings, reset_settings
from app.repositories.task import TaskRepository
from tests.fixtures.entities import *  # noqa: F403, F401
from tests.fixtures.sample_data import *  # noqa: F403, F401
from tests.tests_config.app_factory import create_test_app
from tests.tests_config.database import build_test_settings, create_test_repository


@pytest.fixture(scope="session", autouse=True)
def setup_test_env() -> Generator[None]:
    """テスト環境セットアップ"""
    os.environ["ENVIRONMENT"] = "testing"
    os.environ["LOG_LEVEL"] = "WARNING"

    # 環境変数を反映させるためシングルトンを破棄
    reset_settings()

    yield

    reset_settings()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """テストごとに独立したSQLiteファイルを使う設定"""
    return build_test_settings(tmp_path)


@pytest_asyncio.fixture
async def repository(test_settings: Settings) -> AsyncGenerator[TaskRepository]:
    """初期化済みのタスクリポジトリ（HTTPクライアントと同じDBファイルを共有）"""
    repo = await create_test_repository(test_settings)
    try:
        yield repo
    finally:
        await repo.close()


@pytest.fixture
def test_app(test_settings: Settings) -> Generator[FastAPI]:
    """テスト用FastAPIアプリケーション"""
    app = create_test_app(test_settings)

    try:
        yield app
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def client(test_app: FastAPI) -> Generator[TestClient]:
    """テスト用同期HTTPクライアント（ライフスパンを実行）"""
    with TestClient(test_app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def async_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """テスト用非同期HTTPクライアント

    ASGITransportはライフスパンを実行しないため明示的に起動する
    """
    async with test_app.router.lifespan_context(test_app):
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client
