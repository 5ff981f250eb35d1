"""テスト用FastAPIアプリケーション作成"""

from fastapi import FastAPI

from app.core.config import Settings
from app.main import create_application


def create_test_app(settings: Settings) -> FastAPI:
    """テスト環境用のFastAPIアプリケーションを作成

    本番と同じファクトリを使い、設定のみ差し替える
    """
    return create_application(settings)
