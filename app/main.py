"""FastAPIアプリケーションのメインモジュール

ミドルウェア、ルーティング、ライフサイクル管理を提供
"""

import logging
import time
from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager
from typing import cast

from fastapi import FastAPI, Request, Response
from fastapi import status as http_status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.api.routes.router import api_router
from app.core.config import Settings, get_settings
from app.core.constants import ErrorMessages
from app.core.database import DatabaseManager
from app.core.exceptions import TaskTrackerError
from app.repositories.task import TaskRepository
from app.services.task import TaskService

logging.basicConfig(
    level=getattr(logging, get_settings().LOG_LEVEL), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """アプリケーションライフサイクル管理

    ストレージの初期化に失敗した場合は例外を再送出し、起動を中止する
    """
    settings: Settings = app.state.settings

    # 起動時処理
    logger.info(f"🚀 {settings.PROJECT_NAME} を起動しています...")

    database = DatabaseManager.from_settings(settings)
    repository = TaskRepository(database)

    try:
        logger.info("📊 ストレージを初期化中...")
        await repository.initialize()

        logger.info("✅ すべてのサービスが正常に初期化されました")

    except Exception as e:
        logger.error(f"❌ 初期化中にエラーが発生しました: {e}")
        await database.close()
        raise

    app.state.database = database
    app.state.task_service = TaskService(repository)

    yield

    # 終了時処理
    logger.info(f"🛑 {settings.PROJECT_NAME} を終了しています...")

    try:
        await repository.close()

        logger.info("✅ すべてのサービスが正常に終了しました")

    except Exception as e:
        logger.error(f"❌ 終了処理中にエラーが発生しました: {e}")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """セキュリティヘッダーを追加するミドルウェア"""

    def __init__(self, app: ASGIApp, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """リクエストを処理し、セキュリティヘッダーを追加"""
        response = await call_next(request)

        # セキュリティヘッダー設定
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        if self.settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
            response.headers["Content-Security-Policy"] = "default-src 'self'"

        # 開発環境では処理時間を表示
        if self.settings.is_development and hasattr(request.state, "start_time"):
            process_time = time.time() - request.state.start_time
            response.headers["X-Process-Time"] = str(process_time)

        return cast("Response", response)


class ProcessTimeMiddleware(BaseHTTPMiddleware):
    """リクエスト処理時間を測定するミドルウェア（開発環境用）"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request.state.start_time = time.time()

        response = await call_next(request)

        elapsed_ms = (time.time() - request.state.start_time) * 1000
        logger.debug(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)")
        return cast("Response", response)


def create_application(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        description="タスク管理サービスのAPI",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    setup_middleware(app, settings)

    setup_routes(app)

    setup_exception_handlers(app)

    return app


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    app.add_middleware(SecurityHeadersMiddleware, settings=settings)

    if settings.is_development:
        app.add_middleware(ProcessTimeMiddleware)

    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(CORSMiddleware, **settings.get_cors_config())

    logger.info("ミドルウェアの設定が完了しました")


def setup_routes(app: FastAPI) -> None:
    app.include_router(api_router)

    logger.info("ルーティングの設定が完了しました")


def setup_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(TaskTrackerError)
    async def task_tracker_exception_handler(request: Request, exc: TaskTrackerError) -> JSONResponse:
        if exc.status_code >= http_status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.warning(f"{request.method} {request.url.path}: {exc.message}")

        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug(f"リクエスト検証エラー: {exc.errors()}")

        return JSONResponse(
            status_code=http_status.HTTP_400_BAD_REQUEST,
            content={"error": ErrorMessages.INVALID_REQUEST},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"予期しない例外が発生しました: {request.method} {request.url.path}: {exc}", exc_info=True)

        # 内部エラーの詳細はクライアントに返さない
        return JSONResponse(
            status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": ErrorMessages.SERVER_ERROR},
        )

    logger.info("例外ハンドラーの設定が完了しました")


# アプリケーションのインスタンスを作成
app = create_application()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=_settings.HOST,
        port=_settings.PORT,
        reload=_settings.is_development and _settings.DEBUG,
        log_level=_settings.LOG_LEVEL.lower(),
        access_log=True,
    )
