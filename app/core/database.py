"""データベース接続管理モジュール

SQLAlchemy 2.x + aiosqliteを使用した接続の管理、
非同期セッション、テーブル作成、ヘルスチェック機能を提供
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.core.constants import DatabaseConstants

logger = logging.getLogger(__name__)


class DatabaseConnectionError(Exception):
    """データベース接続関連のエラー"""

    pass


class DatabaseManager:
    """データベース接続を管理するクラス

    SQLAlchemy 2.x準拠の非同期エンジンとセッション管理を提供
    インスタンスは起動時に明示的に生成し、リポジトリへ渡す
    """

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self._url = url
        self._echo = echo
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatabaseManager":
        """設定からインスタンスを生成"""
        return cls(**settings.get_database_config())

    @property
    def is_sqlite(self) -> bool:
        return self._url.startswith(DatabaseConstants.SQLITE_URL_PREFIX)

    @property
    def is_memory(self) -> bool:
        return self.is_sqlite and any(marker in self._url for marker in DatabaseConstants.MEMORY_MARKERS)

    def create_engine(self) -> AsyncEngine:
        """非同期SQLAlchemyエンジンを作成"""
        if self._engine is not None:
            return self._engine

        engine_kwargs: dict[str, Any] = {"echo": self._echo}

        if self.is_sqlite:
            # 複数リクエストから同一ハンドルを共有するため
            engine_kwargs["connect_args"] = {"check_same_thread": False}

        # インメモリSQLiteは接続ごとに別DBになるため単一接続を共有
        if self.is_memory:
            engine_kwargs["poolclass"] = StaticPool

        try:
            self._engine = create_async_engine(self._url, **engine_kwargs)
            logger.info(f"データベースエンジンが作成されました: {self._engine.url.render_as_string(hide_password=True)}")
            return self._engine

        except Exception as e:
            logger.error(f"データベースエンジンの作成に失敗しました: {e}")
            raise

    def create_session_factory(self) -> async_sessionmaker[AsyncSession]:
        """非同期セッションファクトリーを作成"""
        if self._session_factory is not None:
            return self._session_factory

        engine = self.create_engine()

        self._session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,  # コミット後もオブジェクトを使用可能
            autoflush=True,
        )

        logger.info("データベースセッションファクトリーが作成されました")
        return self._session_factory

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession]:
        """データベースセッションを取得

        Yields:
            非同期データベースセッション（例外時はロールバック）

        Example:
            async with database_manager.session() as session:
                result = await session.execute(stmt)
        """
        if self._session_factory is None:
            raise DatabaseConnectionError("セッションファクトリが初期化されていません")

        async with self._session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def check_connection(self) -> bool:
        """データベース接続の健全性をチェック

        Returns:
            接続が正常な場合True、それ以外False
        """
        try:
            engine = self.create_engine()

            async with engine.connect() as conn:
                result = await conn.execute(text("SELECT 1"))
                result.scalar()

            logger.debug("データベース接続チェック: 正常")
            return True

        except SQLAlchemyError as e:
            logger.error(f"データベース接続チェック失敗: {e}")
            return False
        except Exception as e:
            logger.error(f"データベース接続チェック中に予期しないエラー: {e}")
            return False

    async def create_tables(self) -> None:
        """すべてのテーブルを作成（既存テーブルはそのまま）"""
        from app.models.base import Base

        engine = self.create_engine()
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("テーブルの作成を確認しました")

    async def close(self) -> None:
        """データベースエンジンとセッションを終了

        アプリケーション終了時に呼び出す
        """
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("データベースエンジンを閉じました")
            self._engine = None
            self._session_factory = None

    @property
    def is_connected(self) -> bool:
        """エンジンが作成済みかどうかを確認"""
        return self._engine is not None

    async def health_check(self) -> dict[str, Any]:
        """データベースのヘルスチェックを実行

        Returns:
            ヘルスチェック結果を含む辞書
        """
        if not self.is_connected:
            return {"status": "unhealthy", "database": "not_initialized"}

        is_connected = await self.check_connection()

        if is_connected:
            return {
                "status": "healthy",
                "database": "connected",
                "backend": "sqlite" if self.is_sqlite else "external",
            }
        else:
            return {
                "status": "unhealthy",
                "database": "disconnected",
            }
