"""アプリケーション設定管理モジュール

Pydantic V2 BaseSettingsを使用した設定システムを提供
"""

from typing import Annotated, Any, ClassVar

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from app.core.constants import DatabaseConstants, ServerConstants


class Settings(BaseSettings):
    """アプリケーション設定

    Pydantic V2を使用して環境変数から設定を読み込む（設定は自動的に検証・型チェックされる）
    """

    # =============================================================================
    # Pydantic V2 設定
    # =============================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        validate_assignment=True,
    )

    # =============================================================================
    # アプリケーション設定
    # =============================================================================
    PROJECT_NAME: str = "Task Tracker API"
    PROJECT_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # =============================================================================
    # データベース設定
    # =============================================================================
    DATABASE_URL: str = Field(default=DatabaseConstants.DEFAULT_DATABASE_URL)
    DB_ECHO: bool = Field(default=False)

    # =============================================================================
    # サーバー設定
    # =============================================================================
    HOST: str = Field(default=ServerConstants.DEFAULT_HOST)
    PORT: int = Field(default=ServerConstants.DEFAULT_PORT)

    # =============================================================================
    # CORS設定
    # =============================================================================
    BACKEND_CORS_ORIGINS: Annotated[list[str], NoDecode] = []

    # =============================================================================
    # ログレベル設定
    # =============================================================================
    VALID_LOG_LEVELS: ClassVar[list[str]] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    VALID_ENVIRONMENTS: ClassVar[list[str]] = ["development", "testing", "production"]

    # =============================================================================
    # バリデーター（Pydantic V2）
    # =============================================================================

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in cls.VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of: {', '.join(cls.VALID_LOG_LEVELS)}")
        return v.upper()

    @field_validator("ENVIRONMENT", mode="before")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        if v.lower() not in cls.VALID_ENVIRONMENTS:
            raise ValueError(f"ENVIRONMENT must be one of: {', '.join(cls.VALID_ENVIRONMENTS)}")
        return v.lower()

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL is required")
        return v.strip()

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not (ServerConstants.PORT_MIN <= v <= ServerConstants.PORT_MAX):
            raise ValueError(f"PORT must be between {ServerConstants.PORT_MIN} and {ServerConstants.PORT_MAX}")
        return v

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: str | list[str] | None) -> list[str]:
        """CORS originをカンマ区切り文字列またはリストから解析"""
        if isinstance(v, str) and v:
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        elif isinstance(v, list):
            return v
        return []

    # =============================================================================
    # 計算プロパティ（Pydantic V2）
    # =============================================================================

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_development(self) -> bool:
        """開発環境で実行中かチェック"""
        return self.ENVIRONMENT == "development"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """本番環境で実行中かチェック"""
        return self.ENVIRONMENT == "production"

    # =============================================================================
    # ヘルパーメソッド
    # =============================================================================

    def get_database_config(self) -> dict[str, Any]:
        return {
            "url": self.DATABASE_URL,
            "echo": self.DB_ECHO,
        }

    def get_cors_config(self) -> dict[str, Any]:
        return {
            "allow_origins": self.BACKEND_CORS_ORIGINS,
            "allow_credentials": True,
            "allow_methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            "allow_headers": ["*"],
        }


# =============================================================================
# グローバル設定インスタンス（シングルトン）
# =============================================================================

_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """シングルトンパターンで設定インスタンスを取得"""
    global _settings_instance

    if _settings_instance is None:
        _settings_instance = Settings()

    return _settings_instance


def reset_settings() -> None:
    """シングルトンインスタンスをリセット（主にテスト用）"""
    global _settings_instance
    _settings_instance = None
