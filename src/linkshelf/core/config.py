"""Configuration management for Linkshelf.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once and is
immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LINKSHELF_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "Linkshelf"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"
    api_prefix: str = "/api/v1"

    # Database Settings
    database_url: str = "sqlite+aiosqlite:///./ls_data/linkshelf.db"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 30
    db_pool_recycle: int = 3600
    db_echo: bool = False
    db_sqlite_foreign_keys: bool = True

    # Security Settings
    secret_key: str = Field(
        default="change-me-in-production-use-openssl-rand-hex-32",
        description="Secret key for JWT token signing",
    )
    access_token_expire_minutes: int = 60

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Asset Storage Settings
    storage_provider: Literal["local", "s3"] = "local"
    storage_path: str = "./ls_data/files"
    archive_dir: str = "archives"
    preview_dir: str = "archives/preview"

    s3_bucket: str | None = None
    s3_region: str = "us-east-1"
    s3_access_key_id: str | None = None
    s3_secret_access_key: str | None = None
    s3_endpoint_url: str | None = None
    s3_prefix: str = ""

    # Search Index Settings
    # Empty search_url disables the search index entirely.
    search_url: str = ""
    search_api_key: str = ""
    search_index: str = "links"
    search_timeout_seconds: float = 10.0

    @field_validator("archive_dir", "preview_dir", "s3_prefix")
    @classmethod
    def strip_slashes(cls, v: str) -> str:
        """Normalize path prefixes so they can be joined with '/'."""
        return v.strip("/")

    @field_validator("search_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"

    @property
    def search_enabled(self) -> bool:
        return bool(self.search_url)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call. Settings are loaded once at startup.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
