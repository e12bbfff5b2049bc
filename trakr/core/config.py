"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "trakr"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Record store
    storage_backend: Literal["json", "database", "remote"] = "json"
    storage_path: str = "trakr-data.json"
    seed_sample_data: bool = True

    # Database (storage_backend=database)
    database_url: str = "sqlite+aiosqlite:///./trakr.db"
    db_pool_size: int = 5
    db_max_overflow: int = 10

    # Remote REST store (storage_backend=remote)
    remote_store_url: str = "http://localhost:9000/trakr"
    remote_store_auth_token: str | None = None
    remote_store_timeout: float = 5.0
    remote_store_max_retries: int = 3

    # Metrics
    metrics_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
