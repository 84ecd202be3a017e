"""Application-wide configuration loaded from the environment."""

from __future__ import annotations

from functools import cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:5500",
    "http://localhost:3000",
    "http://localhost:3005",
    "http://127.0.0.1:3005",
    "http://127.0.0.1:5500",
    "http://127.0.0.1:3000",
)


class BackendSettings(BaseSettings):
    """Centralized settings for the shopping-cart API service."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str = "postgresql+psycopg://root@localhost:5432/restful"
    database_pool_size: int = Field(default=5, ge=1)
    api_host: str = "localhost"
    api_port: int = 3005
    cors_allowed_origins: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS)
    )
    docs_title: str = "購物車 API 文檔"
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    @property
    def base_url(self) -> str:
        """Public URL the service listens on."""

        return f"http://{self.api_host}:{self.api_port}"


@cache
def get_settings() -> BackendSettings:
    """Return the cached settings instance."""

    return BackendSettings()


__all__ = ["DEFAULT_ALLOWED_ORIGINS", "BackendSettings", "get_settings"]
