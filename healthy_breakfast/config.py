"""Application configuration."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Environment-driven settings for the menu backend."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_ignore_empty=True
    )

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"

    menu_store: Optional[Literal["memory", "database"]] = None
    menu_table: str = "menu_items"
    menu_api_url: str = "/api/menu"
    menu_service_url: str = "http://localhost:8080"

    database_url: Optional[str] = None
    db_host: Optional[str] = None
    db_port: int = 5432
    db_user: Optional[str] = None
    db_password: Optional[str] = None
    db_name: Optional[str] = None
    db_connect_timeout_seconds: float = 5.0

    @property
    def resolved_database_url(self) -> str | None:
        """Return the database URL, assembling it from ``DB_*`` when needed."""

        if self.database_url:
            return self.database_url
        if not self.db_host:
            return None
        url = URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)

    @property
    def resolved_menu_store(self) -> str:
        """Return which store backs the menu endpoint."""

        if self.menu_store is not None:
            return self.menu_store
        return "database" if self.resolved_database_url else "memory"


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()


settings = get_settings()
