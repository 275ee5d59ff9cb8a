"""Application settings loaded from the environment and an optional ``.env`` file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    environment: str = "dev"
    database_url: str = "sqlite:///./tracker.db"
    db_auto_create: bool = True

    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    log_level: str = "INFO"

    # Empty disables the bearer-token guard on the API routers.
    local_auth_token: str = ""

    # Recompute also rewrites project status (100% -> Completed, otherwise In Progress).
    derive_project_status: bool = True


settings = Settings()
