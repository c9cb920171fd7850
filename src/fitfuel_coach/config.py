"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: str = "file"
    storage_path: str = ".fitfuel/state.json"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    profile_key: str = "default"
    analysis_delay_seconds: float = 1.5
    random_seed: int | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
