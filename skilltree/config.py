"""
Application configuration using pydantic-settings.
Loads from environment variables with .env file support.

Gating thresholds (70% unlock, 100% mastery, 3 problems per topic) are fixed
constants of the engine, not settings.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Checkpoint judge (external AI service)
    judge_url: str = ""
    judge_timeout_seconds: float = 30.0

    # Application
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # API Settings
    api_v1_prefix: str = "/api/v1"
    project_name: str = "Skill Tree Gating Service"
    version: str = "1.0.0"

    # Origins allowed by CORS in addition to the local dev servers
    cors_origins: list[str] = []


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
