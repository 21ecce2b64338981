"""Environment-based client settings. Read-only; no business logic."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Log level name")

    # Search engine
    es_server: str = Field(default="http://localhost:9200", description="Search engine base URL")
    es_timeout: int = Field(default=30, ge=1, description="Request timeout (seconds)")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Use for process lifetime."""
    return Settings()
