"""Application configuration."""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Client settings loaded from environment."""

    # API
    api_url: str = "http://localhost:3000/api"
    request_timeout: float = 30.0

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # Tables and filters
    rows_per_page: int = 10
    search_debounce_seconds: float = 0.5

    # Requirement identification jobs
    job_poll_interval: float = 2.0
    job_poll_timeout: float = 600.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
