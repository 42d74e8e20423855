"""
Configuration Utility - Environment Variables Management

Centralized configuration loading from .env files using pydantic-settings.
Type-safe access to all environment variables with validation.

Usage:
    from pricing_worker.utils.config import settings

    queue_name = settings.EVENTS_QUEUE
    redis_url = settings.redis_url
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Redis Configuration
    REDIS_URL: str = Field(default="redis://localhost:6379/0")
    REDIS_HOST: str | None = Field(default=None)
    REDIS_MAX_CONNECTIONS: int = Field(default=10)

    # Queue Configuration
    EVENTS_QUEUE: str = Field(default="events_queue")
    POP_TIMEOUT_SECONDS: int = Field(default=5, ge=1)
    PUSH_MAX_RETRIES: int = Field(default=3, ge=1)

    # Supervisor Configuration
    WORKER_COUNT: int = Field(default=8, ge=1)
    OUTPUT_DIR: str = Field(default="output")
    REPORT_PREFIX: str = Field(default="python")

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="json")

    # Application Metadata
    APP_NAME: str = Field(default="pricing-worker")
    APP_VERSION: str = Field(default="0.1.0")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    @property
    def redis_url(self) -> str:
        """Effective Redis URL; a bare REDIS_HOST wins over REDIS_URL."""
        if self.REDIS_HOST:
            return f"redis://{self.REDIS_HOST}/"
        return self.REDIS_URL


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Singleton Settings instance
    """
    return Settings()


# Global settings instance
settings = get_settings()
