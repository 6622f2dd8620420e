"""Application configuration via environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Password rule
    PASSWORD_MIN_LENGTH: int = Field(default=8, ge=1)

    # Known-bad addresses (JSON list when set through the environment)
    EMAIL_DENYLIST: list[str] = ["bart@simsom.com"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
