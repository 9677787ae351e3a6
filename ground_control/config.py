"""Application configuration using Pydantic BaseSettings.

All settings are loaded from environment variables. Logging output settings
live in :mod:`ground_control.logging.config`.

Usage:
    from ground_control.config import get_settings

    settings = get_settings()
    print(settings.log_dropped_reports)
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Attributes:
        log_dropped_reports: Whether reports that cannot be dispatched are logged.
    """

    model_config = SettingsConfigDict(
        env_file=None,
        case_sensitive=False,
        extra="ignore",
        str_strip_whitespace=True,
    )

    # Report handling
    log_dropped_reports: bool = Field(default=True)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Cached Settings instance.
    """
    return Settings()
