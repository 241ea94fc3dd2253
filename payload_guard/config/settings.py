"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    app_name: str = "payload-guard"
    debug: bool = False  # Expose unexpected exception text in 500 responses
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 3000

    # Session cookie carrying flash messages
    session_secret_key: str = "change-me-in-production"
    session_cookie: str = "payload_guard_session"
    session_max_age: int = 14 * 24 * 60 * 60


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
