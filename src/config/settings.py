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

    # Upstream services
    proxy_base_url: str = "https://api.thedataproxy.com/v2/proxy"
    api_base_url: str = "https://api.thedataproxy.com"

    # Transport settings
    request_timeout_seconds: float = 30.0  # Applies to connect, read, write and pool

    # Activation settings
    password_min_length: int = 8
    login_path: str = "/login"  # Where the user goes after activation


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
