"""
Centralized configuration for the Sanctuary client and portal.

All settings are loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Sanctuary Portal"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Portal server
    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Church REST backend
    api_base_url: str = "http://localhost:5000/api"
    request_timeout: float = 30.0  # seconds

    # Durable session storage
    token_store_path: Path = Path.home() / ".sanctuary" / "session.json"

    # Calendar export
    default_event_duration_hours: int = 2
    calendar_timezone: Optional[str] = None  # IANA name; None uses the local zone


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
