"""
Configuration settings for the AutoCare Service Tracker.
Uses Pydantic for type-safe configuration management.
"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "AutoCare Service Tracker"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database
    database_url: str = "sqlite:///./autocare.db"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8080"]

    # API
    api_v1_prefix: str = "/api/v1"

    # Service progress
    default_technician: str = "Service Technician"
    # Some screens stamped completed_date when a task went in-progress too
    stamp_date_on_in_progress: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="AUTOCARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
