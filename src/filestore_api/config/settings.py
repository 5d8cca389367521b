# src/filestore_api/config/settings.py
import logging
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_STORAGE_BACKENDS = ["local"]
VALID_LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """
    Single source of truth for all application settings.

    Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file (if exists)
    3. Default values in this class (lowest priority)

    Usage:
        from filestore_api.config.settings import get_settings
        settings = get_settings()
        storage_dir = settings.storage_dir
    """

    # Application Settings
    app_name: str = Field(
        default="filestore-api",
        description="Application name"
    )

    # Storage Configuration
    storage_backend: str = Field(
        default="local",
        description="Storage backend used for files: local"
    )

    storage_dir: str = Field(
        default="storage",
        description="Root directory holding the managed files"
    )

    # Server
    host: str = Field(
        default="0.0.0.0",
        description="Host the API binds to when served from the CLI"
    )

    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port the API binds to when served from the CLI"
    )

    cors_allow_origins: List[str] = Field(
        default=["http://localhost:3000"],
        description="Origins allowed by the CORS middleware"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    @field_validator("storage_backend", mode="before")
    @classmethod
    def validate_storage_backend(cls, v):
        """Validate the storage backend is one of the supported values."""
        v = str(v).lower()
        if v not in VALID_STORAGE_BACKENDS:
            raise ValueError(f"Invalid storage_backend: {v}. Must be one of {VALID_STORAGE_BACKENDS}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        """Normalize and validate the logging level name."""
        v = str(v).upper()
        if v not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one Settings instance per process.
    """
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the API process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
