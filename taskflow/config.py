"""
Unified configuration for the TaskFlow service.

This module uses Pydantic Settings for type-safe configuration management
with support for .env files and environment variable overrides. Every
setting can be overridden with a TASKFLOW_-prefixed environment variable,
e.g. TASKFLOW_PORT=9000 or TASKFLOW_SEED_SAMPLE_DATA=false.
"""
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")


class Settings(BaseSettings):
    """Application settings for TaskFlow.
    
    Defaults are provided for development convenience.
    """

    model_config = SettingsConfigDict(
        env_prefix="TASKFLOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============================================================================
    # Server Configuration
    # ============================================================================
    host: str = "0.0.0.0"
    port: int = 8004

    # ============================================================================
    # Logging Configuration
    # ============================================================================
    log_level: str = "INFO"
    log_format: str = "json"

    # ============================================================================
    # Storage Configuration
    # ============================================================================
    seed_sample_data: bool = True

    # ============================================================================
    # Environment Configuration
    # ============================================================================
    environment: str = "development"
    debug: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        fmt = str(v).lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return fmt


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
