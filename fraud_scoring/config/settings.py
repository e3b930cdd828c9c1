"""
Fraud Scoring Engine - Configuration Settings

Centralized configuration using Pydantic Settings for type-safe
environment variable handling with validation.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..features.statistics import LOCAL_TIMEZONE, validate_timezone


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Example: SCORING_HOUR_TIMEZONE=UTC will set scoring_hour_timezone to "UTC"
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Application Settings
    # =========================================================================
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment"
    )
    app_log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )

    # =========================================================================
    # Scoring Policy
    # =========================================================================
    scoring_policy_path: str | None = Field(
        default=None,
        description="Path to a YAML scoring policy (weights and thresholds)"
    )
    scoring_hour_timezone: str = Field(
        default=LOCAL_TIMEZONE,
        description=(
            "Timezone used to read hour-of-day from timestamps: "
            "'local' (host clock), 'UTC', or an IANA zone name"
        )
    )

    # =========================================================================
    # Velocity Windows
    # =========================================================================
    velocity_window_1h_seconds: int = Field(
        default=3600,
        gt=0,
        description="Short velocity window in seconds"
    )
    velocity_window_24h_seconds: int = Field(
        default=86400,
        gt=0,
        description="Long velocity window in seconds"
    )

    @field_validator("scoring_hour_timezone")
    @classmethod
    def _validate_hour_timezone(cls, v: str) -> str:
        return validate_timezone(v)

    @model_validator(mode="after")
    def _validate_production_timezone(self) -> "Settings":
        """Production deployments must pin the hour-of-day timezone."""
        pinned = self.scoring_hour_timezone.lower() != LOCAL_TIMEZONE
        if self.app_env == "production" and not pinned:
            raise ValueError(
                "Missing required settings for production: SCORING_HOUR_TIMEZONE "
                "(must be pinned, not 'local')"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to avoid re-parsing environment on every call.
    """
    return Settings()


# Singleton settings instance for easy import
settings = get_settings()
