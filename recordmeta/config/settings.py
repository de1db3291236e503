"""
Application Settings - Pydantic Settings for configuration management.

Supports environment variables and .env file loading.
"""

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import BeforeValidator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def normalize_to_lowercase(v: str) -> str:
    """Normalize string to lowercase."""
    if isinstance(v, str):
        return v.lower()
    return v


def normalize_to_uppercase(v: str) -> str:
    """Normalize string to uppercase."""
    if isinstance(v, str):
        return v.upper()
    return v


class LifecycleSettings(BaseSettings):
    """Lifecycle metadata behaviour settings."""

    model_config = SettingsConfigDict(env_prefix="LIFECYCLE_")

    use_utc: bool = Field(
        default=True,
        description="Capture timestamps in UTC (False uses the local timezone)",
    )
    id_field: str = Field(
        default="_id",
        min_length=1,
        description="Document key the record identifier is stored under",
    )


class ObservabilitySettings(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="OBSERVABILITY_")

    log_format: Annotated[
        Literal["json", "console"],
        BeforeValidator(normalize_to_lowercase),
    ] = Field(
        default="json", description="Log format (json for production, console for development)"
    )
    service_name: str = Field(default="recordmeta", description="Service name attached to log events")


class Settings(BaseSettings):
    """Main application settings aggregating all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="recordmeta", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Deployment environment"
    )
    log_level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR"],
        BeforeValidator(normalize_to_uppercase),
    ] = Field(default="INFO", description="Logging level")

    # Sub-settings
    lifecycle: LifecycleSettings = Field(default_factory=LifecycleSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
