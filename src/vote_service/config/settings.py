"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages


class DatabaseSettings(BaseModel):
    """Database configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str = Field(
        default="sqlite:///data/votes.db",
        validation_alias=AliasChoices("url", "database_url", "db_url"),
    )
    busy_timeout_ms: int = Field(
        default=5000,
        ge=1000,
        le=30000,
        validation_alias=AliasChoices("busy_timeout_ms", "busy_timeout"),
    )
    connection_timeout_s: int = Field(
        default=10,
        ge=1,
        le=60,
        validation_alias=AliasChoices("connection_timeout_s", "connection_timeout"),
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate database URL format."""
        if v != ":memory:" and not v.startswith("sqlite://"):
            raise ValueError(ErrorMessages.INVALID_DATABASE_URL)
        return v


class DocumentValidatorSettings(BaseModel):
    """Remote document validation service configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    base_url: str = Field(
        default="https://user-info.herokuapp.com",
        validation_alias=AliasChoices("base_url", "url", "document_validator_url"),
    )
    timeout_s: float = Field(
        default=5.0,
        gt=0.0,
        le=60.0,
        validation_alias=AliasChoices("timeout_s", "timeout"),
    )
    max_attempts: int = Field(default=2, ge=1, le=5)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the service URL scheme and drop a trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(ErrorMessages.INVALID_VALIDATOR_URL)
        return v.rstrip("/")


class VotingSettings(BaseModel):
    """Voting configuration."""

    model_config = ConfigDict(frozen=True)

    default_session_minutes: int = Field(default=1, ge=1, le=10_080)


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - DATABASE__URL, DATABASE__BUSY_TIMEOUT_MS, ... (nested with ``__``)
    - DOCUMENT_VALIDATOR__BASE_URL, DOCUMENT_VALIDATOR__MAX_ATTEMPTS, ...
    - VOTING__DEFAULT_SESSION_MINUTES
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    document_validator: DocumentValidatorSettings = Field(
        default_factory=DocumentValidatorSettings
    )
    voting: VotingSettings = Field(default_factory=VotingSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels)
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
