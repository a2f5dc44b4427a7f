"""
Application Configuration Module

This module uses Pydantic Settings for type-safe configuration management.

WHY Pydantic Settings?
======================
1. Type Safety: All configuration values are validated against their types
2. Environment Variables: Automatically loads from environment variables
3. .env Support: Can load from .env files for local development
4. Validation: Catches configuration errors at startup, not runtime

PATTERN: Settings Singleton
===========================
A single Settings instance is cached using @lru_cache, so configuration
is loaded once and every part of the app sees the same values.

Usage:
    from catalog.config import get_settings

    settings = get_settings()
    print(settings.app_name)
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic Settings automatically:
    1. Reads from environment variables (case-insensitive)
    2. Falls back to .env file if env var not found
    3. Validates types and raises errors for invalid values
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="Book Catalog API",
        description="Application name displayed in docs and logs"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (detailed errors, auto-reload)"
    )
    api_version: str = Field(
        default="1.0.0",
        description="API version shown in the OpenAPI document"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )
    port: int = Field(
        default=8080,
        description="Port to bind the server to"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        description="Comma-separated list of allowed CORS origins"
    )

    # -------------------------------------------------------------------------
    # Catalog Settings
    # -------------------------------------------------------------------------
    seed_sample_data: bool = Field(
        default=True,
        description="Pre-populate the in-memory store with the sample books"
    )
    stream_interval_seconds: float = Field(
        default=1.0,
        gt=0,
        description="Seconds between two events of the /books/stream endpoint"
    )

    # -------------------------------------------------------------------------
    # Rate Limiting Settings
    # -------------------------------------------------------------------------
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable per-client rate limiting"
    )
    rate_limit_default: str = Field(
        default="100/minute",
        description="Limit applied to read endpoints"
    )
    rate_limit_write: str = Field(
        default="30/minute",
        description="Limit applied to create, update and delete endpoints"
    )
    rate_limit_storage_uri: str = Field(
        default="memory://",
        description="Storage backend for rate limit counters"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that log_level is a valid Python logging level.

        Args:
            v: The value to validate

        Returns:
            The validated value (uppercase)

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        valid_envs = {"development", "staging", "production"}
        if v.lower() not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return v.lower()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    The first call creates the Settings instance (reading .env and the
    environment); later calls return the cached instance.

    Returns:
        Cached Settings instance
    """
    return Settings()
