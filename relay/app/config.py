"""
Configuration module for the Mint Factory relay.

This module uses Pydantic Settings to load and validate environment variables
for the listen address, the API key gate, and the downstream deploy service.

Environment variables are loaded from .env file or system environment. The
resulting Settings object is frozen: it is built once at process start and
handed to the application factory.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    # =========================================================================
    # Server Configuration
    # =========================================================================

    HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the relay server",
    )

    PORT: int = Field(
        default=3000,
        description="Port to bind the relay server",
        ge=1,
        le=65535,
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # =========================================================================
    # API Key Gate
    # =========================================================================

    API_KEY: Optional[str] = Field(
        None,
        description="Shared secret expected in the x-api-key header (unset rejects every gated request)",
    )

    # =========================================================================
    # Deploy Service Configuration
    # =========================================================================

    DEPLOY_SERVICE_URL: HttpUrl = Field(
        default="http://localhost:7890",
        description="Base URL of the local mint factory deploy service",
    )

    REQUEST_TIMEOUT_SECONDS: float = Field(
        default=90.0,
        description="Timeout for the round trip to the deploy service",
        gt=0,
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    @property
    def deploy_service_url_str(self) -> str:
        """
        Get deploy service URL as string (for HTTP client usage).

        Returns:
            Deploy service URL without trailing slash.
        """
        return str(self.DEPLOY_SERVICE_URL).rstrip("/")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

        v = v.upper()
        if v not in allowed_levels:
            raise ValueError(
                f"LOG_LEVEL must be one of {allowed_levels}, got: {v}"
            )

        return v


@lru_cache()
def get_settings() -> Settings:
    """
    Get or create a singleton Settings instance.

    Called once at process entry; the result is passed to create_app()
    rather than being re-read by request handlers.

    Returns:
        Settings instance with all configuration loaded and validated.

    Raises:
        ValidationError: If an environment variable is present but invalid.
    """
    return Settings()
