# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.SLACK_CHANNEL_ID)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Missing or invalid values raise ConfigurationError at import time, so the
# server never starts accepting applications without a notification channel.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """
    Raised when required environment variables are missing or invalid.

    Attributes:
        variables: Names of the offending environment variables
    """

    def __init__(self, variables: list[str]):
        self.variables = variables
        super().__init__(
            f"Missing or invalid environment variables: {', '.join(variables)}"
        )


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Slack Configuration
    # -------------------------------------------------------------------------
    # The bot token is required - app won't start without it

    SLACK_BOT_TOKEN: str = Field(
        ...,
        min_length=1,
        description="Slack bot token used to post application notifications"
    )

    SLACK_CHANNEL_ID: str = Field(
        default="#hiring",
        description="Channel that receives new application notifications"
    )

    SLACK_API_URL: str = Field(
        default="https://slack.com/api/chat.postMessage",
        description="Slack Web API endpoint for posting messages"
    )

    SLACK_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for the outbound Slack request"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "production", "test"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://jobs.enerlab.com" -> ["http://localhost:3000", "https://jobs.enerlab.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


def load_settings(**overrides) -> Settings:
    """
    Build a Settings instance, translating validation failures.

    Args:
        **overrides: Explicit values that take precedence over the environment

    Returns:
        Settings: Validated settings

    Raises:
        ConfigurationError: Listing every missing or invalid variable
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        variables = []
        for error in e.errors():
            name = ".".join(str(part) for part in error["loc"])
            if name not in variables:
                variables.append(name)
        raise ConfigurationError(variables) from e


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.
    """
    return load_settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
