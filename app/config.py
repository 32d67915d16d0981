# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.ADMIN_EMAIL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Change ADMIN_PASSWORD and SESSION_SECRET before exposing the site publicly.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_ADMIN_PASSWORD = "admin123"
DEFAULT_SESSION_SECRET = "dev-secret"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Admin Credentials
    # -------------------------------------------------------------------------
    # A single admin account; there is no user table.

    ADMIN_EMAIL: str = Field(
        default="admin@example.com",
        description="Email the admin logs in with"
    )

    ADMIN_PASSWORD: str = Field(
        default=DEFAULT_ADMIN_PASSWORD,
        min_length=1,
        description="Admin password (plain text, compared in constant time)"
    )

    # -------------------------------------------------------------------------
    # Sessions
    # -------------------------------------------------------------------------

    SESSION_SECRET: str = Field(
        default=DEFAULT_SESSION_SECRET,
        min_length=1,
        description="Secret used to sign the session cookie"
    )

    SESSION_MAX_AGE_HOURS: int = Field(
        default=8,
        ge=1,
        le=24 * 30,
        description="Lifetime of an admin session"
    )

    SESSION_COOKIE_NAME: str = Field(
        default="portfolio_session",
        description="Name of the cookie carrying the session token"
    )

    # -------------------------------------------------------------------------
    # Storage
    # -------------------------------------------------------------------------

    DATABASE_PATH: str = Field(
        default="data.sqlite",
        description="SQLite database file holding messages and posts"
    )

    LOCAL_CMS_PATH: str = Field(
        default="local_cms.json",
        description="Key-value file used by the local CMS workspace"
    )

    # -------------------------------------------------------------------------
    # Site
    # -------------------------------------------------------------------------

    SITE_OWNER: str = Field(
        default="Yusuf",
        description="Name shown in page titles, header and footer"
    )

    SITE_TAGLINE: str = Field(
        default="Programmer",
        description="Short role shown next to the owner's name"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )

    API_PORT: int = Field(
        default=4000,
        ge=1,
        le=65535,
        description="Port for the server"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Don't fail if .env doesn't exist (useful for production where
        # env vars are set directly)
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def session_max_age_seconds(self) -> int:
        """Session lifetime in seconds (cookie max-age and store expiry)."""
        return self.SESSION_MAX_AGE_HOURS * 60 * 60

    @property
    def uses_default_credentials(self) -> bool:
        """True while the shipped development password or secret is in use."""
        return (
            self.ADMIN_PASSWORD == DEFAULT_ADMIN_PASSWORD
            or self.SESSION_SECRET == DEFAULT_SESSION_SECRET
        )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
