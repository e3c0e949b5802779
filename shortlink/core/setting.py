"""
Configuration Settings

This module defines application configuration using Pydantic Settings.
All configuration is loaded from environment variables or .env file;
the command line entry point (python -m shortlink) can override any of them.

Design Decisions:
- Uses pydantic-settings for type-safe configuration
- Defaults match a local, single-process deployment behind a reverse proxy
- The storage file is only read at startup, but written on every new slug
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "settings"]


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Public Configuration
    SERVER_NAME: str = Field(
        default="http://localhost",
        description="Public name of the service, including protocol and optionally port"
    )
    SECRET: str = Field(
        default="changeme",
        description="Shared secret that must be submitted to create a new short URL"
    )

    # Slug Configuration
    # 62^5 allows for roughly 900,000,000 links
    SLUG_LENGTH: int = Field(
        default=5,
        ge=1,
        description="Number of characters (a-zA-Z0-9) in generated slugs"
    )
    SLUG_MAX_ATTEMPTS: int = Field(
        default=100_000,
        ge=1,
        description="Random candidates tried before giving up on finding an unused slug"
    )

    # Server Configuration
    HOST: str = Field(
        default="localhost",
        description="Host to listen for connections"
    )
    PORT: int = Field(
        default=9997,
        description="Port to listen for connections"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    # Storage Configuration
    STORAGE_FILE: str = Field(
        default=".shortlink.urls",
        description="File storing all shortened URLs, one '<slug> <url>' per line"
    )


settings = Settings()
