"""Environment-based configuration using pydantic-settings.

Example:
    >>> from darkmatter.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.errors.include_stack
    True
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # DARKMATTER_ERROR_INCLUDE_STACK=false
    # DARKMATTER_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt, ValidationError, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError


class ErrorSettings(BaseSettings):
    """Error normalization configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DARKMATTER_ERROR_",
        extra="ignore",
    )

    include_stack: bool = Field(default=True, description="Prefer the traceback over the message in formatted errors")
    stack_limit: PositiveInt | None = Field(default=None, description="Max traceback frames to format")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DARKMATTER_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_failures: bool = Field(default=True, description="Log caught exceptions and short-circuits at DEBUG")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class DarkMatterSettings(BaseSettings):
    """Root settings for dark-matter.

    Example environment variables:
        DARKMATTER_DEBUG=true
        DARKMATTER_ERROR_STACK_LIMIT=5
        DARKMATTER_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="DARKMATTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    errors: ErrorSettings = Field(default_factory=ErrorSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> DarkMatterSettings:
    """Get the global settings instance (cached)."""
    return DarkMatterSettings()


def default_settings() -> DarkMatterSettings:
    """Built-in defaults, without reading the environment."""
    return DarkMatterSettings.model_construct(
        errors=ErrorSettings.model_construct(),
        logging=LoggingSettings.model_construct(),
    )


@lru_cache(maxsize=1)
def settings_or_default() -> DarkMatterSettings:
    """Settings for code paths that must not raise.

    An invalid ``DARKMATTER_*`` variable logs a warning and falls back to
    ``default_settings()`` instead of raising.
    """
    try:
        return get_settings()
    except (ValidationError, SettingsError) as e:
        logging.getLogger("darkmatter.config").warning("Invalid settings, using defaults: %s", e)
        return default_settings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next ``get_settings()`` rereads the environment."""
    get_settings.cache_clear()
    settings_or_default.cache_clear()
