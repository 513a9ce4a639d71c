"""Configuration management using pydantic-settings."""

from .settings import (
    DarkMatterSettings,
    ErrorSettings,
    LoggingSettings,
    clear_settings_cache,
    default_settings,
    get_settings,
    settings_or_default,
)

__all__ = [
    "DarkMatterSettings",
    "ErrorSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "default_settings",
    "get_settings",
    "settings_or_default",
]
