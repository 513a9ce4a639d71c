"""Foundation: configuration and logging shared by every dark-matter module."""

from .config import DarkMatterSettings, clear_settings_cache, get_settings
from .logging import configure_logging, get_logger

__all__ = [
    "DarkMatterSettings",
    "clear_settings_cache",
    "configure_logging",
    "get_logger",
    "get_settings",
]
