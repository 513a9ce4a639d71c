"""Library logging setup.

Modules log through ``logging.getLogger("darkmatter.<module>")``. Nothing is
emitted unless the application configures logging, either itself or through
``configure_logging``:

    >>> from darkmatter.foundation.logging import configure_logging
    >>> configure_logging()  # level from DARKMATTER_LOG_LEVEL / DARKMATTER_DEBUG
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from .config import get_settings, settings_or_default

if TYPE_CHECKING:
    from .config import DarkMatterSettings

ROOT_LOGGER = "darkmatter"

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Logger namespaced under ``darkmatter``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def failure_logging_enabled() -> bool:
    """Whether caught exceptions and short-circuits should be logged."""
    return settings_or_default().logging.log_failures


def configure_logging(settings: DarkMatterSettings | None = None, *, stream: TextIO | None = None) -> logging.Logger:
    """Apply the configured level to the ``darkmatter`` logger.

    Attaches one stream handler the first time it is called; later calls only
    update the level.
    """
    settings = settings or get_settings()
    log = logging.getLogger(ROOT_LOGGER)
    log.setLevel(settings.effective_log_level)
    if not log.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        log.addHandler(handler)
    return log
