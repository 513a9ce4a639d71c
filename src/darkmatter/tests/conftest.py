from __future__ import annotations

import logging

import pytest

from darkmatter.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reread DARKMATTER_* variables for every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def darkmatter_logger():
    """Restore the library logger's handlers and level after the test."""
    log = logging.getLogger("darkmatter")
    handlers, level = list(log.handlers), log.level
    yield log
    log.handlers[:] = handlers
    log.setLevel(level)
