"""Pytest configuration for all tests."""

import os
from collections.abc import Generator

import pytest
import structlog

from password_validation.core.config import get_settings
from password_validation.core.context import set_current_language


@pytest.fixture(autouse=True)
def _isolated_settings() -> Generator[None, None, None]:
    """Give every test fresh settings, ambient language and logging config.

    Environment variables with the PASSWORD_VALIDATION_ prefix from the
    developer's shell are removed so tests always start from the defaults.
    """
    saved = {key: value for key, value in os.environ.items() if key.startswith("PASSWORD_VALIDATION_")}
    for key in saved:
        del os.environ[key]
    get_settings.cache_clear()
    set_current_language(None)

    yield

    os.environ.update(saved)
    get_settings.cache_clear()
    set_current_language(None)
    structlog.reset_defaults()
