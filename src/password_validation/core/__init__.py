"""Core password validation utilities.

This module exports configuration, logging and ambient context helpers.
"""

from password_validation.core.config import Settings, get_settings
from password_validation.core.context import (
    get_current_language,
    get_validator_override,
    override_password_validator,
    set_current_language,
    use_language,
)
from password_validation.core.logging import (
    LoggingContext,
    configure_logging,
    get_logger,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "get_current_language",
    "set_current_language",
    "use_language",
    "get_validator_override",
    "override_password_validator",
]
