"""Ambient context management using ContextVars.

This module stores the language errors are rendered in and an optional
validator override for the current thread or task, so callers deep inside
an application can render and validate without explicit parameter passing.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Optional

from pydantic import ValidationError

from password_validation.core.config import get_settings
from password_validation.domain.entities.language import DEFAULT_LANGUAGE, Language

if TYPE_CHECKING:
    from password_validation.domain.services.password_validator import PasswordValidator

# Language override for the current context; None means "use settings"
_current_language: ContextVar[Optional[Language]] = ContextVar(
    "current_language", default=None
)

# Validator override for the current context; None means "use settings"
_current_validator: ContextVar[Optional["PasswordValidator"]] = ContextVar(
    "current_password_validator", default=None
)


def get_current_language() -> Language:
    """Get the ambient language.

    Returns:
        The language set for the current context, or the configured
        default language if none is set. Falls back to DEFAULT_LANGUAGE
        when the settings cannot be loaded.
    """
    language = _current_language.get()
    if language is not None:
        return language
    try:
        return get_settings().language
    except ValidationError:
        return DEFAULT_LANGUAGE


def set_current_language(language: str | Language | None) -> None:
    """Set the ambient language for the current context.

    Args:
        language: Language or code to set. None restores the configured default.
    """
    _current_language.set(Language.resolve(language) if language is not None else None)


@contextmanager
def use_language(language: str | Language) -> Iterator[Language]:
    """Render errors in the given language within a scope.

    Example:
        with use_language("nl"):
            str(error)  # Dutch description
    """
    resolved = Language.resolve(language)
    token = _current_language.set(resolved)
    try:
        yield resolved
    finally:
        _current_language.reset(token)


def get_validator_override() -> Optional["PasswordValidator"]:
    """Get the validator override for the current context, if any."""
    return _current_validator.get()


@contextmanager
def override_password_validator(validator: "PasswordValidator") -> Iterator["PasswordValidator"]:
    """Replace the active password validator within a scope.

    Example:
        with override_password_validator(simple_password_validator):
            service = SignupService(get_password_validator())
    """
    token = _current_validator.set(validator)
    try:
        yield validator
    finally:
        _current_validator.reset(token)
