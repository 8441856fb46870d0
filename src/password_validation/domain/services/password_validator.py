"""Password validation service.

A PasswordValidator wraps a single rule: a callable that takes the password
and returns True, or raises a PasswordValidationError describing the first
requirement it violates. The built-in presets are ordinary validators
assembled from the checks in this module.

Default policy:
- Minimum 8 characters
- Maximum 64 characters
- At least one uppercase letter
- At least one lowercase letter
- At least one digit
- At least one special character
"""

from collections.abc import Callable
from typing import Any, Literal

import regex

from password_validation.domain.entities.password_errors import (
    InvalidRuleResultError,
    MissingDigitError,
    MissingLowercaseError,
    MissingSpecialCharacterError,
    MissingUppercaseError,
    PasswordValidationError,
    TooLongError,
    TooShortError,
)

PasswordRule = Callable[[str], bool]

# Characters accepted by the special character requirement
SPECIAL_CHARACTERS = frozenset("!&^%$#@()/")

# Extended grapheme cluster
GRAPHEME_PATTERN = regex.compile(r"\X")


def password_length(password: str) -> int:
    """Count user-perceived characters in a password.

    Characters are extended grapheme clusters, so a letter with combining
    accents or an emoji with a skin tone modifier counts once.

    Examples:
        >>> password_length("e\\u0301t\\u00e9")
        3
        >>> password_length("\\U0001F44D\\U0001F3FD")
        1
    """
    return len(GRAPHEME_PATTERN.findall(password))


def _has_char_between(password: str, first: str, last: str) -> bool:
    return any(first <= char <= last for char in password)


def min_length(length: int) -> PasswordRule:
    """Build a check requiring at least ``length`` characters."""

    def check(password: str) -> bool:
        if password_length(password) < length:
            raise TooShortError(min_length=length)
        return True

    return check


def max_length(length: int) -> PasswordRule:
    """Build a check allowing at most ``length`` characters."""

    def check(password: str) -> bool:
        if password_length(password) > length:
            raise TooLongError(max_length=length)
        return True

    return check


def require_uppercase(password: str) -> bool:
    """Require at least one ASCII uppercase letter (A-Z)."""
    if not _has_char_between(password, "A", "Z"):
        raise MissingUppercaseError()
    return True


def require_lowercase(password: str) -> bool:
    """Require at least one ASCII lowercase letter (a-z)."""
    if not _has_char_between(password, "a", "z"):
        raise MissingLowercaseError()
    return True


def require_digit(password: str) -> bool:
    """Require at least one ASCII digit (0-9)."""
    if not _has_char_between(password, "0", "9"):
        raise MissingDigitError()
    return True


def require_special_character(password: str) -> bool:
    """Require at least one character from SPECIAL_CHARACTERS."""
    if SPECIAL_CHARACTERS.isdisjoint(password):
        raise MissingSpecialCharacterError()
    return True


class PasswordValidator:
    """Validates passwords against a single rule.

    The rule is any callable taking the password and returning True, or
    raising a PasswordValidationError for the first violated requirement.
    Custom rules may call other validators and add checks on top:

        def no_dictionary_word(password: str) -> bool:
            default_password_validator.validate(password)
            if "password" in password.lower():
                raise MissingSpecialCharacterError()
            return True

        validator = PasswordValidator(no_dictionary_word)

    Validators are immutable and safe to share between threads.
    """

    __slots__ = ("_rule", "_name")

    def __init__(self, rule: PasswordRule, name: str | None = None) -> None:
        """Initialize the password validator.

        Args:
            rule: Callable implementing the validation rule.
            name: Optional name used in the repr.
        """
        if not callable(rule):
            raise TypeError(f"Password rule must be callable, got {type(rule).__name__}")
        object.__setattr__(self, "_rule", rule)
        object.__setattr__(self, "_name", name or getattr(rule, "__name__", "custom"))

    @classmethod
    def from_checks(cls, *checks: PasswordRule, name: str | None = None) -> "PasswordValidator":
        """Build a validator that runs checks in order.

        Evaluation stops at the first check that raises, so the reported
        error is always the earliest violated requirement.

        Args:
            *checks: Checks to run, in order.
            name: Optional name used in the repr.

        Returns:
            A validator chaining the checks.
        """
        chain = tuple(checks)

        def rule(password: str) -> bool:
            for check in chain:
                _ensure_passed(check(password))
            return True

        return cls(rule, name=name or "chain")

    @property
    def name(self) -> str:
        """Human-readable name of this validator."""
        return self._name

    def validate(self, password: str) -> Literal[True]:
        """Validate a password.

        Args:
            password: The password to validate.

        Returns:
            True if the password satisfies the rule.

        Raises:
            PasswordValidationError: For the first requirement the password violates.
            InvalidRuleResultError: If the rule returns anything other than True.
        """
        return _ensure_passed(self._rule(password))

    def __call__(self, password: str) -> Literal[True]:
        return self.validate(password)

    def is_valid(self, password: str) -> bool:
        """Check if a password is valid.

        Args:
            password: The password to validate.

        Returns:
            True if password meets all requirements, False otherwise.
        """
        try:
            self.validate(password)
        except PasswordValidationError:
            return False
        return True

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"PasswordValidator(name={self._name!r})"


def _ensure_passed(result: Any) -> Literal[True]:
    if result is not True:
        raise InvalidRuleResultError(result)
    return True


# Lenient validator for tests and development
simple_password_validator = PasswordValidator.from_checks(min_length(4), name="simple")

# Default validator instance
default_password_validator = PasswordValidator.from_checks(
    min_length(8),
    max_length(64),
    require_uppercase,
    require_lowercase,
    require_digit,
    require_special_character,
    name="default",
)
