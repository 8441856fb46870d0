"""Domain entities for password validation.

Entities are plain Python types that represent core concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from password_validation.domain.entities.language import DEFAULT_LANGUAGE, Language
from password_validation.domain.entities.password_errors import (
    IncompleteCatalogError,
    InvalidRuleResultError,
    InvalidTemplateError,
    MissingDigitError,
    MissingLowercaseError,
    MissingSpecialCharacterError,
    MissingUppercaseError,
    PasswordErrorCode,
    PasswordValidationConfigError,
    PasswordValidationError,
    TooLongError,
    TooShortError,
    UnknownPresetError,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "IncompleteCatalogError",
    "InvalidRuleResultError",
    "InvalidTemplateError",
    "Language",
    "MissingDigitError",
    "MissingLowercaseError",
    "MissingSpecialCharacterError",
    "MissingUppercaseError",
    "PasswordErrorCode",
    "PasswordValidationConfigError",
    "PasswordValidationError",
    "TooLongError",
    "TooShortError",
    "UnknownPresetError",
]
