"""password-validation - composable password rules with localized errors.

Pick a preset or build a custom validator, call it with a password and
catch PasswordValidationError to report the first violated requirement.
"""

__version__ = "0.1.0"

from password_validation.core.context import override_password_validator, use_language
from password_validation.domain.entities import (
    Language,
    MissingDigitError,
    MissingLowercaseError,
    MissingSpecialCharacterError,
    MissingUppercaseError,
    PasswordErrorCode,
    PasswordValidationError,
    TooLongError,
    TooShortError,
)
from password_validation.domain.services import (
    MessageCatalog,
    PasswordValidator,
    default_password_validator,
    describe,
    get_password_validator,
    simple_password_validator,
)

__all__ = [
    "Language",
    "MessageCatalog",
    "MissingDigitError",
    "MissingLowercaseError",
    "MissingSpecialCharacterError",
    "MissingUppercaseError",
    "PasswordErrorCode",
    "PasswordValidationError",
    "PasswordValidator",
    "TooLongError",
    "TooShortError",
    "__version__",
    "default_password_validator",
    "describe",
    "get_password_validator",
    "override_password_validator",
    "simple_password_validator",
    "use_language",
]
