"""Domain services for password validation.

Services contain the validation rules and error rendering.
They have no dependencies on infrastructure or external frameworks.
"""

from password_validation.domain.services.dependencies import (
    PRESETS,
    get_password_validator,
    get_preset,
)
from password_validation.domain.services.error_messages import (
    DEFAULT_MESSAGES,
    MessageCatalog,
    default_catalog,
    describe,
)
from password_validation.domain.services.password_validator import (
    SPECIAL_CHARACTERS,
    PasswordRule,
    PasswordValidator,
    default_password_validator,
    max_length,
    min_length,
    password_length,
    require_digit,
    require_lowercase,
    require_special_character,
    require_uppercase,
    simple_password_validator,
)

__all__ = [
    "DEFAULT_MESSAGES",
    "MessageCatalog",
    "PRESETS",
    "PasswordRule",
    "PasswordValidator",
    "SPECIAL_CHARACTERS",
    "default_catalog",
    "default_password_validator",
    "describe",
    "get_password_validator",
    "get_preset",
    "max_length",
    "min_length",
    "password_length",
    "require_digit",
    "require_lowercase",
    "require_special_character",
    "require_uppercase",
    "simple_password_validator",
]
