"""Password validation errors.

The set of validation failures is closed: every rule maps its failure onto
one of the PasswordValidationError subclasses below. Each error knows its
machine-readable code and the parameters needed to render a message.
"""

from enum import Enum
from typing import Any, ClassVar

from password_validation.domain.entities.language import Language


class PasswordErrorCode(str, Enum):
    """Machine-readable codes for password validation failures."""

    TOO_SHORT = "password_too_short"
    TOO_LONG = "password_too_long"
    MISSING_UPPERCASE = "password_no_uppercase"
    MISSING_LOWERCASE = "password_no_lowercase"
    MISSING_DIGIT = "password_no_digit"
    MISSING_SPECIAL_CHARACTER = "password_no_special"


class PasswordValidationError(Exception):
    """Base class for password validation failures.

    Subclasses are compared structurally: two errors are equal when they
    are of the same class and carry the same parameters.

    Attributes:
        code: Machine-readable error code.
        field: Name of the validated field (always 'password').
    """

    code: ClassVar[PasswordErrorCode]
    field: ClassVar[str] = "password"

    def __init__(self) -> None:
        super().__init__(self.code.value, *self.params.values())

    @property
    def params(self) -> dict[str, Any]:
        """Parameters used to render the error message."""
        return {}

    def describe(self, language: str | Language | None = None) -> str:
        """Render a human-readable description of this error.

        Args:
            language: Target language. Defaults to the ambient language.

        Returns:
            The localized message.
        """
        from password_validation.domain.services.error_messages import describe

        return describe(self, language)

    def to_dict(self, language: str | Language | None = None) -> dict[str, str]:
        """Serialize the error as a field/code/message mapping."""
        return {
            "field": self.field,
            "code": self.code.value,
            "message": self.describe(language),
        }

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        args = ", ".join(f"{key}={value!r}" for key, value in self.params.items())
        return f"{type(self).__name__}({args})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PasswordValidationError):
            return NotImplemented
        return type(self) is type(other) and self.params == other.params

    def __hash__(self) -> int:
        return hash((type(self), tuple(self.params.items())))

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), tuple(self.params.values()))


class TooShortError(PasswordValidationError):
    """The password is shorter than the required minimum length."""

    code = PasswordErrorCode.TOO_SHORT

    def __init__(self, min_length: int) -> None:
        self.min_length = min_length
        super().__init__()

    @property
    def params(self) -> dict[str, Any]:
        return {"min_length": self.min_length}


class TooLongError(PasswordValidationError):
    """The password exceeds the maximum allowed length."""

    code = PasswordErrorCode.TOO_LONG

    def __init__(self, max_length: int) -> None:
        self.max_length = max_length
        super().__init__()

    @property
    def params(self) -> dict[str, Any]:
        return {"max_length": self.max_length}


class MissingUppercaseError(PasswordValidationError):
    """The password contains no uppercase ASCII letter."""

    code = PasswordErrorCode.MISSING_UPPERCASE


class MissingLowercaseError(PasswordValidationError):
    """The password contains no lowercase ASCII letter."""

    code = PasswordErrorCode.MISSING_LOWERCASE


class MissingDigitError(PasswordValidationError):
    """The password contains no ASCII digit."""

    code = PasswordErrorCode.MISSING_DIGIT


class MissingSpecialCharacterError(PasswordValidationError):
    """The password contains no special character."""

    code = PasswordErrorCode.MISSING_SPECIAL_CHARACTER


class PasswordValidationConfigError(Exception):
    """Base class for misconfiguration of the validation component."""


class UnknownPresetError(PasswordValidationConfigError, ValueError):
    """Raised when a validator preset name is not recognized."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown password validator preset '{name}'. "
            f"Available presets: {', '.join(available)}"
        )


class IncompleteCatalogError(PasswordValidationConfigError, ValueError):
    """Raised when a message catalog lacks a message for some error or language."""

    def __init__(self, missing: list[tuple[PasswordErrorCode, Language]]) -> None:
        self.missing = missing
        pairs = ", ".join(f"{code.value}/{language.value}" for code, language in missing)
        super().__init__(f"Message catalog is missing translations: {pairs}")


class InvalidTemplateError(PasswordValidationConfigError, ValueError):
    """Raised when a message template cannot be filled with its error's parameters."""

    def __init__(self, invalid: list[tuple[PasswordErrorCode, Language, str]]) -> None:
        self.invalid = invalid
        templates = ", ".join(
            f"{code.value}/{language.value}: {template!r}" for code, language, template in invalid
        )
        super().__init__(f"Message catalog has templates that cannot be rendered: {templates}")


class InvalidRuleResultError(TypeError):
    """Raised when a rule returns something other than True.

    Rules signal failure by raising a PasswordValidationError; any other
    return value means the rule itself is broken.
    """

    def __init__(self, result: Any) -> None:
        self.result = result
        super().__init__(
            "Password rules must return True or raise PasswordValidationError, "
            f"got {result!r}"
        )
