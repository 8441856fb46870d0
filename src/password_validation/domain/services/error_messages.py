"""Localized descriptions of password validation errors.

Every error code has a message template for every supported language.
Templates are formatted with the error's parameters, e.g. ``{min_length}``.
Requests for an unsupported language fall back to DEFAULT_LANGUAGE.
"""

from collections.abc import Mapping

from password_validation.core.context import get_current_language
from password_validation.core.logging import get_logger
from password_validation.domain.entities.language import DEFAULT_LANGUAGE, Language
from password_validation.domain.entities.password_errors import (
    IncompleteCatalogError,
    InvalidTemplateError,
    PasswordErrorCode,
    PasswordValidationError,
)

logger = get_logger(__name__)

MessageTemplates = Mapping[PasswordErrorCode, Mapping[Language, str]]

# Sample parameters each error code is rendered with
SAMPLE_PARAMS: Mapping[PasswordErrorCode, Mapping[str, int]] = {
    PasswordErrorCode.TOO_SHORT: {"min_length": 8},
    PasswordErrorCode.TOO_LONG: {"max_length": 64},
    PasswordErrorCode.MISSING_UPPERCASE: {},
    PasswordErrorCode.MISSING_LOWERCASE: {},
    PasswordErrorCode.MISSING_DIGIT: {},
    PasswordErrorCode.MISSING_SPECIAL_CHARACTER: {},
}

DEFAULT_MESSAGES: MessageTemplates = {
    PasswordErrorCode.TOO_SHORT: {
        Language.ENGLISH: "Password must be at least {min_length} characters long.",
        Language.DUTCH: "Wachtwoord moet minstens {min_length} tekens lang zijn.",
    },
    PasswordErrorCode.TOO_LONG: {
        Language.ENGLISH: "Password must be no more than {max_length} characters long.",
        Language.DUTCH: "Wachtwoord mag maximaal {max_length} tekens lang zijn.",
    },
    PasswordErrorCode.MISSING_UPPERCASE: {
        Language.ENGLISH: "Password must contain at least one uppercase letter.",
        Language.DUTCH: "Wachtwoord moet minstens één hoofdletter bevatten.",
    },
    PasswordErrorCode.MISSING_LOWERCASE: {
        Language.ENGLISH: "Password must contain at least one lowercase letter.",
        Language.DUTCH: "Wachtwoord moet minstens één kleine letter bevatten.",
    },
    PasswordErrorCode.MISSING_DIGIT: {
        Language.ENGLISH: "Password must contain at least one digit.",
        Language.DUTCH: "Wachtwoord moet minstens één cijfer bevatten.",
    },
    PasswordErrorCode.MISSING_SPECIAL_CHARACTER: {
        Language.ENGLISH: (
            "Password must contain at least one special character (e.g., !&^%$#@()/)."
        ),
        Language.DUTCH: (
            "Wachtwoord moet minstens één speciaal teken bevatten (bijv. !&^%$#@()/)."
        ),
    },
}


class MessageCatalog:
    """Lookup table from (error code, language) to message template.

    The catalog is checked for completeness on construction: every error
    code needs a non-empty template for every language the catalog serves,
    and every template must format with that error's parameters.
    """

    def __init__(
        self,
        templates: MessageTemplates,
        languages: tuple[Language, ...] | None = None,
        fallback: Language = DEFAULT_LANGUAGE,
    ) -> None:
        """Initialize the catalog.

        Args:
            templates: Message templates per error code and language.
            languages: Languages the catalog must cover. Defaults to all
                supported languages.
            fallback: Language used for unsupported requests. Must be
                one of ``languages``.

        Raises:
            IncompleteCatalogError: If a template is missing or empty.
            InvalidTemplateError: If a template uses placeholders its error
                does not provide.
        """
        self.languages = tuple(languages) if languages is not None else tuple(Language)
        if fallback not in self.languages:
            raise IncompleteCatalogError([(code, fallback) for code in PasswordErrorCode])
        self.fallback = fallback
        self._templates = {code: dict(templates.get(code, {})) for code in PasswordErrorCode}

        missing = [
            (code, language)
            for code in PasswordErrorCode
            for language in self.languages
            if not self._templates[code].get(language)
        ]
        if missing:
            raise IncompleteCatalogError(missing)

        invalid = [
            (code, language, self._templates[code][language])
            for code in PasswordErrorCode
            for language in self.languages
            if not _renders(self._templates[code][language], SAMPLE_PARAMS[code])
        ]
        if invalid:
            raise InvalidTemplateError(invalid)

    def resolve_language(self, language: str | Language | None) -> Language:
        """Map a requested language onto one this catalog serves."""
        parsed = Language.parse(language)
        if parsed is None or parsed not in self.languages:
            if language is not None:
                logger.debug(
                    "Unsupported language requested, using fallback",
                    requested=str(language),
                    fallback=self.fallback.value,
                )
            return self.fallback
        return parsed

    def template(self, code: PasswordErrorCode, language: str | Language | None) -> str:
        """Get the raw message template for an error code."""
        return self._templates[code][self.resolve_language(language)]

    def render(self, error: PasswordValidationError, language: str | Language | None) -> str:
        """Render an error in the given language.

        Args:
            error: The validation error.
            language: Target language; unsupported values use the fallback.

        Returns:
            The formatted message.
        """
        return self.template(error.code, language).format(**error.params)


def _renders(template: str, params: Mapping[str, int]) -> bool:
    try:
        template.format(**params)
    except (KeyError, IndexError, ValueError, AttributeError):
        return False
    return True


default_catalog = MessageCatalog(DEFAULT_MESSAGES)


def describe(
    error: PasswordValidationError,
    language: str | Language | None = None,
    catalog: MessageCatalog | None = None,
) -> str:
    """Describe a validation error in a human-readable way.

    Args:
        error: The validation error to describe.
        language: Target language. Defaults to the ambient language.
        catalog: Message catalog to use. Defaults to the built-in catalog.

    Returns:
        The localized message.
    """
    if language is None:
        language = get_current_language()
    return (catalog or default_catalog).render(error, language)
