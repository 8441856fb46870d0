"""Languages that validation errors can be rendered in."""

from enum import Enum


class Language(str, Enum):
    """Supported display languages, keyed by ISO 639-1 code."""

    ENGLISH = "en"
    DUTCH = "nl"

    @classmethod
    def parse(cls, value: "str | Language | None") -> "Language | None":
        """Parse a language code or locale tag.

        Accepts plain codes ("nl"), locale tags ("nl-NL", "nl_BE") and
        enum names ("DUTCH"), all case-insensitive.

        Args:
            value: The value to parse.

        Returns:
            The matching Language, or None if the value is not supported.
        """
        if value is None:
            return None
        if isinstance(value, Language):
            return value

        tag = value.strip()
        if not tag:
            return None
        if tag.upper() in cls.__members__:
            return cls[tag.upper()]

        code = tag.replace("_", "-").split("-", 1)[0].lower()
        for language in cls:
            if language.value == code:
                return language
        return None

    @classmethod
    def resolve(
        cls,
        value: "str | Language | None",
        default: "Language | None" = None,
    ) -> "Language":
        """Resolve a value to a supported language.

        Unsupported or missing values fall back to ``default``, which in
        turn defaults to DEFAULT_LANGUAGE. Resolution never fails.

        Args:
            value: Language code, locale tag, Language or None.
            default: Fallback language for unsupported values.

        Returns:
            A supported Language.
        """
        parsed = cls.parse(value)
        if parsed is not None:
            return parsed
        return default if default is not None else DEFAULT_LANGUAGE


# Language used when none is requested or the requested one is unsupported
DEFAULT_LANGUAGE = Language.ENGLISH
