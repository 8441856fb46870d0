"""Unit tests for language parsing."""

from password_validation.domain.entities import DEFAULT_LANGUAGE, Language


class TestLanguageParse:
    """Parsing language codes and locale tags."""

    def test_plain_codes(self):
        """Test ISO codes map to languages."""
        assert Language.parse("en") is Language.ENGLISH
        assert Language.parse("nl") is Language.DUTCH

    def test_locale_tags(self):
        """Test region suffixes are ignored."""
        assert Language.parse("nl-NL") is Language.DUTCH
        assert Language.parse("nl_BE") is Language.DUTCH
        assert Language.parse("en-US") is Language.ENGLISH

    def test_case_insensitive(self):
        """Test codes and names are case-insensitive."""
        assert Language.parse("NL") is Language.DUTCH
        assert Language.parse("dutch") is Language.DUTCH

    def test_language_passthrough(self):
        """Test Language members are returned as-is."""
        assert Language.parse(Language.DUTCH) is Language.DUTCH

    def test_unsupported(self):
        """Test unsupported values parse to None."""
        assert Language.parse("fr") is None
        assert Language.parse("") is None
        assert Language.parse(None) is None


class TestLanguageResolve:
    """Resolving with fallback."""

    def test_default_language_is_english(self):
        """Test English is the designated fallback."""
        assert DEFAULT_LANGUAGE is Language.ENGLISH

    def test_resolve_supported(self):
        """Test supported values resolve normally."""
        assert Language.resolve("nl") is Language.DUTCH

    def test_resolve_unsupported_falls_back(self):
        """Test unsupported values fall back to the default language."""
        assert Language.resolve("de") is Language.ENGLISH
        assert Language.resolve(None) is Language.ENGLISH

    def test_resolve_custom_fallback(self):
        """Test an explicit fallback is honored."""
        assert Language.resolve("de", default=Language.DUTCH) is Language.DUTCH
