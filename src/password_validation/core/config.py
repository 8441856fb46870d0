"""Configuration management for password validation.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once and is
immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from password_validation.domain.entities.language import Language


class Settings(BaseSettings):
    """Password validation settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PASSWORD_VALIDATION_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application Settings
    app_name: str = "password-validation"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"

    # Validation Settings
    password_validator: Literal["default", "simple"] | None = Field(
        default=None,
        description="Preset to use; derived from the environment when unset",
    )
    language: Language = Field(
        default=Language.ENGLISH,
        description="Language used to render validation errors",
    )

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("language", mode="before")
    @classmethod
    def parse_language(cls, v: str | Language | None) -> Language:
        """Accept language codes and locale tags such as 'nl_NL'."""
        return Language.resolve(v)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"

    @property
    def preset_name(self) -> Literal["default", "simple"]:
        """Name of the active preset.

        An explicit ``password_validator`` wins. Otherwise the testing
        environment gets the lenient ``simple`` preset and every other
        environment gets ``default``.
        """
        if self.password_validator is not None:
            return self.password_validator
        return "simple" if self.is_testing else "default"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call. Settings are loaded once at startup.

    Returns:
        Settings: Application settings instance.
    """
    return Settings()
