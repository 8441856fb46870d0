"""Selection of the active password validator.

Applications ask for the validator once, at wiring time, and pass it to the
components that need it:

    signup = SignupService(password_validator=get_password_validator())

The testing environment gets the lenient ``simple`` preset and every other
environment the ``default`` preset, unless a preset is configured explicitly.
A scoped override (see ``override_password_validator``) takes precedence.
"""

from types import MappingProxyType

from password_validation.core.config import Settings, get_settings
from password_validation.core.context import get_validator_override
from password_validation.core.logging import get_logger
from password_validation.domain.entities.password_errors import UnknownPresetError
from password_validation.domain.services.password_validator import (
    PasswordValidator,
    default_password_validator,
    simple_password_validator,
)

logger = get_logger(__name__)

PRESETS: MappingProxyType[str, PasswordValidator] = MappingProxyType(
    {
        "default": default_password_validator,
        "simple": simple_password_validator,
    }
)


def get_preset(name: str) -> PasswordValidator:
    """Look up a preset validator by name.

    Args:
        name: Preset name ('default' or 'simple').

    Returns:
        The preset validator.

    Raises:
        UnknownPresetError: If no preset has that name.
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownPresetError(name, sorted(PRESETS)) from None


def get_password_validator(settings: Settings | None = None) -> PasswordValidator:
    """Get the password validator for the current context.

    Args:
        settings: Optional settings instance. If not provided, will load from environment.

    Returns:
        The scoped override if one is active, otherwise the configured preset.
    """
    override = get_validator_override()
    if override is not None:
        logger.debug("Using overridden password validator", validator=override.name)
        return override

    if settings is None:
        settings = get_settings()

    preset = settings.preset_name
    logger.debug(
        "Resolved password validator",
        preset=preset,
        environment=settings.environment,
    )
    return get_preset(preset)
