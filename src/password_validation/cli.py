"""Command-line interface for password validation.

This module provides commands to check a password against the configured
rules and to inspect the active configuration.
"""

from typing import NoReturn

import click

from password_validation.core.config import get_settings
from password_validation.core.logging import LoggingContext, configure_logging, get_logger
from password_validation.domain.entities import Language, PasswordValidationError
from password_validation.domain.services import get_password_validator, get_preset


@click.group()
@click.version_option(version="0.1.0", prog_name="password-validation")
def cli() -> None:
    """password-validation - check passwords against composable rules."""


@cli.command()
@click.argument("password", required=False)
@click.option(
    "--preset",
    type=click.Choice(["default", "simple"]),
    default=None,
    help="Validator preset to use (overrides config)",
)
@click.option(
    "--language",
    type=str,
    default=None,
    help="Language for error messages, e.g. 'en' or 'nl' (overrides config)",
)
def check(password: str | None, preset: str | None, language: str | None) -> None:
    """Check a password against the validation rules.

    Prompts for the password with hidden input when it is not given.
    Exits with status 1 when the password is rejected.
    """
    settings = get_settings()
    configure_logging(settings)
    logger = get_logger(__name__)

    validator = get_preset(preset) if preset else get_password_validator(settings)
    target_language = Language.resolve(language, default=settings.language)

    if password is None:
        password = click.prompt("Password", hide_input=True)

    with LoggingContext(validator=validator.name, language=target_language.value):
        try:
            validator.validate(password)
        except PasswordValidationError as e:
            click.echo(f"Error: {e.describe(target_language)}", err=True)
            logger.debug("Password rejected", code=e.code.value)
            raise SystemExit(1)

        click.echo("Password is valid.")
        logger.debug("Password accepted")


@cli.command()
def info() -> None:
    """Display password validation configuration."""
    settings = get_settings()

    click.echo(f"""
{settings.app_name} v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Preset:       {settings.preset_name}
  Language:     {settings.language.value}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `password-validation` command is run
    or when using `python -m password_validation`.
    """
    cli()
