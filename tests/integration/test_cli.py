import os
from unittest.mock import patch

from click.testing import CliRunner

from password_validation.cli import cli


def test_check_valid_password():
    """Verify a strong password is accepted with exit code 0."""
    runner = CliRunner()

    result = runner.invoke(cli, ["check", "MySecurePass123!"])

    assert result.exit_code == 0
    assert "Password is valid." in result.output


def test_check_invalid_password():
    """Verify a rejected password prints the reason and exits with 1."""
    runner = CliRunner()

    result = runner.invoke(cli, ["check", "password123!"])

    assert result.exit_code == 1
    assert "Error: Password must contain at least one uppercase letter." in result.output


def test_check_in_dutch():
    """Verify --language renders the message in Dutch."""
    runner = CliRunner()

    result = runner.invoke(cli, ["check", "Pass1!", "--language", "nl"])

    assert result.exit_code == 1
    assert "Wachtwoord moet minstens 8 tekens lang zijn." in result.output


def test_check_with_simple_preset():
    """Verify --preset simple only checks the length."""
    runner = CliRunner()

    assert runner.invoke(cli, ["check", "test", "--preset", "simple"]).exit_code == 0

    result = runner.invoke(cli, ["check", "abc", "--preset", "simple"])
    assert result.exit_code == 1
    assert "at least 4 characters" in result.output


def test_check_uses_configured_environment():
    """Verify the testing environment selects the simple preset."""
    runner = CliRunner()

    with patch.dict(os.environ, {"PASSWORD_VALIDATION_ENVIRONMENT": "testing"}):
        result = runner.invoke(cli, ["check", "test"])

    assert result.exit_code == 0


def test_check_prompts_for_password():
    """Verify the password is prompted for when not given."""
    runner = CliRunner()

    result = runner.invoke(cli, ["check"], input="MySecurePass123!\n")

    assert result.exit_code == 0
    assert "Password is valid." in result.output
    assert "MySecurePass123!" not in result.output


def test_check_rejects_unknown_preset():
    """Verify an unknown preset is a usage error."""
    runner = CliRunner()

    result = runner.invoke(cli, ["check", "MySecurePass123!", "--preset", "strict"])

    assert result.exit_code == 2


def test_info_shows_configuration():
    """Verify info prints the active preset and language."""
    runner = CliRunner()

    with patch.dict(os.environ, {
        "PASSWORD_VALIDATION_ENVIRONMENT": "testing",
        "PASSWORD_VALIDATION_LANGUAGE": "nl",
    }):
        result = runner.invoke(cli, ["info"])

    assert result.exit_code == 0
    assert "Environment:  testing" in result.output
    assert "Preset:       simple" in result.output
    assert "Language:     nl" in result.output


def test_check_keeps_logs_out_of_default_output():
    """Verify check does not print log lines at the default log level."""
    runner = CliRunner()

    result = runner.invoke(cli, ["check", "MySecurePass123!"])

    assert result.exit_code == 0
    assert result.output == "Password is valid.\n"


def test_check_debug_logs_carry_validator_context():
    """Verify debug logs include the validator and language bound for the check."""
    runner = CliRunner()

    with patch.dict(os.environ, {
        "PASSWORD_VALIDATION_LOG_LEVEL": "DEBUG",
        "PASSWORD_VALIDATION_LOG_FORMAT": "console",
    }):
        result = runner.invoke(cli, ["check", "password123!", "--language", "nl"])

    assert result.exit_code == 1
    assert "Password rejected" in result.output
    assert "password_no_uppercase" in result.output
    assert "validator" in result.output
    assert "default" in result.output
