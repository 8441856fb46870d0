"""Entry point for 'python -m password_validation' command."""

from password_validation.cli import main

if __name__ == "__main__":
    main()
