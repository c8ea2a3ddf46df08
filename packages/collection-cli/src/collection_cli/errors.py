"""CLI error handling for collection-cli.

Wraps collection-core exceptions into click exceptions carrying the
right exit code and prints them to stderr.
"""

from __future__ import annotations

from typing import NoReturn

import click

from collection_cli.output import error
from collection_core.errors import CollectionError, InvalidArgumentError, IOFailureError

# Exit codes following sysexits.h convention
EXIT_USER_ERROR = 1  # Validation failure, stale artifact
EXIT_SYSTEM_ERROR = 2  # Usage error, unreadable or unwritable file


class CLIError(click.ClickException):
    """CLI-specific exception with exit code support.

    Attributes:
        message: User-facing error message.
        exit_code: Exit code for the CLI (default: 1).
    """

    def __init__(self, message: str, exit_code: int = EXIT_USER_ERROR) -> None:
        """Initialize CLIError.

        Args:
            message: User-facing error message.
            exit_code: Exit code for the CLI.
        """
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: object = None) -> None:
        """Display the error message on stderr using Rich formatting.

        Args:
            file: Output file (unused, for Click compatibility).
        """
        error(self.format_message())


def exit_code_for(err: CollectionError) -> int:
    """Map a collection error to a CLI exit code."""
    if isinstance(err, (IOFailureError, InvalidArgumentError)):
        return EXIT_SYSTEM_ERROR
    return EXIT_USER_ERROR


def handle_collection_error(err: CollectionError) -> NoReturn:
    """Re-raise a collection error as a CLIError.

    Raises:
        CLIError: Always raises with the error's user message.
    """
    raise CLIError(err.user_message, exit_code=exit_code_for(err)) from err
