"""CLI error handling for dealease-cli.

This module wraps demo engine exceptions into user-friendly messages
with appropriate exit codes.
"""

from __future__ import annotations

from typing import NoReturn

import click
from pydantic import ValidationError as PydanticValidationError

from dealease_cli.output import error, info
from dealease_demo.errors import DemoError, MalformedPayloadError, PersistenceFailureError
from dealease_demo.store import format_validation_problems

# Exit codes following sysexits.h convention
EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1  # User error (bad tier, wrong state, malformed file)
EXIT_SYSTEM_ERROR = 2  # System error (storage unavailable, unreadable file)

# Show at most this many individual validation problems
MAX_PROBLEMS_SHOWN = 10


class CLIError(click.ClickException):
    """CLI-specific exception with exit code support.

    Attributes:
        message: User-facing error message.
        exit_code: Exit code for the CLI (default: 1).
    """

    def __init__(self, message: str, exit_code: int = EXIT_USER_ERROR) -> None:
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: object = None) -> None:
        """Display the error message using Rich formatting.

        Args:
            file: Output file (unused, for Click compatibility).
        """
        error(self.format_message())


def _list_problems(problems: list[str]) -> None:
    for problem in problems[:MAX_PROBLEMS_SHOWN]:
        info(f"  - {problem}")
    if len(problems) > MAX_PROBLEMS_SHOWN:
        info(f"  ... and {len(problems) - MAX_PROBLEMS_SHOWN} more")


def handle_demo_error(err: DemoError) -> NoReturn:
    """Translate an engine error into a CLIError.

    Storage failures exit with EXIT_SYSTEM_ERROR; everything else is a
    user error. Validation problems of malformed payloads are listed.

    Raises:
        CLIError: Always.
    """
    if isinstance(err, MalformedPayloadError):
        _list_problems(err.problems)

    exit_code = EXIT_SYSTEM_ERROR if isinstance(err, PersistenceFailureError) else EXIT_USER_ERROR
    raise CLIError(err.user_message, exit_code=exit_code) from err


def handle_config_error(err: PydanticValidationError) -> NoReturn:
    """Translate an invalid DEALEASE_DEMO_* environment into a CLIError.

    Raises:
        CLIError: Always, with EXIT_USER_ERROR.
    """
    _list_problems(format_validation_problems(err))
    raise CLIError(
        "Invalid configuration in DEALEASE_DEMO_* environment",
        exit_code=EXIT_USER_ERROR,
    ) from err


def handle_file_not_found(file_path: str) -> NoReturn:
    """Handle file not found errors.

    Raises:
        CLIError: Always raises with formatted error message.
    """
    raise CLIError(f"File not found: {file_path}", exit_code=EXIT_SYSTEM_ERROR)


def handle_permission_error(path: str, operation: str = "access") -> NoReturn:
    """Handle permission errors.

    Raises:
        CLIError: Always raises with formatted error message.
    """
    raise CLIError(
        f"Permission denied: Cannot {operation} {path}",
        exit_code=EXIT_SYSTEM_ERROR,
    )
