"""
CLI Error Handling Utilities

Maps any exception reaching a command to an exit code, logs it and prints
the single user-visible message chosen by ``to_error_view``.
"""

from __future__ import annotations

import functools
import logging
import sys
from typing import Any, Callable, TypeVar

from moodflix.cli.common.context import get_cli_context
from moodflix.cli.json_formatter import encode_envelope, write_envelope
from moodflix.shared.constants import CLIDefaults, CLIMessages
from moodflix.shared.error_handling import to_error_view
from moodflix.shared.errors import (
    ApplicationError,
    InfrastructureError,
    MoodflixError,
    ValidationError,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., int])

EXIT_INTERRUPTED = 130


def exit_code_for(error: BaseException) -> int:
    """Return the process exit code for an error."""
    if isinstance(error, KeyboardInterrupt):
        return EXIT_INTERRUPTED
    if isinstance(error, ValidationError):
        return CLIDefaults.EXIT_VALIDATION_ERROR
    if isinstance(error, InfrastructureError):
        return CLIDefaults.EXIT_SERVICE_ERROR
    return CLIDefaults.EXIT_ERROR


def handle_cli_error(
    error: BaseException,
    command: str,
    *,
    json_output: bool = False,
) -> int:
    """Handle CLI errors with consistent formatting and logging.

    Args:
        error: The exception that occurred
        command: The CLI command being executed
        json_output: Whether to output JSON format

    Returns:
        Exit code for the CLI command
    """
    exit_code = exit_code_for(error)
    error_context: dict[str, Any] = {
        "command": command,
        "error_type": type(error).__name__,
        "exit_code": exit_code,
    }

    if isinstance(error, KeyboardInterrupt):
        logger.warning("Command interrupted: %s", command, extra={"context": error_context})
        message = CLIMessages.INTERRUPTED
        code = None
        hint = None
    else:
        view = to_error_view(error)
        message, code, hint = view.message, view.code, view.hint
        if isinstance(error, (ApplicationError, InfrastructureError)) or not isinstance(
            error, MoodflixError
        ):
            logger.error(
                "CLI error in %s: %s",
                command,
                message,
                extra={"context": error_context},
            )
        else:
            logger.info("%s rejected: %s", command, message, extra={"context": error_context})

    if json_output:
        write_envelope(
            encode_envelope(
                command,
                success=False,
                errors=[message],
                data={
                    "error_code": code,
                    "error_type": type(error).__name__,
                    "exit_code": exit_code,
                    "hint": hint,
                },
            )
        )
    else:
        sys.stderr.write(f"Error: {message}\n")
        if hint:
            sys.stderr.write(f"{hint}\n")

    return exit_code


def handle_cli_errors(command: str) -> Callable[[F], F]:
    """Decorator routing every exception of a handler through ``handle_cli_error``.

    Example:
        >>> @handle_cli_errors("health")
        ... def handle_health_command() -> int:
        ...     return 0
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> int:
            try:
                return func(*args, **kwargs)
            except (Exception, KeyboardInterrupt) as e:  # noqa: BLE001
                return handle_cli_error(
                    e,
                    command,
                    json_output=get_cli_context().is_json_output_enabled(),
                )

        return wrapper  # type: ignore[return-value]

    return decorator
