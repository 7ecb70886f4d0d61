"""
Structured logging for Moodflix.

This module provides helpers that record operation start/success/failure
with context information attached as `extra` fields, a rich console handler
for humans and a JSON formatter for log files.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from moodflix.shared.constants import LogConfig, LogContextKeys
from moodflix.shared.errors import ErrorContext, MoodflixError


class StructuredFormatter(logging.Formatter):
    """Formatter that renders log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created,
                tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in (
            LogContextKeys.ERROR_CODE,
            LogContextKeys.CONTEXT,
            LogContextKeys.OPERATION,
            LogContextKeys.DURATION_MS,
            LogContextKeys.RESULT_INFO,
        ):
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def _create_rich_console() -> Console:
    """Create the stderr console used for log output."""
    custom_theme = Theme(
        {
            "logging.level.debug": "cyan",
            "logging.level.info": "green",
            "logging.level.warning": "yellow",
            "logging.level.error": "red bold",
            "logging.level.critical": "red bold reverse",
            "log.time": "dim cyan",
            "log.message": "white",
            "log.path": "dim blue",
        }
    )
    # stdout belongs to command output; logs go to stderr
    return Console(theme=custom_theme, stderr=True)


def setup_structured_logger(
    name: str = LogConfig.LOGGER_NAME,
    level: str = LogConfig.DEFAULT_LEVEL,
    log_file: str | None = None,
    *,
    use_rich_console: bool = True,
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        name: Logger name (default: "moodflix")
        level: Log level name (default: "WARNING")
        log_file: Optional path of a JSON-lines log file
        use_rich_console: Use the rich console handler instead of JSON on stderr

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        logger.handlers.clear()

    log_level = getattr(logging, level.upper())
    logger.setLevel(log_level)

    if use_rich_console:
        handler: logging.Handler = RichHandler(
            console=_create_rich_console(),
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            log_time_format=LogConfig.TIME_FORMAT,
        )
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
    handler.setLevel(log_level)
    logger.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding=LogConfig.DEFAULT_ENCODING)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def _context_to_dict(context: dict[str, Any] | ErrorContext | None) -> dict[str, Any]:
    if context is None:
        return {}
    if isinstance(context, ErrorContext):
        return context.safe_dict()
    return dict(context)


def log_operation_error(
    logger: logging.Logger,
    error: MoodflixError,
    operation: str | None = None,
    additional_context: dict[str, Any] | ErrorContext | None = None,
) -> None:
    """
    Record a MoodflixError with its code and context.

    Args:
        logger: Logger instance
        error: The error to record
        operation: Operation name, defaults to the one in the error context
        additional_context: Extra context merged over the error's own
    """
    context_dict = error.context.safe_dict()
    context_dict.update(_context_to_dict(additional_context))

    logger.error(
        error.message,
        extra={
            LogContextKeys.ERROR_CODE: error.code.name,
            LogContextKeys.CONTEXT: context_dict,
            LogContextKeys.OPERATION: operation or error.context.operation,
        },
        exc_info=error.original_error is not None,
    )


def log_operation_success(
    logger: logging.Logger,
    operation: str,
    duration_ms: float,
    result_info: dict[str, Any] | None = None,
    context: dict[str, Any] | ErrorContext | None = None,
) -> None:
    """Record the successful end of an operation at debug level."""
    logger.debug(
        "Operation '%s' completed successfully",
        operation,
        extra={
            LogContextKeys.OPERATION: operation,
            LogContextKeys.DURATION_MS: duration_ms,
            LogContextKeys.RESULT_INFO: result_info or {},
            LogContextKeys.CONTEXT: _context_to_dict(context),
        },
    )


def log_operation_start(
    logger: logging.Logger,
    operation: str,
    context: dict[str, Any] | None = None,
) -> None:
    """Record the start of an operation at debug level."""
    logger.debug(
        "Starting operation '%s'",
        operation,
        extra={
            LogContextKeys.OPERATION: operation,
            LogContextKeys.CONTEXT: context or {},
        },
    )


def log_api_call(
    logger: logging.Logger,
    endpoint: str,
    method: str = "GET",
    status_code: int | None = None,
    duration_ms: float | None = None,
    context: dict[str, Any] | None = None,
) -> None:
    """
    Record one call to the recommendation service.

    Calls that ended with a 4xx/5xx status are logged as warnings; the
    caller decides whether the failure is an error for its operation.
    """
    api_context: dict[str, Any] = {
        "endpoint": endpoint,
        "method": method,
    }
    if status_code is not None:
        api_context["status_code"] = status_code
    if duration_ms is not None:
        api_context["duration_ms"] = round(duration_ms, 2)
    if context:
        api_context.update(context)

    level = logging.DEBUG
    message = f"{method} {endpoint}"
    if status_code is not None:
        if status_code >= 400:
            level = logging.WARNING
            message += f" failed with status {status_code}"
        else:
            message += f" -> {status_code}"

    logger.log(
        level,
        message,
        extra={
            LogContextKeys.OPERATION: "api_call",
            LogContextKeys.CONTEXT: api_context,
        },
    )
