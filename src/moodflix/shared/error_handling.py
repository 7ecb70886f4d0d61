"""View-boundary error handling for Moodflix.

Every error that reaches a view (list, detail, CLI command) is converted
here into one user-visible message and one retry affordance. No other
module formats errors for display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from moodflix.shared.constants import CLIMessages, ErrorBodyFields, HTTPStatusCodes
from moodflix.shared.errors import (
    ApiError,
    InvalidPayloadError,
    MissingIdError,
    MoodflixError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class RetryAction(str, Enum):
    """What the user can do after an error."""

    RELOAD = "reload"
    GO_HOME = "go_home"
    EDIT_QUERY = "edit_query"


RETRY_HINTS: dict[RetryAction, str] = {
    RetryAction.RELOAD: CLIMessages.RETRY_RELOAD,
    RetryAction.GO_HOME: CLIMessages.RETRY_GO_HOME,
    RetryAction.EDIT_QUERY: CLIMessages.RETRY_EDIT_QUERY,
}


@dataclass(frozen=True)
class ErrorView:
    """What a view renders instead of its content."""

    message: str
    action: RetryAction
    code: str | None = None
    not_found: bool = False

    @property
    def hint(self) -> str:
        return RETRY_HINTS[self.action]


def describe_error(error: BaseException) -> str:
    """Return the single user-visible message for an error.

    API errors with a details payload get the remaining payload fields
    appended; the body's own message is already the error message.
    """
    if isinstance(error, ApiError):
        extra = {
            key: value
            for key, value in error.details.items()
            if value is not None and key != ErrorBodyFields.MESSAGE
        }
        if extra:
            rendered = ", ".join(f"{key}={value}" for key, value in extra.items())
            return f"{error.message}: {rendered}"
        return error.message
    if isinstance(error, MoodflixError):
        return error.message
    return UNEXPECTED_ERROR_MESSAGE


def to_error_view(error: BaseException) -> ErrorView:
    """Convert any exception into an ErrorView.

    Args:
        error: The exception caught at the view boundary

    Returns:
        ErrorView with message, retry action and not-found flag
    """
    message = describe_error(error)

    if isinstance(error, MissingIdError):
        return ErrorView(message, RetryAction.GO_HOME, error.code.value, not_found=True)
    if isinstance(error, ValidationError):
        return ErrorView(message, RetryAction.EDIT_QUERY, error.code.value)
    if isinstance(error, (InvalidPayloadError, NotFoundError)):
        return ErrorView(message, RetryAction.GO_HOME, error.code.value, not_found=True)
    if isinstance(error, ApiError) and error.status == HTTPStatusCodes.NOT_FOUND:
        return ErrorView(message, RetryAction.GO_HOME, error.code.value, not_found=True)
    if isinstance(error, MoodflixError):
        return ErrorView(message, RetryAction.RELOAD, error.code.value)

    logger.exception("Unexpected error reached the view boundary", exc_info=error)
    return ErrorView(message, RetryAction.RELOAD)
