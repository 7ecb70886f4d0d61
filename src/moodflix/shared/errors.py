"""Moodflix Error Handling Module

This module defines the error handling system for Moodflix, providing
structured error classes with context information and user-friendly messages.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Closed Taxonomy: every failure of the recommendation service is decoded
  into one of the concrete classes below at the HTTP boundary
- Proper Exception Chaining: Original exceptions are preserved
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]

# Default keys to mask in safe_dict
SAFE_DICT_MASK_KEYS: tuple[str, ...] = ()


class ErrorCode(str, Enum):
    """Error codes for Moodflix.

    This enum serves as the single source of truth for all error codes
    used throughout the application.
    """

    # Local validation (never sent to the server)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_ID = "MISSING_ID"

    # Service availability and transport
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    API_TIMEOUT = "API_TIMEOUT"
    NETWORK_ERROR = "NETWORK_ERROR"

    # Server responses
    API_ERROR = "API_ERROR"
    HTTP_ERROR = "HTTP_ERROR"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"
    NOT_FOUND = "NOT_FOUND"

    # Storage
    STORAGE_READ_FAILED = "STORAGE_READ_FAILED"
    STORAGE_WRITE_FAILED = "STORAGE_WRITE_FAILED"

    # Configuration
    CONFIG_MISSING = "CONFIG_MISSING"
    CONFIG_INVALID = "CONFIG_INVALID"

    # Application
    APPLICATION_ERROR = "APPLICATION_ERROR"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Converts Path, Enum, Decimal to primitive types.

    Args:
        value: Input dictionary or None

    Returns:
        Dictionary with primitive values only, or None

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif isinstance(val, Enum):
            coerced[key] = val.value
        elif isinstance(val, Decimal):
            coerced[key] = float(val)
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum, Decimal are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContextModel:
    """Context information for errors.

    Only primitive types (str, int, float, bool) are allowed in
    additional_data so that contexts can always be logged as JSON.

    Attributes:
        operation: Optional operation name that caused the error
        url: Optional request URL associated with the error
        additional_data: Optional dict with primitive values only
    """

    operation: str | None = None
    url: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        """Post-initialization validation and coercion."""
        if self.additional_data is not None:
            coerced = _coerce_primitives(self.additional_data)
            object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self, *, mask_keys: tuple[str, ...] | None = None) -> dict[str, Any]:
        """Export context as dict for logging.

        Args:
            mask_keys: Fields to exclude from output. Defaults to SAFE_DICT_MASK_KEYS.

        Returns:
            Dictionary with the non-empty fields and a guaranteed
            additional_data key.
        """
        if mask_keys is None:
            mask_keys = SAFE_DICT_MASK_KEYS

        data: dict[str, Any] = {}
        if self.operation is not None and "operation" not in mask_keys:
            data["operation"] = self.operation
        if self.url is not None and "url" not in mask_keys:
            data["url"] = self.url

        if self.additional_data is not None and "additional_data" not in mask_keys:
            data["additional_data"] = self.additional_data
        else:
            data["additional_data"] = {}

        return data


ErrorContext = ErrorContextModel


class MoodflixError(Exception):
    """Base exception class for all Moodflix errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize MoodflixError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error

        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging and JSON output."""
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class DomainError(MoodflixError):
    """Errors raised by local rules: bad input, unusable payloads, missing data."""


class InfrastructureError(MoodflixError):
    """Errors raised while talking to the recommendation service or storage."""


class ApplicationError(MoodflixError):
    """Application-level errors such as configuration problems."""


class ValidationError(DomainError):
    """Input rejected locally before any request is made (e.g. empty mood)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        context: ErrorContext | None = None,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
    ) -> None:
        self.field = field
        super().__init__(code, message, context)


class MissingIdError(ValidationError):
    """A detail view was opened without a movie id."""

    def __init__(self, context: ErrorContext | None = None) -> None:
        super().__init__(
            "No movie ID provided",
            field="id",
            context=context,
            code=ErrorCode.MISSING_ID,
        )


class ServiceUnavailableError(InfrastructureError):
    """The health probe reported the recommendation service as down."""

    def __init__(
        self,
        message: str = "Backend service is unavailable. Please try again later.",
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(ErrorCode.SERVICE_UNAVAILABLE, message, context)


class TimedOutError(InfrastructureError):
    """A request exceeded the configured timeout."""

    def __init__(
        self,
        timeout_ms: int,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        self.timeout_ms = timeout_ms
        super().__init__(
            ErrorCode.API_TIMEOUT,
            "Request timed out",
            context,
            original_error,
        )


class NetworkError(InfrastructureError):
    """Transport-level failure; no HTTP response was received."""

    def __init__(
        self,
        cause: Exception,
        context: ErrorContext | None = None,
    ) -> None:
        self.cause = cause
        super().__init__(
            ErrorCode.NETWORK_ERROR,
            "Failed to fetch data",
            context,
            cause,
        )


class HttpError(InfrastructureError):
    """Non-2xx response whose body could not be decoded."""

    def __init__(self, status: int, context: ErrorContext | None = None) -> None:
        self.status = status
        super().__init__(ErrorCode.HTTP_ERROR, f"HTTP Error {status}", context)


class ApiError(InfrastructureError):
    """Non-2xx response carrying a structured error body."""

    def __init__(
        self,
        status: int,
        message: str,
        details: dict[str, Any] | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        self.status = status
        self.details = details or {}
        super().__init__(ErrorCode.API_ERROR, message, context)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["status"] = self.status
        data["details"] = self.details
        return data


class InvalidPayloadError(DomainError):
    """A response body is missing required fields or has the wrong shape."""

    def __init__(
        self,
        message: str = "Invalid movie data received from server",
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(ErrorCode.INVALID_PAYLOAD, message, context, original_error)


class NotFoundError(DomainError):
    """Nothing to show: no results for a mood or no movie for an id."""

    def __init__(self, message: str, context: ErrorContext | None = None) -> None:
        super().__init__(ErrorCode.NOT_FOUND, message, context)


def create_validation_error(
    message: str,
    field: str | None = None,
    operation: str | None = None,
) -> ValidationError:
    """Create a validation error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"field": field} if field else None
    )
    context = ErrorContext(operation=operation, additional_data=additional_data)
    return ValidationError(message, field=field, context=context)


def create_config_error(
    message: str,
    config_key: str | None = None,
    original_error: Exception | None = None,
) -> ApplicationError:
    """Create a configuration error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"config_key": config_key} if config_key else None
    )
    context = ErrorContext(operation="load_config", additional_data=additional_data)
    return ApplicationError(
        ErrorCode.CONFIG_INVALID,
        message,
        context,
        original_error,
    )
