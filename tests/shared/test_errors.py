"""
Tests for Moodflix error handling system.

Covers the error context model, the error hierarchy and the helper
constructors defined in moodflix.shared.errors.
"""

from decimal import Decimal
from pathlib import Path

import pytest

from moodflix.shared.errors import (
    ApiError,
    ApplicationError,
    DomainError,
    ErrorCode,
    ErrorContext,
    HttpError,
    InfrastructureError,
    InvalidPayloadError,
    MissingIdError,
    MoodflixError,
    NetworkError,
    NotFoundError,
    ServiceUnavailableError,
    TimedOutError,
    ValidationError,
    create_config_error,
    create_validation_error,
)


class TestErrorContext:
    """Test cases for ErrorContext frozen dataclass."""

    def test_empty_context(self):
        context = ErrorContext()
        assert context.operation is None
        assert context.url is None
        assert context.additional_data is None
        assert context.safe_dict() == {"additional_data": {}}

    def test_primitive_coercion(self):
        """Path and Decimal values are converted to primitives."""
        context = ErrorContext(
            operation="storage_write",
            additional_data={"path": Path("/tmp/local.json"), "ratio": Decimal("0.5"), "keys": 3},
        )
        assert context.additional_data == {"path": "/tmp/local.json", "ratio": 0.5, "keys": 3}

    def test_rejects_non_primitive_values(self):
        with pytest.raises(TypeError):
            ErrorContext(additional_data={"movies": [1, 2]})

    def test_safe_dict_masks_keys(self):
        context = ErrorContext(operation="recommend", url="http://s/recommendations/")
        assert context.safe_dict(mask_keys=("url",)) == {
            "operation": "recommend",
            "additional_data": {},
        }

    def test_frozen(self):
        context = ErrorContext(operation="recommend")
        with pytest.raises(AttributeError):
            context.operation = "other"  # type: ignore[misc]


class TestErrorHierarchy:
    """Every error carries its code and sits under the right base class."""

    @pytest.mark.parametrize(
        ("error", "base", "code", "message"),
        [
            (ValidationError("Please enter a mood"), DomainError, ErrorCode.VALIDATION_ERROR, "Please enter a mood"),
            (MissingIdError(), ValidationError, ErrorCode.MISSING_ID, "No movie ID provided"),
            (
                ServiceUnavailableError(),
                InfrastructureError,
                ErrorCode.SERVICE_UNAVAILABLE,
                "Backend service is unavailable. Please try again later.",
            ),
            (TimedOutError(8000), InfrastructureError, ErrorCode.API_TIMEOUT, "Request timed out"),
            (
                NetworkError(ConnectionError("x")),
                InfrastructureError,
                ErrorCode.NETWORK_ERROR,
                "Failed to fetch data",
            ),
            (HttpError(502), InfrastructureError, ErrorCode.HTTP_ERROR, "HTTP Error 502"),
            (ApiError(400, "Bad mood"), InfrastructureError, ErrorCode.API_ERROR, "Bad mood"),
            (
                InvalidPayloadError(),
                DomainError,
                ErrorCode.INVALID_PAYLOAD,
                "Invalid movie data received from server",
            ),
            (NotFoundError("Movie 1 not found"), DomainError, ErrorCode.NOT_FOUND, "Movie 1 not found"),
        ],
    )
    def test_codes_and_bases(self, error, base, code, message):
        assert isinstance(error, MoodflixError)
        assert isinstance(error, base)
        assert error.code == code
        assert error.message == message
        assert str(error) == f"{code.value}: {message}"

    def test_to_dict(self):
        cause = ConnectionError("refused")
        error = NetworkError(cause, ErrorContext(operation="http_request", url="http://s/health"))

        data = error.to_dict()

        assert data["code"] == "NETWORK_ERROR"
        assert data["original_error"] == "refused"
        assert data["context"]["url"] == "http://s/health"

    def test_api_error_to_dict_includes_status_and_details(self):
        error = ApiError(422, "Mood not understood", {"error": "bad_mood", "status": 422})

        data = error.to_dict()

        assert data["status"] == 422
        assert data["details"] == {"error": "bad_mood", "status": 422}

    def test_api_error_default_details(self):
        assert ApiError(500, "boom").details == {}


class TestHelpers:
    def test_create_validation_error(self):
        error = create_validation_error("Please enter a mood", field="mood", operation="submit")

        assert isinstance(error, ValidationError)
        assert error.field == "mood"
        assert error.context.operation == "submit"
        assert error.context.additional_data == {"field": "mood"}

    def test_create_config_error(self):
        cause = ValueError("bad")
        error = create_config_error("Invalid TOML", config_key="moodflix.toml", original_error=cause)

        assert isinstance(error, ApplicationError)
        assert error.code == ErrorCode.CONFIG_INVALID
        assert error.original_error is cause
