"""HTTP Status Code Constants.

This module contains HTTP status code constants for clear and
type-safe handling of recommendation service responses.
"""


class HTTPStatusCodes:
    """HTTP status code constants."""

    # 2xx Success
    OK = 200

    # 4xx Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    REQUEST_TIMEOUT = 408
    UNPROCESSABLE_ENTITY = 422

    # 5xx Server Errors
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503

    @staticmethod
    def is_success(code: int) -> bool:
        """Check if status code indicates success (2xx)."""
        return 200 <= code < 300

    @staticmethod
    def is_client_error(code: int) -> bool:
        """Check if status code indicates client error (4xx)."""
        return 400 <= code < 500

    @staticmethod
    def is_server_error(code: int) -> bool:
        """Check if status code indicates server error (5xx)."""
        return 500 <= code < 600


class HTTPMethods:
    """HTTP methods used against the recommendation service."""

    GET = "GET"
    POST = "POST"


class ContentTypes:
    """Common content type values."""

    JSON = "application/json"
