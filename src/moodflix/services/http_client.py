"""HTTP client for the recommendation service.

This module wraps aiohttp with a fixed per-request timeout and converts
every failure into the Moodflix error taxonomy in one place:

- timeout                         -> TimedOutError
- transport failure               -> NetworkError
- non-2xx with a JSON object body -> ApiError(status, message, details)
- non-2xx with anything else      -> HttpError(status)
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any

import aiohttp
import orjson

from moodflix.shared.constants import (
    APIConfig,
    ContentTypes,
    ErrorBodyFields,
    HTTPMethods,
    HTTPStatusCodes,
)
from moodflix.shared.errors import (
    ApiError,
    ErrorContext,
    HttpError,
    InvalidPayloadError,
    MoodflixError,
    NetworkError,
    TimedOutError,
)
from moodflix.shared.logging import log_api_call, log_operation_error

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An error occurred"


@dataclass(frozen=True)
class HttpResponse:
    """A fully-read 2xx response."""

    status: int
    body: bytes
    url: str

    @property
    def ok(self) -> bool:
        return HTTPStatusCodes.is_success(self.status)

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            InvalidPayloadError: If the body is not valid JSON
        """
        try:
            return orjson.loads(self.body)
        except orjson.JSONDecodeError as e:
            raise InvalidPayloadError(
                "Response body is not valid JSON",
                context=ErrorContext(operation="decode_response", url=self.url),
                original_error=e,
            ) from e


def decode_error_response(
    status: int,
    body: bytes,
    context: ErrorContext | None = None,
) -> ApiError | HttpError:
    """Decode a non-2xx response into ApiError or HttpError.

    The service answers errors with ``{error, message, status}`` or, for
    framework-level validation errors, ``{detail}``.

    Args:
        status: HTTP status of the response
        body: Raw response body
        context: Context attached to the resulting error

    Returns:
        ApiError when the body is a JSON object, HttpError otherwise
    """
    try:
        data = orjson.loads(body) if body else None
    except orjson.JSONDecodeError:
        data = None

    if not isinstance(data, dict):
        return HttpError(status, context)

    message = data.get(ErrorBodyFields.MESSAGE)
    if not message:
        detail = data.get(ErrorBodyFields.DETAIL)
        message = detail if isinstance(detail, str) else None
    return ApiError(
        status=status,
        message=message or DEFAULT_ERROR_MESSAGE,
        details=data,
        context=context,
    )


class HttpClient:
    """Bounded-timeout HTTP client.

    Args:
        base_url: Service base URL, e.g. ``http://127.0.0.1:8000``
        timeout_ms: Total timeout of each request in milliseconds
        session: Optional aiohttp session. When omitted the client creates
            one on first use and closes it in ``close()``.
    """

    def __init__(
        self,
        base_url: str,
        timeout_ms: int = APIConfig.DEFAULT_TIMEOUT_MS,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_ms = timeout_ms
        self._timeout = aiohttp.ClientTimeout(total=timeout_ms / 1000)
        self._session = session
        self._owns_session = session is None

    def url_for(self, path: str) -> str:
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url}{path}"

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers={
                    "User-Agent": APIConfig.USER_AGENT,
                    "Accept": ContentTypes.JSON,
                },
            )
            self._owns_session = True
        return self._session

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
    ) -> HttpResponse:
        """Send one request and return the fully-read response.

        Raises:
            TimedOutError: The request exceeded ``timeout_ms``
            NetworkError: No response was received
            ApiError: Non-2xx response with a structured body
            HttpError: Non-2xx response without a decodable body
        """
        url = self.url_for(path)
        context = ErrorContext(
            operation="http_request",
            url=url,
            additional_data={"method": method},
        )
        session = await self._get_session()
        started = time.perf_counter()

        try:
            # the body is read inside the context so the connection and its
            # timeout handle are released on every exit path
            async with session.request(method, url, json=json, timeout=self._timeout) as response:
                status = response.status
                body = await response.read()
        except asyncio.TimeoutError as e:
            error: MoodflixError = TimedOutError(self.timeout_ms, context, e)
            log_operation_error(logger=logger, error=error, operation="http_request")
            raise error from e
        except aiohttp.ClientError as e:
            error = NetworkError(e, context)
            log_operation_error(logger=logger, error=error, operation="http_request")
            raise error from e

        duration_ms = (time.perf_counter() - started) * 1000
        log_api_call(
            logger,
            endpoint=path,
            method=method,
            status_code=status,
            duration_ms=duration_ms,
        )

        if not HTTPStatusCodes.is_success(status):
            raise decode_error_response(status, body, context)

        return HttpResponse(status=status, body=body, url=url)

    async def get(self, path: str) -> HttpResponse:
        return await self.request(HTTPMethods.GET, path)

    async def post(self, path: str, payload: dict[str, Any]) -> HttpResponse:
        return await self.request(HTTPMethods.POST, path, json=payload)

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
