"""Tests for the liveness probe."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from moodflix.services import HealthProbe, HttpResponse
from moodflix.shared.errors import ApiError, HttpError, NetworkError, TimedOutError


def _client(**kwargs) -> MagicMock:  # type: ignore[no-untyped-def]
    client = MagicMock()
    client.get = AsyncMock(**kwargs)
    return client


class TestHealthProbe:
    @pytest.mark.asyncio
    async def test_healthy_on_2xx(self) -> None:
        client = _client(return_value=HttpResponse(200, b'{"status": "ok"}', "http://s/health"))

        assert await HealthProbe(client).check() is True
        client.get.assert_awaited_once_with("/health")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            TimedOutError(8000),
            NetworkError(ConnectionError("refused")),
            HttpError(503),
            ApiError(500, "down"),
            ValueError("URL is invalid"),
        ],
    )
    async def test_any_failure_is_unhealthy(self, error: Exception) -> None:
        """Failures never propagate out of the probe."""
        probe = HealthProbe(_client(side_effect=error))

        assert await probe.check() is False
