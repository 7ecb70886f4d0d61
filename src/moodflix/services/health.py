"""Liveness probe for the recommendation service."""

from __future__ import annotations

import logging

from moodflix.services.http_client import HttpClient
from moodflix.shared.constants import Endpoints
from moodflix.shared.errors import MoodflixError

logger = logging.getLogger(__name__)


class HealthProbe:
    """Best-effort gate in front of dependent calls.

    ``check()`` never raises: any failure, including a timeout, means the
    service is treated as unavailable.
    """

    def __init__(self, client: HttpClient) -> None:
        self.client = client

    async def check(self) -> bool:
        try:
            response = await self.client.get(Endpoints.HEALTH)
        except MoodflixError as e:
            logger.warning("Health check failed: %s", e)
            return False
        except Exception:  # noqa: BLE001
            # aiohttp can surface errors outside ClientError (e.g. invalid URL)
            logger.warning("Health check failed unexpectedly", exc_info=True)
            return False
        return response.ok
