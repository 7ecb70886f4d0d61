"""Typed facade over the recommendation service endpoints."""

from __future__ import annotations

import logging
import time
from typing import Any
from urllib.parse import quote

from pydantic import ValidationError as PydanticValidationError

from moodflix.services.http_client import HttpClient
from moodflix.shared.constants import Endpoints
from moodflix.shared.errors import ErrorContext, InvalidPayloadError
from moodflix.shared.logging import (
    log_operation_error,
    log_operation_start,
    log_operation_success,
)
from moodflix.shared.models import PageResult, SearchQuery

logger = logging.getLogger(__name__)


class RecommendationApi:
    """Calls `/recommendations/` and `/movie/{id}` and decodes the bodies."""

    def __init__(self, client: HttpClient) -> None:
        self.client = client

    async def recommend(self, query: SearchQuery) -> PageResult:
        """Fetch one page of recommendations for a mood.

        Raises:
            InvalidPayloadError: If the body does not look like a page result
            MoodflixError: Any transport or HTTP error from the client
        """
        log_operation_start(logger, "recommend", {"mood": query.mood, "page": query.page})
        started = time.perf_counter()
        response = await self.client.post(Endpoints.RECOMMENDATIONS, query.to_payload())
        data = response.json()

        try:
            page = PageResult.model_validate(data)
        except PydanticValidationError as e:
            error = InvalidPayloadError(
                "Invalid recommendation data received from server",
                context=ErrorContext(
                    operation="recommend",
                    url=response.url,
                    additional_data={"mood": query.mood, "page": query.page},
                ),
                original_error=e,
            )
            log_operation_error(logger=logger, error=error)
            raise error from e

        log_operation_success(
            logger=logger,
            operation="recommend",
            duration_ms=(time.perf_counter() - started) * 1000,
            result_info={
                "results": len(page.recommendations),
                "current_page": page.current_page,
                "total_pages": page.total_pages,
            },
            context={"mood": query.mood, "page": query.page},
        )
        return page

    async def movie_payload(self, movie_id: str) -> Any:
        """Fetch the raw detail payload of one movie."""
        response = await self.client.get(Endpoints.MOVIE_DETAILS.format(movie_id=quote(movie_id, safe="")))
        return response.json()
