"""Detail view loader."""

from __future__ import annotations

import logging
import time
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from moodflix.services.api import RecommendationApi
from moodflix.services.health import HealthProbe
from moodflix.shared.constants import HTTPStatusCodes, ImageConfig
from moodflix.shared.errors import (
    ApiError,
    ErrorContext,
    HttpError,
    InvalidPayloadError,
    MissingIdError,
    NotFoundError,
    ServiceUnavailableError,
)
from moodflix.shared.logging import (
    log_operation_error,
    log_operation_start,
    log_operation_success,
)
from moodflix.shared.models import MovieDetails, image_url

logger = logging.getLogger(__name__)


class DetailLoader:
    """Loads and validates the full detail payload of one movie.

    Args:
        api: Recommendation service facade
        health: Liveness probe, checked before every load
        image_base_url: Base of the image CDN used for poster/backdrop URLs
    """

    def __init__(
        self,
        api: RecommendationApi,
        health: HealthProbe,
        image_base_url: str = ImageConfig.DEFAULT_BASE_URL,
    ) -> None:
        self.api = api
        self.health = health
        self.image_base_url = image_base_url

    async def load(self, movie_id: str | int | None) -> MovieDetails:
        """Fetch the details of a movie.

        Args:
            movie_id: Movie id as found in the detail view URL

        Returns:
            Validated details with fully-qualified poster and backdrop URLs

        Raises:
            MissingIdError: If no id was given
            ServiceUnavailableError: If the health probe fails
            InvalidPayloadError: If the payload lacks an id or title or does
                not validate
            MoodflixError: Any transport or HTTP error from the client
        """
        movie_id = str(movie_id).strip() if movie_id is not None else ""
        context = ErrorContext(operation="load_details", additional_data={"movie_id": movie_id})
        if not movie_id:
            raise MissingIdError(context)

        if not await self.health.check():
            error = ServiceUnavailableError(context=context)
            log_operation_error(logger=logger, error=error)
            raise error

        log_operation_start(logger, "load_details", {"movie_id": movie_id})
        started = time.perf_counter()
        try:
            payload = await self.api.movie_payload(movie_id)
        except (ApiError, HttpError) as e:
            if e.status != HTTPStatusCodes.NOT_FOUND:
                raise
            raise NotFoundError(f"Movie {movie_id} not found", context) from e
        details = self._parse(payload, context)

        log_operation_success(
            logger=logger,
            operation="load_details",
            duration_ms=(time.perf_counter() - started) * 1000,
            result_info={"title": details.title, "cast": len(details.cast)},
            context=context,
        )
        return details

    def _parse(self, payload: Any, context: ErrorContext) -> MovieDetails:
        if not isinstance(payload, dict) or not payload.get("id") or not payload.get("title"):
            error = InvalidPayloadError(context=context)
            log_operation_error(logger=logger, error=error)
            raise error

        data = dict(payload)
        data["poster_path"] = image_url(
            data.get("poster_path"), ImageConfig.POSTER_SIZE, self.image_base_url
        )
        data["backdrop_path"] = image_url(
            data.get("backdrop_path"), ImageConfig.BACKDROP_SIZE, self.image_base_url
        )

        try:
            return MovieDetails.model_validate(data)
        except PydanticValidationError as e:
            error = InvalidPayloadError(context=context, original_error=e)
            log_operation_error(logger=logger, error=error)
            raise error from e
