"""Tests for the detail view loader."""

from __future__ import annotations

from typing import Any

import pytest
from conftest import FakeHealthProbe, FakeRecommendationApi

from moodflix.services import DetailLoader
from moodflix.shared.errors import (
    ApiError,
    HttpError,
    InvalidPayloadError,
    MissingIdError,
    NotFoundError,
    ServiceUnavailableError,
    TimedOutError,
    ValidationError,
)


def _payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": 550,
        "title": "Fight Club",
        "overview": "An insomniac office worker...",
        "poster_path": "/poster.jpg",
        "backdrop_path": "/backdrop.jpg",
        "release_date": "1999-10-15",
        "runtime": 139,
        "rating": 8.4,
        "vote_count": 26000,
        "content_rating": "R",
        "genres": ["Drama"],
        "cast": [
            {
                "id": 819,
                "name": "Edward Norton",
                "character": "The Narrator",
                "profile_path": "/norton.jpg",
                "notable_movies": [{"id": 1, "title": "American History X"}],
            }
        ],
        "director": {"name": "David Fincher", "profile_path": None},
        "writers": [{"name": "Jim Uhls", "job": "Screenplay"}],
        "trailer": {"name": "Trailer", "key": "abc123", "type": "Trailer"},
        "teaser": None,
        "similar_movies": [{"id": 807, "title": "Se7en", "rating": 8.4}],
        "unexpected_field": "ignored",
    }
    payload.update(overrides)
    return payload


class TestDetailLoader:
    @pytest.mark.asyncio
    async def test_loads_and_rewrites_image_paths(
        self,
        detail_loader: DetailLoader,
        fake_api: FakeRecommendationApi,
    ) -> None:
        # Given
        fake_api.payloads["550"] = _payload()

        # When
        details = await detail_loader.load("550")

        # Then
        assert details.id == 550
        assert details.poster_path == "https://image.tmdb.org/t/p/w500/poster.jpg"
        assert details.backdrop_path == "https://image.tmdb.org/t/p/original/backdrop.jpg"
        assert details.cast[0].profile_url() == "https://image.tmdb.org/t/p/w185/norton.jpg"
        assert details.trailer is not None
        assert details.trailer.watch_url == "https://www.youtube.com/watch?v=abc123"
        assert details.similar_movies[0].title == "Se7en"

    @pytest.mark.asyncio
    async def test_missing_images_stay_empty(
        self,
        detail_loader: DetailLoader,
        fake_api: FakeRecommendationApi,
    ) -> None:
        fake_api.payloads["550"] = _payload(poster_path=None, backdrop_path="")

        details = await detail_loader.load("550")

        assert details.poster_path is None
        assert details.backdrop_path is None

    @pytest.mark.asyncio
    async def test_absolute_image_urls_untouched(
        self,
        detail_loader: DetailLoader,
        fake_api: FakeRecommendationApi,
    ) -> None:
        fake_api.payloads["550"] = _payload(poster_path="https://cdn.example/p.jpg")

        details = await detail_loader.load("550")

        assert details.poster_path == "https://cdn.example/p.jpg"

    @pytest.mark.asyncio
    async def test_custom_image_base(
        self,
        fake_api: FakeRecommendationApi,
        fake_health: FakeHealthProbe,
    ) -> None:
        fake_api.payloads["550"] = _payload()
        loader = DetailLoader(fake_api, fake_health, "https://img.local/t/p")  # type: ignore[arg-type]

        details = await loader.load(550)

        assert details.poster_path == "https://img.local/t/p/w500/poster.jpg"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("movie_id", [None, "", "   "])
    async def test_missing_id(
        self,
        detail_loader: DetailLoader,
        fake_api: FakeRecommendationApi,
        fake_health: FakeHealthProbe,
        movie_id: str | None,
    ) -> None:
        with pytest.raises(MissingIdError) as exc_info:
            await detail_loader.load(movie_id)

        assert isinstance(exc_info.value, ValidationError)
        assert fake_health.calls == 0
        assert fake_api.payload_calls == []

    @pytest.mark.asyncio
    async def test_unhealthy_service(
        self,
        detail_loader: DetailLoader,
        fake_api: FakeRecommendationApi,
        fake_health: FakeHealthProbe,
    ) -> None:
        fake_health.healthy = False

        with pytest.raises(ServiceUnavailableError):
            await detail_loader.load("550")

        assert fake_api.payload_calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            _payload(id=None),
            _payload(title=""),
            {k: v for k, v in _payload().items() if k != "title"},
            ["not", "an", "object"],
            None,
            _payload(cast="nobody"),
        ],
    )
    async def test_invalid_payload_rejected(
        self,
        detail_loader: DetailLoader,
        fake_api: FakeRecommendationApi,
        payload: Any,
    ) -> None:
        fake_api.payloads["550"] = payload

        with pytest.raises(InvalidPayloadError):
            await detail_loader.load("550")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [ApiError(404, "Movie not found"), HttpError(404)])
    async def test_not_found(
        self,
        detail_loader: DetailLoader,
        fake_api: FakeRecommendationApi,
        error: Exception,
    ) -> None:
        fake_api.payloads["999"] = error

        with pytest.raises(NotFoundError):
            await detail_loader.load("999")

    @pytest.mark.asyncio
    async def test_other_errors_propagate(
        self,
        detail_loader: DetailLoader,
        fake_api: FakeRecommendationApi,
    ) -> None:
        fake_api.payloads["550"] = TimedOutError(8000)

        with pytest.raises(TimedOutError):
            await detail_loader.load("550")

    @pytest.mark.asyncio
    async def test_health_checked_on_every_load(
        self,
        detail_loader: DetailLoader,
        fake_api: FakeRecommendationApi,
        fake_health: FakeHealthProbe,
    ) -> None:
        fake_api.payloads["550"] = _payload()

        await detail_loader.load("550")
        await detail_loader.load("550")

        assert fake_health.calls == 2

    @pytest.mark.asyncio
    async def test_logs_operation_start(
        self,
        detail_loader: DetailLoader,
        fake_api: FakeRecommendationApi,
        mocker,
    ) -> None:
        log_start = mocker.patch("moodflix.services.details.log_operation_start")
        fake_api.payloads["550"] = _payload()

        await detail_loader.load(" 550 ")

        log_start.assert_called_once()
        assert log_start.call_args.args[1:] == ("load_details", {"movie_id": "550"})
