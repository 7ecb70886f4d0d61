"""
Pytest configuration and shared fixtures for Moodflix tests.

Services are wired with in-memory storage and recording fakes for the
recommendation API and the health probe, so no test touches the network.
"""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from moodflix.cli.common.context import clear_cli_context
from moodflix.config import reset_config
from moodflix.services import (
    DetailLoader,
    NavigationStateBridge,
    Navigator,
    PageCache,
    SearchCoordinator,
)
from moodflix.shared.models import MovieSummary, PageResult, SearchQuery
from moodflix.storage import InMemoryStorage

# Keep user configuration out of the tests
for _key in [key for key in os.environ if key.startswith("MOODFLIX_")]:
    del os.environ[_key]


def make_movie(movie_id: int, title: str | None = None, rating: float = 7.0) -> MovieSummary:
    return MovieSummary(
        id=movie_id,
        title=title or f"Movie {movie_id}",
        overview=f"Overview of movie {movie_id}",
        rating=rating,
        poster=None,
    )


def make_page(ids: list[int], current_page: int = 1, total_pages: int = 1) -> PageResult:
    """Build a page result holding one movie per id."""
    return PageResult(
        recommendations=[make_movie(movie_id) for movie_id in ids],
        current_page=current_page,
        total_pages=total_pages,
    )


class FakeRecommendationApi:
    """Records every call and answers from canned pages and payloads.

    A canned value that is an exception is raised instead of returned.
    """

    def __init__(self) -> None:
        self.pages: dict[tuple[str, int], PageResult | Exception] = {}
        self.payloads: dict[str, Any] = {}
        self.recommend_calls: list[tuple[str, int]] = []
        self.payload_calls: list[str] = []

    async def recommend(self, query: SearchQuery) -> PageResult:
        self.recommend_calls.append((query.mood, query.page))
        result = self.pages[(query.mood, query.page)]
        if isinstance(result, Exception):
            raise result
        return result

    async def movie_payload(self, movie_id: str) -> Any:
        self.payload_calls.append(movie_id)
        result = self.payloads[movie_id]
        if isinstance(result, Exception):
            raise result
        return result


class FakeHealthProbe:
    """Health probe with a settable answer and a call counter."""

    def __init__(self, healthy: bool = True) -> None:
        self.healthy = healthy
        self.calls = 0

    async def check(self) -> bool:
        self.calls += 1
        return self.healthy


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None, None, None]:
    yield
    reset_config()
    clear_cli_context()


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Temporary directory for file-backed stores."""
    return tmp_path


@pytest.fixture
def local_storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def session_storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def fake_api() -> FakeRecommendationApi:
    return FakeRecommendationApi()


@pytest.fixture
def fake_health() -> FakeHealthProbe:
    return FakeHealthProbe()


@pytest.fixture
def page_cache(local_storage: InMemoryStorage) -> PageCache:
    return PageCache(local_storage)


@pytest.fixture
def navigator() -> Navigator:
    return Navigator()


@pytest.fixture
def coordinator(
    fake_api: FakeRecommendationApi,
    fake_health: FakeHealthProbe,
    page_cache: PageCache,
    local_storage: InMemoryStorage,
    navigator: Navigator,
) -> SearchCoordinator:
    return SearchCoordinator(fake_api, fake_health, page_cache, local_storage, navigator)  # type: ignore[arg-type]


@pytest.fixture
def bridge(session_storage: InMemoryStorage) -> NavigationStateBridge:
    return NavigationStateBridge(session_storage)


@pytest.fixture
def detail_loader(fake_api: FakeRecommendationApi, fake_health: FakeHealthProbe) -> DetailLoader:
    return DetailLoader(fake_api, fake_health)  # type: ignore[arg-type]
