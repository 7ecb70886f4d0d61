"""Tests for the pydantic data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from moodflix.shared.models import (
    ListState,
    MovieDetails,
    MovieSummary,
    PageResult,
    SearchQuery,
    Video,
    image_url,
)


class TestSearchQuery:
    def test_strips_mood(self):
        assert SearchQuery(mood="  happy ").mood == "happy"

    @pytest.mark.parametrize("mood", ["", "   "])
    def test_rejects_empty_mood(self, mood):
        with pytest.raises(ValidationError):
            SearchQuery(mood=mood)

    def test_rejects_page_zero(self):
        with pytest.raises(ValidationError):
            SearchQuery(mood="happy", page=0)

    def test_payload(self):
        assert SearchQuery(mood="happy", page=3).to_payload() == {"mood": "happy", "page": 3}


class TestPageResult:
    def test_ignores_unknown_fields(self):
        page = PageResult.model_validate(
            {"recommendations": [], "total_pages": 2, "current_page": 1, "mood": "happy"}
        )
        assert page.total_pages == 2

    def test_defaults(self):
        page = PageResult.model_validate({"recommendations": [{"id": 1, "title": "A"}]})

        assert page.current_page == 1
        assert page.total_pages == 1
        assert page.recommendations[0] == MovieSummary(id=1, title="A")


class TestListState:
    def test_storage_layout_uses_camel_case(self):
        state = ListState(mood="happy", movies=[], current_page=2, total_pages=5)

        raw = state.to_json()

        assert '"currentPage":2' in raw
        assert '"totalPages":5' in raw
        assert ListState.from_json(raw) == state

    def test_reads_camel_case(self):
        state = ListState.from_json(
            '{"mood": "sad", "movies": [{"id": 3, "title": "C"}], "currentPage": 1, "totalPages": 4}'
        )

        assert state.current_page == 1
        assert state.can_load_more is True
        assert state.movies[0].id == 3


class TestMovieDetails:
    def test_frozen(self):
        details = MovieDetails(id=1, title="A")

        with pytest.raises(ValidationError):
            details.title = "B"  # type: ignore[misc]

    def test_video_watch_url(self):
        assert Video(key="xyz").watch_url == "https://www.youtube.com/watch?v=xyz"


class TestImageUrl:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/a.jpg", "https://image.tmdb.org/t/p/w500/a.jpg"),
            ("a.jpg", "https://image.tmdb.org/t/p/w500/a.jpg"),
            ("https://cdn/a.jpg", "https://cdn/a.jpg"),
            ("", None),
            (None, None),
        ],
    )
    def test_paths(self, path, expected):
        assert image_url(path, "w500") == expected

    def test_custom_base_trailing_slash(self):
        assert image_url("/a.jpg", "original", "https://img/t/p/") == "https://img/t/p/original/a.jpg"
