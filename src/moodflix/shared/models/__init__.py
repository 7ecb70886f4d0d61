"""Data models shared by services, storage and the CLI."""

from moodflix.shared.models.movie import (
    CastMember,
    Director,
    MovieDetails,
    MovieSummary,
    NotableMovie,
    PageResult,
    SimilarMovie,
    Video,
    Writer,
    image_url,
)
from moodflix.shared.models.state import ListState, SearchQuery

__all__ = [
    "CastMember",
    "Director",
    "ListState",
    "MovieDetails",
    "MovieSummary",
    "NotableMovie",
    "PageResult",
    "SearchQuery",
    "SimilarMovie",
    "Video",
    "Writer",
    "image_url",
]
