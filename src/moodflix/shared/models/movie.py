"""Recommendation service response models.

Pydantic models for the payloads returned by `/recommendations/` and
`/movie/{id}`. They ignore unknown fields so that new fields added by the
service do not break validation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from moodflix.shared.constants import ImageConfig, VideoConfig


class ApiModel(BaseModel):
    """Lenient base for models parsed at the external API boundary."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class MovieSummary(ApiModel):
    """One row of a recommendation page.

    Attributes:
        id: Movie id
        title: Display title
        overview: Plot synopsis
        rating: Average rating (0-10)
        poster: Fully-qualified poster URL, if the service has one
    """

    id: int
    title: str
    overview: str = ""
    rating: float = 0.0
    poster: str | None = None


class PageResult(ApiModel):
    """One page of recommendations for a mood."""

    recommendations: list[MovieSummary] = Field(default_factory=list)
    total_pages: int = Field(default=1, ge=0)
    current_page: int = Field(default=1, ge=1)


class NotableMovie(ApiModel):
    id: int
    title: str
    poster_path: str | None = None
    character: str = ""
    release_date: str = ""
    rating: float = 0.0
    popularity: float = 0.0


class CastMember(ApiModel):
    """An actor credited on a movie, with a short biography."""

    id: int
    name: str
    character: str = ""
    profile_path: str | None = None
    biography: str = ""
    birthday: str | None = None
    place_of_birth: str | None = None
    known_for_department: str = ""
    notable_movies: list[NotableMovie] = Field(default_factory=list)

    def profile_url(self, image_base_url: str = ImageConfig.DEFAULT_BASE_URL) -> str | None:
        """Return the profile picture URL at the cast thumbnail size."""
        return image_url(self.profile_path, ImageConfig.PROFILE_SIZE, image_base_url)


class Director(ApiModel):
    name: str
    profile_path: str | None = None


class Writer(ApiModel):
    name: str
    job: str = ""
    profile_path: str | None = None


class Video(ApiModel):
    """A trailer or teaser hosted on YouTube."""

    name: str = ""
    key: str
    type: str = ""

    @property
    def watch_url(self) -> str:
        return VideoConfig.YOUTUBE_WATCH_URL.format(key=self.key)


class SimilarMovie(ApiModel):
    id: int
    title: str
    poster_path: str | None = None
    rating: float = 0.0


class MovieDetails(ApiModel):
    """Full detail payload of a single movie.

    Instances are frozen: once fetched for a given id they never change.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: int
    title: str
    overview: str = ""
    poster_path: str | None = None
    backdrop_path: str | None = None
    release_date: str = ""
    runtime: int | None = None
    rating: float = 0.0
    vote_count: int = 0
    content_rating: str | None = None
    genres: list[str] = Field(default_factory=list)
    cast: list[CastMember] = Field(default_factory=list)
    director: Director | None = None
    writers: list[Writer] = Field(default_factory=list)
    trailer: Video | None = None
    teaser: Video | None = None
    similar_movies: list[SimilarMovie] = Field(default_factory=list)


def image_url(
    path: str | None,
    size: str,
    image_base_url: str = ImageConfig.DEFAULT_BASE_URL,
) -> str | None:
    """Turn a relative TMDB image path into a fully-qualified URL.

    Absolute URLs are returned unchanged; empty paths yield None.

    Example:
        >>> image_url("/abc.jpg", "w500")
        'https://image.tmdb.org/t/p/w500/abc.jpg'
    """
    if not path:
        return None
    if path.startswith(("http://", "https://")):
        return path
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{image_base_url.rstrip('/')}/{size}{path}"
