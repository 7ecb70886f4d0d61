"""List view state models.

`SearchQuery` is the validated input of a mood search and `ListState` the
persisted capture of the list view (used for snapshots around navigation).
Storage uses the camelCase field names of the persisted layout.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from moodflix.shared.models.movie import MovieSummary


class SearchQuery(BaseModel):
    """A mood search request.

    Example:
        >>> SearchQuery(mood="  happy ", page=2).mood
        'happy'
    """

    model_config = ConfigDict(frozen=True)

    mood: str = Field(..., min_length=1)
    page: int = Field(default=1, ge=1)

    @field_validator("mood", mode="before")
    @classmethod
    def _strip_mood(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    def to_payload(self) -> dict[str, object]:
        return {"mood": self.mood, "page": self.page}


class ListState(BaseModel):
    """Snapshot of the list view.

    Attributes:
        mood: Mood the list was searched for
        movies: Accumulated results, page order then in-page order
        current_page: Last page fetched
        total_pages: Pages available on the server
    """

    model_config = ConfigDict(populate_by_name=True)

    mood: str
    movies: list[MovieSummary] = Field(default_factory=list)
    current_page: int = Field(default=1, ge=0, alias="currentPage")
    total_pages: int = Field(default=0, ge=0, alias="totalPages")

    @property
    def can_load_more(self) -> bool:
        return self.current_page < self.total_pages

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, raw: str | bytes) -> ListState:
        return cls.model_validate_json(raw)
