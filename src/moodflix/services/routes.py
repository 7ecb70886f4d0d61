"""Addressable views and navigation history.

The list view is addressed as ``/?mood=<mood>`` and the detail view as
``/movie_info?id=<id>&mood=<mood>``. ``Navigator`` keeps the current URL and
a back stack, like a browser tab.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from urllib.parse import parse_qs, urlencode, urlsplit

from moodflix.shared.constants import QueryParams, RoutePaths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    """A parsed view URL."""

    path: str
    params: dict[str, str] = field(default_factory=dict)

    @property
    def mood(self) -> str:
        return self.params.get(QueryParams.MOOD, "")

    @property
    def movie_id(self) -> str:
        return self.params.get(QueryParams.MOVIE_ID, "")

    @property
    def is_detail(self) -> bool:
        return self.path == RoutePaths.DETAIL


def list_url(mood: str = "") -> str:
    if not mood:
        return RoutePaths.LIST
    return f"{RoutePaths.LIST}?{urlencode({QueryParams.MOOD: mood})}"


def detail_url(movie_id: int | str, mood: str = "") -> str:
    params = {QueryParams.MOVIE_ID: str(movie_id)}
    if mood:
        params[QueryParams.MOOD] = mood
    return f"{RoutePaths.DETAIL}?{urlencode(params)}"


def parse_url(url: str) -> Route:
    """Parse a view URL; repeated parameters keep their first value."""
    parts = urlsplit(url)
    query = parse_qs(parts.query, keep_blank_values=True)
    params = {key: values[0] for key, values in query.items() if values}
    return Route(path=parts.path or RoutePaths.LIST, params=params)


class Navigator:
    """Current URL plus back stack."""

    def __init__(self, initial_url: str = RoutePaths.LIST) -> None:
        self.current_url = initial_url
        self._history: list[str] = []

    @property
    def route(self) -> Route:
        return parse_url(self.current_url)

    @property
    def can_go_back(self) -> bool:
        return bool(self._history)

    def push(self, url: str) -> None:
        self._history.append(self.current_url)
        self.current_url = url
        logger.debug("Navigated to %s", url)

    def replace(self, url: str) -> None:
        self.current_url = url

    def back(self) -> str | None:
        if not self._history:
            return None
        self.current_url = self._history.pop()
        logger.debug("Navigated back to %s", self.current_url)
        return self.current_url
