"""Search/pagination coordinator.

Drives a mood search as an explicit state machine:

    IDLE --submit--> SEARCHING --ok--> READY(page=1)
                               --err-> FAILED (results cleared)
    READY(k) --load_more--> SEARCHING --ok--> READY(k+1)
                                      --err-> FAILED (results kept)

Every fetched page is written to the page cache under (mood, page). The
health probe gates the first network search of a session.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import ValidationError as PydanticValidationError

from moodflix.services.api import RecommendationApi
from moodflix.services.health import HealthProbe
from moodflix.services.navigation import NavigationStateBridge
from moodflix.services.page_cache import PageCache
from moodflix.services.routes import Navigator, list_url
from moodflix.shared.constants import StorageKeys
from moodflix.shared.error_handling import describe_error
from moodflix.shared.errors import (
    ErrorContext,
    ServiceUnavailableError,
    create_validation_error,
)
from moodflix.shared.logging import log_operation_error
from moodflix.shared.models import ListState, MovieSummary, PageResult, SearchQuery
from moodflix.storage import StoragePort

logger = logging.getLogger(__name__)

EMPTY_MOOD_MESSAGE = "Please enter a mood"


class SearchStatus(str, Enum):
    """States of the search coordinator."""

    IDLE = "idle"
    SEARCHING = "searching"
    READY = "ready"
    FAILED = "failed"


class MountSource(str, Enum):
    """Where the list view got its content from on mount."""

    SNAPSHOT = "snapshot"
    CACHE = "cache"
    NETWORK = "network"
    NONE = "none"


class SearchCoordinator:
    """Fetches pages for a mood and accumulates them in order.

    Args:
        api: Recommendation service facade
        health: Liveness probe run before the first search of the session
        cache: Persistent (mood, page) page cache
        preferences: Long-lived store for the last searched mood
        navigator: Optional navigator whose URL tracks the searched mood
    """

    def __init__(
        self,
        api: RecommendationApi,
        health: HealthProbe,
        cache: PageCache,
        preferences: StoragePort,
        navigator: Navigator | None = None,
    ) -> None:
        self.api = api
        self.health = health
        self.cache = cache
        self.preferences = preferences
        self.navigator = navigator

        self.status = SearchStatus.IDLE
        self.mood = ""
        self.movies: list[MovieSummary] = []
        self.current_page = 0
        self.total_pages = 0
        self.error_message: str | None = None

        self._service_verified = False
        self._loading_more = False
        # bumped whenever the result list is replaced
        self._generation = 0

    @property
    def can_load_more(self) -> bool:
        return self.current_page < self.total_pages and not self._loading_more

    @property
    def is_loading_more(self) -> bool:
        return self._loading_more

    async def submit(self, mood: str) -> PageResult:
        """Start a new search for mood and show its first page.

        Raises:
            ValidationError: If the mood is empty after stripping
            ServiceUnavailableError: If the health probe fails
            MoodflixError: Any error from the recommendation service
        """
        try:
            query = SearchQuery(mood=mood, page=1)
        except PydanticValidationError as e:
            error = create_validation_error(EMPTY_MOOD_MESSAGE, field="mood", operation="submit")
            error.original_error = e
            raise error from e

        self._generation += 1
        self.status = SearchStatus.SEARCHING
        self.error_message = None
        try:
            await self._ensure_service_available(query.mood)
            page = await self.api.recommend(query)
        except Exception as e:
            self._fail(e, keep_results=False)
            raise

        self._replace_results(query.mood, page)
        self.cache.put(query.mood, query.page, page)
        self.preferences.set(StorageKeys.SELECTED_MOOD, query.mood)
        if self.navigator is not None:
            self.navigator.replace(list_url(query.mood))

        self.status = SearchStatus.READY
        logger.info(
            "Search for '%s' ready: %d movies, page %d/%d",
            self.mood,
            len(self.movies),
            self.current_page,
            self.total_pages,
        )
        return page

    async def load_more(self) -> PageResult | None:
        """Fetch the next page and append it.

        Returns:
            The fetched page, or None when there is nothing more to load or a
            load-more is already in flight (no request is made). A page that
            arrives after a new search replaced the results is cached but not
            appended, and None is returned

        Raises:
            MoodflixError: Any error from the recommendation service; the
                results accumulated so far are kept
        """
        if not self.can_load_more:
            return None

        query = SearchQuery(mood=self.mood, page=self.current_page + 1)
        generation = self._generation
        self._loading_more = True
        self.status = SearchStatus.SEARCHING
        self.error_message = None
        try:
            page = await self.api.recommend(query)
        except Exception as e:
            if generation != self._generation:
                logger.debug("Dropping failed page %d of superseded search '%s'", query.page, query.mood)
                return None
            self._fail(e, keep_results=True)
            raise
        finally:
            self._loading_more = False

        if generation != self._generation:
            self.cache.put(query.mood, query.page, page)
            logger.debug("Dropping page %d of superseded search '%s'", query.page, query.mood)
            return None

        self.movies.extend(page.recommendations)
        self._set_cursor(page.current_page, page.total_pages)
        self.cache.put(query.mood, query.page, page)
        self.status = SearchStatus.READY
        logger.debug("Loaded page %d/%d for '%s'", self.current_page, self.total_pages, self.mood)
        return page

    async def mount(self, url_mood: str, bridge: NavigationStateBridge) -> MountSource:
        """Populate the list view when it is (re)entered.

        Tries, in order: the one-shot navigation snapshot, the page cache for
        the mood in the URL, then a fresh search.
        """
        snapshot = bridge.restore()
        mood = url_mood.strip()
        if snapshot is not None:
            if not mood or snapshot.mood == mood:
                self.hydrate(snapshot)
                return MountSource.SNAPSHOT
            logger.debug("Ignoring list snapshot for mood '%s'", snapshot.mood)
            bridge.discard()

        if not mood:
            return MountSource.NONE

        if self._read_through(mood):
            return MountSource.CACHE

        await self.submit(mood)
        return MountSource.NETWORK

    def hydrate(self, state: ListState) -> None:
        """Replace the coordinator state with a saved list state."""
        self._generation += 1
        self.mood = state.mood
        self.movies = list(state.movies)
        self._set_cursor(state.current_page, state.total_pages)
        self.error_message = None
        self.status = SearchStatus.READY

    def to_list_state(self) -> ListState:
        return ListState(
            mood=self.mood,
            movies=list(self.movies),
            current_page=self.current_page,
            total_pages=self.total_pages,
        )

    def _read_through(self, mood: str) -> bool:
        first = self.cache.get(mood, 1)
        if first is None:
            return False

        self._replace_results(mood, first)
        next_page = self.current_page + 1
        while next_page <= self.total_pages:
            cached = self.cache.get(mood, next_page)
            if cached is None:
                break
            self.movies.extend(cached.recommendations)
            self._set_cursor(next_page, cached.total_pages)
            next_page += 1

        self.preferences.set(StorageKeys.SELECTED_MOOD, mood)
        self.status = SearchStatus.READY
        logger.debug("Restored '%s' from cache up to page %d", mood, self.current_page)
        return True

    async def _ensure_service_available(self, mood: str) -> None:
        if self._service_verified:
            return
        if not await self.health.check():
            error = ServiceUnavailableError(
                context=ErrorContext(operation="submit", additional_data={"mood": mood}),
            )
            log_operation_error(logger=logger, error=error)
            raise error
        self._service_verified = True

    def _replace_results(self, mood: str, page: PageResult) -> None:
        self._generation += 1
        self.mood = mood
        self.movies = list(page.recommendations)
        self._set_cursor(page.current_page, page.total_pages)

    def _set_cursor(self, current_page: int, total_pages: int) -> None:
        # the server may report fewer pages than the one it just served
        self.current_page = current_page
        self.total_pages = max(total_pages, current_page)

    def _fail(self, error: Exception, *, keep_results: bool) -> None:
        self.status = SearchStatus.FAILED
        self.error_message = describe_error(error)
        if not keep_results:
            self.movies = []
            self.current_page = 0
            self.total_pages = 0
