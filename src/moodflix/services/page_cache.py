"""Persistent (mood, page) -> PageResult cache.

Entries are written after every successful fetch and are never expired or
invalidated; they disappear only when the underlying storage is cleared.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError as PydanticValidationError

from moodflix.shared.constants import StorageKeys
from moodflix.shared.models import PageResult
from moodflix.storage import StoragePort

logger = logging.getLogger(__name__)


class PageCache:
    """Read-through cache of raw page results keyed by mood and page."""

    def __init__(self, storage: StoragePort) -> None:
        self.storage = storage

    @staticmethod
    def key(mood: str, page: int) -> str:
        """Storage key of one entry.

        Example:
            >>> PageCache.key("happy", 2)
            'movies_happy_2'
        """
        return StorageKeys.CACHE_KEY_TEMPLATE.format(mood=mood, page=page)

    @staticmethod
    def parse_key(key: str) -> tuple[str, int] | None:
        """Split a storage key back into (mood, page), or None for other keys."""
        if not key.startswith(StorageKeys.CACHE_PREFIX):
            return None
        mood, sep, page = key[len(StorageKeys.CACHE_PREFIX) :].rpartition("_")
        if not sep or not mood or not page.isdigit():
            return None
        return mood, int(page)

    def get(self, mood: str, page: int) -> PageResult | None:
        raw = self.storage.get(self.key(mood, page))
        if raw is None:
            return None
        try:
            return PageResult.model_validate_json(raw)
        except PydanticValidationError:
            logger.warning("Discarding unreadable cache entry for (%s, %d)", mood, page)
            self.storage.remove(self.key(mood, page))
            return None

    def put(self, mood: str, page: int, result: PageResult) -> None:
        self.storage.set(self.key(mood, page), result.model_dump_json())
        logger.debug("Cached page %d for mood '%s'", page, mood)

    def entries(self) -> list[tuple[str, int]]:
        """All cached (mood, page) pairs, sorted."""
        parsed = (self.parse_key(key) for key in self.storage.keys())
        return sorted(entry for entry in parsed if entry is not None)

    def clear(self) -> int:
        """Remove every cache entry; other keys are kept. Returns the count removed."""
        removed = 0
        for key in list(self.storage.keys()):
            if self.parse_key(key) is not None:
                self.storage.remove(key)
                removed += 1
        return removed
