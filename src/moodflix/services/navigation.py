"""Navigation state bridge.

Captures the list view (mood, accumulated movies, pagination cursor and
scroll offset) before the user opens a detail view, and restores it exactly
once when the list view mounts again.
"""

from __future__ import annotations

import logging
from typing import Protocol

from pydantic import ValidationError as PydanticValidationError

from moodflix.shared.constants import StorageKeys
from moodflix.shared.models import ListState
from moodflix.storage import StoragePort

logger = logging.getLogger(__name__)


class ScrollableView(Protocol):
    """Anything that can be scrolled to a vertical offset."""

    def scroll_to(self, offset: int) -> None: ...


class NavigationStateBridge:
    """One-shot snapshot/restore of the list view.

    Args:
        session_storage: Short-lived store scoped to one browsing session
    """

    def __init__(self, session_storage: StoragePort) -> None:
        self.session_storage = session_storage
        self._pending_scroll: int | None = None

    @property
    def pending_scroll(self) -> int | None:
        """Scroll offset waiting for the next render, if any."""
        return self._pending_scroll

    def has_snapshot(self) -> bool:
        return self.session_storage.get(StorageKeys.LIST_SNAPSHOT) is not None

    def snapshot(self, state: ListState, scroll_offset: int = 0) -> ListState:
        """Persist the list view state and its scroll offset.

        Args:
            state: Current list view state
            scroll_offset: Vertical scroll offset of the list view

        Returns:
            The state that was written
        """
        self.session_storage.set(StorageKeys.LIST_SNAPSHOT, state.to_json())
        self.session_storage.set(StorageKeys.LIST_SCROLL, str(max(scroll_offset, 0)))
        logger.debug(
            "Saved list snapshot for mood '%s' (%d movies, page %d/%d, scroll %d)",
            state.mood,
            len(state.movies),
            state.current_page,
            state.total_pages,
            scroll_offset,
        )
        return state

    def restore(self) -> ListState | None:
        """Consume the snapshot written by ``snapshot()``.

        Both the snapshot and the scroll record are deleted whether or not
        they could be read. The scroll offset is held until ``after_render``.

        Returns:
            The saved state, or None when there is no readable snapshot
        """
        raw = self.session_storage.get(StorageKeys.LIST_SNAPSHOT)
        raw_scroll = self.session_storage.get(StorageKeys.LIST_SCROLL)
        self.session_storage.remove(StorageKeys.LIST_SNAPSHOT)
        self.session_storage.remove(StorageKeys.LIST_SCROLL)

        if raw is None:
            return None

        try:
            state = ListState.from_json(raw)
        except PydanticValidationError:
            logger.warning("Discarding unreadable list snapshot")
            return None

        self._pending_scroll = _parse_offset(raw_scroll)
        logger.debug("Restored list snapshot for mood '%s'", state.mood)
        return state

    def discard(self) -> None:
        """Drop any saved snapshot and pending scroll without restoring."""
        self.session_storage.remove(StorageKeys.LIST_SNAPSHOT)
        self.session_storage.remove(StorageKeys.LIST_SCROLL)
        self._pending_scroll = None

    def after_render(self, view: ScrollableView) -> bool:
        """Apply the restored scroll offset to a rendered view.

        Returns:
            True if an offset was applied; later calls are no-ops
        """
        if self._pending_scroll is None:
            return False
        offset, self._pending_scroll = self._pending_scroll, None
        view.scroll_to(offset)
        return True


def _parse_offset(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return max(int(raw), 0)
    except ValueError:
        return None
