"""Tests for the navigation state bridge."""

from __future__ import annotations

from conftest import make_page

from moodflix.services import NavigationStateBridge
from moodflix.shared.constants import StorageKeys
from moodflix.shared.models import ListState
from moodflix.storage import InMemoryStorage


class RecordingView:
    def __init__(self) -> None:
        self.offsets: list[int] = []

    def scroll_to(self, offset: int) -> None:
        self.offsets.append(offset)


def _state() -> ListState:
    return ListState(
        mood="happy",
        movies=make_page([1, 2, 3]).recommendations,
        current_page=1,
        total_pages=3,
    )


class TestSnapshot:
    def test_writes_snapshot_and_scroll_keys(
        self,
        bridge: NavigationStateBridge,
        session_storage: InMemoryStorage,
    ) -> None:
        bridge.snapshot(_state(), scroll_offset=120)

        raw = session_storage.get(StorageKeys.LIST_SNAPSHOT)
        assert raw is not None
        assert '"currentPage":1' in raw
        assert '"totalPages":3' in raw
        assert session_storage.get(StorageKeys.LIST_SCROLL) == "120"

    def test_negative_offset_stored_as_zero(
        self,
        bridge: NavigationStateBridge,
        session_storage: InMemoryStorage,
    ) -> None:
        bridge.snapshot(_state(), scroll_offset=-5)

        assert session_storage.get(StorageKeys.LIST_SCROLL) == "0"


class TestRestore:
    def test_returns_none_without_snapshot(self, bridge: NavigationStateBridge) -> None:
        assert bridge.restore() is None
        assert bridge.pending_scroll is None

    def test_restore_is_one_shot(
        self,
        bridge: NavigationStateBridge,
        session_storage: InMemoryStorage,
    ) -> None:
        # Given
        bridge.snapshot(_state(), scroll_offset=7)

        # When
        first = bridge.restore()
        second = bridge.restore()

        # Then
        assert first == _state()
        assert second is None
        assert StorageKeys.LIST_SNAPSHOT not in session_storage
        assert StorageKeys.LIST_SCROLL not in session_storage

    def test_corrupt_snapshot_is_discarded(
        self,
        bridge: NavigationStateBridge,
        session_storage: InMemoryStorage,
    ) -> None:
        session_storage.set(StorageKeys.LIST_SNAPSHOT, "{not json")
        session_storage.set(StorageKeys.LIST_SCROLL, "10")

        assert bridge.restore() is None
        assert bridge.pending_scroll is None
        assert len(session_storage) == 0

    def test_unreadable_scroll_is_ignored(
        self,
        bridge: NavigationStateBridge,
        session_storage: InMemoryStorage,
    ) -> None:
        session_storage.set(StorageKeys.LIST_SNAPSHOT, _state().to_json())
        session_storage.set(StorageKeys.LIST_SCROLL, "top")

        assert bridge.restore() == _state()
        assert bridge.pending_scroll is None

    def test_snapshot_survives_a_new_bridge(self, session_storage: InMemoryStorage) -> None:
        NavigationStateBridge(session_storage).snapshot(_state(), scroll_offset=3)

        restored = NavigationStateBridge(session_storage).restore()

        assert restored == _state()


class TestAfterRender:
    def test_scroll_applied_once_after_render(self, bridge: NavigationStateBridge) -> None:
        # Given
        view = RecordingView()
        bridge.snapshot(_state(), scroll_offset=250)
        bridge.restore()

        # When
        applied = bridge.after_render(view)
        applied_again = bridge.after_render(view)

        # Then
        assert applied is True
        assert applied_again is False
        assert view.offsets == [250]

    def test_nothing_to_apply_without_restore(self, bridge: NavigationStateBridge) -> None:
        view = RecordingView()
        bridge.snapshot(_state(), scroll_offset=250)

        assert bridge.after_render(view) is False
        assert view.offsets == []

    def test_discard_drops_snapshot_and_pending_scroll(
        self,
        bridge: NavigationStateBridge,
        session_storage: InMemoryStorage,
    ) -> None:
        bridge.snapshot(_state(), scroll_offset=9)
        bridge.discard()

        assert bridge.has_snapshot() is False
        assert bridge.restore() is None
        assert len(session_storage) == 0
