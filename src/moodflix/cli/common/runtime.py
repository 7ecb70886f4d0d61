"""Wiring of services for CLI commands."""

from __future__ import annotations

from dataclasses import dataclass

import aiohttp

from moodflix.config import Settings
from moodflix.services import (
    DetailLoader,
    HealthProbe,
    HttpClient,
    NavigationStateBridge,
    Navigator,
    PageCache,
    RecommendationApi,
    SearchCoordinator,
)
from moodflix.shared.constants import StorageKeys
from moodflix.storage import InMemoryStorage, JsonFileStorage, StoragePort


@dataclass
class Runtime:
    """Everything a command needs, built from one Settings instance."""

    settings: Settings
    client: HttpClient
    health: HealthProbe
    api: RecommendationApi
    local_storage: StoragePort
    session_storage: StoragePort
    cache: PageCache
    navigator: Navigator
    coordinator: SearchCoordinator
    bridge: NavigationStateBridge
    details: DetailLoader

    @property
    def selected_mood(self) -> str:
        return self.local_storage.get(StorageKeys.SELECTED_MOOD) or ""

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self) -> Runtime:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


def build_runtime(
    settings: Settings,
    *,
    local_storage: StoragePort | None = None,
    session_storage: StoragePort | None = None,
    http_session: aiohttp.ClientSession | None = None,
) -> Runtime:
    """Build the service graph.

    Args:
        settings: Loaded settings
        local_storage: Long-lived store; defaults to the JSON file from settings
        session_storage: Session store; defaults to an in-memory store
        http_session: Optional aiohttp session shared with the caller
    """
    if local_storage is None:
        local_storage = JsonFileStorage(settings.storage.local_path)
    if session_storage is None:
        session_storage = InMemoryStorage()

    client = HttpClient(
        settings.api.base_url,
        timeout_ms=settings.api.timeout_ms,
        session=http_session,
    )
    health = HealthProbe(client)
    api = RecommendationApi(client)
    cache = PageCache(local_storage)
    navigator = Navigator()

    return Runtime(
        settings=settings,
        client=client,
        health=health,
        api=api,
        local_storage=local_storage,
        session_storage=session_storage,
        cache=cache,
        navigator=navigator,
        coordinator=SearchCoordinator(api, health, cache, local_storage, navigator),
        bridge=NavigationStateBridge(session_storage),
        details=DetailLoader(api, health, settings.api.image_base_url),
    )
