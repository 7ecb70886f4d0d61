"""Interactive browse session for Moodflix CLI.

A terminal stand-in for the list and detail views: the list view loads more
pages on demand, opening a movie snapshots the list, and going back restores
it (results, pagination and row position) from the snapshot.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from rich.console import Console
from rich.prompt import Prompt

from moodflix.cli.common.error_handler import handle_cli_errors
from moodflix.cli.common.runtime import Runtime, build_runtime
from moodflix.cli.helpers.display import TerminalListView, display_error, display_movie_details
from moodflix.config import Settings, get_config
from moodflix.services import MountSource, detail_url, list_url
from moodflix.shared.constants import (
    BrowseCommands,
    CLICommands,
    CLIDefaults,
    CLIHelp,
    CLIMessages,
)
from moodflix.shared.error_handling import to_error_view
from moodflix.storage import JsonFileStorage

logger = logging.getLogger(__name__)

Prompter = Callable[[str], str]


class BrowseSession:
    """Command loop over one runtime.

    Args:
        runtime: Wired services; its session storage holds the list snapshot
        console: Rich console for output
        prompt: Reads one line of input; defaults to ``rich.prompt.Prompt``
    """

    def __init__(self, runtime: Runtime, console: Console, prompt: Prompter | None = None) -> None:
        self.runtime = runtime
        self.console = console
        self.prompt = prompt or (lambda label: Prompt.ask(label, console=console))
        self.view = TerminalListView(console)

    @property
    def on_detail(self) -> bool:
        return self.runtime.navigator.route.is_detail

    async def start(self, mood: str = "") -> None:
        self.console.print(CLIHelp.BROWSE_USAGE)
        self.runtime.navigator.replace(list_url(mood or self.runtime.selected_mood))
        await self._guarded(self._mount())

    async def run(self) -> None:
        while True:
            try:
                line = self.prompt(CLIMessages.PROMPT_COMMAND)
            except EOFError:
                break
            if not await self.handle(line):
                break

    async def handle(self, line: str) -> bool:
        """Execute one command line. Returns False when the session should end."""
        command, _, argument = line.strip().partition(" ")
        command = command.lower()
        argument = argument.strip()

        if not command:
            return True
        if command == BrowseCommands.QUIT:
            return False

        if command == BrowseCommands.HELP:
            self.console.print(CLIHelp.BROWSE_USAGE)
        elif command == BrowseCommands.MORE:
            await self._guarded(self._more())
        elif command == BrowseCommands.OPEN:
            await self._guarded(self._open(argument))
        elif command == BrowseCommands.BACK:
            await self._guarded(self._back())
        elif command == BrowseCommands.SEARCH:
            await self._guarded(self._search(argument))
        else:
            self.console.print(CLIMessages.UNKNOWN_COMMAND)
        return True

    async def _guarded(self, action: Awaitable[None]) -> None:
        try:
            await action
        except Exception as e:  # noqa: BLE001
            display_error(to_error_view(e), self.console)

    async def _mount(self) -> None:
        coordinator = self.runtime.coordinator
        source = await coordinator.mount(self.runtime.navigator.route.mood, self.runtime.bridge)
        logger.debug("List view mounted from %s", source.value)
        if source is MountSource.NONE:
            self.console.print(CLIMessages.BROWSE_START)
            return
        self._render_list()
        self.runtime.bridge.after_render(self.view)

    def _render_list(self) -> None:
        coordinator = self.runtime.coordinator
        self.view.render(
            coordinator.movies,
            mood=coordinator.mood,
            current_page=coordinator.current_page,
            total_pages=coordinator.total_pages,
        )

    async def _search(self, mood: str) -> None:
        if not mood:
            mood = self.prompt(CLIMessages.PROMPT_MOOD)
        if self.on_detail:
            self.runtime.bridge.discard()
            self.runtime.navigator.push(list_url())
        self.view.offset = 0
        await self.runtime.coordinator.submit(mood)
        self._render_list()

    async def _more(self) -> None:
        if self.on_detail:
            self.console.print(CLIMessages.LIST_ONLY)
            return
        coordinator = self.runtime.coordinator
        page = await coordinator.load_more()
        if page is None:
            self.console.print(CLIMessages.NO_MORE_PAGES)
            return
        self.view.offset = len(coordinator.movies) - len(page.recommendations)
        self._render_list()

    async def _open(self, movie_id: str) -> None:
        coordinator = self.runtime.coordinator
        if not self.on_detail:
            self.view.offset = self.view.row_of(coordinator.movies, movie_id)
            self.runtime.bridge.snapshot(coordinator.to_list_state(), self.view.offset)
        self.runtime.navigator.push(detail_url(movie_id, coordinator.mood))
        await self._show_details(movie_id)

    async def _show_details(self, movie_id: str) -> None:
        details = await self.runtime.details.load(movie_id)
        display_movie_details(details, self.console, self.runtime.settings.api.image_base_url)

    async def _back(self) -> None:
        if not self.on_detail:
            self.console.print(CLIMessages.NOTHING_TO_GO_BACK_TO)
            return
        navigator = self.runtime.navigator
        if navigator.back() is None:
            navigator.replace(list_url(navigator.route.mood))
        route = navigator.route
        if route.is_detail:
            await self._show_details(route.movie_id)
        else:
            await self._mount()


async def run_browse(
    settings: Settings,
    mood: str,
    console: Console,
    prompt: Prompter | None = None,
) -> None:
    session_storage = JsonFileStorage(settings.storage.session_path)
    async with build_runtime(settings, session_storage=session_storage) as runtime:
        session = BrowseSession(runtime, console, prompt)
        await session.start(mood)
        await session.run()


@handle_cli_errors(CLICommands.BROWSE)
def handle_browse_command(
    mood: str = "",
    *,
    console: Console | None = None,
    prompt: Prompter | None = None,
) -> int:
    """Handle the browse command."""
    console = console or Console()
    asyncio.run(run_browse(get_config(), mood, console, prompt))
    return CLIDefaults.EXIT_SUCCESS
