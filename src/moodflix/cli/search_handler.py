"""Search command handler for Moodflix CLI."""

from __future__ import annotations

import asyncio
import logging

from rich.console import Console

from moodflix.cli.common.context import get_cli_context
from moodflix.cli.common.error_handler import handle_cli_errors
from moodflix.cli.common.runtime import build_runtime
from moodflix.cli.helpers.display import collect_list_data, display_movie_list
from moodflix.cli.json_formatter import encode_envelope, write_envelope
from moodflix.config import Settings, get_config
from moodflix.shared.constants import CLICommands, CLIDefaults, CLIMessages
from moodflix.shared.models import ListState

logger = logging.getLogger(__name__)


async def run_search(settings: Settings, mood: str, pages: int = 1) -> ListState:
    """Search for a mood and keep loading until ``pages`` pages are accumulated."""
    async with build_runtime(settings) as runtime:
        coordinator = runtime.coordinator
        await coordinator.submit(mood)
        while coordinator.current_page < pages:
            if await coordinator.load_more() is None:
                break
        return coordinator.to_list_state()


@handle_cli_errors(CLICommands.SEARCH)
def handle_search_command(mood: str, pages: int = 1, *, console: Console | None = None) -> int:
    """Handle the search command.

    Args:
        mood: Free-text mood
        pages: Number of pages to accumulate
        console: Rich console for output
    """
    console = console or Console()
    state = asyncio.run(run_search(get_config(), mood, pages))
    warnings = [] if state.movies else [CLIMessages.NO_RESULTS.format(mood=state.mood)]

    if get_cli_context().is_json_output_enabled():
        write_envelope(
            encode_envelope(
                CLICommands.SEARCH,
                data=collect_list_data(
                    state.movies,
                    mood=state.mood,
                    current_page=state.current_page,
                    total_pages=state.total_pages,
                ),
                warnings=warnings,
            )
        )
    else:
        display_movie_list(
            state.movies,
            console,
            mood=state.mood,
            current_page=state.current_page,
            total_pages=state.total_pages,
        )

    logger.info("Search for '%s' returned %d movies", state.mood, len(state.movies))
    return CLIDefaults.EXIT_SUCCESS
