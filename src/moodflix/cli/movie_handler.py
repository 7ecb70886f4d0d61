"""Movie detail command handler for Moodflix CLI."""

from __future__ import annotations

import asyncio
import logging

from rich.console import Console

from moodflix.cli.common.context import get_cli_context
from moodflix.cli.common.error_handler import handle_cli_errors
from moodflix.cli.common.runtime import build_runtime
from moodflix.cli.helpers.display import display_movie_details
from moodflix.cli.json_formatter import encode_envelope, write_envelope
from moodflix.config import Settings, get_config
from moodflix.services import list_url
from moodflix.shared.constants import CLICommands, CLIDefaults, StorageKeys
from moodflix.shared.models import MovieDetails

logger = logging.getLogger(__name__)


async def fetch_details(settings: Settings, movie_id: str, mood: str | None = None) -> MovieDetails:
    """Load one movie; a given mood is remembered for the way back to the list."""
    async with build_runtime(settings) as runtime:
        if mood:
            runtime.local_storage.set(StorageKeys.SELECTED_MOOD, mood)
        return await runtime.details.load(movie_id)


@handle_cli_errors(CLICommands.MOVIE)
def handle_movie_command(
    movie_id: str,
    mood: str | None = None,
    *,
    console: Console | None = None,
) -> int:
    """Handle the movie command."""
    console = console or Console()
    settings = get_config()
    details = asyncio.run(fetch_details(settings, movie_id, mood))

    if get_cli_context().is_json_output_enabled():
        data = details.model_dump(mode="json")
        data["back_url"] = list_url(mood or "")
        write_envelope(encode_envelope(CLICommands.MOVIE, data=data))
    else:
        display_movie_details(details, console, settings.api.image_base_url)

    return CLIDefaults.EXIT_SUCCESS
