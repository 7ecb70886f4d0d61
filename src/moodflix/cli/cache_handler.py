"""Cache command handlers for Moodflix CLI."""

from __future__ import annotations

import logging

from rich.console import Console

from moodflix.cli.common.context import get_cli_context
from moodflix.cli.common.error_handler import handle_cli_errors
from moodflix.cli.helpers.display import display_cache_entries
from moodflix.cli.json_formatter import encode_envelope, write_envelope
from moodflix.config import Settings, get_config
from moodflix.services import PageCache
from moodflix.shared.constants import CLICommands, CLIDefaults, CLIMessages
from moodflix.storage import JsonFileStorage

logger = logging.getLogger(__name__)


def _open_cache(settings: Settings) -> PageCache:
    return PageCache(JsonFileStorage(settings.storage.local_path))


@handle_cli_errors(f"{CLICommands.CACHE} {CLICommands.CACHE_LIST}")
def handle_cache_list_command(*, console: Console | None = None) -> int:
    console = console or Console()
    entries = _open_cache(get_config()).entries()

    if get_cli_context().is_json_output_enabled():
        data = {"entries": [{"mood": mood, "page": page} for mood, page in entries]}
        write_envelope(encode_envelope(CLICommands.CACHE_LIST, data=data))
    elif entries:
        display_cache_entries(entries, console)
    else:
        console.print(CLIMessages.CACHE_EMPTY)
    return CLIDefaults.EXIT_SUCCESS


@handle_cli_errors(f"{CLICommands.CACHE} {CLICommands.CACHE_CLEAR}")
def handle_cache_clear_command(*, console: Console | None = None) -> int:
    console = console or Console()
    removed = _open_cache(get_config()).clear()
    logger.info("Cleared %d cached pages", removed)

    if get_cli_context().is_json_output_enabled():
        write_envelope(
            encode_envelope(CLICommands.CACHE_CLEAR, data={"removed": removed})
        )
    else:
        console.print(CLIMessages.CACHE_CLEARED.format(count=removed))
    return CLIDefaults.EXIT_SUCCESS
