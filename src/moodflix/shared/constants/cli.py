"""
CLI Configuration Constants

This module contains all constants related to command-line interface
configuration, default values, and user interaction settings.
"""


class CLIDefaults:
    """CLI default values and exit codes."""

    VERSION = "0.1.0"
    EXIT_SUCCESS = 0
    EXIT_ERROR = 1
    EXIT_VALIDATION_ERROR = 2
    EXIT_SERVICE_ERROR = 3


class CLICommands:
    """CLI command names."""

    HEALTH = "health"
    SEARCH = "search"
    MOVIE = "movie"
    BROWSE = "browse"
    CACHE = "cache"
    CACHE_LIST = "list"
    CACHE_CLEAR = "clear"


class BrowseCommands:
    """Commands accepted by the interactive browse session."""

    MORE = "more"
    OPEN = "open"
    BACK = "back"
    SEARCH = "search"
    HELP = "help"
    QUIT = "quit"


class CLIHelp:
    """CLI help text constants."""

    APP_NAME = "moodflix"
    APP_DESCRIPTION = "Type a mood, get movies: a client for the mood recommendation service."
    APP_STYLE = "rich"
    VERSION_TEXT = "Moodflix v{version}"

    HEALTH_HELP = "Check whether the recommendation service is reachable."
    SEARCH_HELP = "Search movies for a mood and print the results."
    SEARCH_MOOD_HELP = "Free-text mood, e.g. 'happy' or 'rainy sunday'."
    SEARCH_PAGES_HELP = "Number of result pages to accumulate."
    MOVIE_HELP = "Show full details for one movie."
    MOVIE_ID_HELP = "Numeric movie id as returned by a search."
    MOVIE_MOOD_HELP = "Mood to remember for the way back to the list."
    BROWSE_HELP = "Interactive list/detail session with load-more and back navigation."
    CACHE_HELP = "Inspect or clear the persisted page cache."
    CACHE_LIST_HELP = "List cached (mood, page) entries."
    CACHE_CLEAR_HELP = "Remove every cached page result."
    CONFIG_HELP = "Path to a TOML configuration file."

    BROWSE_USAGE = (
        "Commands: [bold]more[/bold] · [bold]open <id>[/bold] · [bold]back[/bold] · "
        "[bold]search <mood>[/bold] · [bold]help[/bold] · [bold]quit[/bold]"
    )


class CLIMessages:
    """CLI message templates."""

    SERVICE_HEALTHY = "[green]Recommendation service is up[/green] ({url})"
    SERVICE_UNHEALTHY = "[red]Recommendation service is unavailable[/red] ({url})"
    NO_MORE_PAGES = "[dim]No more pages to load.[/dim]"
    NO_RESULTS = "No movies found for mood '{mood}'."
    CACHE_EMPTY = "[dim]The page cache is empty.[/dim]"
    CACHE_CLEARED = "[green]Removed {count} cached page(s).[/green]"
    PROMPT_MOOD = "How are you feeling?"
    PROMPT_COMMAND = "moodflix"
    UNKNOWN_COMMAND = "[yellow]Unknown command.[/yellow] Type 'help'."
    NOTHING_TO_GO_BACK_TO = "[dim]Already on the list view.[/dim]"
    LIST_ONLY = "[dim]Go back to the list first.[/dim]"
    BROWSE_START = "[dim]Type 'search <mood>' to find movies.[/dim]"
    RETRY_RELOAD = "Try again in a moment."
    RETRY_GO_HOME = "Go back to the list and pick another movie."
    RETRY_EDIT_QUERY = "Type a mood and search again."
    INTERRUPTED = "Command interrupted by user"
