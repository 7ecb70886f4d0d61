"""
Persisted State Layout Constants

Key names for the session-scoped snapshot store and the longer-lived
query-result cache. These form a contract with any existing storage,
so they must not change.
"""


class StorageKeys:
    """Storage key names and patterns."""

    CACHE_PREFIX = "movies_"
    CACHE_KEY_TEMPLATE = "movies_{mood}_{page}"
    SELECTED_MOOD = "selectedMood"
    LIST_SNAPSHOT = "listViewSnapshot"
    LIST_SCROLL = "listViewScroll"


class StorageDefaults:
    """Default locations for file-backed stores."""

    DIRECTORY = "~/.moodflix"
    LOCAL_FILE = "local.json"
    SESSION_FILE = "session.json"
    ENCODING = "utf-8"
