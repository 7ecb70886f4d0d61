"""Storage port and its backends."""

from moodflix.storage.base import StoragePort
from moodflix.storage.file import JsonFileStorage
from moodflix.storage.memory import InMemoryStorage

__all__ = ["InMemoryStorage", "JsonFileStorage", "StoragePort"]
