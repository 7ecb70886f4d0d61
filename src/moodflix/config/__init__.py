"""Configuration for Moodflix."""

from moodflix.config.settings import (
    APISettings,
    LoggingSettings,
    Settings,
    StorageSettings,
    get_config,
    load_settings,
    reset_config,
)

__all__ = [
    "APISettings",
    "LoggingSettings",
    "Settings",
    "StorageSettings",
    "get_config",
    "load_settings",
    "reset_config",
]
