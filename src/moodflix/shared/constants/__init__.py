"""
Moodflix Constants Module

This module provides centralized constants for the Moodflix client.
All magic values (endpoints, storage keys, timeouts, CLI texts) are
defined here to keep a single source of truth.
"""

from .api import APIConfig, Endpoints, ErrorBodyFields, ImageConfig, VideoConfig
from .cli import BrowseCommands, CLICommands, CLIDefaults, CLIHelp, CLIMessages
from .http_codes import ContentTypes, HTTPMethods, HTTPStatusCodes
from .logging import LogConfig, LogContextKeys, LogLevels
from .routes import QueryParams, RoutePaths
from .storage import StorageDefaults, StorageKeys

__all__ = [
    "APIConfig",
    "BrowseCommands",
    "CLICommands",
    "CLIDefaults",
    "CLIHelp",
    "CLIMessages",
    "ContentTypes",
    "Endpoints",
    "ErrorBodyFields",
    "HTTPMethods",
    "HTTPStatusCodes",
    "ImageConfig",
    "LogConfig",
    "LogContextKeys",
    "LogLevels",
    "QueryParams",
    "RoutePaths",
    "StorageDefaults",
    "StorageKeys",
    "VideoConfig",
]
