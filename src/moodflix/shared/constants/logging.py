"""
Logging Configuration Constants

This module contains all constants related to logging configuration,
log levels, and log formatting.
"""

import logging


class LogLevels:
    """Log level constants."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    DEFAULT = WARNING


class LogConfig:
    """Log configuration constants."""

    LOGGER_NAME = "moodflix"
    DEFAULT_LEVEL = "WARNING"
    DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    DEFAULT_FILE = ""
    DEFAULT_ENCODING = "utf-8"
    TIME_FORMAT = "[%H:%M:%S]"


class LogContextKeys:
    """Keys used in structured log `extra` payloads."""

    ERROR_CODE = "error_code"
    CONTEXT = "context"
    OPERATION = "operation"
    DURATION_MS = "duration_ms"
    RESULT_INFO = "result_info"
