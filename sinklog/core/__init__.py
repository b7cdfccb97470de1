"""Core functionality package."""

from .exceptions import (
    DataStoreInputError,
    InvalidLoggerNameError,
    InvalidLogLevelError,
    LoggerError,
)
from .logging import configure_default_logging, get_logger, setup_logging

__all__ = [
    "DataStoreInputError",
    "InvalidLogLevelError",
    "InvalidLoggerNameError",
    "LoggerError",
    "configure_default_logging",
    "get_logger",
    "setup_logging",
]
