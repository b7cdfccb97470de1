"""Leveled console and per-process file logging."""

from sinklog.core.exceptions import (
    DataStoreInputError,
    InvalidLoggerNameError,
    InvalidLogLevelError,
    LoggerError,
)
from sinklog.logger import HostFacts, LogColor, Logger, LoggingContext, LogLevel

__all__ = [
    "DataStoreInputError",
    "HostFacts",
    "InvalidLogLevelError",
    "InvalidLoggerNameError",
    "LogColor",
    "LogLevel",
    "Logger",
    "LoggerError",
    "LoggingContext",
]
