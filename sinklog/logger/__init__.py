"""Console and file logger."""

from sinklog.logger.colors import LogColor
from sinklog.logger.context import LoggingContext
from sinklog.logger.formatting import HostFacts
from sinklog.logger.levels import LogLevel
from sinklog.logger.logger import Logger

__all__ = ["HostFacts", "LogColor", "LogLevel", "Logger", "LoggingContext"]
