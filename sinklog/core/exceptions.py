"""Exceptions raised by sinklog."""


class LoggerError(ValueError):
    """Base class for logger construction and configuration errors."""


class InvalidLoggerNameError(LoggerError):
    """Logger name contains characters outside ``[A-Za-z0-9_-]``."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Invalid logger name: {name!r}. Logger names can only contain letters, "
            "numbers, underscores, and dashes."
        )


class InvalidLogLevelError(LoggerError):
    """Log level is not one of the recognized levels."""

    def __init__(self, level: object, valid_levels: list[str]):
        self.level = level
        self.valid_levels = valid_levels
        super().__init__(
            f"Invalid log level: {level}. Valid log levels are: {', '.join(valid_levels)}"
        )


class DataStoreInputError(ValueError):
    """Data store name or scope failed validation."""
