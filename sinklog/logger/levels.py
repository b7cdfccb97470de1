"""Severity levels and their ordering."""

from enum import Enum

from sinklog.core.exceptions import InvalidLogLevelError

# Accepted spellings that map onto a canonical level
LEVEL_ALIASES = {"verbose": "trace"}


class LogLevel(str, Enum):
    """Severity level, ordered from least to most verbose.

    A logger configured at a level emits every message whose level comes at
    or before it in this ordering.
    """

    NONE = "none"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"

    @property
    def index(self) -> int:
        return list(LogLevel).index(self)

    @classmethod
    def parse(cls, value: "LogLevel | str | None") -> "LogLevel":
        """Normalize a level name (any case) into a LogLevel.

        ``None`` means info.

        Raises:
            InvalidLogLevelError: If the value is not a recognized level
        """
        if value is None:
            return cls.INFO
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidLogLevelError(value, cls.names())

        normalized = value.lower()
        normalized = LEVEL_ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            raise InvalidLogLevelError(normalized, cls.names()) from None

    @classmethod
    def names(cls) -> list[str]:
        return [level.value for level in cls]
