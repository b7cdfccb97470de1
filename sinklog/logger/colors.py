"""Terminal colors used by the console sink."""

from enum import Enum


class LogColor(str, Enum):
    """ANSI escape sequences for console output."""

    RESET = "\x1b[0m"
    BRIGHT_BLACK = "\x1b[90m"
    BRIGHT_RED = "\x1b[91m"
    BRIGHT_YELLOW = "\x1b[93m"
    BRIGHT_BLUE = "\x1b[94m"
    BRIGHT_MAGENTA = "\x1b[95m"
    BRIGHT_WHITE = "\x1b[97m"

    def wrap(self, content: object) -> str:
        """Color ``content`` and reset afterwards."""
        return f"{self.value}{content}{LogColor.RESET.value}"
