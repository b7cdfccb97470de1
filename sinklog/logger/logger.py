"""A console and file logger.

Each ``Logger`` writes leveled, colorized lines to stdout and appends the same
lines, uncolored, to its own log file. File writes are handed to a
single-worker thread pool so callers never wait on disk; writes from one
logger land in the order they were made.
"""

from __future__ import annotations

import re
import sys
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from types import FrameType
from typing import IO

from sinklog.core.exceptions import InvalidLoggerNameError
from sinklog.core.logging import get_logger
from sinklog.logger.colors import LogColor
from sinklog.logger.formatting import (
    HostFacts,
    append_stack_trace,
    build_file_name,
    build_prefix_fields,
    format_console_line,
    format_file_line,
    format_message,
    iso_timestamp,
)
from sinklog.logger.levels import LogLevel
from sinklog.utils.host import default_log_directory, get_uptime

logger = get_logger(__name__)

_NAME_PATTERN = re.compile(r"[A-Za-z0-9_\-]+")


class Logger:
    """Leveled logger with a console sink and a per-instance file sink.

    Example:
        >>> log = Logger("worker", log_level="debug", log_directory="/tmp/logs")
        >>> log.information("started %d jobs", 3)
        >>> log.flush()

    If you do not need a specific logger, use ``LoggingContext.singleton``.
    """

    def __init__(
        self,
        name: str,
        log_level: LogLevel | str | None = LogLevel.INFO,
        log_to_file_system: bool = True,
        log_to_console: bool = True,
        cut_log_prefix: bool = True,
        *,
        log_directory: str | Path | None = None,
        host_facts: HostFacts | None = None,
    ):
        """Create a logger.

        Args:
            name: Logger name; letters, numbers, underscores and dashes only
            log_level: Level name in any case, or a LogLevel (None means info)
            log_to_file_system: Append lines to this logger's log file
            log_to_console: Print colorized lines to stdout
            cut_log_prefix: Use the short line prefix
            log_directory: Directory holding the log file
                (defaults to <package dir>/logs)
            host_facts: Process facts embedded in every line
                (collected from the running process by default)

        Raises:
            InvalidLoggerNameError: If the name has forbidden characters
            InvalidLogLevelError: If the level is not recognized
            OSError: If the log directory or file cannot be created
        """
        if not isinstance(name, str) or not _NAME_PATTERN.fullmatch(name):
            raise InvalidLoggerNameError(name)

        self._name = name
        self._log_level = LogLevel.parse(log_level)
        self._log_to_file_system = log_to_file_system
        self._log_to_console = log_to_console
        self._cut_log_prefix = cut_log_prefix

        self._log_directory = (
            Path(log_directory) if log_directory is not None else default_log_directory()
        )
        self._host_facts = host_facts or HostFacts.collect()

        self._file_name: str | None = None
        self._fully_qualified_log_file_name: Path | None = None
        self._stream: IO[str] | None = None
        self._writer: ThreadPoolExecutor | None = None
        self._write_error: BaseException | None = None

        if self._log_to_file_system:
            self._open_file_sink()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def log_level(self) -> LogLevel:
        """One of none, error, warning, info, debug, trace."""
        return self._log_level

    @log_level.setter
    def log_level(self, value: LogLevel | str | None) -> None:
        """Set the level.

        Raises:
            InvalidLogLevelError: If the level is not recognized
        """
        self._log_level = LogLevel.parse(value)

    @property
    def log_to_file_system(self) -> bool:
        return self._log_to_file_system

    @log_to_file_system.setter
    def log_to_file_system(self, value: bool) -> None:
        self._log_to_file_system = value
        if value and self._fully_qualified_log_file_name is None:
            self._open_file_sink()

    @property
    def log_to_console(self) -> bool:
        return self._log_to_console

    @log_to_console.setter
    def log_to_console(self, value: bool) -> None:
        self._log_to_console = value

    @property
    def cut_log_prefix(self) -> bool:
        return self._cut_log_prefix

    @cut_log_prefix.setter
    def cut_log_prefix(self, value: bool) -> None:
        self._cut_log_prefix = value

    @property
    def log_directory(self) -> Path:
        return self._log_directory

    @property
    def file_name(self) -> str | None:
        """Log file name, or None if file logging was never enabled."""
        return self._file_name

    @property
    def fully_qualified_log_file_name(self) -> Path | None:
        return self._fully_qualified_log_file_name

    @property
    def host_facts(self) -> HostFacts:
        return self._host_facts

    # ------------------------------------------------------------------
    # Log methods
    # ------------------------------------------------------------------

    def log(self, message: object, *args: object) -> None:
        """Log a regular message."""
        self._emit(LogLevel.INFO, LogColor.BRIGHT_WHITE, message, args)

    def information(self, message: object, *args: object) -> None:
        """Log an info message."""
        self._emit(LogLevel.INFO, LogColor.BRIGHT_BLUE, message, args)

    info = information

    def warning(self, message: object, *args: object) -> None:
        """Log a warning message."""
        self._emit(LogLevel.WARNING, LogColor.BRIGHT_YELLOW, message, args)

    def debug(self, message: object, *args: object) -> None:
        """Log a debug message."""
        self._emit(LogLevel.DEBUG, LogColor.BRIGHT_MAGENTA, message, args)

    def trace(self, message: object, *args: object) -> None:
        """Log a message followed by the stack of the caller."""
        self._emit(
            LogLevel.TRACE,
            LogColor.BRIGHT_MAGENTA,
            message,
            args,
            stack_frame=sys._getframe(1),
        )

    def error(self, message: object, *args: object) -> None:
        """Log an error message."""
        self._emit(LogLevel.ERROR, LogColor.BRIGHT_RED, message, args)

    # ------------------------------------------------------------------
    # File sink lifecycle
    # ------------------------------------------------------------------

    def flush(self) -> None:
        """Block until every dispatched file write has landed.

        Raises:
            OSError: The first error a dispatched write hit since the last flush
        """
        if self._writer is not None:
            # FIFO with one worker: once this no-op runs, every earlier write is done
            self._writer.submit(lambda: None).result()

        if self._write_error is not None:
            error, self._write_error = self._write_error, None
            raise error

    def reopen(self) -> None:
        """Replace the file handle with a fresh append handle at the same path."""
        if self._fully_qualified_log_file_name is None:
            return

        self.flush()
        self.close_file()
        self._log_directory.mkdir(parents=True, exist_ok=True)
        self._stream = self._fully_qualified_log_file_name.open("a", encoding="utf-8")
        if self._writer is None:
            self._writer = self._new_writer()
        logger.debug("log_file_reopened", logger_name=self._name, path=str(self._stream.name))

    def close(self) -> None:
        """Flush pending writes, close the log file and stop the writer."""
        try:
            self.flush()
        finally:
            self.close_file()
            if self._writer is not None:
                self._writer.shutdown(wait=True)
                self._writer = None

    def close_file(self) -> None:
        """Close the log file handle; later writes are dropped until reopen()."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def _open_file_sink(self) -> None:
        self._file_name = build_file_name(self._name, self._host_facts)
        self._fully_qualified_log_file_name = self._log_directory / self._file_name

        if not self._log_directory.exists():
            self._log_directory.mkdir(parents=True, exist_ok=True)
            logger.debug("log_directory_created", path=str(self._log_directory))

        self._stream = self._fully_qualified_log_file_name.open("a", encoding="utf-8")
        self._writer = self._new_writer()
        logger.debug(
            "log_file_opened",
            logger_name=self._name,
            path=str(self._fully_qualified_log_file_name),
        )

    def _new_writer(self) -> ThreadPoolExecutor:
        return ThreadPoolExecutor(max_workers=1, thread_name_prefix=f"sinklog-{self._name}")

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _check_log_level(self, level_to_check: LogLevel) -> bool:
        if not isinstance(self._log_level, LogLevel):
            self._log_level = LogLevel.INFO

        return self._log_level.index >= level_to_check.index

    def _emit(
        self,
        level: LogLevel,
        color: LogColor,
        message: object,
        args: tuple[object, ...],
        stack_frame: FrameType | None = None,
    ) -> None:
        if not self._check_log_level(level):
            return
        if not self._log_to_console and not self._log_to_file_system:
            return

        text = format_message(message, args)
        if stack_frame is not None:
            text = append_stack_trace(text, stack_frame)

        fields = build_prefix_fields(
            self._host_facts,
            self._name,
            self._cut_log_prefix,
            timestamp=iso_timestamp(),
            uptime=get_uptime(),
        )

        if self._log_to_console:
            print(format_console_line(fields, level, color, text), flush=True)

        if self._log_to_file_system:
            self._log_locally(format_file_line(fields, level, text))

    def _log_locally(self, line: str) -> None:
        if self._writer is None:
            return

        future = self._writer.submit(self._write_line, line)
        future.add_done_callback(self._record_write_error)

    def _write_line(self, line: str) -> None:
        stream = self._stream
        if stream is None:
            return
        stream.write(line)
        stream.flush()

    def _record_write_error(self, future: Future) -> None:
        error = future.exception()
        if error is not None and self._write_error is None:
            self._write_error = error

    def __repr__(self) -> str:
        return (
            f"Logger(name={self._name!r}, log_level={self._log_level.value!r}, "
            f"log_to_file_system={self._log_to_file_system}, "
            f"log_to_console={self._log_to_console})"
        )
