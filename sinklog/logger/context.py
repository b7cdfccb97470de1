"""Application-wide logging context.

A ``LoggingContext`` is built once by the application and handed to whatever
needs a logger. It owns every logger it creates, lazily builds the default and
no-op loggers from settings, and can wipe the log directory for all of them.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from config import Settings, get_settings
from sinklog.core.logging import get_logger
from sinklog.logger.formatting import HostFacts
from sinklog.logger.levels import LogLevel
from sinklog.logger.logger import Logger
from sinklog.utils.host import default_log_directory

logger = get_logger(__name__)


class LoggingContext:
    """Registry of loggers sharing one log directory.

    Usage:
        context = LoggingContext(get_settings())
        jobs_logger = context.create_logger("jobs", log_level="debug")
        context.singleton.log("ready")
        context.try_clear_local_log(override=True)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        log_directory: str | Path | None = None,
        host_facts: HostFacts | None = None,
    ):
        """Initialize the context.

        Args:
            settings: Settings for the default logger and the clear operation
                (defaults to ``get_settings()``)
            log_directory: Base directory for every log file; overrides the
                ``log_directory`` setting
            host_facts: Process facts shared by every logger of this context
        """
        self.settings = settings or get_settings()

        if log_directory is not None:
            self.log_directory = Path(log_directory)
        elif self.settings.log_directory:
            self.log_directory = Path(self.settings.log_directory)
        else:
            self.log_directory = default_log_directory()

        self.host_facts = host_facts or HostFacts.collect()

        self._loggers: list[Logger] = []
        self._singleton: Logger | None = None
        self._noop_singleton: Logger | None = None

    @property
    def loggers(self) -> list[Logger]:
        """Snapshot of every logger created by this context."""
        return list(self._loggers)

    @property
    def singleton(self) -> Logger:
        """Default logger, configured from settings on first use."""
        if self._singleton is None:
            self._singleton = self.create_logger(
                self.settings.logger_default_name,
                self.settings.log_level,
                self.settings.log_to_file_system,
                self.settings.log_to_console,
                self.settings.logger_cut_prefix,
            )

        return self._singleton

    @property
    def noop_singleton(self) -> Logger:
        """Logger that discards every message."""
        if self._noop_singleton is None:
            self._noop_singleton = self.create_logger(
                self.settings.logger_default_name,
                LogLevel.NONE,
                log_to_file_system=False,
                log_to_console=False,
                cut_log_prefix=self.settings.logger_cut_prefix,
            )

        return self._noop_singleton

    def create_logger(
        self,
        name: str,
        log_level: LogLevel | str | None = LogLevel.INFO,
        log_to_file_system: bool = True,
        log_to_console: bool = True,
        cut_log_prefix: bool = True,
    ) -> Logger:
        """Create a logger in this context's log directory and register it.

        Raises:
            InvalidLoggerNameError: If the name has forbidden characters
            InvalidLogLevelError: If the level is not recognized
        """
        new_logger = Logger(
            name,
            log_level,
            log_to_file_system,
            log_to_console,
            cut_log_prefix,
            log_directory=self.log_directory,
            host_facts=self.host_facts,
        )
        self._loggers.append(new_logger)
        return new_logger

    def try_clear_local_log(self, override: bool = False) -> bool:
        """Clear the log directory and reopen every logger's file.

        Args:
            override: Clear even when ``persist_local_logs`` is set

        Returns:
            True if the log files were cleared
        """
        self.singleton.log("Try clear local log files...")

        if self.settings.persist_local_logs:
            if override:
                self.singleton.warning("Override flag set. Clearing local log files.")
            else:
                self.singleton.warning(
                    "Local log files will not be cleared because persist_local_logs is set to true."
                )
                return False

        self.singleton.log("Clearing local log files...")

        file_loggers = [
            registered
            for registered in self._loggers
            if registered.fully_qualified_log_file_name is not None
        ]

        # Surface pending write errors before any handle is closed
        for registered in file_loggers:
            registered.flush()

        try:
            for registered in file_loggers:
                registered.close_file()

            if self.log_directory.exists():
                shutil.rmtree(self.log_directory)
            self.log_directory.mkdir(parents=True, exist_ok=True)
        finally:
            for registered in file_loggers:
                registered.reopen()

        logger.info(
            "local_log_files_cleared",
            log_directory=str(self.log_directory),
            reopened=len(file_loggers),
        )
        return True

    def close(self) -> None:
        """Close every registered logger."""
        for registered in self._loggers:
            registered.close()
