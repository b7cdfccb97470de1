"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from config import Settings
from sinklog.core.logging import setup_logging
from sinklog.logger import HostFacts, Logger, LoggingContext


@pytest.fixture(autouse=True)
def quiet_diagnostics() -> None:
    """Keep internal diagnostics off stdout so console assertions see only log lines."""
    setup_logging(Settings(_env_file=None, diagnostics_log_level="WARNING"))


@pytest.fixture
def host_facts() -> HostFacts:
    """Fixed process facts so log lines are predictable."""
    return HostFacts(
        local_ip="10.0.0.5",
        hostname="test-host",
        process_id=0x1A2B,
        platform="linux-x86_64",
        runtime_version="3.12.1",
        base_dir="/srv/app",
    )


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    return tmp_path / "logs"


@pytest.fixture
def settings(log_dir: Path) -> Settings:
    """Provide settings isolated from .env files.

    Returns:
        Settings instance pointing at a temporary log directory
    """
    return Settings(
        _env_file=None,
        logger_default_name="app",
        log_level="info",
        log_to_file_system=True,
        log_to_console=False,
        logger_cut_prefix=True,
        persist_local_logs=False,
        log_directory=str(log_dir),
    )


@pytest.fixture
def context(settings: Settings, host_facts: HostFacts) -> Generator[LoggingContext]:
    """Logging context writing into the temporary log directory."""
    ctx = LoggingContext(settings, host_facts=host_facts)
    yield ctx
    ctx.close()


@pytest.fixture
def make_logger(log_dir: Path, host_facts: HostFacts) -> Generator[Callable[..., Logger]]:
    """Factory for standalone loggers that are closed after the test."""
    created: list[Logger] = []

    def _make(name: str = "worker", *args: object, **kwargs: object) -> Logger:
        kwargs.setdefault("log_directory", log_dir)
        kwargs.setdefault("host_facts", host_facts)
        new_logger = Logger(name, *args, **kwargs)
        created.append(new_logger)
        return new_logger

    yield _make

    for created_logger in created:
        created_logger.close()


def _read_log(logger: Logger) -> str:
    logger.flush()
    assert logger.fully_qualified_log_file_name is not None
    return logger.fully_qualified_log_file_name.read_text(encoding="utf-8")


@pytest.fixture
def read_log() -> Callable[[Logger], str]:
    """Flush pending writes and return a logger's file content."""
    return _read_log
