"""Internal diagnostics logging built on structlog.

These are the library's own lifecycle events (directories created, files
opened or cleared). They never go through the user-facing ``Logger`` sinks.

Importing this module installs a quiet default (stderr, warnings and above)
unless the application already configured structlog, so lifecycle events never
reach stdout on their own. Call ``setup_logging()`` to change level or renderer.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from config import Settings, get_settings

DEFAULT_DIAGNOSTICS_LEVEL = logging.WARNING


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    # Resolve sys.stderr per logger so redirected streams are honored
    return structlog.PrintLogger(sys.stderr)


def _configure(level: int, renderer: Any) -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def configure_default_logging() -> None:
    """Install the quiet default unless structlog is already configured."""
    if structlog.is_configured():
        return
    _configure(DEFAULT_DIAGNOSTICS_LEVEL, structlog.dev.ConsoleRenderer(colors=False))


def setup_logging(settings: Settings | None = None) -> None:
    """Configure structlog for internal diagnostics.

    Args:
        settings: Settings to read the level and renderer from
            (defaults to ``get_settings()``)
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.diagnostics_log_level)

    renderer: Any
    if settings.diagnostics_log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    _configure(level, renderer)


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a diagnostics logger bound to a module name."""
    return structlog.get_logger(name)


configure_default_logging()
