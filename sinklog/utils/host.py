"""Process and runtime facts embedded in log lines and file names."""

import os
import platform
import socket
import sys
import time
from functools import cache
from pathlib import Path

import psutil

_SINKLOG_DIR = Path(__file__).resolve().parent.parent


def _resolve_package_dirname() -> Path:
    """Project root in a source checkout, the sinklog package directory otherwise.

    An installed (non-editable) copy has no pyproject.toml next to the package,
    so logs stay inside the package instead of landing in site-packages.
    """
    project_root = _SINKLOG_DIR.parent
    if (project_root / "pyproject.toml").is_file():
        return project_root
    return _SINKLOG_DIR


# Log files default to <PACKAGE_DIRNAME>/logs
PACKAGE_DIRNAME = _resolve_package_dirname()


def get_hostname() -> str:
    return socket.gethostname()


def get_process_id() -> int:
    return os.getpid()


def get_platform() -> str:
    """Platform and architecture, e.g. ``linux-x86_64``."""
    return f"{sys.platform}-{platform.machine()}"


def get_runtime_version() -> str:
    return platform.python_version()


@cache
def _process_create_time(pid: int) -> float:
    return psutil.Process(pid).create_time()


def get_uptime() -> float:
    """Seconds elapsed since this process started."""
    return max(0.0, time.time() - _process_create_time(os.getpid()))


def default_log_directory() -> Path:
    return PACKAGE_DIRNAME / "logs"
