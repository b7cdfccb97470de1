"""Utilities package."""

from sinklog.utils.host import (
    PACKAGE_DIRNAME,
    default_log_directory,
    get_hostname,
    get_platform,
    get_process_id,
    get_runtime_version,
    get_uptime,
)
from sinklog.utils.net import get_local_ipv4

__all__ = [
    "PACKAGE_DIRNAME",
    "default_log_directory",
    "get_hostname",
    "get_local_ipv4",
    "get_platform",
    "get_process_id",
    "get_runtime_version",
    "get_uptime",
]
