"""Log line construction for the console and file sinks.

A line is a run of bracketed prefix fields followed by ``[LEVEL] message``.
Two prefix shapes exist:

- full: ``[timestamp][uptime][pid][platform-arch][runtime][ip][hostname][baseDir][name]``
- cut:  ``[timestamp][ip][hostname][name]``

The file sink writes the fields as plain text. The console sink paints each
field bright black and the level and message in the severity's color.
"""

from __future__ import annotations

import re
import traceback
from dataclasses import dataclass
from datetime import UTC, datetime
from types import FrameType

from sinklog.logger.colors import LogColor
from sinklog.logger.levels import LogLevel
from sinklog.utils.host import (
    PACKAGE_DIRNAME,
    get_hostname,
    get_platform,
    get_process_id,
    get_runtime_version,
)
from sinklog.utils.net import get_local_ipv4

_FILE_UNSAFE_CHARACTERS = re.compile(r"[^a-z0-9_-]", re.IGNORECASE)


@dataclass(frozen=True)
class HostFacts:
    """Process facts that stay fixed for the lifetime of a logger."""

    local_ip: str
    hostname: str
    process_id: int
    platform: str
    runtime_version: str
    base_dir: str

    @classmethod
    def collect(cls, base_dir: str | None = None) -> HostFacts:
        return cls(
            local_ip=get_local_ipv4(),
            hostname=get_hostname(),
            process_id=get_process_id(),
            platform=get_platform(),
            runtime_version=get_runtime_version(),
            base_dir=base_dir if base_dir is not None else str(PACKAGE_DIRNAME),
        )


def iso_timestamp(now: datetime | None = None) -> str:
    """UTC timestamp such as ``2022-03-04T05:06:07.089Z``."""
    now = (now or datetime.now(UTC)).astimezone(UTC)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def file_safe_timestamp(now: datetime | None = None) -> str:
    """Timestamp usable in a file name, such as ``20220304T050607089``."""
    stamp = _FILE_UNSAFE_CHARACTERS.sub("", iso_timestamp(now)).replace("-", "")
    return stamp.rstrip("Zz")


def format_uptime(uptime: float) -> str:
    return f"{uptime:.7f}"


def format_message(message: object, args: tuple[object, ...]) -> str:
    """Interpolate ``%``-style arguments, the way stdlib logging does.

    When the arguments do not fit the placeholders, the message is kept as
    written and the arguments are appended after it, space separated.
    """
    if not args:
        return str(message)
    try:
        return str(message) % args
    except (TypeError, ValueError):
        return " ".join([str(message), *map(str, args)])


def append_stack_trace(message: str, frame: FrameType | None) -> str:
    """Append the call stack that ends at ``frame`` below ``message``."""
    stack = "".join(traceback.format_stack(frame)).rstrip()
    return f"{message}\n{stack}"


def build_file_name(name: str, facts: HostFacts, now: datetime | None = None) -> str:
    return "log_{}_{}_{}_{:X}.log".format(
        name,
        facts.runtime_version,
        file_safe_timestamp(now),
        facts.process_id,
    )


def build_prefix_fields(
    facts: HostFacts,
    logger_name: str,
    cut_prefix: bool,
    timestamp: str,
    uptime: float,
) -> list[str]:
    """Return the prefix fields in display order, without brackets."""
    if cut_prefix:
        return [timestamp, facts.local_ip, facts.hostname, logger_name]

    return [
        timestamp,
        format_uptime(uptime),
        f"{facts.process_id:x}",
        facts.platform,
        facts.runtime_version,
        facts.local_ip,
        facts.hostname,
        facts.base_dir,
        logger_name,
    ]


def format_file_line(fields: list[str], level: LogLevel, message: str) -> str:
    prefix = "".join(f"[{field}]" for field in fields)
    return f"{prefix}[{level.value.upper()}] {message}\n"


def format_console_line(
    fields: list[str],
    level: LogLevel,
    color: LogColor,
    message: str,
) -> str:
    prefix = "".join(f"[{LogColor.BRIGHT_BLACK.wrap(field)}]" for field in fields)
    return f"{prefix}[{color.wrap(level.value.upper())}] {color.wrap(message)}"
