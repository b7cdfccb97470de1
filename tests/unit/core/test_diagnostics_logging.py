"""Unit tests for internal diagnostics logging."""

import json
import os
import subprocess
import sys
import textwrap
from pathlib import Path

import structlog

from config import Settings
from sinklog.core.logging import configure_default_logging, get_logger, setup_logging
from sinklog.logger import Logger

PROJECT_ROOT = Path(__file__).resolve().parents[3]


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_json_renderer_writes_to_stderr(self, capsys) -> None:
        setup_logging(
            Settings(_env_file=None, diagnostics_log_level="INFO", diagnostics_log_format="json")
        )

        get_logger("sinklog.test").info("log_file_opened", path="/tmp/x.log")

        captured = capsys.readouterr()
        assert captured.out == ""
        event = json.loads(captured.err.strip().splitlines()[-1])
        assert event["event"] == "log_file_opened"
        assert event["path"] == "/tmp/x.log"
        assert event["level"] == "info"

    def test_level_filter(self, capsys) -> None:
        setup_logging(Settings(_env_file=None, diagnostics_log_level="WARNING"))

        get_logger("sinklog.test").debug("log_directory_created", path="/tmp")

        assert capsys.readouterr().err == ""


class TestDefaultLogging:
    """Tests for the quiet default installed at import."""

    def test_default_keeps_lifecycle_events_off_stdout(self, capsys, tmp_path: Path) -> None:
        """Test a logger with the console sink off prints nothing under the default."""
        structlog.reset_defaults()
        configure_default_logging()

        Logger("worker", log_to_console=False, log_directory=tmp_path).close()

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_default_still_reports_warnings_on_stderr(self, capsys) -> None:
        structlog.reset_defaults()
        configure_default_logging()

        get_logger("sinklog.test").warning("log_directory_unwritable", path="/tmp")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "log_directory_unwritable" in captured.err

    def test_default_leaves_existing_configuration(self, capsys) -> None:
        """Test an application's own configuration is not replaced."""
        setup_logging(
            Settings(_env_file=None, diagnostics_log_level="INFO", diagnostics_log_format="json")
        )

        configure_default_logging()
        get_logger("sinklog.test").info("local_log_files_cleared")

        event = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert event["event"] == "local_log_files_cleared"

    def test_fresh_process_console_disabled_is_silent(self, tmp_path: Path) -> None:
        """Test a fresh interpreter with no logging setup writes nothing to stdout."""
        script = textwrap.dedent(
            """
            import sys

            from sinklog.logger import Logger

            log = Logger("worker", log_to_console=False, log_directory=sys.argv[1])
            log.log("file only")
            log.close()
            """
        )
        env = {**os.environ, "PYTHONPATH": str(PROJECT_ROOT)}

        result = subprocess.run(
            [sys.executable, "-c", script, str(tmp_path)],
            cwd=PROJECT_ROOT,
            env=env,
            capture_output=True,
            text=True,
            check=True,
        )

        assert result.stdout == ""
        log_files = list(tmp_path.glob("log_worker_*.log"))
        assert len(log_files) == 1
        assert "file only" in log_files[0].read_text(encoding="utf-8")
