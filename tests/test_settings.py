"""Tests for settings and CLI argument handling."""

import logging
from pathlib import Path

import pytest

from kartao.__main__ import build_settings, parse_args
from kartao.config import DEFAULT_COLUMNS, Settings
from kartao.logging import setup_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's KARTAO_* variables out of these tests."""
    for name in ("DATA_DIR", "DEFAULT_COLUMNS", "HOST", "PORT", "VERBOSE", "LOG_FILE"):
        monkeypatch.delenv(f"KARTAO_{name}", raising=False)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        """Defaults match the documented values."""
        settings = Settings()

        assert settings.data_dir == Path("data")
        assert settings.default_columns == DEFAULT_COLUMNS
        assert settings.port == 5043
        assert settings.column_names == [
            "Backlog",
            "To Do",
            "In Progress",
            "Testing",
            "Completed",
        ]

    def test_reads_environment(self, monkeypatch, tmp_path: Path):
        """KARTAO_* environment variables are picked up."""
        monkeypatch.setenv("KARTAO_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("KARTAO_DEFAULT_COLUMNS", "Todo,Done")
        monkeypatch.setenv("KARTAO_PORT", "8080")

        settings = Settings()

        assert settings.data_dir == tmp_path
        assert settings.column_names == ["Todo", "Done"]
        assert settings.port == 8080

    def test_column_names_trimmed(self):
        """Blank entries and surrounding spaces are dropped."""
        settings = Settings(default_columns=" A ,, B,")

        assert settings.column_names == ["A", "B"]


class TestCli:
    """Tests for command line parsing."""

    def test_no_args_uses_environment(self, monkeypatch):
        """Without flags, settings come from the environment."""
        monkeypatch.setenv("KARTAO_DEFAULT_COLUMNS", "One,Two")

        settings = build_settings(parse_args([]))

        assert settings.column_names == ["One", "Two"]
        assert settings.verbose == 0

    def test_flags_override_environment(self, monkeypatch, tmp_path: Path):
        """Command line flags take precedence."""
        monkeypatch.setenv("KARTAO_PORT", "9000")

        args = parse_args(
            [
                "--data-dir",
                str(tmp_path),
                "--default-columns",
                "Now,Later",
                "--port",
                "6000",
                "-vv",
            ]
        )
        settings = build_settings(args)

        assert settings.data_dir == tmp_path
        assert settings.column_names == ["Now", "Later"]
        assert settings.port == 6000
        assert settings.verbose == 2


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture(autouse=True)
    def reset_loggers(self):
        saved = {
            name: (list(logging.getLogger(name).handlers), logging.getLogger(name).level)
            for name in ("kartao", "uvicorn")
        }
        yield
        for name, (handlers, level) in saved.items():
            logger = logging.getLogger(name)
            for handler in logger.handlers:
                if handler not in handlers:
                    handler.close()
            logger.handlers = handlers
            logger.setLevel(level)

    def test_silent_by_default(self):
        """No handlers are added without verbosity or a log file."""
        before = list(logging.getLogger("kartao").handlers)

        setup_logging(0, None)

        assert logging.getLogger("kartao").handlers == before

    def test_log_file(self, tmp_path: Path):
        """A log file gets the startup banner."""
        log_file = tmp_path / "logs" / "kartao.log"

        setup_logging(0, log_file)

        assert "kartao starting" in log_file.read_text()

    def test_debug_level(self):
        """-vv enables DEBUG."""
        setup_logging(2, None)

        assert logging.getLogger("kartao").level == logging.DEBUG

    def test_server_logs_share_handlers(self, tmp_path: Path):
        """uvicorn messages land in the same log file."""
        log_file = tmp_path / "kartao.log"

        setup_logging(1, log_file)
        logging.getLogger("uvicorn.error").info("Application startup complete.")

        assert "Application startup complete." in log_file.read_text()
