"""
Tests for logging setup.
"""

import logging
from pathlib import Path

import pytest

from swaplauncher.core.observability.logging_config import (
    _parse_level,
    resolve_level,
    setup_logging,
    setup_logging_from_env,
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseLevel:
    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("ERROR") == logging.ERROR

    def test_fallbacks(self):
        assert _parse_level(None) == logging.WARNING
        assert _parse_level("") == logging.WARNING
        assert _parse_level("chatty") == logging.WARNING


class TestSetupLogging:
    def test_single_console_handler(self):
        setup_logging("INFO")
        setup_logging("INFO")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.INFO

    def test_debug_format_has_location(self):
        setup_logging("DEBUG")
        fmt = logging.getLogger().handlers[0].formatter._fmt
        assert "%(lineno)d" in fmt

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "launcher.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        logging.getLogger("swaplauncher.test").debug("hello file")
        for handler in root.handlers:
            handler.flush()
        assert "hello file" in log_file.read_text()

    def test_unopenable_file_falls_back_to_console(self, tmp_path: Path, capsys):
        setup_logging("WARNING", log_file=str(tmp_path / "missing" / "launcher.log"))
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
        assert root.level == logging.WARNING
        assert "Cannot open log file" in capsys.readouterr().err


class TestResolveLevel:
    def test_flag_precedence(self, monkeypatch):
        monkeypatch.setenv("SWAPLAUNCHER_LOG_LEVEL", "ERROR")
        assert resolve_level(debug=True, verbose=True, quiet=True) == "DEBUG"
        assert resolve_level(verbose=True, quiet=True) == "INFO"
        assert resolve_level(quiet=True) == "ERROR"

    def test_env_then_default(self, monkeypatch):
        monkeypatch.setenv("SWAPLAUNCHER_LOG_LEVEL", "INFO")
        assert resolve_level() == "INFO"
        monkeypatch.delenv("SWAPLAUNCHER_LOG_LEVEL")
        assert resolve_level() == "WARNING"


class TestSetupLoggingFromEnv:
    def test_file_from_env(self, tmp_path: Path, monkeypatch):
        log_file = tmp_path / "env.log"
        monkeypatch.setenv("SWAPLAUNCHER_LOG_FILE", str(log_file))
        monkeypatch.setenv("SWAPLAUNCHER_LOG_FILE_LEVEL", "INFO")
        setup_logging_from_env("ERROR")
        root = logging.getLogger()
        assert len(root.handlers) == 2
        assert root.level == logging.INFO

    def test_warning_format_is_plain(self, monkeypatch):
        monkeypatch.delenv("SWAPLAUNCHER_LOG_FILE", raising=False)
        setup_logging_from_env("WARNING")
        fmt = logging.getLogger().handlers[0].formatter._fmt
        assert "%(asctime)s" not in fmt
