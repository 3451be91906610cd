"""Tests for logging_config.py module."""

import io
import logging

import colorlog
import pytest

from tmi_parser.logging_config import ConsoleHandler, LoggerConfigurator, build_formatter


class TestColoredFormatter:
    """Tests for the shared colorlog.ColoredFormatter."""

    @pytest.fixture
    def formatter(self):
        return build_formatter()

    def _record(self, level):
        return logging.LogRecord(
            name="test", level=level, pathname="", lineno=0, msg="test", args=(), exc_info=None
        )

    def test_is_colorlog_formatter(self, formatter):
        assert isinstance(formatter, colorlog.ColoredFormatter)

    def test_debug_color(self, formatter):
        formatted = formatter.format(self._record(logging.DEBUG))
        assert "\033[36m" in formatted  # Cyan color code
        assert "DEBUG" in formatted

    def test_error_color(self, formatter):
        formatted = formatter.format(self._record(logging.ERROR))
        assert "\033[31m" in formatted  # Red color code
        assert "ERROR" in formatted
        assert "test" in formatted


class TestLoggerConfigurator:
    def test_debug_env_enables_debug(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")
        assert LoggerConfigurator().resolve_level() == logging.DEBUG

    def test_default_level_is_info(self, monkeypatch):
        monkeypatch.delenv("DEBUG", raising=False)
        assert LoggerConfigurator().resolve_level() == logging.INFO

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "1")
        assert LoggerConfigurator(level=logging.WARNING).resolve_level() == logging.WARNING

    def test_configure_installs_single_handler(self, monkeypatch):
        monkeypatch.delenv("DEBUG", raising=False)
        stream = io.StringIO()
        configurator = LoggerConfigurator(stream=stream)
        configurator.configure()
        handler = configurator.configure()

        root = logging.getLogger()
        assert [h for h in root.handlers if isinstance(h, ConsoleHandler)] == [handler]
        assert root.level == logging.INFO

        logging.getLogger("tmi_parser").info("hello")
        assert "hello" in stream.getvalue()
