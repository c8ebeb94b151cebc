"""
Tests for settings and structured logging configuration.
"""

import logging

import pytest
import structlog

from valtree import __version__
from valtree.config import Settings, get_settings
from valtree.logging import (
    LoggerRegistry,
    _add_service_info,
    _censor_sensitive_keys,
    bind_context,
    boundary_logger,
    clear_context,
    configure_logging,
    unbind_context,
)


@pytest.fixture
def restore_logging():
    """Undo global logging configuration after a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    LoggerRegistry._loggers.clear()
    clear_context()
    root.handlers = handlers
    root.setLevel(level)


class TestSettings:
    """Test pydantic settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_JSON is False
        assert settings.LOG_FAILURES is True
        assert settings.ERROR_SEPARATOR == "; "
        assert settings.SENSITIVE_FIELDS == frozenset({"password", "token", "secret"})

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("VALTREE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("VALTREE_LOG_JSON", "true")
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_JSON is True

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestProcessors:
    """Test custom structlog processors."""

    def test_censor_sensitive_keys(self):
        event = {"event": "x", "password": "hunter2", "nested": {"Token": "abc", "ok": 1}, "items": [{"secret": 1}]}
        censored = _censor_sensitive_keys(None, "info", event)
        assert censored["password"] == "[REDACTED]"
        assert censored["nested"] == {"Token": "[REDACTED]", "ok": 1}
        assert censored["items"] == [{"secret": "[REDACTED]"}]
        assert censored["event"] == "x"

    def test_add_service_info(self):
        event = _add_service_info(None, "info", {"event": "x"})
        assert event["service"] == "valtree"
        assert event["version"] == __version__


class TestConfigureLogging:
    """Test logging setup."""

    def test_sets_root_level_and_handler(self, restore_logging):
        configure_logging(level="warning", json_logs=True)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

    def test_defaults_from_settings(self, restore_logging, monkeypatch):
        monkeypatch.setenv("VALTREE_LOG_LEVEL", "DEBUG")
        configure_logging()
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, restore_logging):
        configure_logging(level="chatty")
        assert logging.getLogger().level == logging.INFO

    def test_json_output(self, restore_logging, capsys):
        configure_logging(level="INFO", json_logs=True)
        boundary_logger().info("validation_failed", error_count=1, password="x")
        out = capsys.readouterr().out
        assert '"event": "validation_failed"' in out
        assert '"logger": "valtree.boundary"' in out
        assert '"password": "[REDACTED]"' in out


class TestContext:
    """Test contextvars helpers."""

    def test_bind_and_unbind(self, restore_logging):
        clear_context()
        bind_context(request_id="r1", user="ada")
        assert structlog.contextvars.get_contextvars() == {"request_id": "r1", "user": "ada"}
        unbind_context("user")
        assert structlog.contextvars.get_contextvars() == {"request_id": "r1"}
        clear_context()
        assert structlog.contextvars.get_contextvars() == {}


class TestLoggerRegistry:
    """Test per-domain loggers."""

    def test_cached_per_name(self, restore_logging):
        assert LoggerRegistry.get("boundary") is LoggerRegistry.get("boundary")
        assert boundary_logger() is LoggerRegistry.get("boundary")
