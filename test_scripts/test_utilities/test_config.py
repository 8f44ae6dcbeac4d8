"""
Tests for settings and logging configuration.
"""
import io
import json
import logging
from pathlib import Path

import pytest

from tidykit.config import get_settings
from tidykit.logging_config import (
    LIBRARY_LOGGER,
    LOG_FILE_NAME,
    add_log_level,
    configure_logging,
    get_logger,
    )
from tidykit.utils import currency_utils
from tidykit.utils.currency_utils import create_dollar_amount


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings and handlers installed by configure_logging()."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in library_logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            library_logger.removeHandler(handler)
            handler.close()
    library_logger.setLevel(logging.NOTSET)


# ============================================================
# Settings Tests
# ============================================================

class TestSettings:
    """Tests for Settings / get_settings()."""

    def test_defaults(self):
        settings = get_settings()
        assert settings.PROJECT_NAME == "tidykit"
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FILE_ENABLED is False

    def test_env_prefix(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TIDYKIT_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("TIDYKIT_LOG_FILE_ENABLED", "true")
        monkeypatch.setenv("TIDYKIT_LOG_DIR", str(tmp_path))

        settings = get_settings()
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_FILE_ENABLED is True
        assert settings.LOG_DIR == Path(tmp_path)

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert get_settings().LOG_LEVEL == "INFO"

    def test_cached(self):
        assert get_settings() is get_settings()


# ============================================================
# Logging Tests
# ============================================================

def _json_lines(stream: io.StringIO) -> list:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


class TestLoggingConfig:
    """Tests for configure_logging() and get_logger()."""

    @pytest.mark.parametrize("method,expected", [
        ("info", "INFO"),
        ("warn", "WARNING"),
        ("error", "ERROR"),
        ])
    def test_add_log_level(self, method, expected):
        assert add_log_level(None, method, {})["level"] == expected

    def test_library_logger_silent_by_default(self):
        handlers = logging.getLogger(LIBRARY_LOGGER).handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_root_logger_untouched(self):
        root_logger = logging.getLogger()
        before = list(root_logger.handlers)
        level = root_logger.level

        configure_logging("DEBUG", handler=logging.StreamHandler(io.StringIO()))

        assert root_logger.handlers == before
        assert root_logger.level == level

    def test_json_output(self):
        stream = io.StringIO()
        configure_logging("DEBUG", handler=logging.StreamHandler(stream))

        get_logger("tidykit.test").info("hello from test", answer=42)

        [event] = _json_lines(stream)
        assert event["event"] == "hello from test"
        assert event["answer"] == 42
        assert event["level"] == "INFO"
        assert event["logger"] == "tidykit.test"
        assert "timestamp" in event

    def test_level_filters(self):
        stream = io.StringIO()
        configure_logging("WARNING", handler=logging.StreamHandler(stream))

        logger = get_logger("tidykit.test")
        logger.info("dropped")
        logger.warning("kept")

        assert [e["event"] for e in _json_lines(stream)] == ["kept"]

    def test_reconfigure_replaces_handler(self):
        first = configure_logging("INFO", handler=logging.StreamHandler(io.StringIO()))
        second = configure_logging("INFO", handler=logging.StreamHandler(io.StringIO()))

        handlers = logging.getLogger(LIBRARY_LOGGER).handlers
        assert second in handlers
        assert first not in handlers

    def test_library_events_reach_handler(self, monkeypatch):
        """Errors logged inside utilities are rendered by the configured handler."""
        def broken_format(*args, **kwargs):
            raise RuntimeError("locale data missing")

        monkeypatch.setattr(currency_utils, "format_currency", broken_format)
        stream = io.StringIO()
        configure_logging("INFO", handler=logging.StreamHandler(stream))

        assert create_dollar_amount(5, "GBP") == "Error formatting GBP"

        [event] = _json_lines(stream)
        assert event["event"] == "Error formatting currency"
        assert event["currency"] == "GBP"
        assert event["level"] == "ERROR"
        assert event["logger"] == "tidykit.utils.currency_utils"

    def test_file_handler_from_settings(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TIDYKIT_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("TIDYKIT_LOG_FILE_ENABLED", "1")
        monkeypatch.setenv("TIDYKIT_LOG_DIR", str(tmp_path / "logs"))

        handler = configure_logging()
        get_logger("tidykit.test").error("written to file")
        handler.flush()

        assert logging.getLogger(LIBRARY_LOGGER).level == logging.ERROR
        content = (tmp_path / "logs" / LOG_FILE_NAME).read_text(encoding="utf-8")
        assert '"event": "written to file"' in content
