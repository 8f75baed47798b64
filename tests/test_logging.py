"""Tests for logging configuration."""

import logging

import pytest

from isocontext.config import IsocontextConfig
from isocontext.logging import ComponentFormatter, configure_logging, resolve_level


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def test_resolve_level_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ISOCONTEXT_LOG_LEVEL", "debug")
    assert resolve_level() == "DEBUG"


def test_resolve_level_invalid_falls_back(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("ISOCONTEXT_LOG_LEVEL", raising=False)
    assert resolve_level("verbose") == "INFO"
    assert resolve_level() == "INFO"


def test_configure_logging_sets_level_and_quiets_noisy_loggers():
    configure_logging("WARNING")
    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("playwright").level == logging.WARNING


def test_configure_logging_with_rich():
    configure_logging("DEBUG", use_rich=True)
    [handler] = logging.getLogger().handlers
    assert isinstance(handler.formatter, ComponentFormatter)


def test_component_formatter_extracts_component():
    formatter = ComponentFormatter("%(component)s | %(message)s")
    record = logging.LogRecord(
        "isocontext.backends.playwright", logging.INFO, __file__, 1, "hi", None, None
    )
    assert formatter.format(record) == "backends | hi"
    record = logging.LogRecord("playwright", logging.INFO, __file__, 1, "x", None, None)
    assert formatter.format(record) == "playwright | x"


def test_configure_logging_uses_config_log_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("ISOCONTEXT_LOG_LEVEL", raising=False)
    configure_logging(config=IsocontextConfig(log_level="ERROR"))
    assert logging.getLogger().level == logging.ERROR


def test_log_level_precedence(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ISOCONTEXT_LOG_LEVEL", "warning")
    config = IsocontextConfig(log_level="ERROR")
    configure_logging(config=config)
    assert logging.getLogger().level == logging.WARNING
    configure_logging("DEBUG", config=config)
    assert logging.getLogger().level == logging.DEBUG
