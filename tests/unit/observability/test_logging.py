"""Unit tests for structured logging helpers."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from mp_monitoring.observability.logging import JsonLoggerFactory, get_logger


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestJsonLoggerFactory:
    def test_installs_single_handler_at_level(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING

    def test_renders_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        get_logger("mp_monitoring.test").info("registry.registered", metric="food")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "registry.registered"
        assert payload["metric"] == "food"
        assert payload["level"] == "info"


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        log = get_logger("x", component="registry")
        assert log is not None
        assert hasattr(log, "info")
