"""Unit tests for logging configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from dealease_demo.observability import (
    ENGINE_LOGGER,
    ENGINE_NAME,
    add_engine_name,
    build_processors,
    configure_logging,
)

pytestmark = pytest.mark.unit


class TestBuildProcessors:
    def test_json_chain(self) -> None:
        processors = build_processors(json_format=True)

        assert processors[0] is structlog.contextvars.merge_contextvars
        assert processors[1] is structlog.stdlib.filter_by_level
        assert add_engine_name in processors
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert any(isinstance(p, structlog.processors.TimeStamper) for p in processors)

    def test_console_chain_without_timestamp(self) -> None:
        processors = build_processors(json_format=False, add_timestamp=False)

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)

    def test_engine_name_does_not_override_bound_value(self) -> None:
        assert add_engine_name(None, "info", {"event": "x"})["engine"] == ENGINE_NAME
        assert add_engine_name(None, "info", {"event": "x", "engine": "host"})["engine"] == "host"


class TestConfigureLogging:
    def test_installs_chain(self) -> None:
        configure_logging(log_level="INFO", json_format=True)
        processors = structlog.get_config()["processors"]

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert add_engine_name in processors

    def test_level_applies_to_engine_logger(self) -> None:
        configure_logging(log_level="debug", json_format=False, add_timestamp=False)

        assert logging.getLogger(ENGINE_LOGGER).level == logging.DEBUG
        assert logging.getLogger("faker").level == logging.WARNING

    def test_custom_logger_name(self) -> None:
        configure_logging(log_level="ERROR", logger_name="dealease_host")
        assert logging.getLogger("dealease_host").level == logging.ERROR

    def test_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging(log_level="LOUD")

    def test_json_entry_is_tagged(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_level="INFO", json_format=True, add_timestamp=False)
        structlog.get_logger(f"{ENGINE_LOGGER}.tests").info("demo_initialized", density="light")

        entry = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert entry["event"] == "demo_initialized"
        assert entry["engine"] == ENGINE_NAME
        assert entry["logger"] == f"{ENGINE_LOGGER}.tests"
        assert entry["level"] == "info"
