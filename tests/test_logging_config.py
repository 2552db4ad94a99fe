"""Tests for logging configuration."""

import io
import logging
import pytest
from code_de_chart.logging_config import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    def test_format_and_stream(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging("INFO", stream=stream)
        logging.getLogger("code_de_chart.service").info("Generating gantt chart")
        line = stream.getvalue().strip()
        assert line.endswith(" - code_de_chart.service - INFO - Generating gantt chart")

    def test_level_from_env(self, restore_root_logger, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        configure_logging(stream=io.StringIO())
        assert restore_root_logger.level == logging.DEBUG

    def test_default_warning(self, restore_root_logger, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        stream = io.StringIO()
        configure_logging(stream=stream)
        logging.getLogger("code_de_chart").info("hidden")
        assert restore_root_logger.level == logging.WARNING
        assert stream.getvalue() == ""

    def test_unknown_level(self, restore_root_logger):
        configure_logging("CHATTY", stream=io.StringIO())
        assert restore_root_logger.level == logging.WARNING

    def test_single_handler(self, restore_root_logger):
        configure_logging("INFO", stream=io.StringIO())
        configure_logging("INFO", stream=io.StringIO())
        assert len(restore_root_logger.handlers) == 1

    def test_http_clients_quiet(self, restore_root_logger):
        configure_logging("DEBUG", stream=io.StringIO())
        assert logging.getLogger("httpx").level == logging.WARNING
