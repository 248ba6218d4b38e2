# Area: Shared Tests
"""Tests for setup_logging and the formatters."""

import json
import logging

import pytest

from holdem_agent._shared.logging_config import (
    JSONFormatter,
    TerminalFormatter,
    parse_level,
    setup_logging,
)


def _record(msg="hello", level=logging.INFO):
    return logging.LogRecord("holdem_agent.guard", level, __file__, 1, msg, None, None)


class TestSetupLogging:

    def test_terminal_and_file_handlers(self, tmp_path):
        log_file = tmp_path / "logs" / "agent.log"
        setup_logging(log_file_path=str(log_file), level="DEBUG")

        pkg_logger = logging.getLogger("holdem_agent")
        assert pkg_logger.propagate is False
        assert pkg_logger.level == logging.DEBUG
        assert len(pkg_logger.handlers) == 2

        logging.getLogger("holdem_agent.guard").info("claimed")
        for handler in pkg_logger.handlers:
            handler.flush()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        data = json.loads(line)
        assert data["message"] == "claimed"
        assert data["logger"] == "holdem_agent.guard"

    def test_no_file(self):
        setup_logging(log_file_path=None)
        assert len(logging.getLogger("holdem_agent").handlers) == 1

    def test_repeat_setup_replaces_handlers(self, tmp_path):
        setup_logging(log_file_path=str(tmp_path / "a.log"))
        setup_logging(log_file_path=str(tmp_path / "b.log"))
        assert len(logging.getLogger("holdem_agent").handlers) == 2


class TestFormatters:

    def test_json_formatter(self):
        data = json.loads(JSONFormatter().format(_record("pot=30")))
        assert data["level"] == "INFO"
        assert data["message"] == "pot=30"
        assert "timestamp" in data

    def test_terminal_formatter_leaves_record_untouched(self):
        record = _record()
        text = TerminalFormatter(fmt="%(levelname)s %(message)s").format(record)
        assert "\033[32m" in text
        assert record.levelname == "INFO"


class TestParseLevel:

    def test_names_and_numbers(self):
        assert parse_level("warning") == logging.WARNING
        assert parse_level(logging.ERROR) == logging.ERROR

    def test_unknown(self):
        with pytest.raises(ValueError):
            parse_level("LOUD")
