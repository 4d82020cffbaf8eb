"""
Tests for the structlog setup.
"""

import json

import pytest
import structlog

from schedule_feed.logging import get_logger, setup_logging


@pytest.fixture
def restore_structlog():
    yield
    structlog.reset_defaults()


class TestSetupLogging:
    """Test where and how log lines are rendered."""

    def test_json_lines_go_to_stderr(self, capsys, restore_structlog):
        setup_logging(json_output=True, log_level="INFO")
        get_logger("schedule_feed.test").warning("invalid_date_argument", value="bad")

        captured = capsys.readouterr()
        line = json.loads(captured.err.strip().splitlines()[-1])

        assert captured.out == ""
        assert line["event"] == "invalid_date_argument"
        assert line["level"] == "warning"
        assert line["value"] == "bad"
        assert "timestamp" in line

    def test_level_filtering(self, capsys, restore_structlog):
        setup_logging(json_output=True, log_level="WARNING")
        get_logger("schedule_feed.test").info("inputs_loaded")

        assert capsys.readouterr().err == ""
