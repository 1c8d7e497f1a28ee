"""Unit tests for logging utilities."""

import io
import json
import logging
import re
from pathlib import Path

import pytest

from ctxgraph.pipeline import verify_context_graph
from ctxgraph.utils import LogMode, configure_from_cli, get_logger, setup_logging
from ctxgraph.utils.logging import ROOT_LOGGER_NAME, HumanFormatter, JSONFormatter


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore the ctxgraph logger after each test."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def _record(msg: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("ctxgraph", level, __file__, 1, msg, (), None)


class TestFormatters:
    """Tests for log formatters."""

    def test_human_without_colors(self) -> None:
        """Test the plain human format."""
        formatter = HumanFormatter(use_colors=False)

        assert formatter.format(_record("hello")) == "[INFO] hello"

    def test_human_with_colors(self) -> None:
        """Test that colors wrap the level prefix."""
        formatter = HumanFormatter(use_colors=True)

        assert "\033[" in formatter.format(_record("hello", logging.ERROR))

    def test_json(self) -> None:
        """Test JSON lines output."""
        entry = json.loads(JSONFormatter().format(_record("done", logging.WARNING)))

        assert entry["level"] == "WARNING"
        assert entry["msg"] == "done"
        assert "ts" in entry


class TestSetupLogging:
    """Tests for setup_logging and CLI configuration."""

    def test_verbose_mode_has_timestamp(self) -> None:
        """Test the verbose line format."""
        stream = io.StringIO()
        setup_logging(mode=LogMode.VERBOSE, level=logging.DEBUG, stream=stream)

        get_logger("ctxgraph.analyzers").debug("scanning")

        assert re.match(r"\[DEBUG\]\[\d{2}:\d{2}:\d{2}\] scanning", stream.getvalue())

    def test_structured_extra_data(self) -> None:
        """Test structured logging in JSON mode."""
        stream = io.StringIO()
        setup_logging(mode=LogMode.JSON, stream=stream)

        get_logger().structured(logging.INFO, "scored", completeness=88)

        entry = json.loads(stream.getvalue())
        assert entry["msg"] == "scored"
        assert entry["completeness"] == 88

    def test_level_filtering(self) -> None:
        """Test that messages below the level are dropped."""
        stream = io.StringIO()
        setup_logging(level=logging.WARNING, stream=stream)

        get_logger().info("hidden")
        get_logger().warning("shown")

        assert "hidden" not in stream.getvalue()
        assert "[WARNING] shown" in stream.getvalue()

    @pytest.mark.parametrize(
        ("flags", "level"),
        [
            ({}, logging.INFO),
            ({"verbose": True}, logging.DEBUG),
            ({"quiet": True}, logging.WARNING),
            ({"ci": True}, logging.INFO),
        ],
    )
    def test_configure_from_cli_levels(self, flags: dict[str, bool], level: int) -> None:
        """Test levels chosen from CLI flags."""
        configure_from_cli(**flags)

        assert logging.getLogger(ROOT_LOGGER_NAME).level == level

    def test_ci_uses_json(self) -> None:
        """Test that CI mode installs the JSON formatter."""
        configure_from_cli(ci=True)

        handler = logging.getLogger(ROOT_LOGGER_NAME).handlers[0]
        assert isinstance(handler.formatter, JSONFormatter)


class TestVerificationLogging:
    """Tests for log lines emitted by a verification run."""

    def test_scores_logged_as_structured_data(self, context_graph: Path) -> None:
        """Test that JSON mode carries the scores as fields."""
        stream = io.StringIO()
        setup_logging(mode=LogMode.JSON, level=logging.DEBUG, stream=stream)

        verify_context_graph(context_graph)

        entries = [json.loads(line) for line in stream.getvalue().splitlines()]
        scores = [e for e in entries if e["msg"].startswith("Scores:")]
        assert len(scores) == 1
        assert scores[0]["completeness"] == 88
        assert scores[0]["structure"] == 100
        assert scores[0]["errors"] == 0
        assert any(e["msg"].startswith("Phase structure: score=100 errors=0") for e in entries)
