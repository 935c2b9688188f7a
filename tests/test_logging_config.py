"""Tests for logging setup."""

import json
import logging

from review_radar.logging_config import JSONFormatter, setup_logging


def test_json_formatter() -> None:
    """Test records render as JSON lines with extra fields."""
    record = logging.LogRecord(
        name="review_radar.core.race",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Timed out after %ss",
        args=(8,),
        exc_info=None,
    )
    record.platform = "Amazon"

    entry = json.loads(JSONFormatter().format(record))

    assert entry["level"] == "WARNING"
    assert entry["logger"] == "review_radar.core.race"
    assert entry["msg"] == "Timed out after 8s"
    assert entry["platform"] == "Amazon"


def test_setup_logging_file(tmp_path) -> None:
    """Test log file handler writes package records."""
    log_file = tmp_path / "logs" / "radar.log"

    setup_logging(level="INFO", json_output=True, log_file=str(log_file))
    logging.getLogger("review_radar.test").info("hello")

    for handler in logging.getLogger("review_radar").handlers:
        handler.flush()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[-1])["msg"] == "hello"

    setup_logging()
    assert logging.getLogger("review_radar").level == logging.WARNING
    assert len(logging.getLogger("review_radar").handlers) == 1
