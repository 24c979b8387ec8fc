"""Unit tests for structured logging configuration."""

from __future__ import annotations

import io
import json
from contextlib import redirect_stderr

from core.logging_config import configure_logging, get_logger


def test_get_logger_writes_to_current_stderr() -> None:
    """Events should follow stderr redirects made after configuration."""
    configure_logging("info")
    logger = get_logger("tests.logging")
    buffer = io.StringIO()

    with redirect_stderr(buffer):
        logger.warning("label_event", order_id="ORD001")

    payload = json.loads(buffer.getvalue().strip().splitlines()[-1])
    assert payload["event"] == "label_event" and payload["order_id"] == "ORD001"


def test_configure_logging_filters_below_level() -> None:
    """Events under the configured level should be dropped."""
    configure_logging("error")
    buffer = io.StringIO()

    try:
        with redirect_stderr(buffer):
            get_logger("tests.logging").info("quiet_event")
    finally:
        configure_logging("info")

    assert buffer.getvalue() == ""
