"""Unit tests for structured logging utilities in ``observability``."""

from __future__ import annotations

import logging

import pytest

from minigrep import get_logger
from minigrep.observability import log_info, make_event


def test_null_handler_present() -> None:
    """Package logger should always include a NullHandler to avoid surprises."""

    logger = get_logger()
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_context_in_log(caplog: pytest.LogCaptureFixture) -> None:
    """Structured logs should carry the contextual fields under ``context``."""

    caplog.set_level(logging.INFO, logger="minigrep")
    log_info("search_complete", stage="search", path="poem.txt", matches=2)
    record = caplog.records[-1]
    assert record.getMessage() == "search_complete"
    assert getattr(record, "context") == {"stage": "search", "path": "poem.txt", "matches": 2}


def test_make_event_merges_optional_payload() -> None:
    assert make_event("read", None, {"size": 3}) == {"stage": "read", "path": None, "size": 3}
    assert make_event("read", "poem.txt") == {"stage": "read", "path": "poem.txt"}
