"""Tests for logging configuration."""

import json
import logging
import sys
from collections.abc import Iterator

import pytest

from spotify_proxy.logging.formatter import JSONLogFormatter
from spotify_proxy.logging.setup import configure_logging


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_fields() -> None:
    """Records become one JSON object per line."""
    record = logging.LogRecord("spotify_proxy.client", logging.WARNING, __file__, 1, "HTTP %d", (503,), None)
    entry = json.loads(JSONLogFormatter().format(record))
    assert entry["level"] == "WARNING"
    assert entry["service"] == "spotify-proxy"
    assert entry["logger"] == "spotify_proxy.client"
    assert entry["message"] == "HTTP 503"
    assert "exception" not in entry


def test_json_formatter_exception() -> None:
    """Exception info is rendered into the entry."""
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
    entry = json.loads(JSONLogFormatter().format(record))
    assert "RuntimeError: boom" in entry["exception"]


@pytest.mark.usefixtures("restore_root_logger")
def test_configure_logging_json() -> None:
    """configure_logging installs a single JSON handler at the requested level."""
    configure_logging("debug", json_output=True)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JSONLogFormatter)
    assert logging.getLogger("httpx").level == logging.WARNING


@pytest.mark.usefixtures("restore_root_logger")
def test_configure_logging_text() -> None:
    """Plain text output is the default."""
    configure_logging()
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert not isinstance(root.handlers[0].formatter, JSONLogFormatter)


def test_json_formatter_context_fields() -> None:
    """operation and status_code passed via extra= are included."""
    record = logging.LogRecord("spotify_proxy.client", logging.WARNING, __file__, 1, "failed", None, None)
    record.operation = "fetch album"
    record.status_code = 503
    entry = json.loads(JSONLogFormatter().format(record))
    assert entry["operation"] == "fetch album"
    assert entry["status_code"] == 503
