from __future__ import annotations

import io
import json
import logging

import httpx
import pytest
import structlog

from unbxd_client import configure_logging
from unbxd_client.exceptions import SearchApiError


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    yield stream
    structlog.reset_defaults()


def _events(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


def test_configure_logging_renders_json(log_stream):
    configure_logging(stream=log_stream)

    structlog.get_logger("test").info("unbxd_test_event", domain="search")

    (event,) = _events(log_stream)
    assert event["event"] == "unbxd_test_event"
    assert event["domain"] == "search"
    assert event["level"] == "info"
    assert "timestamp" in event


def test_configure_logging_filters_below_level(log_stream):
    configure_logging(logging.WARNING, stream=log_stream)

    structlog.get_logger("test").info("dropped")
    structlog.get_logger("test").warning("kept")

    assert [event["event"] for event in _events(log_stream)] == ["kept"]


def test_console_output(log_stream):
    configure_logging(json_output=False, stream=log_stream)

    structlog.get_logger("test").info("readable_event", domain="search")

    line = log_stream.getvalue()
    assert "readable_event" in line
    assert "domain=search" in line


def test_api_error_is_logged_with_masked_api_key(log_stream, make_client):
    configure_logging(logging.DEBUG, stream=log_stream)
    client = make_client(lambda request: httpx.Response(404, text="site not found"))

    with pytest.raises(SearchApiError):
        client.search().search("shoes").execute()

    events = _events(log_stream)
    assert [event["event"] for event in events] == ["unbxd_request_started", "unbxd_api_error"]
    assert "secret-key" not in events[0]["url"]
    assert "/***/demo-site/search" in events[0]["url"]
    assert events[1]["status_code"] == 404
    assert events[1]["body"] == "site not found"
