"""
Tests for structured logging helpers.
"""

import json
import logging

from fsclient.logging_setup import JsonFormatter, sanitize_headers, setup_structured_logger


def test_json_formatter_includes_event_fields():
    """Test that the formatter keeps event fields."""
    record = logging.LogRecord("fsclient", logging.INFO, __file__, 1, "Request: %s", ("GET",), None)
    record.event = "request-sent"
    record.url = "https://api.example.com/ok"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["msg"] == "Request: GET"
    assert payload["event"] == "request-sent"
    assert payload["url"] == "https://api.example.com/ok"
    assert payload["level"] == "INFO"
    assert "status" not in payload


def test_sanitize_headers():
    """Test header sanitizing."""
    headers = {
        "Authorization": 'OAuth oauth_consumer_key="k", oauth_signature="s"',
        "x-api-key": "secret",
        "Accept": "application/json",
    }
    assert sanitize_headers(headers) == {
        "Authorization": "OAuth ***REDACTED***",
        "x-api-key": "***REDACTED***",
        "Accept": "application/json",
    }


def test_setup_structured_logger():
    """Test structured logger setup."""
    logger = setup_structured_logger(logging.DEBUG, name="fsclient.test-structured")
    assert logger.level == logging.DEBUG
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)
    assert logger.propagate is False
