"""
Structured JSON logging for fsclient.

The clients emit ``request-sent``, ``response-received`` and
``decode-error`` events through an injected ``logging.Logger``; this module
only offers an optional JSON formatter for them.
"""

import json
import logging
import sys
from typing import Any, Dict, Mapping

SENSITIVE_HEADERS = {"authorization", "proxy-authorization", "cookie", "set-cookie", "x-api-key"}

_EXTRA_FIELDS = ("event", "method", "url", "status")


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string with timestamp, logger name, level, message and
            the fsclient event fields present on the record
        """
        payload: Dict[str, Any] = {
            "ts": int(record.created * 1000),  # milliseconds
            "name": record.name,
            "level": record.levelname,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)

        return json.dumps(payload, default=str)


def setup_structured_logger(level: int = logging.INFO, name: str = "fsclient") -> logging.Logger:
    """
    Configure structured JSON logging for the client.

    Args:
        level: Logging level (default: logging.INFO)
        name: Logger name (default: fsclient)

    Returns:
        The configured logger

    Example:
        >>> from fsclient.logging_setup import setup_structured_logger
        >>> logger = setup_structured_logger(logging.DEBUG)
        >>> client = FsAsyncClient(user_agent, adapter=adapter, logger=logger)
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    client_logger = logging.getLogger(name)
    client_logger.setLevel(level)
    client_logger.handlers = [handler]
    client_logger.propagate = False
    return client_logger


def _mask_value(value: str) -> str:
    # keep the auth scheme visible
    scheme, _, rest = value.partition(" ")
    if rest and scheme.isalpha():
        return f"{scheme} ***REDACTED***"
    return "***REDACTED***"


def sanitize_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """
    Mask credential-bearing headers before logging.

    Example:
        >>> sanitize_headers({"Authorization": "Bearer abc", "Accept": "text/plain"})
        {'Authorization': 'Bearer ***REDACTED***', 'Accept': 'text/plain'}
    """
    return {
        key: _mask_value(value) if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }
