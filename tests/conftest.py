"""
Pytest configuration and fixtures
"""

import json
from typing import Any, Dict, List, Optional

import pytest

from fsclient.http.adapter import AsyncHTTPAdapter, HTTPAdapter, Timeout
from fsclient.models import Consumer, RawResponse, UserAgent, WireRequest


def json_response(status: int, payload: Any, headers: Optional[Dict[str, str]] = None) -> RawResponse:
    base = {"Content-Type": "application/json"}
    base.update(headers or {})
    return RawResponse(status=status, headers=base, body=json.dumps(payload).encode("utf-8"))


def text_response(status: int, text: str, content_type: Optional[str] = "text/plain") -> RawResponse:
    headers = {"Content-Type": content_type} if content_type else {}
    return RawResponse(status=status, headers=headers, body=text.encode("utf-8"))


class DummyAdapter(HTTPAdapter):
    """Mock HTTP adapter recording every request."""

    def __init__(self, response: Optional[RawResponse] = None, error: Optional[Exception] = None):
        self.requests: List[WireRequest] = []
        self.response = response or json_response(200, {"message": "hi"})
        self.error = error

    @property
    def last_request(self) -> WireRequest:
        return self.requests[-1]

    def send(self, request: WireRequest, timeout: Timeout = (5.0, 30.0)) -> RawResponse:
        self.requests.append(request)
        self.timeout = timeout
        if self.error is not None:
            raise self.error
        return self.response


class DummyAsyncAdapter(AsyncHTTPAdapter):
    """Async mock HTTP adapter recording every request."""

    def __init__(self, response: Optional[RawResponse] = None, error: Optional[Exception] = None):
        self.requests: List[WireRequest] = []
        self.response = response or json_response(200, {"message": "hi"})
        self.error = error
        self.closed = False

    @property
    def last_request(self) -> WireRequest:
        return self.requests[-1]

    async def send(self, request: WireRequest, timeout: Timeout = (5.0, 30.0)) -> RawResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def user_agent():
    return UserAgent(app_name="fsclient-test", app_version="0.1.0", app_url="https://github.com/fsclient")


@pytest.fixture
def consumer():
    return Consumer(key="consumer-key", secret="consumer-secret")
