"""
Tests for the asynchronous client.
"""

import asyncio

import pytest
from pydantic import BaseModel

from conftest import DummyAsyncAdapter, json_response, text_response
from fsclient import (
    AccessToken,
    AuthJsonPost,
    FsAsyncClient,
    JsonGet,
    NetworkError,
    PlainTextGet,
    TimeoutError,
    json_as,
)
from fsclient.exceptions import DecodingError, HttpStatusError


class ValidEntity(BaseModel):
    message: str


class InvalidEntity(BaseModel):
    something: bool


def run(coro):
    return asyncio.run(coro)


class TestFsAsyncClient:
    def test_fetch_json(self, user_agent):
        """Test fetching a JSON entity."""
        adapter = DummyAsyncAdapter(json_response(200, {"message": "hi"}))
        client = FsAsyncClient(user_agent, adapter=adapter)

        response = run(client.fetch(JsonGet(path="https://api.example.com/ok")))

        assert response.entity == {"message": "hi"}
        assert adapter.last_request.method == "GET"
        assert adapter.last_request.headers["User-Agent"] == user_agent.value

    def test_fetch_decoded_entity(self, user_agent):
        """Test decoding into a typed entity."""
        adapter = DummyAsyncAdapter(json_response(200, {"message": "hi"}))
        client = FsAsyncClient(user_agent, adapter=adapter)

        response = run(client.fetch(JsonGet(path="https://api.example.com/ok", decoder=json_as(ValidEntity))))

        assert response.unwrap() == ValidEntity(message="hi")

    def test_decoding_failure_is_data(self, user_agent):
        """Test that decoding failures are returned, not raised."""
        adapter = DummyAsyncAdapter(json_response(200, {"message": "hi"}))
        client = FsAsyncClient(user_agent, adapter=adapter)

        response = run(client.fetch(JsonGet(path="https://api.example.com/ok", decoder=json_as(InvalidEntity))))

        assert isinstance(response.error, DecodingError)
        assert response.error.status == 500

    def test_status_failure_is_data(self, user_agent):
        """Test that non-2xx statuses are returned, not raised."""
        adapter = DummyAsyncAdapter(text_response(404, "not found"))
        client = FsAsyncClient(user_agent, adapter=adapter)

        response = run(client.fetch(PlainTextGet(path="https://api.example.com/missing")))

        assert isinstance(response.error, HttpStatusError)
        assert response.error.message == "not found"

    def test_signed_post(self, user_agent):
        """Test signing a POST request."""
        adapter = DummyAsyncAdapter(json_response(201, {"message": "created"}))
        client = FsAsyncClient.v2(user_agent, AccessToken(value="abc"), adapter=adapter)

        response = run(client.fetch(AuthJsonPost(path="https://api.example.com/items", body={"a": "A"})))

        assert response.status == 201
        assert adapter.last_request.headers["Authorization"] == "Bearer abc"
        assert adapter.last_request.body == b'{"a":"A"}'

    def test_timeout_fails_the_call(self, user_agent):
        """Test that timeouts fail the call."""
        client = FsAsyncClient(user_agent, adapter=DummyAsyncAdapter(error=TimeoutError("Request timed out")))

        with pytest.raises(TimeoutError):
            run(client.fetch(JsonGet(path="https://api.example.com/slow")))

    def test_network_error_fails_the_call(self, user_agent):
        """Test that network errors fail the call."""
        client = FsAsyncClient(user_agent, adapter=DummyAsyncAdapter(error=NetworkError("refused")))

        with pytest.raises(NetworkError):
            run(client.fetch(JsonGet(path="https://api.example.com/down")))

    def test_concurrent_fetches_are_isolated(self, user_agent):
        """Test concurrent fetches on one client."""
        adapter = DummyAsyncAdapter(json_response(200, {"message": "hi"}))
        client = FsAsyncClient(user_agent, adapter=adapter, base_url="https://api.example.com")

        async def many():
            return await asyncio.gather(
                *(client.fetch(JsonGet(path=f"/items/{i}")) for i in range(10))
            )

        responses = run(many())

        assert all(r.entity == {"message": "hi"} for r in responses)
        assert sorted(r.url for r in adapter.requests) == sorted(
            f"https://api.example.com/items/{i}" for i in range(10)
        )

    def test_context_manager_closes_adapter(self, user_agent):
        """Test closing the adapter on context exit."""
        adapter = DummyAsyncAdapter()

        async def use():
            async with FsAsyncClient(user_agent, adapter=adapter) as client:
                await client.fetch(JsonGet(path="https://api.example.com/ok"))

        run(use())
        assert adapter.closed
