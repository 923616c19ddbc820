"""
Aiohttp-based HTTP adapter (asynchronous).
"""

import asyncio
from typing import Any, Optional

import aiohttp

from .adapter import DEFAULT_TIMEOUT, AsyncHTTPAdapter, Timeout
from ..exceptions import NetworkError, TimeoutError as FsTimeoutError
from ..models import RawResponse, WireRequest


class AiohttpAdapter(AsyncHTTPAdapter):
    """
    Asynchronous HTTP adapter using aiohttp library.

    The session is created lazily on first use unless one is supplied.
    """

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize aiohttp adapter.

        Args:
            session: Optional aiohttp.ClientSession instance
        """
        self._external_session = session is not None
        self.session = session

    async def __aenter__(self) -> "AiohttpAdapter":
        """Context manager entry."""
        if self.session is None:
            self.session = aiohttp.ClientSession()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit."""
        await self.close()

    async def send(self, request: WireRequest, timeout: Timeout = DEFAULT_TIMEOUT) -> RawResponse:
        """
        Send HTTP request using aiohttp library.

        Raises:
            NetworkError: On network connectivity issues
            TimeoutError: On request timeout
        """
        if self.session is None:
            self.session = aiohttp.ClientSession()

        connect, read = timeout
        timeout_obj = aiohttp.ClientTimeout(sock_connect=connect, sock_read=read)

        try:
            async with self.session.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                data=request.body,
                timeout=timeout_obj,
            ) as response:
                body = await response.read()
                return RawResponse(
                    status=response.status,
                    headers=dict(response.headers),
                    body=body,
                )

        except asyncio.TimeoutError as e:
            raise FsTimeoutError(f"Request timed out: {e}") from e

        except aiohttp.ClientError as e:
            raise NetworkError(f"Network request failed: {e}") from e

    async def close(self) -> None:
        """Close the session if we created it."""
        if not self._external_session and self.session:
            await self.session.close()
            self.session = None
