"""
Asynchronous fsclient client.

Suspends only at the transport call; concurrent fetches on one instance
share nothing but the immutable bindings.
"""

import logging
import time
from typing import Any, Optional

from .base_client import BaseClient
from .endpoints import FsRequest
from .exceptions import TransportError
from .http.adapter import DEFAULT_TIMEOUT, AsyncHTTPAdapter, Timeout
from .http.aiohttp_adapter import AiohttpAdapter
from .models import HttpResponse, UserAgent
from .oauth import Signer


class FsAsyncClient(BaseClient):
    """
    Asynchronous client over an asynchronous HTTP adapter.

    Examples:
        >>> import asyncio
        >>>
        >>> async def main():
        ...     async with FsAsyncClient.v2(user_agent, AccessToken(value="abc")) as client:
        ...         response = await client.fetch(AuthJsonGet(path="https://api.example.com/me"))
        ...         print(response.result)
        >>>
        >>> asyncio.run(main())
    """

    def __init__(
        self,
        user_agent: UserAgent,
        signer: Optional[Signer] = None,
        adapter: Optional[AsyncHTTPAdapter] = None,
        base_url: Optional[str] = None,
        timeout: Timeout = DEFAULT_TIMEOUT,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize async client.

        Args:
            user_agent: Application identity
            signer: Authentication mode (default: AuthDisabled)
            adapter: Optional custom HTTP adapter (default: AiohttpAdapter)
            base_url: Optional base URL for relative paths
            timeout: (connect, read) timeouts in seconds
            logger: Logging collaborator
        """
        super().__init__(user_agent, signer, base_url, timeout, logger)
        self.http = adapter or AiohttpAdapter()

    async def __aenter__(self) -> "FsAsyncClient":
        """Context manager entry"""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit - closes the adapter"""
        await self.close()

    async def close(self) -> None:
        await self.http.close()

    async def fetch(self, descriptor: FsRequest) -> HttpResponse:
        """
        Execute a descriptor and decode its response.

        Returns:
            HttpResponse carrying the entity or a ResponseError

        Raises:
            NetworkError: On network connectivity issues
            TimeoutError: On request timeout
        """
        request = self._prepare(descriptor)
        started = time.perf_counter()
        try:
            raw = await self.http.send(request, timeout=self._timeout)
        except TransportError as e:
            self._record(request.method, "error", started, time.perf_counter())
            self._logger.error("Transport failure for %s [%s]: %s", request.method, request.url, e)
            raise
        self._record(request.method, str(raw.status), started, time.perf_counter())
        return self._decode(descriptor, raw)
