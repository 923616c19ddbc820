"""
Blocking fsclient client.
"""

import logging
import time
from typing import Optional

from .base_client import BaseClient
from .endpoints import FsRequest
from .exceptions import TransportError
from .http.adapter import DEFAULT_TIMEOUT, HTTPAdapter, Timeout
from .http.requests_adapter import RequestsAdapter
from .models import HttpResponse, UserAgent
from .oauth import Signer


class FsClient(BaseClient):
    """
    Blocking client over a synchronous HTTP adapter.

    Examples:
        >>> client = FsClient(UserAgent(app_name="my-app", app_version="1.0"))
        >>> response = client.fetch(JsonGet(path="https://api.example.com/ok"))
        >>> response.unwrap()
        {'message': 'hi'}
    """

    def __init__(
        self,
        user_agent: UserAgent,
        signer: Optional[Signer] = None,
        adapter: Optional[HTTPAdapter] = None,
        base_url: Optional[str] = None,
        timeout: Timeout = DEFAULT_TIMEOUT,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize client.

        Args:
            user_agent: Application identity
            signer: Authentication mode (default: AuthDisabled)
            adapter: Optional custom HTTP adapter (default: RequestsAdapter)
            base_url: Optional base URL for relative paths
            timeout: (connect, read) timeouts in seconds
            logger: Logging collaborator
        """
        super().__init__(user_agent, signer, base_url, timeout, logger)
        self.http = adapter or RequestsAdapter()

    def __enter__(self) -> "FsClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        close = getattr(self.http, "close", None)
        if close is not None:
            close()

    def fetch(self, descriptor: FsRequest) -> HttpResponse:
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
            raw = self.http.send(request, timeout=self._timeout)
        except TransportError as e:
            self._record(request.method, "error", started, time.perf_counter())
            self._logger.error("Transport failure for %s [%s]: %s", request.method, request.url, e)
            raise
        self._record(request.method, str(raw.status), started, time.perf_counter())
        return self._decode(descriptor, raw)
