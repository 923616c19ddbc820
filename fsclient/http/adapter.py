"""
Base HTTP adapter interfaces.
"""

from abc import ABC, abstractmethod
from typing import Tuple

from ..models import RawResponse, WireRequest

# (connect, read) in seconds
Timeout = Tuple[float, float]

DEFAULT_TIMEOUT: Timeout = (5.0, 30.0)


class HTTPAdapter(ABC):
    """
    Abstract base class for synchronous HTTP adapters.

    Allows pluggable HTTP clients; the client only depends on ``send``.
    """

    @abstractmethod
    def send(self, request: WireRequest, timeout: Timeout = DEFAULT_TIMEOUT) -> RawResponse:
        """
        Send HTTP request.

        Args:
            request: Signed wire request
            timeout: (connect, read) timeouts in seconds

        Returns:
            Raw response with status, headers and body bytes

        Raises:
            NetworkError: On network connectivity issues
            TimeoutError: On request timeout
        """
        raise NotImplementedError


class AsyncHTTPAdapter(ABC):
    """Abstract base class for asynchronous HTTP adapters."""

    @abstractmethod
    async def send(self, request: WireRequest, timeout: Timeout = DEFAULT_TIMEOUT) -> RawResponse:
        """
        Send HTTP request without blocking the event loop.

        Raises:
            NetworkError: On network connectivity issues
            TimeoutError: On request timeout
        """
        raise NotImplementedError

    async def close(self) -> None:
        """Release resources held by the adapter."""
        return None
