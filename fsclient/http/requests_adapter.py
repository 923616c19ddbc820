"""
Requests-based HTTP adapter (synchronous).
"""

from typing import Optional

import requests

from .adapter import DEFAULT_TIMEOUT, HTTPAdapter, Timeout
from ..exceptions import NetworkError, TimeoutError as FsTimeoutError
from ..models import RawResponse, WireRequest


class RequestsAdapter(HTTPAdapter):
    """
    Synchronous HTTP adapter using requests library.

    Features:
    - Connection reuse via session
    - Separate connect and read timeouts
    """

    def __init__(self, session: Optional[requests.Session] = None):
        """
        Initialize requests adapter.

        Args:
            session: Optional requests.Session instance
        """
        self._external_session = session is not None
        self.session = session or requests.Session()

    def send(self, request: WireRequest, timeout: Timeout = DEFAULT_TIMEOUT) -> RawResponse:
        """
        Send HTTP request using requests library.

        Raises:
            NetworkError: On network connectivity issues
            TimeoutError: On request timeout
        """
        try:
            response = self.session.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                data=request.body,
                timeout=timeout,
                allow_redirects=True,
            )

            return RawResponse(
                status=response.status_code,
                headers=dict(response.headers),
                body=response.content,
            )

        except requests.exceptions.Timeout as e:
            raise FsTimeoutError(f"Request timed out: {e}") from e

        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Network request failed: {e}") from e

    def close(self) -> None:
        """Close the session if we created it."""
        if not self._external_session:
            self.session.close()
