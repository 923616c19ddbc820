"""
Exception classes for fsclient.

``ResponseError`` and its subclasses describe expected API-level outcomes.
They are returned inside ``HttpResponse`` as data, never raised by the
clients themselves. ``TransportError`` subclasses are raised by the HTTP
adapters and propagate to the caller.
"""

from typing import Any, Optional

HTTP_BAD_REQUEST = 400
HTTP_INTERNAL_SERVER_ERROR = 500

EMPTY_RESPONSE_MESSAGE = "Response was empty. Please check request logs"
DECODING_ERROR_MESSAGE = (
    "There was a problem decoding or parsing this response, please check the error logs"
)


class FsClientError(Exception):
    """Base exception for fsclient"""

    pass


class ResponseError(FsClientError):
    """
    Structured error for a response that could not be turned into an entity.

    Attributes:
        status: HTTP status attached to the error
        message: Human-readable message
        cause: Underlying exception, if any
        body: Parsed JSON or raw text of the response, if any
    """

    def __init__(
        self,
        status: int,
        message: str,
        cause: Optional[BaseException] = None,
        body: Any = None,
    ):
        self.status = status
        self.message = message
        self.cause = cause
        self.body = body
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.status}] {self.message}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResponseError):
            return NotImplemented
        return (type(self), self.status, self.message, self.body) == (
            type(other),
            other.status,
            other.message,
            other.body,
        )

    def __hash__(self) -> int:
        # body may hold unhashable JSON
        return hash((type(self), self.status, self.message))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status={self.status}, "
            f"message={self.message!r}, cause={self.cause!r})"
        )

    @classmethod
    def empty(cls, status: int = HTTP_BAD_REQUEST) -> "EmptyResponseError":
        return EmptyResponseError(status)


class EmptyResponseError(ResponseError):
    """Successful status but no body where content was expected"""

    def __init__(self, status: int = HTTP_BAD_REQUEST):
        super().__init__(status, EMPTY_RESPONSE_MESSAGE)


class DecodingError(ResponseError):
    """Raw payload could not be parsed, or the decoder rejected it"""

    def __init__(self, cause: BaseException, body: Any = None):
        super().__init__(HTTP_INTERNAL_SERVER_ERROR, DECODING_ERROR_MESSAGE, cause=cause, body=body)


class HttpStatusError(ResponseError):
    """Server answered with a non-2xx status"""

    pass


class TransportError(FsClientError):
    """Network-level failure raised by an HTTP adapter"""

    pass


class NetworkError(TransportError):
    """Connection refused, DNS failure, broken connection"""

    pass


class TimeoutError(TransportError):
    """Connection attempt or body read exceeded the configured bound"""

    pass


class ConfigurationError(FsClientError):
    """Invalid client or signer configuration"""

    pass
