"""
fsclient - typed HTTP client with OAuth v1 / v2 request signing.
"""

from .__version__ import __version__
from .async_client import FsAsyncClient
from .client import FsClient
from .codecs import identity, json_as
from .config import ClientConfig
from .endpoints import (
    AuthJsonGet,
    AuthJsonPost,
    AuthPlainTextGet,
    AuthPlainTextPost,
    FsRequest,
    JsonGet,
    JsonPost,
    PlainTextGet,
    PlainTextPost,
    RawKind,
)
from .exceptions import (
    ConfigurationError,
    DecodingError,
    EmptyResponseError,
    FsClientError,
    HttpStatusError,
    NetworkError,
    ResponseError,
    TimeoutError,
    TransportError,
)
from .models import AccessToken, Consumer, HttpResponse, RawResponse, Token, UserAgent, WireRequest
from .oauth import AuthDisabled, Signer, SignerV1, SignerV2, parse_token_response

__all__ = [
    "FsClient",
    "FsAsyncClient",
    "ClientConfig",
    "identity",
    "json_as",
    "FsRequest",
    "RawKind",
    "JsonGet",
    "JsonPost",
    "PlainTextGet",
    "PlainTextPost",
    "AuthJsonGet",
    "AuthJsonPost",
    "AuthPlainTextGet",
    "AuthPlainTextPost",
    "FsClientError",
    "ResponseError",
    "EmptyResponseError",
    "DecodingError",
    "HttpStatusError",
    "TransportError",
    "NetworkError",
    "TimeoutError",
    "ConfigurationError",
    "UserAgent",
    "Consumer",
    "Token",
    "AccessToken",
    "WireRequest",
    "RawResponse",
    "HttpResponse",
    "Signer",
    "AuthDisabled",
    "SignerV1",
    "SignerV2",
    "parse_token_response",
    "__version__",
]
