"""
Request signing for OAuth v1 (RFC 5849) and OAuth v2 bearer tokens.

Every signer exposes ``sign(request) -> WireRequest`` and never mutates
the request it receives.
"""

import base64
import hashlib
import hmac
import logging
import secrets
import time
from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union
from urllib.parse import parse_qsl, quote, urlsplit

from .exceptions import ConfigurationError
from .models import AccessToken, Consumer, Token, WireRequest

logger = logging.getLogger("fsclient.oauth")

OAUTH_VERSION = "1.0"
HMAC_SHA1 = "HMAC-SHA1"
HMAC_SHA256 = "HMAC-SHA256"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

_DIGESTS = {
    HMAC_SHA1: hashlib.sha1,
    HMAC_SHA256: hashlib.sha256,
}

_DEFAULT_PORTS = {"http": 80, "https": 443}


def percent_encode(value: Union[str, bytes]) -> str:
    """
    RFC 5849 section 3.6 encoding.

    Only ALPHA, DIGIT, "-", ".", "_" and "~" stay unencoded, hex digits are
    uppercase and a space becomes ``%20``.
    """
    if isinstance(value, str):
        value = value.encode("utf-8")
    return quote(value, safe="-._~")


def base_string_uri(url: str) -> str:
    """Scheme and host lowercased, default port dropped, no query or fragment"""
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    host = (parts.hostname or "").lower()
    if ":" in host:
        host = f"[{host}]"
    port = parts.port
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        host = f"{host}:{port}"
    path = parts.path or "/"
    return f"{scheme}://{host}{path}"


def normalize_parameters(params: Iterable[Tuple[str, str]]) -> str:
    """Encode each pair, sort by name then value, join with ``&``"""
    encoded = sorted((percent_encode(k), percent_encode(v)) for k, v in params)
    return "&".join(f"{k}={v}" for k, v in encoded)


def request_parameters(request: WireRequest) -> List[Tuple[str, str]]:
    """Query string pairs plus form-encoded body pairs, if any"""
    params = parse_qsl(urlsplit(request.url).query, keep_blank_values=True)
    content_type = (request.header("Content-Type") or "").split(";", 1)[0].strip().lower()
    if request.body and content_type == FORM_CONTENT_TYPE:
        params.extend(parse_qsl(request.body.decode("utf-8"), keep_blank_values=True))
    return params


def signature_base_string(
    method: str, url: str, params: Iterable[Tuple[str, str]]
) -> str:
    return "&".join(
        [
            method.upper(),
            percent_encode(base_string_uri(url)),
            percent_encode(normalize_parameters(params)),
        ]
    )


def hmac_signature(
    base_string: str,
    consumer_secret: str,
    token_secret: str = "",
    signature_method: str = HMAC_SHA1,
) -> str:
    """Base64 HMAC over the base string, keyed with the encoded secrets"""
    key = f"{percent_encode(consumer_secret)}&{percent_encode(token_secret or '')}"
    digest = hmac.new(
        key.encode("utf-8"), base_string.encode("utf-8"), _DIGESTS[signature_method]
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def authorization_header(oauth_params: Dict[str, str]) -> str:
    fields = ", ".join(
        f'{percent_encode(k)}="{percent_encode(v)}"' for k, v in sorted(oauth_params.items())
    )
    return f"OAuth {fields}"


def parse_token_response(text: str) -> Token:
    """
    Decode an ``oauth_token=...&oauth_token_secret=...`` response body.

    Raises:
        ValueError: If ``oauth_token`` is missing
    """
    values = dict(parse_qsl(text.strip(), keep_blank_values=True))
    if not values.get("oauth_token"):
        raise ValueError("oauth_token missing from token response")
    return Token(value=values["oauth_token"], secret=values.get("oauth_token_secret", ""))


class Signer(ABC):
    """Authentication mode bound to a client"""

    @abstractmethod
    def sign(self, request: WireRequest) -> WireRequest:
        """Return a copy of ``request`` carrying the authentication material"""
        ...


class AuthDisabled(Signer):
    """No authentication"""

    def sign(self, request: WireRequest) -> WireRequest:
        return request

    def __repr__(self) -> str:
        return "AuthDisabled()"

    def __eq__(self, other) -> bool:
        return isinstance(other, AuthDisabled)

    def __hash__(self) -> int:
        return hash(AuthDisabled)


class SignerV1(Signer):
    """
    OAuth 1.0a HMAC signer.

    Nonce and timestamp are drawn from ``nonce_factory`` and ``clock`` on
    every call; inject fixed ones for deterministic signatures.

    Examples:
        >>> signer = SignerV1(Consumer(key="key", secret="secret"))
        >>> signed = signer.sign(WireRequest("GET", "https://api.example.com/me"))
        >>> signed.headers["Authorization"].startswith("OAuth ")
        True
    """

    def __init__(
        self,
        consumer: Consumer,
        token: Optional[Token] = None,
        signature_method: str = HMAC_SHA1,
        clock: Callable[[], float] = time.time,
        nonce_factory: Callable[[], str] = lambda: secrets.token_hex(16),
        realm: Optional[str] = None,
    ):
        if signature_method not in _DIGESTS:
            raise ConfigurationError(f"Unsupported signature method: {signature_method}")
        self.consumer = consumer
        self.token = token
        self.signature_method = signature_method
        self.realm = realm
        self._clock = clock
        self._nonce_factory = nonce_factory

    def oauth_parameters(self, nonce: str, timestamp: int) -> Dict[str, str]:
        params = {
            "oauth_consumer_key": self.consumer.key,
            "oauth_nonce": nonce,
            "oauth_signature_method": self.signature_method,
            "oauth_timestamp": str(timestamp),
            "oauth_version": OAUTH_VERSION,
        }
        if self.token is not None:
            params["oauth_token"] = self.token.value
            if self.token.verifier:
                params["oauth_verifier"] = self.token.verifier
        return params

    def signature(self, request: WireRequest, oauth_params: Dict[str, str]) -> str:
        params = request_parameters(request) + list(oauth_params.items())
        base_string = signature_base_string(request.method, request.url, params)
        logger.debug("OAuth v1 signature base string: %s", base_string)
        return hmac_signature(
            base_string,
            self.consumer.secret,
            self.token.secret if self.token else "",
            self.signature_method,
        )

    def sign(self, request: WireRequest) -> WireRequest:
        oauth_params = self.oauth_parameters(self._nonce_factory(), int(self._clock()))
        oauth_params["oauth_signature"] = self.signature(request, oauth_params)
        header = authorization_header(oauth_params)
        if self.realm is not None:
            header = header.replace("OAuth ", f'OAuth realm="{self.realm}", ', 1)
        return request.with_headers({"Authorization": header})

    def __repr__(self) -> str:
        return (
            f"SignerV1(consumer={self.consumer!r}, token={self.token!r}, "
            f"signature_method={self.signature_method!r})"
        )


class SignerV2(Signer):
    """OAuth 2 bearer token signer"""

    def __init__(self, access_token: AccessToken):
        self.access_token = access_token

    def sign(self, request: WireRequest) -> WireRequest:
        return request.with_headers(
            {"Authorization": f"{self.access_token.token_type} {self.access_token.value}"}
        )

    def __repr__(self) -> str:
        return f"SignerV2(access_token={self.access_token!r})"


def sign(request: WireRequest, signer: Signer) -> WireRequest:
    """Apply ``signer`` to ``request``"""
    return signer.sign(request)
