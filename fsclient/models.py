"""
fsclient data models
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Generic, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import ResponseError

Res = TypeVar("Res")


class UserAgent(BaseModel):
    """Application identity sent as the ``User-Agent`` header"""

    model_config = ConfigDict(frozen=True)

    app_name: str = Field(..., min_length=1, description="Application name")
    app_version: Optional[str] = Field(None, description="Application version")
    app_url: Optional[str] = Field(None, description="Application homepage")

    @property
    def value(self) -> str:
        # "name/version (+url)"
        version = f"/{self.app_version}" if self.app_version else ""
        url = f" (+{self.app_url})" if self.app_url else ""
        return f"{self.app_name}{version}{url}"

    def __str__(self) -> str:
        return self.value


class Consumer(BaseModel):
    """OAuth v1 consumer credentials"""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Consumer key")
    secret: str = Field(..., description="Consumer secret")

    def __repr__(self) -> str:
        return f"Consumer(key={self.key!r}, secret=***REDACTED***)"


class Token(BaseModel):
    """OAuth v1 request or access token"""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., min_length=1, description="oauth_token")
    secret: str = Field("", description="oauth_token_secret")
    verifier: Optional[str] = Field(None, description="oauth_verifier, when exchanging a request token")

    def __repr__(self) -> str:
        return f"Token(value={self.value!r}, secret=***REDACTED***)"


class AccessToken(BaseModel):
    """OAuth v2 bearer token"""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., min_length=1, description="Access token")
    token_type: str = Field("Bearer", description="Authorization scheme")

    @field_validator("token_type")
    @classmethod
    def validate_token_type(cls, v):
        if not v or " " in v:
            raise ValueError("token_type must be a single non-empty word")
        return v

    def __repr__(self) -> str:
        return f"AccessToken(value=***REDACTED***, token_type={self.token_type!r})"


def get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Case-insensitive header lookup"""
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


@dataclass(frozen=True)
class WireRequest:
    """Transport-level request, ready to send"""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None

    def header(self, name: str) -> Optional[str]:
        return get_header(self.headers, name)

    def with_headers(self, extra: Mapping[str, str]) -> "WireRequest":
        headers = dict(self.headers)
        headers.update(extra)
        return replace(self, headers=headers)


@dataclass(frozen=True)
class RawResponse:
    """Undecoded response as returned by an HTTP adapter"""

    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status <= 299

    def header(self, name: str) -> Optional[str]:
        return get_header(self.headers, name)

    @property
    def content_type(self) -> Optional[str]:
        """Media type without parameters, lowercased"""
        value = self.header("Content-Type")
        if not value:
            return None
        return value.split(";", 1)[0].strip().lower() or None

    @property
    def charset(self) -> str:
        value = self.header("Content-Type") or ""
        for param in value.split(";")[1:]:
            name, _, charset = param.partition("=")
            if name.strip().lower() == "charset" and charset.strip():
                return charset.strip().strip('"')
        return "utf-8"

    def decode(self, errors: str = "strict") -> str:
        """Body as text in the declared charset, utf-8 when it is unknown"""
        try:
            return self.body.decode(self.charset, errors)
        except LookupError:
            return self.body.decode("utf-8", errors="replace")

    @property
    def text(self) -> str:
        return self.decode()


@dataclass(frozen=True)
class HttpResponse(Generic[Res]):
    """
    Outcome of a fetch.

    ``status`` is always the status sent by the server. Exactly one of
    ``entity`` and ``error`` is meaningful, depending on ``ok``.
    """

    status: int
    headers: Dict[str, str]
    entity: Optional[Res] = None
    error: Optional[ResponseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def result(self) -> Union[ResponseError, Res]:
        """The error on failure, the decoded entity otherwise"""
        if self.error is not None:
            return self.error
        return self.entity

    def unwrap(self) -> Res:
        """Return the entity or raise the ResponseError"""
        if self.error is not None:
            raise self.error
        return self.entity

    def header(self, name: str) -> Optional[str]:
        return get_header(self.headers, name)
