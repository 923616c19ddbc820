"""
Request descriptors.

A descriptor declares one endpoint call: method, path, optional body, the
raw payload kind expected back and the decoder turning it into an entity.
Get descriptors have no ``body`` field and reject one at construction.

Examples:
    >>> from fsclient.codecs import json_as
    >>> class Profile(BaseModel):
    ...     name: str
    >>> get_profile = AuthJsonGet(path="/me", decoder=json_as(Profile))
    >>> create = JsonPost(path="/items", body={"a": "A", "b": [1, 2, 3]})
"""

from enum import Enum
from typing import Any, ClassVar, Dict, Optional
from urllib.parse import urlencode, urlsplit

from pydantic import BaseModel, ConfigDict, Field

from .codecs import Decoder, encode_body, identity
from .exceptions import ConfigurationError
from .models import UserAgent, WireRequest, get_header


class RawKind(str, Enum):
    """Wire-level payload shape before typed decoding"""

    JSON = "json"
    PLAIN_TEXT = "plain_text"


_ACCEPT = {
    RawKind.JSON: "application/json",
    RawKind.PLAIN_TEXT: "text/plain",
}


class FsRequest(BaseModel):
    """Base descriptor shared by every request family"""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    method: ClassVar[str]
    raw_kind: ClassVar[RawKind]
    authenticated: ClassVar[bool] = False
    has_body: ClassVar[bool] = False

    path: str = Field(..., min_length=1, description="Absolute URL or path relative to base_url")
    params: Dict[str, Any] = Field(default_factory=dict, description="Query parameters")
    headers: Dict[str, str] = Field(default_factory=dict, description="Extra request headers")
    decoder: Decoder = Field(identity, description="Raw payload -> entity")
    no_content: bool = Field(False, description="Expect no response body")

    @property
    def entity_body(self) -> Any:
        return None

    def url(self, base_url: Optional[str] = None) -> str:
        if urlsplit(self.path).scheme:
            url = self.path
        elif base_url:
            url = base_url.rstrip("/") + "/" + self.path.lstrip("/")
        else:
            raise ConfigurationError(f"Relative path {self.path!r} needs a base_url")

        if self.params:
            query = urlencode(self.params, doseq=True)
            url = f"{url}{'&' if urlsplit(url).query else '?'}{query}"
        return url

    def render(self, user_agent: UserAgent, base_url: Optional[str] = None) -> WireRequest:
        """Build the unsigned wire request"""
        headers = {
            "User-Agent": user_agent.value,
            "Accept": _ACCEPT[self.raw_kind],
        }
        headers.update(self.headers)

        body = None
        if self.has_body:
            body, content_type = encode_body(self.entity_body)
            if get_header(headers, "Content-Type") is None:
                headers["Content-Type"] = content_type

        return WireRequest(method=self.method, url=self.url(base_url), headers=headers, body=body)

    def run_with(self, client):
        """Shortcut for ``client.fetch(self)``"""
        return client.fetch(self)


class GetRequest(FsRequest):
    method: ClassVar[str] = "GET"


class PostRequest(FsRequest):
    method: ClassVar[str] = "POST"
    has_body: ClassVar[bool] = True

    body: Any = Field(..., description="Entity body")

    @property
    def entity_body(self) -> Any:
        return self.body


class JsonGet(GetRequest):
    raw_kind: ClassVar[RawKind] = RawKind.JSON


class JsonPost(PostRequest):
    raw_kind: ClassVar[RawKind] = RawKind.JSON


class PlainTextGet(GetRequest):
    raw_kind: ClassVar[RawKind] = RawKind.PLAIN_TEXT


class PlainTextPost(PostRequest):
    raw_kind: ClassVar[RawKind] = RawKind.PLAIN_TEXT


class AuthJsonGet(JsonGet):
    authenticated: ClassVar[bool] = True


class AuthJsonPost(JsonPost):
    authenticated: ClassVar[bool] = True


class AuthPlainTextGet(PlainTextGet):
    authenticated: ClassVar[bool] = True


class AuthPlainTextPost(PlainTextPost):
    authenticated: ClassVar[bool] = True
