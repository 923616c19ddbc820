"""
Explicit decoders and request body encoding.

A decoder is any callable taking the raw payload (a parsed JSON value or a
string) and returning the entity; raising signals a decoding failure.
"""

import json
from typing import Any, Callable, Optional, Tuple, Type, TypeVar

from pydantic import TypeAdapter
from pydantic_core import to_jsonable_python

T = TypeVar("T")

Decoder = Callable[[Any], Any]

JSON_CONTENT_TYPE = "application/json"
PLAIN_TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"
OCTET_STREAM_CONTENT_TYPE = "application/octet-stream"


def identity(raw: Any) -> Any:
    """Return the raw payload unchanged"""
    return raw


def json_as(tp: Type[T]) -> Callable[[Any], T]:
    """
    Decoder validating a JSON value into ``tp``.

    ``tp`` is anything pydantic can validate: a BaseModel, a dataclass, a
    TypedDict or a plain annotation such as ``List[int]``.

    Examples:
        >>> decode = json_as(int)
        >>> decode(3)
        3
    """
    adapter = TypeAdapter(tp)

    def decode(raw: Any) -> T:
        return adapter.validate_python(raw)

    decode.__qualname__ = f"json_as({getattr(tp, '__name__', tp)})"
    return decode


def parse_json(text: str) -> Any:
    """Parse JSON text; raises ``json.JSONDecodeError`` on malformed input"""
    return json.loads(text)


def is_json_media_type(content_type: Optional[str]) -> bool:
    if not content_type:
        return False
    return content_type == JSON_CONTENT_TYPE or content_type.endswith("+json")


def encode_body(body: Any) -> Tuple[bytes, str]:
    """
    Encode a request body.

    Returns:
        Tuple of (payload bytes, content type)
    """
    if isinstance(body, str):
        return body.encode("utf-8"), PLAIN_TEXT_CONTENT_TYPE
    if isinstance(body, (bytes, bytearray)):
        return bytes(body), OCTET_STREAM_CONTENT_TYPE
    payload = json.dumps(to_jsonable_python(body), separators=(",", ":"))
    return payload.encode("utf-8"), JSON_CONTENT_TYPE
