"""
HTTP adapters for fsclient.
"""

from .adapter import AsyncHTTPAdapter, HTTPAdapter, Timeout
from .requests_adapter import RequestsAdapter
from .aiohttp_adapter import AiohttpAdapter

__all__ = ["HTTPAdapter", "AsyncHTTPAdapter", "Timeout", "RequestsAdapter", "AiohttpAdapter"]
