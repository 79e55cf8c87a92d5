from __future__ import annotations

from typing import Any, Protocol

from .exceptions import FetchError
from .http import http_get


class Provider(Protocol):
    def get_json(self, url: str) -> Any:  # decoded API envelope
        ...

    def get_bytes(self, url: str) -> bytes:  # raw body, e.g. a zip archive
        ...


class KetabProvider:
    """Default provider talking to ketabonline.com over HTTPS."""

    def get_json(self, url: str) -> Any:
        got = http_get(url)
        if isinstance(got, (bytes, bytearray)):
            raise FetchError(f"Expected JSON from {url}")
        return got

    def get_bytes(self, url: str) -> bytes:
        got = http_get(url)
        if not isinstance(got, (bytes, bytearray)):
            raise FetchError(f"Expected binary content from {url}, got JSON")
        return bytes(got)
