from __future__ import annotations

import contextlib
import json
import logging
import os
from http.client import HTTPException
from typing import Any, Dict, Union
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode, urlsplit, urlunsplit
from urllib.request import Request, urlopen

from .exceptions import FetchError

logger = logging.getLogger(__name__)

API_BASE_URL = "https://backend.ketabonline.com/api/v2"
BOOKS_CDN_URL = "https://s2.ketabonline.com/books"
DEFAULT_TIMEOUT = 20.0

UA = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/126.0.0.0 Safari/537.36"
)


def api_base_url() -> str:
    return os.environ.get("KETAB_API_BASE_URL", API_BASE_URL).rstrip("/")


def books_cdn_url() -> str:
    return os.environ.get("KETAB_CDN_URL", BOOKS_CDN_URL).rstrip("/")


def http_timeout() -> float:
    raw = os.environ.get("KETAB_HTTP_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return max(1.0, float(raw))
    except ValueError:
        logger.warning("Ignoring invalid KETAB_HTTP_TIMEOUT=%r", raw)
        return DEFAULT_TIMEOUT


def api_url(path: str) -> str:
    """Full backend URL for a resource path such as 'authors' or 'books/123'."""
    return f"{api_base_url()}/{path.lstrip('/')}"


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def build_url(endpoint: str, params: Dict[str, Any]) -> str:
    """Replace the query string of ``endpoint`` with ``params``; None values are skipped."""
    parts = urlsplit(endpoint)
    query = urlencode([(k, _param_value(v)) for k, v in params.items() if v is not None])
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def http_get(url: str) -> Union[bytes, Any]:
    """GET ``url``; decoded JSON for application/json responses, raw bytes otherwise."""
    logger.debug("GET %s", url)
    req = Request(
        url,
        headers={
            "User-Agent": UA,
            "Accept-Language": "ar,en;q=0.8",
        },
    )
    try:
        with contextlib.closing(urlopen(req, timeout=http_timeout())) as resp:
            data = resp.read()
            ctype = resp.headers.get("Content-Type") or ""
    except HTTPError as e:
        raise FetchError(f"Error making request: {e.code} {e.reason}", status=e.code) from e
    except (URLError, OSError, HTTPException) as e:
        raise FetchError(f"Request to {url} failed: {e}") from e

    if "application/json" in ctype.lower():
        try:
            return json.loads(data.decode("utf-8"))
        except ValueError as e:
            raise FetchError(f"Invalid JSON from {url}: {e}") from e
    logger.debug("Received %d bytes (%s) from %s", len(data), ctype or "unknown type", url)
    return data
