from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Optional

from .archive import download_book_contents, find_json_entry
from .exceptions import ArchiveError, KetabError, NotFoundError
from .http import api_url, build_url
from .models import IndexItem, Page
from .parsers import parse_index, parse_pages
from .providers import Provider, KetabProvider
from .utils import remove_falsy_values

logger = logging.getLogger(__name__)


def _unwrap(response: Any, not_found: Optional[str] = None) -> Any:
    """Return ``data`` of an API envelope, mapping ``code`` to errors."""
    code = response.get("code") if isinstance(response, dict) else None
    if code == 404 and not_found:
        raise NotFoundError(not_found)
    if code == 200:
        return response.get("data")
    logger.warning("Unexpected API response: %r", response)
    raise KetabError(f"Unknown error: {json.dumps(response, ensure_ascii=False)}")


def _list_params(query: Optional[str], options: Dict[str, Any]) -> Dict[str, Any]:
    params = dict(options)
    if query:
        params["q"] = query
    return params


def _get_record(kind: str, path: str, record_id: int, provider: Optional[Provider]) -> Dict[str, Any]:
    _prov = provider or KetabProvider()
    response = _prov.get_json(api_url(f"{path}/{record_id}"))
    return remove_falsy_values(_unwrap(response, f"{kind} {record_id} not found") or {})


def _get_list(path: str, query: Optional[str], options: Dict[str, Any], provider: Optional[Provider]) -> List[Dict[str, Any]]:
    _prov = provider or KetabProvider()
    url = build_url(api_url(path), _list_params(query, options))
    data = _unwrap(_prov.get_json(url)) or []
    return [remove_falsy_values(item) for item in data]


def get_author_info(author_id: int, *, provider: Optional[Provider] = None) -> Dict[str, Any]:
    return _get_record("Author", "authors", author_id, provider)


def get_authors(query: Optional[str] = None, *, provider: Optional[Provider] = None, **options: Any) -> List[Dict[str, Any]]:
    """Search authors. ``options`` go to the query string (limit, page, sort_field, ...)."""
    return _get_list("authors", query, options, provider)


def get_book_info(book_id: int, *, provider: Optional[Provider] = None) -> Dict[str, Any]:
    return _get_record("Book", "books", book_id, provider)


def get_books(query: Optional[str] = None, *, provider: Optional[Provider] = None, **options: Any) -> List[Dict[str, Any]]:
    """Search books. Besides paging, ``author_id``/``category_id`` filters are passed through."""
    return _get_list("books", query, options, provider)


def get_category_info(category_id: int, *, provider: Optional[Provider] = None) -> Dict[str, Any]:
    return _get_record("Category", "categories", category_id, provider)


def get_categories(query: Optional[str] = None, *, provider: Optional[Provider] = None, **options: Any) -> List[Dict[str, Any]]:
    return _get_list("categories", query, options, provider)


def get_book_index(
    book_id: int,
    *,
    is_recursive: bool = False,
    part: int = 1,
    provider: Optional[Provider] = None,
) -> List[IndexItem]:
    """Table of contents of one part of a book; nested when ``is_recursive``."""
    _prov = provider or KetabProvider()
    url = build_url(api_url(f"books/{book_id}/index"), {"is_recursive": is_recursive, "part": part})
    data = _unwrap(_prov.get_json(url), f"Book {book_id} not found")
    return parse_index(data)


def _book_json_bytes(book_id: int, provider: Optional[Provider]) -> bytes:
    entries = download_book_contents(book_id, provider=provider)
    return find_json_entry(entries).data


def get_book_contents(book_id: int, *, provider: Optional[Provider] = None) -> Dict[str, Any]:
    """Download and decode the full book payload (metadata, index and pages)."""
    raw = _book_json_bytes(book_id, provider)
    try:
        return json.loads(raw.decode("utf-8"))
    except ValueError as e:
        raise ArchiveError(f"Book {book_id} archive holds invalid JSON: {e}") from e


def download_book(book_id: int, output_file: str, *, provider: Optional[Provider] = None) -> str:
    """Save the book JSON payload to ``output_file`` and return the path."""
    raw = _book_json_bytes(book_id, provider)
    os.makedirs(os.path.dirname(output_file) or ".", exist_ok=True)
    with open(output_file, "wb") as fh:
        fh.write(raw)
    logger.debug("Wrote %d bytes to %s", len(raw), output_file)
    return output_file


def get_book_pages(contents: Dict[str, Any]) -> List[Page]:
    return parse_pages(contents.get("pages"))


def get_book_index_tree(contents: Dict[str, Any]) -> List[IndexItem]:
    return parse_index(contents.get("index"))
