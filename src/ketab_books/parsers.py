from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional

from .models import IndexItem, Page, PartReference


def extract_book_id(value: str) -> int:
    """Accept a bare id or a URL like https://ketabonline.com/ar/books/41768."""
    value = value.strip()
    if value.isdigit():
        return int(value)
    m = re.search(r"/books?/(\d+)", value)
    if not m:
        raise ValueError("Expected a book id or a URL like https://ketabonline.com/ar/books/<id>")
    return int(m.group(1))


def _opt_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_part(data: Optional[Dict[str, Any]]) -> Optional[PartReference]:
    if not data:
        return None
    return PartReference(id=int(data.get("id") or 0), name=str(data.get("name") or ""))


def parse_page(data: Dict[str, Any]) -> Page:
    return Page(
        id=int(data["id"]),
        page=int(data.get("page") or 0),
        content=data.get("content") or "",
        index=int(data.get("index") or 0),
        part=parse_part(data.get("part")),
    )


def parse_pages(items: Optional[Iterable[Dict[str, Any]]]) -> List[Page]:
    return [parse_page(d) for d in items or []]


def parse_index_item(data: Dict[str, Any]) -> IndexItem:
    """Build an IndexItem (and its subtree) from an API index entry."""
    children = [parse_index_item(c) for c in data.get("children") or []]
    part_name = data.get("part_name")
    return IndexItem(
        id=int(data["id"]),
        title=data.get("title") or "",
        page=int(data.get("page") or 0),
        title_level=int(data.get("title_level") or 1),
        part_name=str(part_name) if part_name else None,
        children=children,
        page_id=_opt_int(data.get("page_id")),
        parent=_opt_int(data.get("parent")),
    )


def parse_index(items: Optional[Iterable[Dict[str, Any]]]) -> List[IndexItem]:
    return [parse_index_item(d) for d in items or []]
