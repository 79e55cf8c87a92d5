from __future__ import annotations

from typing import List, Optional, Sequence

from .models import IndexItem


def flatten_index(index: Sequence[IndexItem]) -> List[IndexItem]:
    """Return every entry of a hierarchical index in pre-order."""
    out: List[IndexItem] = []

    def walk(items: Sequence[IndexItem]) -> None:
        for item in items:
            out.append(item)
            if item.children:
                walk(item.children)

    walk(index)
    return out


def find_index_entry(index: Sequence[IndexItem], entry_id: int) -> Optional[IndexItem]:
    for item in index:
        if item.id == entry_id:
            return item
        if item.children:
            found = find_index_entry(item.children, entry_id)
            if found is not None:
                return found
    return None


def get_index_breadcrumb(index: Sequence[IndexItem], entry_id: int) -> List[IndexItem]:
    """Path of entries from the top-level ancestor down to ``entry_id``.

    Empty when the id is not in the tree.
    """
    for item in index:
        if item.id == entry_id:
            return [item]
        if item.children:
            tail = get_index_breadcrumb(item.children, entry_id)
            if tail:
                return [item] + tail
    return []


def format_index_entry(item: IndexItem, depth: int) -> str:
    if item.part_name:
        where = f" (Part {item.part_name}, p. {item.page})"
    else:
        where = f" (p. {item.page})"
    if depth == 1:
        return f"## {item.title}{where}"
    indent = "  " * (depth - 1)
    return f"{indent}- {item.title}{where}"


def index_to_markdown(index: Sequence[IndexItem], *, max_depth: Optional[int] = None) -> str:
    """Render the index as a Markdown table of contents.

    Top-level entries become ``##`` headings, nested ones an indented list.
    Entries deeper than ``max_depth`` are left out with their subtrees.
    """
    lines: List[str] = []

    def walk(items: Sequence[IndexItem], depth: int) -> None:
        if max_depth is not None and depth > max_depth:
            return
        for item in items:
            lines.append(format_index_entry(item, depth))
            if item.children:
                walk(item.children, depth + 1)

    walk(index, 1)
    return "\n".join(lines)
