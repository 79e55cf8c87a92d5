from __future__ import annotations

import logging
import os
import re
from typing import List, Optional, Sequence

from .content import page_marker
from .footnotes import page_to_markdown_with_footnotes
from .models import IndexItem, Page
from .toc import index_to_markdown
from .utils import norm_ar_text

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n---\n\n"


def make_title_filename(title: str) -> str:
    """Filename stem for an exported book: Arabic letters kept, path and shell characters replaced."""
    t = norm_ar_text(title)
    t = (
        t.replace('/', '-').replace('\\', '-').replace(':', ' - ')
        .replace('*', ' ').replace('?', ' ').replace('"', "'")
        .replace('<', '(').replace('>', ')').replace('|', '-')
        .strip()
    )
    t = re.sub(r"\s+", " ", t)
    if len(t) > 120:
        t = t[:120].rstrip()
    return t or 'book'


def strip_book_prefix(title: str) -> str:
    """Drop a leading "الكتاب:" label, as ketabonline book titles sometimes carry one."""
    s = norm_ar_text(title)
    s = re.sub(r'^\s*(?:ال)?كتاب\s*[:\-–—]?\s*', '', s)
    return s.strip() or title


def build_book_markdown(
    title: str,
    pages: Sequence[Page],
    index: Optional[Sequence[IndexItem]] = None,
    *,
    include_footnotes: bool = True,
    include_page_numbers: bool = False,
    toc_max_depth: Optional[int] = None,
) -> str:
    """Whole-book Markdown: title, table of contents, then every page with its notes."""
    head: List[str] = [f"# {norm_ar_text(title)}"]
    if index:
        toc = index_to_markdown(index, max_depth=toc_max_depth)
        if toc:
            head.append(toc)

    chunks: List[str] = []
    for page in pages:
        md = page_to_markdown_with_footnotes(page.content, include_footnotes=include_footnotes)
        marker = page_marker(page) if include_page_numbers else None
        chunks.append(f"{marker}\n{md}" if marker else md)
    logger.debug("Rendered %d pages of %r", len(chunks), title)

    out = "\n\n".join(head)
    if chunks:
        out += PAGE_SEPARATOR + PAGE_SEPARATOR.join(chunks)
    return out.rstrip() + "\n"


def write_markdown(text: str, out_path: str) -> str:
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as fh:
        fh.write(text)
    return out_path
