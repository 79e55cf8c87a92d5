from __future__ import annotations

import re
from typing import Iterable, List, Optional

from .models import Page
from .utils import normalize_line_endings, strip_diacritics, strip_html_tags


_RE_PARAGRAPH = re.compile(r"<p[^>]*>([\s\S]*?)</p>", re.I)
_RE_BLANK_RUN = re.compile(r"\n{3,}")
# باب / قوله / فصل / كتاب, matched on undiacritized text
_RE_HEADER_MARKER = re.compile(r"باب|قوله|فصل|كتاب", re.I)


def is_header_paragraph(text: str) -> bool:
    """Detect section titles such as (قَوْلُهُ بَابُ ...) or (كتاب الطهارة).

    The paragraph must be wrapped in parentheses and contain one of the
    header words once diacritics are removed.
    """
    trimmed = text.strip()
    if not trimmed.startswith("(") or not trimmed.endswith(")"):
        return False
    return bool(_RE_HEADER_MARKER.search(strip_diacritics(trimmed)))


def html_to_markdown(html_text: str) -> str:
    """Convert ketabonline page HTML to Markdown.

    - <p> with header content -> ``## heading``
    - other <p> -> text followed by a blank line
    - every other tag is stripped, keeping its text
    """
    if not html_text:
        return ""

    def repl(m: re.Match) -> str:
        text = strip_html_tags(m.group(1)).strip()
        if not text:
            return ""
        if is_header_paragraph(text):
            return f"## {text}\n\n"
        return f"{text}\n\n"

    out = _RE_PARAGRAPH.sub(repl, html_text)
    out = strip_html_tags(out)
    out = normalize_line_endings(out)
    return _RE_BLANK_RUN.sub("\n\n", out).strip()


def extract_page_text(page: Page) -> str:
    return strip_html_tags(page.content)


def page_to_markdown(page: Page) -> str:
    return html_to_markdown(page.content)


def page_marker(page: Page) -> Optional[str]:
    """HTML comment locating a page in the printed edition, if it has a part."""
    if page.part is None:
        return None
    return f"<!-- Page {page.page}, Part {page.part.name} -->"


def pages_to_markdown(
    pages: Iterable[Page],
    *,
    include_page_numbers: bool = False,
    separator: str = "\n---\n\n",
) -> str:
    """Join the Markdown of several pages into one document."""
    chunks: List[str] = []
    for page in pages:
        md = page_to_markdown(page)
        marker = page_marker(page) if include_page_numbers else None
        chunks.append(f"{marker}\n{md}" if marker else md)
    return separator.join(chunks)


def get_page_by_number(pages: Iterable[Page], page_number: int) -> Optional[Page]:
    for page in pages:
        if page.page == page_number:
            return page
    return None


def get_pages_by_part(pages: Iterable[Page], part_name: str) -> List[Page]:
    return [p for p in pages if p.part is not None and p.part.name == part_name]


def get_pages_for_index(pages: Iterable[Page], index_id: int) -> List[Page]:
    """Pages whose owning index entry is ``index_id``, in book order."""
    return [p for p in pages if p.index == index_id]
