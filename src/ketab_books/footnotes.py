from __future__ import annotations

import re
from typing import List, Tuple

from .content import html_to_markdown
from .models import Footnote
from .utils import strip_html_tags


# ketabonline closes the page body with this div; footnotes follow it
FOOTNOTE_SEPARATOR = '<div class="g-page-footer">'

_RE_FOOTNOTE_LINK = re.compile(r'<a[^>]*class="g-footnote-link"[^>]*>(.*?)</a>', re.I)
_RE_FOOTNOTE_REF = re.compile(
    r'<span[^>]*class="g-parentheses"[^>]*>\s*<a[^>]*class="g-footnote-link"[^>]*>.*?</a>\s*</span>',
    re.I,
)
# <span id="foot-N" class="g-footnote-target">(N)</span> followed by the note text,
# which runs until the next g-list item, the closing div or the end of the footer.
_RE_FOOTNOTE_TARGET = re.compile(
    r'<span[^>]*id="foot-([0-9]+)"[^>]*class="g-footnote-target"[^>]*>\([^)]*\)</span>\s*'
    r'([\s\S]*?)(?=<span[^>]*class="g-list"|</div>|\Z)',
    re.I,
)


def split_page_footnotes(html_text: str) -> Tuple[str, str]:
    """Split page HTML into (body, footer).

    The footer starts at the g-page-footer div and includes it. Pages without
    one return the whole input as body and an empty footer.
    """
    if not html_text:
        return "", ""
    pos = html_text.find(FOOTNOTE_SEPARATOR)
    if pos == -1:
        return html_text, ""
    return html_text[:pos], html_text[pos:]


def has_footnotes(html_text: str) -> bool:
    return FOOTNOTE_SEPARATOR in html_text


def strip_footnote_links(html_text: str) -> str:
    """Unwrap <a class="g-footnote-link"> anchors, keeping the visible (N)."""
    if not html_text:
        return ""
    return _RE_FOOTNOTE_LINK.sub(r"\1", html_text)


def remove_footnote_references(html_text: str) -> str:
    """Drop g-parentheses spans that hold a footnote link, number included.

    Whitespace around the removed span is left as is, so
    'Text <span ...>...</span> more' becomes 'Text  more'.
    """
    if not html_text:
        return ""
    return _RE_FOOTNOTE_REF.sub("", html_text)


def extract_footnotes(footer_html: str) -> List[Footnote]:
    """Extract numbered notes from the footer part of a page, in document order."""
    if not footer_html:
        return []
    notes: List[Footnote] = []
    for m in _RE_FOOTNOTE_TARGET.finditer(footer_html):
        text = strip_html_tags(m.group(2)).strip()
        if text:
            notes.append(Footnote(number=int(m.group(1)), text=text))
    return notes


def page_to_markdown_with_footnotes(
    html_text: str,
    *,
    include_footnotes: bool = True,
    footnote_separator: str = "\n\n---\n\n",
) -> str:
    """Markdown for a page body, with its notes appended as ``[^N]: text`` lines."""
    body, footer = split_page_footnotes(html_text)
    body_md = html_to_markdown(body)
    if not include_footnotes or not footer:
        return body_md
    notes = extract_footnotes(footer)
    if not notes:
        return body_md
    notes_md = "\n".join(f"[^{fn.number}]: {fn.text}" for fn in notes)
    return f"{body_md}{footnote_separator}{notes_md}"
