from __future__ import annotations

import html
import math
import re
import unicodedata as ud
from typing import Any

# Bidirectional control characters and BOM/Tatweel handling
BIDI_CTRL = {
    "\u200e",
    "\u200f",
    "\u202a",
    "\u202b",
    "\u202c",
    "\u202d",
    "\u202e",
    "\u2066",
    "\u2067",
    "\u2068",
    "\u2069",
    "\ufeff",
}

_RE_TAGS = re.compile(r"<[^>]*>")
_RE_AR_DIACRITICS = re.compile(r"[\u0610-\u061A\u064B-\u065F\u0670]")


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def strip_html_tags(html_text: str) -> str:
    """Remove every tag, keeping only text.

    Simple regex suitable for trusted ketabonline HTML; not a sanitizer.
    """
    return _RE_TAGS.sub("", html_text)


def strip_diacritics(s: str) -> str:
    """Drop Arabic harakat/tanween and similar combining marks."""
    return _RE_AR_DIACRITICS.sub("", ud.normalize("NFD", s))


def norm_ar_text(s: str) -> str:
    """Clean a book or index title for display and filenames.

    Unlike strip_diacritics, harakat stay; entities, bidi marks, tatweel and
    extra whitespace go.
    """
    if not s:
        return s
    s = html.unescape(s)
    s = s.replace("\u00A0", " ").replace("\u202F", " ").replace("\u00AD", "")
    s = "".join(ch for ch in s if ch not in BIDI_CTRL)
    s = s.replace("\u0640", "")  # tatweel
    s = ud.normalize("NFKC", s)
    s = " ".join(s.split())
    return s.strip()


def _is_falsy(value: Any) -> bool:
    if isinstance(value, float) and math.isnan(value):
        return True
    return not value


def remove_falsy_values(obj: Any) -> Any:
    """Recursively drop falsy values from API payloads.

    Removes None, "", 0, False, NaN and containers left empty after cleaning.
    Note that 0 and False go too: the API uses them as "unset" flags. A list
    item that cleans down to {} is dropped as well, so [{"a": ""}] gives [].
    """
    if isinstance(obj, list):
        cleaned = [remove_falsy_values(item) if isinstance(item, (dict, list)) else item for item in obj]
        return [item for item in cleaned if not _is_falsy(item)]
    if isinstance(obj, dict):
        out = {}
        for key, value in obj.items():
            if _is_falsy(value):
                continue
            if isinstance(value, (dict, list)):
                value = remove_falsy_values(value)
                if not value:
                    continue
            out[key] = value
        return out
    return obj
