"""ketab_books public API (library-first).

Client for the ketabonline.com catalog plus pure helpers that turn its page
HTML into text, Markdown, tables of contents and footnotes. The CLI is thin
and delegates to these modules.
"""
from __future__ import annotations

from .api import (
    download_book,
    get_author_info,
    get_authors,
    get_book_contents,
    get_book_index,
    get_book_index_tree,
    get_book_info,
    get_book_pages,
    get_books,
    get_categories,
    get_category_info,
)
from .archive import unzip_archive
from .builder import build_book_markdown
from .content import (
    extract_page_text,
    get_page_by_number,
    get_pages_by_part,
    get_pages_for_index,
    html_to_markdown,
    is_header_paragraph,
    page_to_markdown,
    pages_to_markdown,
)
from .exceptions import ArchiveError, FetchError, KetabError, NotFoundError
from .footnotes import (
    extract_footnotes,
    has_footnotes,
    page_to_markdown_with_footnotes,
    remove_footnote_references,
    split_page_footnotes,
    strip_footnote_links,
)
from .http import build_url, http_get
from .models import Footnote, IndexItem, Page, PartReference
from .parsers import parse_index, parse_pages
from .toc import find_index_entry, flatten_index, get_index_breadcrumb, index_to_markdown
from .utils import normalize_line_endings, remove_falsy_values, strip_html_tags

__all__ = [
    "download_book",
    "get_author_info",
    "get_authors",
    "get_book_contents",
    "get_book_index",
    "get_book_index_tree",
    "get_book_info",
    "get_book_pages",
    "get_books",
    "get_categories",
    "get_category_info",
    "unzip_archive",
    "build_book_markdown",
    "extract_page_text",
    "get_page_by_number",
    "get_pages_by_part",
    "get_pages_for_index",
    "html_to_markdown",
    "is_header_paragraph",
    "page_to_markdown",
    "pages_to_markdown",
    "ArchiveError",
    "FetchError",
    "KetabError",
    "NotFoundError",
    "extract_footnotes",
    "has_footnotes",
    "page_to_markdown_with_footnotes",
    "remove_footnote_references",
    "split_page_footnotes",
    "strip_footnote_links",
    "build_url",
    "http_get",
    "Footnote",
    "IndexItem",
    "Page",
    "PartReference",
    "parse_index",
    "parse_pages",
    "find_index_entry",
    "flatten_index",
    "get_index_breadcrumb",
    "index_to_markdown",
    "normalize_line_endings",
    "remove_falsy_values",
    "strip_html_tags",
]
