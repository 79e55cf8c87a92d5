"""Command line entrypoint: query the ketabonline catalog and export books.

JSON results are printed to stdout; errors go to stderr with exit code 2.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, List
import argparse
import dataclasses
import json
import logging
import os
import sys

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
from .builder import build_book_markdown, make_title_filename, strip_book_prefix, write_markdown
from .exceptions import KetabError
from .parsers import extract_book_id
from .toc import index_to_markdown


def _jsonable(o: Any) -> Any:
    if dataclasses.is_dataclass(o):
        return dataclasses.asdict(o)
    return str(o)


def _dump(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2, default=_jsonable))


def _list_options(args: argparse.Namespace) -> Dict[str, Any]:
    opts: Dict[str, Any] = {"limit": args.limit, "page": args.page}
    for key in ("author_id", "category_id"):
        value = getattr(args, key, None)
        if value:
            opts[key] = value
    return opts


def _default_output(title: str, ext: str) -> str:
    base_name = make_title_filename(strip_book_prefix(title))
    return os.path.join("output", base_name + ext)


def _add_list_args(sp: argparse.ArgumentParser, default_limit: int) -> None:
    sp.add_argument("-q", "--query", help="Search text")
    sp.add_argument("--limit", type=int, default=default_limit, help="Results per page")
    sp.add_argument("--page", type=int, default=1, help="Result page (1-based)")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="ketab-books", description="Browse ketabonline.com and export books as Markdown")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    sub = ap.add_subparsers(dest="command", required=True)

    for name in ("author", "book", "category"):
        sp = sub.add_parser(name, help=f"Show one {name} record")
        sp.add_argument("id", type=int)

    _add_list_args(sub.add_parser("authors", help="Search authors"), 30)
    books = sub.add_parser("books", help="Search books")
    _add_list_args(books, 20)
    books.add_argument("--author-id", type=int, help="Only books by this author")
    books.add_argument("--category-id", type=int, help="Only books in this category")
    _add_list_args(sub.add_parser("categories", help="Search categories"), 30)

    idx = sub.add_parser("index", help="Show a book's table of contents")
    idx.add_argument("book", help="Book id or URL")
    idx.add_argument("--recursive", action="store_true", help="Nested entries with children")
    idx.add_argument("--part", type=int, default=1, help="Part/volume number")
    idx.add_argument("--markdown", action="store_true", help="Print as Markdown instead of JSON")
    idx.add_argument("--max-depth", type=int, default=None, help="Deepest level shown with --markdown")

    dl = sub.add_parser("download", help="Save the raw book JSON")
    dl.add_argument("book", help="Book id or URL")
    dl.add_argument("-o", "--output", help="Output path (default: output/<book title>.json)")

    md = sub.add_parser("markdown", help="Export a whole book as Markdown")
    md.add_argument("book", help="Book id or URL")
    md.add_argument("-o", "--output", help="Output path (default: output/<book title>.md)")
    md.add_argument("--no-footnotes", action="store_true", help="Drop footnotes")
    md.add_argument("--page-numbers", action="store_true", help="Add <!-- Page N, Part P --> markers")
    md.add_argument("--toc-depth", type=int, default=None, help="Deepest TOC level to include")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cmd = args.command
        if cmd == "author":
            _dump(get_author_info(args.id))
        elif cmd == "book":
            _dump(get_book_info(args.id))
        elif cmd == "category":
            _dump(get_category_info(args.id))
        elif cmd == "authors":
            _dump(get_authors(args.query, **_list_options(args)))
        elif cmd == "books":
            _dump(get_books(args.query, **_list_options(args)))
        elif cmd == "categories":
            _dump(get_categories(args.query, **_list_options(args)))
        elif cmd == "index":
            items = get_book_index(extract_book_id(args.book), is_recursive=args.recursive, part=args.part)
            if args.markdown:
                print(index_to_markdown(items, max_depth=args.max_depth))
            else:
                _dump(items)
        elif cmd == "download":
            book_id = extract_book_id(args.book)
            out_path = args.output or _default_output(get_book_info(book_id).get("title") or str(book_id), ".json")
            download_book(book_id, out_path)
            print(f"[✓] Saved {out_path}")
        elif cmd == "markdown":
            book_id = extract_book_id(args.book)
            contents = get_book_contents(book_id)
            title = contents.get("title") or str(book_id)
            text = build_book_markdown(
                title,
                get_book_pages(contents),
                get_book_index_tree(contents),
                include_footnotes=not args.no_footnotes,
                include_page_numbers=args.page_numbers,
                toc_max_depth=args.toc_depth,
            )
            out_path = write_markdown(text, args.output or _default_output(title, ".md"))
            print(f"[✓] Saved {out_path}")
        return 0
    except (KetabError, ValueError) as e:
        print(f"[!] {e}", file=sys.stderr)
        return 2
    except Exception as e:  # noqa: BLE001
        print(f"[!] Error: {e}", file=sys.stderr)
        return 2
