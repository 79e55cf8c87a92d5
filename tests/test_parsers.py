import pytest

from ketab_books import IndexItem, Page, PartReference, parse_index, parse_pages
from ketab_books.parsers import extract_book_id


def test_parse_pages():
    pages = parse_pages([
        {"id": 7, "page": 3, "content": "<p>x</p>", "index": 100, "part": {"id": 1, "name": "1"}, "seal": "abc"},
        {"id": 8, "page": 4, "content": "<p>y</p>", "index": 100, "part": None},
    ])
    assert pages[0] == Page(id=7, page=3, content="<p>x</p>", index=100, part=PartReference(1, "1"))
    assert pages[1].part is None
    assert parse_pages(None) == [] and parse_pages([]) == []


def test_parse_index_tree():
    items = parse_index([
        {
            "id": 1, "page": 1, "page_id": 1, "part_name": "1", "title": "رسائل", "title_level": 1,
            "children": [{"id": 2, "page": 5, "page_id": 5, "part_name": "", "title": "فصل", "title_level": 2, "children": []}],
        },
    ])
    assert items[0].children == [IndexItem(id=2, title="فصل", page=5, title_level=2, page_id=5)]
    assert items[0].part_name == "1"
    assert items[0].children[0].children == []


def test_extract_book_id():
    assert extract_book_id("41768") == 41768
    assert extract_book_id("https://ketabonline.com/ar/books/41768") == 41768
    assert extract_book_id("https://ketabonline.com/ar/books/41768/read?page=2") == 41768
    with pytest.raises(ValueError):
        extract_book_id("https://ketabonline.com/ar/authors")
