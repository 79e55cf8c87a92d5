from ketab_books import (
    Page,
    PartReference,
    extract_page_text,
    get_page_by_number,
    get_pages_by_part,
    get_pages_for_index,
    page_to_markdown,
    pages_to_markdown,
)

PAGES = [
    Page(id=1, page=3, content="<p>Page one content</p>", index=100, part=PartReference(1, "1")),
    Page(id=2, page=4, content="<p>Page two content</p>", index=100, part=PartReference(1, "1")),
    Page(id=3, page=5, content="<p>Page three content</p>", index=200, part=PartReference(2, "2")),
    Page(id=4, page=6, content="<p>No part</p>", index=200),
]


def test_page_text_and_markdown():
    assert extract_page_text(PAGES[0]) == "Page one content"
    assert page_to_markdown(PAGES[0]) == "Page one content"


def test_pages_to_markdown_joins_with_separator():
    assert pages_to_markdown(PAGES[:2]) == "Page one content\n---\n\nPage two content"
    assert pages_to_markdown([]) == ""
    assert pages_to_markdown(PAGES[:2], separator="|") == "Page one content|Page two content"


def test_pages_to_markdown_page_markers():
    md = pages_to_markdown([PAGES[0], PAGES[3]], include_page_numbers=True)
    assert md == "<!-- Page 3, Part 1 -->\nPage one content\n---\n\nNo part"


def test_get_page_by_number():
    assert get_page_by_number(PAGES, 4).id == 2
    assert get_page_by_number(PAGES, 999) is None
    assert get_page_by_number([], 1) is None


def test_filters_preserve_order():
    assert [p.id for p in get_pages_by_part(PAGES, "1")] == [1, 2]
    assert get_pages_by_part(PAGES, "99") == []
    assert [p.id for p in get_pages_for_index(PAGES, 200)] == [3, 4]
    assert get_pages_for_index(PAGES, 999) == []
    assert get_pages_for_index([], 100) == []
