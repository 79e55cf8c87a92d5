from ketab_books import IndexItem, Page, PartReference, build_book_markdown
from ketab_books.builder import make_title_filename, strip_book_prefix


def test_build_book_markdown():
    pages = [
        Page(id=1, page=1, index=1, part=PartReference(1, "1"),
             content='<p>(باب التوبة)</p><p>نص <span class="g-parentheses"><a href="#foot-1" class="g-footnote-link">(١)</a></span></p>'
                     '<div class="g-page-footer"><span class="g-list"><span id="foot-1" class="g-footnote-target">(١)</span></span> حاشية</div>'),
        Page(id=2, page=2, index=1, content="<p>الثانية</p>"),
    ]
    index = [IndexItem(id=1, title="باب التوبة", page=1, part_name="1")]
    md = build_book_markdown("رسائل التوبة", pages, index, include_page_numbers=True)
    assert md.startswith("# رسائل التوبة\n\n## باب التوبة (Part 1, p. 1)\n---\n\n<!-- Page 1, Part 1 -->\n## (باب التوبة)")
    assert "[^1]: حاشية" in md
    assert md.endswith("\n---\n\nالثانية\n")


def test_build_book_markdown_without_footnotes_or_pages():
    page = Page(id=1, page=1, index=1, content='<p>نص</p><div class="g-page-footer"><span id="foot-1" class="g-footnote-target">(1)</span> x</div>')
    assert "[^" not in build_book_markdown("t", [page], include_footnotes=False)
    assert build_book_markdown("t", []) == "# t\n"


def test_filename_helpers():
    assert strip_book_prefix("الكتاب: الجواب الكافي").startswith("الجواب")
    assert make_title_filename('a/b: c?') == "a-b - c"
    assert make_title_filename("") == "book"
