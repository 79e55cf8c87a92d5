from ketab_books import html_to_markdown, is_header_paragraph, strip_html_tags


def test_is_header_paragraph_markers():
    assert is_header_paragraph("(قَوْلُهُ بَابُ إِذَا صَلَّى خَمْسًا)")
    assert is_header_paragraph("(فصل في الصلاة)")
    assert is_header_paragraph("(كتاب الطهارة)")
    assert is_header_paragraph("  (قوله باب الصلاة)  ")


def test_is_header_paragraph_needs_both_parens_and_marker():
    assert not is_header_paragraph("هذا نص عادي")
    assert not is_header_paragraph("باب الصلاة")
    assert not is_header_paragraph("(نص عادي)")
    assert not is_header_paragraph("")


def test_paragraphs_separated_by_blank_line():
    html = '<p class="g-paragraph">First paragraph</p><p class="g-paragraph">Second paragraph</p>'
    assert html_to_markdown(html) == "First paragraph\n\nSecond paragraph"


def test_header_paragraph_becomes_heading():
    html = '<p class="g-paragraph" id="p-1">(قَوْلُهُ بَابُ الصلاة)</p>'
    assert html_to_markdown(html) == "## (قَوْلُهُ بَابُ الصلاة)"
    mixed = '<p id="p-1">(باب الصلاة)</p><p id="p-2">حَدَّثَنَا أَبُو بَكْرٍ</p>'
    assert html_to_markdown(mixed) == "## (باب الصلاة)\n\nحَدَّثَنَا أَبُو بَكْرٍ"


def test_inline_tags_stripped():
    assert html_to_markdown('<p>Text with <span class="g-holy-word">الله</span> inside</p>') == "Text with الله inside"
    assert html_to_markdown('<p>Visit <a href="https://example.com">example</a> site</p>') == "Visit example site"
    assert html_to_markdown("<p>Text<br/>More text</p>") == "TextMore text"
    assert html_to_markdown("<P>Uppercase tags</P>") == "Uppercase tags"
    assert html_to_markdown("<p>﴿فَمَنْ يَعْمَلْ مِثْقَالَ ذَرَّةٍ خَيْرًا يَرَهُ﴾</p>") == "﴿فَمَنْ يَعْمَلْ مِثْقَالَ ذَرَّةٍ خَيْرًا يَرَهُ﴾"


def test_empty_and_plain_input():
    assert html_to_markdown("") == ""
    assert html_to_markdown("Plain text without any tags") == "Plain text without any tags"
    assert html_to_markdown("<p>  </p><p></p>") == ""


def test_line_endings_and_blank_runs_collapsed():
    html = "<p>one\r\ntwo</p>\r\n\r\n\r\n<div>tail</div>"
    assert html_to_markdown(html) == "one\ntwo\n\ntail"


def test_output_never_contains_tags():
    samples = [
        '<p class="x">a <b>b</b></p><div>c</div>',
        "<p>unclosed <span>x",
        '<p id="p-3"><div class="g-page-separator"></div><div class="g-page-footer"></p>',
        "",
    ]
    for s in samples:
        out = strip_html_tags(html_to_markdown(s))
        assert "<" not in out and ">" not in out
