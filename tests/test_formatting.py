from markupsafe import Markup
from posts import format_post_content, format_timestamp


def test_greentext_line_is_wrapped():
    result = format_post_content("hello\n>meme\nworld")
    assert result.split("\n") == ["hello", '<span class="greentext">&gt;meme</span>', "world"]


def test_result_is_markup():
    assert isinstance(format_post_content("hello"), Markup)


def test_leading_whitespace_still_counts_as_greentext():
    assert format_post_content("   >indented") == '<span class="greentext">   &gt;indented</span>'


def test_gt_inside_line_is_not_greentext():
    assert format_post_content("a > b") == "a &gt; b"


def test_html_is_escaped():
    assert format_post_content("<b>bold</b>") == "&lt;b&gt;bold&lt;/b&gt;"


def test_crlf_separators_are_kept():
    assert format_post_content("one\r\n>two\r\nthree") == (
        'one\r\n<span class="greentext">&gt;two\r</span>\nthree'
    )


def test_empty_content():
    assert format_post_content("") == ""
    assert format_post_content(None) == ""


def test_format_timestamp():
    assert format_timestamp(0) == "01/01/70(Thu)00:00:00"
