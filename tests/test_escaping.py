from __future__ import annotations

import pytest

from themerender.escaping import (
    ALLOWED_TAGS,
    esc_html,
    esc_url,
    esc_url_raw,
    escape_double_quotes,
    sanitize_text,
)


def test_esc_html_escapes_markup_without_double_encoding():
    assert esc_html('<b>"Fira" & \'Sans\'</b>') == "&lt;b&gt;&quot;Fira&quot; &amp; &#039;Sans&#039;&lt;/b&gt;"
    assert esc_html("Tom &amp; Jerry &#038; co") == "Tom &amp; Jerry &#038; co"
    assert esc_html(None) == ""


def test_esc_url_raw_keeps_ordinary_urls():
    assert esc_url_raw("https://example.com/a.png?x=1&y=2") == "https://example.com/a.png?x=1&y=2"
    assert esc_url_raw("//cdn.example.com/a.png") == "//cdn.example.com/a.png"
    assert esc_url_raw("/wp-content/bg.jpg") == "/wp-content/bg.jpg"


def test_esc_url_raw_removes_characters_outside_the_url_alphabet():
    assert esc_url_raw('https://example.com/a".png') == "https://example.com/a.png"
    assert esc_url_raw("https://example.com/<script>") == "https://example.com/script"
    assert esc_url_raw("  https://example.com/my image.png") == "https://example.com/my%20image.png"
    assert esc_url_raw("https://example.com/a%0d%0Ab") == "https://example.com/ab"


def test_esc_url_raw_prefixes_bare_hosts_and_rejects_bad_protocols():
    assert esc_url_raw("example.com/bg.png") == "http://example.com/bg.png"
    assert esc_url_raw("javascript:alert(1)") == ""
    assert esc_url_raw("data:image/png;base64,AAAA") == ""
    assert esc_url_raw("ftp://example.com/file", protocols=("http",)) == ""


@pytest.mark.parametrize("url", ["", None, False, '"""'])
def test_esc_url_raw_returns_empty_string_for_empty_input(url):
    assert esc_url_raw(url) == ""


def test_esc_url_encodes_entities_for_display():
    assert esc_url("https://example.com/?a=1&b=2") == "https://example.com/?a=1&#038;b=2"
    assert esc_url("https://example.com/it's") == "https://example.com/it&#039;s"
    assert esc_url("//fonts.googleapis.com/css?family=Open+Sans|Lato") == (
        "//fonts.googleapis.com/css?family=Open+Sans|Lato"
    )


def test_escape_double_quotes_backslashes_quotes():
    assert escape_double_quotes('a"b') == 'a\\"b'


def test_sanitize_text_keeps_allowed_inline_tags_only():
    cleaned = sanitize_text('<strong>Bold</strong> <script>alert(1)</script><a href="https://x.test" onclick="y()">x</a>')

    assert "<strong>Bold</strong>" in cleaned
    assert "<script>" not in cleaned
    assert 'href="https://x.test"' in cleaned
    assert "onclick" not in cleaned
    assert "strong" in ALLOWED_TAGS


def test_sanitize_text_honors_custom_allow_list():
    assert sanitize_text("<em>a</em><b>b</b>", allowed_tags={"b": []}) == "a<b>b</b>"


def test_sanitize_text_accepts_plain_tag_names():
    cleaned = sanitize_text('<b title="t">x</b><a href="https://x.test">y</a><p>z</p>', allowed_tags=ALLOWED_TAGS)

    assert "<b>x</b>" in cleaned
    assert "title" not in cleaned
    assert "<a>y</a>" in cleaned
    assert "<p>" not in cleaned
    assert sanitize_text("<em>a</em><i>b</i>", allowed_tags=["i"]) == "a<i>b</i>"
