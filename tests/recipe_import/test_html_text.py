"""Tests for HTML to text normalization."""

import pytest

from recipe_draft.recipe_import.html_text import (
    decode_entities,
    fragment_text,
    iter_raw_lines,
    make_soup,
    normalize_html,
    tag_text,
    text_lines,
)


SAMPLES = [
    "",
    "plain text",
    "<p>One</p><p>Two</p>",
    "<div>a</div>\n\n\n\n<div>b</div>",
    "<script>var x = '<b>';</script><b>Bold</b> &amp; <i>italic</i>",
    "<ul><li>2 cups flour</li><li>1 cup sugar</li></ul>",
    "x &lt; y &gt; z",
    "<<>>< broken <tag",
    "&amp;lt;script&amp;gt;alert(1)&amp;lt;/script&amp;gt;",
    "tabs\t\tand   spaces&nbsp;&nbsp;here",
    "<!-- comment --><br/>line<br>line",
    "Caf&#233; &#x2014; cr&egrave;me",
]


class TestNormalizeHtml:
    """Tests for normalize_html."""

    def test_strips_script_and_style_bodies(self):
        html = "<style>.a{}</style><script>alert('x')</script><p>Soup</p>"
        assert normalize_html(html) == "Soup"

    def test_block_elements_become_lines(self):
        html = "<h2>Ingredients</h2><ul><li>2 cups flour</li><li>1 egg</li></ul>"
        assert text_lines(normalize_html(html)) == ["Ingredients", "2 cups flour", "1 egg"]

    def test_br_becomes_newline(self):
        assert normalize_html("one<br>two<br/>three") == "one\ntwo\nthree"

    def test_decodes_entities(self):
        assert normalize_html("Mac &amp; Cheese") == "Mac & Cheese"
        assert normalize_html("&frac12; cup") == "½ cup"
        assert normalize_html("Bob&#039;s &quot;best&quot;") == "Bob's \"best\""

    def test_decodes_numeric_entities(self):
        assert normalize_html("it&#8217;s") == "it’s"
        assert normalize_html("it&#x27;s") == "it's"

    def test_decoded_brackets_are_not_delimiters(self):
        result = normalize_html("&lt;b&gt;bold&lt;/b&gt;")
        assert "<" not in result
        assert ">" not in result
        assert "bold" in result

    def test_collapses_whitespace_and_blank_runs(self):
        html = "<p>a   b</p>\n\n\n\n\n<p>c</p>"
        assert normalize_html(html) == "a b\n\nc"

    def test_accepts_bytes(self):
        assert normalize_html("<p>Café</p>".encode("utf-8")) == "Café"

    def test_empty_input(self):
        assert normalize_html("") == ""
        assert normalize_html(None) == ""

    def test_inline_markup_stays_on_one_line(self):
        html = "<li>2 <b>cups</b> <a href=\"#\">flour</a></li>"
        assert normalize_html(html) == "2 cups flour"

    def test_comments_and_doctype_dropped(self):
        html = "<!DOCTYPE html><html><body><!-- ad slot --><p>Soup</p></body></html>"
        assert normalize_html(html) == "Soup"

    @pytest.mark.parametrize("html", SAMPLES)
    def test_never_leaves_delimiters(self, html):
        result = normalize_html(html)
        assert isinstance(result, str)
        assert "<" not in result
        assert ">" not in result

    @pytest.mark.parametrize("html", SAMPLES)
    def test_idempotent(self, html):
        once = normalize_html(html)
        assert normalize_html(once) == once


class TestDecodeEntities:
    """Tests for entity decoding."""

    def test_unknown_named_entity_is_kept(self):
        assert decode_entities("&bogus;") == "&bogus;"

    def test_double_encoded(self):
        assert decode_entities("&amp;amp;") == "&"

    def test_invalid_code_point_dropped(self):
        assert decode_entities("a&#99999999;b") == "ab"


class TestLines:
    """Tests for line helpers."""

    def test_text_lines_skips_blanks(self):
        assert text_lines("a\n\n  b  \n") == ["a", "b"]

    def test_iter_raw_lines_keeps_blanks(self):
        assert list(iter_raw_lines("a\n\n b")) == ["a", "", "b"]


class TestSoupHelpers:
    """Tests for the element text helpers."""

    def test_tag_text_collapses_whitespace(self):
        soup = make_soup("<h1>\n  Best   <em>Tacos</em>\n</h1>")
        assert tag_text(soup.find("h1")) == "Best Tacos"

    def test_tag_text_of_missing_element(self):
        assert tag_text(make_soup("<p>x</p>").find("h1")) == ""

    def test_fragment_text(self):
        assert fragment_text("<b>Stir</b> &amp; fold") == "Stir & fold"
        assert fragment_text("Heat  the &amp;amp; oven") == "Heat the & oven"
