"""
Tests for the HTML and Markdown codecs.
"""

import pytest

from cms_translate.codecs import html, markdown
from cms_translate.core.errors import MalformedDocument


# =============================================================================
# HTML
# =============================================================================


class TestHtmlCodec:
    def test_parse_shape(self):
        tree = html.parse('<p class="lead">Hello <b>world</b></p>')

        assert tree == {
            "node": "root",
            "child": [
                {
                    "node": "element",
                    "tag": "p",
                    "attr": {"class": ["lead"]},
                    "child": [
                        {"node": "text", "text": "Hello "},
                        {"node": "element", "tag": "b", "child": [{"node": "text", "text": "world"}]},
                    ],
                },
            ],
        }

    def test_round_trip(self):
        markup = '<h2 id="top">Title</h2><p>Hello <a href="/x">you</a> &amp; me</p>'
        assert html.serialize(html.parse(markup)) == markup

    def test_void_elements_keep_html_form(self):
        markup = 'Line one<br>line two<img src="a.png" alt="A">'
        assert html.serialize(html.parse(markup)) == markup

    def test_comments_are_raw(self):
        tree = html.parse("<p>Hi<!-- note --></p>")

        comment = tree["child"][0]["child"][1]
        assert comment == {"node": "comment", "raw": " note "}
        assert html.serialize(tree) == "<p>Hi<!-- note --></p>"

    def test_script_bodies_are_raw(self):
        tree = html.parse("<script>var a = 1;</script>")

        script = tree["child"][0]["child"][0]
        assert script["node"] == "script"
        assert "text" not in script
        assert "var a = 1;" in html.serialize(tree)

    def test_unknown_node(self):
        with pytest.raises(MalformedDocument):
            html.serialize({"node": "root", "child": [{"node": "mystery"}]})


# =============================================================================
# Markdown
# =============================================================================


def _find(tokens, token_type):
    for token in tokens:
        if token.get("type") == token_type:
            return token
        found = _find(token.get("children", []), token_type)
        if found:
            return found
    return None


class TestMarkdownCodec:
    def test_text_tokens_use_value(self):
        tree = markdown.parse("Hello `code` world\n")

        text = _find(tree["children"], "text")
        code = _find(tree["children"], "codespan")
        assert text["value"] == "Hello "
        assert "raw" not in text
        assert code["raw"] == "code"
        assert "value" not in code

    def test_round_trip_keeps_structure(self):
        source = "# Title\n\n- one\n- two\n\n```python\nprint('hi')\n```\n"

        rendered = markdown.serialize(markdown.parse(source))

        assert "# Title" in rendered
        assert "- one" in rendered
        assert "- two" in rendered
        assert "```python\nprint('hi')\n```" in rendered

    def test_reference_links_survive(self):
        source = "See [the docs][docs].\n\n[docs]: https://example.com/docs\n"

        tree = markdown.parse(source)
        rendered = markdown.serialize(tree)

        assert "docs" in tree["references"]
        assert "https://example.com/docs" in rendered

    def test_missing_children(self):
        with pytest.raises(MalformedDocument):
            markdown.serialize({"type": "root"})
