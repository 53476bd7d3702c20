"""
Tests for path classification and enumeration.
"""

import pytest

from cms_translate.core.errors import MalformedDocument
from cms_translate.core.models import PathKind
from cms_translate.core.paths import classify, enumerate_paths


# =============================================================================
# Classifier
# =============================================================================


class TestClassify:
    @pytest.mark.parametrize(
        "key, value, kind",
        [
            ("text", "Hello", PathKind.TEXT),
            ("title", "A plain title", PathKind.TEXT),
            ("body", "<p>Hello <em>you</em></p>", PathKind.HTML),
            ("body", "# Heading\n\nSome text", PathKind.MARKDOWN),
            ("intro", "Read **this** first", PathKind.MARKDOWN),
            (
                "content",
                [{"type": "paragraph", "children": [{"text": "Hi"}]}],
                PathKind.STRUCTURED_TEXT,
            ),
            (
                0,
                {"type": "block", "blockModelId": "12", "children": [{"text": ""}], "title": "x"},
                PathKind.STRUCTURED_TEXT_BLOCK,
            ),
            (
                0,
                {"type": "quote", "children": [], "body": "Hi"},
                PathKind.STRUCTURED_TEXT_BLOCK,
            ),
            (
                1,
                {"type": "inlineItem", "item": "44", "children": [{"text": ""}]},
                PathKind.STRUCTURED_TEXT_INLINE_ITEM,
            ),
            (
                2,
                {"type": "code", "code": "print(1)", "language": "python", "children": [{"text": ""}]},
                PathKind.STRUCTURED_TEXT_CODE,
            ),
            ("seo", {"title": "Shop", "description": "Best shop"}, PathKind.SEO),
            ("slug", "my-first-post", PathKind.SLUG),
            ("cover", {"upload_id": "u1", "alt": "A cat", "title": "Cat"}, PathKind.MEDIA),
            ("id", "b8f2", PathKind.ID),
            ("itemTypeId", 1284, PathKind.ID),
            ("price", 12.5, PathKind.NUMBER),
            ("count", 3, PathKind.NUMBER),
            ("published_at", "2024-05-01T10:00:00Z", PathKind.DATE),
            ("birthday", "1985-03-15", PathKind.DATE),
            ("visible", True, PathKind.BOOLEAN),
            ("accent", "#ff8800", PathKind.COLOR),
            ("accent", {"red": 255, "green": 136, "blue": 0, "alpha": 255}, PathKind.COLOR),
            ("settings", '{"columns": 2}', PathKind.JSON),
            ("url", "https://example.com", PathKind.META),
            ("website", "https://example.com/about", PathKind.META),
            ("location", {"latitude": 45.1, "longitude": 9.2}, PathKind.META),
            ("nothing", None, PathKind.META),
        ],
    )
    def test_kinds(self, key, value, kind):
        assert classify(key, value) == kind

    def test_every_kind_is_covered(self):
        """The table above exercises the whole closed set."""
        covered = {
            classify("text", "Hello"),
            classify("body", "<p>x</p>"),
            classify("body", "# x"),
            classify("c", [{"type": "paragraph", "children": []}]),
            classify(0, {"type": "block", "children": []}),
            classify(0, {"type": "inlineItem", "item": "1", "children": []}),
            classify(0, {"type": "code", "code": "", "children": []}),
            classify("seo", {"title": "t"}),
            classify("slug", "s"),
            classify("m", {"upload_id": "1"}),
            classify("id", "1"),
            classify("n", 1),
            classify("d", "2024-01-01"),
            classify("b", False),
            classify("c", "#fff"),
            classify("j", "[1, 2]"),
            classify("u", None),
        }
        assert covered == set(PathKind)

    def test_plain_containers_descend(self):
        assert classify("block", {"title": "x", "count": 1}) is None
        assert classify("tags", ["a", "b"]) is None
        assert classify(0, {"type": "paragraph", "children": [{"text": "x"}]}) is None

    def test_seo_needs_a_named_field(self):
        # Blocks at a list index with title/description fields are plain containers
        assert classify(0, {"title": "Hello", "description": "World"}) is None
        assert classify(1, {"title": "Feature"}) is None
        assert classify(0, {"title": "x", "image": "img"}) is None

    def test_seo_needs_a_hint(self):
        assert classify("hero", {"title": "Hello", "description": "World"}) is None
        assert classify("seo", {"description": "World"}) == PathKind.SEO
        assert classify("meta_tags", {"title": "x", "image": "img"}) == PathKind.SEO
        assert classify("share", {"title": "x", "twitter_card": "summary"}) == PathKind.SEO

    def test_text_key_wins_over_shape(self):
        # A Slate leaf is always text, whatever it looks like
        assert classify("text", "<b>not html</b>") == PathKind.TEXT
        assert classify("text", "https://example.com") == PathKind.TEXT

    def test_unknown_objects_are_meta(self):
        assert classify("x", object()) == PathKind.META


# =============================================================================
# Enumerator
# =============================================================================


class TestEnumeratePaths:
    def test_depth_first_order(self):
        document = {
            "a": "first",
            "b": [{"c": "second"}, {"d": "third"}],
            "e": "fourth",
        }

        paths = enumerate_paths(document)

        assert [p.value for p in paths] == ["first", "second", "third", "fourth"]
        assert [p.location for p in paths] == [
            ("a",),
            ("b", 0, "c"),
            ("b", 1, "d"),
            ("e",),
        ]
        assert paths[1].key == "c"

    def test_boundaries_are_not_descended(self):
        document = {
            "seo": {"title": "t", "description": "d"},
            "content": [{"type": "paragraph", "children": [{"text": "x"}]}],
        }

        paths = enumerate_paths(document)

        assert [(p.location, p.kind) for p in paths] == [
            (("seo",), PathKind.SEO),
            (("content",), PathKind.STRUCTURED_TEXT),
        ]

    def test_blank_strings_are_enumerated(self):
        paths = enumerate_paths([{"text": ""}, {"text": "   "}])
        assert [p.value for p in paths] == ["", "   "]

    def test_translatable_flag(self):
        paths = enumerate_paths({"title": "x", "count": 2, "id": "a"})
        assert [p.is_translatable for p in paths] == [True, False, False]

    def test_cycle_is_malformed(self):
        document = {"a": {"b": "x"}}
        document["a"]["self"] = document

        with pytest.raises(MalformedDocument):
            enumerate_paths(document)

    def test_shared_subtrees_are_not_cycles(self):
        shared = {"text": "same"}
        paths = enumerate_paths({"a": shared, "b": shared})
        assert len(paths) == 2

    def test_depth_limit(self):
        document = {"text": "deep"}
        for _ in range(10):
            document = {"nested": document}

        with pytest.raises(MalformedDocument):
            enumerate_paths(document, max_depth=5)
        assert len(enumerate_paths(document, max_depth=20)) == 1

    def test_scalar_root_is_malformed(self):
        with pytest.raises(MalformedDocument):
            enumerate_paths("just a string")
