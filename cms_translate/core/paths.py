"""
Path enumeration.

Walks an arbitrary document (dicts, lists, scalars) and produces a flat,
ordered list of Path records. Each record is tagged with a PathKind
inferred from the key name and the shape of the value.

Nodes that classify as a kind are emitted and not descended into: a
structured-text block, an SEO object or a media object is handled as a
whole by whoever dispatches on it. Plain containers (kind None) are
descended into.
"""

from __future__ import annotations

import json
import re
from typing import Any, Iterator

from cms_translate.core.errors import MalformedDocument
from cms_translate.core.models import Path, PathKind


DEFAULT_MAX_DEPTH = 128

ID_KEYS = frozenset({"id", "itemId", "itemTypeId", "blockModelId", "item", "upload_id"})

META_KEYS = frozenset({
    "url",
    "href",
    "src",
    "locale",
    "language",
    "schema",
    "twitter_card",
    "mime_type",
    "format",
    "marker",
})

# Attributes a Slate element may carry besides its content
SLATE_ELEMENT_KEYS = frozenset({
    "type",
    "children",
    "id",
    "itemId",
    "item",
    "itemTypeId",
    "blockModelId",
    "level",
    "style",
    "url",
    "newTab",
    "meta",
    "language",
    "code",
    "highlight",
    "align",
})

SEO_KEYS = frozenset({"title", "description", "image", "twitter_card", "no_index"})
COLOR_KEYS = frozenset({"red", "green", "blue"})

_DATE_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?$"
)
_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_URL_RE = re.compile(r"^(?:https?://|mailto:|tel:)\S+$")
_HTML_RE = re.compile(r"</?[a-zA-Z][\w-]*(?:\s[^<>]*)?/?>")
_MARKDOWN_RES = (
    re.compile(r"^\s{0,3}#{1,6}\s+\S", re.MULTILINE),            # heading
    re.compile(r"^\s{0,3}(?:[-*+]|\d+[.)])\s+\S", re.MULTILINE),  # list item
    re.compile(r"^\s{0,3}>\s?\S", re.MULTILINE),                  # blockquote
    re.compile(r"^\s{0,3}(?:```|~~~)", re.MULTILINE),             # fence
    re.compile(r"\*\*[^*\n]+\*\*|__[^_\n]+__"),                   # strong
    re.compile(r"!?\[[^\]\n]+\]\([^)\s]+\)"),                     # link / image
)


# =============================================================================
# Classification
# =============================================================================


def is_slate_element(value: Any) -> bool:
    """A structured-text node: a dict with a type and a list of children."""
    return (
        isinstance(value, dict)
        and "type" in value
        and isinstance(value.get("children"), list)
    )


def looks_like_html(value: str) -> bool:
    return bool(_HTML_RE.search(value))


def looks_like_markdown(value: str) -> bool:
    return any(pattern.search(value) for pattern in _MARKDOWN_RES)


def _looks_like_json(value: str) -> bool:
    stripped = value.strip()
    if not stripped or stripped[0] not in "{[":
        return False
    try:
        return isinstance(json.loads(stripped), (dict, list))
    except ValueError:
        return False


def _classify_string(key: str | int, value: str) -> PathKind:
    if key == "text":
        return PathKind.TEXT
    if key in META_KEYS or _URL_RE.match(value):
        return PathKind.META
    if _DATE_RE.match(value):
        return PathKind.DATE
    if _COLOR_RE.match(value):
        return PathKind.COLOR
    if _looks_like_json(value):
        return PathKind.JSON
    if looks_like_html(value):
        return PathKind.HTML
    if looks_like_markdown(value):
        return PathKind.MARKDOWN
    return PathKind.TEXT


def _is_seo(key: str | int, keys: set) -> bool:
    """
    An SEO object: a named field holding only SEO keys, and either called
    "seo" or carrying an image/twitter_card. A block at a list index whose
    fields happen to be title/description is not one.
    """
    if not isinstance(key, str):
        return False
    if not keys <= SEO_KEYS or not keys & {"title", "description"}:
        return False
    return key == "seo" or bool(keys & {"image", "twitter_card"})


def _classify_dict(key: str | int, value: dict) -> PathKind | None:
    keys = set(value)

    if is_slate_element(value):
        node_type = value["type"]
        if node_type == "inlineItem":
            return PathKind.STRUCTURED_TEXT_INLINE_ITEM
        if node_type == "code":
            return PathKind.STRUCTURED_TEXT_CODE
        if node_type == "block" or keys - SLATE_ELEMENT_KEYS:
            return PathKind.STRUCTURED_TEXT_BLOCK
        return None

    if value.get("type") == "code" and "code" in value:
        return PathKind.STRUCTURED_TEXT_CODE
    if COLOR_KEYS <= keys <= COLOR_KEYS | {"alpha"}:
        return PathKind.COLOR
    if keys == {"latitude", "longitude"}:
        return PathKind.META
    if "upload_id" in keys or ("url" in keys and keys & {"alt", "mime_type", "format"}):
        return PathKind.MEDIA
    if _is_seo(key, keys):
        return PathKind.SEO
    return None


def classify(key: str | int, value: Any) -> PathKind | None:
    """
    Classify a value by its key and shape.

    Returns None for plain containers, which the enumerator descends
    into; every other value gets exactly one PathKind.
    """
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return PathKind.BOOLEAN
    if isinstance(value, (int, float)):
        return PathKind.ID if key in ID_KEYS else PathKind.NUMBER
    if value is None:
        return PathKind.META
    if key in ID_KEYS and isinstance(value, str):
        return PathKind.ID
    if key == "slug" and isinstance(value, str):
        return PathKind.SLUG
    if isinstance(value, str):
        return _classify_string(key, value)
    if isinstance(value, dict):
        return _classify_dict(key, value)
    if isinstance(value, list):
        if value and all(is_slate_element(item) for item in value):
            return PathKind.STRUCTURED_TEXT
        return None
    return PathKind.META


# =============================================================================
# Enumeration
# =============================================================================


def _children(node: Any) -> Iterator[tuple[str | int, Any]]:
    if isinstance(node, dict):
        yield from node.items()
    else:
        yield from enumerate(node)


def enumerate_paths(document: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> list[Path]:
    """
    List every leaf and sub-document boundary of a document.

    Order is depth first: list index order, then dict insertion order.

    Raises:
        MalformedDocument: root is not a container, the document contains
            a cycle, or nesting exceeds max_depth
    """
    if not isinstance(document, (dict, list)):
        raise MalformedDocument(
            f"Expected a dict or list document, got {type(document).__name__}"
        )

    paths: list[Path] = []
    _walk(document, (), paths, set(), max_depth)
    return paths


def _walk(
    node: Any,
    location: tuple[str | int, ...],
    paths: list[Path],
    ancestors: set[int],
    max_depth: int,
) -> None:
    if len(location) > max_depth:
        raise MalformedDocument(f"Document nesting exceeds {max_depth} levels")

    marker = id(node)
    if marker in ancestors:
        raise MalformedDocument(f"Cycle detected at {list(location)!r}")

    ancestors.add(marker)
    try:
        for key, child in _children(node):
            child_location = location + (key,)
            kind = classify(key, child)
            if kind is None:
                _walk(child, child_location, paths, ancestors, max_depth)
            else:
                paths.append(Path(child_location, key, child, kind))
    finally:
        ancestors.discard(marker)
