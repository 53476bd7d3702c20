"""
HTML codec.

Converts markup into a JSON-like tree and back, using BeautifulSoup with
the html.parser builder (no implicit <html>/<body> wrapping).

Tree shape:
    {"node": "root", "child": [...]}
    {"node": "element", "tag": "p", "attr": {...}, "child": [...]}
    {"node": "text", "text": "Hello"}
    {"node": "comment" | "doctype" | "cdata" | ..., "raw": "..."}

Only "text" nodes carry translatable content. Script and style bodies
are stored as raw nodes so they are never translated.
"""

from __future__ import annotations

from typing import Any

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Script,
    Stylesheet,
    Tag,
)
from bs4.formatter import HTMLFormatter

from cms_translate.core.errors import MalformedDocument


ARRAY_KEY = "child"
TEXT_KEY = "text"

# Minimal escaping; void elements render as <br>, not <br/>
FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix="",
)

# Most specific classes first: Doctype is a Declaration, all are strings
_RAW_TYPES: list[tuple[str, type[NavigableString]]] = [
    ("comment", Comment),
    ("doctype", Doctype),
    ("cdata", CData),
    ("processing_instruction", ProcessingInstruction),
    ("declaration", Declaration),
    ("script", Script),
    ("stylesheet", Stylesheet),
]


def parse(markup: str) -> dict[str, Any]:
    """Parse HTML into a tree of plain dicts."""
    soup = BeautifulSoup(markup, "html.parser")
    return {"node": "root", ARRAY_KEY: [_to_json(node) for node in soup.contents]}


def serialize(tree: dict[str, Any]) -> str:
    """Render a tree produced by parse() back into HTML."""
    soup = BeautifulSoup("", "html.parser")
    for node in tree.get(ARRAY_KEY, []):
        soup.append(_from_json(soup, node))
    return soup.decode(formatter=FORMATTER)


def _to_json(node: Any) -> dict[str, Any]:
    if isinstance(node, Tag):
        result: dict[str, Any] = {"node": "element", "tag": node.name}
        if node.attrs:
            result["attr"] = dict(node.attrs)
        children = [_to_json(child) for child in node.contents]
        if children:
            result[ARRAY_KEY] = children
        return result

    for name, string_type in _RAW_TYPES:
        if isinstance(node, string_type):
            return {"node": name, "raw": str(node)}

    return {"node": "text", TEXT_KEY: str(node)}


def _from_json(soup: BeautifulSoup, node: dict[str, Any]) -> Any:
    kind = node.get("node")

    if kind == "text":
        return NavigableString(node.get(TEXT_KEY, ""))

    if kind == "element":
        tag = soup.new_tag(node["tag"], attrs=dict(node.get("attr", {})))
        for child in node.get(ARRAY_KEY, []):
            tag.append(_from_json(soup, child))
        return tag

    for name, string_type in _RAW_TYPES:
        if kind == name:
            return string_type(node.get("raw", ""))

    raise MalformedDocument(f"Unknown HTML node type: {kind!r}")
