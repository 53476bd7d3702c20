"""
Markdown codec.

Parses Markdown into mistune's token tree and renders it back with
mistune's MarkdownRenderer.

Tree shape:
    {"type": "root", "children": [...], "references": {...}}

Inline text tokens carry their content under "value"; code spans, code
blocks and raw HTML keep mistune's "raw" field, so only prose is ever
translated.
"""

from __future__ import annotations

import copy
from typing import Any

import mistune
from mistune.core import BlockState
from mistune.renderers.markdown import MarkdownRenderer

from cms_translate.core.errors import MalformedDocument


ARRAY_KEY = "children"
TEXT_KEY = "value"

_RAW_KEY = "raw"


def parse(text: str) -> dict[str, Any]:
    """Parse Markdown into a token tree."""
    markdown = mistune.create_markdown(renderer="ast")
    tokens, state = markdown.parse(text)
    return {
        "type": "root",
        ARRAY_KEY: [_rename(token, _RAW_KEY, TEXT_KEY) for token in tokens],
        "references": copy.deepcopy(state.env.get("ref_links", {})),
    }


def serialize(tree: dict[str, Any]) -> str:
    """Render a tree produced by parse() back into Markdown."""
    children = tree.get(ARRAY_KEY)
    if not isinstance(children, list):
        raise MalformedDocument("Markdown tree has no children list")

    state = BlockState()
    state.env["ref_links"] = copy.deepcopy(tree.get("references", {}))
    tokens = [_rename(token, TEXT_KEY, _RAW_KEY) for token in children]
    return MarkdownRenderer()(tokens, state)


def _rename(token: dict[str, Any], old: str, new: str) -> dict[str, Any]:
    """Copy a token, renaming the content key of text tokens (in place order)."""
    renamed: dict[str, Any] = {}
    for key, value in token.items():
        if key == old and token.get("type") == "text":
            key = new
        if key == ARRAY_KEY and isinstance(value, list):
            value = [_rename(child, old, new) for child in value]
        renamed[key] = value
    return renamed
