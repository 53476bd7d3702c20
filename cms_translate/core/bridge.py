"""
Array/object bridge.

AST-shaped documents keep their nodes in ordered lists under a fixed key
("child" for HTML, "children" for Markdown). to_keyed turns those lists
into dicts keyed by the stringified index so every node is addressable
by key; from_keyed is the exact inverse.
"""

from __future__ import annotations

from typing import Any


def to_keyed(sequence: list[Any], array_key: str) -> dict[str, Any]:
    """
    Convert an ordered sequence into {array_key: {"0": ..., "1": ...}}.

    Lists nested under array_key inside the elements are converted too.
    """
    return {array_key: _list_to_dict(sequence, array_key)}


def from_keyed(mapping: dict[str, Any], array_key: str) -> list[Any]:
    """Inverse of to_keyed: rebuild the list in index order."""
    return _dict_to_list(mapping[array_key], array_key)


def _list_to_dict(sequence: list[Any], array_key: str) -> dict[str, Any]:
    return {
        str(index): _encode(element, array_key)
        for index, element in enumerate(sequence)
    }


def _dict_to_list(mapping: dict[str, Any], array_key: str) -> list[Any]:
    ordered = sorted(mapping.items(), key=lambda item: int(item[0]))
    return [_decode(element, array_key) for _, element in ordered]


def _encode(node: Any, array_key: str) -> Any:
    if isinstance(node, dict):
        return {
            key: (
                _list_to_dict(value, array_key)
                if key == array_key and isinstance(value, list)
                else _encode(value, array_key)
            )
            for key, value in node.items()
        }
    if isinstance(node, list):
        return [_encode(element, array_key) for element in node]
    return node


def _decode(node: Any, array_key: str) -> Any:
    if isinstance(node, dict):
        return {
            key: (
                _dict_to_list(value, array_key)
                if key == array_key and isinstance(value, dict)
                else _decode(value, array_key)
            )
            for key, value in node.items()
        }
    if isinstance(node, list):
        return [_decode(element, array_key) for element in node]
    return node
