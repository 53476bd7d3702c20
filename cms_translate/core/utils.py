"""
Shared utility functions for reading and rewriting document trees.

Writes are copy-on-write: set_in never mutates its input, it returns a
new tree that shares every untouched subtree with the old one.
"""

from __future__ import annotations

from typing import Any, Sequence

from cms_translate.core.errors import MalformedDocument


def get_in(document: Any, location: Sequence[str | int]) -> Any:
    """
    Read the value at a location.

    Args:
        document: Nested dicts/lists
        location: Keys and indices from the root

    Returns:
        The value found there
    """
    node = document
    for step in location:
        try:
            node = node[step]
        except (KeyError, IndexError, TypeError) as e:
            raise MalformedDocument(f"No value at {list(location)!r}") from e
    return node


def set_in(document: Any, location: Sequence[str | int], value: Any) -> Any:
    """
    Return a copy of document with value written at location.

    Only the containers along the location are copied.
    """
    if not location:
        return value

    head, rest = location[0], location[1:]
    child = set_in(get_in(document, (head,)), rest, value)

    if isinstance(document, list):
        copy: Any = list(document)
    elif isinstance(document, dict):
        copy = dict(document)
    else:
        raise MalformedDocument(f"Cannot write into {type(document).__name__}")

    copy[head] = child
    return copy
