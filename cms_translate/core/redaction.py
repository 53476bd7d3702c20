"""
Identifier redaction.

Structural identifiers (block ids, item ids) are removed from a working
copy before enumeration, so they are never classified as text and never
sent to a translation backend.
"""

from __future__ import annotations

from typing import Any, Iterable

from cms_translate.core.errors import MalformedDocument


def strip_identifiers(document: Any, keys: Iterable[str]) -> Any:
    """
    Deep copy of document without any of the given keys, at any depth.

    The input is not modified.

    Raises:
        MalformedDocument: the document contains a cycle
    """
    return _strip(document, frozenset(keys), set())


def _strip(node: Any, keys: frozenset[str], ancestors: set[int]) -> Any:
    if not isinstance(node, (dict, list)):
        return node

    marker = id(node)
    if marker in ancestors:
        raise MalformedDocument("Cycle detected while removing identifiers")

    ancestors.add(marker)
    try:
        if isinstance(node, dict):
            return {
                key: _strip(value, keys, ancestors)
                for key, value in node.items()
                if key not in keys
            }
        return [_strip(element, keys, ancestors) for element in node]
    finally:
        ancestors.discard(marker)


def restore_identifiers(original: Any, translated: Any, keys: Iterable[str]) -> Any:
    """
    Put redacted identifier fields from original back into translated.

    Walks both trees in parallel (they have the same shape apart from the
    redacted fields) and re-inserts each field at its original position.
    Keys that only exist in translated are kept after the original ones.
    """
    return _restore(original, translated, frozenset(keys))


def _restore(original: Any, translated: Any, keys: frozenset[str]) -> Any:
    if isinstance(original, dict) and isinstance(translated, dict):
        merged: dict[str, Any] = {}
        for key, value in original.items():
            if key in keys:
                merged[key] = value
            elif key in translated:
                merged[key] = _restore(value, translated[key], keys)
        for key, value in translated.items():
            if key not in merged:
                merged[key] = value
        return merged

    if (
        isinstance(original, list)
        and isinstance(translated, list)
        and len(original) == len(translated)
    ):
        return [
            _restore(before, after, keys)
            for before, after in zip(original, translated)
        ]

    return translated
