"""
Document-level translation.

Translates whole field values: plain strings, slugs, SEO objects, HTML,
Markdown, structured text and rich-text block collections. Each format
has one method on DocumentTranslator; structured text and rich text
enumerate their paths and dispatch each one to the method for its kind,
so the formats recurse into each other (HTML inside a block inside
structured text, and so on).

Leaves are translated one at a time in enumeration order, and every
write returns a new tree (see core.utils.set_in). If a backend call
fails, the error propagates and nothing is returned.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from typing import Any

from cms_translate.backends.base import TranslationBackend
from cms_translate.backends.registry import get_backend
from cms_translate.codecs import html as html_codec
from cms_translate.codecs import markdown as markdown_codec
from cms_translate.config import Settings
from cms_translate.core.bridge import from_keyed, to_keyed
from cms_translate.core.errors import MalformedDocument, TranslationError
from cms_translate.core.models import (
    PathKind,
    TranslatedDocument,
    TranslationFormat,
    TranslationOptions,
)
from cms_translate.core.paths import enumerate_paths
from cms_translate.core.redaction import strip_identifiers
from cms_translate.core.utils import get_in, set_in

logger = logging.getLogger(__name__)


STRUCTURED_TEXT_IDENTIFIERS = ("id",)
RICH_TEXT_IDENTIFIERS = ("itemId",)

# Structural fields of a block embedded in structured text, never translated
BLOCK_STRUCTURAL_KEYS = ("type", "children")

# Identifier fields a top-level call may remove, per format
REDACTED_KEYS: dict[TranslationFormat, list[str]] = {
    TranslationFormat.STRUCTURED_TEXT: ["id", "itemId"],
    TranslationFormat.RICH_TEXT: ["itemId", "id"],
}


def slugify(text: str) -> str:
    """Lowercase, hyphen-separated slug; ASCII when the text allows it."""
    ascii_text = (
        unicodedata.normalize("NFKD", text)
        .encode("ascii", "ignore")
        .decode("ascii")
    )
    slug = re.sub(r"[^a-z0-9]+", "-", ascii_text.lower()).strip("-")
    if slug:
        return slug
    return re.sub(r"[\W_]+", "-", text.lower()).strip("-")


class DocumentTranslator:
    """
    Translates field values of every supported format.

    Usage:
        translator = DocumentTranslator(backend, options)

        # Whatever options.format says
        translated = await translator.translate(value)

        # Or a specific format
        html = await translator.html("<p>Hello</p>")
    """

    def __init__(self, backend: TranslationBackend, options: TranslationOptions):
        self.backend = backend
        self.options = options

    # =========================================================================
    # Entry point
    # =========================================================================

    async def translate(self, value: Any) -> Any:
        """Translate a field value according to options.format."""
        if not value:
            return value

        fmt = self.options.format
        if fmt == TranslationFormat.HTML:
            return await self.html(value)
        if fmt == TranslationFormat.MARKDOWN:
            return await self.markdown(value)
        if fmt == TranslationFormat.STRUCTURED_TEXT:
            return await self.structured_text(value)
        if fmt == TranslationFormat.RICH_TEXT:
            return await self.rich_text(value)
        if fmt == TranslationFormat.SEO:
            return await self.seo(value)
        if fmt == TranslationFormat.SLUG:
            return await self.slug(value)
        return await self.plain(value)

    # =========================================================================
    # Leaf formats
    # =========================================================================

    async def plain(self, text: str) -> str:
        """
        Translate one string with one backend call.

        Blank strings are returned as-is without calling the backend.
        Leading and trailing whitespace is kept around the translation.
        """
        if not isinstance(text, str):
            raise MalformedDocument(f"Expected text, got {type(text).__name__}")
        if not text.strip():
            return text

        stripped = text.strip()
        leading = text[: len(text) - len(text.lstrip())]
        trailing = text[len(text.rstrip()):]

        try:
            translated = await self.backend.translate(stripped, self.options)
        except TranslationError as e:
            logger.error(f"Translation with '{self.backend.service_id}' failed: {e}")
            raise

        return f"{leading}{translated}{trailing}"

    async def slug(self, value: str) -> str:
        """Translate a slug's words and re-slugify the result."""
        if not isinstance(value, str):
            raise MalformedDocument(f"Expected a slug, got {type(value).__name__}")
        if not value.strip():
            return value

        translated = await self.plain(value.replace("-", " "))
        return slugify(translated)

    async def seo(self, value: dict[str, Any]) -> dict[str, Any]:
        """
        Translate an SEO object.

        title and description are translated independently; when missing
        or empty they become "". Every other field passes through.
        """
        if not isinstance(value, dict):
            raise MalformedDocument(f"Expected an SEO object, got {type(value).__name__}")

        title = value.get("title")
        description = value.get("description")

        result: dict[str, Any] = {
            "title": await self.plain(title) if title else "",
            "description": await self.plain(description) if description else "",
            "image": value.get("image"),
            "twitter_card": value.get("twitter_card"),
        }
        for key, item in value.items():
            if key not in result:
                result[key] = item
        return result

    # =========================================================================
    # AST formats
    # =========================================================================

    async def html(self, markup: str, depth: int = 0) -> str:
        """Translate the text nodes of an HTML string."""
        self._check_depth(depth)
        if not isinstance(markup, str):
            raise MalformedDocument(f"Expected HTML text, got {type(markup).__name__}")
        if not markup.strip():
            return markup

        tree = html_codec.parse(markup)
        children = await self.per_path(
            tree[html_codec.ARRAY_KEY],
            html_codec.ARRAY_KEY,
            html_codec.TEXT_KEY,
        )
        return html_codec.serialize({**tree, html_codec.ARRAY_KEY: children})

    async def markdown(self, text: str, depth: int = 0) -> str:
        """Translate the prose of a Markdown string; code is left alone."""
        self._check_depth(depth)
        if not isinstance(text, str):
            raise MalformedDocument(f"Expected Markdown text, got {type(text).__name__}")
        if not text.strip():
            return text

        tree = markdown_codec.parse(text)
        children = await self.per_path(
            tree[markdown_codec.ARRAY_KEY],
            markdown_codec.ARRAY_KEY,
            markdown_codec.TEXT_KEY,
        )
        result = markdown_codec.serialize({**tree, markdown_codec.ARRAY_KEY: children})

        # The renderer always ends with a newline
        if not text.endswith("\n"):
            result = result.rstrip("\n")
        return result

    async def per_path(
        self,
        children: list[Any],
        array_key: str,
        translating_key: str,
    ) -> list[Any]:
        """
        Translate every string stored under translating_key in an AST.

        Args:
            children: Ordered top-level nodes of the AST
            array_key: Key holding each node's child list
            translating_key: Key holding translatable text

        Returns:
            New node list, same length and order
        """
        keyed = to_keyed(children, array_key)

        for path in enumerate_paths(keyed):
            if path.key != translating_key or not isinstance(path.value, str):
                continue
            if not path.value.strip():
                continue

            logger.debug(f"Translating {translating_key} at {list(path.location)}")
            translated = await self.plain(get_in(keyed, path.location))
            keyed = set_in(keyed, path.location, translated)

        return from_keyed(keyed, array_key)

    # =========================================================================
    # Block formats
    # =========================================================================

    async def structured_text(self, value: Any, depth: int = 0) -> Any:
        """
        Translate a structured-text (Slate) value.

        Block ids are removed. Only "text" leaves are translated; nested
        structured text recurses here and embedded blocks go through block().
        """
        self._check_depth(depth)
        if not isinstance(value, (list, dict)):
            raise MalformedDocument(
                f"Expected structured text, got {type(value).__name__}"
            )

        document = strip_identifiers(value, STRUCTURED_TEXT_IDENTIFIERS)

        for path in enumerate_paths(document):
            current = get_in(document, path.location)

            if path.kind == PathKind.TEXT and path.key == "text":
                translated = await self.plain(current)
            elif path.kind == PathKind.STRUCTURED_TEXT:
                translated = await self.structured_text(current, depth + 1)
            elif path.kind == PathKind.STRUCTURED_TEXT_BLOCK:
                translated = await self.block(current, depth + 1)
            else:
                continue

            logger.debug(f"Translated {path.kind.value} at {list(path.location)}")
            document = set_in(document, path.location, translated)

        return document

    async def rich_text(self, value: Any, depth: int = 0) -> Any:
        """
        Translate a rich-text value (a list of blocks, or a single block body).

        Item ids are removed. Each path is dispatched by kind; kinds that
        are not translatable pass through unchanged.
        """
        self._check_depth(depth)
        if not isinstance(value, (list, dict)):
            raise MalformedDocument(f"Expected rich text, got {type(value).__name__}")

        document = strip_identifiers(value, RICH_TEXT_IDENTIFIERS)

        for path in enumerate_paths(document):
            if not path.is_translatable:
                continue

            current = get_in(document, path.location)
            if not current:
                continue

            translated = await self._dispatch(path.kind, current, depth + 1)
            logger.debug(f"Translated {path.kind.value} at {list(path.location)}")
            document = set_in(document, path.location, translated)

        return document

    async def block(self, value: dict[str, Any], depth: int = 0) -> dict[str, Any]:
        """
        Translate a block embedded in structured text.

        type and children are structural: the rest of the block is
        translated as rich text and they are put back unchanged, in their
        original position.
        """
        self._check_depth(depth)
        if not isinstance(value, dict):
            raise MalformedDocument(f"Expected a block, got {type(value).__name__}")

        body = {
            key: item
            for key, item in value.items()
            if key not in BLOCK_STRUCTURAL_KEYS
        }
        translated = await self.rich_text(body, depth + 1)

        return {
            key: value[key] if key in BLOCK_STRUCTURAL_KEYS else translated[key]
            for key in value
            if key in BLOCK_STRUCTURAL_KEYS or key in translated
        }

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _dispatch(self, kind: PathKind, value: Any, depth: int) -> Any:
        if kind == PathKind.TEXT:
            return await self.plain(value)
        if kind == PathKind.HTML:
            return await self.html(value, depth)
        if kind == PathKind.MARKDOWN:
            return await self.markdown(value, depth)
        if kind == PathKind.STRUCTURED_TEXT:
            return await self.structured_text(value, depth)
        if kind == PathKind.STRUCTURED_TEXT_BLOCK:
            return await self.block(value, depth)
        if kind == PathKind.SEO:
            return await self.seo(value)
        return value

    def _check_depth(self, depth: int) -> None:
        if depth > self.options.max_depth:
            raise MalformedDocument(
                f"Sub-document nesting exceeds {self.options.max_depth} levels"
            )


# =============================================================================
# Module-level convenience functions
# =============================================================================


async def translate_document(
    value: Any,
    options: TranslationOptions,
    backend: TranslationBackend | None = None,
    settings: Settings | None = None,
) -> TranslatedDocument:
    """
    Translate a field value and return it next to the original.

    The backend is resolved before anything is translated, so a missing
    backend fails without touching the document.

    Args:
        value: Field value (string, dict or list, depending on the format)
        options: Locales, format and backend for this call
        backend: Backend to use instead of the one options select
        settings: Settings used to resolve the backend

    Returns:
        TranslatedDocument with the original value, the translated value
        and the identifier keys removed from the translated one
    """
    backend = backend or get_backend(options, settings)

    logger.info(
        f"Translating {options.format.value} value from {options.from_locale} "
        f"to {options.to_locale} with '{backend.service_id}'"
    )

    translated = await DocumentTranslator(backend, options).translate(value)

    return TranslatedDocument(
        original=value,
        translated=translated,
        redacted_keys=REDACTED_KEYS.get(options.format, []),
    )


async def translate_field(
    value: Any,
    options: TranslationOptions,
    backend: TranslationBackend | None = None,
    settings: Settings | None = None,
) -> Any:
    """Translate a field value (convenience function)."""
    result = await translate_document(value, options, backend, settings)
    return result.translated
