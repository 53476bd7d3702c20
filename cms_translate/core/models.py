"""
Core data models for field translation.

These models describe what gets translated (formats, path kinds), how
(TranslationOptions, shared read-only across one call) and what comes
back (TranslatedDocument).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from cms_translate.config import Settings


# =============================================================================
# Enums
# =============================================================================


class FieldType(str, Enum):
    """Field types of the content platform that can be translated."""

    STRING = "string"
    TEXT = "text"
    RICH_TEXT = "rich_text"
    STRUCTURED_TEXT = "structured_text"
    SEO = "seo"
    SLUG = "slug"


class Editor(str, Enum):
    """Editor appearance configured on a field."""

    HTML = "wysiwyg"
    MARKDOWN = "markdown"
    SINGLE_LINE = "single_line"
    STRUCTURED_TEXT = "structured_text"
    RICH_TEXT = "rich_text"
    TEXTAREA = "textarea"
    SEO = "seo"
    SLUG = "slug"


class TranslationFormat(str, Enum):
    """Document format of a field value."""

    HTML = "html"
    MARKDOWN = "markdown"
    STRUCTURED_TEXT = "structured_text"
    RICH_TEXT = "rich_text"
    PLAIN = "plain"
    SEO = "seo"
    SLUG = "slug"


class TranslationService(str, Enum):
    """Translation backends."""

    YANDEX = "yandex"
    DEEPL = "deepl"
    DEEPL_FREE = "deeplFree"
    OPENAI = "openAI"
    MOCK = "mock"


class PathKind(str, Enum):
    """Semantic classification of a location inside a document."""

    TEXT = "text"
    HTML = "html"
    MARKDOWN = "markdown"
    STRUCTURED_TEXT = "structured_text"
    STRUCTURED_TEXT_BLOCK = "structured_text_block"
    STRUCTURED_TEXT_INLINE_ITEM = "structured_text_inline_item"
    STRUCTURED_TEXT_CODE = "structured_text_code"
    SEO = "seo"
    SLUG = "slug"
    MEDIA = "media"
    ID = "id"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"
    COLOR = "color"
    JSON = "json"
    META = "meta"


# Kinds that trigger a sub-translator; everything else passes through
TRANSLATABLE_KINDS: frozenset[PathKind] = frozenset({
    PathKind.TEXT,
    PathKind.HTML,
    PathKind.MARKDOWN,
    PathKind.STRUCTURED_TEXT,
    PathKind.STRUCTURED_TEXT_BLOCK,
    PathKind.SEO,
})


# Editor appearance -> format used to translate the field value
TRANSLATION_FORMATS: dict[Editor, TranslationFormat] = {
    Editor.HTML: TranslationFormat.HTML,
    Editor.MARKDOWN: TranslationFormat.MARKDOWN,
    Editor.SINGLE_LINE: TranslationFormat.PLAIN,
    Editor.STRUCTURED_TEXT: TranslationFormat.STRUCTURED_TEXT,
    Editor.RICH_TEXT: TranslationFormat.RICH_TEXT,
    Editor.TEXTAREA: TranslationFormat.PLAIN,
    Editor.SEO: TranslationFormat.SEO,
    Editor.SLUG: TranslationFormat.SLUG,
}


def format_for_editor(editor: str | Editor) -> TranslationFormat:
    """Get the translation format for an editor; unknown editors are plain text."""
    try:
        return TRANSLATION_FORMATS[Editor(editor)]
    except ValueError:
        return TranslationFormat.PLAIN


# =============================================================================
# Options
# =============================================================================


class OpenAIOptions(BaseModel):
    """Completion parameters for the OpenAI backend."""

    model_config = ConfigDict(frozen=True)

    model: str = "gpt-4o"
    temperature: float = 0
    max_tokens: int = 100
    top_p: float = 0


class TranslationOptions(BaseModel):
    """
    Per-call translation configuration.

    Immutable; one instance is shared by every step of a recursive
    translation.
    """

    model_config = ConfigDict(frozen=True)

    from_locale: str
    to_locale: str
    format: TranslationFormat = TranslationFormat.PLAIN
    translation_service: TranslationService | None = None
    api_key: str = ""
    openai_options: OpenAIOptions = Field(default_factory=OpenAIOptions)

    # Maximum nesting of sub-documents (HTML in a block in structured text...)
    max_depth: int = 32

    @classmethod
    def from_settings(
        cls,
        from_locale: str,
        to_locale: str,
        format: TranslationFormat | str = TranslationFormat.PLAIN,
        settings: Settings | None = None,
    ) -> TranslationOptions:
        """Build options for a call from application settings."""
        from cms_translate.config import get_settings

        settings = settings or get_settings()
        service = settings.translation_service or None

        return cls(
            from_locale=from_locale,
            to_locale=to_locale,
            format=TranslationFormat(format),
            translation_service=service,
            api_key=settings.api_key_for(service) if service else "",
            openai_options=OpenAIOptions(
                model=settings.openai_model,
                temperature=settings.openai_temperature,
                max_tokens=settings.openai_max_tokens,
                top_p=settings.openai_top_p,
            ),
            max_depth=settings.max_depth,
        )


# =============================================================================
# Paths and results
# =============================================================================


@dataclass(frozen=True)
class Path:
    """
    A coordinate inside one document, produced by a single enumeration pass.

    location is the full sequence of dict keys and list indices from the
    root; key is its last element.
    """

    location: tuple[str | int, ...]
    key: str | int
    value: Any
    kind: PathKind

    @property
    def is_translatable(self) -> bool:
        return self.kind in TRANSLATABLE_KINDS


class TranslatedDocument(BaseModel):
    """
    Result of a top-level translation.

    The translated tree has the redacted identifier fields removed; the
    original is returned alongside so the caller can reconcile them.
    """

    original: Any
    translated: Any
    redacted_keys: list[str] = Field(default_factory=list)
