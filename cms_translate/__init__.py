"""
cms_translate - translate content-platform field values between locales.

Handles plain strings, slugs, SEO objects, HTML, Markdown, structured
text and rich-text blocks, keeping document structure, node order and
non-text values exactly as they were.

Usage:
    from cms_translate import TranslationOptions, translate_document

    options = TranslationOptions.from_settings("en", "de", "structured_text")
    result = await translate_document(value, options)
    result.translated   # identifiers removed
    result.original     # untouched input, for re-merging identifiers
"""

from cms_translate.core import (
    BackendError,
    MalformedDocument,
    NoBackendConfigured,
    OpenAIOptions,
    PathKind,
    TranslatedDocument,
    TranslationError,
    TranslationFormat,
    TranslationOptions,
    TranslationService,
    UnsupportedLocale,
    format_for_editor,
    restore_identifiers,
)
from cms_translate.i18n import (
    DocumentTranslator,
    resolve_source_locale,
    resolve_target_locale,
    translate_document,
    translate_field,
)
from cms_translate.backends import TranslationBackend, get_backend

__all__ = [
    "BackendError",
    "MalformedDocument",
    "NoBackendConfigured",
    "OpenAIOptions",
    "PathKind",
    "TranslatedDocument",
    "TranslationError",
    "TranslationFormat",
    "TranslationOptions",
    "TranslationService",
    "UnsupportedLocale",
    "format_for_editor",
    "restore_identifiers",
    "DocumentTranslator",
    "resolve_source_locale",
    "resolve_target_locale",
    "translate_document",
    "translate_field",
    "TranslationBackend",
    "get_backend",
]
