"""
Internationalization - locale resolution and document translation.

Design:
1. Walk any field value and find the leaves worth translating
2. Dispatch each leaf to the translator for its format
3. Never change document shape, order or non-text values

Usage:
    from cms_translate.i18n import translate_field
    from cms_translate.core import TranslationOptions

    options = TranslationOptions(
        from_locale="en",
        to_locale="it",
        format="rich_text",
        translation_service="deepl",
        api_key="...",
    )
    blocks_it = await translate_field(blocks, options)
"""

# languages must be imported first: the backends depend on it
from cms_translate.i18n.languages import (
    load_supported_locales,
    require_source_locale,
    require_target_locale,
    resolve_source_locale,
    resolve_target_locale,
    split_locale,
)
from cms_translate.i18n.document import (
    DocumentTranslator,
    slugify,
    translate_document,
    translate_field,
)

__all__ = [
    # Locales
    "load_supported_locales",
    "require_source_locale",
    "require_target_locale",
    "resolve_source_locale",
    "resolve_target_locale",
    "split_locale",
    # Documents
    "DocumentTranslator",
    "slugify",
    "translate_document",
    "translate_field",
]
