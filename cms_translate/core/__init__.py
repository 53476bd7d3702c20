"""
Core module - document models and tree infrastructure.

This module contains:
- models: Formats, path kinds, options and results
- errors: Error taxonomy
- paths: PathKind classifier and path enumerator
- bridge: List <-> keyed-dict conversion for AST documents
- redaction: Identifier stripping and restoring
- utils: Copy-on-write tree access
"""

from cms_translate.core.models import (
    Editor,
    FieldType,
    OpenAIOptions,
    Path,
    PathKind,
    TRANSLATABLE_KINDS,
    TRANSLATION_FORMATS,
    TranslatedDocument,
    TranslationFormat,
    TranslationOptions,
    TranslationService,
    format_for_editor,
)

from cms_translate.core.errors import (
    BackendError,
    MalformedDocument,
    NoBackendConfigured,
    TranslationError,
    UnsupportedLocale,
)

from cms_translate.core.paths import classify, enumerate_paths
from cms_translate.core.bridge import from_keyed, to_keyed
from cms_translate.core.redaction import restore_identifiers, strip_identifiers
from cms_translate.core.utils import get_in, set_in

__all__ = [
    # Models
    "Editor",
    "FieldType",
    "OpenAIOptions",
    "Path",
    "PathKind",
    "TRANSLATABLE_KINDS",
    "TRANSLATION_FORMATS",
    "TranslatedDocument",
    "TranslationFormat",
    "TranslationOptions",
    "TranslationService",
    "format_for_editor",
    # Errors
    "BackendError",
    "MalformedDocument",
    "NoBackendConfigured",
    "TranslationError",
    "UnsupportedLocale",
    # Tree
    "classify",
    "enumerate_paths",
    "from_keyed",
    "to_keyed",
    "restore_identifiers",
    "strip_identifiers",
    "get_in",
    "set_in",
]
