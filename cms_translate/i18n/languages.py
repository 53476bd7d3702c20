"""
Locale resolution.

Maps a locale tag from the content platform (e.g. "en", "pt-BR") to the
code a specific translation backend accepts. The supported-locale tables
are static data shipped in supported_locales.yaml.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml

from cms_translate.core.errors import UnsupportedLocale
from cms_translate.core.models import TranslationService


LOCALES_FILE = Path(__file__).parent / "supported_locales.yaml"

DEEPL_SERVICES = (TranslationService.DEEPL, TranslationService.DEEPL_FREE)

# Irregular DeepL targets: bare codes that need a regional variant
DEEPL_TARGET_DEFAULTS: dict[str, str] = {
    "en": "EN-US",
    "pt": "PT-PT",
}


# =============================================================================
# Tables
# =============================================================================


@lru_cache
def load_supported_locales(path: Path | str | None = None) -> dict[str, frozenset[str]]:
    """
    Load the per-backend locale tables, lowercased.

    Returns:
        Dict of table name ("yandex", "deepl_from", "deepl_to") -> codes
    """
    path = Path(path) if path else LOCALES_FILE
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return {
        name: frozenset(str(code).lower() for code in codes or [])
        for name, codes in data.items()
    }


def _table(name: str) -> frozenset[str]:
    return load_supported_locales().get(name, frozenset())


# =============================================================================
# Utilities
# =============================================================================


def split_locale(locale: str) -> tuple[str, str]:
    """
    Normalize a locale tag.

    Returns:
        Tuple of (lowercased tag, base subtag before the first "-")
    """
    lower = locale.strip().lower()
    index = lower.find("-")
    base = lower[:index] if index > 0 else lower
    return lower, base


def _as_service(service: str | TranslationService | None) -> TranslationService | None:
    try:
        return TranslationService(service)
    except ValueError:
        return None


def resolve_target_locale(locale: str, service: str | TranslationService | None) -> str:
    """
    Backend code for a target locale.

    Yandex takes the base subtag as-is. DeepL takes uppercase codes, with
    regional defaults for "en" and "pt". Other backends get the locale
    unchanged.
    """
    lower, base = split_locale(locale)
    service = _as_service(service)

    if service == TranslationService.YANDEX:
        return base

    if service in DEEPL_SERVICES:
        if lower in DEEPL_TARGET_DEFAULTS:
            return DEEPL_TARGET_DEFAULTS[lower]
        if base in _table("deepl_to"):
            return base.upper()
        return locale.upper()

    return locale


def resolve_source_locale(locale: str, service: str | TranslationService | None) -> str:
    """
    Backend code for a source locale, or "" when the backend has none.
    """
    _, base = split_locale(locale)
    service = _as_service(service)

    if service == TranslationService.YANDEX:
        return base if base in _table("yandex") else ""

    if service in DEEPL_SERVICES:
        return base.upper() if base in _table("deepl_from") else ""

    return locale


def require_source_locale(locale: str, service: str | TranslationService) -> str:
    """Like resolve_source_locale, but raise UnsupportedLocale instead of ""."""
    code = resolve_source_locale(locale, service)
    if not code:
        raise UnsupportedLocale(locale, str(getattr(service, "value", service)))
    return code


def require_target_locale(locale: str, service: str | TranslationService) -> str:
    """Like resolve_target_locale, but raise UnsupportedLocale instead of ""."""
    code = resolve_target_locale(locale, service)
    if not code:
        raise UnsupportedLocale(locale, str(getattr(service, "value", service)))
    return code
