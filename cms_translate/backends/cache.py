"""
Translation caching.

Caches translations by content hash so repeated strings (a heading used
in many blocks, a shared footer) hit the backend once.
"""

from __future__ import annotations

import hashlib

from cms_translate.backends.base import TranslationBackend
from cms_translate.core.models import TranslationOptions


class TranslationCache:
    """
    Simple hash-based translation cache.

    In-memory only; the key covers the backend, both locales and the
    format, so the same text in different contexts is cached separately.
    """

    def __init__(self):
        self._cache: dict[str, str] = {}

    def _make_key(self, text: str, service: str, options: TranslationOptions) -> str:
        """Create cache key from content hash."""
        content = (
            f"{service}:{options.from_locale}:{options.to_locale}:"
            f"{options.format.value}:{text}"
        )
        return hashlib.sha256(content.encode()).hexdigest()[:16]

    def get(self, text: str, service: str, options: TranslationOptions) -> str | None:
        """Get cached translation."""
        return self._cache.get(self._make_key(text, service, options))

    def set(self, text: str, service: str, options: TranslationOptions, translation: str) -> None:
        """Cache a translation."""
        self._cache[self._make_key(text, service, options)] = translation

    def clear(self) -> None:
        """Clear memory cache."""
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)


class CachedBackend(TranslationBackend):
    """Wraps another backend and serves repeated strings from a cache."""

    def __init__(self, backend: TranslationBackend, cache: TranslationCache | None = None):
        self.backend = backend
        self.cache = cache or TranslationCache()

    @property
    def service_id(self) -> str:
        return self.backend.service_id

    async def translate(self, text: str, options: TranslationOptions) -> str:
        cached = self.cache.get(text, self.service_id, options)
        if cached is not None:
            return cached

        translation = await self.backend.translate(text, options)
        self.cache.set(text, self.service_id, options, translation)
        return translation

    async def shutdown(self) -> None:
        await self.backend.shutdown()
