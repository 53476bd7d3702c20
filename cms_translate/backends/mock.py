"""
Mock backend for demos and local development.
"""

from __future__ import annotations

from cms_translate.backends.base import TranslationBackend
from cms_translate.core.models import TranslationOptions


class MockBackend(TranslationBackend):
    """Returns "Translated <text>" without calling any service."""

    service_id = "mock"

    async def translate(self, text: str, options: TranslationOptions) -> str:
        return f"Translated {text}"
