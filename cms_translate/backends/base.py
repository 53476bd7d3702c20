"""
Base class for all translation backends.

A backend is the external capability the engine calls once per text
leaf: given a string and the call's options, return the translation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from cms_translate.core.models import TranslationOptions


class TranslationBackend(ABC):
    """
    Base class for translation backends.

    Backends must raise BackendError (or UnsupportedLocale) on failure and
    never return the untranslated text in place of an error. Retrying
    transient failures, if wanted, is the backend's job.

    Example:
        class ShoutingBackend(TranslationBackend):
            service_id = "shout"

            async def translate(self, text: str, options: TranslationOptions) -> str:
                return text.upper()
    """

    @property
    @abstractmethod
    def service_id(self) -> str:
        """Unique identifier for this backend."""
        pass

    @abstractmethod
    async def translate(self, text: str, options: TranslationOptions) -> str:
        """
        Translate a single string.

        Args:
            text: Non-blank text to translate
            options: Locales, format and credentials for this call

        Returns:
            Translated text
        """
        pass

    async def shutdown(self) -> None:
        """
        Release any resources held by the backend.

        Override if the backend keeps connections open.
        """
        pass
