"""
Error taxonomy for field translation.

Every failure raised by the engine derives from TranslationError, so
callers can catch one type and present it to the user.
"""

from __future__ import annotations


class TranslationError(Exception):
    """Base class for all translation failures."""
    pass


class MalformedDocument(TranslationError):
    """Raised when a document is cyclic, too deep, or has an unexpected shape."""
    pass


class UnsupportedLocale(TranslationError):
    """Raised when a backend has no code for the requested locale."""

    def __init__(self, locale: str, service: str):
        self.locale = locale
        self.service = service
        super().__init__(f"Locale '{locale}' is not supported by '{service}'")


class BackendError(TranslationError):
    """Raised when a translation backend fails (network, auth, quota, response)."""

    def __init__(self, message: str, service: str = "", status_code: int | None = None):
        self.service = service
        self.status_code = status_code
        super().__init__(message)


class NoBackendConfigured(TranslationError):
    """Raised when no translation service is selected."""

    def __init__(self, message: str = "No translation service added in the settings"):
        super().__init__(message)
