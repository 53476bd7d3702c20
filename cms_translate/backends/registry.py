"""
Registry for translation backends.

Backends register themselves by service ID, and translation options
reference them by that ID. This decouples choosing a service (settings)
from implementing it.
"""

from __future__ import annotations

import logging

from cms_translate.backends.base import TranslationBackend
from cms_translate.backends.cache import CachedBackend
from cms_translate.backends.deepl import DeepLBackend
from cms_translate.backends.llm import OpenAIBackend
from cms_translate.backends.mock import MockBackend
from cms_translate.backends.yandex import YandexBackend
from cms_translate.config import Settings, get_settings
from cms_translate.core.errors import NoBackendConfigured
from cms_translate.core.models import TranslationOptions

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Raised when there's an error with the registry."""
    pass


class BackendRegistry:
    """Central registry of translation backends, keyed by service ID."""

    def __init__(self):
        self._backends: dict[str, TranslationBackend] = {}

    def register_backend(self, backend: TranslationBackend, replace: bool = False) -> None:
        """Register a backend by its service ID."""
        if backend.service_id in self._backends and not replace:
            raise RegistryError(f"Backend '{backend.service_id}' is already registered")
        self._backends[backend.service_id] = backend

    def get_backend(self, service_id: str) -> TranslationBackend:
        """Get a backend by service ID."""
        if service_id not in self._backends:
            raise NoBackendConfigured(f"No translation backend registered for '{service_id}'")
        return self._backends[service_id]

    def list_backends(self) -> list[str]:
        """List all registered service IDs."""
        return list(self._backends.keys())


def default_backends(settings: Settings) -> list[TranslationBackend]:
    """The built-in backends, configured from settings."""
    http_options = {
        "timeout": settings.request_timeout,
        "retry_attempts": settings.retry_attempts,
    }
    backends: list[TranslationBackend] = [
        YandexBackend(**http_options),
        DeepLBackend(free=False, **http_options),
        DeepLBackend(free=True, **http_options),
        OpenAIBackend(),
        MockBackend(),
    ]
    if settings.cache_translations:
        return [CachedBackend(backend) for backend in backends]
    return backends


# Singleton registry for the application
_default_registry: BackendRegistry | None = None


def get_registry() -> BackendRegistry:
    """Get the default registry, populated with the built-in backends."""
    global _default_registry
    if _default_registry is None:
        _default_registry = BackendRegistry()
        for backend in default_backends(get_settings()):
            _default_registry.register_backend(backend)
    return _default_registry


def reset_registry() -> None:
    """Reset the default registry (useful for testing)."""
    global _default_registry
    _default_registry = None


def get_backend(
    options: TranslationOptions,
    settings: Settings | None = None,
    registry: BackendRegistry | None = None,
) -> TranslationBackend:
    """
    Pick the backend for a translation call.

    Raises:
        NoBackendConfigured: no service selected, or none registered for it
    """
    settings = settings or get_settings()
    registry = registry or get_registry()

    if settings.use_mock:
        return registry.get_backend(MockBackend.service_id)

    if options.translation_service is None:
        raise NoBackendConfigured()

    service_id = options.translation_service.value
    logger.debug(f"Using translation backend '{service_id}'")
    return registry.get_backend(service_id)
