"""
Translation backends - the external capability the engine calls per leaf.
"""

from cms_translate.backends.base import TranslationBackend
from cms_translate.backends.cache import CachedBackend, TranslationCache
from cms_translate.backends.deepl import DeepLBackend
from cms_translate.backends.llm import OpenAIBackend
from cms_translate.backends.mock import MockBackend
from cms_translate.backends.yandex import YandexBackend
from cms_translate.backends.registry import (
    BackendRegistry,
    RegistryError,
    default_backends,
    get_backend,
    get_registry,
    reset_registry,
)

__all__ = [
    "TranslationBackend",
    "CachedBackend",
    "TranslationCache",
    "DeepLBackend",
    "OpenAIBackend",
    "MockBackend",
    "YandexBackend",
    "BackendRegistry",
    "RegistryError",
    "default_backends",
    "get_backend",
    "get_registry",
    "reset_registry",
]
