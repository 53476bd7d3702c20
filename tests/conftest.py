"""
Shared fixtures: in-process translation backends and options.
"""

import pytest

from cms_translate.backends.base import TranslationBackend
from cms_translate.backends.registry import reset_registry
from cms_translate.core.errors import BackendError
from cms_translate.core.models import TranslationFormat, TranslationOptions


class IdentityBackend(TranslationBackend):
    """Returns the text unchanged and records every call."""

    service_id = "identity"

    def __init__(self):
        self.calls: list[str] = []

    async def translate(self, text, options):
        self.calls.append(text)
        return text


class PrefixBackend(IdentityBackend):
    """Prefixes the target locale, e.g. "[it] Hello"."""

    service_id = "prefix"

    async def translate(self, text, options):
        self.calls.append(text)
        return f"[{options.to_locale}] {text}"


class FailingBackend(IdentityBackend):
    """Fails on the n-th call (1-based)."""

    service_id = "failing"

    def __init__(self, fail_on: int):
        super().__init__()
        self.fail_on = fail_on

    async def translate(self, text, options):
        self.calls.append(text)
        if len(self.calls) == self.fail_on:
            raise BackendError("quota exceeded", service=self.service_id, status_code=456)
        return text


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def identity_backend():
    return IdentityBackend()


@pytest.fixture
def prefix_backend():
    return PrefixBackend()


@pytest.fixture
def make_failing_backend():
    """Factory for a backend that fails on a given call."""
    return FailingBackend


@pytest.fixture
def make_options():
    """Factory for options in a given format."""

    def _make(fmt=TranslationFormat.PLAIN, **kwargs):
        return TranslationOptions(
            from_locale=kwargs.pop("from_locale", "en"),
            to_locale=kwargs.pop("to_locale", "it"),
            format=fmt,
            **kwargs,
        )

    return _make


@pytest.fixture(autouse=True)
def fresh_registry():
    """Each test gets its own default backend registry."""
    reset_registry()
    yield
    reset_registry()
