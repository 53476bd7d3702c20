"""
Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # ==========================================================================
    # Environment
    # ==========================================================================

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # ==========================================================================
    # Translation service
    # ==========================================================================

    # yandex, deepl, deeplFree, openAI or mock; empty means none selected
    translation_service: str = ""

    deepl_api_key: str = ""
    yandex_api_key: str = ""
    openai_api_key: str = ""
    mock_api_key: str = ""

    openai_model: str = "gpt-4o"
    openai_temperature: float = 0
    openai_max_tokens: int = 100
    openai_top_p: float = 0

    # Short-circuit every backend call with the mock backend
    use_mock: bool = False

    # Keep an in-memory cache of translated strings
    cache_translations: bool = False

    # ==========================================================================
    # Limits
    # ==========================================================================

    max_depth: int = 32
    request_timeout: float = 30.0
    retry_attempts: int = 3

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def api_key_for(self, service: str) -> str:
        """API key configured for a translation service."""
        return {
            "yandex": self.yandex_api_key,
            "deepl": self.deepl_api_key,
            "deeplFree": self.deepl_api_key,
            "openAI": self.openai_api_key,
            "mock": self.mock_api_key,
        }.get(str(getattr(service, "value", service)), "")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
