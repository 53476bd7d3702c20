"""
DeepL backend (paid and free API).
"""

from __future__ import annotations

from typing import Any

from cms_translate.backends.http import HttpBackend
from cms_translate.core.errors import BackendError
from cms_translate.core.models import TranslationOptions, TranslationService
from cms_translate.i18n.languages import require_source_locale, resolve_target_locale


class DeepLBackend(HttpBackend):
    """Translates through DeepL's /v2/translate endpoint."""

    PRO_URL = "https://api.deepl.com/v2/translate"
    FREE_URL = "https://api-free.deepl.com/v2/translate"

    def __init__(self, free: bool = False, **kwargs: Any):
        super().__init__(**kwargs)
        self.free = free

    @property
    def service_id(self) -> str:
        return TranslationService.DEEPL_FREE.value if self.free else TranslationService.DEEPL.value

    @property
    def url(self) -> str:
        return self.FREE_URL if self.free else self.PRO_URL

    async def translate(self, text: str, options: TranslationOptions) -> str:
        source = require_source_locale(options.from_locale, self.service_id)
        target = resolve_target_locale(options.to_locale, self.service_id)

        data = await self.post_json(
            self.url,
            {"text": [text], "source_lang": source, "target_lang": target},
            headers={"Authorization": f"DeepL-Auth-Key {options.api_key}"},
        )

        try:
            return data["translations"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            raise BackendError(
                "DeepL response has no translation",
                service=self.service_id,
            ) from e
