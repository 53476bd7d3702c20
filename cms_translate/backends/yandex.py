"""
Yandex Cloud Translate backend.
"""

from __future__ import annotations

from cms_translate.backends.http import HttpBackend
from cms_translate.core.errors import BackendError
from cms_translate.core.models import TranslationOptions, TranslationService
from cms_translate.i18n.languages import require_source_locale, require_target_locale


class YandexBackend(HttpBackend):
    """Translates through Yandex Cloud's translate/v2 endpoint."""

    URL = "https://translate.api.cloud.yandex.net/translate/v2/translate"

    service_id = TranslationService.YANDEX.value

    async def translate(self, text: str, options: TranslationOptions) -> str:
        source = require_source_locale(options.from_locale, self.service_id)
        target = require_target_locale(options.to_locale, self.service_id)

        data = await self.post_json(
            self.URL,
            {
                "sourceLanguageCode": source,
                "targetLanguageCode": target,
                "format": "PLAIN_TEXT",
                "texts": [text],
            },
            headers={"Authorization": f"Api-Key {options.api_key}"},
        )

        try:
            return data["translations"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            raise BackendError(
                "Yandex response has no translation",
                service=self.service_id,
            ) from e
