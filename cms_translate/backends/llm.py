"""
OpenAI backend using DSPy.

Each call builds a DSPy LM from the call's OpenAI options and API key and
runs a TranslateText prediction in a worker thread.
"""

from __future__ import annotations

import asyncio

import dspy

from cms_translate.backends.base import TranslationBackend
from cms_translate.core.errors import BackendError
from cms_translate.core.models import TranslationOptions, TranslationService
from cms_translate.i18n.languages import resolve_source_locale, resolve_target_locale


# =============================================================================
# DSPy Signatures for Translation
# =============================================================================


class TranslateText(dspy.Signature):
    """Translate text between locales, keeping meaning, tone and punctuation.

    Return only the translation: no quotes, notes or explanations.
    """

    text: str = dspy.InputField(desc="Text to translate")
    source_locale: str = dspy.InputField(desc="Locale of the text (e.g., 'en')")
    target_locale: str = dspy.InputField(desc="Locale to translate into (e.g., 'it')")
    field_format: str = dspy.InputField(desc="Format of the field the text comes from (e.g., 'html')")

    translated_text: str = dspy.OutputField(desc="Translated text")


# =============================================================================
# Backend
# =============================================================================


class OpenAIBackend(TranslationBackend):
    """Translates with an OpenAI chat model through DSPy."""

    service_id = TranslationService.OPENAI.value

    def __init__(self):
        self._translate_module: dspy.Predict | None = None

    @property
    def translate_module(self) -> dspy.Predict:
        if self._translate_module is None:
            self._translate_module = dspy.Predict(TranslateText)
        return self._translate_module

    def build_lm(self, options: TranslationOptions) -> dspy.LM:
        """Language model configured from the call's options."""
        if not options.api_key:
            raise BackendError("OpenAI API key not set", service=self.service_id)

        openai_options = options.openai_options
        return dspy.LM(
            model=f"openai/{openai_options.model}",
            api_key=options.api_key,
            temperature=openai_options.temperature,
            max_tokens=openai_options.max_tokens,
            top_p=openai_options.top_p,
        )

    async def translate(self, text: str, options: TranslationOptions) -> str:
        lm = self.build_lm(options)
        source = resolve_source_locale(options.from_locale, self.service_id)
        target = resolve_target_locale(options.to_locale, self.service_id)

        def predict() -> str:
            with dspy.context(lm=lm):
                result = self.translate_module(
                    text=text,
                    source_locale=source,
                    target_locale=target,
                    field_format=options.format.value,
                )
            return result.translated_text

        try:
            translation = await asyncio.to_thread(predict)
        except Exception as e:
            raise BackendError(
                f"OpenAI translation failed: {e}",
                service=self.service_id,
            ) from e

        return translation.strip()
