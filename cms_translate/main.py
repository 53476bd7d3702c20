"""
cms_translate - Main entry point.

Translates a JSON field value (or a built-in sample) and prints the
result. Uses the configured translation service, or the mock backend
when none is configured, so it can be run to verify the installation.

    python -m cms_translate.main value.json --from en --to it --format rich_text
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from cms_translate.config import get_settings
from cms_translate.core.models import TranslationFormat, TranslationOptions, TranslationService
from cms_translate.core.redaction import restore_identifiers
from cms_translate.i18n.document import translate_document


SAMPLE_RICH_TEXT: list[dict[str, Any]] = [
    {
        "itemId": "91302",
        "itemTypeId": "1284",
        "title": "Welcome to our shop",
        "body": "<p>We ship <strong>worldwide</strong>.</p>",
        "content": [
            {
                "type": "heading",
                "level": 2,
                "children": [{"text": "Opening hours"}],
            },
            {
                "type": "paragraph",
                "children": [
                    {"text": "Monday to Friday, "},
                    {"text": "9 to 5", "bold": True},
                ],
            },
        ],
        "seo": {
            "title": "Shop",
            "description": "The best shop in town",
            "image": None,
            "twitter_card": "summary",
        },
        "price": 12.5,
        "published_at": "2024-05-01T10:00:00Z",
    },
]


async def run(
    value: Any,
    from_locale: str,
    to_locale: str,
    fmt: TranslationFormat,
) -> Any:
    """Translate a value and put its identifiers back."""
    settings = get_settings()
    options = TranslationOptions.from_settings(from_locale, to_locale, fmt, settings)
    if options.translation_service is None:
        options = options.model_copy(update={"translation_service": TranslationService.MOCK})

    result = await translate_document(value, options, settings=settings)
    return restore_identifiers(result.original, result.translated, result.redacted_keys)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Translate a field value between locales.")
    parser.add_argument("path", nargs="?", help="JSON file holding the field value")
    parser.add_argument("--from", dest="from_locale", default="en")
    parser.add_argument("--to", dest="to_locale", default="it")
    parser.add_argument(
        "--format",
        default=TranslationFormat.RICH_TEXT.value,
        choices=[fmt.value for fmt in TranslationFormat],
    )
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.path:
        value = json.loads(Path(args.path).read_text(encoding="utf-8"))
    else:
        value = SAMPLE_RICH_TEXT

    translated = asyncio.run(
        run(value, args.from_locale, args.to_locale, TranslationFormat(args.format))
    )
    print(json.dumps(translated, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
