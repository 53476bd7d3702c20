"""
Codecs - parse/serialize pairs for formats embedded in field values.

Each codec module exposes parse(), serialize(), ARRAY_KEY (the key of the
ordered node list) and TEXT_KEY (the key holding translatable text).
"""

from cms_translate.codecs import html, markdown

__all__ = ["html", "markdown"]
