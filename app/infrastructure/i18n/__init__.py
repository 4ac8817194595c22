"""i18n system - locale resolution and translation lookup.

Resolves message keys to locale-specific strings from hierarchical YAML files,
degrading the requested locale ("zh-cn" -> "zh") and falling back to a
configured locale when a language has no file.

Main components:
- models: normalize_locale, locale_chain, TranslationKey, TranslationTable
- loader: TranslationLoader, YAMLTranslationLoader and FileDiscovery
- translator: Translator with locale-chain merging and per-locale cache
- factory: create_translator
- service: TranslationService and get_translation_service
- helpers: translate() convenience function
"""

from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.helpers import translate
from infrastructure.i18n.interpolation import replace_placeholders
from infrastructure.i18n.loader import (
    FileDiscovery,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import (
    TranslationKey,
    TranslationTable,
    locale_chain,
    normalize_locale,
)
from infrastructure.i18n.service import TranslationService, get_translation_service
from infrastructure.i18n.translator import Translator

__all__ = [
    "normalize_locale",
    "locale_chain",
    "TranslationKey",
    "TranslationTable",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "FileDiscovery",
    "Translator",
    "create_translator",
    "TranslationService",
    "get_translation_service",
    "translate",
    "replace_placeholders",
]
