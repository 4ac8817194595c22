"""Convenience entry point for translating with the application translator."""

from typing import Mapping, Optional

from infrastructure.i18n.service import get_translation_service
from infrastructure.i18n.translator import Translator


def translate(
    key: str,
    replacements: Optional[Mapping[str, str]] = None,
    locale: Optional[str] = None,
    translator: Optional[Translator] = None,
) -> str:
    """Translate a key and substitute placeholders.

        translate("welcome.hello", {":user": username})

    Args:
        key: Lookup key (e.g., "welcome.hello").
        replacements: Placeholder token to replacement value.
        locale: Target locale (default: the translator's locale).
        translator: Translator to use (default: the application service's).

    Returns:
        Translated string with placeholders replaced, or the key itself when
        no translation exists.
    """
    translator = translator or get_translation_service().translator
    return translator.translate(key, replacements, locale)
