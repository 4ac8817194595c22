"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from functools import lru_cache
from typing import Dict, Optional

from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.translator import Translator


class TranslationService:
    """Class-based translation service.

    Wraps the Translator instance with a service interface to support
    dependency injection and easier testing with mocks.

    This is a thin facade - all actual work is delegated to the underlying
    Translator instance created by the factory.

    Usage:
        service = get_translation_service()
        greeting = service.translate("welcome.hello", {":user": "Sam"})
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, creates default via factory.
        """
        self._translator = translator or create_translator()

    def translate(
        self,
        key: str,
        replacements: Optional[Dict[str, str]] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Translate a key and substitute placeholders.

        Args:
            key: Lookup key (e.g., "welcome.hello").
            replacements: Placeholder token to replacement value.
            locale: Target locale (default: the translator's locale).

        Returns:
            Translated string with placeholders replaced.
        """
        return self._translator.translate(key, replacements, locale)

    def get(self, key: str, locale: Optional[str] = None) -> str:
        return self._translator.get(key, locale)

    def has(self, key: str, locale: Optional[str] = None) -> bool:
        return self._translator.has(key, locale)

    def locale(self, new_locale: Optional[str] = None) -> str:
        return self._translator.locale(new_locale)

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance.

        Returns:
            The underlying Translator instance
        """
        return self._translator


@lru_cache
def get_translation_service() -> TranslationService:
    """Get application-scoped translation service singleton.

    Returns:
        TranslationService: Cached service configured from the environment.
    """
    return TranslationService()
