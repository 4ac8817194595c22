"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators with default
configurations suitable for the application.
"""

from typing import Any, Optional

import structlog
from core.config import I18nSettings
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.translator import Translator

logger = structlog.get_logger()


def create_translator(
    settings: Optional[I18nSettings] = None,
    loader: Optional[TranslationLoader] = None,
    **overrides: Any,
) -> Translator:
    """Create and configure a Translator instance.

    Settings are read from the environment unless given; keyword overrides use
    I18nSettings field names and are validated like environment values.

    Args:
        settings: Base configuration (default: loaded from environment).
        loader: File reader (default: YAMLTranslationLoader).
        **overrides: I18nSettings fields to replace (e.g. root_dir, fallback_locale).

    Returns:
        Translator: Configured translator instance

    Raises:
        TypeError: If an override does not name an I18nSettings field.

    Usage:
        # Use defaults (bundled app/locales, en-us)
        translator = create_translator()

        # Custom translations directory and locale
        translator = create_translator(root_dir="/srv/app", default_locale="es-es")
    """
    unknown = sorted(set(overrides) - set(I18nSettings.model_fields))
    if unknown:
        raise TypeError(f"Unknown translator settings: {', '.join(unknown)}")

    if settings is None:
        settings = I18nSettings(**overrides)
    elif overrides:
        settings = I18nSettings(**{**settings.model_dump(), **overrides})

    translator = Translator(settings=settings, loader=loader)
    logger.info(
        "translator_created",
        root_dir=translator.get_root_directory(),
        lang_dir=translator.get_lang_dir(),
        locale=translator.locale(),
    )
    return translator
