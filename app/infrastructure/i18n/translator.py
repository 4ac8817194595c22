"""Translation service for resolving message keys to locale-specific strings.

Core component for i18n: degrades the requested locale part by part, merges
every matching translation file and caches the merged table per locale.
"""

from pathlib import Path
from typing import Dict, List, Mapping, Optional

from core.config import I18nSettings
from core.logging import get_module_logger
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
    table_locale,
)

logger = get_module_logger()


class Translator:
    """Resolves translation keys with locale-chain fallback and caching.

    Each instance owns a copy of its configuration and its own cache, so
    several translators with differing settings can coexist in one process.

    Lookups never raise: a missing file degrades coverage, a missing key
    resolves to the key itself.

    Attributes:
        settings: I18nSettings for this translator.
        loader: TranslationLoader used to read individual files.
        discovery: FileDiscovery over the configured search directories.
    """

    def __init__(
        self,
        settings: Optional[I18nSettings] = None,
        loader: Optional[TranslationLoader] = None,
    ):
        """Initialize Translator.

        Args:
            settings: Configuration to copy (default: loaded from environment).
            loader: File reader (default: YAMLTranslationLoader).

        Raises:
            TypeError: If loader is not a TranslationLoader.
        """
        if loader is not None and not isinstance(loader, TranslationLoader):
            raise TypeError(
                f"loader must be a TranslationLoader, got {type(loader).__name__}"
            )
        base = settings if settings is not None else I18nSettings()
        self.settings = base.model_copy(deep=True)
        self.loader = loader or YAMLTranslationLoader()
        self.discovery = FileDiscovery(self.settings)
        self._cache: Dict[str, TranslationTable] = {}
        logger.info(
            "initialized_translator",
            locale=self.settings.default_locale,
            fallback_locale=self.settings.fallback_locale,
            lang_path=str(Path(self.settings.root_dir) / self.settings.lang_dir),
        )

    def locale(self, new_locale: Optional[str] = None) -> str:
        """Get and optionally set the target locale.

        Args:
            new_locale: New target locale; normalized before it is stored.

        Returns:
            The current target locale.
        """
        if new_locale:
            self.settings.default_locale = normalize_locale(new_locale)
        return self.settings.default_locale

    def get(self, key: str, locale: Optional[str] = None) -> str:
        """Return the translation for key, or key itself when there is none.

        "welcome.hello" is looked up as "hello" in the "<locale>-welcome" table.

        Args:
            key: Lookup key.
            locale: Target locale (default: the configured locale).

        Returns:
            Translated string, or the original key.
        """
        locale = normalize_locale(locale) if locale else self.locale()
        translation_key = TranslationKey.from_string(key)
        table = self.load(locale, translation_key.namespace)

        message = table.get_message(translation_key.message_key)
        if message is None:
            logger.debug("translation_missing", key=key, table=table.locale)
            return key
        return message

    def translate(
        self,
        key: str,
        replacements: Optional[Mapping[str, str]] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Translate a key and substitute placeholders.

        When a source locale is configured and equals the target locale the
        key is already written in that language and is not looked up.

        Args:
            key: Lookup key or source-language text.
            replacements: Placeholder token to replacement value.
            locale: Target locale (default: the configured locale).

        Returns:
            Translated string with placeholders replaced.
        """
        target = normalize_locale(locale) if locale else self.locale()
        if self.settings.source_locale and target == self.settings.source_locale:
            message = key
        else:
            message = self.get(key, target)
        return replace_placeholders(message, replacements)

    def has(self, key: str, locale: Optional[str] = None) -> bool:
        """Check whether key resolves to something other than itself.

        A translation that maps a key to the same text is reported as missing.
        """
        return self.get(key, locale) != key

    def load(self, locale: str, namespace: Optional[str] = None) -> TranslationTable:
        """Return the merged translation table for a locale.

        Every level of the locale chain contributes; a key from a more specific
        level is never overridden by a less specific one. The table is cached
        under "<locale>" or "<locale>-<namespace>".

        Args:
            locale: Locale to load (e.g., "zh-cn").
            namespace: Optional table namespace (e.g., "welcome").

        Returns:
            Merged TranslationTable, possibly empty.
        """
        locale = normalize_locale(locale)
        cache_key = table_locale(locale, namespace)

        cached = self._cache.get(cache_key)
        if cached is not None:
            logger.debug("translation_cache_hit", table=cache_key)
            return cached

        table = TranslationTable(locale=cache_key)
        for level in locale_chain(locale):
            files = self.discovery.find(level, namespace)
            if files:
                self._merge_files(files, table)
        table.mark_loaded()

        self._store(table)
        logger.info(
            "loaded_translation_table",
            table=cache_key,
            file_count=len(table.sources),
            message_count=len(table.messages),
        )
        return table

    def _merge_files(self, files: List[Path], table: TranslationTable) -> None:
        """Merge one discovery batch into the accumulating table.

        Within the batch later files override earlier ones; the batch as a
        whole never overrides keys already in the table. Unreadable files are
        skipped.
        """
        batch: Dict[str, str] = {}
        for path in files:
            messages = self.loader.read(path)
            if messages is None:
                continue
            batch.update(messages)
            table.sources.append(path)
        table.merge_batch(batch)

    def _store(self, table: TranslationTable) -> None:
        limit = self.settings.max_cached_tables
        if limit is not None:
            while len(self._cache) >= limit:
                evicted = next(iter(self._cache))
                del self._cache[evicted]
                logger.debug("evicted_translation_table", table=evicted)
        self._cache[table.locale] = table

    def get_table(
        self, locale: str, namespace: Optional[str] = None
    ) -> Optional[TranslationTable]:
        """Get a cached table without loading it.

        Returns:
            TranslationTable or None if not cached.
        """
        return self._cache.get(table_locale(normalize_locale(locale), namespace))

    def get_cached_locales(self) -> List[str]:
        """Table locales currently cached, oldest first."""
        return list(self._cache.keys())

    def clear_cache(self) -> None:
        """Drop every cached table.

        Tables are never invalidated otherwise; call this after changing the
        file configuration of a translator that has already served lookups.
        """
        self._cache.clear()
        logger.info("cleared_translation_cache")

    def get_fallback(self) -> str:
        return self.settings.fallback_locale

    def set_fallback(self, fallback: str) -> "Translator":
        self.settings.fallback_locale = normalize_locale(fallback)
        return self

    def get_root_directory(self) -> str:
        return self.settings.root_dir

    def set_root_directory(self, directory: str) -> "Translator":
        self.settings.root_dir = str(directory)
        return self

    def get_lang_dir(self) -> str:
        return self.settings.lang_dir

    def set_lang_dir(self, directory: str) -> "Translator":
        self.settings.lang_dir = str(directory)
        return self

    def get_file_extension(self) -> str:
        return self.settings.file_extension

    def set_file_extension(self, extension: str) -> "Translator":
        """Set the translation file extension; a leading dot is added if missing."""
        if extension and not extension.startswith("."):
            extension = f".{extension}"
        self.settings.file_extension = extension
        return self

    def get_source_locale(self) -> Optional[str]:
        return self.settings.source_locale

    def set_source_locale(self, source: Optional[str]) -> "Translator":
        self.settings.source_locale = normalize_locale(source) if source else None
        return self

    def add_search_path(self, directory: str) -> "Translator":
        """Register a search directory with precedence over all earlier ones."""
        self.settings.search_paths.insert(0, str(directory))
        return self
