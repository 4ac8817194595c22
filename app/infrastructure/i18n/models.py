"""Translation models for i18n system.

Defines locale helpers and the core data structures for translation tables.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Mapping, Optional

LOCALE_SEPARATOR = "-"
KEY_SEPARATOR = "."


def normalize_locale(locale: str) -> str:
    """Canonicalize a locale string.

    Lower-cases the value and replaces spaces and underscores with hyphens,
    e.g. "EN_us" -> "en-us". Accepts anything; never raises.

    Args:
        locale: Raw locale string.

    Returns:
        Normalized locale tag.
    """
    return locale.replace(" ", LOCALE_SEPARATOR).replace("_", LOCALE_SEPARATOR).lower()


def locale_parts(locale: str) -> List[str]:
    """Split a locale tag into its parts (language, region, variant)."""
    return [part for part in normalize_locale(locale).split(LOCALE_SEPARATOR) if part]


def locale_chain(locale: str) -> List[str]:
    """Degrade a locale tag one part at a time.

    "zh-cn-var" -> ["zh-cn-var", "zh-cn", "zh"]

    Args:
        locale: Locale tag to degrade.

    Returns:
        Locale tags from most to least specific.
    """
    parts = locale_parts(locale)
    return [
        LOCALE_SEPARATOR.join(parts[:size]) for size in range(len(parts), 0, -1)
    ]


def table_locale(locale: str, namespace: Optional[str] = None) -> str:
    """Return the locale string a table is loaded and cached under.

    ("en-us", "welcome") -> "en-us-welcome"; ("en-us", None) -> "en-us"
    An empty namespace (from a key like ".hello") is kept, so it never
    shares the flat table.
    """
    if namespace is None:
        return locale
    return f"{locale}{LOCALE_SEPARATOR}{namespace}"


@dataclass(frozen=True)
class TranslationKey:
    """Represents a lookup key, optionally addressing a namespaced table.

    "welcome.hello" addresses message "hello" in the "welcome" table; a key
    without a separator is looked up in the plain locale table.
    Frozen to ensure immutability and hashability for caching.

    Attributes:
        message_key: Key within the table (e.g., "hello").
        namespace: Sub-table name (e.g., "welcome"), or None for the flat table.
    """

    message_key: str
    namespace: Optional[str] = None

    def __str__(self) -> str:
        if self.namespace is None:
            return self.message_key
        return f"{self.namespace}{KEY_SEPARATOR}{self.message_key}"

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from a lookup string.

        Only the first separator splits; "a.b.c" is namespace "a", key "b.c".
        A leading separator gives an empty namespace, which matches no file.

        Args:
            key_string: Lookup key (e.g., "welcome.hello" or "Hello").

        Returns:
            TranslationKey instance.
        """
        if KEY_SEPARATOR not in key_string:
            return cls(message_key=key_string)
        namespace, message_key = key_string.split(KEY_SEPARATOR, 1)
        return cls(message_key=message_key, namespace=namespace)

    def table_locale(self, locale: str) -> str:
        """Return the locale string the key's table is loaded and cached under."""
        return table_locale(locale, self.namespace)


@dataclass
class TranslationTable:
    """Merged translations for one resolved table locale.

    Attributes:
        locale: Table locale string (e.g., "en-us" or "en-us-welcome").
        messages: Flat dict {key: message_string}.
        sources: Files that contributed, in load order.
        loaded_at: Timestamp (ISO 8601) when the table was built.
    """

    locale: str
    messages: Dict[str, str] = field(default_factory=dict)
    sources: List[Path] = field(default_factory=list)
    loaded_at: Optional[str] = None

    def get_message(self, key: str) -> Optional[str]:
        """Retrieve a message by key, or None if not found."""
        return self.messages.get(key)

    def has_message(self, key: str) -> bool:
        return key in self.messages

    def merge_batch(self, messages: Mapping[str, str]) -> None:
        """Merge a batch of messages without overriding existing keys.

        Entries already in the table came from a more specific locale and
        take precedence.

        Args:
            messages: Messages to merge.
        """
        for key, message in messages.items():
            self.messages.setdefault(key, message)

    def mark_loaded(self) -> None:
        self.loaded_at = datetime.now(timezone.utc).isoformat()
