"""Translation file reading and discovery.

Defines the contract for reading translation files, a YAML-based reader, and
the search-directory discovery used by the locale-chain loader.
"""

from abc import ABC, abstractmethod
import os
from pathlib import Path
from typing import Dict, List, Optional

import yaml

import structlog
from core.config import I18nSettings
from infrastructure.i18n.models import locale_parts

logger = structlog.get_logger()


def is_path_segment(segment: str) -> bool:
    """Check that a locale part or namespace stays a single path segment.

    Empty names, "." and "..", absolute paths and anything holding a path
    separator would resolve outside the search directory.
    """
    if segment in ("", ".", ".."):
        return False
    if os.path.isabs(segment):
        return False
    separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())
    return not any(sep in segment for sep in separators)


class TranslationLoader(ABC):
    """Abstract base for translation file readers.

    Implementations define how a single translation file is parsed into a
    flat {key: message} mapping.
    """

    @abstractmethod
    def read(self, path: Path) -> Optional[Dict[str, str]]:
        """Read one translation file.

        Args:
            path: Absolute path of the file.

        Returns:
            Mapping of key to message, or None if the file cannot be read.
        """
        pass


class YAMLTranslationLoader(TranslationLoader):
    """Reader for YAML translation files.

    Expects a flat mapping per file:

        hello: "Hi :user"
        goodbye: "Bye"

    JSON files parse as well, since JSON is a subset of YAML.
    """

    def read(self, path: Path) -> Optional[Dict[str, str]]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("translation_file_unreadable", file=str(path), error=str(e))
            return None
        except yaml.YAMLError as e:
            logger.warning("yaml_parse_error", file=str(path), error=str(e))
            return None

        if data is None:
            return {}

        if not isinstance(data, dict):
            logger.warning("invalid_yaml_format", file=str(path), expected="dict")
            return None

        messages: Dict[str, str] = {}
        for key, message in data.items():
            if not isinstance(message, str):
                logger.warning(
                    "invalid_message_format",
                    file=str(path),
                    key=str(key),
                    expected="str",
                )
                continue
            messages[str(key)] = message
        return messages


class FileDiscovery:
    """Finds translation files for one locale-chain level.

    Search directories are held in precedence order, highest first: the extra
    search paths, then root_dir/lang_dir. Directories are consulted lowest
    precedence first, so the returned list ends with the file that should win
    when the batch is merged.

    Attributes:
        settings: Live I18nSettings; changes are picked up on the next call.
    """

    def __init__(self, settings: I18nSettings):
        self.settings = settings

    @property
    def search_directories(self) -> List[Path]:
        """Search directories, highest precedence first."""
        base = Path(self.settings.root_dir or "") / (self.settings.lang_dir or "")
        return [Path(p) for p in self.settings.search_paths] + [base]

    def relative_path(self, parts: List[str]) -> Path:
        """Build the relative file path for a list of path parts."""
        return Path(*parts[:-1], parts[-1] + self.settings.file_extension)

    def find(self, locale: str, namespace: Optional[str] = None) -> List[Path]:
        """Return existing files for a chain level across all directories.

        If a directory has no file for the level, the fallback locale is
        substituted for the language when the level is the bare language
        (e.g. "fr" -> "en"). Each directory contributes at most one file.

        A locale part or namespace that is not a plain path segment finds
        nothing, so files outside the search directories are never read.

        Args:
            locale: Chain level locale (e.g., "fr-ca" or "fr").
            namespace: Optional table namespace, used as the final path segment.

        Returns:
            Existing file paths, lowest precedence first. Empty if none exist.
        """
        parts = locale_parts(locale)
        suffix = [namespace] if namespace is not None else []
        if not parts or not all(is_path_segment(p) for p in parts + suffix):
            logger.debug(
                "rejected_translation_path", locale=locale, namespace=namespace
            )
            return []
        relative = self.relative_path(parts + suffix)

        fallback_relative = None
        fallback_parts = locale_parts(self.settings.fallback_locale)
        if (
            len(parts) == 1
            and fallback_parts
            and fallback_parts != parts
            and all(is_path_segment(p) for p in fallback_parts)
        ):
            fallback_relative = self.relative_path(fallback_parts + suffix)

        found: List[Path] = []
        for directory in reversed(self.search_directories):
            candidate = directory / relative
            if candidate.is_file():
                found.append(candidate)
                continue
            if fallback_relative is not None:
                fallback = directory / fallback_relative
                if fallback.is_file():
                    logger.debug(
                        "using_fallback_translation_file",
                        locale=locale,
                        fallback_locale=self.settings.fallback_locale,
                        file=str(fallback),
                    )
                    found.append(fallback)
        return found
