"""Feature-level fixtures for i18n system tests.

Provides temporary translation trees and translators for locale resolution
and merge scenarios.
"""

import pytest

from infrastructure.i18n import Translator
from tests.factories.i18n import make_i18n_settings, write_translation_file


@pytest.fixture
def lang_dir(tmp_path):
    """Language directory under the temporary root."""
    path = tmp_path / "locales"
    path.mkdir()
    return path


@pytest.fixture
def temp_translations_dir(tmp_path, lang_dir):
    """Create a temporary translation tree and return its root.

    Returns a directory structure like:
    - locales/en.yml
    - locales/en/us.yml
    - locales/en/us/welcome.yml
    - locales/es/common.yml
    - locales/zh.yml
    - locales/zh/cn.yml
    - locales/zh/cn/var.yml
    """
    write_translation_file(
        lang_dir,
        "en.yml",
        {"hello": "Hello", "goodbye": "Goodbye", "color": "Colour"},
    )
    write_translation_file(lang_dir, "en/us.yml", {"color": "Color"})
    write_translation_file(lang_dir, "en/us/welcome.yml", {"hello": "Hi :user"})
    write_translation_file(lang_dir, "es/common.yml", {"greeting": "Hola"})
    write_translation_file(
        lang_dir,
        "zh.yml",
        {"hello": "你好", "level": "zh", "zh_only": "zh"},
    )
    write_translation_file(
        lang_dir, "zh/cn.yml", {"level": "zh-cn", "cn_only": "zh-cn"}
    )
    write_translation_file(lang_dir, "zh/cn/var.yml", {"level": "zh-cn-var"})
    return tmp_path


@pytest.fixture
def i18n_settings(temp_translations_dir):
    """I18nSettings pointing at the temporary translation tree."""
    return make_i18n_settings(temp_translations_dir)


@pytest.fixture
def translator(i18n_settings):
    """Translator over the temporary translation tree."""
    return Translator(i18n_settings)
