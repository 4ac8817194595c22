"""Shared pytest fixtures for the translation resolver test suite."""

import pytest

from infrastructure.i18n.service import get_translation_service


@pytest.fixture(autouse=True)
def reset_translation_service():
    """Drop the cached application translation service around each test."""
    get_translation_service.cache_clear()
    yield
    get_translation_service.cache_clear()


@pytest.fixture(autouse=True)
def isolate_i18n_environment(monkeypatch):
    """Keep I18N_* variables from the host environment out of tests."""
    for name in (
        "I18N_ROOT_DIR",
        "I18N_LANG_DIR",
        "I18N_FILE_EXTENSION",
        "I18N_DEFAULT_LOCALE",
        "I18N_SOURCE_LOCALE",
        "I18N_FALLBACK_LOCALE",
        "I18N_SEARCH_PATHS",
        "I18N_MAX_CACHED_TABLES",
    ):
        monkeypatch.delenv(name, raising=False)
