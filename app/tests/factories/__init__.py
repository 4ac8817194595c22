"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_i18n_settings,
    make_translation_key,
    make_translation_table,
    write_translation_file,
)

__all__ = [
    "make_i18n_settings",
    "make_translation_key",
    "make_translation_table",
    "write_translation_file",
]
