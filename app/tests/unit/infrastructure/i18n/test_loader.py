"""Tests for infrastructure.i18n.loader module."""

import pytest

from infrastructure.i18n import FileDiscovery, TranslationLoader, YAMLTranslationLoader
from tests.factories.i18n import make_i18n_settings, write_translation_file


class TestYAMLTranslationLoader:
    """Tests for YAMLTranslationLoader."""

    @pytest.fixture
    def loader(self):
        return YAMLTranslationLoader()

    def test_loader_is_translation_loader(self, loader):
        """YAMLTranslationLoader implements the TranslationLoader contract."""
        assert isinstance(loader, TranslationLoader)

    def test_read_flat_mapping(self, loader, tmp_path):
        """read() returns the file's key/message mapping."""
        path = write_translation_file(tmp_path, "en.yml", {"hello": "Hello"})
        assert loader.read(path) == {"hello": "Hello"}

    def test_read_unicode(self, loader, tmp_path):
        """read() decodes UTF-8 content."""
        path = write_translation_file(tmp_path, "fr.yml", {"created": "Créé"})
        assert loader.read(path) == {"created": "Créé"}

    def test_read_json_content(self, loader, tmp_path):
        """read() parses JSON files, since JSON is valid YAML."""
        path = tmp_path / "en.json"
        path.write_text('{"hello": "Hello", "bye": "Bye"}', encoding="utf-8")
        assert loader.read(path) == {"hello": "Hello", "bye": "Bye"}

    def test_read_missing_file_returns_none(self, loader, tmp_path):
        """read() returns None instead of raising for a missing file."""
        assert loader.read(tmp_path / "missing.yml") is None

    def test_read_directory_returns_none(self, loader, tmp_path):
        """read() returns None for a path that cannot be opened as a file."""
        assert loader.read(tmp_path) is None

    def test_read_invalid_yaml_returns_none(self, loader, tmp_path):
        """read() skips files that fail to parse."""
        path = tmp_path / "invalid.yml"
        path.write_text("invalid: yaml: content: [", encoding="utf-8")
        assert loader.read(path) is None

    def test_read_invalid_encoding_returns_none(self, loader, tmp_path):
        """read() skips files that are not valid UTF-8."""
        path = tmp_path / "latin1.yml"
        path.write_bytes(b"hello: \xff\xfe\xfa")
        assert loader.read(path) is None

    def test_read_non_dict_returns_none(self, loader, tmp_path):
        """read() skips YAML content that isn't a mapping."""
        path = tmp_path / "list.yml"
        path.write_text("- item1\n- item2\n", encoding="utf-8")
        assert loader.read(path) is None

    def test_read_empty_file_returns_empty_mapping(self, loader, tmp_path):
        """read() treats an empty file as an empty table."""
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert loader.read(path) == {}

    def test_read_skips_non_string_messages(self, loader, tmp_path):
        """read() drops nested or non-string values and keeps the rest."""
        path = tmp_path / "mixed.yml"
        path.write_text(
            "hello: Hello\ncount: 3\nnested:\n  key: value\n", encoding="utf-8"
        )
        assert loader.read(path) == {"hello": "Hello"}

    def test_read_coerces_keys_to_strings(self, loader, tmp_path):
        """read() converts non-string keys to strings."""
        path = tmp_path / "numbers.yml"
        path.write_text("1: one\n", encoding="utf-8")
        assert loader.read(path) == {"1": "one"}


class TestFileDiscovery:
    """Tests for FileDiscovery."""

    @pytest.fixture
    def discovery(self, i18n_settings):
        return FileDiscovery(i18n_settings)

    def test_find_exact_file(self, discovery, lang_dir):
        """find() returns the file for the exact chain level."""
        assert discovery.find("en-us") == [lang_dir / "en" / "us.yml"]

    def test_find_namespaced_file(self, discovery, lang_dir):
        """find() appends the namespace as the final path segment."""
        assert discovery.find("en-us", "welcome") == [
            lang_dir / "en" / "us" / "welcome.yml"
        ]

    def test_find_nothing_returns_empty(self, discovery):
        """find() returns an empty list when no file exists."""
        assert discovery.find("de-at") == []

    def test_find_empty_locale_returns_empty(self, discovery):
        """find() returns an empty list for an empty locale."""
        assert discovery.find("") == []

    def test_find_uses_fallback_for_missing_language(self, discovery, lang_dir):
        """find() substitutes the fallback locale for a missing language file."""
        assert discovery.find("fr") == [lang_dir / "en.yml"]

    def test_find_fallback_only_at_language_level(self, discovery):
        """Region levels never fall back, so the language file is not shadowed."""
        assert discovery.find("fr-ca") == []

    def test_find_fallback_for_namespace(self, discovery, lang_dir):
        """Fallback substitution keeps the namespace segment."""
        write_translation_file(lang_dir, "en/common.yml", {"greeting": "Hello"})
        assert discovery.find("de", "common") == [lang_dir / "en" / "common.yml"]

    def test_find_prefers_exact_file_over_fallback(self, discovery, lang_dir):
        """A directory with the exact file does not also contribute the fallback."""
        write_translation_file(lang_dir, "fr.yml", {"hello": "Bonjour"})
        assert discovery.find("fr") == [lang_dir / "fr.yml"]

    def test_find_follows_fallback_changes(self, discovery, i18n_settings, lang_dir):
        """Discovery reads the fallback locale from live settings."""
        i18n_settings.fallback_locale = "zh"
        assert discovery.find("fr") == [lang_dir / "zh.yml"]

    def test_find_uses_file_extension(self, discovery, i18n_settings, lang_dir):
        """find() builds paths with the configured extension."""
        (lang_dir / "de.json").write_text('{"hello": "Hallo"}', encoding="utf-8")
        i18n_settings.file_extension = ".json"
        assert discovery.find("de") == [lang_dir / "de.json"]

    def test_search_directories_precedence_order(self, tmp_path):
        """Extra search paths come before root_dir/lang_dir."""
        settings = make_i18n_settings(
            tmp_path, search_paths=[str(tmp_path / "a"), str(tmp_path / "b")]
        )
        discovery = FileDiscovery(settings)
        assert discovery.search_directories == [
            tmp_path / "a",
            tmp_path / "b",
            tmp_path / "locales",
        ]

    def test_find_across_directories_lowest_precedence_first(self, tmp_path):
        """Each directory contributes one file, highest precedence last."""
        base = tmp_path / "locales"
        extra = tmp_path / "extra"
        write_translation_file(base, "en.yml", {"hello": "Hello"})
        write_translation_file(extra, "en.yml", {"hello": "Howdy"})
        settings = make_i18n_settings(tmp_path, search_paths=[str(extra)])

        files = FileDiscovery(settings).find("en")

        assert files == [base / "en.yml", extra / "en.yml"]

    def test_find_mixes_exact_and_fallback_per_directory(self, tmp_path):
        """One directory may contribute the exact file and another a fallback."""
        base = tmp_path / "locales"
        extra = tmp_path / "extra"
        write_translation_file(base, "en.yml", {"hello": "Hello"})
        write_translation_file(extra, "fr.yml", {"hello": "Bonjour"})
        settings = make_i18n_settings(tmp_path, search_paths=[str(extra)])

        files = FileDiscovery(settings).find("fr")

        assert files == [base / "en.yml", extra / "fr.yml"]

    def test_find_ignores_missing_directories(self, tmp_path):
        """A configured directory that does not exist is not an error."""
        settings = make_i18n_settings(
            tmp_path, search_paths=[str(tmp_path / "does-not-exist")]
        )
        assert FileDiscovery(settings).find("en") == []

    def test_find_rejects_absolute_namespace(self, discovery, tmp_path):
        """An absolute namespace never reaches a file outside the search paths."""
        outside = tmp_path / "outside"
        write_translation_file(outside, "secret.yml", {"k": "leaked"})
        assert discovery.find("en", str(outside / "secret")) == []

    @pytest.mark.parametrize("namespace", ["..", ".", "", "us/welcome", "../en"])
    def test_find_rejects_non_segment_namespace(self, discovery, lang_dir, namespace):
        """Namespaces that are not a single path segment find nothing."""
        write_translation_file(lang_dir, "en/us/welcome.yml", {"hello": "Hi"})
        assert discovery.find("en", namespace) == []

    def test_find_rejects_locale_with_separator(self, discovery, tmp_path):
        """A locale part holding a path separator finds nothing."""
        write_translation_file(tmp_path, "escaped.yml", {"k": "leaked"})
        assert discovery.find("../escaped") == []
        assert discovery.find(str(tmp_path / "escaped")) == []
