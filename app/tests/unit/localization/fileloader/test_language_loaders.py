"""Tests for localization.fileloader.language module."""

import json

import pytest
import yaml

from localization import LanguageLoadError
from localization.fileloader import JsonLanguageFileLoader, YamlLanguageFileLoader


class TestYamlLanguageFileLoader:
    """Tests for YamlLanguageFileLoader."""

    def test_load_languages(self, yaml_languages_dir):
        languages = YamlLanguageFileLoader(yaml_languages_dir).load()

        assert set(languages) == {"en", "fr"}
        assert languages["fr"].id == "fr"
        assert languages["fr"].get_message("greeting") == "Bonjour ${1} !"

    def test_nested_keys_are_flattened(self, yaml_languages_dir):
        en = YamlLanguageFileLoader(yaml_languages_dir).load()["en"]

        assert en.get_message("command.reload.done") == "Reloaded ${1} languages"
        assert en.get_message("command.usage") == "Usage: /${1} ${2+}"
        assert not en.has_message("command")

    def test_unicode_messages(self, yaml_languages_dir):
        fr = YamlLanguageFileLoader(yaml_languages_dir).load()["fr"]
        assert fr.get_message("command.reload.done") == "${1} langues rechargées"

    def test_ignores_other_files(self, yaml_languages_dir):
        languages = YamlLanguageFileLoader(yaml_languages_dir).load()
        assert "notes" not in languages

    def test_empty_file_raises_error(self, yaml_languages_dir):
        (yaml_languages_dir / "it.yml").write_text("", encoding="utf-8")

        with pytest.raises(LanguageLoadError, match="Failed to load language data for: it.yml"):
            YamlLanguageFileLoader(yaml_languages_dir).load()

    def test_invalid_yaml_raises_error(self, yaml_languages_dir):
        (yaml_languages_dir / "it.yml").write_text("greeting: [unclosed", encoding="utf-8")

        with pytest.raises(LanguageLoadError):
            YamlLanguageFileLoader(yaml_languages_dir).load()

    def test_non_mapping_raises_error(self, yaml_languages_dir):
        (yaml_languages_dir / "it.yml").write_text("- one\n- two\n", encoding="utf-8")

        with pytest.raises(LanguageLoadError, match="must contain a mapping"):
            YamlLanguageFileLoader(yaml_languages_dir).load()

    def test_missing_container_raises_error(self, tmp_path):
        with pytest.raises(LanguageLoadError, match="not found"):
            YamlLanguageFileLoader(tmp_path / "missing").load()

    def test_empty_container(self, tmp_path):
        assert YamlLanguageFileLoader(tmp_path).load() == {}

    def test_load_file_missing_raises_error(self, tmp_path):
        with pytest.raises(LanguageLoadError):
            YamlLanguageFileLoader(tmp_path).load_file(tmp_path / "en.yml")


class TestJsonLanguageFileLoader:
    """Tests for JsonLanguageFileLoader."""

    def test_load_languages(self, json_languages_dir):
        languages = JsonLanguageFileLoader(json_languages_dir).load()

        assert set(languages) == {"en", "de"}
        assert languages["en"].get_message("a.b") == "x"
        assert languages["de"].get_message("greeting") == "Hallo ${1}!"

    def test_reload_replaces_language(self, json_languages_dir):
        loader = JsonLanguageFileLoader(json_languages_dir)
        first = loader.load()

        with open(json_languages_dir / "en.json", "w", encoding="utf-8") as f:
            json.dump({"greeting": "Hi"}, f)
        second = loader.load()

        assert first["en"].get_message("a.b") == "x"
        assert second["en"].messages == {"greeting": "Hi"}

    def test_invalid_json_raises_error(self, json_languages_dir):
        (json_languages_dir / "it.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(LanguageLoadError):
            JsonLanguageFileLoader(json_languages_dir).load()

    def test_ignores_yaml_files(self, json_languages_dir):
        (json_languages_dir / "fr.yml").write_text("greeting: Bonjour", encoding="utf-8")
        assert "fr" not in JsonLanguageFileLoader(json_languages_dir).load()


class TestLanguageFileLoaderHelpers:
    """Tests for shared LanguageFileLoader behavior."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("en.yml", "en"),
            ("en_US.yaml", "en_US"),
            ("pt.br.json", "pt.br"),
            ("plain", "plain"),
        ],
    )
    def test_resolve_language_name(self, tmp_path, name, expected):
        assert YamlLanguageFileLoader(tmp_path).resolve_language_name(name) == expected

    def test_is_valid(self, tmp_path):
        loader = YamlLanguageFileLoader(tmp_path)
        assert loader.is_valid(tmp_path / "en.yml")
        assert loader.is_valid(tmp_path / "en.yaml")
        assert not loader.is_valid(tmp_path / "en.json")

    def test_map_object_override(self, yaml_languages_dir):
        class UpperLoader(YamlLanguageFileLoader):
            def map_object(self, value):
                return str(value).upper()

        en = UpperLoader(yaml_languages_dir).load()["en"]

        assert en.get_message("greeting") == "HELLO ${1}!"
        assert en.get_message("command.reload.done") == "RELOADED ${1} LANGUAGES"

    def test_non_string_values_kept(self, tmp_path):
        (tmp_path / "en.yml").write_text("limits:\n  max: 5\n", encoding="utf-8")
        en = YamlLanguageFileLoader(tmp_path).load()["en"]
        assert en.get_message("limits.max") == 5


class TestCreateDefaults:
    """Tests for copying bundled default language files."""

    def test_copies_defaults_into_new_container(self, tmp_path, defaults_dir):
        container = tmp_path / "languages"

        languages = YamlLanguageFileLoader(container, defaults_dir=defaults_dir).load()

        assert set(languages) == {"en", "es"}
        assert (container / "es.yml").exists()

    def test_does_not_overwrite_existing_files(self, yaml_languages_dir, defaults_dir):
        languages = YamlLanguageFileLoader(
            yaml_languages_dir, defaults_dir=defaults_dir
        ).load()

        assert languages["en"].get_message("greeting") == "Hello ${1}!"
        assert languages["es"].get_message("greeting") == "Hola ${1}"
        assert set(languages) == {"en", "es", "fr"}

    def test_skips_files_of_other_formats(self, tmp_path, defaults_dir):
        (defaults_dir / "de.json").write_text('{"greeting": "Hallo"}', encoding="utf-8")
        container = tmp_path / "languages"

        YamlLanguageFileLoader(container, defaults_dir=defaults_dir).create_defaults()

        assert not (container / "de.json").exists()

    def test_missing_defaults_dir_raises_error(self, tmp_path):
        loader = YamlLanguageFileLoader(tmp_path, defaults_dir=tmp_path / "missing")

        with pytest.raises(LanguageLoadError, match="Default languages directory"):
            loader.load()

    def test_defaults_parsed_by_loader(self, tmp_path, defaults_dir):
        container = tmp_path / "languages"
        YamlLanguageFileLoader(container, defaults_dir=defaults_dir).create_defaults()

        with open(container / "en.yml", encoding="utf-8") as f:
            assert yaml.safe_load(f) == {"greeting": "Default hello"}


class TestLanguageFileEncoding:
    """Tests for language files that are not valid UTF-8."""

    @pytest.mark.parametrize(
        "loader_class, file_name",
        [
            (JsonLanguageFileLoader, "en.json"),
            (YamlLanguageFileLoader, "en.yml"),
        ],
    )
    def test_invalid_utf8_raises_language_load_error(self, tmp_path, loader_class, file_name):
        (tmp_path / file_name).write_bytes(b'{"greeting": "caf\xe9"}')

        with pytest.raises(LanguageLoadError) as exc_info:
            loader_class(tmp_path).load()

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


class TestYamlBooleanKeys:
    """Tests for YAML keys parsed as booleans or null."""

    def test_boolean_keys_are_lower_case(self, tmp_path):
        (tmp_path / "en.yml").write_text(
            "toggle:\n  on: Enabled\n  off: Disabled\nanswer:\n  yes: Yes\n  no: No\n",
            encoding="utf-8",
        )

        en = YamlLanguageFileLoader(tmp_path).load()["en"]

        assert en.get_message("toggle.true") == "Enabled"
        assert en.get_message("toggle.false") == "Disabled"
        assert en.get_message("answer.true") is True
        assert not en.has_message("toggle.True")

    def test_null_key(self, tmp_path):
        (tmp_path / "en.yml").write_text("~: Nothing\n", encoding="utf-8")

        en = YamlLanguageFileLoader(tmp_path).load()["en"]

        assert en.get_message("null") == "Nothing"

    @pytest.mark.parametrize("key, expected", [(True, "true"), (False, "false"), (None, "null"), (3, "3")])
    def test_key_to_text(self, tmp_path, key, expected):
        assert YamlLanguageFileLoader(tmp_path).key_to_text(key) == expected
