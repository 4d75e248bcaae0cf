"""Feature-level fixtures for localization tests.

Provides language file directories and receiver data files for loader and
factory scenarios.
"""

import json

import pytest
import yaml


@pytest.fixture
def yaml_languages_dir(tmp_path):
    """Create a directory with YAML language files.

    Returns a directory structure like:
    - en.yml
    - fr.yaml
    - notes.txt (ignored by the loaders)
    """
    languages_dir = tmp_path / "languages"
    languages_dir.mkdir()

    en = {
        "greeting": "Hello ${1}!",
        "command": {
            "reload": {"done": "Reloaded ${1} languages"},
            "usage": "Usage: /${1} ${2+}",
        },
        "only_english": "English only",
    }
    with open(languages_dir / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en, f)

    fr = {
        "greeting": "Bonjour ${1} !",
        "command": {"reload": {"done": "${1} langues rechargées"}},
    }
    with open(languages_dir / "fr.yaml", "w", encoding="utf-8") as f:
        yaml.dump(fr, f, allow_unicode=True)

    (languages_dir / "notes.txt").write_text("not a language", encoding="utf-8")

    return languages_dir


@pytest.fixture
def json_languages_dir(tmp_path):
    """Create a directory with JSON language files (en.json, de.json)."""
    languages_dir = tmp_path / "json_languages"
    languages_dir.mkdir()

    with open(languages_dir / "en.json", "w", encoding="utf-8") as f:
        json.dump({"a": {"b": "x"}, "greeting": "Hello ${1}!"}, f)

    with open(languages_dir / "de.json", "w", encoding="utf-8") as f:
        json.dump({"greeting": "Hallo ${1}!"}, f)

    return languages_dir


@pytest.fixture
def defaults_dir(tmp_path):
    """Directory of bundled default language files."""
    bundled = tmp_path / "bundled"
    bundled.mkdir()
    with open(bundled / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump({"greeting": "Default hello"}, f)
    with open(bundled / "es.yml", "w", encoding="utf-8") as f:
        yaml.dump({"greeting": "Hola ${1}"}, f)
    return bundled
