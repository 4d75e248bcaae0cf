"""File-based language loaders.

Each language lives in its own file named ``<language id>.<extension>`` inside
a container directory. Nested mappings are flattened into dot-joined keys:

    command:
      reload:
        done: "Reloaded"

loads as the single message ``command.reload.done``.
"""

import json
import shutil
from abc import abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, TypeVar

import yaml

import structlog
from localization.exceptions import LanguageLoadError
from localization.loader import LanguageLoader
from localization.models import Language

M = TypeVar("M")

logger = structlog.get_logger()


class LanguageFileLoader(LanguageLoader[M]):
    """Abstract base for loaders reading one file per language.

    Attributes:
        container: Directory holding the language files.
        defaults_dir: Optional directory of bundled language files. Files not
            yet present in the container are copied there before loading.
        extensions: File extensions accepted by this loader.
    """

    extensions: Tuple[str, ...] = ()

    def __init__(self, container: Path, defaults_dir: Optional[Path] = None):
        """Initialize the loader.

        Args:
            container: Directory holding the language files.
            defaults_dir: Optional directory of bundled default files.
        """
        self.container = Path(container)
        self.defaults_dir = Path(defaults_dir) if defaults_dir is not None else None

    @abstractmethod
    def parse(self, file: Path) -> Any:
        """Parse a language file into raw data.

        Args:
            file: Path of the language file.

        Returns:
            Parsed data, expected to be a mapping or None for an empty file.

        Raises:
            LanguageLoadError: If the file cannot be parsed.
        """
        pass

    def load(self) -> Dict[str, Language[M]]:
        """Load every valid language file in the container.

        Returns:
            Dict mapping language id to Language.

        Raises:
            LanguageLoadError: If the container is missing or a file cannot
                be read or holds no language data.
        """
        self.create_defaults()

        if not self.container.is_dir():
            raise LanguageLoadError(
                f"Languages directory not found: {self.container}"
            )

        result: Dict[str, Language[M]] = {}
        for file in sorted(self.container.iterdir()):
            if not file.is_file() or not self.is_valid(file):
                continue

            language = self.load_file(file)
            if language is None:
                raise LanguageLoadError(
                    f"Failed to load language data for: {file.name}"
                )
            result[language.id] = language

        logger.info(
            "loaded_language_files",
            container=str(self.container),
            languages=sorted(result.keys()),
        )
        return result

    def load_file(self, file: Path) -> Optional[Language[M]]:
        """Load a single language file.

        Args:
            file: Path of the language file.

        Returns:
            Language, or None if the file holds no data.

        Raises:
            LanguageLoadError: If the file is missing, unreadable or not a
                mapping.
        """
        if file is None or not file.exists():
            raise LanguageLoadError(f"File is None or does not exist: {file}")

        data = self.parse(file)
        if data is None:
            return None

        if not isinstance(data, Mapping):
            logger.error("invalid_language_format", file=str(file), expected="dict")
            raise LanguageLoadError(
                f"Language file must contain a mapping: {file.name}"
            )

        messages: Dict[str, M] = {}
        self.flatten_messages(data, "", messages)
        return Language(self.resolve_language_name(file.name), messages)

    def is_valid(self, file: Path) -> bool:
        """Check whether a file is handled by this loader."""
        return file.name.endswith(self.extensions)

    def resolve_language_name(self, name: str) -> str:
        """Strip the last extension from a file name (``en.yml`` -> ``en``)."""
        return name.rsplit(".", 1)[0] if "." in name else name

    def map_object(self, value: Any) -> M:
        """Convert a raw parsed value into the message payload type.

        Identity by default; platforms with rich message payloads override it.
        """
        return value

    def key_to_text(self, key: Any) -> str:
        """Convert a parsed mapping key to its message key segment.

        YAML parses keys such as ``on``, ``off``, ``yes`` and ``no`` as booleans
        and ``~`` as null; they become ``true``, ``false`` and ``null``.
        """
        if isinstance(key, bool):
            return "true" if key else "false"
        if key is None:
            return "null"
        return str(key)

    def flatten_messages(
        self,
        current: Mapping[str, Any],
        parent_key: str,
        flattened: Dict[str, M],
    ) -> None:
        """Flatten nested mappings into dot-joined keys.

        Args:
            current: Mapping being flattened.
            parent_key: Key prefix of the mapping ("" at the top level).
            flattened: Output dict receiving the flattened messages.
        """
        for key, value in current.items():
            name = self.key_to_text(key)
            new_key = f"{parent_key}.{name}" if parent_key else name
            if isinstance(value, Mapping):
                self.flatten_messages(value, new_key, flattened)
            else:
                flattened[new_key] = self.map_object(value)

    def create_defaults(self) -> None:
        """Copy bundled default files into the container.

        Existing files in the container are never overwritten.

        Raises:
            LanguageLoadError: If the defaults directory does not exist or a
                file cannot be copied.
        """
        if self.defaults_dir is None:
            return

        if not self.defaults_dir.is_dir():
            raise LanguageLoadError(
                f"Default languages directory not found: {self.defaults_dir}"
            )

        try:
            self.container.mkdir(parents=True, exist_ok=True)
            for source in sorted(self.defaults_dir.iterdir()):
                target = self.container / source.name
                if source.is_file() and self.is_valid(source) and not target.exists():
                    shutil.copyfile(source, target)
                    logger.info("created_default_language_file", file=str(target))
        except OSError as e:
            raise LanguageLoadError(
                f"Failed to create default language files in {self.container}: {e}"
            ) from e


class JsonLanguageFileLoader(LanguageFileLoader[M]):
    """Loader for ``<language>.json`` files."""

    extensions = (".json",)

    def parse(self, file: Path) -> Any:
        try:
            with open(file, "r", encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("json_parse_error", file=str(file), error=str(e))
            raise LanguageLoadError(f"Failed to parse {file}: {e}") from e
        except OSError as e:
            raise LanguageLoadError(f"Failed to read {file}: {e}") from e


class YamlLanguageFileLoader(LanguageFileLoader[M]):
    """Loader for ``<language>.yml`` and ``<language>.yaml`` files."""

    extensions = (".yml", ".yaml")

    def parse(self, file: Path) -> Any:
        try:
            with open(file, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            logger.error("yaml_parse_error", file=str(file), error=str(e))
            raise LanguageLoadError(f"Failed to parse {file}: {e}") from e
        except OSError as e:
            raise LanguageLoadError(f"Failed to read {file}: {e}") from e
