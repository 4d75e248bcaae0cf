"""File-based receiver language persistence.

Receiver identities are written as strings. ``key_serializer`` converts a
receiver to its string form (``str`` by default) and ``key_parser`` converts
it back (``str`` by default; pass ``uuid.UUID`` for UUID receivers).
"""

import json
from abc import abstractmethod
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, TypeVar

import yaml
from jproperties import Properties

import structlog
from localization.exceptions import ReceiverDataError
from localization.loader import ReceiverDataLoader

R = TypeVar("R")

logger = structlog.get_logger()


class ReceiverDataFileLoader(ReceiverDataLoader[R]):
    """Abstract base for receiver data stored in a single file.

    A missing file loads as an empty mapping.

    Attributes:
        file: Path of the data file.
    """

    def __init__(
        self,
        file: Path,
        key_parser: Optional[Callable[[str], R]] = None,
        key_serializer: Optional[Callable[[R], str]] = None,
    ):
        self.file = Path(file)
        self.key_parser = key_parser or str
        self.key_serializer = key_serializer or str

    @abstractmethod
    def read(self) -> Mapping[str, str]:
        """Read the raw string mapping from the file."""
        pass

    @abstractmethod
    def write(self, data: Dict[str, str]) -> None:
        """Write the raw string mapping to the file."""
        pass

    def serialize(self, receiver: R) -> str:
        return self.key_serializer(receiver)

    def deserialize(self, value: str) -> R:
        return self.key_parser(value)

    def load(self) -> Dict[R, str]:
        """Load receiver languages from the file.

        Returns:
            Dict mapping receiver identity to language id.

        Raises:
            ReceiverDataError: If the file cannot be read or a receiver key
                cannot be parsed.
        """
        if not self.file.exists():
            logger.info("receiver_data_file_missing", file=str(self.file))
            return {}

        try:
            raw = self.read()
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error("receiver_data_read_error", file=str(self.file), error=str(e))
            raise ReceiverDataError(f"Failed to read {self.file}: {e}") from e

        result: Dict[R, str] = {}
        for key, language in raw.items():
            try:
                result[self.deserialize(str(key))] = str(language)
            except (TypeError, ValueError) as e:
                raise ReceiverDataError(
                    f"Invalid receiver '{key}' in {self.file}: {e}"
                ) from e
        return result

    def save(self, data: Mapping[R, str]) -> None:
        """Write the full receiver language mapping to the file.

        Raises:
            ReceiverDataError: If the file cannot be written.
        """
        if data is None:
            raise ValueError("Data must not be None")

        raw = {self.serialize(receiver): language for receiver, language in data.items()}
        try:
            self.file.parent.mkdir(parents=True, exist_ok=True)
            self.write(raw)
        except (OSError, yaml.YAMLError) as e:
            logger.error("receiver_data_write_error", file=str(self.file), error=str(e))
            raise ReceiverDataError(f"Failed to write {self.file}: {e}") from e


class PropertiesReceiverDataFileLoader(ReceiverDataFileLoader[R]):
    """Receiver data stored as a Java-style properties file."""

    def read(self) -> Mapping[str, str]:
        properties = Properties()
        with open(self.file, "rb") as f:
            properties.load(f, "utf-8")
        return dict(properties.properties)

    def write(self, data: Dict[str, str]) -> None:
        properties = Properties()
        for key, language in data.items():
            properties[key] = language
        with open(self.file, "wb") as f:
            properties.store(f, encoding="utf-8")


class JsonReceiverDataFileLoader(ReceiverDataFileLoader[R]):
    """Receiver data stored as a JSON object."""

    def read(self) -> Mapping[str, str]:
        with open(self.file, "r", encoding="utf-8") as f:
            data = json.load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError("Receiver data must be a JSON object")
        return data

    def write(self, data: Dict[str, str]) -> None:
        with open(self.file, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)


class YamlReceiverDataFileLoader(ReceiverDataFileLoader[R]):
    """Receiver data stored as a YAML mapping."""

    def read(self) -> Mapping[str, str]:
        with open(self.file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError("Receiver data must be a YAML mapping")
        return data

    def write(self, data: Dict[str, str]) -> None:
        with open(self.file, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True)
