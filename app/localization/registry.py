"""Receiver language registry.

Maps receiver identities to their preferred language id. A receiver without
an entry uses the default language; entries are never created implicitly.
"""

from types import MappingProxyType
from typing import Dict, Generic, Mapping, Optional, TypeVar

import structlog
from localization.loader import ReceiverDataLoader

R = TypeVar("R")

logger = structlog.get_logger().bind(component="localization.registry")


class ReceiverLanguageRegistry(Generic[R]):
    """Stores the language preference of each receiver."""

    def __init__(self):
        self._data: Dict[R, str] = {}

    def load_receiver_data(self, loader: ReceiverDataLoader[R]) -> int:
        """Merge stored receiver languages into the registry.

        Args:
            loader: ReceiverDataLoader to read from.

        Returns:
            Number of receivers in the registry after the merge.
        """
        if loader is None:
            raise ValueError("Loader must not be None")
        loaded = loader.load()
        self._data.update(loaded)
        logger.info(
            "loaded_receiver_data",
            loaded_count=len(loaded),
            receiver_count=len(self._data),
        )
        return len(self._data)

    def save_receiver_data(self, loader: ReceiverDataLoader[R]) -> None:
        """Hand the full registry to the loader for persistence."""
        if loader is None:
            raise ValueError("Loader must not be None")
        loader.save(dict(self._data))
        logger.info("saved_receiver_data", receiver_count=len(self._data))

    def get_receiver_data(self) -> Mapping[R, str]:
        """Read-only view of receiver -> language id."""
        return MappingProxyType(self._data)

    def get_language(self, receiver: R) -> Optional[str]:
        """Get the receiver's language id, or None if it has none set."""
        if receiver is None:
            raise ValueError("Receiver must not be None")
        return self._data.get(receiver)

    def set_language(self, receiver: R, language_id: str) -> None:
        if receiver is None:
            raise ValueError("Receiver must not be None")
        if language_id is None:
            raise ValueError("Language must not be None")
        self._data[receiver] = language_id

    def remove_language(self, receiver: R) -> None:
        if receiver is None:
            raise ValueError("Receiver must not be None")
        self._data.pop(receiver, None)

    def __len__(self) -> int:
        return len(self._data)
