"""Loader contracts consumed by the localization core.

Concrete file-based implementations live in localization.fileloader.
"""

from abc import ABC, abstractmethod
from typing import Dict, Generic, Mapping, TypeVar

from localization.models import Language

M = TypeVar("M")
R = TypeVar("R")


class LanguageLoader(ABC, Generic[M]):
    """Abstract base for language loaders.

    Implementations define where language data comes from and how it is
    parsed into Language catalogs.
    """

    @abstractmethod
    def load(self) -> Dict[str, Language[M]]:
        """Load every available language.

        Returns:
            Dict mapping language id to Language.

        Raises:
            LanguageLoadError: If the language data cannot be read or parsed.
        """
        pass


class ReceiverDataLoader(ABC, Generic[R]):
    """Abstract base for receiver language persistence."""

    @abstractmethod
    def load(self) -> Dict[R, str]:
        """Load the stored receiver languages.

        Returns:
            Dict mapping receiver identity to language id.

        Raises:
            ReceiverDataError: If the data cannot be read or parsed.
        """
        pass

    @abstractmethod
    def save(self, data: Mapping[R, str]) -> None:
        """Persist the full receiver language mapping.

        Args:
            data: Mapping of receiver identity to language id.

        Raises:
            ReceiverDataError: If the data cannot be written.
        """
        pass
