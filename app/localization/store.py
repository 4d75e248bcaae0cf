"""Catalog store holding every loaded language."""

from types import MappingProxyType
from typing import Dict, Generic, Mapping, Optional, TypeVar

from core.logging import get_module_logger
from localization.loader import LanguageLoader
from localization.models import Language

M = TypeVar("M")

DEFAULT_LANGUAGE = "en"

logger = get_module_logger()


class CatalogStore(Generic[M]):
    """Owns the loaded Language catalogs, keyed by language id.

    Also carries the configured default language and console language. The
    language ids are not validated against the loaded catalogs; a language
    without a catalog simply resolves to no message.

    Attributes:
        default_language: Fallback language id (default: "en").
        console_language: Language id used for console messages.
    """

    def __init__(self, default_language: Optional[str] = None):
        """Initialize the store.

        Args:
            default_language: Default language id. None selects "en".
        """
        self._default_language = default_language or DEFAULT_LANGUAGE
        self._console_language = self._default_language
        self._languages: Dict[str, Language[M]] = {}

    @property
    def default_language(self) -> str:
        return self._default_language

    @property
    def console_language(self) -> str:
        return self._console_language

    @console_language.setter
    def console_language(self, language_id: str) -> None:
        if language_id is None:
            raise ValueError("Language must not be None")
        self._console_language = language_id

    def load_languages(self, loader: LanguageLoader[M]) -> int:
        """Load languages and merge them into the store.

        Catalogs returned by the loader replace stored catalogs with the same
        id; other stored catalogs are kept.

        Args:
            loader: LanguageLoader providing the catalogs.

        Returns:
            Number of catalogs in the store after the merge.

        Raises:
            LanguageLoadError: Propagated from the loader.
        """
        if loader is None:
            raise ValueError("Loader must not be None")
        loaded = loader.load()
        self._languages.update(loaded)
        logger.info(
            "loaded_languages",
            loaded=sorted(loaded.keys()),
            language_count=len(self._languages),
        )
        return len(self._languages)

    def reload(self, loader: LanguageLoader[M]) -> int:
        """Replace every stored catalog with the loader's output.

        The store is only cleared once the loader succeeded.

        Returns:
            Number of catalogs in the store after the reload.
        """
        if loader is None:
            raise ValueError("Loader must not be None")
        loaded = loader.load()
        self._languages = dict(loaded)
        logger.info("reloaded_languages", language_count=len(self._languages))
        return len(self._languages)

    def get_languages(self) -> Mapping[str, Language[M]]:
        """Read-only view of the catalogs, keyed by language id."""
        return MappingProxyType(self._languages)

    def get_language(self, language_id: str) -> Optional[Language[M]]:
        return self._languages.get(language_id)

    def put_language(self, language: Language[M]) -> None:
        """Add or replace a catalog."""
        if language is None:
            raise ValueError("Language must not be None")
        self._languages[language.id] = language

    def remove_language(self, language_id: str) -> Optional[Language[M]]:
        """Remove a catalog.

        Returns:
            The removed Language, or None if it was not loaded.
        """
        return self._languages.pop(language_id, None)

    def put_message(self, language_id: str, key: str, message: M) -> None:
        """Set a single message, creating the catalog if needed.

        Args:
            language_id: Target language id.
            key: Flat message key.
            message: Message payload.
        """
        if key is None:
            raise ValueError("Key must not be None")
        language = self._languages.get(language_id)
        if language is None:
            language = Language(language_id)
            self._languages[language_id] = language
        language.set_message(key, message)

    def __len__(self) -> int:
        return len(self._languages)

    def __contains__(self, language_id: object) -> bool:
        return language_id in self._languages
