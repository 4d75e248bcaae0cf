"""Message resolution for receivers and the console.

Resolution order:
1. Effective language: the receiver's registered language, else the default
   language. The console uses the console language, else the default.
2. The message in that language's catalog.
3. The message in the default language's catalog (single-level fallback).

A missing catalog or missing key resolves to None; nothing here raises for
absent data.
"""

from typing import Generic, Optional, TypeVar, Union

from core.logging import get_module_logger
from localization.models import CONSOLE, Language, _Console
from localization.registry import ReceiverLanguageRegistry
from localization.store import CatalogStore

M = TypeVar("M")
R = TypeVar("R")

logger = get_module_logger()


class MessageResolver(Generic[M, R]):
    """Resolves message keys against the catalog store.

    Attributes:
        store: CatalogStore with the loaded catalogs.
        registry: ReceiverLanguageRegistry with receiver preferences.
    """

    def __init__(
        self,
        store: CatalogStore[M],
        registry: ReceiverLanguageRegistry[R],
    ):
        self.store = store
        self.registry = registry

    def effective_language(self, receiver: Union[R, _Console]) -> str:
        """Determine the language id used for a receiver or the console.

        Args:
            receiver: Receiver identity, or CONSOLE.

        Returns:
            Language id.
        """
        if receiver is None:
            raise ValueError("Receiver must not be None")
        if receiver is CONSOLE:
            return self.store.console_language or self.store.default_language
        return self.registry.get_language(receiver) or self.store.default_language

    def resolve(self, receiver: Union[R, _Console], key: str) -> Optional[M]:
        """Resolve a message for a receiver or the console.

        Args:
            receiver: Receiver identity, or CONSOLE.
            key: Flat message key.

        Returns:
            The message payload, or None if no message was found.
        """
        if key is None:
            raise ValueError("Key must not be None")
        language_id = self.effective_language(receiver)
        return self._lookup(language_id, key)

    def resolve_for_receiver(self, receiver: R, key: str) -> Optional[M]:
        if receiver is CONSOLE:
            raise ValueError("Use resolve_for_console() for the console")
        return self.resolve(receiver, key)

    def resolve_for_console(self, key: str) -> Optional[M]:
        return self.resolve(CONSOLE, key)

    def _lookup(self, language_id: str, key: str) -> Optional[M]:
        language: Optional[Language[M]] = self.store.get_language(language_id)
        if language is None:
            logger.debug("language_not_loaded", language=language_id, key=key)
            return None

        message = language.get_message(key)
        if message is not None:
            return message

        default_language = self.store.default_language
        if language_id == default_language:
            return None

        fallback = self.store.get_language(default_language)
        if fallback is None:
            return None

        message = fallback.get_message(key)
        if message is not None:
            logger.debug(
                "used_fallback_message",
                key=key,
                requested_language=language_id,
                fallback_language=default_language,
            )
        return message
