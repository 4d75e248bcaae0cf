"""Localization service.

Composes the catalog store, the receiver language registry, the message
resolver and the template renderer, and hands rendered messages to the
platform's dispatch sinks.

Usage:
    from localization import Localization, CONSOLE
    from localization.fileloader import YamlLanguageFileLoader

    localization = Localization(send_function=lambda uuid, text: ...)
    localization.load_languages(YamlLanguageFileLoader(Path("languages")))

    localization.set_language(player_uuid, "fr")
    localization.send_message(player_uuid, "greeting", args=["Alice"])
    localization.send_console_message("server.started")
"""

from typing import Any, Callable, Generic, Mapping, Optional, Sequence, TypeVar, Union

from core.logging import get_module_logger
from localization.console import ConsoleLogFunction, print_console_log_function
from localization.exceptions import DispatchError
from localization.loader import LanguageLoader, ReceiverDataLoader
from localization.models import CONSOLE, ConsoleLogLevel, Language, _Console
from localization.registry import ReceiverLanguageRegistry
from localization.renderer import TemplateRenderer, Transform
from localization.resolver import MessageResolver
from localization.store import CatalogStore

M = TypeVar("M")
R = TypeVar("R")

SendFunction = Callable[[Any, Any], None]
MessageHook = Callable[[Any, Any], Any]

logger = get_module_logger()


class Localization(Generic[M, R]):
    """Resolves, renders and dispatches localized messages.

    Attributes:
        store: CatalogStore with the loaded languages.
        registry: ReceiverLanguageRegistry with receiver preferences.
        resolver: MessageResolver over store and registry.
        renderer: TemplateRenderer for argument placeholders.
        send_function: Sink delivering a rendered message to a receiver.
        console_log_function: Sink delivering a rendered message to the
            console at a given level.
        message_hook: Optional function applied to every resolved message
            before rendering. Receives the receiver (None for the console)
            and the message.
    """

    def __init__(
        self,
        default_language: Optional[str] = None,
        send_function: Optional[SendFunction] = None,
        console_log_function: Optional[ConsoleLogFunction] = None,
        renderer: Optional[TemplateRenderer[M]] = None,
        message_hook: Optional[MessageHook] = None,
    ):
        """Initialize Localization.

        Args:
            default_language: Default language id (default: "en").
            send_function: Receiver sink ``(receiver, message) -> None``.
            console_log_function: Console sink ``(level, message) -> None``.
                Defaults to writing to standard output.
            renderer: TemplateRenderer to use (default: plain text renderer).
            message_hook: Optional ``(receiver, message) -> message`` hook.
        """
        self.store: CatalogStore[M] = CatalogStore(default_language)
        self.registry: ReceiverLanguageRegistry[R] = ReceiverLanguageRegistry()
        self.resolver: MessageResolver[M, R] = MessageResolver(self.store, self.registry)
        self.renderer: TemplateRenderer[M] = renderer or TemplateRenderer()
        self.send_function = send_function
        self.console_log_function: ConsoleLogFunction = (
            console_log_function or print_console_log_function
        )
        self.message_hook = message_hook

    # Resolution

    def get_message(self, receiver: R, key: str) -> Optional[M]:
        """Retrieve a message in the receiver's language.

        Args:
            receiver: Receiver identity.
            key: Flat message key.

        Returns:
            The message, or None if not found in the receiver's language nor
            the default language.
        """
        if receiver is None:
            raise ValueError("Receiver must not be None")
        if key is None:
            raise ValueError("Key must not be None")
        message = self.resolver.resolve_for_receiver(receiver, key)
        if message is not None and self.message_hook is not None:
            message = self.message_hook(receiver, message)
        return message

    def get_console_message(self, key: str) -> Optional[M]:
        """Retrieve a message in the console language."""
        if key is None:
            raise ValueError("Key must not be None")
        message = self.resolver.resolve_for_console(key)
        if message is not None and self.message_hook is not None:
            message = self.message_hook(None, message)
        return message

    # Receivers

    def send_translated_message(self, receiver: R, message: M) -> None:
        """Deliver an already rendered message to a receiver."""
        if receiver is None:
            raise ValueError("Receiver must not be None")
        if message is None:
            raise ValueError("Message must not be None")
        if self.send_function is None:
            raise DispatchError("No send function configured for receiver messages")
        self.send_function(receiver, message)

    def send_message(
        self,
        receiver: R,
        key: str,
        args: Optional[Sequence[Optional[str]]] = None,
        transform: Optional[Transform] = None,
    ) -> bool:
        """Resolve, render and deliver a message to a receiver.

        Nothing is sent when no message is found for the key.

        Args:
            receiver: Receiver identity.
            key: Flat message key.
            args: Positional arguments. None skips substitution; an empty
                sequence clears every placeholder.
            transform: Optional function applied after substitution.

        Returns:
            True if a message was sent, False if none was found.
        """
        message = self.get_message(receiver, key)
        if message is None:
            logger.debug("message_not_found", key=key, receiver=str(receiver))
            return False
        self.send_translated_message(receiver, self.renderer.render(message, args, transform))
        return True

    def send_messages(self, key: str, *receivers: R) -> None:
        """Send the same key, without arguments, to several receivers in order."""
        for receiver in receivers:
            self.send_message(receiver, key)

    # Console

    def send_translated_console_message(self, level: ConsoleLogLevel, message: M) -> None:
        """Deliver an already rendered message to the console."""
        if level is None:
            raise ValueError("Level must not be None")
        if message is None:
            raise ValueError("Message must not be None")
        self.console_log_function(level, message)

    def send_console_message(
        self,
        key: str,
        args: Optional[Sequence[Optional[str]]] = None,
        transform: Optional[Transform] = None,
        level: Optional[ConsoleLogLevel] = ConsoleLogLevel.INFO,
    ) -> bool:
        """Resolve, render and deliver a message to the console.

        Args:
            key: Flat message key.
            args: Positional arguments, as for send_message().
            transform: Optional function applied after substitution.
            level: Console level. None means INFO.

        Returns:
            True if a message was sent, False if none was found.
        """
        message = self.get_console_message(key)
        if message is None:
            logger.debug("console_message_not_found", key=key)
            return False
        self.send_translated_console_message(
            level or ConsoleLogLevel.INFO,
            self.renderer.render(message, args, transform),
        )
        return True

    def set_console_log_function(self, console_log_function: ConsoleLogFunction) -> None:
        if console_log_function is None:
            raise ValueError("Console log function must not be None")
        self.console_log_function = console_log_function

    # Senders that may be the console

    def send(
        self,
        sender: Union[R, _Console],
        key: str,
        args: Optional[Sequence[Optional[str]]] = None,
        transform: Optional[Transform] = None,
    ) -> bool:
        """Send to the console when sender is CONSOLE, otherwise to the receiver."""
        if sender is CONSOLE:
            return self.send_console_message(key, args, transform)
        return self.send_message(sender, key, args, transform)

    def send_to_all(self, key: str, *senders: Union[R, _Console]) -> None:
        for sender in senders:
            self.send(sender, key)

    # Loaders

    def load_languages(self, loader: LanguageLoader[M]) -> int:
        """Load languages, replacing catalogs with the same id.

        Returns:
            Number of loaded languages.
        """
        return self.store.load_languages(loader)

    def reload_languages(self, loader: LanguageLoader[M]) -> int:
        """Replace every loaded language with the loader's output."""
        return self.store.reload(loader)

    def load_receiver_data(self, loader: ReceiverDataLoader[R]) -> int:
        """Load receiver languages.

        Returns:
            Number of receivers with a language set.
        """
        return self.registry.load_receiver_data(loader)

    def save_receiver_data(self, loader: ReceiverDataLoader[R]) -> None:
        self.registry.save_receiver_data(loader)

    # Languages

    def get_languages(self) -> Mapping[str, Language[M]]:
        """Read-only view of the loaded languages, keyed by id."""
        return self.store.get_languages()

    def put_language(self, language: Language[M]) -> None:
        self.store.put_language(language)

    def put_message(self, language_id: str, key: str, message: M) -> None:
        """Set a single message, creating the language if needed."""
        self.store.put_message(language_id, key, message)

    def get_default_language(self) -> str:
        return self.store.default_language

    def get_console_language(self) -> str:
        return self.store.console_language

    def set_console_language(self, language_id: str) -> None:
        self.store.console_language = language_id

    # Receiver languages

    def get_receiver_data(self) -> Mapping[R, str]:
        """Read-only view of receiver -> language id."""
        return self.registry.get_receiver_data()

    def get_language(self, receiver: R) -> Optional[str]:
        return self.registry.get_language(receiver)

    def set_language(self, receiver: R, language_id: str) -> None:
        self.registry.set_language(receiver, language_id)

    def remove_language(self, receiver: R) -> None:
        self.registry.remove_language(receiver)
