"""Localization models.

Defines the core data structures shared by the catalog store, the resolver
and the dispatch sinks.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Generic, Mapping, Optional, TypeVar

M = TypeVar("M")


class ConsoleLogLevel(str, Enum):
    """Severity levels for console messages.

    Passed to the console log function together with the rendered message.
    """

    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    DEBUG = "DEBUG"
    TRACE = "TRACE"


class _Console:
    """Marker for the server console as a message receiver."""

    _instance: Optional["_Console"] = None

    def __new__(cls) -> "_Console":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CONSOLE"


CONSOLE = _Console()


class Language(Generic[M]):
    """A language and its messages.

    Messages are stored under flat, dot-joined keys (e.g. "command.reload.done").
    The message payload is opaque: plain text, a rich-text object, or anything
    a platform renders.

    Attributes:
        id: Language identifier (e.g. "en", "fr"). Immutable.
        messages: Read-only view of the key -> message mapping.
    """

    __slots__ = ("_id", "_messages")

    def __init__(self, id: str, messages: Optional[Mapping[str, M]] = None):
        if not id:
            raise ValueError("Language id must not be empty")
        self._id = id
        self._messages: Dict[str, M] = dict(messages or {})

    @property
    def id(self) -> str:
        return self._id

    @property
    def messages(self) -> Mapping[str, M]:
        return MappingProxyType(self._messages)

    def get_message(self, key: str) -> Optional[M]:
        """Retrieve a message by key.

        Args:
            key: Flat message key.

        Returns:
            The message, or None if the key is not present.
        """
        return self._messages.get(key)

    def has_message(self, key: str) -> bool:
        return key in self._messages

    def set_message(self, key: str, message: M) -> None:
        """Set a single message.

        Args:
            key: Flat message key.
            message: Message payload.
        """
        if key is None:
            raise ValueError("Key must not be None")
        self._messages[key] = message

    def set_messages(self, messages: Mapping[str, M]) -> None:
        """Replace all messages of this language."""
        if messages is None:
            raise ValueError("Messages must not be None")
        self._messages = dict(messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Language):
            return NotImplemented
        return self._id == other._id and self._messages == other._messages

    def __repr__(self) -> str:
        return f"Language(id={self._id!r}, messages={len(self._messages)})"
