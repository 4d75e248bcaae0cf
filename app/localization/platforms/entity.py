"""Plain-text platform for game servers with messageable entities.

The server supplies a lookup turning a receiver identity (usually a UUID)
into an entity exposing ``send_message(text)``. Console messages go through
structlog.

Usage:
    localization = create_entity_localization(
        lookup=server.get_entity,
        default_language="en",
    )
    localization.send_message(player.unique_id, "welcome", args=[player.name])
"""

from typing import Any, Callable, Optional, Protocol, TypeVar

import structlog
from structlog.stdlib import BoundLogger

from localization.console import structlog_console_log_function
from localization.exceptions import DispatchError
from localization.renderer import TemplateRenderer
from localization.service import Localization

R = TypeVar("R")


class MessageableEntity(Protocol):
    """Anything that can receive a text message."""

    def send_message(self, message: str) -> None: ...


EntityLookup = Callable[[Any], Optional[MessageableEntity]]


class EntityPlatform:
    """Dispatch sinks for a server exposing messageable entities.

    Attributes:
        lookup: Receiver identity -> entity, or None if unknown.
        logger: Logger receiving console messages.
    """

    def __init__(self, lookup: EntityLookup, logger: Optional[BoundLogger] = None):
        if lookup is None:
            raise ValueError("Entity lookup must not be None")
        self.lookup = lookup
        self.logger = logger or structlog.get_logger().bind(component="console")

    def send(self, receiver: Any, message: str) -> None:
        """Deliver a message to the entity behind a receiver identity.

        Raises:
            DispatchError: If no entity exists for the receiver.
        """
        entity = self.lookup(receiver)
        if entity is None:
            raise DispatchError(f"Invalid receiver: {receiver}")
        entity.send_message(message)

    def console_log_function(self):
        return structlog_console_log_function(self.logger)


def create_entity_localization(
    lookup: EntityLookup,
    default_language: Optional[str] = None,
    logger: Optional[BoundLogger] = None,
    message_hook: Optional[Callable[[Any, str], str]] = None,
) -> Localization[str, Any]:
    """Create a plain-text Localization wired to an EntityPlatform.

    Args:
        lookup: Receiver identity -> messageable entity.
        default_language: Default language id (default: "en").
        logger: Logger for console messages.
        message_hook: Optional hook applied to resolved messages.

    Returns:
        Localization sending through the platform.
    """
    platform = EntityPlatform(lookup, logger)
    return Localization(
        default_language=default_language,
        send_function=platform.send,
        console_log_function=platform.console_log_function(),
        renderer=TemplateRenderer(),
        message_hook=message_hook,
    )
