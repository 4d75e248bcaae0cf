"""Platform adapters supplying dispatch sinks to Localization."""

from localization.platforms.entity import (
    EntityPlatform,
    MessageableEntity,
    create_entity_localization,
)

__all__ = [
    "EntityPlatform",
    "MessageableEntity",
    "create_entity_localization",
]
