"""Localization - message catalogs for game-server plugins.

Loads per-language key -> message catalogs, resolves messages for a receiver
(player or console) from its stored language preference with a fallback to
the default language, substitutes positional arguments, and hands rendered
messages to platform sinks.

Main components:
- models: Language, ConsoleLogLevel, CONSOLE
- loader: LanguageLoader and ReceiverDataLoader contracts
- store: CatalogStore
- registry: ReceiverLanguageRegistry
- resolver: MessageResolver
- renderer: TemplateRenderer with ${N}, ${N+} and ${*} placeholders
- service: Localization facade
- factory: create_localization and loader factories
"""

from localization.console import (
    print_console_log_function,
    structlog_console_log_function,
)
from localization.exceptions import (
    DispatchError,
    LanguageLoadError,
    LocalizationError,
    ReceiverDataError,
)
from localization.loader import LanguageLoader, ReceiverDataLoader
from localization.models import CONSOLE, ConsoleLogLevel, Language
from localization.registry import ReceiverLanguageRegistry
from localization.renderer import ARGS_PATTERN, TemplateRenderer
from localization.resolver import MessageResolver
from localization.service import Localization
from localization.store import CatalogStore

__all__ = [
    "ARGS_PATTERN",
    "CONSOLE",
    "CatalogStore",
    "ConsoleLogLevel",
    "DispatchError",
    "Language",
    "LanguageLoadError",
    "LanguageLoader",
    "Localization",
    "LocalizationError",
    "MessageResolver",
    "ReceiverDataError",
    "ReceiverDataLoader",
    "ReceiverLanguageRegistry",
    "TemplateRenderer",
    "print_console_log_function",
    "structlog_console_log_function",
]
