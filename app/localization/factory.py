"""Factory functions for creating localization components.

Builds file loaders and a ready-to-use Localization from LocalizationSettings.
"""

from pathlib import Path
from typing import Callable, Optional

import structlog
from core.config import LocalizationSettings, settings as app_settings
from localization.console import ConsoleLogFunction
from localization.fileloader import (
    JsonLanguageFileLoader,
    JsonReceiverDataFileLoader,
    LanguageFileLoader,
    PropertiesReceiverDataFileLoader,
    ReceiverDataFileLoader,
    YamlLanguageFileLoader,
    YamlReceiverDataFileLoader,
)
from localization.renderer import TemplateRenderer
from localization.service import Localization, MessageHook, SendFunction

logger = structlog.get_logger()

LANGUAGE_LOADERS = {
    "json": JsonLanguageFileLoader,
    "yaml": YamlLanguageFileLoader,
}

RECEIVER_DATA_LOADERS = {
    "properties": PropertiesReceiverDataFileLoader,
    "json": JsonReceiverDataFileLoader,
    "yaml": YamlReceiverDataFileLoader,
}


def create_language_loader(
    settings: Optional[LocalizationSettings] = None,
) -> LanguageFileLoader:
    """Create the language file loader configured in settings.

    Args:
        settings: Localization settings (default: application settings).

    Returns:
        LanguageFileLoader for the configured directory and format.
    """
    settings = settings or app_settings.localization
    loader_class = LANGUAGE_LOADERS[settings.LANGUAGE_FILE_FORMAT]
    defaults_dir = Path(settings.DEFAULTS_DIR) if settings.DEFAULTS_DIR else None
    return loader_class(Path(settings.LANGUAGES_DIR), defaults_dir=defaults_dir)


def create_receiver_data_loader(
    settings: Optional[LocalizationSettings] = None,
    key_parser: Optional[Callable] = None,
    key_serializer: Optional[Callable] = None,
) -> Optional[ReceiverDataFileLoader]:
    """Create the receiver data loader configured in settings.

    Args:
        settings: Localization settings (default: application settings).
        key_parser: Converts stored keys to receiver identities (e.g. uuid.UUID).
        key_serializer: Converts receiver identities to stored keys.

    Returns:
        ReceiverDataFileLoader, or None if no receiver data file is configured.
    """
    settings = settings or app_settings.localization
    if not settings.RECEIVER_DATA_FILE:
        return None
    loader_class = RECEIVER_DATA_LOADERS[settings.RECEIVER_DATA_FORMAT]
    return loader_class(
        Path(settings.RECEIVER_DATA_FILE),
        key_parser=key_parser,
        key_serializer=key_serializer,
    )


def create_localization(
    settings: Optional[LocalizationSettings] = None,
    send_function: Optional[SendFunction] = None,
    console_log_function: Optional[ConsoleLogFunction] = None,
    renderer: Optional[TemplateRenderer] = None,
    message_hook: Optional[MessageHook] = None,
    key_parser: Optional[Callable] = None,
    key_serializer: Optional[Callable] = None,
    preload: bool = True,
) -> Localization:
    """Create and configure a Localization instance.

    Args:
        settings: Localization settings (default: application settings).
        send_function: Receiver sink ``(receiver, message) -> None``.
        console_log_function: Console sink (default: standard output).
        renderer: TemplateRenderer (default: plain text).
        message_hook: Optional ``(receiver, message) -> message`` hook.
        key_parser: Converts stored receiver keys to receiver identities.
        key_serializer: Converts receiver identities to stored keys.
        preload: Whether to load languages and receiver data immediately.

    Returns:
        Localization: Configured localization instance.

    Raises:
        LanguageLoadError: If preloading languages fails.
        ReceiverDataError: If preloading receiver data fails.

    Usage:
        # Use application settings, preload languages
        localization = create_localization(send_function=send_to_player)

        # Custom settings, lazy loading
        localization = create_localization(
            settings=LocalizationSettings(LOCALIZATION_LANGUAGES_DIR="/srv/lang"),
            preload=False,
        )
        localization.load_languages(create_language_loader())

        # Persist receiver languages (e.g. on shutdown) with a loader built
        # from the same settings and key conversions
        receiver_loader = create_receiver_data_loader(
            key_parser=uuid.UUID, key_serializer=str
        )
        if receiver_loader is not None:
            localization.save_receiver_data(receiver_loader)
    """
    settings = settings or app_settings.localization

    localization = Localization(
        default_language=settings.DEFAULT_LANGUAGE,
        send_function=send_function,
        console_log_function=console_log_function,
        renderer=renderer,
        message_hook=message_hook,
    )
    if settings.CONSOLE_LANGUAGE:
        localization.set_console_language(settings.CONSOLE_LANGUAGE)

    if not preload:
        logger.info(
            "localization_created_lazy",
            languages_dir=settings.LANGUAGES_DIR,
        )
        return localization

    language_count = localization.load_languages(create_language_loader(settings))

    receiver_count = 0
    receiver_loader = create_receiver_data_loader(
        settings, key_parser=key_parser, key_serializer=key_serializer
    )
    if receiver_loader is not None:
        receiver_count = localization.load_receiver_data(receiver_loader)

    logger.info(
        "localization_created_with_preload",
        languages_dir=settings.LANGUAGES_DIR,
        language_count=language_count,
        receiver_count=receiver_count,
        default_language=settings.DEFAULT_LANGUAGE,
        console_language=localization.get_console_language(),
    )
    return localization
