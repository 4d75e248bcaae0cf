"""Custom exceptions for the localization library.

Missing messages and missing catalogs are not errors: resolution returns
None for them. These exceptions cover loader failures and dispatch problems.
"""


class LocalizationError(Exception):
    """Base exception for all localization errors.

    Example:
        try:
            localization.load_languages(loader)
        except LocalizationError as e:
            logger.error("localization_error", error=str(e))
    """

    pass


class LanguageLoadError(LocalizationError):
    """Raised when language data cannot be loaded.

    Wraps the underlying I/O or parse error as its cause.

    Example:
        >>> YamlLanguageFileLoader(Path("missing")).load()
        Traceback (most recent call last):
        ...
        LanguageLoadError: Languages directory not found: missing
    """

    pass


class ReceiverDataError(LocalizationError):
    """Raised when receiver language data cannot be loaded or saved."""

    pass


class DispatchError(LocalizationError):
    """Raised when a rendered message cannot be delivered to a receiver.

    Example:
        >>> platform.send(unknown_uuid, "Hello")
        Traceback (most recent call last):
        ...
        DispatchError: Invalid receiver: 8c0e...
    """

    pass
