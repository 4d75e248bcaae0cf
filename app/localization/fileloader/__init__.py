"""File-based loaders for languages and receiver data.

- language: LanguageFileLoader, JsonLanguageFileLoader, YamlLanguageFileLoader
- receiver_data: ReceiverDataFileLoader and its properties/JSON/YAML variants
"""

from localization.fileloader.language import (
    JsonLanguageFileLoader,
    LanguageFileLoader,
    YamlLanguageFileLoader,
)
from localization.fileloader.receiver_data import (
    JsonReceiverDataFileLoader,
    PropertiesReceiverDataFileLoader,
    ReceiverDataFileLoader,
    YamlReceiverDataFileLoader,
)

__all__ = [
    "LanguageFileLoader",
    "JsonLanguageFileLoader",
    "YamlLanguageFileLoader",
    "ReceiverDataFileLoader",
    "PropertiesReceiverDataFileLoader",
    "JsonReceiverDataFileLoader",
    "YamlReceiverDataFileLoader",
]
