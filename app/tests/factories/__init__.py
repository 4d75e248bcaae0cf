"""Test data factories for deterministic test data generation."""

from tests.factories.localization import (
    make_language,
    make_languages,
    make_receiver_data,
)

__all__ = [
    "make_language",
    "make_languages",
    "make_receiver_data",
]
