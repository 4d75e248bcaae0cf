import sys
from pathlib import Path
from unittest.mock import MagicMock

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `core.config`) works during pytest collection regardless of
# the directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from localization import Localization
from tests.factories.localization import make_language


@pytest.fixture
def send_function():
    """Receiver sink recording (receiver, message) calls."""
    return MagicMock(name="send_function")


@pytest.fixture
def console_log_function():
    """Console sink recording (level, message) calls."""
    return MagicMock(name="console_log_function")


@pytest.fixture
def localization(send_function, console_log_function):
    """Localization with English (default) and French catalogs loaded."""
    localization = Localization(
        default_language="en",
        send_function=send_function,
        console_log_function=console_log_function,
    )
    localization.put_language(
        make_language(
            "en",
            {
                "greeting": "Hello ${1}!",
                "farewell": "Goodbye ${1}",
                "inventory": "Hello ${1}, you have ${2+} items: ${*}",
                "only_english": "English only",
                "server.started": "Server started on port ${1}",
            },
        )
    )
    localization.put_language(
        make_language(
            "fr",
            {
                "greeting": "Bonjour ${1} !",
                "farewell": "Au revoir ${1}",
                "server.started": "Serveur démarré sur le port ${1}",
            },
        )
    )
    return localization
