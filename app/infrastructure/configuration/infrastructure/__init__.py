"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.dictionaries import (
    DictionarySettings,
    MissingKeysPolicy,
)
from infrastructure.configuration.infrastructure.server import ServerSettings

__all__ = [
    "DictionarySettings",
    "MissingKeysPolicy",
    "ServerSettings",
]
