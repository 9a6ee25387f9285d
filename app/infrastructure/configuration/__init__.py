"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the dictionary
service using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    DictionarySettings: Dictionary resolution settings class (for testing)
    MissingKeysPolicy: How incomplete remote dictionaries are handled

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    base_url = settings.dictionaries.base_url
    ttl = settings.dictionaries.cache_ttl_seconds

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure.dictionaries import (
    DictionarySettings,
    MissingKeysPolicy,
)

__all__ = ["Settings", "DictionarySettings", "MissingKeysPolicy"]
