"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    DictionaryResolverDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_dictionary_resolver,
    reset_dictionary_resolver,
)

__all__ = [
    "SettingsDep",
    "DictionaryResolverDep",
    "get_settings",
    "get_dictionary_resolver",
    "reset_dictionary_resolver",
]
