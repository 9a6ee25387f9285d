"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import DictionaryResolver
from infrastructure.services.providers import get_dictionary_resolver, get_settings

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Dictionary resolver dependency - shares the process-wide dictionary cache
DictionaryResolverDep = Annotated[DictionaryResolver, Depends(get_dictionary_resolver)]

__all__ = [
    "SettingsDep",
    "DictionaryResolverDep",
]
