"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import DictionaryResolver, create_dictionary_resolver


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_dictionary_resolver() -> DictionaryResolver:
    """
    Get application-scoped dictionary resolver singleton.

    The resolver owns the process-wide DictionaryCache, so every request in
    the process shares one cache.

    Returns:
        DictionaryResolver: Cached resolver built from settings.dictionaries.

    Raises:
        MissingFallback: If a supported locale has no fallback snapshot.

    Usage:
        @router.get("/dictionaries/{locale}")
        async def get_dictionary(locale: str, resolver: DictionaryResolverDep):
            return await resolver.resolve(locale)
    """
    return create_dictionary_resolver(get_settings().dictionaries)


def reset_dictionary_resolver() -> None:
    """Forget the cached resolver so the next call builds a fresh one.

    Called after the resolver is closed at shutdown; a closed resolver can no
    longer reach the remote store.
    """
    get_dictionary_resolver.cache_clear()
