"""Factory functions for creating i18n components.

Builds a DictionaryResolver and its collaborators from DictionarySettings.
"""

from typing import Optional

import structlog

from infrastructure.configuration.infrastructure.dictionaries import DictionarySettings
from infrastructure.i18n.cache import DictionaryCache
from infrastructure.i18n.fallback import LocalFallbackStore
from infrastructure.i18n.models import LocalePolicy
from infrastructure.i18n.remote import RemoteDictionarySource
from infrastructure.i18n.resolver import DictionaryResolver

logger = structlog.get_logger()


def create_dictionary_resolver(
    settings: DictionarySettings,
    cache: Optional[DictionaryCache] = None,
    remote: Optional[RemoteDictionarySource] = None,
    fallback: Optional[LocalFallbackStore] = None,
) -> DictionaryResolver:
    """Create and configure a DictionaryResolver.

    Any collaborator not supplied is built from settings. Fallback snapshots
    are loaded from settings.fallback_dir and verified for every supported
    locale, so a missing snapshot fails here, at startup.

    Args:
        settings: Dictionary settings (locales, TTL, remote store, snapshots).
        cache: Optional cache instance (default: new DictionaryCache).
        remote: Optional remote source (default: httpx-backed source).
        fallback: Optional fallback store (default: loaded from fallback_dir).

    Returns:
        DictionaryResolver: Configured resolver.

    Raises:
        MissingFallback: If a supported locale has no usable snapshot.

    Usage:
        resolver = create_dictionary_resolver(get_settings().dictionaries)
        dictionary = await resolver.resolve("ar")
    """
    policy = LocalePolicy.from_locales(
        settings.supported_locales, settings.default_locale
    )

    if fallback is None:
        fallback = LocalFallbackStore.from_directory(
            settings.fallback_dir, policy.supported_locales
        )
    if cache is None:
        cache = DictionaryCache(ttl_seconds=settings.cache_ttl_seconds)
    if remote is None:
        remote = RemoteDictionarySource(
            base_url=settings.base_url,
            timeout=settings.fetch_timeout_seconds,
        )

    resolver = DictionaryResolver(
        policy=policy,
        cache=cache,
        remote=remote,
        fallback=fallback,
        missing_keys_policy=settings.missing_keys_policy,
    )

    if settings.base_url is None:
        logger.warning(
            "dictionary_remote_store_not_configured",
            message="Serving fallback snapshots only",
        )
    logger.info(
        "dictionary_resolver_created",
        supported_locales=list(policy.supported_locales),
        default_locale=policy.default_locale,
        ttl_seconds=cache.ttl_seconds,
        missing_keys_policy=resolver.missing_keys_policy.value,
    )
    return resolver
