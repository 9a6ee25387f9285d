"""Locale dictionary resolution.

DictionaryResolver is the single entry point used by rendering code. It turns
a locale code into a complete Dictionary by combining the locale policy, the
cache, the remote store, and the fallback snapshots.

There is no single-flight de-duplication: concurrent resolutions of the same
expired locale may each fetch from the remote store.
"""

import asyncio
from typing import Dict, Optional

from infrastructure.configuration.infrastructure.dictionaries import MissingKeysPolicy
from infrastructure.i18n.cache import DictionaryCache
from infrastructure.i18n.errors import IncompleteDictionary, RemoteDictionaryError
from infrastructure.i18n.fallback import LocalFallbackStore
from infrastructure.i18n.models import Dictionary, DictionarySource, LocalePolicy
from infrastructure.i18n.remote import RemoteDictionarySource
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class DictionaryResolver:
    """Resolves locale codes to complete dictionaries.

    Resolution order:
    1. Unsupported locales are replaced by the default locale.
    2. A live cache entry is returned without touching the network.
    3. Otherwise the remote store is fetched once; success is cached.
    4. Any remote failure serves the fallback snapshot, uncached.

    resolve() never raises for remote problems. Fallback snapshots are
    verified for every supported locale when the resolver is built.
    """

    def __init__(
        self,
        policy: LocalePolicy,
        cache: DictionaryCache,
        remote: RemoteDictionarySource,
        fallback: LocalFallbackStore,
        missing_keys_policy: MissingKeysPolicy = MissingKeysPolicy.REJECT,
    ):
        """Initialize the resolver.

        Args:
            policy: Supported locales and the default locale.
            cache: Process-wide dictionary cache.
            remote: Source for remote dictionaries.
            fallback: Deploy-time snapshots.
            missing_keys_policy: Handling of remote dictionaries lacking
                fallback keys.

        Raises:
            MissingFallback: If a supported locale has no usable snapshot.
        """
        fallback.verify(policy.supported_locales)
        self.policy = policy
        self.cache = cache
        self.remote = remote
        self.fallback = fallback
        self.missing_keys_policy = MissingKeysPolicy(missing_keys_policy)
        self.log = logger.bind(default_locale=policy.default_locale)

    @property
    def supported_locales(self) -> tuple[str, ...]:
        return self.policy.supported_locales

    @property
    def default_locale(self) -> str:
        return self.policy.default_locale

    async def resolve(self, locale: Optional[str]) -> Dictionary:
        """Resolve a locale code to a complete Dictionary.

        Args:
            locale: Requested locale code; unsupported or empty values are
                silently replaced by the default locale.

        Returns:
            The cached or freshly fetched remote Dictionary, or the fallback
            snapshot if the remote store could not provide one.
        """
        resolved = self.policy.resolve(locale)
        if resolved != locale:
            self.log.debug(
                "unsupported_locale_defaulted", requested=locale, resolved=resolved
            )

        entry = self.cache.get(resolved)
        if entry is not None:
            return entry.dictionary

        try:
            fetched = await self.remote.fetch(resolved)
            dictionary = self._complete(fetched)
        except RemoteDictionaryError as e:
            self.log.warning(
                "dictionary_remote_fetch_failed",
                locale=resolved,
                reason=e.reason,
                error=str(e),
            )
            return self.fallback.get(resolved)
        except Exception as e:  # pylint: disable=broad-except
            self.log.exception(
                "dictionary_remote_fetch_unexpected_error",
                locale=resolved,
                error=str(e),
            )
            return self.fallback.get(resolved)

        self.cache.set(resolved, dictionary)
        self.log.info(
            "dictionary_refreshed",
            locale=resolved,
            source=dictionary.source.value,
            key_count=len(dictionary),
        )
        return dictionary

    def _complete(self, fetched: Dictionary) -> Dictionary:
        """Apply the missing-keys policy against the fallback snapshot.

        Raises:
            IncompleteDictionary: Under REJECT, if any fallback key is missing.
        """
        snapshot = self.fallback.get(fetched.locale)
        missing = fetched.missing_keys(snapshot)
        if not missing:
            return fetched

        if self.missing_keys_policy is MissingKeysPolicy.REJECT:
            raise IncompleteDictionary(fetched.locale, missing)

        self.log.info(
            "dictionary_merged_with_fallback",
            locale=fetched.locale,
            missing_key_count=len(missing),
        )
        merged = snapshot.to_dict()
        merged.update(fetched.messages)
        return Dictionary(
            locale=fetched.locale, messages=merged, source=DictionarySource.MERGED
        )

    async def warm(self) -> Dict[str, Dictionary]:
        """Resolve every supported locale concurrently.

        Returns:
            Mapping of locale code -> resolved Dictionary.
        """
        locales = self.policy.supported_locales
        dictionaries = await asyncio.gather(*(self.resolve(loc) for loc in locales))
        result = dict(zip(locales, dictionaries))
        self.log.info(
            "dictionaries_warmed",
            sources={loc: d.source.value for loc, d in result.items()},
        )
        return result

    def invalidate(self, locale: Optional[str] = None) -> None:
        """Drop cached dictionaries so the next resolution re-fetches.

        Args:
            locale: Locale to drop; all locales when None.
        """
        if locale is None:
            self.cache.clear()
        else:
            self.cache.invalidate(self.policy.resolve(locale))

    async def aclose(self) -> None:
        """Release the remote store client."""
        await self.remote.aclose()
