"""i18n system - locale dictionary resolution.

Turns a locale code into a complete key -> string Dictionary sourced from a
remote object store, cached per locale, and backed by deploy-time fallback
snapshots.

Main components:
- models: Dictionary, CacheEntry, LocalePolicy
- remote: RemoteDictionarySource (httpx)
- fallback: LocalFallbackStore
- cache: DictionaryCache
- resolver: DictionaryResolver, the entry point for rendering code
- negotiation: negotiate_locale for Accept-Language headers
"""

from infrastructure.i18n.cache import DictionaryCache
from infrastructure.i18n.errors import (
    DictionaryError,
    IncompleteDictionary,
    MalformedPayload,
    MissingFallback,
    RemoteDictionaryError,
    RemoteRejected,
    RemoteUnavailable,
)
from infrastructure.i18n.factory import create_dictionary_resolver
from infrastructure.i18n.fallback import LocalFallbackStore
from infrastructure.i18n.models import (
    CacheEntry,
    Dictionary,
    DictionarySource,
    LocalePolicy,
)
from infrastructure.i18n.negotiation import negotiate_locale
from infrastructure.i18n.remote import RemoteDictionarySource
from infrastructure.i18n.resolver import DictionaryResolver

__all__ = [
    "CacheEntry",
    "Dictionary",
    "DictionarySource",
    "LocalePolicy",
    "DictionaryCache",
    "RemoteDictionarySource",
    "LocalFallbackStore",
    "DictionaryResolver",
    "create_dictionary_resolver",
    "negotiate_locale",
    "DictionaryError",
    "RemoteDictionaryError",
    "RemoteUnavailable",
    "RemoteRejected",
    "MalformedPayload",
    "IncompleteDictionary",
    "MissingFallback",
]
