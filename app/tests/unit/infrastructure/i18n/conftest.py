"""Feature-level fixtures for dictionary resolution tests.

Provides a controllable clock, an object store stub, and fully wired
resolver instances.
"""

import json

import pytest

from infrastructure.configuration import MissingKeysPolicy
from infrastructure.i18n import (
    DictionaryCache,
    DictionaryResolver,
    LocalFallbackStore,
    LocalePolicy,
    RemoteDictionarySource,
)
from tests.factories.i18n import (
    BASE_URL,
    FakeClock,
    ObjectStoreStub,
    make_snapshots,
)


@pytest.fixture
def clock():
    """Clock starting at t=1000s; advance() moves it forward."""
    return FakeClock()


@pytest.fixture
def store():
    """Object store stub with no documents (every locale answers 404)."""
    return ObjectStoreStub()


@pytest.fixture
def remote_source(store):
    """RemoteDictionarySource wired to the object store stub."""
    return RemoteDictionarySource(BASE_URL, timeout=1.0, client=store.client())


@pytest.fixture
def policy():
    """Supported locales en and ar, defaulting to en."""
    return LocalePolicy.from_locales(["en", "ar"], "en")


@pytest.fixture
def cache(clock):
    """Cache with a 10 minute TTL driven by the fake clock."""
    return DictionaryCache(ttl_seconds=600, clock=clock)


@pytest.fixture
def fallback_store():
    """Fallback store holding the en and ar snapshots."""
    return LocalFallbackStore(make_snapshots())


@pytest.fixture
def resolver(policy, cache, remote_source, fallback_store):
    """Resolver rejecting incomplete remote dictionaries."""
    return DictionaryResolver(
        policy=policy,
        cache=cache,
        remote=remote_source,
        fallback=fallback_store,
    )


@pytest.fixture
def merging_resolver(policy, cache, remote_source, fallback_store):
    """Resolver filling missing remote keys from the fallback snapshot."""
    return DictionaryResolver(
        policy=policy,
        cache=cache,
        remote=remote_source,
        fallback=fallback_store,
        missing_keys_policy=MissingKeysPolicy.MERGE,
    )


@pytest.fixture
def snapshot_dir(tmp_path):
    """Directory with en.json and ar.json snapshot files."""
    for locale, messages in make_snapshots().items():
        with open(tmp_path / f"{locale}.json", "w", encoding="utf-8") as f:
            json.dump(messages, f, ensure_ascii=False)
    return tmp_path
