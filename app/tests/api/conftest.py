"""Fixtures for API route tests."""

import pytest

from infrastructure.i18n import (
    DictionaryCache,
    DictionaryResolver,
    LocalFallbackStore,
    LocalePolicy,
    RemoteDictionarySource,
)
from tests.factories.i18n import BASE_URL, FakeClock, ObjectStoreStub, make_snapshots


@pytest.fixture
def store():
    """Object store stub with no documents (every locale answers 404)."""
    return ObjectStoreStub()


@pytest.fixture
def resolver(store):
    """Resolver for en and ar backed by the object store stub."""
    return DictionaryResolver(
        policy=LocalePolicy.from_locales(["en", "ar"], "en"),
        cache=DictionaryCache(ttl_seconds=600, clock=FakeClock()),
        remote=RemoteDictionarySource(BASE_URL, client=store.client()),
        fallback=LocalFallbackStore(make_snapshots()),
    )
