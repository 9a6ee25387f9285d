"""Fixtures for server module unit tests."""

import json
from unittest.mock import MagicMock

import pytest

from infrastructure.configuration import DictionarySettings, Settings
from infrastructure.i18n import DictionaryCache, RemoteDictionarySource
from infrastructure.i18n import create_dictionary_resolver
from tests.factories.i18n import BASE_URL, FakeClock, ObjectStoreStub, make_snapshots


@pytest.fixture
def mock_settings():
    """Create a mock settings object."""
    settings = MagicMock()
    settings.is_production = False
    settings.LOG_LEVEL = "INFO"
    settings.PREFIX = "test-"
    settings.dictionaries.base_url = BASE_URL
    settings.dictionaries.warm_on_startup = False
    settings.model_dump.return_value = {
        "PREFIX": "test-",
        "LOG_LEVEL": "INFO",
        "dictionaries": {"DICTIONARY_BASE_URL": BASE_URL},
    }
    return settings


@pytest.fixture
def store():
    """Object store stub with no documents (every locale answers 404)."""
    return ObjectStoreStub()


@pytest.fixture
def snapshot_dir(tmp_path):
    """Directory with en.json and ar.json snapshot files."""
    for locale, messages in make_snapshots().items():
        with open(tmp_path / f"{locale}.json", "w", encoding="utf-8") as f:
            json.dump(messages, f, ensure_ascii=False)
    return tmp_path


@pytest.fixture
def app_settings(snapshot_dir):
    """Real settings pointing at the snapshot directory, warming on startup."""
    return Settings(
        dictionaries=DictionarySettings(
            DICTIONARY_BASE_URL=BASE_URL,
            DICTIONARY_SUPPORTED_LOCALES=["en", "ar"],
            DICTIONARY_DEFAULT_LOCALE="en",
            DICTIONARY_FALLBACK_DIR=snapshot_dir,
            DICTIONARY_WARM_ON_STARTUP=True,
        )
    )


@pytest.fixture
def remote_client(store):
    """AsyncClient answered by the object store stub."""
    return store.client()


@pytest.fixture
def app_resolver(app_settings, remote_client):
    """Resolver built from app_settings and backed by the object store stub."""
    return create_dictionary_resolver(
        app_settings.dictionaries,
        cache=DictionaryCache(ttl_seconds=600, clock=FakeClock()),
        remote=RemoteDictionarySource(BASE_URL, client=remote_client),
    )
