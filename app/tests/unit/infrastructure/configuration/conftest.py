"""Fixtures for infrastructure.configuration tests."""

import pytest

DICTIONARY_ENV_VARS = [
    "DICTIONARY_BASE_URL",
    "DICTIONARY_CACHE_TTL_SECONDS",
    "DICTIONARY_FETCH_TIMEOUT_SECONDS",
    "DICTIONARY_SUPPORTED_LOCALES",
    "DICTIONARY_DEFAULT_LOCALE",
    "DICTIONARY_FALLBACK_DIR",
    "DICTIONARY_MISSING_KEYS_POLICY",
    "DICTIONARY_WARM_ON_STARTUP",
    "CORS_ALLOWED_ORIGINS",
    "DICTIONARY_RATE_LIMIT",
    "PREFIX",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove configuration variables inherited from the test runner's environment."""
    for name in DICTIONARY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
