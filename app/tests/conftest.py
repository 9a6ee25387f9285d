import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.services import providers  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_providers():
    """Drop cached application singletons between tests."""
    providers.get_settings.cache_clear()
    providers.get_dictionary_resolver.cache_clear()
    yield
    providers.get_settings.cache_clear()
    providers.get_dictionary_resolver.cache_clear()


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    """Start every test with empty rate limit counters."""
    from api.dependencies.rate_limits import limiter

    limiter.reset()
    yield
