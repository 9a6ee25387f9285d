"""Tests for the /dictionaries routes."""

import httpx
import pytest
from fastapi.testclient import TestClient

from api.v1.routes import dictionaries
from infrastructure.services import get_dictionary_resolver
from tests.factories.i18n import AR_SNAPSHOT, EN_SNAPSHOT, make_remote_payload
from utils.tests import create_test_app


@pytest.fixture
def client(resolver):
    app = create_test_app(
        dictionaries.router, {get_dictionary_resolver: lambda: resolver}
    )
    return TestClient(app)


@pytest.mark.unit
class TestGetDictionary:
    """Tests for GET /dictionaries/{locale}."""

    def test_serves_remote_dictionary(self, client, store):
        store.serve("ar", make_remote_payload("ar"))

        response = client.get("/dictionaries/ar")

        assert response.status_code == 200
        body = response.json()
        assert body["locale"] == "ar"
        assert body["source"] == "remote"
        assert body["messages"] == make_remote_payload("ar")

    def test_second_request_is_served_from_cache(self, client, store):
        store.serve("en", make_remote_payload("en"))

        client.get("/dictionaries/en")
        response = client.get("/dictionaries/en")

        assert response.status_code == 200
        assert store.count("en") == 1

    def test_serves_fallback_when_store_is_down(self, client, store):
        store.fail("ar", httpx.ConnectError)

        response = client.get("/dictionaries/ar")

        assert response.status_code == 200
        assert response.json() == {
            "locale": "ar",
            "source": "fallback",
            "messages": AR_SNAPSHOT,
        }

    def test_serves_fallback_when_document_is_missing(self, client):
        response = client.get("/dictionaries/en")

        assert response.status_code == 200
        assert response.json()["messages"] == EN_SNAPSHOT

    @pytest.mark.parametrize("locale", ["fr", "xx-YY", "AR"])
    def test_unsupported_locale_serves_default(self, client, store, locale):
        store.serve("en", make_remote_payload("en"))

        response = client.get(f"/dictionaries/{locale}")

        assert response.status_code == 200
        assert response.json()["locale"] == "en"
        assert store.count(locale) == 0

    def test_incomplete_remote_document_serves_fallback(self, client, store):
        payload = make_remote_payload("ar")
        del payload["nav.home"]
        store.serve("ar", payload)

        response = client.get("/dictionaries/ar")

        assert response.json()["source"] == "fallback"


@pytest.mark.unit
class TestGetNegotiatedDictionary:
    """Tests for GET /dictionaries."""

    def test_uses_accept_language(self, client, store):
        store.serve("ar", make_remote_payload("ar"))

        response = client.get(
            "/dictionaries", headers={"Accept-Language": "ar-EG,ar;q=0.9,en;q=0.5"}
        )

        assert response.status_code == 200
        assert response.json()["locale"] == "ar"

    def test_without_header_serves_default(self, client):
        response = client.get("/dictionaries")

        assert response.status_code == 200
        assert response.json()["locale"] == "en"

    def test_unmatched_languages_serve_default(self, client):
        response = client.get("/dictionaries", headers={"Accept-Language": "de,fr"})

        assert response.json()["locale"] == "en"
