"""Remote dictionary source backed by an HTTP object store.

Dictionaries are flat JSON objects published at {base_url}/{locale}.json.
A fetch is a single attempt; retry policy belongs to the caller. The timeout
bounds the whole fetch, including a body that trickles in slowly.
"""

import asyncio
from typing import Any, Optional

import httpx

from infrastructure.i18n.errors import (
    MalformedPayload,
    RemoteRejected,
    RemoteUnavailable,
)
from infrastructure.i18n.models import Dictionary, DictionarySource
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class RemoteDictionarySource:
    """Fetches locale dictionaries from the remote object store.

    Attributes:
        base_url: Object store URL prefix, or None when no store is configured.
        timeout: Per-fetch timeout in seconds.
    """

    def __init__(
        self,
        base_url: Optional[str],
        timeout: float = 3.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize the remote source.

        Args:
            base_url: Object store base URL. None disables remote fetching.
            timeout: Timeout for one fetch, covering connect and read.
            client: Optional pre-configured client (tests inject a MockTransport).
        """
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
        )
        self._logger = logger.bind(base_url=self.base_url)

    def url_for(self, locale: str) -> str:
        """Build the object URL for a locale."""
        return f"{self.base_url}/{locale}.json"

    async def fetch(self, locale: str) -> Dictionary:
        """Fetch and validate the dictionary for a locale.

        Args:
            locale: Locale code, already checked against the supported set.

        Returns:
            Dictionary with source REMOTE.

        Raises:
            RemoteUnavailable: No store configured, connection error, or timeout.
            RemoteRejected: The store answered with a non-2xx status.
            MalformedPayload: The body is not a non-empty flat string mapping.
        """
        if self.base_url is None:
            raise RemoteUnavailable(locale, "No remote dictionary store configured")

        url = self.url_for(locale)
        try:
            async with asyncio.timeout(self.timeout):
                response = await self._client.get(url, timeout=self.timeout)
        except (httpx.TimeoutException, TimeoutError) as e:
            raise RemoteUnavailable(
                locale, f"Timed out after {self.timeout}s fetching {url}"
            ) from e
        except httpx.HTTPError as e:
            raise RemoteUnavailable(locale, f"Failed to fetch {url}: {e}") from e

        if not response.is_success:
            raise RemoteRejected(locale, response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedPayload(
                locale, f"Response for {locale} is not valid JSON: {e}"
            ) from e

        messages = self._validate_payload(locale, payload)
        self._logger.debug(
            "remote_dictionary_fetched", locale=locale, key_count=len(messages)
        )
        return Dictionary(
            locale=locale, messages=messages, source=DictionarySource.REMOTE
        )

    @staticmethod
    def _validate_payload(locale: str, payload: Any) -> dict[str, str]:
        """Check that payload is a non-empty flat mapping of strings to strings.

        Raises:
            MalformedPayload: If the shape is wrong or the mapping is empty.
        """
        if not isinstance(payload, dict):
            raise MalformedPayload(
                locale,
                f"Expected a JSON object for {locale}, got {type(payload).__name__}",
            )
        if not payload:
            raise MalformedPayload(locale, f"Remote dictionary for {locale} is empty")

        invalid = sorted(
            key
            for key, value in payload.items()
            if not isinstance(key, str) or not isinstance(value, str)
        )
        if invalid:
            raise MalformedPayload(
                locale,
                f"Remote dictionary for {locale} has non-string values for keys: "
                f"{', '.join(invalid[:10])}",
            )
        return payload

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
