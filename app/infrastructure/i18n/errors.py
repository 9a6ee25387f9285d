"""Errors for locale dictionary resolution.

Remote errors are absorbed by the resolver, which serves the fallback
snapshot instead. MissingFallback is a deployment error and is never
converted into a response.
"""

from typing import Optional, Sequence


class DictionaryError(Exception):
    """Base class for dictionary resolution errors."""


class RemoteDictionaryError(DictionaryError):
    """Raised when the remote object store cannot provide a usable dictionary.

    Attributes:
        locale: Locale that was being fetched.
        reason: Short machine-friendly reason used in logs.
    """

    reason = "remote_error"

    def __init__(self, locale: str, message: str):
        super().__init__(message)
        self.locale = locale


class RemoteUnavailable(RemoteDictionaryError):
    """Connection failure, timeout, or no remote store configured."""

    reason = "unavailable"


class RemoteRejected(RemoteDictionaryError):
    """The remote store answered with a non-success status.

    Attributes:
        status_code: HTTP status returned by the store.
    """

    reason = "rejected"

    def __init__(self, locale: str, status_code: int, message: Optional[str] = None):
        super().__init__(
            locale, message or f"Remote dictionary for {locale} returned {status_code}"
        )
        self.status_code = status_code


class MalformedPayload(RemoteDictionaryError):
    """The response body is not a non-empty flat key -> string mapping."""

    reason = "malformed"


class IncompleteDictionary(MalformedPayload):
    """The remote dictionary lacks keys present in the fallback snapshot.

    Attributes:
        missing_keys: Sorted keys absent from the remote dictionary.
    """

    reason = "incomplete"

    def __init__(self, locale: str, missing_keys: Sequence[str]):
        self.missing_keys = list(missing_keys)
        super().__init__(
            locale,
            f"Remote dictionary for {locale} is missing {len(self.missing_keys)} keys",
        )


class MissingFallback(DictionaryError):
    """No usable fallback snapshot exists for a supported locale.

    Attributes:
        locale: Locale without a snapshot.
    """

    def __init__(self, locale: str, message: Optional[str] = None):
        super().__init__(message or f"No fallback dictionary for locale {locale}")
        self.locale = locale
