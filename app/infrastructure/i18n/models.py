"""Dictionary models for the i18n system.

Defines the immutable data structures shared by the resolver, the cache,
the remote source, and the fallback store.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Optional, Sequence


class DictionarySource(str, Enum):
    """Where a Dictionary's values came from."""

    REMOTE = "remote"
    FALLBACK = "fallback"
    MERGED = "merged"


@dataclass(frozen=True, eq=False)
class Dictionary(Mapping):
    """Immutable key -> translated string mapping for a single locale.

    Behaves as a read-only Mapping and compares equal to any mapping with the
    same items, regardless of locale or source.

    Attributes:
        locale: Locale code the messages belong to.
        messages: Read-only view of the key -> string pairs.
        source: Whether the values came from the remote store or a fallback.
    """

    locale: str
    messages: Mapping[str, str] = field(default_factory=dict)
    source: DictionarySource = DictionarySource.REMOTE

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's dict never leak in
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def __getitem__(self, key: str) -> str:
        return self.messages[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)

    def __repr__(self) -> str:
        return (
            f"Dictionary(locale={self.locale!r}, source={self.source.value!r}, "
            f"keys={len(self.messages)})"
        )

    def missing_keys(self, reference: Mapping[str, str]) -> list[str]:
        """Keys present in reference but absent here, sorted."""
        return sorted(key for key in reference if key not in self.messages)

    def to_dict(self) -> dict[str, str]:
        """Return a plain, mutable copy of the messages."""
        return dict(self.messages)


@dataclass(frozen=True)
class CacheEntry:
    """A resolved remote dictionary and the time it was fetched.

    Entries are never mutated; a refresh replaces the entry wholesale.

    Attributes:
        locale: Locale code the entry is keyed by.
        dictionary: The cached Dictionary.
        fetched_at: Clock reading (seconds) taken when the entry was stored.
    """

    locale: str
    dictionary: Dictionary
    fetched_at: float


@dataclass(frozen=True)
class LocalePolicy:
    """Supported locales plus the default substituted for anything else.

    Attributes:
        supported_locales: Locale codes the platform serves.
        default_locale: Locale used when a request names an unsupported one.
    """

    supported_locales: tuple[str, ...]
    default_locale: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "supported_locales", tuple(self.supported_locales))
        if self.default_locale not in self.supported_locales:
            raise ValueError(
                f"Default locale {self.default_locale} is not a supported locale"
            )

    @classmethod
    def from_locales(
        cls, supported_locales: Sequence[str], default_locale: str
    ) -> "LocalePolicy":
        return cls(tuple(supported_locales), default_locale)

    def is_supported(self, locale: Optional[str]) -> bool:
        """Check whether locale is in the supported set."""
        return locale is not None and locale in self.supported_locales

    def resolve(self, locale: Optional[str]) -> str:
        """Return locale if supported, otherwise the default locale.

        Substitution is silent: an unknown or empty locale is served the
        default dictionary rather than an error.
        """
        if self.is_supported(locale):
            return locale  # type: ignore[return-value]
        return self.default_locale
