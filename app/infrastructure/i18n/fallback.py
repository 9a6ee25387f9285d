"""Deploy-time fallback snapshots of locale dictionaries.

Snapshots are loaded once when the process starts and never change
afterwards. A supported locale without a snapshot is a deployment error:
the store refuses to be built rather than serve an unlocalized page.
"""

import json
from pathlib import Path
from typing import Dict, Iterable, Mapping

import structlog

from infrastructure.i18n.errors import MissingFallback
from infrastructure.i18n.models import Dictionary, DictionarySource

logger = structlog.get_logger().bind(component="i18n.fallback")


class LocalFallbackStore:
    """Read-only store of last-known-good dictionaries per locale."""

    def __init__(self, snapshots: Mapping[str, Mapping[str, str]]):
        """Initialize the store from in-memory snapshots.

        Args:
            snapshots: Mapping of locale code -> key/string mapping. Copied.
        """
        self._snapshots: Dict[str, Dictionary] = {
            locale: Dictionary(
                locale=locale, messages=messages, source=DictionarySource.FALLBACK
            )
            for locale, messages in snapshots.items()
        }

    @classmethod
    def from_directory(
        cls, snapshot_dir: Path, locales: Iterable[str]
    ) -> "LocalFallbackStore":
        """Load <locale>.json snapshots for the given locales.

        Args:
            snapshot_dir: Directory containing the snapshot files.
            locales: Locales to load; every one must have a file.

        Returns:
            LocalFallbackStore holding one snapshot per locale.

        Raises:
            MissingFallback: If a file is missing, unreadable, or not a flat
                string mapping.
        """
        snapshot_dir = Path(snapshot_dir)
        snapshots: Dict[str, Dict[str, str]] = {}
        for locale in locales:
            path = snapshot_dir / f"{locale}.json"
            if not path.is_file():
                raise MissingFallback(
                    locale, f"Fallback snapshot not found for {locale}: {path}"
                )
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.error("fallback_snapshot_unreadable", file=str(path), error=str(e))
                raise MissingFallback(
                    locale, f"Failed to read fallback snapshot {path}: {e}"
                ) from e

            if not isinstance(data, dict) or not all(
                isinstance(value, str) for value in data.values()
            ):
                raise MissingFallback(
                    locale,
                    f"Fallback snapshot {path} must be a flat object of strings",
                )
            snapshots[locale] = data

        logger.info(
            "fallback_snapshots_loaded",
            snapshot_dir=str(snapshot_dir),
            locales=sorted(snapshots),
        )
        return cls(snapshots)

    def get(self, locale: str) -> Dictionary:
        """Get the fallback dictionary for a locale.

        Raises:
            MissingFallback: If no snapshot exists for the locale.
        """
        try:
            return self._snapshots[locale]
        except KeyError:
            raise MissingFallback(locale) from None

    def has(self, locale: str) -> bool:
        return locale in self._snapshots

    @property
    def locales(self) -> list[str]:
        return sorted(self._snapshots)

    def verify(self, locales: Iterable[str]) -> None:
        """Check that every locale has a non-empty snapshot.

        Called at startup so a missing snapshot stops the deployment.

        Raises:
            MissingFallback: For the first locale without a usable snapshot.
        """
        for locale in locales:
            snapshot = self._snapshots.get(locale)
            if snapshot is None:
                raise MissingFallback(locale)
            if not snapshot:
                raise MissingFallback(
                    locale, f"Fallback dictionary for locale {locale} is empty"
                )
