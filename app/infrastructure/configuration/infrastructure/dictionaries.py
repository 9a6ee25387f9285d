"""Locale dictionary resolution settings."""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import NoDecode

from infrastructure.configuration.base import InfrastructureSettings

# app/locales, next to the infrastructure package
DEFAULT_FALLBACK_DIR = Path(__file__).resolve().parents[3] / "locales"


class MissingKeysPolicy(str, Enum):
    """How a remote dictionary missing fallback keys is handled.

    REJECT: the whole remote response is treated as malformed and the
        fallback snapshot is served instead.
    MERGE: missing keys are filled from the fallback snapshot.
    """

    REJECT = "reject"
    MERGE = "merge"


class DictionarySettings(InfrastructureSettings):
    """Locale dictionary resolution configuration.

    Environment Variables:
        DICTIONARY_BASE_URL: Object store base URL; dictionaries are read from
            {base_url}/{locale}.json. When unset only fallbacks are served.
        DICTIONARY_CACHE_TTL_SECONDS: Max age of a cached dictionary (default: 600s)
        DICTIONARY_FETCH_TIMEOUT_SECONDS: Remote fetch timeout (default: 3s)
        DICTIONARY_SUPPORTED_LOCALES: Comma separated or JSON list (default: en,ar)
        DICTIONARY_DEFAULT_LOCALE: Locale substituted for unsupported requests (default: en)
        DICTIONARY_FALLBACK_DIR: Directory of <locale>.json snapshots (default: app/locales)
        DICTIONARY_MISSING_KEYS_POLICY: 'reject' or 'merge' (default: reject)
        DICTIONARY_WARM_ON_STARTUP: Resolve every locale at startup (default: False)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.dictionaries.base_url:
            ttl = settings.dictionaries.cache_ttl_seconds
        ```
    """

    base_url: Optional[str] = Field(
        default=None,
        alias="DICTIONARY_BASE_URL",
        description="Object store base URL serving <locale>.json documents",
    )
    cache_ttl_seconds: float = Field(
        default=600,
        gt=0,
        alias="DICTIONARY_CACHE_TTL_SECONDS",
        description="Time-to-live for cached remote dictionaries (seconds, 10 minutes)",
    )
    fetch_timeout_seconds: float = Field(
        default=3.0,
        gt=0,
        alias="DICTIONARY_FETCH_TIMEOUT_SECONDS",
        description="Timeout for a single remote dictionary fetch (seconds)",
    )
    supported_locales: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["en", "ar"],
        alias="DICTIONARY_SUPPORTED_LOCALES",
        description="Locale codes the platform serves",
    )
    default_locale: str = Field(
        default="en",
        alias="DICTIONARY_DEFAULT_LOCALE",
        description="Locale used when the requested one is not supported",
    )
    fallback_dir: Path = Field(
        default=DEFAULT_FALLBACK_DIR,
        alias="DICTIONARY_FALLBACK_DIR",
        description="Directory holding the deploy-time <locale>.json snapshots",
    )
    missing_keys_policy: MissingKeysPolicy = Field(
        default=MissingKeysPolicy.REJECT,
        alias="DICTIONARY_MISSING_KEYS_POLICY",
        description="Handling of remote dictionaries missing fallback keys",
    )
    warm_on_startup: bool = Field(
        default=False,
        alias="DICTIONARY_WARM_ON_STARTUP",
        description="Resolve every supported locale when the application starts",
    )

    @field_validator("base_url", mode="before")
    @classmethod
    def _blank_base_url(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty DICTIONARY_BASE_URL as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("supported_locales", mode="before")
    @classmethod
    def _parse_locales(cls, v: Any) -> Any:
        """Parse DICTIONARY_SUPPORTED_LOCALES from a JSON list or comma separated string."""
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("["):
                try:
                    v = json.loads(s)
                except json.JSONDecodeError as e:
                    raise ValueError(
                        f"Invalid DICTIONARY_SUPPORTED_LOCALES JSON: {e}"
                    ) from e
            else:
                v = s.split(",")
        if isinstance(v, (list, tuple)):
            locales = []
            for locale in v:
                code = str(locale).strip()
                if code and code not in locales:
                    locales.append(code)
            if not locales:
                raise ValueError("DICTIONARY_SUPPORTED_LOCALES must not be empty")
            return locales
        return v

    @model_validator(mode="after")
    def _default_is_supported(self) -> "DictionarySettings":
        if self.default_locale not in self.supported_locales:
            raise ValueError(
                f"DICTIONARY_DEFAULT_LOCALE '{self.default_locale}' is not one of "
                f"DICTIONARY_SUPPORTED_LOCALES {self.supported_locales}"
            )
        return self
