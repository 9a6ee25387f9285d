"""Server infrastructure settings."""

from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """HTTP server runtime configuration.

    Environment Variables:
        CORS_ALLOWED_ORIGINS: Comma separated origins of the rendering apps
            allowed to read dictionaries from the browser (default: none)
        DICTIONARY_RATE_LIMIT: slowapi limit for dictionary routes (default: 300/minute)

    Example:
        ```python
        from infrastructure.configuration.settings import settings

        origins = settings.server.CORS_ALLOWED_ORIGINS
        ```
    """

    CORS_ALLOWED_ORIGINS: Annotated[list[str], NoDecode] = Field(
        default_factory=list, alias="CORS_ALLOWED_ORIGINS"
    )
    DICTIONARY_RATE_LIMIT: str = Field(
        default="300/minute", alias="DICTIONARY_RATE_LIMIT"
    )

    @field_validator("CORS_ALLOWED_ORIGINS", mode="before")
    @classmethod
    def _split_origins(cls, v: Any) -> Any:
        """Split a comma separated CORS_ALLOWED_ORIGINS value."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v
