from typing import Dict, Optional

from fastapi import APIRouter, Header, Request
from pydantic import BaseModel

from api.dependencies.rate_limits import get_limiter
from infrastructure.configuration.settings import settings
from infrastructure.i18n import Dictionary, negotiate_locale
from infrastructure.logging import get_module_logger
from infrastructure.services import DictionaryResolverDep

logger = get_module_logger()
router = APIRouter(tags=["Dictionaries"])
limiter = get_limiter()


class DictionaryResponse(BaseModel):
    """Resolved dictionary as served to the rendering apps."""

    locale: str
    source: str
    messages: Dict[str, str]

    @classmethod
    def from_dictionary(cls, dictionary: Dictionary) -> "DictionaryResponse":
        return cls(
            locale=dictionary.locale,
            source=dictionary.source.value,
            messages=dictionary.to_dict(),
        )


@router.get("/dictionaries", response_model=DictionaryResponse)
@limiter.limit(settings.server.DICTIONARY_RATE_LIMIT)
async def get_negotiated_dictionary(
    request: Request,  # pylint: disable=unused-argument
    resolver: DictionaryResolverDep,
    accept_language: Optional[str] = Header(default=None),
):
    """Resolve the dictionary best matching the Accept-Language header."""
    locale = negotiate_locale(
        accept_language, resolver.supported_locales, resolver.default_locale
    )
    dictionary = await resolver.resolve(locale)
    return DictionaryResponse.from_dictionary(dictionary)


# Unsupported locales are served the default locale's dictionary, never a 404
@router.get("/dictionaries/{locale}", response_model=DictionaryResponse)
@limiter.limit(settings.server.DICTIONARY_RATE_LIMIT)
async def get_dictionary(
    request: Request,  # pylint: disable=unused-argument
    locale: str,
    resolver: DictionaryResolverDep,
):
    """Resolve the dictionary for a locale code."""
    dictionary = await resolver.resolve(locale)
    if dictionary.locale != locale:
        logger.info(
            "dictionary_locale_substituted",
            requested=locale,
            served=dictionary.locale,
        )
    return DictionaryResponse.from_dictionary(dictionary)
