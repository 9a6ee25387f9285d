"""Locale negotiation from HTTP Accept-Language headers.

Used when a consuming app asks for "the best dictionary for this visitor"
rather than naming a locale explicitly.
"""

import math
from typing import Optional, Sequence

import structlog

logger = structlog.get_logger().bind(component="i18n.negotiation")


def parse_accept_language(accept_language: Optional[str]) -> list[tuple[str, float]]:
    """Parse an Accept-Language header into (language range, quality) pairs.

    Pairs are sorted by quality, highest first; ties keep header order.
    Unparseable quality values count as 1.0; non-finite ones (nan, inf) count
    as 0.0. Qualities are clamped to [0, 1].

    Example:
        "ar,en;q=0.8" -> [("ar", 1.0), ("en", 0.8)]
    """
    if not accept_language:
        return []

    preferences = []
    for part in accept_language.split(","):
        pieces = part.split(";")
        lang_range = pieces[0].strip()
        if not lang_range:
            continue

        quality = 1.0
        for param in pieces[1:]:
            name, _, value = param.strip().partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 1.0
                if not math.isfinite(quality):
                    quality = 0.0
                quality = min(max(quality, 0.0), 1.0)

        preferences.append((lang_range, quality))

    return sorted(preferences, key=lambda x: x[1], reverse=True)


def negotiate_locale(
    accept_language: Optional[str],
    supported_locales: Sequence[str],
    default_locale: str,
) -> str:
    """Pick the best supported locale for an Accept-Language header.

    For each preference (by quality) an exact, case-insensitive match is
    tried first, then a match on the primary language subtag
    ("ar-EG" matches "ar", "en" matches "en-GB").

    Args:
        accept_language: Accept-Language header value.
        supported_locales: Locale codes available.
        default_locale: Returned when nothing matches.

    Returns:
        A supported locale code, or default_locale.
    """
    for lang_range, quality in parse_accept_language(accept_language):
        if quality <= 0 or lang_range == "*":
            continue

        for locale in supported_locales:
            if locale.lower() == lang_range.lower():
                return locale

        lang_code = lang_range.split("-")[0].lower()
        for locale in supported_locales:
            if locale.split("-")[0].lower() == lang_code:
                return locale

    logger.debug(
        "no_matching_locale_in_header",
        accept_language=accept_language,
        default=default_locale,
    )
    return default_locale
