"""
Locale utilities for currency formatting.

Converts the BCP 47 style locale identifiers used in the currency table
(e.g. 'de-DE') to Babel Locale objects.

Uses Babel for localization with automatic fallback to English.
"""
from functools import lru_cache

from babel import Locale, UnknownLocaleError

from tidykit.logging_config import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=64)
def get_babel_locale(locale_id: str) -> Locale:
    """
    Get Babel Locale object for a locale identifier.
    Accepts both 'en-US' and 'en_US' separators and falls back to English
    if the locale is not supported.

    Args:
        locale_id: Language or language-territory code (e.g., 'en', 'de-CH', 'pt_BR')

    Returns:
        Babel Locale object

    Examples:
        >>> get_babel_locale('de-CH').territory
        'CH'
        >>> get_babel_locale('invalid_lang').language  # Falls back to 'en'
        'en'
    """
    try:
        return Locale.parse(locale_id.replace('-', '_'))
    except (UnknownLocaleError, ValueError, TypeError, AttributeError) as e:
        logger.warning(
            "Locale not supported, falling back to English",
            locale=locale_id,
            error=str(e)
            )
        return Locale.parse('en')
