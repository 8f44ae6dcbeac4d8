"""
US phone number normalization.
"""
import re
from typing import Any, Optional

_NON_DIGIT_RE = re.compile(r"[^0-9]")
_PHONE_RE = re.compile(r"^1?(\d{3})(\d{3})(\d{4})$")


def format_phone(value: Any) -> Optional[str]:
    """
    Format a phone number as (XXX) XXX-XXXX.

    All non-digit characters are discarded first. Ten digits are formatted
    as-is; eleven digits are accepted only with a leading country code "1".

    Args:
        value: Phone number in any format (converted with str())

    Returns:
        The formatted number, or None if it is not a valid US phone number

    Examples:
        >>> format_phone("5551234567")
        '(555) 123-4567'
        >>> format_phone("+1 (555) 123-4567")
        '(555) 123-4567'
        >>> format_phone("123456") is None
        True
    """
    digits = _NON_DIGIT_RE.sub("", str(value))

    match = _PHONE_RE.match(digits)
    if match is None:
        return None

    area, exchange, line = match.groups()
    return f"({area}) {exchange}-{line}"
