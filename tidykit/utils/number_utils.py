"""
Number extraction from free-form text.

Commas are always treated as grouping separators and the period as the only
decimal point; no locale is inferred.
"""
import re
from decimal import Decimal
from typing import Optional, Union

# Everything except ASCII digits, commas and periods
_NON_NUMERIC_RE = re.compile(r"[^0-9.,]")
# Leading float literal: "12", "12.", "12.5" or ".5"
_LEADING_FLOAT_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def extract_number(value: Union[int, float, Decimal, str]) -> Optional[float]:
    """
    Extract a float from a string or number, ignoring non-numeric characters.

    The text is reduced to digits, periods and commas, commas are dropped, and
    the longest leading float literal is parsed ("1.2.3" gives 1.2).

    Args:
        value: Input value (converted with str())

    Returns:
        The extracted number, or None if no number could be found

    Examples:
        >>> extract_number("$123.45")
        123.45
        >>> extract_number("1,234.56")
        1234.56
        >>> extract_number(42)
        42.0
        >>> extract_number("no numbers here") is None
        True
    """
    cleaned = _NON_NUMERIC_RE.sub("", str(value)).replace(",", "")

    match = _LEADING_FLOAT_RE.match(cleaned)
    if match is None:
        return None
    return float(match.group(0))
