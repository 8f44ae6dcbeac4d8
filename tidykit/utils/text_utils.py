"""
Text helpers: word capitalization and truncation.

Lengths are measured in code points (Python's len), not grapheme clusters.
"""
from typing import Optional

ELLIPSIS = "..."


def capitalize_first_letters(text: Optional[str]) -> str:
    """
    Capitalize the first letter of each space-separated word.

    Only the single ASCII space separates words; runs of spaces and
    leading/trailing spaces are preserved, and the rest of each word is left
    as it is.

    Args:
        text: Input string (None is accepted)

    Returns:
        The capitalized string, or "" for None or empty input

    Examples:
        >>> capitalize_first_letters("hello world")
        'Hello World'
        >>> capitalize_first_letters("mcDonald  farm")
        'McDonald  Farm'
        >>> capitalize_first_letters(None)
        ''
    """
    if not text:
        return ""
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def truncate_text(text: str, length: int) -> str:
    """
    Truncate text to `length` characters and append an ellipsis.

    Text at or below `length` is returned unchanged. The ellipsis is not
    counted in `length`.

    Examples:
        >>> truncate_text("Hello World", 5)
        'Hello...'
        >>> truncate_text("Hello", 5)
        'Hello'
    """
    if len(text) <= length:
        return text
    return text[:length] + ELLIPSIS
