"""
Helpers for flat key/value records (e.g. form payloads, CSV rows).
"""
from typing import Any, Dict, Mapping, TypeVar

K = TypeVar('K')


def trim_string_properties(record: Mapping[K, Any]) -> Dict[K, Any]:
    """
    Strip leading/trailing whitespace from every string value of a record.

    A new dict with the same keys is returned and the input is not modified.
    Non-string values (numbers, None, nested dicts/lists...) are carried over
    as the same objects, not copied.

    Args:
        record: Flat mapping; only its own items are read

    Returns:
        New dict with string values trimmed

    Examples:
        >>> trim_string_properties({"a": " x ", "b": 5, "c": None})
        {'a': 'x', 'b': 5, 'c': None}
    """
    return {
        key: value.strip() if isinstance(value, str) else value
        for key, value in record.items()
        }
