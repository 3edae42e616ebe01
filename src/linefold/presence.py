"""Value presence and normalization.

Every convenience append asks ``is_present`` before it creates a Part, then
turns the value into text with ``normalize``. Zero is data, not absence:

    >>> is_present(0), is_present("0"), is_present("  ")
    (True, True, False)
    >>> normalize(["a", "", None, 0])
    'a, 0'
    >>> normalize(range(3))
    '0, 1, 2'
    >>> normalize(True)
    'Yes'
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sized
from typing import Any

# Iterable, but rendered as text rather than as a list of members
_SCALAR_ITERABLES = (str, bytes, bytearray, memoryview)

# PHP-style trim set; str.strip() would also eat NBSP and friends
WHITESPACE = " \t\n\r\0\x0b"

COLLECTION_JOINER = ", "


def _is_collection(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, _SCALAR_ITERABLES)


def is_present(value: Any) -> bool:
    """Return True if ``value`` is worth rendering.

    False for None, the empty string, whitespace-only strings and empty
    collections. True for numeric zero, ``"0"``, ``False`` and everything
    else. Unsized iterables such as generators cannot be inspected without
    consuming them and count as present; an empty one normalizes to ``""``.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return value == "0" or value.strip(WHITESPACE) != ""
    if _is_collection(value) and isinstance(value, Sized):
        return len(value) > 0
    return True


def normalize(value: Any) -> str:
    """Convert a present value to display text.

    Collections (any non-string iterable: lists, tuples, sets, ranges,
    generators ...) drop their non-present members and join the rest with
    ``", "``; mappings contribute their values. Booleans become
    ``"Yes"``/``"No"``. Never raises for the types Linefold accepts.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, Mapping):
        value = value.values()
    if _is_collection(value):
        return COLLECTION_JOINER.join(normalize(v) for v in value if is_present(v))
    return str(value)
