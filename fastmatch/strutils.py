"""Small string helpers used by option parsing and engine output handling."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def starts_with(haystack: str, needle: str) -> bool:
    """Return True if ``haystack`` starts with a non-empty ``needle``."""
    if not needle:
        return False
    return haystack.startswith(needle)


def ends_with(value: str, ending: str) -> bool:
    """Return True if ``value`` ends with ``ending``."""
    return value.endswith(ending)


def contains(haystack: str | Sequence[str], needle: str) -> bool:
    """Return True if ``needle`` is a substring of, or an element of, ``haystack``."""
    return needle in haystack


def split_string(string: str, delimiter: str) -> list[str]:
    """Split ``string`` on ``delimiter``, dropping empty segments."""
    return [segment for segment in string.split(delimiter) if segment]


def find_element(
    haystack: Sequence[str], needle: str, kind: Callable[[str], T] = str
) -> T | None:
    """Return the element following ``needle`` converted with ``kind``.

    Returns None when ``needle`` is absent. Raises IndexError when ``needle`` is
    the last element and ValueError when the conversion fails.
    """
    try:
        index = list(haystack).index(needle)
    except ValueError:
        return None
    return kind(haystack[index + 1])


def join(strings: Iterable[str], delimiter: str) -> str:
    """Concatenate ``strings``, appending ``delimiter`` after every element."""
    return "".join(string + delimiter for string in strings)