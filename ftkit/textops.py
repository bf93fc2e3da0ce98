"""String searching, slicing, splitting and comparison helpers.

Searches return an index into the string, or None when nothing matches.
Comparisons return an integer whose sign orders the two strings. That
integer is the difference between the first pair of characters that
differ, and an ended string counts as a NUL character.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Optional, Union

CharLike = Union[str, int]

_NUL = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")


def split(text: str, sep: CharLike) -> list[str]:
    """Split text on every occurrence of sep and drop the empty pieces."""
    separator = _char(sep)
    return [word for word in text.split(separator) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text, beginning at start.

    A start past the end of text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def find_bounded(big: str, little: str, length: int) -> Optional[int]:
    """Find little in big, looking only at the first length characters.

    An empty little matches at index 0.
    """
    if not little:
        return 0
    last_start = min(len(big) - 1, length - len(little))
    for index in range(last_start + 1):
        if big.startswith(little, index):
            return index
    return None


def find(big: str, little: str) -> Optional[int]:
    """Find the first occurrence of little in big.

    An empty little matches at index 0.
    """
    if not little:
        return 0
    index = big.find(little)
    return None if index < 0 else index


def suffix_mismatch(big: str, little: str) -> Optional[int]:
    """Check whether big ends with little.

    Returns None when it does. Otherwise returns the index in big of the
    first character that differs from little when little is aligned against
    the end of big. Returns 0 when little is longer than big.
    """
    offset = len(big) - len(little)
    if offset < 0:
        return 0
    for index, (have, want) in enumerate(zip(big[offset:], little), start=offset):
        if have != want:
            return index
    return None


def compare(s1: str, s2: str) -> int:
    """Compare two strings character by character."""
    for a, b in zip_longest(s1, s2, fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most the first n characters of two strings."""
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in islice(zip_longest(s1, s2, fillvalue=_NUL), n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def index_of(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first c in text.

    Searching for NUL finds the end of the string, len(text).
    """
    index = (text + _NUL).find(_char(c))
    return None if index < 0 else index


def rindex_of(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last c in text.

    Searching for NUL finds the end of the string, len(text).
    """
    index = (text + _NUL).rfind(_char(c))
    return None if index < 0 else index


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string by applying func(index, char) to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))