"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. Classification functions return a bool. Case conversion
functions return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")


def isalpha(c: CharLike) -> bool:
    """Return True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: CharLike) -> bool:
    """Return True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """Return True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """Return True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """Return True for printable ASCII, codes 32 to 126."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, low: str, high: str, shift: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def toupper(c: CharLike) -> CharLike:
    """Turn an ASCII lowercase letter into uppercase; leave anything else."""
    return _convert(c, "a", "z", -32)


def tolower(c: CharLike) -> CharLike:
    """Turn an ASCII uppercase letter into lowercase; leave anything else."""
    return _convert(c, "A", "Z", 32)