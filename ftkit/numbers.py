"""Integer parsing and formatting in the style of the C library routines."""

from __future__ import annotations

LONG_MAX = 2**63 - 1
LLONG_MAX = 2**63 - 1
_INT_BITS = 32

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def _wrap_int(value: int) -> int:
    """Reduce a value to a signed 32-bit integer, as a C cast would."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading integer from text.

    Leading whitespace and one sign are skipped, then digits are read until
    the first non-digit. When the running value passes the range of a 64-bit
    long, the result is -1 for a positive number and 0 for a negative one.
    Otherwise the value is truncated to a signed 32-bit integer.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    limit = LONG_MAX // 10
    nbr = 0
    while pos < length and text[pos] in _DIGITS:
        digit = ord(text[pos]) - ord("0")
        nbr += digit
        if pos + 1 < length and text[pos + 1] in _DIGITS:
            nbr *= 10
        if nbr > limit or (nbr == limit and digit > 7):
            return 0 if sign == -1 else -1
        pos += 1
    return _wrap_int(_wrap_int(nbr) * sign)


def _parse_strict(text: str, maximum: int) -> int:
    if not text:
        raise ValueError("empty string is not a number")
    body = text[1:] if text[0] in "+-" else text
    if any(ch not in _DIGITS for ch in body):
        raise ValueError(f"not an integer: {text!r}")
    sign = -1 if text[0] == "-" else 1
    limit = maximum // 10
    nbr = 0
    for ch in body:
        digit = ord(ch) - ord("0")
        if nbr > limit or (nbr == limit and digit > 7):
            raise ValueError(f"integer out of range: {text!r}")
        nbr = nbr * 10 + digit
    return nbr * sign


def atol(text: str) -> int:
    """Parse a whole string as a signed integer within the range of a long.

    The string must be an optional sign followed only by digits. Raises
    ValueError for any other input or when the value does not fit.
    """
    return _parse_strict(text, LONG_MAX)


def atoll(text: str) -> int:
    """Parse a whole string as a signed integer within the range of a long long.

    Raises ValueError for malformed input or when the value does not fit.
    """
    return _parse_strict(text, LLONG_MAX)


def absolute(n: int) -> int:
    """Return the magnitude of n."""
    return -n if n < 0 else n


def itoa(n: int) -> str:
    """Return the decimal representation of n."""
    return str(n)