"""A small printf-style formatter supporting the conversions c s p d i u x X.

A conversion is a percent sign followed by one of those letters; "%%"
produces a literal percent sign. Any other character after a percent sign,
or a percent sign at the very end of the format, is an error.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

SPECIFIERS = "cspdiuxX"

_INT_MASK = 0xFFFFFFFF
_PTR_MASK = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """Raised for a malformed format string or missing arguments."""


def _to_int32(value: int) -> int:
    value &= _INT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, not {type(value).__name__}")
    return value


def _convert_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _convert_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, not {type(value).__name__}")
    return value


def _convert_ptr(value: Any) -> str:
    if value is None or (isinstance(value, int) and not isinstance(value, bool) and value == 0):
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    return "0x" + format(address & _PTR_MASK, "x")


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _convert_char(value)
    if spec == "s":
        return _convert_str(value)
    if spec == "p":
        return _convert_ptr(value)
    if spec in "di":
        return str(_to_int32(_require_int(value, spec)))
    if spec == "u":
        return str(_require_int(value, spec) & _INT_MASK)
    return format(_require_int(value, spec) & _INT_MASK, spec)


def _tokens(fmt: str) -> Iterator[tuple[bool, str]]:
    """Yield (is_conversion, text) pairs, validating the whole format first."""
    pieces: list[tuple[bool, str]] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append((False, ch))
            continue
        spec = next(chars, "")
        if spec == "%":
            pieces.append((False, "%"))
        elif spec and spec in SPECIFIERS:
            pieces.append((True, spec))
        elif spec:
            raise FormatError(f"unknown conversion %{spec}")
        else:
            raise FormatError("format ends with a lone '%'")
    return iter(pieces)


def format_text(fmt: str, *args: Any) -> str:
    """Render fmt with args and return the resulting string."""
    if fmt is None:
        raise FormatError("format must not be None")
    values = iter(args)
    out: list[str] = []
    for is_conversion, text in _tokens(fmt):
        if not is_conversion:
            out.append(text)
            continue
        try:
            value = next(values)
        except StopIteration:
            raise FormatError(f"missing argument for %{text}") from None
        out.append(_convert(text, value))
    return "".join(out)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the rendered format to stream (standard output by default).

    Returns the number of characters written.
    """
    text = format_text(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)