"""Reading XPM pixmaps into 32-bit pixel grids.

Pixels are unsigned 32-bit values of the form 0xAARRGGBB. A transparent
colour ("None") becomes 0xFF000000: the alpha byte marks transparency, not
opacity.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Iterator, Optional, Union

from ftkit.colornames import color_by_name
from ftkit.numbers import atoi

TRANSPARENT_PIXEL = 0xFF000000

_NAME_BUFFER = 63
_LONG_MAX = 2**63 - 1
_QUOTED = re.compile(r'"([^"]*)"')
_HEX_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data is malformed or incomplete."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image; pixels holds one tuple of values per row."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]


def split_words(text: str) -> list[str]:
    """Split text on spaces and tabs, dropping empty words."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def find_unquoted(text: str, needle: str) -> Optional[int]:
    """Return the index of the first needle lying outside double quotes."""
    if not needle:
        raise ValueError("needle must not be empty")
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return None


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quotes with spaces.

    Block comments are removed first, then line comments together with the
    newline that ends them. The length of the text is kept.
    """
    while (start := find_unquoted(text, "/*")) is not None:
        end = text.find("*/", start + 2)
        text = _blank(text, start, len(text) if end < 0 else end + 2)
    while (start := find_unquoted(text, "//")) is not None:
        end = text.find("\n", start + 2)
        text = _blank(text, start, len(text) if end < 0 else end + 1)
    return text


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _parse_hex(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = min(int(digits, 16), _LONG_MAX)
    return -value if sign == "-" else value


def text_to_rgb(name: str, suffix: Optional[str] = None) -> int:
    """Turn an XPM colour specification into a colour value.

    "#RRGGBB" is read as hexadecimal. Otherwise the name, joined with the
    suffix word when one is given, is looked up in the colour table. Unknown
    names give 0 and "none" gives -1.
    """
    if name.startswith("#"):
        return _to_int32(_parse_hex(name[1:]))
    if suffix is not None:
        name = f"{name} {suffix}"[:_NAME_BUFFER]
    value = color_by_name(name)
    return 0 if value is None else value


def _next_line(source: Iterator[str], what: str) -> str:
    try:
        return next(source)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _pixel_value(color: int) -> int:
    return TRANSPARENT_PIXEL if color == -1 else color & 0xFFFFFFFF


def _chunks(line: str, size: int, count: int) -> Iterator[str]:
    for start in range(0, size * count, size):
        yield line[start:start + size]


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode XPM from its quoted strings: header, colours, then pixel rows."""
    source = iter(lines)
    words = split_words(_next_line(source, "header"))
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and characters per pixel")
    width, height, ncolors, cpp = (atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("XPM header values must be positive")

    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour table end")
        if len(line) < cpp:
            raise XpmError(f"colour line too short: {line!r}")
        entry = split_words(line[cpp:])
        try:
            at = entry.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without a 'c' key: {line!r}") from None
        if at >= len(entry):
            raise XpmError(f"colour line without a colour: {line!r}")
        suffix = entry[at + 1] if at + 1 < len(entry) else None
        value = text_to_rgb(entry[at], suffix)
        key = line[:cpp]
        if direct:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    rows = []
    for _ in range(height):
        line = _next_line(source, "last pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        rows.append(tuple(_pixel_value(palette.get(key, 0)) for key in _chunks(line, cpp, width)))
    return XpmImage(width=width, height=height, pixels=tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    cleaned = strip_comments(text)
    return parse_xpm_lines(match.group(1) for match in _QUOTED.finditer(cleaned))


def load_xpm(path: Union[str, "PathLike[str]"]) -> XpmImage:
    """Read and decode an XPM file."""
    with open(path, "rb") as handle:
        data = handle.read()
    return parse_xpm_text(data.decode("latin-1"))