"""Write characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO, Union

CharLike = Union[str, int]


def _as_char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")
    return chr(c & 0xFF)


def put_char(c: CharLike, stream: TextIO) -> None:
    """Write one character to stream."""
    stream.write(_as_char(c))


def put_str(text: str, stream: TextIO) -> None:
    """Write text to stream."""
    stream.write(text)


def put_endl(text: str, stream: TextIO) -> None:
    """Write text followed by a newline to stream."""
    stream.write(text)
    stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write the decimal representation of n to stream."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, not {type(n).__name__}")
    stream.write(str(n))