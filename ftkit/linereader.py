"""Read a stream one newline-terminated line at a time."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines, reading fixed-size chunks.

    Each line is returned with its trailing newline. Text that follows the
    final newline is never returned: at end of stream it is discarded.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    @staticmethod
    def _newline_at(data: AnyStr) -> int:
        return data.find("\n" if isinstance(data, str) else b"\n")

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when no complete line remains."""
        pending = self._pending
        while pending is None or self._newline_at(pending) < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._pending = None
                return None
            pending = chunk if pending is None else pending + chunk
        cut = self._newline_at(pending) + 1
        self._pending = pending[cut:]
        return pending[:cut]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line