"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from typing import Any, Optional, Union

BUFFER_SIZE = 1024

Line = Union[str, bytes]


class LineReader:
    """Split the contents of a readable stream into lines.

    Each line keeps its trailing newline; the last line of the stream is
    returned without one when the stream does not end in a newline.
    Works with text streams (yielding ``str``) and binary streams
    (yielding ``bytes``).
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an integer")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Line] = None

    @property
    def buffer_size(self) -> int:
        """Number of characters or bytes requested per read."""
        return self._buffer_size

    def _read_chunk(self) -> Optional[Line]:
        chunk = self._stream.read(self._buffer_size)
        if isinstance(chunk, (bytearray, memoryview)):
            chunk = bytes(chunk)
        return chunk or None

    def next_line(self) -> Optional[Line]:
        """Return the next line, or None once the stream has nothing left."""
        searched = 0
        while True:
            if self._pending:
                newline = b"\n" if isinstance(self._pending, bytes) else "\n"
                index = self._pending.find(newline, searched)
                if index >= 0:
                    line = self._pending[: index + 1]
                    self._pending = self._pending[index + 1:]
                    return line
                searched = len(self._pending)
            chunk = self._read_chunk()
            if chunk is None:
                line, self._pending = self._pending, None
                return line or None
            self._pending = chunk if self._pending is None else self._pending + chunk

    def __iter__(self) -> Iterator[Line]:
        return iter(self.next_line, None)


_readers: "weakref.WeakKeyDictionary[Any, LineReader]" = weakref.WeakKeyDictionary()


def get_next_line(stream: Any) -> Optional[Line]:
    """Return the next line of ``stream``, keeping unread data between calls.

    Buffered state is kept per stream, so several streams can be read in
    turn. Returns None when the stream is exhausted.
    """
    reader = _readers.get(stream)
    if reader is None:
        reader = LineReader(stream)
        _readers[stream] = reader
    return reader.next_line()