"""Reading a stream one line at a time through a small fixed-size buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import AnyStr, Generic, Protocol

BUFFER_SIZE = 1
MAX_FD = 1024


class _Readable(Protocol[AnyStr]):
    def read(self, size: int) -> AnyStr: ...


class LineReader(Generic[AnyStr]):
    """Return successive lines of ``stream``, each with its trailing newline.

    Data is pulled ``buffer_size`` units at a time; what follows a newline is
    kept for the next call. The last line may lack a newline.
    """

    def __init__(self, stream: _Readable[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._rest: AnyStr | None = None

    def next_line(self) -> AnyStr | None:
        """The next line, or ``None`` when the stream has nothing left."""
        pending = self._rest
        while True:
            if pending:
                newline = b"\n" if isinstance(pending, (bytes, bytearray)) else "\n"
                index = pending.find(newline)  # type: ignore[arg-type]
                if index >= 0:
                    self._rest = pending[index + 1 :]
                    return pending[: index + 1]
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        self._rest = None
        return pending if pending else None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


class _FdStream:
    def __init__(self, fd: int) -> None:
        self.fd = fd

    def read(self, size: int) -> bytes:
        return os.read(self.fd, size)


_readers: dict[int, LineReader[bytes]] = {}


def get_next_line(fd: int) -> bytes | None:
    """The next line read from file descriptor ``fd``, or ``None``.

    Each descriptor keeps its own leftover data between calls. ``None`` is
    returned at end of input and for descriptors that cannot be read.
    """
    if fd < 0 or fd >= MAX_FD:
        return None
    try:
        os.read(fd, 0)
    except OSError:
        _readers.pop(fd, None)
        return None
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(_FdStream(fd), BUFFER_SIZE)
    try:
        line = reader.next_line()
    except OSError:
        line = None
    if line is None:
        _readers.pop(fd, None)
    return line