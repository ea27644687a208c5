"""Reading a byte stream one line at a time."""

import os
from typing import BinaryIO, Iterator, Optional, Union

BUFFER_SIZE = 1024
OPEN_MAX = 1024

Source = Union[int, BinaryIO]


class LineReader:
    """Reads newline-terminated lines from a file descriptor or binary stream.

    Each line keeps its trailing newline; the last line of the input may lack one.
    """

    def __init__(self, fd: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(fd, int) and not isinstance(fd, bool):
            if fd < 0 or fd > OPEN_MAX:
                raise ValueError(f"invalid file descriptor {fd}")
        elif not callable(getattr(fd, "read", None)):
            raise TypeError("expected a file descriptor or a readable binary stream")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._fd = fd
        self._buffer_size = buffer_size
        self._stash = b""

    def _read_chunk(self) -> bytes:
        if isinstance(self._fd, int):
            return os.read(self._fd, self._buffer_size)
        data = self._fd.read(self._buffer_size)
        return bytes(data) if data else b""

    def read_line(self) -> Optional[bytes]:
        """The next line, or ``None`` once the input is exhausted."""
        while b"\n" not in self._stash:
            try:
                chunk = self._read_chunk()
            except OSError:
                self._stash = b""
                raise
            if not chunk:
                line, self._stash = self._stash, b""
                return line or None
            self._stash += chunk
        line, _, rest = self._stash.partition(b"\n")
        self._stash = rest
        return line + b"\n"

    def __iter__(self) -> Iterator[bytes]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line