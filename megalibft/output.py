"""Writing characters, strings and numbers to a text stream."""

import sys
from typing import Optional, TextIO, Union

Char = Union[str, int]


def _stream(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


def _as_char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def put_char(c: Char, out: Optional[TextIO] = None) -> None:
    """Write one character; an integer code is taken as an unsigned byte."""
    _stream(out).write(_as_char(c))


def put_str(s: Optional[str], out: Optional[TextIO] = None) -> None:
    """Write ``s``; a missing string writes nothing."""
    if s:
        _stream(out).write(s)


def put_endl(s: Optional[str], out: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; a missing string writes only the newline."""
    stream = _stream(out)
    if s:
        stream.write(s)
    stream.write("\n")


def put_nbr(n: int, out: Optional[TextIO] = None) -> None:
    """Write the decimal form of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    _stream(out).write(str(n))