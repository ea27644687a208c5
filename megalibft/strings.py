"""String helpers that mirror the classic C string routines.

Positions come back as indices (or ``None`` when nothing is found) instead of
pointers. Functions that fill a buffer return the new string together with the
length the routine reports.
"""

from typing import Callable, List, Optional, Tuple, Union

Char = Union[str, int]


def _as_char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: Optional[str]) -> int:
    """Length of ``s``; a missing string has length 0."""
    return 0 if s is None else len(s)


def strchr(s: Optional[str], c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for the NUL character finds the end of the string.
    """
    if s is None:
        return None
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``; the NUL character finds the end."""
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def _code_at(s: str, i: int) -> int:
    return ord(s[i]) if i < len(s) else 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return -1, 0 or 1."""
    _check_count("n", n)
    for i in range(min(n, max(len(s1), len(s2)))):
        a, b = _code_at(s1, i), _code_at(s2, i)
        if a != b:
            return 1 if a > b else -1
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first pair of differing codes, the end counting as 0."""
    for a, b in zip(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    shorter = min(len(s1), len(s2))
    return _code_at(s1, shorter) - _code_at(s2, shorter)


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    _check_count("length", length)
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strlcpy(src: Optional[str], size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``.
    """
    _check_count("size", size)
    if src is None:
        return "", 0
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the routine reports: the length
    it tried to create, or ``len(src) + size`` when ``dest`` already fills the
    buffer.
    """
    _check_count("size", size)
    dlen = len(dest)
    if size == 0:
        return dest, len(src)
    if size <= dlen:
        return dest, len(src) + size
    return dest + src[: size - dlen - 1], dlen + len(src)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Up to ``length`` characters of ``s`` from ``start``; empty past the end."""
    _check_count("start", start)
    _check_count("length", length)
    if s is None:
        return None
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one counts as empty, both missing gives None."""
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters of ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        return None
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: Char) -> List[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    ch = _as_char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: Optional[str], f: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    if s is None or f is None:
        return None
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(
    chars: Optional[List[str]],
    f: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call ``f(index, char)`` on each item of ``chars`` in place.

    A returned character replaces the item; ``None`` leaves it unchanged.
    """
    if chars is None or f is None:
        return
    for i, ch in enumerate(chars):
        replacement = f(i, ch)
        if replacement is not None:
            chars[i] = replacement