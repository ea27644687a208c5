"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

import sys
from typing import Any, Iterator

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _require_int(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return int(value)


def _to_int32(value: Any) -> int:
    n = _require_int(value) & _UINT_MASK
    return n - (1 << 32) if n >= (1 << 31) else n


def format_hex(n: int, upper: bool) -> str:
    """Hexadecimal form of ``n`` taken as an unsigned 32-bit integer."""
    text = format(_require_int(n) & _UINT_MASK, "x")
    return text.upper() if upper else text


def format_unsigned(n: int) -> str:
    """Decimal form of ``n`` taken as an unsigned 32-bit integer."""
    return str(_require_int(n) & _UINT_MASK)


def format_pointer(n: Any) -> str:
    """``0x`` followed by the lower-case hexadecimal address; ``None`` is address 0."""
    address = 0 if n is None else _require_int(n) & _POINTER_MASK
    return "0x" + format(address, "x")


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_require_int(value) & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec in "di":
        return str(_to_int32(_next_arg(args)))
    if spec == "c":
        return _format_char(_next_arg(args))
    if spec == "s":
        return _format_str(_next_arg(args))
    if spec == "u":
        return format_unsigned(_next_arg(args))
    if spec == "x":
        return format_hex(_next_arg(args), False)
    if spec == "X":
        return format_hex(_next_arg(args), True)
    if spec == "p":
        return format_pointer(_next_arg(args))
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args``.

    Unknown conversions produce nothing and consume no argument; a lone ``%``
    at the end of the format ends the output.
    """
    pieces = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded format to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)