"""Conversions between decimal text and integers."""

from .chars import is_digit, is_space

INT_MIN = -2147483648
INT_MAX = 2147483647


def atoi(text: str) -> int:
    """Parse a decimal integer.

    Leading whitespace and a single ``+`` or ``-`` are accepted. The digits
    must run to the end of the text; anything else after them makes the whole
    conversion yield 0.
    """
    rest = text
    while rest and is_space(rest[0]):
        rest = rest[1:]
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    value = 0
    consumed = 0
    for ch in rest:
        if not is_digit(ch):
            break
        value = value * 10 + (ord(ch) - ord("0"))
        consumed += 1
    if consumed == len(rest):
        return value * sign
    return 0


def itoa(n: int) -> str:
    """Decimal text of ``n``, which must fit in a signed 32-bit integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    if n < 0:
        return "-" + str(-n)
    return str(n)