"""Operations on raw byte buffers."""

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")


def _check_span(buf: Bytes, offset: int, n: int) -> None:
    _check_count(n)
    if offset < 0 or offset + n > len(buf):
        raise IndexError(
            f"span of {n} bytes at offset {offset} exceeds buffer of {len(buf)} bytes"
        )


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_span(buf, 0, n)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    _check_count(count)
    _check_count(size)
    return bytearray(count * size)


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` taken as an unsigned byte."""
    _check_span(buf, 0, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def memcpy(dst: Optional[bytearray], src: Optional[Bytes], n: int) -> Optional[bytearray]:
    """Copy the first ``n`` bytes of ``src`` into ``dst`` and return ``dst``.

    When both buffers are missing nothing is copied and ``None`` comes back.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("both buffers are required")
    _check_span(src, 0, n)
    _check_span(dst, 0, n)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled as if the source were copied first.
    """
    _check_span(buf, src, n)
    _check_span(buf, dst, n)
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: Bytes, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` within the first ``n`` bytes."""
    _check_span(data, 0, n)
    target = c & 0xFF
    for offset, byte in enumerate(bytes(data[:n])):
        if byte == target:
            return offset
    return None


def memcmp(a: Bytes, b: Bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair."""
    _check_span(a, 0, n)
    _check_span(b, 0, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0