"""Byte-buffer operations over bytes-like objects.

Counts that reach past the end of a buffer raise ValueError instead of
touching memory that is not there.
"""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_count(count: int, *buffers) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(f"count {count} exceeds buffer length {len(buffer)}")


def fill(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to the low byte of ``value``."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def zero(buffer: bytearray, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    return fill(buffer, 0, count)


def copy(dest: bytearray, src: bytes, count: int) -> bytearray:
    """Copy ``count`` bytes from the start of ``src`` to the start of ``dest``."""
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def move(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy ``count`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    The regions may overlap; the result is as if the source were copied
    to a temporary first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    if max(dest, src) + count > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    buffer[dest:dest + count] = bytes(buffer[src:src + count])
    return buffer


def find_byte(data: bytes, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of ``value`` in the
    first ``count`` bytes of ``data``, or None."""
    _check_count(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def compare(a: bytes, b: bytes, count: int) -> int:
    """Compare the first ``count`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of unequal bytes, or 0.
    """
    _check_count(count, a, b)
    for x, y in zip(a[:count], b[:count]):
        if x != y:
            return x - y
    return 0


def allocate_zeroed(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError if the product does not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise OverflowError("requested allocation size overflows")
    return bytearray(count * size)