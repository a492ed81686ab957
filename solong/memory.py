"""Byte-buffer operations with the semantics of the C memory functions."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_count(count: int, *buffers: bytes | bytearray | memoryview) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    for buffer in buffers:
        if count > len(buffer):
            raise IndexError(f"count {count} exceeds buffer of {len(buffer)} bytes")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first ``count`` bytes with the low byte of ``value``."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> bytearray:
    """Zero the first ``count`` bytes."""
    return memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of ``count * size`` bytes.

    Raises ``OverflowError`` when the total does not fit in a ``size_t``.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise OverflowError(f"{count} * {size} overflows size_t")
    return bytearray(total)


def memchr(data: bytes | bytearray, value: int, count: int) -> int | None:
    """Index of the first byte equal to the low byte of ``value`` among ``count``."""
    _check_count(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return index if index >= 0 else None


def memcmp(first: bytes | bytearray, second: bytes | bytearray, count: int) -> int:
    """Difference of the first unequal bytes within ``count``, or 0."""
    _check_count(count, first, second)
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: bytes | bytearray, count: int) -> bytearray:
    """Copy ``count`` bytes from ``src`` to the start of ``dst``."""
    _check_count(count, dst, src)
    dst[:count] = src[:count]
    return dst


def memmove(
    buffer: bytearray, dst_offset: int, src_offset: int, count: int
) -> bytearray:
    """Copy ``count`` bytes inside ``buffer``; the regions may overlap."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if count < 0:
        raise ValueError("count must not be negative")
    if max(dst_offset, src_offset) + count > len(buffer):
        raise IndexError("region lies outside the buffer")
    buffer[dst_offset : dst_offset + count] = bytes(
        buffer[src_offset : src_offset + count]
    )
    return buffer