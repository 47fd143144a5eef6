"""Byte buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = (1 << 64) - 1


def _check_length(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"length {n} exceeds buffer of {len(buffer)} bytes")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to ``value`` (mod 256)."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the total would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size > SIZE_MAX // count:
        raise OverflowError("count * size overflows")
    return bytearray(count * size)


def memchr(data: Buffer, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` (mod 256) in ``data[:n]``."""
    _check_length(n, data)
    target = value & 0xFF
    return next(
        (index for index, byte in enumerate(bytes(data[:n])) if byte == target),
        None,
    )


def memcmp(first: Buffer, second: Buffer, n: int) -> int:
    """Difference of the first differing bytes within ``n`` bytes, else 0."""
    _check_length(n, first, second)
    for left, right in zip(bytes(first[:n]), bytes(second[:n])):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes from offset ``src`` to offset ``dst`` of ``buffer``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(length)
    if max(dst, src) + length > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    buffer[dst:dst + length] = bytes(buffer[src:src + length])
    return buffer