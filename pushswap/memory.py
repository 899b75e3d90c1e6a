"""Byte-buffer helpers working on bytearray objects."""

from __future__ import annotations

from typing import Optional


def _check_length(length: int, *buffers) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(f"length {length} exceeds buffer of size {len(buf)}")


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` truncated to a byte."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buf``."""
    return memset(buf, 0, length)


def memcpy(dst: Optional[bytearray], src, length: int) -> Optional[bytearray]:
    """Copy ``length`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    if length == 0:
        return dst
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise ValueError("cannot copy to or from a missing buffer")
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled correctly.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if max(dst, src) + length > len(buf):
        raise ValueError("region exceeds buffer")
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def memcmp(first, second, length: int) -> int:
    """Compare the first ``length`` bytes; return the difference at the first mismatch or 0."""
    _check_length(length, first, second)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def memchr(buf, value: int, length: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_length(length, buf)
    target = value & 0xFF
    found = bytes(buf[:length]).find(bytes([target]))
    return None if found < 0 else found


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)