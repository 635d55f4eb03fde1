"""Byte-buffer operations: fill, copy, move, search and compare."""

from __future__ import annotations

_CALLOC_LIMIT = 65536


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_length(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def memcpy(dest: bytearray | None, src: bytes | None, n: int) -> bytearray | None:
    """Copy ``n`` bytes from ``src`` into the start of ``dest``.

    With neither buffer given, nothing is copied and ``None`` comes back.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise ValueError("both buffers are required")
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("length must not be negative")
    if max(dest_offset, src_offset) + n > len(buf):
        raise ValueError("region extends past the end of the buffer")
    if n:
        buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(data: bytes, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` among the first ``n``, or ``None``."""
    _check_length(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch, else 0."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises MemoryError when either factor exceeds 65536 while the other is non-zero.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if (size != 0 and count > _CALLOC_LIMIT) or (size > _CALLOC_LIMIT and count != 0):
        raise MemoryError(f"refusing to allocate {count} x {size} bytes")
    return bytearray(count * size)