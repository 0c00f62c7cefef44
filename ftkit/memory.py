"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

# Largest value a size_t can hold; allocations past it overflow.
_SIZE_LIMIT = 2**64


def _check_count(buf: BytesLike, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > len(buf):
        raise IndexError(f"{name} holds {len(buf)} bytes, {n} requested")


def memset(buf: Union[bytearray, memoryview], c: int, n: int):
    """Fill the first ``n`` bytes of ``buf`` with ``c`` truncated to a byte."""
    _check_count(buf, n, "buffer")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Union[bytearray, memoryview], n: int):
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return memset(buf, 0, n)


def memcpy(dest: Optional[Union[bytearray, memoryview]], src: Optional[BytesLike], n: int):
    """Copy ``n`` bytes from ``src`` into ``dest``; return ``dest``.

    When both buffers are missing, nothing is copied and ``None`` is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a source and a destination buffer")
    _check_count(src, n, "source")
    _check_count(dest, n, "destination")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: Optional[Union[bytearray, memoryview]], src: Optional[BytesLike], n: int):
    """Copy ``n`` bytes from ``src`` into ``dest``, safe for overlapping views."""
    if dest is None and src is None:
        return None
    if dest is src:
        return dest
    # The snapshot taken by memcpy makes overlapping views safe.
    return memcpy(dest, src, n)


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_count(data, n, "data")
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    if n == 0:
        return 0
    _check_count(a, n, "first buffer")
    _check_count(b, n, "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer for ``nmemb`` elements of ``size`` bytes.

    A request for zero bytes gives a one-byte buffer. A total past the
    platform's size limit raises OverflowError.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if not nmemb or not size:
        return bytearray(1)
    total = nmemb * size
    if total >= _SIZE_LIMIT:
        raise OverflowError(f"{nmemb} * {size} bytes overflows the size limit")
    return bytearray(total)