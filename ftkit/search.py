"""Searching, measuring, comparing and bounded copying of NUL-terminated strings.

Every function treats its string arguments the C way: they end at the first
NUL character, whatever follows it. Text may be ``str`` or a bytes-like
object. Positions are returned as indices rather than pointers, and ``None``
stands for "not found".
"""

from __future__ import annotations

from itertools import chain, islice, repeat
from typing import Iterator, Optional, Union

Text = Union[str, bytes, bytearray, memoryview]
Char = Union[int, str]


def _terminated(s: Text) -> Union[str, bytes]:
    """Return ``s`` cut at its first NUL, as ``str`` or ``bytes``."""
    if isinstance(s, str):
        nul = s.find("\0")
    else:
        s = bytes(s)
        nul = s.find(b"\0")
    return s if nul < 0 else s[:nul]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _unit(text: Union[str, bytes], code: int) -> Union[str, bytes]:
    return chr(code) if isinstance(text, str) else bytes([code])


def _codes(text: Union[str, bytes]) -> Iterator[int]:
    return map(ord, text) if isinstance(text, str) else iter(text)


def strlen(s: Text) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: Text, c: Char) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    ``c`` is reduced modulo 256. Searching for NUL finds the terminator,
    whose index is the string's length.
    """
    text = _terminated(s)
    target = _code(c) % 256
    if target == 0:
        return len(text)
    index = text.find(_unit(text, target))
    return None if index < 0 else index


def strrchr(s: Text, c: Char) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    As with :func:`strchr`, NUL matches the terminator.
    """
    text = _terminated(s)
    target = _code(c) % 256
    if target == 0:
        return len(text)
    index = text.rfind(_unit(text, target))
    return None if index < 0 else index


def strnstr(big: Optional[Text], little: Text, length: int) -> Optional[int]:
    """Find ``little`` wholly within the first ``length`` characters of ``big``.

    Returns the index of the match, or None. An empty ``little`` matches at 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if big is None and not length:
        return None
    needle = _terminated(little)
    if not needle:
        return 0
    if big is None:
        raise TypeError("strnstr needs a string to search")
    haystack = _terminated(big)[:length]
    index = haystack.find(needle)
    return None if index < 0 else index


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch.

    The terminator takes part in the comparison, so a shorter string sorts
    before a longer one that it prefixes.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    first = chain(_codes(_terminated(s1)), repeat(0))
    second = chain(_codes(_terminated(s2)), repeat(0))
    for a, b in islice(zip(first, second), n):
        if a != b or a == 0:
            return a - b
    return 0


def _check_size(dst: Union[bytearray, memoryview], size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dst):
        raise IndexError(f"destination holds {len(dst)} bytes, size is {size}")


def strlcpy(dst: Union[bytearray, memoryview], src: Text, size: int) -> int:
    """Copy ``src`` into ``dst``, writing at most ``size`` bytes including the NUL.

    Returns the length of ``src``; a result of ``size`` or more means the copy
    was truncated.
    """
    source = _terminated(src)
    if isinstance(source, str):
        raise TypeError("strlcpy copies bytes, not str")
    if not size:
        return len(source)
    _check_size(dst, size)
    count = min(len(source), size - 1)
    dst[:count] = source[:count]
    dst[count] = 0
    return len(source)


def strlcat(dst: Optional[Union[bytearray, memoryview]], src: Optional[Text], size: int) -> int:
    """Append ``src`` to the string in ``dst``, keeping the total under ``size`` bytes.

    Returns the length the full concatenation would have. When ``size`` does
    not exceed the current length of ``dst``, nothing is written and
    ``len(src) + size`` is returned.
    """
    if (dst is None or src is None) and not size:
        return 0
    if dst is None or src is None:
        raise TypeError("strlcat needs both a source and a destination buffer")
    source = _terminated(src)
    if isinstance(source, str):
        raise TypeError("strlcat copies bytes, not str")
    len_dst = strlen(dst)
    if size <= len_dst:
        return len(source) + size
    _check_size(dst, size)
    count = min(len(source), size - 1 - len_dst)
    dst[len_dst:len_dst + count] = source[:count]
    dst[len_dst + count] = 0
    return len_dst + len(source)