"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from ftkit.conversions import itoa

Text = Union[str, bytes, bytearray, memoryview]


def _write(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _encode(s: Text) -> bytes:
    """Return ``s`` as bytes, cut at its first NUL."""
    if isinstance(s, str):
        return s.split("\0", 1)[0].encode("utf-8")
    data = bytes(s)
    return data.split(b"\0", 1)[0]


def put_char(c: Union[int, str, bytes], fd: int) -> None:
    """Write one character to ``fd``; an int is truncated to a byte."""
    if isinstance(c, int):
        data = bytes([c & 0xFF])
    elif isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes(c)
        if len(data) != 1:
            raise ValueError(f"expected a single byte, got {data!r}")
    _write(fd, data)


def put_str(s: Optional[Text], fd: int) -> None:
    """Write ``s`` to ``fd``. Nothing is written for None or descriptor 0."""
    if s is None or not fd:
        return
    data = _encode(s)
    if data:
        _write(fd, data)


def put_endl(s: Optional[Text], fd: int) -> None:
    """Write ``s`` and a newline to ``fd``. Nothing is written for None or descriptor 0."""
    if s is None or not fd:
        return
    _write(fd, _encode(s) + b"\n")


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal text of the 32-bit int ``n`` to ``fd``."""
    _write(fd, itoa(n).encode("ascii"))