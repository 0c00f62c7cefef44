"""Conversions between decimal text and fixed-width integers."""

from __future__ import annotations

from ftkit.chars import is_digit
from ftkit.search import strncmp

INT_MAX = 2147483647
INT_MIN = -2147483648
LONG_MAX = 9223372036854775807
LONG_MIN = -9223372036854775808
ULONG_MAX = 18446744073709551615

_SPACES = " \t\n\v\f\r"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    span = 1 << bits
    value %= span
    return value - span if value >= span >> 1 else value


def _parse(text: str, bits: int) -> int:
    body = text.lstrip(_SPACES)
    sign = 1
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    digits = []
    for ch in body:
        if not is_digit(ch):
            break
        digits.append(ch)
    magnitude = int("".join(digits)) if digits else 0
    return _wrap(sign * magnitude, bits)


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit int.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Text with no digits gives 0, and values out of range wrap.
    """
    if strncmp("-2147483648", text, 11) == 0:
        return INT_MIN
    return _parse(text, 32)


def atol(text: str) -> int:
    """Parse a leading decimal integer as a 64-bit long; otherwise like :func:`atoi`."""
    if strncmp("-9223372036854775808", text, 20) == 0:
        return LONG_MIN
    return _parse(text, 64)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit int."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)