"""Building new strings from existing ones: splitting, joining, trimming and mapping.

String arguments are read the C way and end at the first NUL character.
"""

from __future__ import annotations

from typing import Any, Callable, List, MutableSequence


def _cstr(s: str, name: str = "string") -> str:
    """Return ``s`` cut at its first NUL, rejecting anything that is not ``str``."""
    if not isinstance(s, str):
        raise TypeError(f"{name} must be str, got {type(s).__name__}")
    return s.split("\0", 1)[0]


def _single_char(c: str) -> str:
    if not isinstance(c, str):
        raise TypeError(f"separator must be str, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"separator must be a single character, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    text = _cstr(s)
    sep = _single_char(sep)
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its terminator."""
    return _cstr(s)


def striteri(s: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Call ``f(index, item)`` on each element of ``s`` before its terminator.

    ``s`` is a mutable sequence such as a ``bytearray`` or a list of
    characters. When ``f`` returns something other than None, that value
    replaces the element in place. Iteration stops at a 0 byte or NUL.
    """
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence")
    for index, item in enumerate(s):
        if item == 0 and not isinstance(item, bool) or item == "\0":
            break
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _cstr(s1, "first string") + _cstr(s2, "second string")


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string of ``f(index, char)`` for each character of ``s``."""
    text = _cstr(s)
    return "".join(f(index, ch) for index, ch in enumerate(text))


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    text = _cstr(s)
    chars = _cstr(charset, "character set")
    return text.strip(chars)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A ``start`` past the end of ``s`` gives an empty string.
    """
    text = _cstr(s)
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]