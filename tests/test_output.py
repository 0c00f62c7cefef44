import os

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.output import put_char, put_endl, put_nbr, put_str


def capture(action):
    read_end, write_end = os.pipe()
    try:
        action(write_end)
    finally:
        os.close(write_end)
    with os.fdopen(read_end, "rb") as reader:
        return reader.read()


def capture_on_descriptor_zero(action):
    """Run action with descriptor 0 redirected into a pipe; return what reached it."""
    read_end, write_end = os.pipe()
    try:
        saved = os.dup(0)
    except OSError:
        saved = None
    try:
        os.dup2(write_end, 0)
        os.close(write_end)
        action()
    finally:
        if saved is None:
            os.close(0)
        else:
            os.dup2(saved, 0)
            os.close(saved)
    with os.fdopen(read_end, "rb") as reader:
        return reader.read()


def test_put_char_str_and_int():
    assert capture(lambda fd: put_char("A", fd)) == b"A"
    assert capture(lambda fd: put_char(ord("z"), fd)) == b"z"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        capture(lambda fd: put_char("ab", fd))


def test_put_str():
    assert capture(lambda fd: put_str("hello", fd)) == b"hello"


def test_put_str_stops_at_nul():
    assert capture(lambda fd: put_str("ab\0cd", fd)) == b"ab"


def test_put_str_none_writes_nothing():
    assert capture(lambda fd: put_str(None, fd)) == b""


def test_put_str_descriptor_zero_writes_nothing():
    written = capture_on_descriptor_zero(
        lambda: (put_str("hello", 0), put_endl("hello", 0))
    )
    assert written == b""


@given(st.text().filter(lambda t: "\0" not in t))
def test_put_str_round_trip(text):
    assert capture(lambda fd: put_str(text, fd)).decode("utf-8") == text


def test_put_endl():
    assert capture(lambda fd: put_endl("line", fd)) == b"line\n"


def test_put_endl_empty_string_writes_newline():
    assert capture(lambda fd: put_endl("", fd)) == b"\n"


def test_put_endl_none_writes_nothing():
    assert capture(lambda fd: put_endl(None, fd)) == b""


def test_put_nbr_fixed_values():
    assert capture(lambda fd: put_nbr(0, fd)) == b"0"
    assert capture(lambda fd: put_nbr(-2147483648, fd)) == b"-2147483648"
    assert capture(lambda fd: put_nbr(2147483647, fd)) == b"2147483647"


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_put_nbr_round_trip(n):
    assert int(capture(lambda fd: put_nbr(n, fd))) == n


def test_put_nbr_out_of_range():
    with pytest.raises(OverflowError):
        capture(lambda fd: put_nbr(2**31, fd))


def test_writes_concatenate():
    written = capture(
        lambda fd: (
            put_str("n=", fd),
            put_nbr(42, fd),
            put_char(" ", fd),
            put_endl("ok", fd),
        )
    )
    assert written == b"n=42 ok\n"