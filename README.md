# ftkit

A small toolkit of low-level helpers that follow C library conventions:
strings end at their first NUL character, positions come back as indices
instead of pointers, and `None` means "not found".

- `ftkit.memory` – byte-buffer operations on `bytearray` or `memoryview`
  objects: `memset`, `bzero`, `memcpy`, `memmove`, `memchr` (index of a byte
  or `None`), `memcmp` (difference of the first unequal pair) and `calloc`
  (a zeroed `bytearray`; a zero-byte request gives one byte, and a total past
  the 64-bit size limit raises `OverflowError`).
- `ftkit.chars` – ASCII classification and case mapping for a one-character
  `str` or an integer code: `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`,
  `is_print`, `is_sign`, `to_lower`, `to_upper`.
- `ftkit.search` – searching, measuring, comparing and bounded copying:
  `strchr`, `strrchr`, `strnstr`, `strncmp`, `strlen`, and `strlcpy` /
  `strlcat`, which write bytes into a `bytearray` and return the length the
  full result would have.
- `ftkit.conversions` – `atoi` and `atol` parse a leading decimal integer
  (leading whitespace and one sign allowed, out-of-range values wrap to 32 or
  64 bits); `itoa` formats a 32-bit int. The limits `INT_MIN`, `INT_MAX`,
  `LONG_MIN`, `LONG_MAX` and `ULONG_MAX` are exported too.
- `ftkit.text` – building new strings: `split` (drops empty pieces),
  `strdup`, `striteri` (calls a function on each element of a mutable
  sequence and stores any non-`None` result back), `strjoin`, `strmapi`,
  `strtrim`, `substr`.
- `ftkit.output` – writing to a file descriptor with `os.write`: `put_char`,
  `put_str`, `put_endl`, `put_nbr`. `put_str` and `put_endl` write nothing
  for `None` or descriptor 0.
- `ftkit.linkedlist` – a singly linked list: `Node` and `LinkedList`, with
  `add_front`, `add_back`, `last`, `clear`, `iterate`, `map`, `len()` and
  iteration over contents.
- `ftkit.stack` – a doubly linked stack: `StackNode` and `Stack`, with
  `push`, `pop`, `swap_first_node`, `rotate`, `transfer_top`, `detach_node`,
  `includes`, `push_unique`, `destroy`, `len()` and iteration from top to
  bottom.
- `ftkit.dlist` – a doubly linked list: `DListNode` and `DList`, with `push`,
  `push_head`, `detach_node`, `len()` and iteration from head to tail.

No third-party dependencies are required.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Quick look

```python
from ftkit.text import split, strjoin
from ftkit.conversions import atoi, itoa
from ftkit.stack import Stack, StackNode

split("ola eu sou o bruno", " ")   # ['ola', 'eu', 'sou', 'o', 'bruno']
strjoin("foo", "bar")              # 'foobar'
atoi("   -42abc")                  # -42
itoa(-2147483648)                  # '-2147483648'

stack = Stack()
for value in (1, 2, 3):
    stack.push(StackNode(value))
stack.rotate()                     # moves the top node to the bottom
list(stack)                        # [2, 1, 3]
```

## Demo command

The package installs a small command that splits a sample sentence on spaces
and prints each word with its index:

```
ftkit-demo
```

```
[0]: ola
[1]: eu
[2]: sou
[3]: o
[4]: bruno
```

The command takes no options and always prints the same sentence.