"""Small demonstration command that splits a sentence into words."""

from __future__ import annotations

from typing import List, Optional

from ftkit.text import split

_SENTENCE = "ola eu sou o bruno"


def main(argv: Optional[List[str]] = None) -> int:
    """Print the first five words of the sample sentence, one per line."""
    words = split(_SENTENCE, " ")
    for index, word in enumerate(words[:5]):
        print(f"[{index}]: {word}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())