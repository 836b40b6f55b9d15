"""An ordered list of single characters."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator
from typing import TextIO


class CharList:
    """A queue of characters that can be appended to and joined."""

    def __init__(self) -> None:
        self._chars: deque[str] = deque()

    def add_char(self, c: str) -> None:
        """Append a single character."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        self._chars.append(c)

    def add_string(self, text: str) -> None:
        """Append each character of ``text`` up to any NUL character."""
        for c in text.split("\0", 1)[0]:
            self.add_char(c)

    def print_chars(self, stream: TextIO | None = None) -> None:
        """Write each character on a line of its own."""
        out = sys.stdout if stream is None else stream
        for c in self._chars:
            out.write(f"{c}\n")

    def __str__(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def clear(self) -> None:
        """Remove every character."""
        self._chars.clear()