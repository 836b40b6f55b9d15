"""Greeting a person by name."""

from __future__ import annotations

import sys
from typing import TextIO


def say_hi(person: str, stream: TextIO | None = None) -> None:
    """Write a greeting for ``person``."""
    out = sys.stdout if stream is None else stream
    out.write(f"Hello, {person}\n")


def main(argv: list[str] | None = None) -> int:
    """Greet George."""
    say_hi("George")
    return 0


if __name__ == "__main__":
    sys.exit(main())