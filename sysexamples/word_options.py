"""Command-line options for a word-counting program."""

from __future__ import annotations

import getopt
import re
import sys
from dataclasses import dataclass

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_SHORT_OPTIONS = "l:w:n:s:pct"
_TAKES_ARGUMENT = "lwns"
_REPORTS_MISSING_ARGUMENT = "wln"


class OptionError(ValueError):
    """Raised when the command line holds an unknown or incomplete option."""


@dataclass
class WordOptions:
    """Settings for a word-counting run."""

    how_many: int = 20
    last_n_words: int = 100
    min_length: int = 3
    every_steps: int = 1
    ignore_case: bool = False
    print_options: bool = False
    do_timing: bool = False

    def describe(self) -> str:
        """Return a one-line summary of the options."""
        return (
            f"how_many: {self.how_many}, last_n_words: {self.last_n_words}, "
            f"min_length: {self.min_length}, every_steps: {self.every_steps}, "
            f"ignore_case: {int(self.ignore_case)}"
        )


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _error_message(opt: str) -> str:
    if opt in _REPORTS_MISSING_ARGUMENT:
        return f"Option -{opt} requires an argument."
    if len(opt) == 1 and " " <= opt <= "~":
        return f"Unknown option `-{opt}'."
    return f"Unknown option character `\\x{ord(opt[0]) if opt else 0:x}'."


def parse_word_options(argv: list[str] | None = None) -> WordOptions:
    """Parse ``-l -w -n -s`` (with values) and ``-p -c -t`` (flags)."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        parsed, _ = getopt.gnu_getopt(args, _SHORT_OPTIONS)
    except getopt.GetoptError as error:
        raise OptionError(_error_message(error.opt)) from error

    options = WordOptions()
    for flag, value in parsed:
        if flag == "-l":
            options.min_length = _atoi(value)
        elif flag == "-w":
            options.last_n_words = _atoi(value)
        elif flag == "-n":
            options.how_many = _atoi(value)
        elif flag == "-s":
            options.every_steps = _atoi(value)
        elif flag == "-c":
            options.ignore_case = True
        elif flag == "-p":
            options.print_options = True
        elif flag == "-t":
            options.do_timing = True
    return options


def main(argv: list[str] | None = None) -> int:
    """Parse the options and print them when ``-p`` is given."""
    try:
        options = parse_word_options(argv)
    except OptionError as error:
        sys.stderr.write(f"{error}\n")
        return 1
    if options.print_options:
        sys.stderr.write(f"{options.describe()}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())