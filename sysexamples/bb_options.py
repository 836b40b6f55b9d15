"""Command-line options for the bounded-buffer demonstration."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, replace

NUM_SUPPLIERS = 1
NUM_CONSUMERS = 1
SUPPLIER_DELAY = 300
CONSUMER_DELAY = 1000
BB_SIZE = 100
GEN_COUNT = 2000

_PROG = "bounded-buffer"

_FIELDS = {
    "suppliers": "suppliers",
    "consumers": "consumers",
    "sdelay": "supplier_max_delay_ms",
    "cdelay": "consumer_max_delay_ms",
    "gen": "gen_count",
    "bsize": "bsize",
}
_NAMES = (*_FIELDS, "help")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class BBOptions:
    """Settings for a bounded-buffer run."""

    suppliers: int = NUM_SUPPLIERS
    consumers: int = NUM_CONSUMERS
    supplier_max_delay_ms: int = SUPPLIER_DELAY
    consumer_max_delay_ms: int = CONSUMER_DELAY
    gen_count: int = GEN_COUNT
    bsize: int = BB_SIZE

    def describe(self) -> str:
        """Return a one-line summary of the options."""
        return (
            f"options {{ suppliers: {self.suppliers}, consumers: {self.consumers}, "
            f"sdelay: {self.supplier_max_delay_ms}, cdelay: {self.consumer_max_delay_ms}, "
            f"gen count: {self.gen_count}, bsize: {self.bsize} }}"
        )


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _warn(message: str) -> None:
    sys.stderr.write(f"{_PROG}: {message}\n")


def _match(name: str) -> str | None:
    if name in _NAMES:
        return name
    candidates = [option for option in _NAMES if option.startswith(name)]
    if len(candidates) == 1:
        return candidates[0]
    if candidates:
        _warn(f"option '--{name}' is ambiguous")
    else:
        _warn(f"unrecognized option '--{name}'")
    return None


def _print_usage() -> None:
    sys.stderr.write(
        f"usage: {_PROG} [--suppliers SUPPLIERS] [--consumers CONSUMERS] "
        "[--sdelay SDELAY] [--cdelay CDELAY]  [--gen GEN]  [--bsize BSIZE]\n"
        f"\tSUPPLIERS is number of suppliers (default:  {NUM_SUPPLIERS})\n"
        f"\tCONSUMERS is number of consumers (default:  {NUM_CONSUMERS})\n"
        f"\tSDELAY is max random delay in millisconds (default: {SUPPLIER_DELAY})\n"
        f"\tCDELAY is max random delay in millisconds (default: {CONSUMER_DELAY})\n"
        f"\tBSIZE is bounded buffer size (default: {BB_SIZE})\n"
        f"\tGEN number of messages to generate per supplier (default: {GEN_COUNT})\n"
    )


def parse_bb_options(argv: list[str] | None = None) -> BBOptions:
    """Parse long options; unknown ones are reported and skipped.

    ``--help`` writes the usage text to stderr and exits with status 0.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    values: dict[str, int] = {}
    remaining = iter(args)
    for arg in remaining:
        if arg == "--":
            break
        if not arg.startswith("-") or arg == "-":
            continue
        if not arg.startswith("--"):
            _warn(f"invalid option -- '{arg[1]}'")
            continue
        name, has_inline, inline = arg[2:].partition("=")
        option = _match(name)
        if option is None:
            continue
        if option == "help":
            if has_inline:
                _warn("option '--help' doesn't allow an argument")
                continue
            _print_usage()
            raise SystemExit(0)
        if has_inline:
            value = inline
        else:
            value = next(remaining, None)
            if value is None:
                _warn(f"option '--{option}' requires an argument")
                break
        values[_FIELDS[option]] = _atoi(value)
    return replace(BBOptions(), **values)