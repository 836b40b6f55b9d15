"""Running a table of dining philosophers and watching their states."""

from __future__ import annotations

import getopt
import re
import sys
from dataclasses import dataclass

from sysexamples.diners import (
    DEFAULT_ROUNDS,
    MAIN_THREAD_SLEEP_TIME,
    MAX_DINERS,
    MAX_EAT_TIME,
    MAX_THINK_TIME,
    Diner,
    DiningPolicy,
    Fork,
    get_dining_policy,
)
from sysexamples.millisleep import millisecond_sleep

_PROG = "diner-demo"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Configuration:
    """Settings given on the command line."""

    num_philosophers: int = 5
    think_time: int = 2
    eat_time: int = 3
    enumerate_resources: bool = False


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_command_line(argv: list[str] | None = None) -> Configuration:
    """Parse ``-n``, ``-t``, ``-e`` and ``-r``; raise ValueError on bad input."""
    args = sys.argv[1:] if argv is None else list(argv)
    config = Configuration()
    try:
        options, _ = getopt.gnu_getopt(args, "n:t:e:r")
    except getopt.GetoptError as error:
        raise ValueError(
            f"Usage: {_PROG} [-n num_philosophers] [-t think_time] [-e eat_time] [-r]"
        ) from error
    for flag, value in options:
        if flag == "-n":
            config.num_philosophers = _atoi(value)
            if not 1 <= config.num_philosophers <= MAX_DINERS:
                raise ValueError(f"Number of philosophers must be between 1 and {MAX_DINERS}")
        elif flag == "-t":
            config.think_time = _atoi(value)
            if not 0 <= config.think_time <= MAX_THINK_TIME:
                raise ValueError(f"Think time must be between 0 and {MAX_THINK_TIME} seconds")
        elif flag == "-e":
            config.eat_time = _atoi(value)
            if not 0 <= config.eat_time <= MAX_EAT_TIME:
                raise ValueError(f"Eat time must be between 0 and {MAX_EAT_TIME} seconds")
        elif flag == "-r":
            config.enumerate_resources = True
    return config


def make_table(count: int, policy: DiningPolicy, rounds: int = DEFAULT_ROUNDS) -> list[Diner]:
    """Seat ``count`` diners, each sharing a fork with its neighbours.

    Under ``FORK_REORDERING`` a diner whose left fork has the higher number
    takes its forks in the opposite order, which prevents deadlock.
    """
    if count < 1:
        raise ValueError(f"at least one diner is needed: {count}")
    forks = [Fork(i) for i in range(count)]
    diners = []
    for i in range(count):
        first, second = i, (i + 1) % count
        if policy is DiningPolicy.FORK_REORDERING and first > second:
            print(f"Reordered forks {first} and {second}")
            first, second = second, first
        diners.append(Diner(i, forks[first], forks[second], rounds))
    return diners


def main(argv: list[str] | None = None) -> int:
    """Run the table and print every diner's state until all are done."""
    try:
        config = parse_command_line(argv)
    except ValueError as error:
        sys.stderr.write(f"{error}\n")
        return 1

    print(f"Number of Philosophers: {config.num_philosophers}")
    print(f"Think Time: {config.think_time} seconds")
    print(f"Eat Time: {config.eat_time} seconds")
    print(f"Enumerate Resources: {'Yes' if config.enumerate_resources else 'No'}")

    diners = make_table(MAX_DINERS, get_dining_policy())
    for i, diner in enumerate(diners):
        print(f"Creating thread {i}", end="")
        diner.start()

    while True:
        states = [diner.state for diner in diners]
        print("".join(states), flush=True)
        millisecond_sleep(MAIN_THREAD_SLEEP_TIME)
        if all(state == "d" for state in states):
            break

    for diner in diners:
        diner.join()
        print(f"Diner id {diner.id} exited normally; state = {diner.state}")
    return 0


if __name__ == "__main__":
    sys.exit(main())