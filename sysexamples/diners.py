"""Forks and diners for the dining-philosophers demonstration."""

from __future__ import annotations

import os
import random
import threading
from collections.abc import Mapping
from enum import Enum

from sysexamples.millisleep import millisecond_sleep

MAX_DINERS = 5
MAX_THINK_TIME = 7
MAX_EAT_TIME = 7
MAIN_THREAD_SLEEP_TIME = 51
DEFAULT_ROUNDS = 1000

THINKING = "t"
EATING = "e"
DONE = "d"


class DiningPolicy(Enum):
    """How diners order the forks they pick up."""

    NO_FORK_REORDERING = 0
    FORK_REORDERING = 1


class Fork:
    """A shared fork guarded by a lock."""

    def __init__(self, value: int) -> None:
        self.id = chr(ord("0") + value)
        self._lock = threading.Lock()

    def pickup(self) -> None:
        """Take the fork, waiting until it is free."""
        self._lock.acquire()

    def putdown(self) -> None:
        """Release the fork."""
        self._lock.release()


class Diner:
    """A philosopher that alternates thinking and eating on its own thread.

    ``state`` is ``"t"`` while thinking, ``"e"`` while eating, the id of a
    fork while waiting for it, and ``"d"`` once all rounds are done.
    """

    def __init__(self, diner_id: int, left: Fork, right: Fork, rounds: int = DEFAULT_ROUNDS) -> None:
        self.id = chr(ord("0") + diner_id)
        self.state = THINKING
        self.left = left
        self.right = right
        self.rounds = rounds
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Start the diner's thread."""
        self._thread = threading.Thread(target=self.run, name=f"diner-{self.id}", daemon=True)
        self._thread.start()

    def join(self) -> None:
        """Wait for the diner's thread to finish."""
        if self._thread is None:
            raise RuntimeError(f"diner {self.id} was never started")
        self._thread.join()

    def think(self) -> None:
        """Think for a short random time."""
        self.state = THINKING
        millisecond_sleep(random.randrange(MAX_THINK_TIME))

    def eat(self) -> None:
        """Eat for a short random time."""
        self.state = EATING
        millisecond_sleep(random.randrange(MAX_EAT_TIME))

    def run(self) -> None:
        """Think, take both forks, eat and put them back, ``rounds`` times."""
        for _ in range(self.rounds):
            self.think()
            self.state = self.left.id
            millisecond_sleep(1)
            self.left.pickup()
            self.state = self.right.id
            millisecond_sleep(1)
            self.right.pickup()
            self.eat()
            self.left.putdown()
            self.right.putdown()
        self.state = DONE


def get_dining_policy(environ: Mapping[str, str] | None = None) -> DiningPolicy:
    """Read the policy from ``DINING_POLICY``; ``avoid_deadlock`` reorders forks."""
    env = os.environ if environ is None else environ
    if env.get("DINING_POLICY") == "avoid_deadlock":
        return DiningPolicy.FORK_REORDERING
    return DiningPolicy.NO_FORK_REORDERING