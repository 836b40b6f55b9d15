"""A fixed-capacity FIFO shared between producer and consumer threads."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class Entry:
    """A value passed through a bounded buffer."""

    value: int


class BoundedBuffer:
    """A ring of ``size`` slots; ``put`` blocks when full, ``get`` when empty."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"buffer size must be positive: {size}")
        self.size = size
        self._slots: list[Entry | None] = [None] * size
        self.head = 0
        self.tail = 0
        self._lock = threading.Lock()
        self._has_space = threading.Condition(self._lock)
        self._has_items = threading.Condition(self._lock)

    def put(self, item: Entry) -> None:
        """Append ``item``, waiting until a slot is free."""
        with self._has_space:
            while self.tail - self.head >= self.size:
                self._has_space.wait()
            self._slots[self.tail % self.size] = item
            self.tail += 1
            self._has_items.notify()

    def get(self) -> Entry:
        """Remove and return the oldest entry, waiting until one exists."""
        with self._has_items:
            while self.tail == self.head:
                self._has_items.wait()
            slot = self.head % self.size
            entry = self._slots[slot]
            self._slots[slot] = None
            self.head += 1
            self._has_space.notify()
        return entry

    def __len__(self) -> int:
        with self._lock:
            return self.tail - self.head

    def describe(self) -> str:
        """Return a one-line summary of the buffer and its queued values."""
        with self._lock:
            values = ", ".join(
                str(self._slots[position % self.size].value)
                for position in range(self.head, self.tail)
            )
            return (
                f"buffer {{ size: {self.size}, length: {self.tail - self.head}, "
                f"head: {self.head}, tail: {self.tail}, entries : [{values}] }}"
            )

    def close(self) -> int:
        """Drop any entries still held and return how many there were."""
        with self._lock:
            unfreed = sum(1 for slot in self._slots if slot is not None)
            self._slots = [None] * self.size
        if unfreed:
            logger.warning("Warning: %d entries in bounded buffer not freed", unfreed)
        return unfreed