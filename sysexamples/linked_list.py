"""A doubly linked list of non-zero integers with sentinel nodes."""

from __future__ import annotations

import sys
from collections.abc import Iterator


class _Node:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: int) -> None:
        if value == 0:
            raise ValueError("list values must be non-zero")
        self.value = value
        self.next: _Node | None = None
        self.prev: _Node | None = None


class LinkedList:
    """Doubly linked list bounded by a head and a tail sentinel."""

    def __init__(self) -> None:
        self._head = _Node(-1)
        self._tail = _Node(-1)
        self._head.next = self._tail
        self._tail.prev = self._head

    def add(self, value: int) -> None:
        """Append a non-zero value at the end of the list."""
        node = _Node(value)
        prev = self._tail.prev
        node.next = self._tail
        node.prev = prev
        prev.next = node
        self._tail.prev = node

    def _find(self, index: int) -> _Node:
        if index < 0:
            raise IndexError(f"list index out of range: {index}")
        node = self._head.next
        for _ in range(index):
            if node is self._tail:
                break
            node = node.next
        if node is self._tail:
            raise IndexError(f"list index out of range: {index}")
        return node

    def remove(self, index: int) -> None:
        """Unlink the element at ``index``."""
        node = self._find(index)
        node.prev.next = node.next
        node.next.prev = node.prev
        node.next = node.prev = None

    def get(self, index: int) -> int:
        """Return the value at ``index``."""
        return self._find(index).value

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[int]:
        node = self._head.next
        while node is not self._tail:
            yield node.value
            node = node.next


def _check_add() -> bool:
    items = LinkedList()
    results = [len(items) == 0]
    items.add(1)
    results.append(len(items) == 1)
    items.add(2)
    results.append(len(items) == 2)
    return all(results)


def _check_remove() -> bool:
    items = LinkedList()
    items.add(1)
    results = [len(items) == 1]
    items.remove(0)
    results.append(len(items) == 0)
    return all(results)


def _check_get() -> bool:
    items = LinkedList()
    items.add(1)
    items.add(2)
    return items.get(0) == 1 and items.get(1) == 2


def run_self_checks() -> int:
    """Run the built-in list checks and return how many passed."""
    checks = (_check_add, _check_remove, _check_get)
    return sum(1 for check in checks if check())


def main(argv: list[str] | None = None) -> int:
    """Run the self checks and report how many passed."""
    passed = run_self_checks()
    print(f"{passed} tests passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())