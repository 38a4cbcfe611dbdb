"""Unbounded first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any


class Fifo:
    """Queue that hands values back in the order they were added."""

    def __init__(self) -> None:
        self._items: deque = deque()

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the tail."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the head.

        Raises IndexError if the queue is empty.
        """
        if not self._items:
            raise IndexError("dequeue from an empty Fifo")
        return self._items.popleft()

    def is_empty(self) -> bool:
        """Report whether the queue holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)