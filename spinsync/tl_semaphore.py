"""Counting semaphore guarded by a ticket lock."""

from __future__ import annotations

import time

from spinsync.ticket_lock import TicketLock


class TicketSemaphore:
    """Counting semaphore; every change to its count is made under a TicketLock."""

    def __init__(self, initial_value: int) -> None:
        self._lock = TicketLock()
        self._count = initial_value

    def _take(self) -> bool:
        with self._lock:
            available = self._count > 0
            if available:
                self._count -= 1
        return available

    def wait(self) -> None:
        """Take one permit, yielding the processor until one is free."""
        while not self._take():
            time.sleep(0)

    def signal(self) -> None:
        """Give one permit back."""
        with self._lock:
            self._count += 1

    def __enter__(self) -> TicketSemaphore:
        self.wait()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.signal()