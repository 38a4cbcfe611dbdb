"""A first-come, first-served spin lock built on ticket numbers."""

from __future__ import annotations

import threading
import time


class TicketLock:
    """Spin lock that admits callers strictly in the order they arrive.

    Each caller draws the next ticket and spins, yielding the processor,
    until the ticket being served matches its own.
    """

    def __init__(self) -> None:
        self._dispenser = threading.Lock()
        self._next_ticket = 0
        self._now_serving = 0

    def _draw_ticket(self) -> int:
        with self._dispenser:
            ticket = self._next_ticket
            self._next_ticket += 1
            return ticket

    def acquire(self) -> None:
        """Block until the lock is held by the caller."""
        ticket = self._draw_ticket()
        while self._now_serving != ticket:
            time.sleep(0)

    def release(self) -> None:
        """Hand the lock to the next ticket holder.

        Raises RuntimeError if the lock is not held.
        """
        with self._dispenser:
            if self._now_serving >= self._next_ticket:
                raise RuntimeError("release of an unheld TicketLock")
            self._now_serving += 1

    def __enter__(self) -> "TicketLock":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()