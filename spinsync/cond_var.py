"""Condition variable built on sleeper and waker counters."""

from __future__ import annotations

import threading
import time


class ConditionVariable:
    """Condition variable that works with any lock having acquire/release.

    Every waiter takes a sequence number; it is released once the number
    of wake-ups handed out exceeds that sequence number.  A signal given
    while nobody waits is kept and lets the next waiter through at once.
    """

    def __init__(self) -> None:
        self._counters = threading.Lock()
        self._sleepers = 0
        self._wakers = 0

    def wait(self, lock) -> None:
        """Release ``lock``, wait to be woken, then reacquire ``lock``."""
        with self._counters:
            my_ticket = self._sleepers
            self._sleepers += 1
        lock.release()
        while self._wakers <= my_ticket:
            time.sleep(0)
        lock.acquire()

    def signal(self) -> None:
        """Wake one waiting thread."""
        with self._counters:
            self._wakers += 1

    def broadcast(self) -> None:
        """Wake every thread currently waiting."""
        with self._counters:
            self._wakers = self._sleepers