"""Counting semaphore guarded by a test-and-set spin flag."""

from __future__ import annotations

import threading
import time


class TasSemaphore:
    """Counting semaphore whose count is protected by a test-and-set flag."""

    def __init__(self, initial_value: int) -> None:
        self._value = initial_value
        self._flag = threading.Lock()

    def _test_and_set(self) -> bool:
        """Set the flag and report whether it was already set."""
        return not self._flag.acquire(blocking=False)

    def _spin_lock(self) -> None:
        while self._test_and_set():
            time.sleep(0)

    def _unlock(self) -> None:
        self._flag.release()

    def wait(self) -> None:
        """Decrement the count, spinning while it is not positive."""
        while True:
            self._spin_lock()
            if self._value > 0:
                self._value -= 1
                self._unlock()
                return
            self._unlock()

    def signal(self) -> None:
        """Increment the count."""
        self._spin_lock()
        self._value += 1
        self._unlock()

    def __enter__(self) -> "TasSemaphore":
        self.wait()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.signal()