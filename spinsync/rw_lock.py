"""Readers-writer lock built on a ticket lock."""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator

from spinsync.ticket_lock import TicketLock


class RWLock:
    """Lock allowing many concurrent readers or one exclusive writer."""

    def __init__(self) -> None:
        self._internal = TicketLock()
        self._readers = 0
        self._writer_active = False
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        """Block until no writer holds the lock, then join the readers."""
        while True:
            with self._internal:
                if not self._writer_active:
                    self._readers += 1
                    return
            time.sleep(0)

    def release_read(self) -> None:
        """Leave the set of readers.

        Raises RuntimeError if no reader holds the lock.
        """
        with self._internal:
            if self._readers <= 0:
                raise RuntimeError("release_read without a matching acquire_read")
            self._readers -= 1

    def acquire_write(self) -> None:
        """Block until there are no readers and no writer, then take the lock."""
        with self._internal:
            self._waiting_writers += 1
        while True:
            with self._internal:
                if self._readers == 0 and not self._writer_active:
                    self._writer_active = True
                    self._waiting_writers -= 1
                    return
            time.sleep(0)

    def release_write(self) -> None:
        """Give up exclusive access.

        Raises RuntimeError if no writer holds the lock.
        """
        with self._internal:
            if not self._writer_active:
                raise RuntimeError("release_write without a matching acquire_write")
            self._writer_active = False

    @contextmanager
    def read_locked(self) -> Iterator["RWLock"]:
        """Hold the lock for reading for the duration of the block."""
        self.acquire_read()
        try:
            yield self
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator["RWLock"]:
        """Hold the lock for writing for the duration of the block."""
        self.acquire_write()
        try:
            yield self
        finally:
            self.release_write()