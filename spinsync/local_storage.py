"""Fixed-capacity per-thread data slots guarded by a ticket lock."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Optional

from spinsync.ticket_lock import TicketLock

MAX_THREADS = 100


class StorageFullError(RuntimeError):
    """Raised when every slot is taken and a new thread asks for one."""


class NotAllocatedError(LookupError):
    """Raised when the calling thread has no slot."""


@dataclass
class _Slot:
    thread_id: Optional[int] = None
    data: Any = None


class ThreadLocalStorage:
    """A table of slots, one per registered thread, each holding any object."""

    def __init__(self, capacity: int = MAX_THREADS) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._lock = TicketLock()
        self._slots = [_Slot() for _ in range(capacity)]

    def _find(self, tid: int) -> Optional[_Slot]:
        return next((slot for slot in self._slots if slot.thread_id == tid), None)

    def _own_slot(self) -> _Slot:
        tid = threading.get_ident()
        slot = self._find(tid)
        if slot is None:
            raise NotAllocatedError(
                f"thread [{tid}] hasn't been initialized in the TLS"
            )
        return slot

    def alloc(self) -> None:
        """Reserve a slot for the calling thread; a no-op if it already has one."""
        tid = threading.get_ident()
        with self._lock:
            if self._find(tid) is not None:
                return
            free = self._find(None)
            if free is None:
                raise StorageFullError(
                    f"thread [{tid}] failed to initialize, not enough space"
                )
            free.thread_id = tid
            free.data = None

    def get(self) -> Any:
        """Return the data stored for the calling thread."""
        with self._lock:
            return self._own_slot().data

    def set(self, data: Any) -> None:
        """Store ``data`` for the calling thread."""
        with self._lock:
            self._own_slot().data = data

    def free(self) -> None:
        """Release the calling thread's slot."""
        with self._lock:
            slot = self._own_slot()
            slot.thread_id = None
            slot.data = None