import queue
import threading
import time

import pytest

from spinsync.ticket_lock import TicketLock


def _in_background(func, *args):
    """Start func in a daemon thread; the returned queue receives its result."""
    box = queue.Queue(maxsize=1)
    threading.Thread(target=lambda: box.put(func(*args)), daemon=True).start()
    return box


def _assert_free(lock):
    with pytest.raises(RuntimeError):
        lock.release()


def test_mutual_exclusion_keeps_counter_exact():
    lock = TicketLock()
    state = {"count": 0}
    rounds = 200

    def worker():
        for _ in range(rounds):
            with lock:
                current = state["count"]
                time.sleep(0)
                state["count"] = current + 1
        return "done"

    boxes = [_in_background(worker) for _ in range(4)]
    assert [box.get(timeout=30) for box in boxes] == ["done"] * 4
    assert state["count"] == 4 * rounds
    _assert_free(lock)


@pytest.mark.parametrize("cycles", [0, 1, 3])
def test_release_of_free_lock_raises(cycles):
    lock = TicketLock()
    for _ in range(cycles):
        lock.acquire()
        lock.release()
    _assert_free(lock)


def test_waiter_blocks_until_release():
    lock = TicketLock()
    lock.acquire()

    def worker():
        with lock:
            return "entered"

    box = _in_background(worker)
    with pytest.raises(queue.Empty):
        box.get(timeout=0.1)
    lock.release()
    assert box.get(timeout=10) == "entered"
    _assert_free(lock)


def test_waiters_are_served_in_arrival_order():
    lock = TicketLock()
    order = []
    lock.acquire()

    def worker(name):
        with lock:
            order.append(name)
        return name

    first = _in_background(worker, "first")
    time.sleep(0.1)
    second = _in_background(worker, "second")
    time.sleep(0.1)
    assert order == []
    lock.release()
    assert (first.get(timeout=10), second.get(timeout=10)) == ("first", "second")
    assert order == ["first", "second"]
    _assert_free(lock)


def test_context_manager_releases_on_exception():
    lock = TicketLock()
    with pytest.raises(ValueError):
        with lock:
            raise ValueError("boom")
    _assert_free(lock)

    def worker():
        with lock:
            return "acquired"

    assert _in_background(worker).get(timeout=10) == "acquired"