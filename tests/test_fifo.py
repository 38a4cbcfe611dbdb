import pytest

from spinsync.fifo import Fifo


def test_new_queue_is_empty():
    q = Fifo()
    assert q.is_empty()
    assert len(q) == 0


def test_order_is_first_in_first_out():
    q = Fifo()
    values = [3, 1, 4, 1, 5, 9]
    for v in values:
        q.enqueue(v)
    assert [q.dequeue() for _ in values] == values


def test_length_tracks_operations():
    q = Fifo()
    q.enqueue(10)
    q.enqueue(20)
    assert len(q) == 2
    q.dequeue()
    assert len(q) == 1
    assert not q.is_empty()


def test_dequeue_empty_raises():
    q = Fifo()
    with pytest.raises(IndexError):
        q.dequeue()


def test_empty_again_after_draining():
    q = Fifo()
    q.enqueue(1)
    assert q.dequeue() == 1
    assert q.is_empty()
    with pytest.raises(IndexError):
        q.dequeue()


def test_interleaved_use():
    q = Fifo()
    q.enqueue("a")
    q.enqueue("b")
    assert q.dequeue() == "a"
    q.enqueue("c")
    assert q.dequeue() == "b"
    assert q.dequeue() == "c"
    assert len(q) == 0