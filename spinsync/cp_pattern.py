"""Producers hand numbers to consumers that test them for divisibility by 6."""

from __future__ import annotations

import random
import re
import sys
import threading
import time
from typing import Optional, TextIO

from spinsync.cond_var import ConditionVariable
from spinsync.fifo import Fifo
from spinsync.ticket_lock import TicketLock

MAX_NUMBER = 1_000_000
USAGE = "usage: cp_pattern [consumers] [producers] [seed]\n"


class _Counter:
    """Integer counter with an atomic fetch-and-add."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self.value = 0

    def fetch_add(self, amount: int = 1) -> int:
        with self._guard:
            old = self.value
            self.value += amount
            return old


class ProducerConsumer:
    """Runs producer threads that emit 0..max_number-1 and consumers that check them."""

    def __init__(
        self,
        consumers: int,
        producers: int,
        seed: int,
        max_number: int = MAX_NUMBER,
        out: Optional[TextIO] = None,
    ) -> None:
        if consumers <= 0 or producers <= 0:
            raise ValueError("consumers and producers must be positive")
        if seed < 0:
            raise ValueError("seed must not be negative")
        self.consumers = consumers
        self.producers = producers
        self.seed = seed
        self.max_number = max_number
        self._out = out
        self._reset()

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def consumed_count(self) -> int:
        return self._consumed.value

    def _reset(self) -> None:
        self.rng = random.Random(self.seed)
        self._queue = Fifo()
        self._lock = TicketLock()
        self._not_empty = ConditionVariable()
        self._claimed = _Counter()
        self._enqueued = _Counter()
        self._consumed = _Counter()
        self._finished = False

    def print_msg(self, msg: str) -> None:
        """Write ``msg`` without interleaving with other threads."""
        with self._lock:
            self.out.write(msg)
            self.out.flush()

    def wait_until_producers_produced_all_numbers(self) -> None:
        """Spin until every number has been produced and queued."""
        while self._enqueued.value < self.max_number:
            time.sleep(0)

    def wait_consumers_queue_empty(self) -> None:
        """Spin until the queue is empty; returns at once if it already is."""
        while not self._queue.is_empty():
            time.sleep(0)

    def stop_consumers(self) -> None:
        """Tell consumers no more numbers will come and wake them all."""
        with self._lock:
            self._finished = True
            self._not_empty.broadcast()

    def _produce(self) -> None:
        ident = threading.get_ident()
        while True:
            current = self._claimed.fetch_add()
            if current >= self.max_number:
                break
            self.print_msg(f"Producer {ident} generated number: {current}\n")
            with self._lock:
                self._queue.enqueue(current)
                self._enqueued.fetch_add()
                self._not_empty.broadcast()

    def _consume(self) -> None:
        ident = threading.get_ident()
        while True:
            self._lock.acquire()
            while self._queue.is_empty():
                if self._finished:
                    self._lock.release()
                    return
                self._not_empty.wait(self._lock)
            value = self._queue.dequeue()
            self._consumed.fetch_add()
            self._lock.release()
            verdict = "True" if value % 6 == 0 else "False"
            self.print_msg(
                f"Consumer {ident} checked {value}. Is it divisible by 6? {verdict}\n"
            )

    def run(self) -> None:
        """Print the configuration, run all threads to completion and stop."""
        self._reset()
        self.out.write(f"Number of Consumers: {self.consumers}\n")
        self.out.write(f"Number of Producers: {self.producers}\n")
        self.out.write(f"Seed: {self.seed}\n")

        producer_threads = [
            threading.Thread(target=self._produce) for _ in range(self.producers)
        ]
        consumer_threads = [
            threading.Thread(target=self._consume) for _ in range(self.consumers)
        ]
        for thread in producer_threads + consumer_threads:
            thread.start()

        self.wait_until_producers_produced_all_numbers()
        self.wait_consumers_queue_empty()
        self.stop_consumers()

        for thread in producer_threads + consumer_threads:
            thread.join()


def start_consumers_producers(consumers: int, producers: int, seed: int) -> None:
    """Run the full producer-consumer job over 0..MAX_NUMBER-1 on stdout."""
    ProducerConsumer(consumers, producers, seed).run()


def _atoi(text: str) -> int:
    match = re.match(r"\s*[+-]?\d+", text)
    return int(match.group()) if match else 0


def main(argv=None) -> int:
    """Command entry point; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        sys.stdout.write(USAGE)
        return 1
    consumers, producers, seed = (_atoi(arg) for arg in args)
    if consumers <= 0 or producers <= 0 or seed < 0:
        sys.stdout.write(USAGE)
        return 1
    start_consumers_producers(consumers, producers, seed)
    return 0