# spinsync

Synchronization primitives that spin and yield the processor instead of
blocking, most of them built on a first-come, first-served ticket lock.

| Module | What it provides |
| --- | --- |
| `spinsync.ticket_lock` | `TicketLock`: a fair mutual-exclusion lock that admits callers in arrival order. It can be used as a context manager. `release()` raises `RuntimeError` if the lock is not held. |
| `spinsync.tl_semaphore` | `TicketSemaphore(initial_value)`: a counting semaphore whose count is guarded by a `TicketLock`. It provides `wait()` and `signal()` and can be used as a context manager. |
| `spinsync.tas_semaphore` | `TasSemaphore(initial_value)`: a counting semaphore whose count is guarded by a test-and-set flag. It has the same `wait()` and `signal()` methods and context-manager use. |
| `spinsync.cond_var` | `ConditionVariable`: provides `wait(lock)`, `signal()` and `broadcast()`. It works with any lock that has `acquire()` and `release()`. A signal given while no thread is waiting is kept, and the next waiter goes through at once. |
| `spinsync.rw_lock` | `RWLock`: any number of readers or a single writer may hold it. Use `acquire_read()` / `release_read()` and `acquire_write()` / `release_write()`, or the `read_locked()` and `write_locked()` context managers. A release without a matching acquire raises `RuntimeError`. |
| `spinsync.local_storage` | `ThreadLocalStorage(capacity=100)`: a fixed number of per-thread slots, each holding any object. It also defines `StorageFullError` and `NotAllocatedError`. |
| `spinsync.fifo` | `Fifo`: an unbounded first-in, first-out queue with `enqueue()`, `dequeue()`, `is_empty()` and `len()`. `dequeue()` raises `IndexError` when the queue is empty. |
| `spinsync.cp_pattern` | `ProducerConsumer` and `start_consumers_producers()`: producer threads emit numbers and consumer threads check whether each number is divisible by 6. The module also provides the `cp-pattern` command. |

## Installation

```
pip install .
```

## Usage

```python
from spinsync.ticket_lock import TicketLock
from spinsync.cond_var import ConditionVariable
from spinsync.rw_lock import RWLock

lock = TicketLock()
ready = ConditionVariable()

with lock:
    ...  # critical section

rw = RWLock()
with rw.read_locked():
    ...  # shared access
with rw.write_locked():
    ...  # exclusive access
```

Semaphores:

```python
from spinsync.tl_semaphore import TicketSemaphore

sem = TicketSemaphore(2)
with sem:      # wait() on entry, signal() on exit
    ...
```

Per-thread storage:

```python
from spinsync.local_storage import ThreadLocalStorage

tls = ThreadLocalStorage(100)
tls.alloc()
tls.set({"answer": 42})
assert tls.get() == {"answer": 42}
tls.free()
```

Calling `alloc()` again from a thread that already has a slot does nothing.
Calling `alloc()` when every slot is taken raises `StorageFullError`.
Calling `get()`, `set()` or `free()` from a thread without a slot raises
`NotAllocatedError`. A capacity that is not positive raises `ValueError`.

## Producer-consumer

```python
import io
from spinsync.cp_pattern import ProducerConsumer

out = io.StringIO()
job = ProducerConsumer(consumers=2, producers=3, seed=7, max_number=100, out=out)
job.run()
assert job.consumed_count == 100
```

`run()` first writes the configuration to the output. The output is
`sys.stdout` unless `out` is given. It then writes one line for each number
produced and one line for each number consumed, for every number from
0 up to `max_number - 1`. The default for `max_number` is 1,000,000. Lines
from different threads are never interleaved. If `consumers` or `producers`
is not positive, or `seed` is negative, the constructor raises `ValueError`.

From the shell:

```
cp-pattern CONSUMERS PRODUCERS SEED
```

The command runs the job over 0 up to 999,999 on standard output and exits
with status 0. If the arguments are wrong in number, if CONSUMERS or
PRODUCERS is not positive, or if SEED is negative, it prints
`usage: cp_pattern [consumers] [producers] [seed]` and exits with status 1.

## Tests

```
pip install .[test]
pytest
```