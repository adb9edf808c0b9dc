# oslabsim

Plain-Python simulations of the algorithms met in a first operating-systems
course. Each function takes ordinary Python values, such as lists of ints,
and returns its results as data that you can inspect and test.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `oslabsim.scheduling` | `fcfs`, `sjf`, `priority_schedule`, `round_robin` return a `ScheduleResult` made of `ProcessStats` |
| `oslabsim.paging` | `PagedMemory` (paging with per-process page tables), `segment_translate` with `Segment`, `AddressError`, `MemoryFullError` |
| `oslabsim.replacement` | `fifo`, `lru`, `optimal` page replacement return a `ReplacementResult` of `ReplacementStep`s; `move_to_front` |
| `oslabsim.disk` | `fcfs_seek`, `sstf_seek`, `scan_seek` return a `SeekResult` |
| `oslabsim.allocation` | `Disk` with sequential, linked and indexed file allocation; `AllocationError` |
| `oslabsim.concurrency` | `BoundedBuffer`, `ReadersWriters`, `simulate_readers_writers`, `print_messages` |
| `oslabsim.philosophers` | `DiningTable`, a round-by-round dining philosophers simulation |
| `oslabsim.deadlock` | `bankers_safety` (returns a `SafetyResult`) and `detect_deadlock` |

### CPU scheduling

```python
from oslabsim.scheduling import fcfs, sjf, priority_schedule, round_robin

result = fcfs([24, 3, 3])
for proc in result.processes:
    print(proc.pid, proc.burst, proc.waiting, proc.turnaround)
print(result.average_waiting, result.average_turnaround)

sjf([6, 8, 7, 3])
priority_schedule([10, 1, 2], priorities=[3, 1, 2])
round_robin([24, 3, 3], quantum=4)
```

`sjf` and `priority_schedule` order processes by burst time and by ascending
priority number. `round_robin` needs positive bursts and a positive quantum;
it gives every unfinished process up to one quantum per pass, in index order.
An empty burst list raises `ValueError`.

### Page replacement

```python
from oslabsim.replacement import fifo, lru, optimal, move_to_front

refs = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2]
print(fifo(refs, 3).faults)
print(lru(refs, 3).faults)
print(optimal(refs, 3).faults)

for step in fifo(refs, 3).steps:
    print(step.page, step.frames, step.fault)   # empty frames are None

move_to_front([6, 1, 9, 5, 3], 3)   # [5, 6, 1, 9, 3]
```

In `lru`, while the reference position is below the frame count a fault fills
the frame at that position; after that the least recently used frame is
replaced. `optimal` fills empty frames first, then replaces a page that is
never used again, or else the one used furthest ahead.

### Disk scheduling

```python
from oslabsim.disk import fcfs_seek, sstf_seek, scan_seek

r = sstf_seek([98, 183, 37, 122, 14, 124, 65, 67], head=53)
print(r.path, r.movements, r.total, r.average)
```

`fcfs_seek` takes the tracks in order, the first being where the head starts,
and averages over the moves made. `sstf_seek` and `scan_seek` average over the
number of requests. `scan_seek` sweeps down to track 0 serving requests and
then up through the rest.

### Paging and segmentation

```python
from oslabsim.paging import PagedMemory, Segment, segment_translate

memory = PagedMemory(memory_size=1000, page_size=100)
process = memory.add_process([3, 5, 7])    # process numbers start at 1
print(memory.translate(process, 2, 40))    # 740
print(memory.remaining_pages)

segments = [Segment(base=1400, limit=1000), Segment(base=6300, limit=400)]
print(segment_translate(segments, 1, 53))  # 6353
```

`add_process` raises `MemoryFullError` when there are not enough free pages;
invalid process, page, segment or offset raise `AddressError`.

### File allocation

```python
from oslabsim.allocation import Disk, AllocationError

disk = Disk(50)
disk.mark_allocated([1, 2])
disk.allocate_sequential(4, 3)            # [4, 5, 6]
try:
    disk.allocate_sequential(5, 2)
except AllocationError as exc:
    print(exc, exc.allocated)
disk.allocate_linked(0, 5)                # free blocks of the range: [0, 3]
disk.allocate_indexed(10, [20, 21, 22])   # all or nothing
```

Sequential allocation stops at the first block in use; blocks taken before it
stay allocated and are listed in the error's `allocated`. Linked allocation
skips blocks in use.

### Concurrency

```python
from oslabsim.concurrency import BoundedBuffer, print_messages, simulate_readers_writers

buf = BoundedBuffer(10)   # holds up to 9 items
buf.produce(5)
print(buf.consume(), len(buf))

print_messages(["Thread 1", "Thread 2"])
simulate_readers_writers(3)
```

`produce` on a full buffer raises `BufferFullError`; `consume` on an empty one
raises `BufferEmptyError`. `simulate_readers_writers` starts one reader and one
writer thread per count (0 to 100) and passes every message to `log`.

### Dining philosophers

```python
from oslabsim.philosophers import DiningTable

table = DiningTable(4)
for line in table.dine():
    print(line)
```

`attempt` lets one philosopher act once, `run_round` lets all act in order,
and `dine` runs rounds until everyone has eaten. The last philosopher picks up
forks in reverse order.

### Deadlock

```python
from oslabsim.deadlock import bankers_safety, detect_deadlock

result = bankers_safety(
    [8, 5, 9, 7],
    [[2, 0, 1, 1], [0, 1, 2, 1], [4, 0, 0, 3], [0, 2, 1, 0], [1, 0, 3, 0]],
    [[3, 2, 1, 4], [0, 2, 5, 2], [5, 1, 0, 5], [1, 5, 3, 0], [3, 0, 3, 3]],
)
print(result.safe, result.sequence, result.final_available)

print(detect_deadlock([[1, 1], [2, 2]], [[1, 0], [1, 1]], [0, 1]))
```

`detect_deadlock` returns the indices of processes that can never finish, or
an empty tuple.

## What it does not do

There is no command-line program and no interactive prompting: everything is
called from Python and results come back as values. Nothing is stored between
runs.