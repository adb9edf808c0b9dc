"""Threads printing messages, a bounded producer/consumer buffer and readers-writers."""

from __future__ import annotations

import threading
import time
from collections import deque
from collections.abc import Callable, Iterable

_READ_PAUSE = 3e-6
_MAX_READERS = 100


class BufferFullError(Exception):
    """The buffer has no free slot."""


class BufferEmptyError(Exception):
    """The buffer holds nothing to consume."""


class BoundedBuffer:
    """A circular buffer of ``size`` slots; one slot stays free, so it holds ``size - 1`` items."""

    def __init__(self, size: int = 10) -> None:
        if size < 2:
            raise ValueError("buffer size must be at least 2")
        self.size = size
        self.capacity = size - 1
        self._items: deque[int] = deque()

    def produce(self, value: int) -> None:
        """Append a value, or raise BufferFullError."""
        if len(self._items) >= self.capacity:
            raise BufferFullError("Buffer is Full")
        self._items.append(value)

    def consume(self) -> int:
        """Remove and return the oldest value, or raise BufferEmptyError."""
        if not self._items:
            raise BufferEmptyError("Buffer is Empty")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


def print_messages(
    messages: Iterable[str] = ("Thread 1", "Thread 2"),
    write: Callable[[str], object] = print,
) -> None:
    """Write each message from its own thread, then report each thread's creation status."""
    threads = [threading.Thread(target=write, args=(message,)) for message in messages]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    for number, _ in enumerate(threads, start=1):
        write(f"Thread {number} returns: 0")


class ReadersWriters:
    """Readers share the resource; a writer needs it alone."""

    def __init__(self, log: Callable[[str], object] = print) -> None:
        self._log = log
        self._mutex = threading.Semaphore(1)
        self._room = threading.Semaphore(1)
        self._readers = 0

    @property
    def readers(self) -> int:
        """Number of readers currently inside."""
        return self._readers

    def read(self) -> None:
        with self._mutex:
            self._readers += 1
            if self._readers == 1:
                self._room.acquire()
            inside = self._readers
        self._log(f"{inside} reader is inside")
        time.sleep(_READ_PAUSE)
        with self._mutex:
            self._readers -= 1
            remaining = self._readers
            if remaining == 0:
                self._room.release()
        self._log(f"{remaining + 1} Reader is leaving")

    def write(self) -> None:
        self._log("Writer is trying to enter")
        with self._room:
            self._log("Writer has entered")
        self._log("Writer is leaving")


def simulate_readers_writers(
    readers: int, log: Callable[[str], object] = print
) -> ReadersWriters:
    """Start one reader and one writer thread per count, wait for all, return the shared state."""
    if not 0 <= readers <= _MAX_READERS:
        raise ValueError(f"number of readers must be between 0 and {_MAX_READERS}")
    shared = ReadersWriters(log)
    threads = []
    for _ in range(readers):
        threads.append(threading.Thread(target=shared.read))
        threads.append(threading.Thread(target=shared.write))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return shared