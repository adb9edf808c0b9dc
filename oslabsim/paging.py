"""Address translation with paging and with segmentation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


class AddressError(ValueError):
    """A logical address that cannot be translated."""


class MemoryFullError(Exception):
    """Not enough free pages for a new process."""


class PagedMemory:
    """Physical memory split into pages, with one page table per process."""

    def __init__(self, memory_size: int, page_size: int) -> None:
        if page_size <= 0:
            raise ValueError("page size must be positive")
        if memory_size < 0:
            raise ValueError("memory size must not be negative")
        self.memory_size = memory_size
        self.page_size = page_size
        self.page_count = memory_size // page_size
        self._tables: list[tuple[int, ...]] = []

    @property
    def remaining_pages(self) -> int:
        return self.page_count - sum(len(table) for table in self._tables)

    def add_process(self, frames: Iterable[int]) -> int:
        """Register a page table and return the process number, counted from 1."""
        table = tuple(frames)
        if len(table) > self.remaining_pages:
            raise MemoryFullError("Memory is full")
        self._tables.append(table)
        return len(self._tables)

    def translate(self, process: int, page: int, offset: int) -> int:
        """Return the physical address of a page and offset within a process."""
        if not 1 <= process <= len(self._tables):
            raise AddressError(f"Invalid process number: {process}")
        table = self._tables[process - 1]
        if not 0 <= page < len(table):
            raise AddressError(f"Invalid page number: {page}")
        if not 0 <= offset < self.page_size:
            raise AddressError(f"Invalid offset: {offset}")
        return table[page] * self.page_size + offset


@dataclass(frozen=True)
class Segment:
    """A segment's base address and length limit."""

    base: int
    limit: int


def segment_translate(segments: Sequence[Segment], segment: int, offset: int) -> int:
    """Return the physical address of an offset within a segment."""
    if not 0 <= segment < len(segments):
        raise AddressError(f"Invalid segment: {segment}")
    entry = segments[segment]
    if not 0 <= offset < entry.limit:
        raise AddressError(f"Offset {offset} exceeds segment limit {entry.limit}")
    return entry.base + offset