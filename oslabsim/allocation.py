"""File allocation on a block disk: sequential, linked and indexed."""

from __future__ import annotations

from collections.abc import Iterable


class AllocationError(ValueError):
    """A file could not be placed; ``allocated`` lists blocks taken before failing."""

    def __init__(self, message: str, allocated: Iterable[int] = ()) -> None:
        super().__init__(message)
        self.allocated = tuple(allocated)


class Disk:
    """A fixed number of blocks, each free or allocated."""

    def __init__(self, size: int = 50) -> None:
        if size <= 0:
            raise ValueError("disk size must be positive")
        self.size = size
        self._used: set[int] = set()

    def _valid(self, block: int) -> bool:
        return 0 <= block < self.size

    def is_allocated(self, block: int) -> bool:
        if not self._valid(block):
            raise AllocationError(f"Invalid block number: {block}")
        return block in self._used

    def mark_allocated(self, blocks: Iterable[int]) -> list[int]:
        """Mark blocks as in use and return the invalid ones that were skipped."""
        skipped = []
        for block in blocks:
            if self._valid(block):
                self._used.add(block)
            else:
                skipped.append(block)
        return skipped

    def _check_range(self, start: int, length: int) -> None:
        if length < 0 or start < 0 or start + length > self.size:
            raise AllocationError("Invalid range")

    def allocate_sequential(self, start: int, length: int) -> list[int]:
        """Take contiguous blocks; stop at the first one already in use.

        Blocks taken before the conflict stay allocated.
        """
        self._check_range(start, length)
        allocated: list[int] = []
        for block in range(start, start + length):
            if block in self._used:
                raise AllocationError(f"Block {block} already allocated", allocated)
            self._used.add(block)
            allocated.append(block)
        return allocated

    def allocate_linked(self, start: int, length: int) -> list[int]:
        """Take every free block of the range, skipping those in use."""
        self._check_range(start, length)
        allocated = [block for block in range(start, start + length) if block not in self._used]
        self._used.update(allocated)
        return allocated

    def allocate_indexed(self, index: int, blocks: Iterable[int]) -> tuple[int, ...]:
        """Take an index block and the data blocks it points to, all or nothing."""
        if not self._valid(index):
            raise AllocationError(f"Invalid block index: {index}")
        if index in self._used:
            raise AllocationError(f"Block {index} already allocated")
        data = tuple(blocks)
        if len(data) > self.size:
            raise AllocationError("Too many files")
        taken = self._used | {index}
        if any(not self._valid(block) or block in taken for block in data):
            raise AllocationError("One or more blocks are already allocated or invalid")
        self._used.add(index)
        self._used.update(data)
        return data