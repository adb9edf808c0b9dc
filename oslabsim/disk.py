"""Disk head scheduling: FCFS, SSTF and SCAN."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class SeekResult:
    """The head's path over the tracks and the average movement."""

    path: tuple[int, ...]
    average: float

    @property
    def movements(self) -> tuple[int, ...]:
        return tuple(abs(b - a) for a, b in zip(self.path, self.path[1:]))

    @property
    def total(self) -> int:
        return sum(self.movements)


def fcfs_seek(tracks: Sequence[int]) -> SeekResult:
    """Visit tracks in the given order; the first one is where the head starts."""
    path = tuple(tracks)
    if len(path) < 2:
        raise ValueError("at least two tracks are required")
    result = SeekResult(path, 0.0)
    return SeekResult(path, result.total / (len(path) - 1))


def sstf_seek(requests: Sequence[int], head: int) -> SeekResult:
    """Always move to the nearest pending request; ties go to the earlier one."""
    pending = list(requests)
    if not pending:
        raise ValueError("at least one request is required")
    position = head
    path = [head]
    while pending:
        nearest = min(pending, key=lambda track: abs(track - position))
        pending.remove(nearest)
        path.append(nearest)
        position = nearest
    result = SeekResult(tuple(path), 0.0)
    return SeekResult(result.path, result.total / len(requests))


def scan_seek(requests: Sequence[int], head: int) -> SeekResult:
    """Sweep down to track 0 serving requests, then up through the rest."""
    pending = list(requests)
    if not pending:
        raise ValueError("at least one request is required")
    if head < 0 or any(track < 0 for track in pending):
        raise ValueError("tracks must not be negative")
    down = sorted((track for track in pending if 0 < track <= head), reverse=True)
    up = sorted(track for track in pending if track > head)
    path = (head, *down, 0, *up)
    result = SeekResult(path, 0.0)
    return SeekResult(path, result.total / len(pending))