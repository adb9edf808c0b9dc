"""CPU scheduling: first come first served, shortest job first, priority and round robin."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TypeVar

_T = TypeVar("_T")


@dataclass(frozen=True)
class ProcessStats:
    """Timing of one process in a schedule."""

    pid: int
    burst: int
    waiting: int
    turnaround: int
    priority: int | None = None


@dataclass(frozen=True)
class ScheduleResult:
    """Per-process timings, in the order the schedule reports them."""

    processes: tuple[ProcessStats, ...]

    @property
    def average_waiting(self) -> float:
        return sum(p.waiting for p in self.processes) / len(self.processes)

    @property
    def average_turnaround(self) -> float:
        return sum(p.turnaround for p in self.processes) / len(self.processes)


def _checked_bursts(bursts: Sequence[int], *, positive: bool = False) -> list[int]:
    values = list(bursts)
    if not values:
        raise ValueError("at least one process is required")
    lowest = 1 if positive else 0
    for burst in values:
        if burst < lowest:
            raise ValueError(f"invalid burst time: {burst}")
    return values


def _exchange_sort(items: Sequence[_T], key: Callable[[_T], int]) -> list[_T]:
    """Sort by repeated exchanges; equal keys may change relative order."""
    ordered = list(items)
    for i in range(len(ordered)):
        for k in range(i + 1, len(ordered)):
            if key(ordered[i]) > key(ordered[k]):
                ordered[i], ordered[k] = ordered[k], ordered[i]
    return ordered


def _serve_in_order(jobs: Sequence[tuple[int, int, int | None]]) -> ScheduleResult:
    clock = 0
    stats = []
    for pid, burst, priority in jobs:
        stats.append(ProcessStats(pid, burst, clock, clock + burst, priority))
        clock += burst
    return ScheduleResult(tuple(stats))


def fcfs(bursts: Sequence[int]) -> ScheduleResult:
    """Serve processes in arrival order."""
    values = _checked_bursts(bursts)
    return _serve_in_order([(pid, burst, None) for pid, burst in enumerate(values)])


def sjf(bursts: Sequence[int]) -> ScheduleResult:
    """Serve the shortest bursts first."""
    values = _checked_bursts(bursts)
    jobs = _exchange_sort(
        [(pid, burst, None) for pid, burst in enumerate(values)], key=lambda job: job[1]
    )
    return _serve_in_order(jobs)


def priority_schedule(bursts: Sequence[int], priorities: Sequence[int]) -> ScheduleResult:
    """Serve processes by ascending priority number."""
    values = _checked_bursts(bursts)
    ranks = list(priorities)
    if len(ranks) != len(values):
        raise ValueError("every process needs exactly one priority")
    jobs = _exchange_sort(
        [(pid, burst, rank) for pid, (burst, rank) in enumerate(zip(values, ranks))],
        key=lambda job: job[2],
    )
    return _serve_in_order(jobs)


def round_robin(bursts: Sequence[int], quantum: int) -> ScheduleResult:
    """Give each unfinished process up to one quantum per pass, in index order."""
    values = _checked_bursts(bursts, positive=True)
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    remaining = list(values)
    finished = [0] * len(values)
    clock = 0
    while any(remaining):
        for pid, left in enumerate(remaining):
            if not left:
                continue
            run = min(left, quantum)
            clock += run
            remaining[pid] = left - run
            if not remaining[pid]:
                finished[pid] = clock
    return ScheduleResult(
        tuple(
            ProcessStats(pid, burst, done - burst, done)
            for pid, (burst, done) in enumerate(zip(values, finished))
        )
    )