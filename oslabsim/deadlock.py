"""Deadlock avoidance with the banker's safety check, and deadlock detection."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class SafetyResult:
    """Outcome of the banker's safety check.

    ``sequence`` lists process indices in execution order and
    ``available_after`` the available vector after each of them.
    """

    safe: bool
    sequence: tuple[int, ...]
    allocated: tuple[int, ...]
    available: tuple[int, ...]
    available_after: tuple[tuple[int, ...], ...]

    @property
    def final_available(self) -> tuple[int, ...]:
        return self.available_after[-1] if self.available_after else self.available


def _matrix(rows: Sequence[Sequence[int]], width: int, name: str) -> list[tuple[int, ...]]:
    table = [tuple(row) for row in rows]
    for row in table:
        if len(row) != width:
            raise ValueError(f"every row of the {name} table needs {width} values")
    return table


def _fits(need: Sequence[int], available: Sequence[int]) -> bool:
    return all(n <= a for n, a in zip(need, available))


def bankers_safety(
    claim_vector: Sequence[int],
    allocated: Sequence[Sequence[int]],
    maximum: Sequence[Sequence[int]],
) -> SafetyResult:
    """Repeatedly run the first process whose remaining claim fits what is available."""
    claim = tuple(claim_vector)
    width = len(claim)
    current = _matrix(allocated, width, "allocated")
    limits = _matrix(maximum, width, "maximum claim")
    if len(current) != len(limits):
        raise ValueError("allocated and maximum claim tables need the same processes")

    totals = tuple(sum(column) for column in zip(*current)) if current else (0,) * width
    available = tuple(c - t for c, t in zip(claim, totals))
    needs = [tuple(m - c for m, c in zip(lim, cur)) for lim, cur in zip(limits, current)]

    running = list(range(len(current)))
    sequence: list[int] = []
    history: list[tuple[int, ...]] = []
    state = available
    while running:
        chosen = next((p for p in running if _fits(needs[p], state)), None)
        if chosen is None:
            break
        running.remove(chosen)
        state = tuple(a + c for a, c in zip(state, current[chosen]))
        sequence.append(chosen)
        history.append(state)

    return SafetyResult(
        safe=not running,
        sequence=tuple(sequence),
        allocated=totals,
        available=available,
        available_after=tuple(history),
    )


def detect_deadlock(
    maximum: Sequence[Sequence[int]],
    allocation: Sequence[Sequence[int]],
    available: Sequence[int],
) -> tuple[int, ...]:
    """Return the indices of processes that can never finish; empty when none."""
    free = list(available)
    width = len(free)
    limits = _matrix(maximum, width, "maximum")
    held = _matrix(allocation, width, "allocation")
    if len(limits) != len(held):
        raise ValueError("maximum and allocation tables need the same processes")

    needs = [tuple(m - a for m, a in zip(lim, got)) for lim, got in zip(limits, held)]
    finished = [False] * len(held)
    progress = True
    while progress:
        progress = False
        for process, need in enumerate(needs):
            if not finished[process] and _fits(need, free):
                free = [f + a for f, a in zip(free, held[process])]
                finished[process] = True
                progress = True
                break
    return tuple(process for process, done in enumerate(finished) if not done)