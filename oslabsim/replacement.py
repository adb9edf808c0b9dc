"""Page replacement algorithms: FIFO, LRU and optimal, plus an MRU reordering."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ReplacementStep:
    """Frame contents after one reference; empty frames hold None."""

    page: int
    frames: tuple[int | None, ...]
    fault: bool


@dataclass(frozen=True)
class ReplacementResult:
    """The sequence of steps taken for a reference string."""

    steps: tuple[ReplacementStep, ...]

    @property
    def faults(self) -> int:
        return sum(step.fault for step in self.steps)


def _check_frames(frame_count: int) -> None:
    if frame_count < 1:
        raise ValueError("at least one frame is required")


def fifo(references: Iterable[int], frame_count: int) -> ReplacementResult:
    """Replace the page that was loaded earliest."""
    _check_frames(frame_count)
    frames: list[int | None] = [None] * frame_count
    victim = 0
    steps = []
    for page in references:
        fault = page not in frames
        if fault:
            frames[victim] = page
            victim = (victim + 1) % frame_count
        steps.append(ReplacementStep(page, tuple(frames), fault))
    return ReplacementResult(tuple(steps))


def lru(references: Iterable[int], frame_count: int) -> ReplacementResult:
    """Replace the page used least recently.

    While the reference position is below the frame count a fault fills the
    frame at that position; afterwards the least recently used frame is taken.
    """
    _check_frames(frame_count)
    frames: list[int | None] = [None] * frame_count
    last_used = [0] * frame_count
    tick = 0
    steps = []
    for position, page in enumerate(references):
        hit = False
        for slot, held in enumerate(frames):
            if held == page:
                tick += 1
                last_used[slot] = tick
                hit = True
        if not hit:
            if position < frame_count:
                slot = position
            else:
                slot = min(range(frame_count), key=last_used.__getitem__)
            frames[slot] = page
            tick += 1
            last_used[slot] = tick
        steps.append(ReplacementStep(page, tuple(frames), not hit))
    return ReplacementResult(tuple(steps))


def optimal(references: Iterable[int], frame_count: int) -> ReplacementResult:
    """Replace the page whose next use lies furthest ahead."""
    _check_frames(frame_count)
    pages = list(references)
    frames: list[int | None] = [None] * frame_count
    steps = []
    for position, page in enumerate(pages):
        fault = page not in frames
        if fault:
            if None in frames:
                slot = frames.index(None)
            else:
                upcoming = pages[position + 1 :]
                next_uses = [
                    upcoming.index(held) if held in upcoming else None for held in frames
                ]
                if None in next_uses:
                    slot = next_uses.index(None)
                else:
                    slot = max(range(frame_count), key=next_uses.__getitem__)
            frames[slot] = page
        steps.append(ReplacementStep(page, tuple(frames), fault))
    return ReplacementResult(tuple(steps))


def move_to_front(items: Sequence[int], element: int) -> list[int]:
    """Move the item at position element modulo the length to the front."""
    values = list(items)
    if not values:
        raise ValueError("cannot reorder an empty sequence")
    index = element % len(values)
    return [values[index], *values[:index], *values[index + 1 :]]