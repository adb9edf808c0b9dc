"""Dining philosophers where the last philosopher picks up forks in reverse order."""

from __future__ import annotations


class DiningTable:
    """Philosopher i uses forks i and i-1 (wrapping); all try in turn each round."""

    def __init__(self, count: int = 4) -> None:
        if count < 2:
            raise ValueError("at least two philosophers are required")
        self.count = count
        self.completed = 0
        self._fork_taken = [False] * count
        self._left = [False] * count
        self._right = [False] * count
        self._done = [False] * count

    @property
    def forks_in_use(self) -> int:
        return sum(self._fork_taken)

    def _take(self, fork: int) -> bool:
        if self._fork_taken[fork]:
            return False
        self._fork_taken[fork] = True
        return True

    def attempt(self, philosopher: int) -> list[str]:
        """Let one philosopher act once and return what happened."""
        if not 0 <= philosopher < self.count:
            raise ValueError(f"no philosopher {philosopher}")
        number = philosopher + 1
        last = philosopher == self.count - 1
        other = (philosopher - 1) % self.count

        if self._done[philosopher]:
            return [f"Philosopher {number} completed his dinner"]

        if self._left[philosopher] and self._right[philosopher]:
            self._done[philosopher] = True
            self._fork_taken[philosopher] = False
            self._fork_taken[other] = False
            self.completed += 1
            return [
                f"Philosopher {number} completed his dinner",
                f"Philosopher {number} released fork {number} and fork {other + 1}",
            ]

        if self._left[philosopher]:
            if last:
                fork = philosopher
                if self._take(fork):
                    self._right[philosopher] = True
                    return [f"Fork {fork + 1} taken by philosopher {number}"]
                return [f"Philosopher {number} is waiting for fork {fork + 1}"]
            fork = other
            if self._take(fork):
                self._right[philosopher] = True
                return [f"Fork {fork + 1} taken by Philosopher {number}"]
            return [f"Philosopher {number} is waiting for Fork {fork + 1}"]

        if last:
            fork = philosopher - 1
            if self._take(fork):
                self._left[philosopher] = True
                return [f"Fork {fork + 1} taken by philosopher {number}"]
            return [f"Philosopher {number} is waiting for fork {fork + 1}"]
        fork = philosopher
        if self._take(fork):
            self._left[philosopher] = True
            return [f"Fork {fork + 1} taken by Philosopher {number}"]
        return []

    def run_round(self) -> list[str]:
        """Let every philosopher act once, in order, and report the progress."""
        messages = []
        for philosopher in range(self.count):
            messages.extend(self.attempt(philosopher))
        messages.append(
            f"Till now num of philosophers completed dinner are {self.completed}"
        )
        return messages

    def dine(self) -> list[str]:
        """Run rounds until every philosopher has eaten; return the whole log."""
        log = []
        while self.completed < self.count:
            log.extend(self.run_round())
        return log