"""Simulations of classic operating-system algorithms: scheduling, memory, disk, synchronisation and deadlock."""

__version__ = "0.1.0"

__all__ = [
    "scheduling",
    "paging",
    "replacement",
    "disk",
    "allocation",
    "concurrency",
    "philosophers",
    "deadlock",
]