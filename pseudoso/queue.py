"""Bounded FIFO queue of processes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .models import Process

MAX_PROCESSES = 1000


class QueueFullError(Exception):
    """Raised when a process is added to a full queue."""


class ProcessQueue:
    """A circular queue of processes.

    As a ring buffer of ``capacity`` slots that keeps one slot empty, it
    holds at most ``capacity - 1`` processes.
    """

    def __init__(self, capacity: int = MAX_PROCESSES) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Process] = deque()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity - 1

    def enqueue(self, process: Process) -> None:
        """Add a process at the back; raise QueueFullError if full."""
        if self.is_full():
            raise QueueFullError(f"queue holds {len(self._items)} processes")
        self._items.append(process)

    def dequeue(self) -> Process:
        """Remove and return the front process; raise IndexError if empty."""
        if not self._items:
            raise IndexError("dequeue from an empty process queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Process]:
        return iter(self._items)