"""A thread-safe FIFO queue with an optional bound that can be shut down."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any


class QueueDestroyedError(RuntimeError):
    """The queue was destroyed while an operation had to wait."""


class BlockingQueue:
    """FIFO queue whose ``push`` blocks while full and ``pop`` blocks while empty.

    A ``max_count`` of zero or less means the queue is unbounded.
    """

    def __init__(self, max_count: int = -1) -> None:
        self._items: deque[Any] = deque()
        self._cond = threading.Condition()
        self._max_count = max_count
        self._destroyed = False

    @property
    def max_count(self) -> int:
        return self._max_count

    @max_count.setter
    def max_count(self, value: int) -> None:
        with self._cond:
            self._max_count = value
            self._cond.notify_all()

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def _is_full(self) -> bool:
        return self._max_count > 0 and len(self._items) >= self._max_count

    def push(self, item) -> None:
        """Append ``item``, waiting while the queue is full."""
        with self._cond:
            while self._is_full():
                if self._destroyed:
                    raise QueueDestroyedError("queue destroyed while full")
                self._cond.wait()
            self._items.append(item)
            self._cond.notify_all()

    def insert(self, item) -> None:
        """Append ``item``; the same as :meth:`push`."""
        self.push(item)

    def pop(self):
        """Remove and return the oldest item, waiting while the queue is empty."""
        with self._cond:
            while not self._items:
                if self._destroyed:
                    raise QueueDestroyedError("queue destroyed while empty")
                self._cond.wait()
            item = self._items.popleft()
            self._cond.notify_all()
            return item

    def destroy(self) -> None:
        """Wake every waiter; waits that cannot complete raise from now on."""
        with self._cond:
            self._destroyed = True
            self._cond.notify_all()

    def __len__(self) -> int:
        return len(self._items)