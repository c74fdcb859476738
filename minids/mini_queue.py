"""A fixed-capacity first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class QueueOverflowError(RuntimeError):
    """Raised when pushing onto a full queue."""


class QueueUnderflowError(RuntimeError):
    """Raised when reading from or popping an empty queue."""


class MiniQueue(Generic[T]):
    """A queue that holds at most ``capacity`` items.

    Items leave in the order they arrived; once some have left, their
    room can be reused. A capacity of zero selects the default of 10.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity if capacity > 0 else DEFAULT_CAPACITY
        self._items: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"MiniQueue({list(self._items)!r}, capacity={self._capacity})"

    def capacity(self) -> int:
        """Return the maximum number of items the queue holds."""
        return self._capacity

    def push(self, item: T) -> None:
        """Add ``item`` at the back of the queue."""
        if len(self._items) >= self._capacity:
            raise QueueOverflowError("Queue overflow in `push`")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the item at the front."""
        if not self._items:
            raise QueueUnderflowError("Queue underflow in `pop`")
        return self._items.popleft()

    def front(self) -> T:
        """Return the item that will leave next."""
        if not self._items:
            raise QueueUnderflowError("Queue underflow in `front`")
        return self._items[0]

    def back(self) -> T:
        """Return the item that arrived last."""
        if not self._items:
            raise QueueUnderflowError("Queue underflow in `back`")
        return self._items[-1]

    def __copy__(self) -> MiniQueue[T]:
        clone: MiniQueue[T] = MiniQueue(self._capacity)
        clone._items.extend(self._items)
        return clone