"""A fixed-capacity last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class StackOverflowError(RuntimeError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(RuntimeError):
    """Raised when reading from or popping an empty stack."""


class MiniStack(Generic[T]):
    """A stack that holds at most ``capacity`` items.

    A capacity of zero selects the default capacity of 10.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity if capacity > 0 else DEFAULT_CAPACITY
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"MiniStack({self._items!r}, capacity={self._capacity})"

    def capacity(self) -> int:
        """Return the maximum number of items the stack holds."""
        return self._capacity

    def push(self, item: T) -> None:
        """Place ``item`` on top of the stack."""
        if len(self._items) >= self._capacity:
            raise StackOverflowError("Stack overflow in `push`")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise StackUnderflowError("Stack underflow in `pop`")
        return self._items.pop()

    def top(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflowError("Stack underflow in `top`")
        return self._items[-1]