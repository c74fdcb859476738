"""A singly linked list with sorting, de-duplication and merging."""

from __future__ import annotations

import functools
from collections import deque
from itertools import groupby
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

MAX_SIZE = 1000


@functools.total_ordering
class MiniList(Generic[T]):
    """An ordered sequence with cheap access to both ends.

    Lists compare element by element; when one is a prefix of the
    other, the shorter list is the smaller.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: deque[T] = deque(items if items is not None else ())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"MiniList({list(self._items)!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MiniList):
            return NotImplemented
        return compare(self, other) == 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, MiniList):
            return NotImplemented
        return compare(self, other) < 0

    def __copy__(self) -> MiniList[T]:
        return MiniList(self._items)

    def max_size(self) -> int:
        """Return the nominal maximum number of elements."""
        return MAX_SIZE

    def front(self) -> T:
        """Return the first element."""
        if not self._items:
            raise IndexError("front() attempted to access empty list")
        return self._items[0]

    def back(self) -> T:
        """Return the last element."""
        if not self._items:
            raise IndexError("back() attempted to access empty list")
        return self._items[-1]

    def push_back(self, item: T) -> None:
        """Append ``item`` at the end."""
        self._items.append(item)

    def push_front(self, item: T) -> None:
        """Insert ``item`` at the beginning."""
        self._items.appendleft(item)

    def pop_back(self) -> T:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop_back attempted to work on empty list")
        return self._items.pop()

    def pop_front(self) -> T:
        """Remove and return the first element."""
        if not self._items:
            raise IndexError("pop_front attempted to work on empty list")
        return self._items.popleft()

    def swap(self, other: MiniList[T]) -> None:
        """Exchange the contents of this list and ``other``."""
        self._items, other._items = other._items, self._items

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def sort(self) -> None:
        """Sort the elements in ascending order; equal elements keep their order."""
        self._items = deque(sorted(self._items))

    def unique(self) -> None:
        """Collapse runs of equal adjacent elements into one."""
        self._items = deque(value for value, _ in groupby(self._items))


def _merged(lhs: Iterable[T], rhs: Iterable[T]) -> Iterator[T]:
    left, right = iter(lhs), iter(rhs)
    sentinel = object()
    a = next(left, sentinel)
    b = next(right, sentinel)
    while a is not sentinel and b is not sentinel:
        if a < b:  # type: ignore[operator]
            yield a  # type: ignore[misc]
            a = next(left, sentinel)
        else:
            yield b  # type: ignore[misc]
            b = next(right, sentinel)
    if a is not sentinel:
        yield a  # type: ignore[misc]
        yield from left
    if b is not sentinel:
        yield b  # type: ignore[misc]
        yield from right


def merge(lhs: MiniList[T], rhs: MiniList[T]) -> MiniList[T]:
    """Return a new list merging two sorted lists; ties take from ``rhs`` first."""
    return MiniList(_merged(lhs, rhs))


def compare(lhs: MiniList[T], rhs: MiniList[T]) -> int:
    """Return -1, 0 or 1 as ``lhs`` orders before, equal to or after ``rhs``."""
    for a, b in zip(lhs, rhs):
        if a != b:
            return -1 if a < b else 1  # type: ignore[operator]
    return (len(lhs) > len(rhs)) - (len(lhs) < len(rhs))