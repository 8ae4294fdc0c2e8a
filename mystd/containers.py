"""Double-ended and first-in-first-out queues that raise on empty access."""

from __future__ import annotations

import copy
from collections import deque
from typing import Generic, Iterator, TypeVar

from mystd.errors import LibraryError

T = TypeVar("T")

_DEQUE_EMPTY_CODE = 4
_QUEUE_EMPTY_CODE = 3
_DEQUE_EMPTY_TEXT = "access to an empty deque (pop, front, back)"
_QUEUE_EMPTY_TEXT = "access to an empty queue (pop, front)"


def _filled(size: int, default_value: object) -> deque:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return deque(copy.copy(default_value) for _ in range(size))


class Deque(Generic[T]):
    """A double-ended queue; reading or removing from an empty one raises."""

    def __init__(self, size: int = 0, default_value: T | None = None) -> None:
        self._items: deque = _filled(size, default_value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Deque({list(self._items)!r})"

    def _check_not_empty(self) -> None:
        if not self._items:
            raise LibraryError(_DEQUE_EMPTY_TEXT, _DEQUE_EMPTY_CODE)

    def push_back(self, value: T) -> None:
        """Add ``value`` at the back."""
        self._items.append(value)

    def pop_back(self) -> T:
        """Remove and return the value at the back."""
        self._check_not_empty()
        return self._items.pop()

    def back(self) -> T:
        """Return the value at the back."""
        self._check_not_empty()
        return self._items[-1]

    def push_front(self, value: T) -> None:
        """Add ``value`` at the front."""
        self._items.appendleft(value)

    def pop_front(self) -> T:
        """Remove and return the value at the front."""
        self._check_not_empty()
        return self._items.popleft()

    def front(self) -> T:
        """Return the value at the front."""
        self._check_not_empty()
        return self._items[0]


class Queue(Generic[T]):
    """A first-in-first-out queue; reading or removing from an empty one raises."""

    def __init__(self, size: int = 0, default_value: T | None = None) -> None:
        self._items: deque = _filled(size, default_value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def _check_not_empty(self) -> None:
        if not self._items:
            raise LibraryError(_QUEUE_EMPTY_TEXT, _QUEUE_EMPTY_CODE)

    def push(self, value: T) -> None:
        """Add ``value`` at the back."""
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the oldest value."""
        self._check_not_empty()
        return self._items.popleft()

    def front(self) -> T:
        """Return the oldest value."""
        self._check_not_empty()
        return self._items[0]