"""Fixed-capacity sliding windows of status records."""

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

from .errors import EmptyWindowError

T = TypeVar("T")


def push(window: list[T], new: T) -> T:
    """Append new to the end of window and return the evicted oldest element.

    Every remaining element moves one slot toward index 0. The window is
    modified in place and keeps its length.

    Raises:
        EmptyWindowError: window has no slots.
    """
    if not window:
        raise EmptyWindowError()
    old = window[0]
    for i in range(len(window) - 1):
        window[i] = window[i + 1]
    window[-1] = new
    return old


class RingWindow(Generic[T]):
    """Circular buffer with the same observable behaviour as push().

    Storage never moves; `_start` marks the oldest slot, so each push is O(1).
    """

    def __init__(self, initial: Sequence[T]):
        if len(initial) == 0:
            raise EmptyWindowError()
        self._slots: list[T] = list(initial)
        self._start = 0

    def push(self, new: T) -> T:
        """Replace the oldest element with new and return the evicted one."""
        old = self._slots[self._start]
        self._slots[self._start] = new
        self._start = (self._start + 1) % len(self._slots)
        return old

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> T:
        size = len(self._slots)
        if index < -size or index >= size:
            raise IndexError("window index out of range")
        return self._slots[(self._start + index) % size]

    def __iter__(self) -> Iterator[T]:
        size = len(self._slots)
        for i in range(size):
            yield self._slots[(self._start + i) % size]

    def to_list(self) -> list[T]:
        """Return the elements oldest first."""
        return list(self)

    def __repr__(self) -> str:
        return f"RingWindow({self.to_list()!r})"
