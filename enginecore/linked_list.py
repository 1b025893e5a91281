"""A singly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list with appends at the tail and removal by value."""

    def __init__(self) -> None:
        self._first: Optional[_Node[T]] = None
        self._last: Optional[_Node[T]] = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._first is None

    def push_back(self, value: T) -> None:
        node = _Node(value)
        self._size += 1
        if self._last is None:
            self._first = self._last = node
        else:
            self._last.next = node
            self._last = node

    def last(self) -> T:
        """Return the last value; raise IndexError if the list is empty."""
        if self._last is None:
            raise IndexError("last() on empty list")
        return self._last.value

    def find(self, value: Any) -> Optional[_Node[T]]:
        """Return the first node holding ``value``, or None."""
        return next((node for node in self._nodes() if node.value == value), None)

    def remove_first(self) -> None:
        if self._first is None:
            return
        self._first = self._first.next
        if self._first is None:
            self._last = None
        self._size -= 1

    def remove_last(self) -> None:
        if self._first is None:
            return
        if self._first is self._last:
            self.remove_first()
            return
        node = self._first
        while node.next is not self._last:
            node = node.next
        node.next = None
        self._last = node
        self._size -= 1

    def remove(self, value: Any) -> None:
        """Remove one node holding ``value``.

        The head is checked first, then the tail, then the nodes in between
        from the front; nothing happens if no node holds the value.
        """
        if self._first is None:
            return
        if self._first.value == value:
            self.remove_first()
            return
        if self._last.value == value:
            self.remove_last()
            return
        previous, current = self._first, self._first.next
        while current is not None and current.value != value:
            previous, current = current, current.next
        if current is None:
            return
        previous.next = current.next
        if current is self._last:
            self._last = previous
        self._size -= 1

    def remove_at(self, index: int) -> None:
        """Remove the value stored at ``index``, choosing the node as remove() does."""
        self.remove(self.at(index))

    def at(self, index: int) -> T:
        """Return the value at ``index``; raise IndexError if out of range."""
        if index < 0:
            raise IndexError("list index out of range")
        for position, value in enumerate(self):
            if position == index:
                return value
        raise IndexError("list index out of range")

    def __getitem__(self, index: int) -> T:
        return self.at(index)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self._nodes())

    def clear(self) -> None:
        self._first = self._last = None
        self._size = 0

    def to_list(self) -> list[T]:
        return list(self)

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._first
        while node is not None:
            yield node
            node = node.next