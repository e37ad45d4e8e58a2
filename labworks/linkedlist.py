"""A doubly-linked list with a cursor that can walk, insert and delete."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from functools import cmp_to_key
from typing import Any

Comparator = Callable[[Any, Any], int]


class _Node:
    __slots__ = ("payload", "next", "prev")

    def __init__(self, payload: Any) -> None:
        self.payload = payload
        self.next: _Node | None = None
        self.prev: _Node | None = None


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class LinkedList:
    """A doubly-linked list of arbitrary payloads."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def insert(self, payload: Any) -> None:
        """Add ``payload`` at the head of the list; None is not accepted."""
        if payload is None:
            raise ValueError("payload must not be None")
        node = _Node(payload)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def append(self, payload: Any) -> None:
        """Add ``payload`` at the tail of the list."""
        node = _Node(payload)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the head payload; raise IndexError if empty."""
        node = self._head
        if node is None:
            raise IndexError("pop from empty list")
        self._unlink(node)
        return node.payload

    def pop_tail(self) -> Any:
        """Remove and return the tail payload; raise IndexError if empty."""
        node = self._tail
        if node is None:
            raise IndexError("pop from empty list")
        self._unlink(node)
        return node.payload

    def sort(self, ascending: bool = True, compare: Comparator | None = None) -> None:
        """Sort the payloads in place, stably, using a three-way ``compare``."""
        if self._size < 2:
            return
        key = cmp_to_key(compare if compare is not None else _natural_compare)
        ordered = sorted(self, key=key, reverse=not ascending)
        node = self._head
        for payload in ordered:
            assert node is not None
            node.payload = payload
            node = node.next

    def head(self) -> Any:
        """Return the head payload; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("empty list has no head")
        return self._head.payload

    def tail(self) -> Any:
        """Return the tail payload; raise IndexError if empty."""
        if self._tail is None:
            raise IndexError("empty list has no tail")
        return self._tail.payload

    def iterator(self) -> LinkedListIterator:
        """Return a cursor positioned at the head; raise ValueError if empty."""
        if self._head is None:
            raise ValueError("cannot iterate over an empty list")
        return LinkedListIterator(self, self._head)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.payload
            node = node.next

    def _unlink(self, node: _Node) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1

    def _insert_before(self, node: _Node, payload: Any) -> None:
        if node.prev is None:
            self.insert(payload)
            return
        new = _Node(payload)
        new.next = node
        new.prev = node.prev
        node.prev.next = new
        node.prev = new
        self._size += 1


class LinkedListIterator:
    """A cursor over a LinkedList that can move both ways and edit in place."""

    def __init__(self, linked_list: LinkedList, node: _Node) -> None:
        self._list = linked_list
        self._node: _Node | None = node

    def _current(self) -> _Node:
        if self._node is None:
            raise RuntimeError("iterator no longer points at an element")
        return self._node

    def has_next(self) -> bool:
        """Return whether there is an element after the current one."""
        return self._current().next is not None

    def has_prev(self) -> bool:
        """Return whether there is an element before the current one."""
        return self._current().prev is not None

    def advance(self) -> bool:
        """Move to the next element; return False if already at the tail."""
        node = self._current()
        if node.next is None:
            return False
        self._node = node.next
        return True

    def retreat(self) -> bool:
        """Move to the previous element; return False if already at the head."""
        node = self._current()
        if node.prev is None:
            return False
        self._node = node.prev
        return True

    def payload(self) -> Any:
        """Return the payload of the current element."""
        return self._current().payload

    def delete(self) -> Any:
        """Remove the current element and return its payload.

        The cursor moves to the successor, or to the predecessor when the
        tail was removed. Removing the only element leaves the cursor unusable.
        """
        node = self._current()
        self._node = node.next if node.next is not None else node.prev
        self._list._unlink(node)
        return node.payload

    def insert_before(self, payload: Any) -> None:
        """Insert ``payload`` before the current element; the cursor stays put."""
        self._list._insert_before(self._current(), payload)