"""A doubly linked list with bounds-checked positional access."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional


class _Node:
    __slots__ = ("data", "next", "prev")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: Optional[_Node] = None
        self.prev: Optional[_Node] = None


class LinkedList:
    """Doubly linked list; indices must lie in ``0 <= index < len(list)``."""

    __slots__ = ("_head", "_tail", "_length")

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._length = 0
        for item in items:
            self.append(item)

    def _node(self, index: int) -> _Node:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("list indices must be integers")
        if index < 0 or index >= self._length:
            raise IndexError("Out of range")
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __getitem__(self, index: int) -> Any:
        return self._node(index).data

    def __setitem__(self, index: int, value: Any) -> None:
        self._node(index).data = value

    def first(self) -> Any:
        if self._head is None:
            raise IndexError("List is empty")
        return self._head.data

    def last(self) -> Any:
        if self._tail is None:
            raise IndexError("List is empty")
        return self._tail.data

    def append(self, item: Any) -> None:
        node = _Node(item)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._length += 1

    def prepend(self, item: Any) -> None:
        node = _Node(item)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._length += 1

    def insert_at(self, item: Any, index: int) -> None:
        """Insert ``item`` so that it ends up at position ``index``."""
        if index < 0 or index > self._length:
            raise IndexError("Out of range")
        if index == 0:
            self.prepend(item)
            return
        if index == self._length:
            self.append(item)
            return
        after = self._node(index)
        node = _Node(item)
        node.next = after
        node.prev = after.prev
        after.prev.next = node
        after.prev = node
        self._length += 1

    def sublist(self, start: int, end: int) -> LinkedList:
        """Return the elements from ``start`` to ``end`` inclusive."""
        if start < 0 or end < 0 or start >= self._length or end >= self._length:
            raise IndexError("Out of range")
        result = LinkedList()
        node = self._node(start)
        for _ in range(start, end + 1):
            result.append(node.data)
            node = node.next
        return result

    def concat(self, other: LinkedList) -> LinkedList:
        """Return a new list holding this list's items followed by ``other``'s."""
        result = LinkedList(self)
        for item in other:
            result.append(item)
        return result

    def __add__(self, other: object) -> LinkedList:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self.concat(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self._length == other._length and all(
            a == b for a, b in zip(self, other)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"