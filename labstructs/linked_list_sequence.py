"""A sequence stored in a doubly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from labstructs.linked_list import LinkedList
from labstructs.sequence import Sequence


class LinkedListSequence(Sequence):
    """List-backed sequence; indices must lie in ``0 <= index < len(seq)``."""

    __slots__ = ("_list",)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._list = LinkedList(items)

    def create(self) -> LinkedListSequence:
        return LinkedListSequence()

    def copy(self) -> LinkedListSequence:
        return LinkedListSequence(self._list)

    def __len__(self) -> int:
        return len(self._list)

    def __getitem__(self, index: int) -> Any:
        return self._list[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._list[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._list)

    def first(self) -> Any:
        return self._list.first()

    def last(self) -> Any:
        return self._list.last()

    def append(self, item: Any) -> None:
        self._list.append(item)

    def prepend(self, item: Any) -> None:
        self._list.prepend(item)

    def insert_at(self, item: Any, index: int) -> None:
        """Insert ``item`` so that it ends up at position ``index``."""
        self._list.insert_at(item, index)