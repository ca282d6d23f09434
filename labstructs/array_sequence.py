"""A sequence stored in a dynamic array."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from labstructs.dynamic_array import DynamicArray
from labstructs.sequence import Sequence


class ArraySequence(Sequence):
    """Array-backed sequence; indices must lie in ``0 <= index < len(seq)``."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = DynamicArray(items)

    def create(self) -> ArraySequence:
        return ArraySequence()

    def copy(self) -> ArraySequence:
        return ArraySequence(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def append(self, item: Any) -> None:
        self._items.resize(len(self._items) + 1)
        self._items[len(self._items) - 1] = item

    def prepend(self, item: Any) -> None:
        self._items.resize_left(len(self._items) + 1)
        self._items[0] = item

    def insert_at(self, item: Any, index: int) -> None:
        """Insert ``item`` so that it ends up at position ``index``."""
        length = len(self._items)
        if index < 0 or index > length:
            raise IndexError("Out of range")
        self._items.resize(length + 1)
        for position in range(length, index, -1):
            self._items[position] = self._items[position - 1]
        self._items[index] = item

    def remove(self, index: int) -> None:
        """Delete the item at ``index``, shifting later items left."""
        length = len(self._items)
        if index < 0 or index >= length:
            raise IndexError("Out of range")
        for position in range(index, length - 1):
            self._items[position] = self._items[position + 1]
        self._items.resize(length - 1)

    def splice(
        self, index: int, count: int, other: Optional[Iterable[Any]] = None
    ) -> ArraySequence:
        """Return a new sequence with ``count`` items from ``index`` replaced by ``other``.

        A negative ``index`` counts from the end. This sequence is left unchanged.
        """
        length = len(self._items)
        if abs(index) > length:
            raise IndexError("Out of range")
        if index < 0:
            index += length
        if count < 0:
            raise ValueError("count must not be negative")
        if index + count > length:
            raise IndexError("Out of range")
        result = ArraySequence()
        for position, item in enumerate(self._items):
            if position < index or position >= index + count:
                result.append(item)
        for offset, item in enumerate(other or ()):
            result.insert_at(item, index + offset)
        return result