"""A fixed-size array that can be resized explicitly."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class DynamicArray:
    """Contiguous storage with bounds-checked access and explicit resizing.

    Indices must lie in ``0 <= index < len(array)``; negative indices are
    rejected rather than counted from the end.
    """

    __slots__ = ("_data",)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._data = list(items)

    @classmethod
    def with_size(cls, size: int) -> DynamicArray:
        """Create an array of ``size`` elements, each ``None``."""
        if size < 0:
            raise ValueError("size must not be negative")
        return cls([None] * size)

    def _check(self, index: int) -> int:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError("array indices must be integers")
        if index < 0 or index >= len(self._data):
            raise IndexError("Out of range")
        return index

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> Any:
        return self._data[self._check(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[self._check(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def resize(self, new_size: int, fill: Any = None) -> None:
        """Grow or shrink at the end; new slots receive ``fill``."""
        if new_size < 0:
            raise ValueError("new size less than 0")
        current = len(self._data)
        if new_size <= current:
            del self._data[new_size:]
        else:
            self._data.extend([fill] * (new_size - current))

    def resize_left(self, new_size: int, fill: Any = None) -> None:
        """Grow by adding ``fill`` at the front; shrink by dropping the tail."""
        if new_size < 0:
            raise ValueError("new size less than 0")
        current = len(self._data)
        if new_size <= current:
            del self._data[new_size:]
        else:
            self._data[:0] = [fill] * (new_size - current)

    def copy(self) -> DynamicArray:
        return DynamicArray(self._data)

    def __add__(self, other: object) -> DynamicArray:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        return DynamicArray(self._data + other._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DynamicArray({self._data!r})"

    def __str__(self) -> str:
        return "".join(f"{item}\n" for item in self._data)