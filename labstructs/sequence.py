"""The abstract ordered collection shared by the array and list sequences."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from itertools import islice
from typing import Any


class Sequence(ABC):
    """An ordered, indexable, growable collection.

    Subclasses supply storage through ``create``, ``__len__``,
    ``__getitem__``, ``__setitem__``, ``append``, ``prepend`` and
    ``insert_at``; everything else is built on those.
    """

    @abstractmethod
    def create(self) -> Sequence:
        """Return a new, empty sequence of the same kind."""

    def copy(self) -> Sequence:
        """Return a new sequence of the same kind with the same items."""
        result = self.create()
        for item in self:
            result.append(item)
        return result

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def __getitem__(self, index: int) -> Any: ...

    @abstractmethod
    def __setitem__(self, index: int, value: Any) -> None: ...

    def __iter__(self) -> Iterator[Any]:
        for index in range(len(self)):
            yield self[index]

    def first(self) -> Any:
        if len(self) == 0:
            raise IndexError("Sequence is empty")
        return self[0]

    def last(self) -> Any:
        if len(self) == 0:
            raise IndexError("Sequence is empty")
        return self[len(self) - 1]

    @abstractmethod
    def append(self, item: Any) -> None: ...

    @abstractmethod
    def prepend(self, item: Any) -> None: ...

    @abstractmethod
    def insert_at(self, item: Any, index: int) -> None:
        """Insert ``item`` so that it ends up at position ``index``."""

    def concat(self, other: Iterable[Any]) -> Sequence:
        """Return a new sequence holding this one's items followed by ``other``'s."""
        result = self.copy()
        for item in other:
            result.append(item)
        return result

    def subsequence(self, start: int, end: int) -> Sequence:
        """Return the items from ``start`` to ``end`` inclusive."""
        length = len(self)
        if start < 0 or end < 0 or start >= length or end >= length:
            raise IndexError("Out of range")
        result = self.create()
        for item in islice(self, start, end + 1):
            result.append(item)
        return result

    def map(self, func: Callable[[Any], Any]) -> Sequence:
        result = self.create()
        for item in self:
            result.append(func(item))
        return result

    def where(self, predicate: Callable[[Any], bool]) -> Sequence:
        result = self.create()
        for item in self:
            if predicate(item):
                result.append(item)
        return result

    def reduce(self, func: Callable[[Any, Any], Any], start: Any) -> Any:
        """Fold the items into ``start``, calling ``func(item, accumulator)``."""
        accumulator = start
        for item in self:
            accumulator = func(item, accumulator)
        return accumulator

    def __add__(self, other: object) -> Sequence:
        if not isinstance(other, Sequence):
            return NotImplemented
        return self.concat(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "{" + ", ".join(str(item) for item in self) + "}"