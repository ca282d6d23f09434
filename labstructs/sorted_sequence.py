"""A sequence kept in order by a comparator."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional

from labstructs.sequence import Sequence
from labstructs.sorters import Sorter

Comparator = Callable[[Any, Any], int]


def _natural(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class SortedSequence:
    """Holds a sorted copy of a sequence and keeps it sorted as items are added."""

    __slots__ = ("_sequence", "_sorter", "_compare")

    def __init__(
        self,
        sequence: Sequence,
        sorter: Sorter,
        compare: Optional[Comparator] = None,
    ) -> None:
        self._compare: Comparator = compare or _natural
        self._sorter = sorter
        self._sequence = sorter.sort_copy(sequence, self._compare)

    def __len__(self) -> int:
        return len(self._sequence)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._sequence)

    def __getitem__(self, index: int) -> Any:
        return self._sequence[index]

    def is_empty(self) -> bool:
        return len(self._sequence) == 0

    def first(self) -> Any:
        return self._sequence.first()

    def last(self) -> Any:
        return self._sequence.last()

    def index_of(self, element: Any) -> int:
        """Return the position of the first item equal to ``element``, or -1."""
        for position, item in enumerate(self._sequence):
            if item == element:
                return position
        return -1

    def subsequence(self, start: int, end: int) -> SortedSequence:
        """Return the items from ``start`` to ``end`` inclusive as a sorted sequence."""
        return SortedSequence(
            self._sequence.subsequence(start, end), self._sorter, self._compare
        )

    def add(self, element: Any) -> None:
        """Insert ``element`` at the place that keeps the sequence sorted."""
        if self.is_empty():
            self._sequence.append(element)
            return
        if self._compare(element, self.first()) <= 0:
            self._sequence.prepend(element)
            return
        if self._compare(element, self.last()) >= 0:
            self._sequence.append(element)
            return
        for position, item in enumerate(self._sequence):
            if self._compare(element, item) <= 0:
                self._sequence.insert_at(element, position)
                return

    def __repr__(self) -> str:
        return f"SortedSequence({list(self._sequence)!r})"