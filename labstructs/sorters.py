"""Sorting strategies that work on any ``Sequence`` through a comparator.

A comparator ``compare(a, b)`` returns a negative number when ``a`` goes
before ``b``, zero when they are equivalent and a positive number when ``a``
goes after ``b``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Optional

from labstructs.sequence import Sequence

Comparator = Callable[[Any, Any], int]


def _natural(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _swap(sequence: Sequence, i: int, j: int) -> None:
    sequence[i], sequence[j] = sequence[j], sequence[i]


class Sorter(ABC):
    """A sorting algorithm over sequences."""

    @abstractmethod
    def sort(self, sequence: Sequence, compare: Optional[Comparator] = None) -> Sequence:
        """Sort ``sequence`` in place and return it."""

    def sort_copy(
        self, sequence: Sequence, compare: Optional[Comparator] = None
    ) -> Sequence:
        """Return a sorted copy of ``sequence``, leaving it unchanged."""
        if len(sequence) == 0:
            return sequence.create()
        result = sequence.copy()
        self.sort(result, compare)
        return result


class BubbleSorter(Sorter):
    """Repeatedly swaps adjacent items that are out of order."""

    def sort(self, sequence: Sequence, compare: Optional[Comparator] = None) -> Sequence:
        compare = compare or _natural
        length = len(sequence)
        for _ in range(length):
            for j in range(length - 1):
                if compare(sequence[j], sequence[j + 1]) > 0:
                    _swap(sequence, j, j + 1)
        return sequence


class QuickSorter(Sorter):
    """Quicksort with the last item of each range as pivot."""

    def sort(self, sequence: Sequence, compare: Optional[Comparator] = None) -> Sequence:
        compare = compare or _natural
        pending = [(0, len(sequence) - 1)]
        while pending:
            start, end = pending.pop()
            if start >= end:
                continue
            pivot = self._partition(sequence, compare, start, end)
            pending.append((start, pivot - 1))
            pending.append((pivot + 1, end))
        return sequence

    @staticmethod
    def _partition(sequence: Sequence, compare: Comparator, start: int, end: int) -> int:
        pivot = sequence[end]
        boundary = start
        for i in range(start, end):
            if compare(sequence[i], pivot) <= 0:
                _swap(sequence, i, boundary)
                boundary += 1
        _swap(sequence, boundary, end)
        return boundary


class ShellSorter(Sorter):
    """Shell sort with gaps halving from half the length."""

    def sort(self, sequence: Sequence, compare: Optional[Comparator] = None) -> Sequence:
        compare = compare or _natural
        length = len(sequence)
        gap = length // 2
        while gap > 0:
            for i in range(gap, length):
                j = i - gap
                while j >= 0 and compare(sequence[j], sequence[j + gap]) > 0:
                    _swap(sequence, j, j + gap)
                    j -= gap
            gap //= 2
        return sequence