"""Timing of the sorting algorithms on random data."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Sequence as _ArgSequence
from typing import Optional

from labstructs.array_sequence import ArraySequence
from labstructs.sorters import BubbleSorter, QuickSorter, ShellSorter, Sorter

RUNS = 10
VALUE_LIMIT = 50000
DEFAULT_SIZES = (22000, 24000, 26000, 28000)

_SORTERS = {
    "bubble": ("BubbleSort", BubbleSorter),
    "quick": ("QuickSort", QuickSorter),
    "shell": ("ShellSort", ShellSorter),
}


def _compare(a: int, b: int) -> int:
    return a - b


class Timer:
    """Measures seconds elapsed on a monotonic clock since the last start."""

    __slots__ = ("_start",)

    def __init__(self) -> None:
        self._start = time.perf_counter()

    def start(self) -> None:
        self._start = time.perf_counter()

    def elapsed(self) -> float:
        return time.perf_counter() - self._start


def time_sort(
    amount: int,
    sorter: Sorter,
    runs: int = RUNS,
    rng: Optional[random.Random] = None,
) -> float:
    """Return the mean seconds ``sorter`` takes on ``amount`` random integers."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    if runs <= 0:
        raise ValueError("runs must be positive")
    rng = rng or random.Random()
    timer = Timer()
    total = 0.0
    for _ in range(runs):
        sequence = ArraySequence(rng.randrange(VALUE_LIMIT) for _ in range(amount))
        timer.start()
        sorter.sort(sequence, _compare)
        total += timer.elapsed()
    return total / runs


def main(argv: Optional[_ArgSequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Time a sorting algorithm.")
    parser.add_argument("--sorter", choices=sorted(_SORTERS), default="bubble")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES))
    parser.add_argument("--runs", type=int, default=RUNS)
    parser.add_argument("--output", default="Table3.csv")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    title, sorter_class = _SORTERS[args.sorter]
    sorter = sorter_class()
    rng = random.Random(args.seed)
    with open(args.output, "w", encoding="utf-8") as table:
        table.write(f"{title};\n")
        for size in args.sizes:
            seconds = time_sort(size, sorter, args.runs, rng)
            table.write(f"{seconds};\n")
            print(f"{size} {seconds}")
    return 0


if __name__ == "__main__":
    sys.exit(main())