# labstructs

Classic data structures and sorting algorithms written in plain Python, with no dependencies:

- `labstructs.dynamic_array.DynamicArray` is an array with bounds-checked indexing. It is resized explicitly with `resize`, which grows or shrinks at the end, and `resize_left`, which grows by adding slots at the front and shrinks by dropping the tail.
- `labstructs.linked_list.LinkedList` is a doubly linked list.
- `labstructs.sequence.Sequence` is the abstract base of `ArraySequence` (in `labstructs.array_sequence`) and `LinkedListSequence` (in `labstructs.linked_list_sequence`). It provides `first`, `last`, `concat`, `subsequence`, `map`, `where`, `reduce`, `+` and `==`.
- `labstructs.sorters` has `BubbleSorter`, `QuickSorter` and `ShellSorter`. Each has `sort`, which sorts in place, and `sort_copy`, which returns a sorted copy.
- `labstructs.sorted_sequence.SortedSequence` keeps its items in order as they are added.
- `labstructs.hash_table.HashTable` is a separate-chaining dictionary with a pluggable `Hasher`.
- `labstructs.pointers` holds explicit ownership handles: `UniquePtr`, `SharedPtr`, `WeakPtr`, `MasterPtr` and `MemorySpan`.

Indices must lie in `0 <= index < len(...)`. Negative indices raise `IndexError`; they are not counted from the end.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

### Sequences

```python
from labstructs.array_sequence import ArraySequence
from labstructs.linked_list_sequence import LinkedListSequence

seq = ArraySequence([1, 2, 3])
seq.append(4)
seq.prepend(0)
print(list(seq))                       # [0, 1, 2, 3, 4]
print(seq.first(), seq.last())         # 0 4

doubled = seq.map(lambda x: x * 2)
evens = seq.where(lambda x: x % 2 == 0)
total = seq.reduce(lambda item, acc: item + acc, 0)   # func(item, accumulator)

print(list(seq.subsequence(1, 3)))     # [1, 2, 3]; the end index is inclusive

linked = LinkedListSequence([5, 6])
print(list(seq.concat(linked)))        # [0, 1, 2, 3, 4, 5, 6]
```

`insert_at(item, index)` places `item` at position `index`. `ArraySequence` has two more methods. `remove(index)` deletes an item. `splice(index, count, other)` returns a new sequence in which `count` items starting at `index` have been replaced by the items of `other`. A negative `index` in `splice` counts from the end, and the original sequence is left unchanged.

### Sorting

A comparison function returns a negative number, zero or a positive number, in the same way as `a - b`. If you leave it out, the items' natural ordering is used.

```python
from labstructs.array_sequence import ArraySequence
from labstructs.sorters import QuickSorter, ShellSorter

def compare(a, b):
    return a - b

seq = ArraySequence([0, 3, -5, 1, 10])
QuickSorter().sort(seq, compare)       # sorts in place and returns seq
print(list(seq))                       # [-5, 0, 1, 3, 10]

unsorted = ArraySequence([5, 4, 1, 2, 3])
sorted_copy = ShellSorter().sort_copy(unsorted, compare)
print(list(sorted_copy))               # [1, 2, 3, 4, 5]
print(list(unsorted))                  # [5, 4, 1, 2, 3]
```

### Sorted sequence

```python
from labstructs.array_sequence import ArraySequence
from labstructs.sorted_sequence import SortedSequence
from labstructs.sorters import QuickSorter

ordered = SortedSequence(ArraySequence([3, 1, 2]), QuickSorter(), lambda a, b: a - b)
ordered.add(0)
print(list(ordered))                   # [0, 1, 2, 3]
print(ordered.index_of(2))             # 2
print(ordered.index_of(9))             # -1
```

### Hash table

```python
from labstructs.hash_table import HashTable

table = HashTable()                    # capacity 10, Python's own hash
table.add("apple", 1)
table.add("pear", 2)
print(table["apple"], "pear" in table, len(table))   # 1 True 2
table.remove("pear")
```

Adding a key that is already in the table raises `ValueError`. Getting or removing a missing key raises `KeyError`. When the table is more than 80% full, its capacity doubles. To supply your own hash function, subclass `Hasher` and pass an instance as `hasher`.

### Pointers

These handles count owners explicitly. When the last `SharedPtr` lets go of a target, the target is dropped, and any `WeakPtr` watching it reports `expired()`.

```python
from labstructs.pointers import SharedPtr, WeakPtr, MemorySpan

owner = SharedPtr([1, 2, 3])
other = owner.share()
print(owner.use_count())               # 2
watcher = WeakPtr(owner)
locked = watcher.lock()
print(locked[0])                       # 1

span = MemorySpan([0, 1, 2, 3, 4])
print(span[2], len(span))              # 2 5
item = span.copy(2)                    # a SharedPtr owning a copy of the item
```

## Benchmark

The `labstructs-bench` command times a sorter on arrays of random integers below 50000. For each size it writes a CSV file that starts with the sorter's name followed by one mean time per line, and it prints each size together with its time:

```
labstructs-bench --sorter quick --sizes 1000 2000 --runs 5 --seed 1 --output times.csv
```

The options are:

- `--sorter`: `bubble`, `quick` or `shell`. The default is `bubble`.
- `--sizes`: the array sizes. The defaults are 22000, 24000, 26000 and 28000, which are slow with bubble sort.
- `--runs`: the number of runs averaged per size. The default is 10.
- `--output`: the CSV file to write. The default is `Table3.csv`.
- `--seed`: a seed for the random data.

## Running the tests

```
pytest
```