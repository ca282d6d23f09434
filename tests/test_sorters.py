import pytest
from hypothesis import given
from hypothesis import strategies as st

from labstructs.array_sequence import ArraySequence
from labstructs.linked_list_sequence import LinkedListSequence
from labstructs.sorters import BubbleSorter, QuickSorter, ShellSorter, Sorter

SORTERS = [BubbleSorter, QuickSorter, ShellSorter]
KINDS = [ArraySequence, LinkedListSequence]


def cmp_int(a, b):
    return a - b


def cmp_int_rev(a, b):
    return b - a


@pytest.mark.parametrize(
    "sorter_cls, data",
    [
        (QuickSorter, [0, 3, -5, 1, 10]),
        (BubbleSorter, [5, 4, 1, 2, 3]),
        (ShellSorter, [1, -1, 2, -2, 3]),
    ],
)
def test_source_cases(sorter_cls, data):
    seq = ArraySequence(data)
    result = sorter_cls().sort(seq, cmp_int)
    assert result is seq
    assert list(result) == sorted(data)


def test_quick_sort_known_order():
    seq = ArraySequence([0, 3, -5, 1, 10])
    QuickSorter().sort(seq, cmp_int)
    assert list(seq) == [-5, 0, 1, 3, 10]


@pytest.mark.parametrize("sorter_cls", SORTERS)
@pytest.mark.parametrize("kind", KINDS)
def test_reverse_comparator(sorter_cls, kind):
    data = [3, 1, 4, 1, 5, 9, 2, 6]
    seq = kind(data)
    sorter_cls().sort(seq, cmp_int_rev)
    assert list(seq) == sorted(data, reverse=True)
    assert seq == ArraySequence([9, 6, 5, 4, 3, 2, 1, 1])


@pytest.mark.parametrize("sorter_cls", SORTERS)
@pytest.mark.parametrize("kind", KINDS)
def test_sort_copy_leaves_original(sorter_cls, kind):
    data = [5, 2, 8, 1]
    seq = kind(data)
    result = sorter_cls().sort_copy(seq, cmp_int)
    assert isinstance(result, kind)
    assert result is not seq
    assert list(result) == sorted(data)
    assert result == ArraySequence([1, 2, 5, 8])
    assert seq == ArraySequence([5, 2, 8, 1])


@pytest.mark.parametrize("sorter_cls", SORTERS)
def test_sort_copy_empty(sorter_cls):
    seq = LinkedListSequence()
    result = sorter_cls().sort_copy(seq, cmp_int)
    assert isinstance(result, LinkedListSequence)
    assert len(result) == 0


@pytest.mark.parametrize("sorter_cls", SORTERS)
def test_default_comparator(sorter_cls):
    data = ["pear", "apple", "fig"]
    seq = ArraySequence(data)
    sorter_cls().sort(seq)
    assert list(seq) == sorted(data)


def test_quick_sort_large_sorted_input():
    data = list(range(3000))
    seq = ArraySequence(reversed(data))
    QuickSorter().sort(seq, cmp_int)
    assert list(seq) == data


def test_sorter_is_abstract():
    with pytest.raises(TypeError):
        Sorter()


@pytest.mark.parametrize("sorter_cls", SORTERS)
@given(data=st.lists(st.integers(min_value=-1000, max_value=1000), max_size=40))
def test_sorts_any_list(sorter_cls, data):
    for kind in KINDS:
        seq = kind(data)
        sorter_cls().sort(seq, cmp_int)
        assert list(seq) == sorted(data)
        assert seq == ArraySequence(sorted(data))
        assert len(seq) == len(data)