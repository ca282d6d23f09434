import pytest

from labstructs.array_sequence import ArraySequence
from labstructs.dynamic_array import DynamicArray
from labstructs.pointers import MasterPtr, MemorySpan, SharedPtr, UniquePtr, WeakPtr


# UniquePtr


def test_unique_ptr_holds_target_and_swaps():
    data = [17, 42, 3, 99, 8]
    ptr = UniquePtr()
    seq = ArraySequence(data)
    ptr2 = UniquePtr(5)
    assert ptr2.get() == 5
    ptr3 = UniquePtr(seq)
    for i in range(5):
        assert ptr3.get()[i] == seq[i]
    ptr2.swap(ptr)
    assert ptr.get() == 5
    assert ptr2.get() is None
    ptr.reset()
    assert ptr.get() is None


def test_unique_ptr_empty_by_default():
    ptr = UniquePtr()
    assert ptr.get() is None
    assert not ptr


def test_unique_ptr_swap_sequence():
    ptr = UniquePtr()
    ptr2 = UniquePtr(ArraySequence([1, 2, 3, 4, 5]))
    assert len(ptr2.get()) == 5
    ptr.swap(ptr2)
    assert ptr2.get() is None
    assert len(ptr.get()) == 5
    assert ptr.get().first() == 1


def test_unique_ptr_release_empties_handle():
    target = [1, 2]
    ptr = UniquePtr(target)
    released = ptr.release()
    assert released is target
    assert ptr.get() is None
    assert not ptr


def test_unique_ptr_reset_with_new_target():
    ptr = UniquePtr("a")
    ptr.reset("b")
    assert ptr.get() == "b"


def test_unique_ptr_take_moves_ownership():
    src = UniquePtr([7])
    dst = UniquePtr()
    dst.take(src)
    assert dst.get() == [7]
    assert src.get() is None


def test_unique_ptr_take_self_keeps_target():
    ptr = UniquePtr("x")
    ptr.take(ptr)
    assert ptr.get() == "x"


def test_unique_ptr_indexing():
    ptr = UniquePtr([10, 20, 30])
    assert ptr[1] == 20
    with pytest.raises(IndexError):
        ptr[-1]


def test_unique_ptr_indexing_empty_raises():
    with pytest.raises(ValueError):
        UniquePtr()[0]


# SharedPtr


def test_shared_ptr_counts_owners():
    data = [17, 42, 3, 99, 8]
    ptr = SharedPtr()
    seq = ArraySequence(data)
    ptr2 = SharedPtr(5)
    assert ptr2.use_count() == 1
    assert ptr2.unique() is True
    ptr4 = ptr2.share()
    assert ptr2.use_count() == 2
    assert ptr4.use_count() == 2
    assert ptr2.unique() is False
    assert ptr2.get() == 5
    ptr3 = SharedPtr(seq)
    for i in range(5):
        assert ptr3.get()[i] == seq[i]
    ptr2.swap(ptr)
    assert ptr.get() == 5
    assert ptr2.get() is None
    ptr.reset()
    assert ptr.get() is None


def test_shared_ptr_empty_and_copied():
    ptr = SharedPtr()
    assert ptr.get() is None
    assert ptr.use_count() == 0
    ptr2 = SharedPtr(ArraySequence([1, 2, 3]))
    assert len(ptr2.get()) == 3
    ptr3 = ptr.share()
    assert ptr3.unique()


def test_shared_ptr_last_reset_drops_target():
    ptr = SharedPtr([1])
    other = ptr.share()
    ptr.reset()
    assert other.get() == [1]
    assert other.use_count() == 1
    other.reset()
    assert other.use_count() == 0
    assert not other


def test_shared_ptr_assign_raw_target():
    ptr = SharedPtr("old")
    keeper = ptr.share()
    ptr.assign("new")
    assert ptr.get() == "new"
    assert ptr.unique()
    assert keeper.get() == "old"
    assert keeper.unique()


def test_shared_ptr_assign_other_pointer():
    a = SharedPtr("a")
    b = SharedPtr("b")
    a.assign(b)
    assert a.get() == "b"
    assert b.use_count() == 2


def test_shared_ptr_assign_same_block_survives():
    a = SharedPtr("only")
    a.assign(a)
    assert a.get() == "only"
    assert a.use_count() == 1


def test_shared_ptr_indexing():
    ptr = SharedPtr((4, 5, 6))
    assert ptr[2] == 6
    with pytest.raises(IndexError):
        ptr[-2]


# WeakPtr


def test_weak_ptr_does_not_own():
    shared = SharedPtr([1, 2])
    weak = WeakPtr(shared)
    assert weak.use_count() == 1
    assert not weak.expired()


def test_weak_ptr_lock_adds_owner():
    shared = SharedPtr([1, 2])
    weak = WeakPtr(shared)
    locked = weak.lock()
    assert locked.get() is shared.get()
    assert shared.use_count() == 2


def test_weak_ptr_expires_after_all_owners_reset():
    shared = SharedPtr("value")
    weak = WeakPtr(shared)
    shared.reset()
    assert weak.expired()
    locked = weak.lock()
    assert locked.get() is None
    assert locked.use_count() == 0


def test_weak_ptr_default_is_expired():
    weak = WeakPtr()
    assert weak.use_count() == 0
    assert weak.expired()
    assert weak.lock().get() is None


def test_weak_ptr_swap():
    a = WeakPtr(SharedPtr("a"))
    b = WeakPtr()
    a.swap(b)
    assert a.expired()
    assert b.lock().get() == "a"


# MasterPtr


def test_master_ptr_from_items():
    ptr = MasterPtr(range(5))
    assert ptr.use_count() == 1
    assert ptr[2] == 2
    assert ptr.get() == DynamicArray(range(5))


def test_master_ptr_default_is_empty_array():
    ptr = MasterPtr()
    assert ptr.use_count() == 0
    assert len(ptr.get()) == 0
    assert bool(ptr) is True


def test_master_ptr_share_sees_writes():
    ptr = MasterPtr([1, 2, 3])
    other = ptr.share()
    other[0] = 100
    assert ptr[0] == 100
    assert ptr.use_count() == 2
    assert not ptr.unique()


def test_master_ptr_reset():
    ptr = MasterPtr([1])
    ptr.reset()
    assert not ptr
    assert ptr.use_count() == 0
    assert ptr.get() is None


def test_master_ptr_index_errors():
    ptr = MasterPtr([1, 2])
    with pytest.raises(IndexError):
        ptr[-1]
    with pytest.raises(IndexError):
        ptr[2]
    with pytest.raises(IndexError):
        ptr[-1] = 0
    assert ptr.get() == DynamicArray([1, 2])


def test_master_ptr_swap():
    a = MasterPtr([1])
    b = MasterPtr([2, 3])
    a.swap(b)
    assert a.get() == DynamicArray([2, 3])
    assert b.get() == DynamicArray([1])


# MemorySpan


def test_memory_span_get():
    span = MemorySpan(range(5))
    assert span[2] == 2
    assert len(span) == 5


def test_memory_span_copy_is_independent():
    span = MemorySpan([[1], [2]])
    copied = span.copy(0)
    assert copied.unique()
    copied.get().append(9)
    assert span[0] == [1]


def test_memory_span_from_span_shares_array():
    span = MemorySpan([1, 2, 3])
    other = MemorySpan(span)
    other[0] = 10
    assert span[0] == 10
    assert span.pointer().use_count() == 2


def test_memory_span_from_dynamic_array_copies():
    array = DynamicArray([1, 2, 3])
    span = MemorySpan(array)
    array[0] = 50
    assert span[0] == 1


def test_memory_span_negative_index_raises():
    span = MemorySpan([1, 2])
    with pytest.raises(IndexError):
        span[-1]
    assert span[0] == 1
    assert len(span) == 2


def test_memory_span_default_is_empty():
    span = MemorySpan()
    assert len(span) == 0
    with pytest.raises(IndexError):
        span[0]