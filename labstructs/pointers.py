"""Ownership handles: unique, shared, weak and array-owning master pointers.

Python manages memory itself, so these handles model ownership explicitly.
Each handle tracks who holds a target. When the last shared owner lets go,
the target is dropped and any weak handle sees it as expired.
"""

from __future__ import annotations

from collections.abc import Iterable
from copy import copy as _shallow_copy
from typing import Any, Optional

from labstructs.dynamic_array import DynamicArray


class _Control:
    """Shared bookkeeping for a target and the number of its owners."""

    __slots__ = ("target", "count")

    def __init__(self, target: Any, count: int) -> None:
        self.target = target
        self.count = count

    def acquire(self) -> None:
        self.count += 1

    def release(self) -> None:
        self.count -= 1
        if self.count <= 0:
            self.target = None


def _index_target(target: Any, index: int) -> Any:
    if index < 0:
        raise IndexError("Out of range")
    if target is None:
        raise ValueError("Dereferencing an empty pointer")
    return target[index]


class UniquePtr:
    """Sole owner of a target; ownership moves instead of being shared."""

    __slots__ = ("_target",)

    def __init__(self, target: Any = None) -> None:
        self._target = target

    def get(self) -> Any:
        return self._target

    def release(self) -> Any:
        """Give up ownership and return the target, leaving this handle empty."""
        target, self._target = self._target, None
        return target

    def reset(self, target: Any = None) -> None:
        """Drop the current target and own ``target`` instead."""
        self._target = target

    def swap(self, other: UniquePtr) -> None:
        self._target, other._target = other._target, self._target

    def take(self, other: UniquePtr) -> None:
        """Move ownership from ``other`` into this handle, emptying ``other``."""
        if other is self:
            return
        self._target = other._target
        other._target = None

    def __bool__(self) -> bool:
        return self._target is not None

    def __getitem__(self, index: int) -> Any:
        return _index_target(self._target, index)

    def __repr__(self) -> str:
        return f"UniquePtr({self._target!r})"


class SharedPtr:
    """One of several owners of a target, counted in a shared block."""

    __slots__ = ("_block",)

    def __init__(self, target: Any = None) -> None:
        self._block = _Control(target, 0 if target is None else 1)

    @classmethod
    def _joining(cls, block: _Control) -> SharedPtr:
        pointer = cls.__new__(cls)
        block.acquire()
        pointer._block = block
        return pointer

    def share(self) -> SharedPtr:
        """Return another owner of the same target, raising the count by one."""
        return SharedPtr._joining(self._block)

    def get(self) -> Any:
        return self._block.target

    def use_count(self) -> int:
        return self._block.count

    def unique(self) -> bool:
        return self._block.count == 1

    def reset(self) -> None:
        """Stop owning the target; it is dropped if this was the last owner."""
        self._block.release()
        self._block = _Control(None, 0)

    def assign(self, target: Any) -> None:
        """Own ``target`` instead: join another ``SharedPtr`` or start a new count."""
        if isinstance(target, SharedPtr):
            target._block.acquire()
            new_block = target._block
        else:
            new_block = _Control(target, 1)
        self._block.release()
        self._block = new_block

    def swap(self, other: SharedPtr) -> None:
        self._block, other._block = other._block, self._block

    def __bool__(self) -> bool:
        return self._block.target is not None

    def __getitem__(self, index: int) -> Any:
        return _index_target(self._block.target, index)

    def __repr__(self) -> str:
        return f"SharedPtr({self._block.target!r}, use_count={self._block.count})"


class WeakPtr:
    """Observes a shared target without owning it."""

    __slots__ = ("_block",)

    def __init__(self, shared: Optional[SharedPtr] = None) -> None:
        self._block: Optional[_Control] = None if shared is None else shared._block

    def use_count(self) -> int:
        return 0 if self._block is None else self._block.count

    def expired(self) -> bool:
        return self.use_count() == 0

    def lock(self) -> SharedPtr:
        """Return a new owner of the target, or an empty pointer if it expired."""
        if self._block is None or self.expired():
            return SharedPtr()
        return SharedPtr._joining(self._block)

    def swap(self, other: WeakPtr) -> None:
        self._block, other._block = other._block, self._block

    def __repr__(self) -> str:
        return f"WeakPtr(use_count={self.use_count()})"


class MasterPtr:
    """Shared owner of a ``DynamicArray``."""

    __slots__ = ("_block",)

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        if items is None:
            self._block = _Control(DynamicArray(), 0)
        else:
            self._block = _Control(DynamicArray(items), 1)

    @classmethod
    def _joining(cls, block: _Control) -> MasterPtr:
        pointer = cls.__new__(cls)
        block.acquire()
        pointer._block = block
        return pointer

    def share(self) -> MasterPtr:
        """Return another owner of the same array, raising the count by one."""
        return MasterPtr._joining(self._block)

    def get(self) -> Optional[DynamicArray]:
        return self._block.target

    def use_count(self) -> int:
        return self._block.count

    def unique(self) -> bool:
        return self._block.count == 1

    def reset(self) -> None:
        """Stop owning the array; it is dropped if this was the last owner."""
        self._block.release()
        self._block = _Control(None, 0)

    def swap(self, other: MasterPtr) -> None:
        self._block, other._block = other._block, self._block

    def __bool__(self) -> bool:
        return self._block.target is not None

    def __getitem__(self, index: int) -> Any:
        return _index_target(self._block.target, index)

    def __setitem__(self, index: int, value: Any) -> None:
        if index < 0:
            raise IndexError("Out of range")
        if self._block.target is None:
            raise ValueError("Dereferencing an empty pointer")
        self._block.target[index] = value

    def __repr__(self) -> str:
        return f"MasterPtr({self._block.target!r}, use_count={self._block.count})"


class MemorySpan:
    """A view over an array owned through a ``MasterPtr``.

    Built from another span, it shares that span's array; built from any
    other iterable, it owns a fresh copy of the items.
    """

    __slots__ = ("_ptr",)

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        if isinstance(items, MemorySpan):
            self._ptr = items._ptr.share()
        else:
            self._ptr = MasterPtr(items)

    def __getitem__(self, index: int) -> Any:
        return self._ptr[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._ptr[index] = value

    def __len__(self) -> int:
        array = self._ptr.get()
        return 0 if array is None else len(array)

    def pointer(self) -> MasterPtr:
        """Return the master pointer that owns the span's array."""
        return self._ptr

    def copy(self, index: int) -> SharedPtr:
        """Return a new sole owner of a copy of the item at ``index``."""
        return SharedPtr(_shallow_copy(self._ptr[index]))

    def __repr__(self) -> str:
        return f"MemorySpan({self._ptr.get()!r})"