"""A separately chained hash table behind a small dictionary interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterator
from typing import Any, Optional

DEFAULT_CAPACITY = 10
_LOAD_LIMIT = 0.8


class Hasher(ABC):
    """Maps keys to integers."""

    @abstractmethod
    def hash(self, key: Any) -> int:
        """Return an integer hash of ``key``."""


class BuiltinHasher(Hasher):
    """Uses Python's own ``hash``."""

    def hash(self, key: Hashable) -> int:
        return hash(key)


class Dictionary(ABC):
    """A mapping from keys to values with explicit add and remove."""

    @abstractmethod
    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``."""

    @abstractmethod
    def contains_key(self, key: Any) -> bool:
        """Tell whether ``key`` is present."""

    @abstractmethod
    def add(self, key: Any, value: Any) -> None:
        """Store ``value`` under a new ``key``."""

    @abstractmethod
    def remove(self, key: Any) -> None:
        """Delete ``key`` and its value."""


class HashTable(Dictionary):
    """Hash table with chained buckets that doubles when over 80% full."""

    __slots__ = ("_buckets", "_hasher", "_count")

    def __init__(
        self, capacity: int = DEFAULT_CAPACITY, hasher: Optional[Hasher] = None
    ) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._buckets: list[list[tuple[Any, Any]]] = [[] for _ in range(capacity)]
        self._hasher = hasher or BuiltinHasher()
        self._count = 0

    def count(self) -> int:
        return self._count

    def capacity(self) -> int:
        return len(self._buckets)

    def _bucket(self, key: Any) -> list[tuple[Any, Any]]:
        if not self._buckets:
            return []
        return self._buckets[self._hasher.hash(key) % len(self._buckets)]

    def get(self, key: Any) -> Any:
        for stored, value in self._bucket(key):
            if stored == key:
                return value
        raise KeyError(key)

    def contains_key(self, key: Any) -> bool:
        return any(stored == key for stored, _ in self._bucket(key))

    def _grow(self, new_capacity: int) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(new_capacity)]
        for bucket in old:
            for key, value in bucket:
                self._bucket(key).append((key, value))

    def add(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``; a key already present is an error."""
        if not self._buckets:
            self._buckets = [[] for _ in range(DEFAULT_CAPACITY)]
        if self.contains_key(key):
            raise ValueError("Key already is in table")
        if self._count > _LOAD_LIMIT * len(self._buckets):
            self._grow(len(self._buckets) * 2)
        self._bucket(key).append((key, value))
        self._count += 1

    def remove(self, key: Any) -> None:
        bucket = self._bucket(key)
        for position, (stored, _) in enumerate(bucket):
            if stored == key:
                del bucket[position]
                self._count -= 1
                return
        raise KeyError(key)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: Any) -> Any:
        return self.get(key)

    def __iter__(self) -> Iterator[Any]:
        for bucket in self._buckets:
            for key, _ in bucket:
                yield key

    def __repr__(self) -> str:
        items = ", ".join(f"{key!r}: {self.get(key)!r}" for key in self)
        return f"HashTable({{{items}}})"