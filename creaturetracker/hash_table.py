"""A fixed-capacity hash table using separate chaining, keyed by string.

Items must expose a ``key`` attribute holding a string.
"""

from __future__ import annotations

from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 101

_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _string_hash(key: str) -> int:
    """A stable 64-bit FNV-1a hash of the UTF-8 encoding of ``key``."""
    value = _FNV_OFFSET
    for byte in key.encode("utf-8"):
        value ^= byte
        value = (value * _FNV_PRIME) & _MASK64
    return value


def _key_of(item: Any) -> str:
    return item.key


class HashTable(Generic[T]):
    """A hash table of ``capacity`` buckets, each a list of items in insertion order."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._buckets: list[list[T]] = [[] for _ in range(capacity)]
        self._count = 0

    @property
    def capacity(self) -> int:
        """The number of buckets."""
        return self._capacity

    def bucket_index(self, key: str) -> int:
        """The bucket that ``key`` hashes to."""
        return _string_hash(key) % self._capacity

    def _bucket(self, key: str) -> list[T]:
        return self._buckets[self.bucket_index(key)]

    def insert(self, item: T) -> None:
        """Append ``item`` to the end of its bucket; duplicates are not checked."""
        self._bucket(_key_of(item)).append(item)
        self._count += 1

    def remove(self, key: str) -> None:
        """Remove the first item with ``key``, if there is one."""
        bucket = self._bucket(key)
        for position, item in enumerate(bucket):
            if _key_of(item) == key:
                del bucket[position]
                self._count -= 1
                return

    def get(self, key: str) -> Optional[T]:
        """Return the first item with ``key``, or None if there is none."""
        return next(
            (item for item in self._bucket(key) if _key_of(item) == key), None
        )

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return any(_key_of(item) == key for item in self._bucket(key))

    def clear(self) -> None:
        """Empty every bucket."""
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        for bucket in self._buckets:
            yield from bucket

    def __str__(self) -> str:
        return "".join(
            f"{index}: " + "".join(f"{item} " for item in bucket) + "\n"
            for index, bucket in enumerate(self._buckets)
        )