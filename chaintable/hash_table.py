from typing import List, Optional, Set

from chaintable.logger.log_types import LogEvent
from chaintable.logger.logger import log_table_event

GROWTH_COEFFICIENT = 2
_KNUTH_MULTIPLIER = 2654435761
_HASH_MASK = 0xFFFFFFFF

Bucket = List[list]


class InvalidArgument(ValueError):
    pass


def hash_index(key: int, modulus: int) -> int:
    """Knuth multiplicative hash of key, reduced to [0, modulus)."""
    h = (key * _KNUTH_MULTIPLIER) & _HASH_MASK
    # fold high bits into the low ones
    h ^= h >> 16
    return h % modulus


class HashTable:
    """
    Separate-chaining hash table from int keys to str values.

    Buckets are plain lists of [key, value] pairs. When the number of stored
    keys divided by the capacity reaches the load factor, the bucket list
    grows by GROWTH_COEFFICIENT and every pair is re-hashed on its own.
    Not thread-safe: concurrent callers must hold a single external lock.
    """

    def __init__(self, capacity: int, load_factor: float) -> None:
        if capacity <= 0:
            raise InvalidArgument("hash table capacity must be greater than zero")

        if load_factor <= 0.0 or load_factor > 1.0:
            raise InvalidArgument("hash table load factor must be in range (0...1]")

        self._load_factor: float = load_factor
        self._buckets: List[Bucket] = [[] for _ in range(capacity)]
        self._num_keys: int = 0
        log_table_event(LogEvent.TABLE_CREATED, capacity, 0)

    def _hash(self, key: int) -> int:
        return hash_index(key, len(self._buckets))

    def _resize(self) -> None:
        new_buckets: List[Bucket] = [[] for _ in range(self.capacity() * GROWTH_COEFFICIENT)]
        for bucket in self._buckets:
            for pair in bucket:
                new_buckets[hash_index(pair[0], len(new_buckets))].append(pair)
        self._buckets = new_buckets
        log_table_event(LogEvent.TABLE_RESIZED, self.capacity(), self._num_keys)

    def search(self, key: int) -> Optional[str]:
        for pair in self._buckets[self._hash(key)]:
            if pair[0] == key:
                return pair[1]
        return None

    def put(self, key: int, value: str) -> None:
        """Insert key or overwrite its value, growing the table if the load factor is reached."""
        bucket = self._buckets[self._hash(key)]
        for pair in bucket:
            if pair[0] == key:
                pair[1] = value
                return

        bucket.append([key, value])
        self._num_keys += 1
        if self._num_keys / self.capacity() >= self._load_factor:
            self._resize()

    def remove(self, key: int) -> Optional[str]:
        bucket = self._buckets[self._hash(key)]
        for i, pair in enumerate(bucket):
            if pair[0] == key:
                del bucket[i]
                self._num_keys -= 1
                return pair[1]
        return None

    def contains_key(self, key: int) -> bool:
        return self.search(key) is not None

    def empty(self) -> bool:
        return self.size() == 0

    def size(self) -> int:
        return self._num_keys

    def capacity(self) -> int:
        return len(self._buckets)

    def load_factor(self) -> float:
        return self._load_factor

    def keys(self) -> Set[int]:
        return {pair[0] for bucket in self._buckets for pair in bucket}

    def values(self) -> List[str]:
        return [pair[1] for bucket in self._buckets for pair in bucket]

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: int) -> bool:
        return self.contains_key(key)

    def __repr__(self) -> str:
        return f"HashTable(size={self.size()}, capacity={self.capacity()}, load_factor={self._load_factor})"
