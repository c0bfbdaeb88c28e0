from dataclasses import dataclass
from typing import Iterator

from .debug import dump_table, printf_err
from .hashing import HashFn, hash_int


DEFAULT_CAPACITY = 16
DEFAULT_LOAD_FACTOR = 0.75
GROWTH_COEFFICIENT = 2


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


class InvalidConfigurationError(ValueError):
    pass


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass
class Entry:
    key: int
    value: str


Bucket = list[Entry]


class HashTable:
    buckets: list[Bucket]
    num_keys: int
    _load_factor: float

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        load_factor: float = DEFAULT_LOAD_FACTOR,
        hash_fn: HashFn = hash_int,
    ) -> None:
        if capacity <= 0:
            raise InvalidConfigurationError(
                "hash table capacity must be greater than zero"
            )
        if not 0.0 < load_factor <= 1.0:
            raise InvalidConfigurationError(
                "hash table load factor must be in range (0, 1]"
            )

        self._load_factor = load_factor
        self.hash_fn = hash_fn
        self.num_keys = 0
        self.buckets = [[] for _ in range(capacity)]

    def hash(self, key: int) -> int:
        return self.hash_fn(key, len(self.buckets))

    def search(self, key: int) -> str | NotFound:
        entry = self._find_entry(self.buckets[self.hash(key)], key)
        if entry is None:
            return NotFound()
        return entry.value

    def contains_key(self, key: int) -> bool:
        return not isinstance(self.search(key), NotFound)

    def put(self, key: int, value: str):
        bucket = self.buckets[self.hash(key)]
        entry = self._find_entry(bucket, key)
        if entry is not None:
            entry.value = value
            return

        bucket.append(Entry(key, value))
        self.num_keys += 1
        if self.num_keys / self.capacity() >= self.load_factor:
            self._grow()

    def remove(self, key: int) -> str | NotFound:
        bucket = self.buckets[self.hash(key)]
        for i, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[i]
                self.num_keys -= 1
                return entry.value
        return NotFound()

    def add_all(self, from_t: "HashTable"):
        for entry in from_t._entries():
            self.put(entry.key, entry.value)

    def clear(self):
        self.num_keys = 0
        self.buckets = [[] for _ in range(self.capacity())]

    def size(self) -> int:
        return self.num_keys

    def empty(self) -> bool:
        return self.size() == 0

    def capacity(self) -> int:
        return len(self.buckets)

    @property
    def load_factor(self) -> float:
        return self._load_factor

    def keys(self) -> set[int]:
        return {entry.key for entry in self._entries()}

    def values(self) -> list[str]:
        return [entry.value for entry in self._entries()]

    def items(self) -> list[tuple[int, str]]:
        return [(entry.key, entry.value) for entry in self._entries()]

    def _entries(self) -> Iterator[Entry]:
        for bucket in self.buckets:
            yield from bucket

    def _find_entry(self, bucket: Bucket, key: int) -> Entry | None:
        for entry in bucket:
            if entry.key == key:
                return entry
        return None

    def _grow(self):
        old_capacity = self.capacity()
        new_buckets: list[Bucket] = [
            [] for _ in range(old_capacity * GROWTH_COEFFICIENT)
        ]

        for entry in self._entries():
            new_buckets[self.hash_fn(entry.key, len(new_buckets))].append(entry)

        self.buckets = new_buckets

        if _debug_trace_resize:
            printf_err(
                "resize {0:d} -> {1:d} ({2:d} keys)\n",
                old_capacity,
                len(new_buckets),
                self.num_keys,
            )
            dump_table(self, "resize")

    def __len__(self) -> int:
        return self.num_keys

    def __contains__(self, key: int) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: int) -> str:
        value = self.search(key)
        if isinstance(value, NotFound):
            raise KeyError(key)
        return value

    def __setitem__(self, key: int, value: str):
        self.put(key, value)

    def __delitem__(self, key: int):
        if isinstance(self.remove(key), NotFound):
            raise KeyError(key)

    def __iter__(self) -> Iterator[int]:
        for entry in self._entries():
            yield entry.key
