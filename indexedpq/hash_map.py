from typing import Any, Hashable, Iterator, List, Optional, Tuple

from indexedpq.exceptions import ValueNotFoundError
from indexedpq.helpers import get_logger

DEFAULT_BUCKET_COUNT = 17
MAX_LOAD_FACTOR = 0.8

logger = get_logger()


class Pair:
    """Chain node holding one key/value mapping of a bucket."""

    def __init__(self, key: Hashable, value: Any, next: Optional['Pair'] = None):
        self.key = key
        self.value = value
        self.next = next

    def __str__(self):
        return f"({self.key}, {self.value})"

    def __repr__(self):
        return f"Pair({self.key!r}, {self.value!r})"


class HashMap:
    """
    Hash table with separate chaining. New pairs are pushed at the head of
    their bucket chain. When an insertion takes the load factor above
    MAX_LOAD_FACTOR the bucket array is doubled and every pair is put again.

    Keys rely on Python's __eq__/__hash__ contract: equal keys must have
    equal hashes. None is not accepted as a value so that put() and remove()
    can return None to mean "no previous mapping".
    """

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT):
        if bucket_count <= 0:
            raise ValueError(f"Invalid bucket count: {bucket_count}")
        self.buckets: List[Optional[Pair]] = [None] * bucket_count
        self.size = 0

    def __len__(self) -> int:
        return self.size

    def __contains__(self, key: Hashable) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: Hashable) -> Any:
        pair = self._get_pair(key)
        if pair is None:
            raise ValueNotFoundError(key)
        return pair.value

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self.put(key, value)

    def __delitem__(self, key: Hashable) -> None:
        if self.remove(key) is None:
            raise ValueNotFoundError(key)

    def __iter__(self) -> Iterator[Hashable]:
        for key, _ in self.items():
            yield key

    def __repr__(self) -> str:
        return "HashMap({" + ", ".join(f"{k!r}: {v!r}" for k, v in self.items()) + "})"

    def items(self) -> Iterator[Tuple[Hashable, Any]]:
        for head in self.buckets:
            node = head
            while node is not None:
                yield node.key, node.value
                node = node.next

    def get_size(self) -> int:
        return self.size

    def get_capacity(self) -> int:
        return len(self.buckets)

    def load_factor(self) -> float:
        return self.size / len(self.buckets)

    def _bucket_index(self, key: Hashable) -> int:
        return abs(hash(key)) % len(self.buckets)

    def _get_pair(self, key: Hashable) -> Optional[Pair]:
        node = self.buckets[self._bucket_index(key)]
        while node is not None:
            if node.key == key:
                return node
            node = node.next
        return None

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Average O(1), worst case O(size)."""
        pair = self._get_pair(key)
        return default if pair is None else pair.value

    def contains_key(self, key: Hashable) -> bool:
        return self._get_pair(key) is not None

    def put(self, key: Hashable, value: Any) -> Any:
        """
        Map key to value. Returns the value previously mapped to key, or None
        if key was not present. The load factor is checked only after a new
        pair has been linked in.
        """
        if value is None:
            raise ValueError("None cannot be stored in a HashMap")
        pair = self._get_pair(key)
        if pair is not None:
            old_value = pair.value
            pair.value = value
            return old_value
        i = self._bucket_index(key)
        self.buckets[i] = Pair(key, value, self.buckets[i])
        self.size += 1
        self._grow_if_needed()
        return None

    def remove(self, key: Hashable) -> Any:
        """Unlink key's pair. Returns the removed value, or None if absent."""
        i = self._bucket_index(key)
        previous = None
        node = self.buckets[i]
        while node is not None:
            if node.key == key:
                if previous is None:
                    self.buckets[i] = node.next
                else:
                    previous.next = node.next
                self.size -= 1
                return node.value
            previous = node
            node = node.next
        return None

    def _grow_if_needed(self) -> None:
        if self.load_factor() <= MAX_LOAD_FACTOR:
            return
        old_buckets = self.buckets
        self.buckets = [None] * (len(old_buckets) * 2)
        # size is rebuilt by the re-insertions below
        self.size = 0
        for head in old_buckets:
            node = head
            while node is not None:
                self.put(node.key, node.value)
                node = node.next
        logger.debug(f"HashMap rehashed from {len(old_buckets)} to {len(self.buckets)} buckets")
