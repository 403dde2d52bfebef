from dataclasses import dataclass
from typing import Any, Generic, Hashable, Protocol, TypeVar

from indexedpq.dynamic_array import DynamicArray
from indexedpq.exceptions import DuplicateValueError, EmptyCollectionError, ValueNotFoundError
from indexedpq.hash_map import HashMap
from indexedpq.helpers import get_logger, left_child, parent, right_child

DEFAULT_HEAP_CAPACITY = 10

logger = get_logger()


class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool:
        ...


V = TypeVar("V", bound=Hashable)
P = TypeVar("P", bound=Comparable)


@dataclass
class Entry(Generic[V, P]):
    value: V
    priority: P


class IndexedMinHeap(Generic[V, P]):
    """
    Min-heap of distinct values, each with a priority. The value with the
    smallest priority sits at the root.

    entries holds a complete binary tree: entries[0] is the root, the
    children of entries[i] are entries[2i+1] and entries[2i+2] and its parent
    is entries[(i-1)//2]. positions maps every value in the heap to its
    current index in entries, so positions[entries[i].value] == i and
    len(positions) == len(entries) after every public call.

    Equal priorities never swap past each other. When bubbling down and both
    children have the same priority, the right child is chosen.

    Priorities only need to support "<". A max-heap is obtained by negating
    priorities.
    """

    def __init__(self, capacity: int = DEFAULT_HEAP_CAPACITY):
        self.entries: DynamicArray[Entry[V, P]] = DynamicArray(capacity)
        self.positions: HashMap = HashMap()
        logger.debug(f"IndexedMinHeap created with capacity {capacity}")

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, value: V) -> bool:
        return self.contains(value)

    def __repr__(self) -> str:
        return f"IndexedMinHeap({[(e.value, e.priority) for e in self.entries]})"

    def size(self) -> int:
        return len(self.entries)

    def contains(self, value: V) -> bool:
        return self.positions.contains_key(value)

    def peek(self) -> V:
        """Value with the lowest priority. Constant time, no mutation."""
        if len(self.entries) == 0:
            raise EmptyCollectionError("peek on empty heap")
        return self.entries[0].value

    def peek_priority(self) -> P:
        if len(self.entries) == 0:
            raise EmptyCollectionError("peek on empty heap")
        return self.entries[0].priority

    def get_priority(self, value: V) -> P:
        if not self.positions.contains_key(value):
            raise ValueNotFoundError(value)
        return self.entries[self.positions[value]].priority

    def add(self, value: V, priority: P) -> None:
        """
        Add value with the given priority. Expected O(log n), worst case
        O(n) when the backing array grows.
        """
        if self.contains(value):
            raise DuplicateValueError(value)
        self.entries.append(Entry(value, priority))
        last = len(self.entries) - 1
        self.positions.put(value, last)
        self._bubble_up(last)

    def poll(self) -> V:
        """Remove and return the value with the lowest priority."""
        if len(self.entries) == 0:
            raise EmptyCollectionError("poll on empty heap")
        root_value = self.entries[0].value
        last = self.entries.pop()
        self.positions.remove(root_value)
        if len(self.entries) > 0:
            self.entries[0] = last
            self.positions.put(last.value, 0)
            self._bubble_down(0)
        return root_value

    def change_priority(self, value: V, priority: P) -> None:
        if not self.positions.contains_key(value):
            raise ValueNotFoundError(value)
        i = self.positions[value]
        self.entries[i] = Entry(value, priority)
        # at most one of these moves the entry
        self._bubble_up(i)
        self._bubble_down(self.positions[value])

    def _swap(self, h: int, k: int) -> None:
        entry_h = self.entries[h]
        entry_k = self.entries[k]
        self.entries[h] = entry_k
        self.entries[k] = entry_h
        self.positions.put(entry_k.value, h)
        self.positions.put(entry_h.value, k)

    def _bubble_up(self, k: int) -> None:
        while k > 0:
            p = parent(k)
            if not self.entries[k].priority < self.entries[p].priority:
                break
            self._swap(k, p)
            k = p

    def _smaller_child(self, k: int) -> int:
        """
        Index of the child of k with the smaller priority, the right one on
        ties. Precondition: k has at least a left child.
        """
        left = left_child(k)
        right = right_child(k)
        if right >= len(self.entries):
            return left
        if self.entries[left].priority < self.entries[right].priority:
            return left
        return right

    def _bubble_down(self, k: int) -> None:
        while left_child(k) < len(self.entries):
            child = self._smaller_child(k)
            if not self.entries[child].priority < self.entries[k].priority:
                break
            self._swap(k, child)
            k = child
