from indexedpq.dynamic_array import DynamicArray
from indexedpq.exceptions import (DuplicateValueError, EmptyCollectionError,
                                  IndexedPQException, OutOfBoundsError,
                                  ValueNotFoundError)
from indexedpq.hash_map import HashMap
from indexedpq.heap import Entry, IndexedMinHeap

__all__ = [
    "DynamicArray",
    "HashMap",
    "IndexedMinHeap",
    "Entry",
    "IndexedPQException",
    "OutOfBoundsError",
    "EmptyCollectionError",
    "DuplicateValueError",
    "ValueNotFoundError",
]
