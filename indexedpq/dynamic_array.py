from typing import Any, Iterator, List, Sequence, TypeVar

from indexedpq.exceptions import EmptyCollectionError, OutOfBoundsError
from indexedpq.helpers import get_logger

DEFAULT_CAPACITY = 8

logger = get_logger()

T = TypeVar("T")


class DynamicArray(Sequence[T]):
    """
    Growable array backed by a fixed size Python list. Logical elements live
    in elements[0:length]; the slots after that are spare capacity.
    Capacity only ever grows, doubling until the requested length fits.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 0:
            raise ValueError(f"Invalid capacity: {capacity}")
        self.length = 0
        self.elements: List[Any] = [None] * capacity

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, i: int) -> T:
        return self.get(i)

    def __setitem__(self, i: int, value: T) -> None:
        self.put(i, value)

    def __iter__(self) -> Iterator[T]:
        for i in range(self.length):
            yield self.elements[i]

    def __repr__(self) -> str:
        return f"DynamicArray({list(self)})"

    def size(self) -> int:
        return self.length

    def get_capacity(self) -> int:
        return len(self.elements)

    def _check_index(self, i: int) -> None:
        if not isinstance(i, int):
            raise TypeError(f"DynamicArray indices must be integers, not {type(i).__name__}")
        if i < 0 or i >= self.length:
            raise OutOfBoundsError(i, self.length)

    def get(self, i: int) -> T:
        self._check_index(i)
        return self.elements[i]

    def put(self, i: int, value: T) -> None:
        self._check_index(i)
        self.elements[i] = value

    def _grow_if_needed(self, new_length: int) -> None:
        old_capacity = len(self.elements)
        if new_length <= old_capacity:
            return
        capacity = max(old_capacity, 1)
        while capacity < new_length:
            capacity *= 2
        self.elements.extend([None] * (capacity - old_capacity))
        logger.debug(f"DynamicArray grown from {old_capacity} to {capacity}")

    def resize(self, new_length: int) -> None:
        if new_length < 0:
            raise ValueError(f"Invalid length: {new_length}")
        self._grow_if_needed(new_length)
        for i in range(new_length, self.length):
            self.elements[i] = None
        self.length = new_length

    def append(self, value: T) -> None:
        self.resize(self.length + 1)
        self.elements[self.length - 1] = value

    def pop(self) -> T:
        if self.length == 0:
            raise EmptyCollectionError("pop from empty DynamicArray")
        self.length -= 1
        value = self.elements[self.length]
        self.elements[self.length] = None
        return value
