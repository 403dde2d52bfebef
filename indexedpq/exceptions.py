class IndexedPQException(Exception):
    def __init__(self, error_message: str):
        super().__init__(error_message)

class OutOfBoundsError(IndexedPQException, IndexError):
    def __init__(self, index: int, length: int):
        super().__init__(f"Index {index} out of bounds for length {length}")
        self.index = index
        self.length = length

class EmptyCollectionError(IndexedPQException, IndexError):
    def __init__(self, error_message: str):
        super().__init__(error_message)

class DuplicateValueError(IndexedPQException, ValueError):
    def __init__(self, value):
        super().__init__(f"Value already in heap: {value!r}")
        self.value = value

class ValueNotFoundError(IndexedPQException, KeyError):
    def __init__(self, value):
        super().__init__(f"Value not found: {value!r}")
        self.value = value

    def __str__(self):
        # KeyError would otherwise render the message with repr()
        return self.args[0]
