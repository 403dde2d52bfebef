import numpy as np
import pytest

from indexedpq import HashMap, IndexedMinHeap


def assert_consistent(heap: IndexedMinHeap):
    assert heap.positions.get_size() == heap.size()
    for i, entry in enumerate(heap.entries):
        assert heap.positions.get(entry.value) == i
        if i > 0:
            assert heap.entries[(i - 1) // 2].priority <= entry.priority


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_peek_is_always_the_minimum_under_random_add_and_poll(seed):
    rng = np.random.default_rng(seed)
    heap = IndexedMinHeap()
    reference = {}
    next_value = 0
    for _ in range(500):
        if reference and rng.random() < 0.4:
            expected = min(reference.values())
            polled = heap.poll()
            assert reference.pop(polled) == expected
        else:
            priority = int(rng.integers(0, 1000))
            heap.add(next_value, priority)
            reference[next_value] = priority
            next_value += 1
        assert_consistent(heap)
        if reference:
            assert reference[heap.peek()] == min(reference.values())


@pytest.mark.parametrize("seed", [10, 11, 12])
def test_polling_drains_in_non_decreasing_priority(seed):
    rng = np.random.default_rng(seed)
    n = 300
    priorities = rng.integers(0, 50, size=n)
    order = rng.permutation(n)
    heap = IndexedMinHeap()
    for i in order:
        heap.add(f"v{i}", int(priorities[i]))
    drained = []
    while heap.size() > 0:
        drained.append(int(priorities[int(heap.poll()[1:])]))
        assert_consistent(heap)
    assert drained == sorted(priorities.tolist())


@pytest.mark.parametrize("seed", [20, 21])
def test_random_priority_changes_keep_invariants(seed):
    rng = np.random.default_rng(seed)
    n = 200
    heap = IndexedMinHeap()
    reference = {}
    for i in range(n):
        p = float(rng.normal())
        heap.add(i, p)
        reference[i] = p
    for _ in range(500):
        v = int(rng.integers(0, n))
        p = float(rng.normal())
        heap.change_priority(v, p)
        reference[v] = p
        assert_consistent(heap)
        assert heap.get_priority(v) == p
        assert reference[heap.peek()] == min(reference.values())
    drained = [heap.poll() for _ in range(n)]
    assert drained == sorted(reference, key=reference.get)


def test_hash_map_agrees_with_dict_under_random_operations():
    rng = np.random.default_rng(42)
    m = HashMap()
    reference = {}
    for _ in range(2000):
        key = int(rng.integers(-100, 100))
        if rng.random() < 0.3:
            assert m.remove(key) == reference.pop(key, None)
        else:
            value = int(rng.integers(0, 10))
            assert m.put(key, value) == reference.get(key)
            reference[key] = value
        assert m.get_size() == len(reference)
        assert m.load_factor() <= 0.8
    assert dict(m.items()) == reference
