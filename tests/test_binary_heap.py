import random

import pytest

from dstructs.binary_heap import BinaryHeap, HeapType
from dstructs.compare import int_compare

NUM_TEST_VALUES = 10000


def test_new_heap_is_empty():
    heap = BinaryHeap(HeapType.MIN, int_compare)
    assert len(heap) == 0


def test_insert_counts_entries():
    heap = BinaryHeap(HeapType.MIN, int_compare)
    for i in range(NUM_TEST_VALUES):
        heap.insert(i)
    assert len(heap) == NUM_TEST_VALUES


def test_min_heap():
    heap = BinaryHeap(HeapType.MIN, int_compare)
    for i in range(NUM_TEST_VALUES):
        heap.insert(i)

    previous = -1
    while len(heap) > 0:
        value = heap.pop()
        assert value == previous + 1
        previous = value

    assert previous == NUM_TEST_VALUES - 1
    assert len(heap) == 0
    with pytest.raises(IndexError):
        heap.pop()


def test_max_heap():
    heap = BinaryHeap(HeapType.MAX, int_compare)
    for i in range(NUM_TEST_VALUES):
        heap.insert(i)

    previous = NUM_TEST_VALUES
    while len(heap) > 0:
        value = heap.pop()
        assert value == previous - 1
        previous = value

    assert previous == 0


def test_descending_inserts_pop_in_order():
    heap = BinaryHeap(HeapType.MIN, int_compare)
    values = list(range(15, -1, -1))
    for value in values:
        heap.insert(value)
    assert len(heap) == 16

    popped = [heap.pop() for _ in range(16)]
    assert popped == list(range(16))
    assert len(heap) == 0


def test_random_values_come_out_sorted():
    rng = random.Random(1234)
    values = [rng.randint(-500, 500) for _ in range(1000)]
    heap = BinaryHeap(HeapType.MIN, int_compare)
    for value in values:
        heap.insert(value)

    popped = [heap.pop() for _ in range(len(values))]
    assert popped == sorted(values)


def test_random_values_max_heap_sorted_descending():
    rng = random.Random(99)
    values = [rng.randint(0, 50) for _ in range(300)]
    heap = BinaryHeap(HeapType.MAX, int_compare)
    for value in values:
        heap.insert(value)

    popped = [heap.pop() for _ in range(len(values))]
    assert popped == sorted(values, reverse=True)


def test_interleaved_insert_and_pop():
    heap = BinaryHeap(HeapType.MIN, int_compare)
    heap.insert(5)
    heap.insert(3)
    assert heap.pop() == 3
    heap.insert(1)
    heap.insert(4)
    assert heap.pop() == 1
    assert heap.pop() == 4
    assert heap.pop() == 5
    assert len(heap) == 0


def test_pop_empty_heap_raises():
    heap = BinaryHeap(HeapType.MAX, int_compare)
    with pytest.raises(IndexError):
        heap.pop()


def test_custom_compare_with_strings():
    def string_compare(a, b):
        return (a > b) - (a < b)

    heap = BinaryHeap(HeapType.MAX, string_compare)
    for word in ["pear", "apple", "zebra", "mango"]:
        heap.insert(word)
    assert [heap.pop() for _ in range(4)] == ["zebra", "pear", "mango", "apple"]


def test_heap_type_from_value():
    heap = BinaryHeap(1, int_compare)
    assert heap.heap_type is HeapType.MAX
    for value in (2, 9, 4):
        heap.insert(value)
    assert heap.pop() == 9