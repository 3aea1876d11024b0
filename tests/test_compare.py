import pytest

from dstructs.compare import int_compare, int_equal, pointer_compare, pointer_equal


def test_int_equal():
    assert not int_equal(1, 2)
    assert int_equal(2, 2)


@pytest.mark.parametrize(
    "a, b, expected",
    [(1, 2, -1), (2, 1, 1), (2, 2, 0), (-5, 3, -1), (7, -7, 1)],
)
def test_int_compare(a, b, expected):
    assert int_compare(a, b) == expected


def test_pointer_equal():
    a = object()
    b = object()
    assert not pointer_equal(a, b)
    assert pointer_equal(a, a)


def test_pointer_equal_distinct_equal_values():
    first = [1, 2]
    second = [1, 2]
    assert not pointer_equal(first, second)


def test_pointer_compare_same_object_is_zero():
    a = object()
    assert pointer_compare(a, a) == 0


def test_pointer_compare_is_antisymmetric():
    a = object()
    b = object()
    forward = pointer_compare(a, b)
    assert forward in (-1, 1)
    assert pointer_compare(b, a) == -forward