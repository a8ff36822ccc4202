from functools import cmp_to_key

import pytest

from splkit.cmpfn import compare, compare_for_type, pointer_compare


@pytest.mark.parametrize(
    "a, b, expected",
    [(1, 2, -1), (2, 2, 0), (3, 2, 1), ("cat", "dog", -1), (2.5, 1.5, 1)],
)
def test_compare(a, b, expected):
    assert compare(a, b) == expected


@pytest.mark.parametrize("a, b", [(1, 5), ("abc", "abd"), (-1.0, 0.0)])
def test_compare_is_antisymmetric(a, b):
    assert compare(a, b) == -compare(b, a)


def test_compare_sorts_like_sorted():
    values = [5, 3, 9, 1, 3]
    ordered = sorted(values, key=cmp_to_key(compare))
    assert ordered == [1, 3, 3, 5, 9]
    results = [compare(x, y) for x, y in zip(ordered, ordered[1:])]
    assert results == [-1, 0, -1, -1]


def test_pointer_compare_identity():
    obj = object()
    other = object()
    assert pointer_compare(obj, obj) == 0
    assert pointer_compare(obj, other) == -pointer_compare(other, obj)
    assert pointer_compare(obj, other) in (-1, 1)


@pytest.mark.parametrize(
    "name",
    ["int", "short", "long", "char", "float", "double", "unsigned",
     "unsigned short", "unsigned long", "unsigned char", "string"],
)
def test_compare_for_value_types(name):
    assert compare_for_type(name) is compare


def test_compare_for_pointer():
    assert compare_for_type("pointer") is pointer_compare


def test_compare_for_unknown_type():
    with pytest.raises(ValueError):
        compare_for_type("widget")