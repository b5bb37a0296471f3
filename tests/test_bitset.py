"""Tests for lonelyedges.utils.bitset."""
import pytest

from lonelyedges.utils.bitset import BitSet


def test_empty_and_singleton():
    assert len(BitSet.empty()) == 0
    s = BitSet.singleton(5)
    assert 5 in s
    assert 4 not in s
    assert list(s) == [5]


def test_full_and_complement():
    s = BitSet.from_iterable([1, 3])
    assert list(s.complement(5)) == [0, 2, 4]
    assert list(BitSet.full(4)) == [0, 1, 2, 3]
    assert BitSet.empty().complement(3) == BitSet.full(3)


def test_algebra():
    a = BitSet.from_iterable([0, 1, 2])
    b = BitSet.from_iterable([2, 3])
    assert list(a | b) == [0, 1, 2, 3]
    assert list(a & b) == [2]
    assert list(a - b) == [0, 1]
    assert a.union(b) == a | b
    assert a.intersection(b) == a & b
    assert a.difference(b) == a - b
    # operands untouched
    assert list(a) == [0, 1, 2]


def test_add_remove_mutate_in_place():
    s = BitSet.empty()
    s.add(7)
    s.add(2)
    assert list(s) == [2, 7]
    s.remove(7)
    s.remove(9)  # absent, no-op
    assert list(s) == [2]


def test_iteration_ascending_and_size():
    s = BitSet.from_iterable([63, 0, 17, 4])
    assert list(s) == [0, 4, 17, 63]
    assert len(s) == 4


def test_first():
    assert BitSet.empty().first() is None
    assert BitSet.from_iterable([9, 3, 12]).first() == 3


def test_capacity_enforced():
    with pytest.raises(ValueError):
        BitSet.singleton(64, capacity=64)
    with pytest.raises(ValueError):
        BitSet.full(9, capacity=8)
    s = BitSet.empty(capacity=4)
    with pytest.raises(ValueError):
        s.add(4)
    assert 100 not in s


def test_copy_is_independent():
    s = BitSet.from_iterable([1])
    t = s.copy()
    t.add(2)
    assert list(s) == [1]
    assert list(t) == [1, 2]
