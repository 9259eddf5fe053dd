"""Unit tests for AttributeSet."""

import pytest

from fdkeys import MAX_ATTRIBUTES, AttributeSet, CapacityError, PreconditionError, check_attribute_count


def test_algebra_and_cardinality():
    s = AttributeSet.from_letters("ABD")
    t = AttributeSet.from_letters("BC")
    assert s | t == AttributeSet.from_letters("ABCD")
    assert s & t == AttributeSet.from_letters("B")
    assert s - t == AttributeSet.from_letters("AD")
    assert (s | t).size == 4
    assert (s & t).size == 1
    assert len(s - t) == 2
    assert s.union(t) == s | t


def test_contains_is_subset_test():
    s = AttributeSet.from_letters("ABC")
    assert s.contains(AttributeSet.from_letters("AC"))
    assert s.contains(AttributeSet.empty())
    assert s.contains(s)
    assert not s.contains(AttributeSet.from_letters("AD"))
    assert AttributeSet.from_letters("AC") <= s
    assert AttributeSet.from_letters("AC") < s
    assert not s < s


def test_full_and_is_full():
    full = AttributeSet.full(5)
    assert full.to_letters() == "ABCDE"
    assert full.is_full(5)
    assert not full.remove(2).is_full(5)
    assert AttributeSet.full(MAX_ATTRIBUTES).size == MAX_ATTRIBUTES
    with pytest.raises(PreconditionError):
        AttributeSet.full(MAX_ATTRIBUTES + 1)


def test_insert_and_remove_return_new_sets():
    s = AttributeSet.of(1)
    t = s.insert(3)
    assert s == AttributeSet.of(1)
    assert t == AttributeSet.of(1, 3)
    assert t.insert(3) == t
    assert t.remove(1) == AttributeSet.of(3)


def test_remove_absent_attribute_is_a_precondition_violation():
    with pytest.raises(PreconditionError):
        AttributeSet.of(0).remove(1)


@pytest.mark.parametrize("index", [-1, MAX_ATTRIBUTES, 100])
def test_out_of_range_index_is_rejected(index):
    with pytest.raises(PreconditionError):
        AttributeSet.of(index)
    with pytest.raises(PreconditionError):
        AttributeSet().insert(index)


def test_iteration_is_ascending_and_restartable():
    s = AttributeSet.from_letters("ZDA")
    assert list(s) == [0, 3, 25]
    assert list(s) == [0, 3, 25]
    first = iter(s)
    assert next(first) == 0
    # a second iterator is independent of the first
    assert list(s) == [0, 3, 25]
    assert list(first) == [3, 25]
    assert list(AttributeSet()) == []


def test_iteration_while_building_new_sets():
    s = AttributeSet.from_letters("ABC")
    reduced = s
    for a in s:
        reduced = reduced.remove(a)
    assert reduced == AttributeSet.empty()
    assert s.to_letters() == "ABC"


def test_value_semantics():
    s = AttributeSet.from_letters("AB")
    assert s == AttributeSet.of(0, 1)
    assert hash(s) == hash(AttributeSet.of(1, 0))
    assert s.copy() == s
    assert len({s, s.copy(), AttributeSet.of(0)}) == 2
    assert 1 in s and 2 not in s
    with pytest.raises(AttributeError):
        s.mask = 0


def test_rendering():
    s = AttributeSet.from_letters("CA")
    assert str(s) == "AC"
    assert repr(s) == "AttributeSet('AC')"


def test_mask_beyond_capacity_is_rejected():
    with pytest.raises(PreconditionError):
        AttributeSet(1 << MAX_ATTRIBUTES)


@pytest.mark.parametrize("n", [0, MAX_ATTRIBUTES + 1, -3])
def test_check_attribute_count_rejects(n):
    with pytest.raises(CapacityError):
        check_attribute_count(n)


def test_check_attribute_count_accepts_bounds():
    assert check_attribute_count(1) == 1
    assert check_attribute_count(MAX_ATTRIBUTES) == MAX_ATTRIBUTES
