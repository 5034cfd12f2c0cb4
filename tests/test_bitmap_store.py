import pytest
from hypothesis import given
from hypothesis import strategies as st

from roarset.bitmap_store import (
    BitmapStore,
    CardinalityError,
    select_bit,
    word_bit,
    word_key,
)

values = st.sets(st.integers(min_value=0, max_value=65535), max_size=200)


def make(items):
    store = BitmapStore()
    for item in items:
        store.insert(item)
    return store


def test_remove_smallest_clears_lowest_bits():
    store = BitmapStore()
    store.insert_range(1, 3)
    store.insert_range(5, 65535)
    store.remove_smallest(2)
    assert store.words()[0] == 0b1111111111111111111111111111111111111111111111111111111111101000


def test_remove_biggest_clears_highest_bits():
    store = BitmapStore()
    store.insert_range(1, 3)
    store.insert_range(5, 65535)
    store.remove_biggest(2)
    assert store.words()[1023] == 0b11111111111111111111111111111111111111111111111111111111111111


def test_remove_smallest_more_than_len_clears():
    store = make([1, 2, 3])
    store.remove_smallest(10)
    assert len(store) == 0
    assert list(store) == []


def test_word_key_and_bit():
    assert (word_key(0), word_bit(0)) == (0, 0)
    assert (word_key(63), word_bit(63)) == (0, 63)
    assert (word_key(64), word_bit(64)) == (1, 0)
    assert (word_key(65535), word_bit(65535)) == (1023, 63)


def test_select_bit():
    assert select_bit(0b10110, 0) == 1
    assert select_bit(0b10110, 1) == 2
    assert select_bit(0b10110, 2) == 4
    assert select_bit(0b10110, 3) == 64


def test_insert_and_remove():
    store = BitmapStore()
    assert store.insert(5) is True
    assert store.insert(5) is False
    assert 5 in store
    assert len(store) == 1
    assert store.remove(5) is True
    assert store.remove(5) is False
    assert len(store) == 0


def test_insert_out_of_range_raises():
    with pytest.raises(ValueError):
        BitmapStore().insert(65536)


def test_insert_range_same_word_overlap():
    store = make([1, 2, 3, 62, 63])
    assert store.insert_range(1, 62) == 58
    assert list(store) == list(range(1, 64))


def test_insert_range_across_words():
    store = make([1, 2, 130])
    assert store.insert_range(4, 128) == 125
    assert list(store) == [1, 2] + list(range(4, 129)) + [130]


def test_insert_range_full_overlap():
    store = make([1, 2, 130])
    assert store.insert_range(1, 134) == 131
    assert list(store) == list(range(1, 135))


def test_insert_range_reversed_is_noop():
    store = make([1, 2, 8, 9])
    assert store.insert_range(6, 1) == 0
    assert list(store) == [1, 2, 8, 9]


def test_remove_range():
    store = BitmapStore()
    store.insert_range(0, 300)
    assert store.remove_range(10, 200) == 191
    assert len(store) == 110
    assert 9 in store and 10 not in store and 200 not in store and 201 in store


def test_contains_range():
    store = make([0, 1, 2, 3, 4, 5, 100])
    assert store.contains_range(0, 0)
    assert store.contains_range(0, 5)
    assert not store.contains_range(0, 6)
    assert store.contains_range(100, 100)
    assert not BitmapStore().contains_range(1, 65535)
    assert BitmapStore.full().contains_range(0, 65535)


def test_full_store():
    store = BitmapStore.full()
    assert len(store) == 65536
    assert store.min() == 0
    assert store.max() == 65535


def test_push():
    store = BitmapStore()
    assert store.push(1)
    assert store.push(3)
    assert not store.push(3)
    assert not store.push(2)
    assert list(store) == [1, 3]


def test_min_max_empty():
    store = BitmapStore()
    assert store.min() is None
    assert store.max() is None


def test_rank_and_select():
    store = make([3, 4, 100, 1000])
    assert store.rank(0) == 0
    assert store.rank(3) == 1
    assert store.rank(99) == 2
    assert store.rank(65535) == 4
    assert store.select(0) == 3
    assert store.select(2) == 100
    assert store.select(3) == 1000
    assert store.select(4) is None


def test_reversed_iteration():
    store = make([0, 63, 64, 65535])
    assert list(reversed(store)) == [65535, 64, 63, 0]


def test_from_words_checks_cardinality():
    words = [0] * 1024
    words[0] = 0b111
    store = BitmapStore.from_words(3, words)
    assert list(store) == [0, 1, 2]
    with pytest.raises(CardinalityError) as info:
        BitmapStore.from_words(4, words)
    assert str(info.value) == "Expected cardinality was 4 but was 3"


def test_from_words_wrong_length():
    with pytest.raises(ValueError):
        BitmapStore.from_words(0, [0] * 10)


def test_copy_is_independent():
    store = make([1, 2])
    clone = store.copy()
    clone.insert(3)
    assert store == make([1, 2])
    assert clone == make([1, 2, 3])


def test_clear():
    store = make([1, 70000 % 65536])
    store.clear()
    assert len(store) == 0
    assert store == BitmapStore()


@given(values, values)
def test_set_operations_match_sets(a, b):
    left, right = make(a), make(b)
    union = left.copy()
    union.union_update(right)
    assert list(union) == sorted(a | b)
    inter = left.copy()
    inter.intersection_update(right)
    assert list(inter) == sorted(a & b)
    diff = left.copy()
    diff.difference_update(right)
    assert list(diff) == sorted(a - b)
    sym = left.copy()
    sym.symmetric_difference_update(right)
    assert list(sym) == sorted(a ^ b)
    assert len(sym) == len(a ^ b)


@given(values, values)
def test_operations_with_iterables_match_sets(a, b):
    left = make(a)
    left.union_update(sorted(b))
    assert list(left) == sorted(a | b)
    left = make(a)
    left.difference_update(sorted(b))
    assert list(left) == sorted(a - b)
    left = make(a)
    left.symmetric_difference_update(sorted(b))
    assert list(left) == sorted(a ^ b)
    assert len(left) == len(a ^ b)


@given(values, values)
def test_relations_and_counts(a, b):
    left, right = make(a), make(b)
    assert left.is_disjoint(right) == a.isdisjoint(b)
    assert left.is_subset(right) == (a <= b)
    assert left.intersection_len_bitmap(right) == len(a & b)
    assert left.intersection_len_array(sorted(b)) == len(a & b)


@given(values, st.integers(min_value=0, max_value=250))
def test_remove_smallest_and_biggest_match_sorted(a, n):
    ordered = sorted(a)
    small = make(a)
    small.remove_smallest(n)
    assert list(small) == ordered[n:]
    big = make(a)
    big.remove_biggest(n)
    assert list(big) == ordered[: max(len(ordered) - n, 0)]


@given(st.integers(0, 65535), st.integers(0, 65535), values)
def test_ranges_match_sets(x, y, a):
    start, end = min(x, y), max(x, y)
    span = set(range(start, end + 1))
    store = make(a)
    assert store.insert_range(start, end) == len(span - a)
    assert set(store) == a | span
    store = make(a)
    assert store.remove_range(start, end) == len(a & span)
    assert set(store) == a - span
    assert make(a).contains_range(start, end) == (span <= a)