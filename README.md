# roarset

Building blocks for compressed sets of integers in the style of Roaring
bitmaps. A 32-bit or 64-bit value is split into a high key and a low part;
16-bit values are held in containers that are either a sorted list or a
65536-bit bitmap.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

### `roarset.util`

- `split_u32(value)` / `join_u32(high, low)`: split a 32-bit value into a
  16-bit key and a 16-bit index, and join them back.
- `split_u64(value)` / `join_u64(high, low)`: the same for a 64-bit value and
  two 32-bit halves.
- `inclusive_range(start=None, end=None, start_exclusive=False,
  end_exclusive=True, max_value=0xFFFFFFFF)`: turns range bounds into an
  inclusive `(first, last)` pair, or `None` when the range is empty. A bound
  of `None` is unbounded.

Values outside the allowed width raise `ValueError`.

### `roarset.merge`

Lazy operations over two sorted, deduplicated iterables, each yielding its
result in ascending order: `union`, `intersection`, `difference`,
`symmetric_difference`. `count(values)` counts what an iterable yields
without storing it.

### `roarset.bitmap_store`

`BitmapStore` holds values in `0..=65535` as 1024 words of 64 bits.

- Construction: `BitmapStore()`, `BitmapStore.full()`,
  `BitmapStore.from_words(length, words)`, which raises `CardinalityError`
  when `length` is not the number of set bits.
- Single values: `insert`, `push` (only above the current maximum), `remove`,
  `contains` and `in`.
- Ranges (inclusive): `insert_range`, `remove_range`, `contains_range`.
- Queries: `len()`, `min`, `max`, `rank`, `select`, `is_disjoint`,
  `is_subset`, `intersection_len_bitmap`, `intersection_len_array`.
- Iteration in ascending order with `iter()`, descending with `reversed()`;
  `words()` returns the raw words; `to_array_store()` converts.
- `remove_smallest(count)` / `remove_biggest(count)`; a count larger than the
  store clears it.
- In place: `union_update`, `difference_update` and
  `symmetric_difference_update` take another `BitmapStore` or any iterable of
  values; `intersection_update` takes a `BitmapStore`. `clear`, `copy`.

Helper functions `word_key`, `word_bit` and `select_bit` are also exposed.

### `roarset.array_store`

`ArrayStore` holds values in `0..=65535` as a sorted list.

- `ArrayStore.from_sorted(values)` raises `SortedError` (with `index` and
  `kind`) for duplicated or out-of-order input.
- The same single-value, range and query methods as `BitmapStore`, plus
  `intersection_len`, `to_bitmap_store`, `as_list` and `retain(predicate)`.
- `remove_smallest` / `remove_biggest` raise `ValueError` when asked to remove
  more values than the store holds.
- Operators `|`, `&`, `-`, `^` between two array stores;
  `intersection_update` and `difference_update` accept an `ArrayStore` or a
  `BitmapStore`.

### `roarset.store`

`Store` wraps either an `ArrayStore` or a `BitmapStore` (an empty
`ArrayStore` by default) and forwards the same operations to it. It supports
`|`, `&`, `-`, `^` and their in-place forms between stores of either kind;
the result keeps the representation the operation produces (combining with a
bitmap generally gives a bitmap). `is_bitmap()` reports the representation,
`to_bitmap()` returns a bitmap-backed copy, and `is_full()` is true when all
65536 values are present. Two stores compare equal only when both are backed
by the same kind of container and hold the same values.

## Example

```python
from roarset.store import Store
from roarset.array_store import ArrayStore

store = Store(ArrayStore.from_sorted([1, 2, 8, 9]))
added = store.insert_range(4, 5)      # 2
assert list(store) == [1, 2, 4, 5, 8, 9]
assert store.contains_range(4, 5)
assert store.rank(5) == 4
assert store.select(0) == 1

bitmap = store.to_bitmap()
assert bitmap.is_bitmap()
assert bitmap == store.to_bitmap()
```

## What this package does not do

It provides the 16-bit containers and the key helpers only. There is no
complete 32-bit or 64-bit set type that maps keys to containers, no automatic
switching between array and bitmap containers as they grow or shrink, and no
reading or writing of a serialized format.