"""Sparse container for 16-bit values, kept as a sorted list without duplicates."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Callable, Iterable, Iterator

from . import merge
from .bitmap_store import (
    BITMAP_LENGTH,
    BitmapStore,
    _check_index,
    _check_nonnegative,
    word_bit,
    word_key,
)

_Merge = Callable[[Iterable[int], Iterable[int]], Iterator[int]]


class SortedError(ValueError):
    """Raised when values meant to be sorted and unique are not."""

    DUPLICATE = "duplicate"
    OUT_OF_ORDER = "out of order"

    def __init__(self, index: int, kind: str) -> None:
        if kind == self.DUPLICATE:
            message = f"Duplicate element found at index: {index}"
        else:
            message = f"An element was out of order at index: {index}"
        super().__init__(message)
        self.index = index
        self.kind = kind


class ArrayStore:
    """A set of values in ``0..=65535`` kept as a sorted list."""

    __slots__ = ("_values",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._values: list[int] = []

    @classmethod
    def from_sorted(cls, values: Iterable[int]) -> ArrayStore:
        """Build a store from strictly ascending values, raising :class:`SortedError` otherwise."""
        value_list = list(values)
        for position, value in enumerate(value_list):
            _check_index(value)
            if position:
                previous = value_list[position - 1]
                if value < previous:
                    raise SortedError(position, SortedError.OUT_OF_ORDER)
                if value == previous:
                    raise SortedError(position, SortedError.DUPLICATE)
        return cls._wrap(value_list)

    @classmethod
    def _wrap(cls, values: Iterable[int]) -> ArrayStore:
        store = cls()
        store._values = list(values)
        return store

    def _find(self, index: int) -> tuple[int, bool]:
        position = bisect_left(self._values, index)
        return position, position < len(self._values) and self._values[position] == index

    def _span(self, start: int, end: int) -> tuple[int, int]:
        first = bisect_left(self._values, start)
        return first, bisect_right(self._values, end, lo=first)

    def insert(self, index: int) -> bool:
        """Add ``index``; return whether it was absent."""
        _check_index(index)
        position, found = self._find(index)
        if not found:
            self._values.insert(position, index)
        return not found

    def insert_range(self, start: int, end: int) -> int:
        """Add every value in ``start..=end``; return how many were new."""
        if start > end:
            return 0
        _check_index(start)
        _check_index(end)
        first, last = self._span(start, end)
        self._values[first:last] = range(start, end + 1)
        return end - start + 1 - (last - first)

    def push(self, index: int) -> bool:
        """Append ``index`` only if it is greater than the current maximum."""
        _check_index(index)
        if not self._values or self._values[-1] < index:
            self._values.append(index)
            return True
        return False

    def remove(self, index: int) -> bool:
        """Remove ``index``; return whether it was present."""
        position, found = self._find(index)
        if found:
            del self._values[position]
        return found

    def remove_range(self, start: int, end: int) -> int:
        """Remove every value in ``start..=end``; return how many were present."""
        if start > end:
            return 0
        first, last = self._span(start, end)
        del self._values[first:last]
        return last - first

    def _check_count(self, count: int) -> None:
        if not 0 <= count <= len(self._values):
            raise ValueError(f"cannot remove {count} values from a store of {len(self._values)}")

    def remove_smallest(self, count: int) -> None:
        """Remove the ``count`` smallest values."""
        self._check_count(count)
        del self._values[:count]

    def remove_biggest(self, count: int) -> None:
        """Remove the ``count`` largest values."""
        self._check_count(count)
        del self._values[len(self._values) - count:]

    def contains(self, index: int) -> bool:
        """Return whether ``index`` is in the store."""
        return self._find(index)[1]

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.contains(index)

    def contains_range(self, start: int, end: int) -> bool:
        """Return whether every value in ``start..=end`` is present."""
        if start > end:
            return False
        range_count = end - start + 1
        if len(self._values) < range_count:
            return False
        position, found = self._find(start)
        if not found:
            return False
        last = position + range_count - 1
        return last < len(self._values) and self._values[last] == end

    def is_disjoint(self, other: ArrayStore) -> bool:
        """Return whether no value is shared with ``other``."""
        return next(merge.intersection(self._values, other._values), None) is None

    def is_subset(self, other: ArrayStore) -> bool:
        """Return whether every value here is also in ``other``."""
        return next(merge.difference(self._values, other._values), None) is None

    def intersection_len(self, other: ArrayStore) -> int:
        """Return the number of values shared with ``other``."""
        return merge.count(merge.intersection(self._values, other._values))

    def to_bitmap_store(self) -> BitmapStore:
        """Return the same values as a bitmap store."""
        words = [0] * BITMAP_LENGTH
        for value in self._values:
            words[word_key(value)] |= 1 << word_bit(value)
        return BitmapStore.from_words(len(self._values), words)

    def __len__(self) -> int:
        return len(self._values)

    def min(self) -> int | None:
        """Return the smallest value, or ``None`` when empty."""
        return self._values[0] if self._values else None

    def max(self) -> int | None:
        """Return the largest value, or ``None`` when empty."""
        return self._values[-1] if self._values else None

    def rank(self, index: int) -> int:
        """Return how many values are less than or equal to ``index``."""
        return bisect_right(self._values, index)

    def select(self, n: int) -> int | None:
        """Return the ``n``-th smallest value, counting from zero."""
        _check_nonnegative(n)
        return self._values[n] if n < len(self._values) else None

    def __iter__(self) -> Iterator[int]:
        return iter(tuple(self._values))

    def __reversed__(self) -> Iterator[int]:
        return reversed(tuple(self._values))

    def as_list(self) -> list[int]:
        """Return the values as a new sorted list."""
        return list(self._values)

    def retain(self, predicate: Callable[[int], bool]) -> None:
        """Keep only the values for which ``predicate`` is true."""
        self._values = [value for value in self._values if predicate(value)]

    def _combined(self, other: object, operation: _Merge) -> ArrayStore:
        if not isinstance(other, ArrayStore):
            return NotImplemented
        return self._wrap(operation(self._values, other._values))

    def __or__(self, other: object) -> ArrayStore:
        return self._combined(other, merge.union)

    def __and__(self, other: object) -> ArrayStore:
        return self._combined(other, merge.intersection)

    def __sub__(self, other: object) -> ArrayStore:
        return self._combined(other, merge.difference)

    def __xor__(self, other: object) -> ArrayStore:
        return self._combined(other, merge.symmetric_difference)

    def _update(self, other: ArrayStore | BitmapStore, operation: _Merge, keep_members: bool) -> None:
        if isinstance(other, ArrayStore):
            self._values = list(operation(self._values, other._values))
        elif isinstance(other, BitmapStore):
            self.retain(lambda value: other.contains(value) == keep_members)
        else:
            raise TypeError(f"cannot combine with {type(other).__name__}")

    def intersection_update(self, other: ArrayStore | BitmapStore) -> None:
        """Keep only the values also in ``other``."""
        self._update(other, merge.intersection, keep_members=True)

    def difference_update(self, other: ArrayStore | BitmapStore) -> None:
        """Remove the values that are in ``other``."""
        self._update(other, merge.difference, keep_members=False)

    def copy(self) -> ArrayStore:
        """Return an independent copy."""
        return self._wrap(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayStore):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        if len(self._values) <= 16:
            return f"ArrayStore({self._values})"
        return f"ArrayStore(len={len(self._values)}, min={self.min()}, max={self.max()})"