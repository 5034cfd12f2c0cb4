"""Container for 16-bit values that is backed by either a sorted array or a bitmap."""

from __future__ import annotations

from collections.abc import Iterator

from .array_store import ArrayStore
from .bitmap_store import BitmapStore

FULL_LENGTH = 1 << 16


class Store:
    """A set of values in ``0..=65535`` held by an array store or a bitmap store.

    Operations between two stores keep the representation the underlying
    algorithms produce: combining with a bitmap generally yields a bitmap.
    """

    __slots__ = ("_inner",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, inner: ArrayStore | BitmapStore | None = None) -> None:
        if inner is None:
            inner = ArrayStore()
        if not isinstance(inner, (ArrayStore, BitmapStore)):
            raise TypeError(f"a store wraps an ArrayStore or a BitmapStore, not {type(inner).__name__}")
        self._inner = inner

    @classmethod
    def full(cls) -> Store:
        """Return a store holding every value."""
        return cls(BitmapStore.full())

    def is_bitmap(self) -> bool:
        """Return whether the values are held in a bitmap."""
        return isinstance(self._inner, BitmapStore)

    def insert(self, index: int) -> bool:
        """Add ``index``; return whether it was absent."""
        return self._inner.insert(index)

    def insert_range(self, start: int, end: int) -> int:
        """Add every value in ``start..=end``; return how many were new."""
        if start > end:
            return 0
        return self._inner.insert_range(start, end)

    def push(self, index: int) -> bool:
        """Add ``index`` only if it is greater than the current maximum."""
        return self._inner.push(index)

    def remove(self, index: int) -> bool:
        """Remove ``index``; return whether it was present."""
        return self._inner.remove(index)

    def remove_range(self, start: int, end: int) -> int:
        """Remove every value in ``start..=end``; return how many were present."""
        if start > end:
            return 0
        return self._inner.remove_range(start, end)

    def remove_smallest(self, count: int) -> None:
        """Remove the ``count`` smallest values."""
        self._inner.remove_smallest(count)

    def remove_biggest(self, count: int) -> None:
        """Remove the ``count`` largest values."""
        self._inner.remove_biggest(count)

    def contains(self, index: int) -> bool:
        """Return whether ``index`` is in the store."""
        return self._inner.contains(index)

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.contains(index)

    def contains_range(self, start: int, end: int) -> bool:
        """Return whether every value in ``start..=end`` is present."""
        return self._inner.contains_range(start, end)

    def is_full(self) -> bool:
        """Return whether every possible value is present."""
        return len(self._inner) == FULL_LENGTH

    def is_disjoint(self, other: Store) -> bool:
        """Return whether no value is shared with ``other``."""
        a, b = self._inner, other._inner
        if type(a) is type(b):
            return a.is_disjoint(b)
        array, bits = (a, b) if isinstance(a, ArrayStore) else (b, a)
        return not any(bits.contains(value) for value in array)

    def is_subset(self, other: Store) -> bool:
        """Return whether every value here is also in ``other``.

        A bitmap-backed store is never reported as a subset of an array-backed one.
        """
        a, b = self._inner, other._inner
        if type(a) is type(b):
            return a.is_subset(b)
        if isinstance(a, ArrayStore):
            return all(b.contains(value) for value in a)
        return False

    def intersection_len(self, other: Store) -> int:
        """Return the number of values shared with ``other``."""
        a, b = self._inner, other._inner
        if isinstance(a, ArrayStore) and isinstance(b, ArrayStore):
            return a.intersection_len(b)
        if isinstance(a, BitmapStore) and isinstance(b, BitmapStore):
            return a.intersection_len_bitmap(b)
        bits, array = (a, b) if isinstance(a, BitmapStore) else (b, a)
        return bits.intersection_len_array(array)

    def __len__(self) -> int:
        return len(self._inner)

    def min(self) -> int | None:
        """Return the smallest value, or ``None`` when empty."""
        return self._inner.min()

    def max(self) -> int | None:
        """Return the largest value, or ``None`` when empty."""
        return self._inner.max()

    def rank(self, index: int) -> int:
        """Return how many values are less than or equal to ``index``."""
        return self._inner.rank(index)

    def select(self, n: int) -> int | None:
        """Return the ``n``-th smallest value, counting from zero."""
        return self._inner.select(n)

    def to_bitmap(self) -> Store:
        """Return a bitmap-backed store holding the same values."""
        if isinstance(self._inner, ArrayStore):
            return Store(self._inner.to_bitmap_store())
        return Store(self._inner.copy())

    def __or__(self, other: object) -> Store:
        if not isinstance(other, Store):
            return NotImplemented
        a, b = self._inner, other._inner
        if isinstance(a, ArrayStore) and isinstance(b, ArrayStore):
            return Store(a | b)
        if isinstance(a, BitmapStore):
            result = a.copy()
            result.union_update(b)
        else:
            result = b.copy()
            result.union_update(a)
        return Store(result)

    def __ior__(self, other: object) -> Store:
        if not isinstance(other, Store):
            return NotImplemented
        a, b = self._inner, other._inner
        if isinstance(a, ArrayStore) and isinstance(b, ArrayStore):
            self._inner = a | b
        elif isinstance(a, BitmapStore):
            a.union_update(b)
        else:
            result = b.copy()
            result.union_update(a)
            self._inner = result
        return self

    def __and__(self, other: object) -> Store:
        if not isinstance(other, Store):
            return NotImplemented
        a, b = self._inner, other._inner
        if isinstance(a, ArrayStore) and isinstance(b, ArrayStore):
            return Store(a & b)
        if isinstance(a, BitmapStore) and isinstance(b, ArrayStore):
            result = b.copy()
            result.intersection_update(a)
            return Store(result)
        result = a.copy()
        result.intersection_update(b)
        return Store(result)

    def __iand__(self, other: object) -> Store:
        if not isinstance(other, Store):
            return NotImplemented
        a, b = self._inner, other._inner
        if isinstance(a, BitmapStore) and isinstance(b, ArrayStore):
            result = b.copy()
            result.intersection_update(a)
            self._inner = result
        else:
            a.intersection_update(b)
        return self

    def __sub__(self, other: object) -> Store:
        if not isinstance(other, Store):
            return NotImplemented
        a, b = self._inner, other._inner
        if isinstance(a, ArrayStore) and isinstance(b, ArrayStore):
            return Store(a - b)
        result = a.copy()
        result.difference_update(b)
        return Store(result)

    def __isub__(self, other: object) -> Store:
        if not isinstance(other, Store):
            return NotImplemented
        self._inner.difference_update(other._inner)
        return self

    def __xor__(self, other: object) -> Store:
        if not isinstance(other, Store):
            return NotImplemented
        a, b = self._inner, other._inner
        if isinstance(a, ArrayStore) and isinstance(b, ArrayStore):
            return Store(a ^ b)
        if isinstance(a, ArrayStore):
            result = b.copy()
            result.symmetric_difference_update(a)
        else:
            result = a.copy()
            result.symmetric_difference_update(b)
        return Store(result)

    def __ixor__(self, other: object) -> Store:
        if not isinstance(other, Store):
            return NotImplemented
        a, b = self._inner, other._inner
        if isinstance(a, ArrayStore) and isinstance(b, ArrayStore):
            self._inner = a ^ b
        elif isinstance(a, BitmapStore):
            a.symmetric_difference_update(b)
        else:
            result = b.copy()
            result.symmetric_difference_update(a)
            self._inner = result
        return self

    def __iter__(self) -> Iterator[int]:
        return iter(self._inner)

    def __reversed__(self) -> Iterator[int]:
        return reversed(self._inner)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Store):
            return NotImplemented
        a, b = self._inner, other._inner
        if type(a) is not type(b):
            return False
        return a == b

    def copy(self) -> Store:
        """Return an independent copy."""
        return Store(self._inner.copy())

    def __repr__(self) -> str:
        return f"Store({self._inner!r})"