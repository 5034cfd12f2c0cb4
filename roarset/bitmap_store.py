"""Dense container for 16-bit values, stored as 1024 words of 64 bits."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

BITMAP_LENGTH = 1024
WORD_BITS = 64
WORD_MASK = (1 << WORD_BITS) - 1
INDEX_MAX = BITMAP_LENGTH * WORD_BITS - 1


class CardinalityError(ValueError):
    """Raised when a stated cardinality does not match the bits supplied."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Expected cardinality was {expected} but was {actual}")
        self.expected = expected
        self.actual = actual


def word_key(index: int) -> int:
    """Return the position of the word that holds ``index``."""
    return index // WORD_BITS


def word_bit(index: int) -> int:
    """Return the position of ``index`` within its word."""
    return index % WORD_BITS


def _trailing_zeros(value: int) -> int:
    if value == 0:
        return WORD_BITS
    return (value & -value).bit_length() - 1


def _strip_lowest(word: int) -> int:
    return word & (word - 1)


def _strip_highest(word: int) -> int:
    return word & ~(1 << (word.bit_length() - 1))


def select_bit(value: int, n: int) -> int:
    """Return the position of the ``n``-th set bit of a word.

    Returns 64 when the word has ``n`` or fewer set bits.
    """
    for _ in range(n):
        if value == 0:
            break
        value = _strip_lowest(value)
    return _trailing_zeros(value)


def _check_index(index: int) -> None:
    if not 0 <= index <= INDEX_MAX:
        raise ValueError(f"index {index} is outside 0..={INDEX_MAX}")


def _check_nonnegative(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")


def _keys(reverse: bool) -> range:
    return range(BITMAP_LENGTH - 1, -1, -1) if reverse else range(BITMAP_LENGTH)


def _bit_positions(word: int, reverse: bool) -> Iterator[int]:
    strip = _strip_highest if reverse else _strip_lowest
    while word:
        remaining = strip(word)
        yield (word ^ remaining).bit_length() - 1
        word = remaining


def _range_masks(start: int, end: int) -> Iterator[tuple[int, int]]:
    """Yield ``(word position, mask)`` pairs covering ``start..=end``."""
    first_key, first_bit = word_key(start), word_bit(start)
    last_key, last_bit = word_key(end), word_bit(end)
    for key in range(first_key, last_key + 1):
        low = first_bit if key == first_key else 0
        high = last_bit if key == last_key else WORD_BITS - 1
        yield key, ((1 << (high + 1)) - 1) ^ ((1 << low) - 1)


class BitmapStore:
    """A set of values in ``0..=65535`` kept as a fixed array of bit words."""

    __slots__ = ("_len", "_words")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._len = 0
        self._words = [0] * BITMAP_LENGTH

    @classmethod
    def full(cls) -> BitmapStore:
        """Return a store holding every value."""
        store = cls()
        store._words = [WORD_MASK] * BITMAP_LENGTH
        store._len = BITMAP_LENGTH * WORD_BITS
        return store

    @classmethod
    def from_words(cls, length: int, words: Iterable[int]) -> BitmapStore:
        """Build a store from 1024 words, checking that ``length`` is their bit count."""
        word_list = list(words)
        if len(word_list) != BITMAP_LENGTH:
            raise ValueError(f"expected {BITMAP_LENGTH} words, got {len(word_list)}")
        if any(not 0 <= w <= WORD_MASK for w in word_list):
            raise ValueError("every word must fit in 64 unsigned bits")
        actual = sum(w.bit_count() for w in word_list)
        if length != actual:
            raise CardinalityError(length, actual)
        store = cls()
        store._words = word_list
        store._len = length
        return store

    def _set_bit(self, index: int, present: bool) -> bool:
        _check_index(index)
        key, flag = word_key(index), 1 << word_bit(index)
        if bool(self._words[key] & flag) == present:
            return False
        self._words[key] ^= flag
        self._len += 1 if present else -1
        return True

    def _set_range(self, start: int, end: int, present: bool) -> int:
        if start > end:
            return 0
        _check_index(start)
        _check_index(end)
        changed = 0
        for key, mask in _range_masks(start, end):
            word = self._words[key]
            flips = mask & ~word if present else mask & word
            changed += flips.bit_count()
            self._words[key] = word ^ flips
        self._len += changed if present else -changed
        return changed

    def insert(self, index: int) -> bool:
        """Add ``index``; return whether it was absent."""
        return self._set_bit(index, True)

    def insert_range(self, start: int, end: int) -> int:
        """Add every value in ``start..=end``; return how many were new."""
        return self._set_range(start, end, True)

    def push(self, index: int) -> bool:
        """Add ``index`` only if it is greater than the current maximum."""
        current = self.max()
        if current is None or current < index:
            self.insert(index)
            return True
        return False

    def remove(self, index: int) -> bool:
        """Remove ``index``; return whether it was present."""
        return self._set_bit(index, False)

    def remove_range(self, start: int, end: int) -> int:
        """Remove every value in ``start..=end``; return how many were present."""
        return self._set_range(start, end, False)

    def contains(self, index: int) -> bool:
        """Return whether ``index`` is in the store."""
        if not 0 <= index <= INDEX_MAX:
            return False
        return bool(self._words[word_key(index)] & (1 << word_bit(index)))

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.contains(index)

    def contains_range(self, start: int, end: int) -> bool:
        """Return whether every value in ``start..=end`` is present."""
        _check_index(start)
        _check_index(end)
        if start > end or self._len < end - start + 1:
            return False
        return all(self._words[key] & mask == mask for key, mask in _range_masks(start, end))

    def is_disjoint(self, other: BitmapStore) -> bool:
        """Return whether no value is shared with ``other``."""
        return all(a & b == 0 for a, b in zip(self._words, other._words))

    def is_subset(self, other: BitmapStore) -> bool:
        """Return whether every value here is also in ``other``."""
        return all(a & b == a for a, b in zip(self._words, other._words))

    def to_array_store(self):
        """Return the same values as a sorted array store."""
        from .array_store import ArrayStore

        return ArrayStore.from_sorted(list(self))

    def __len__(self) -> int:
        return self._len

    def min(self) -> int | None:
        """Return the smallest value, or ``None`` when empty."""
        return next(iter(self), None)

    def max(self) -> int | None:
        """Return the largest value, or ``None`` when empty."""
        return next(reversed(self), None)

    def rank(self, index: int) -> int:
        """Return how many values are less than or equal to ``index``."""
        _check_index(index)
        key, bit = word_key(index), word_bit(index)
        below = sum(w.bit_count() for w in self._words[:key])
        return below + (self._words[key] & ((1 << (bit + 1)) - 1)).bit_count()

    def select(self, n: int) -> int | None:
        """Return the ``n``-th smallest value, counting from zero."""
        _check_nonnegative(n)
        for key, word in enumerate(self._words):
            ones = word.bit_count()
            if n < ones:
                return key * WORD_BITS + select_bit(word, n)
            n -= ones
        return None

    def intersection_len_bitmap(self, other: BitmapStore) -> int:
        """Return the number of values shared with another bitmap store."""
        return sum((a & b).bit_count() for a, b in zip(self._words, other._words))

    def intersection_len_array(self, values: Iterable[int]) -> int:
        """Return how many of ``values`` are in the store."""
        return sum(1 for value in values if self.contains(value))

    def _walk(self, reverse: bool) -> Iterator[int]:
        words = tuple(self._words)
        for key in _keys(reverse):
            base = key * WORD_BITS
            for position in _bit_positions(words[key], reverse):
                yield base + position

    def __iter__(self) -> Iterator[int]:
        return self._walk(False)

    def __reversed__(self) -> Iterator[int]:
        return self._walk(True)

    def words(self) -> tuple[int, ...]:
        """Return the 1024 bit words."""
        return tuple(self._words)

    def clear(self) -> None:
        """Remove every value."""
        self._words = [0] * BITMAP_LENGTH
        self._len = 0

    def _remove_from_end(self, count: int, reverse: bool) -> None:
        if self._len < count:
            self.clear()
            return
        self._len -= count
        strip = _strip_highest if reverse else _strip_lowest
        for key in _keys(reverse):
            word = self._words[key]
            ones = word.bit_count()
            if count < ones:
                for _ in range(count):
                    word = strip(word)
                self._words[key] = word
                return
            self._words[key] = 0
            count -= ones
            if count == 0:
                return

    def remove_smallest(self, count: int) -> None:
        """Remove the ``count`` smallest values."""
        self._remove_from_end(count, reverse=False)

    def remove_biggest(self, count: int) -> None:
        """Remove the ``count`` largest values."""
        self._remove_from_end(count, reverse=True)

    def _update(
        self,
        other: BitmapStore | Iterable[int],
        word_op: Callable[[int, int], int],
        value_op: Callable[[int], object] | None = None,
    ) -> None:
        if isinstance(other, BitmapStore):
            self._words = [word_op(a, b) & WORD_MASK for a, b in zip(self._words, other._words)]
            self._len = sum(w.bit_count() for w in self._words)
        elif value_op is not None:
            for value in other:
                value_op(value)
        else:
            raise TypeError(f"cannot combine with {type(other).__name__}")

    def _toggle(self, value: int) -> None:
        if not self.insert(value):
            self.remove(value)

    def union_update(self, other: BitmapStore | Iterable[int]) -> None:
        """Add the values of another bitmap store or of an iterable."""
        self._update(other, lambda a, b: a | b, self.insert)

    def intersection_update(self, other: BitmapStore) -> None:
        """Keep only the values also in ``other``."""
        self._update(other, lambda a, b: a & b)

    def difference_update(self, other: BitmapStore | Iterable[int]) -> None:
        """Remove the values of another bitmap store or of an iterable."""
        self._update(other, lambda a, b: a & ~b, self.remove)

    def symmetric_difference_update(self, other: BitmapStore | Iterable[int]) -> None:
        """Toggle the values of another bitmap store or of an iterable."""
        self._update(other, lambda a, b: a ^ b, self._toggle)

    def copy(self) -> BitmapStore:
        """Return an independent copy."""
        store = BitmapStore()
        store._words = list(self._words)
        store._len = self._len
        return store

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitmapStore):
            return NotImplemented
        return self._len == other._len and self._words == other._words

    def __repr__(self) -> str:
        return f"BitmapStore(len={self._len}, min={self.min()}, max={self.max()})"