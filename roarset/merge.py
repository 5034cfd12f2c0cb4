"""Lazy set operations over sorted, deduplicated sequences of integers.

Each operation yields its result in ascending order, so the result can be
collected into a list or only counted with :func:`count`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_END = object()


def _merge(
    lhs: Iterable[int],
    rhs: Iterable[int],
    *,
    left_only: bool,
    both: bool,
    right_only: bool,
) -> Iterator[int]:
    """Walk two sorted inputs together, yielding the kinds of value asked for."""
    left, right = iter(lhs), iter(rhs)
    a, b = next(left, _END), next(right, _END)
    while a is not _END and b is not _END:
        if a < b:
            if left_only:
                yield a
            a = next(left, _END)
        elif a > b:
            if right_only:
                yield b
            b = next(right, _END)
        else:
            if both:
                yield a
            a, b = next(left, _END), next(right, _END)
    for keep, head, rest in ((left_only, a, left), (right_only, b, right)):
        if keep and head is not _END:
            yield head
            yield from rest


def union(lhs: Iterable[int], rhs: Iterable[int]) -> Iterator[int]:
    """Yield every value present in either input."""
    return _merge(lhs, rhs, left_only=True, both=True, right_only=True)


def intersection(lhs: Iterable[int], rhs: Iterable[int]) -> Iterator[int]:
    """Yield every value present in both inputs."""
    return _merge(lhs, rhs, left_only=False, both=True, right_only=False)


def difference(lhs: Iterable[int], rhs: Iterable[int]) -> Iterator[int]:
    """Yield every value of ``lhs`` that is not in ``rhs``."""
    return _merge(lhs, rhs, left_only=True, both=False, right_only=False)


def symmetric_difference(lhs: Iterable[int], rhs: Iterable[int]) -> Iterator[int]:
    """Yield every value present in exactly one of the inputs."""
    return _merge(lhs, rhs, left_only=True, both=False, right_only=True)


def count(values: Iterable[int]) -> int:
    """Return how many values an iterable yields, without storing them."""
    return sum(1 for _ in values)