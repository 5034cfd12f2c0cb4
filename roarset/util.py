"""Splitting and joining of integer keys, and normalisation of range bounds."""

from __future__ import annotations

U16_MAX = 0xFFFF
U32_MAX = 0xFFFF_FFFF
U64_MAX = 0xFFFF_FFFF_FFFF_FFFF


def _check(value: int, limit: int, name: str) -> None:
    if not 0 <= value <= limit:
        raise ValueError(f"{name} {value} is outside 0..={limit}")


def split_u32(value: int) -> tuple[int, int]:
    """Return the container key and the index within that container for a 32-bit value."""
    _check(value, U32_MAX, "value")
    return value >> 16, value & U16_MAX


def join_u32(high: int, low: int) -> int:
    """Rebuild a 32-bit value from its container key and index."""
    _check(high, U16_MAX, "high")
    _check(low, U16_MAX, "low")
    return (high << 16) | low


def split_u64(value: int) -> tuple[int, int]:
    """Return the bitmap key and the 32-bit value within that bitmap for a 64-bit value."""
    _check(value, U64_MAX, "value")
    return value >> 32, value & U32_MAX


def join_u64(high: int, low: int) -> int:
    """Rebuild a 64-bit value from its bitmap key and 32-bit low part."""
    _check(high, U32_MAX, "high")
    _check(low, U32_MAX, "low")
    return (high << 32) | low


def inclusive_range(
    start: int | None = None,
    end: int | None = None,
    start_exclusive: bool = False,
    end_exclusive: bool = True,
    max_value: int = U32_MAX,
) -> tuple[int, int] | None:
    """Convert range bounds to an inclusive ``(first, last)`` pair.

    ``None`` for a bound means unbounded on that side. Returns ``None`` when the
    range holds no value within ``0..=max_value``.
    """
    if start is None:
        first = 0
    elif start_exclusive:
        if start >= max_value:
            return None
        first = start + 1
    else:
        first = start

    if end is None:
        last = max_value
    elif end_exclusive:
        if end <= 0:
            return None
        last = end - 1
    else:
        last = end

    if last < first:
        return None
    return first, last