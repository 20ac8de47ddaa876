"""Bit manipulation helpers on Python integers."""

from __future__ import annotations


def get_bit(n: int, position: int) -> int:
    """Return the bit of ``n`` at ``position`` (0 or 1)."""
    return (n >> position) & 1


def set_bit(n: int, position: int) -> int:
    """Return ``n`` with the bit at ``position`` set."""
    return n | (1 << position)


def clear_bit(n: int, position: int) -> int:
    """Return ``n`` with the bit at ``position`` cleared."""
    return n & ~(1 << position)


def update_bit(n: int, position: int, value: int) -> int:
    """Return ``n`` with the bit at ``position`` replaced by ``value`` (0 or 1)."""
    if value not in (0, 1):
        raise ValueError("bit value must be 0 or 1")
    return clear_bit(n, position) | (value << position)


def clear_last_bits(n: int, count: int) -> int:
    """Return ``n`` with its lowest ``count`` bits cleared."""
    return n & (-1 << count)


def clear_bit_range(n: int, low: int, high: int) -> int:
    """Return ``n`` with the bits from ``low`` to ``high`` (inclusive) cleared."""
    if low > high:
        raise ValueError("low must not exceed high")
    mask = (-1 << (high + 1)) | ((1 << low) - 1)
    return n & mask


def _require_unsigned(n: int) -> None:
    if n < 0:
        raise ValueError("only non-negative numbers are supported")


def count_set_bits(n: int) -> int:
    """Count set bits by inspecting each bit in turn."""
    _require_unsigned(n)
    count = 0
    while n:
        count += n & 1
        n >>= 1
    return count


def count_set_bits_fast(n: int) -> int:
    """Count set bits by clearing the lowest set bit each step."""
    _require_unsigned(n)
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count