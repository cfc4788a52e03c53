"""Bit manipulation helpers."""

from __future__ import annotations


def get_bit(n: int, i: int) -> int:
    """The ``i``-th bit of ``n`` as 0 or 1."""
    return (n >> i) & 1


def set_bit(n: int, i: int) -> int:
    """``n`` with its ``i``-th bit set."""
    return n | (1 << i)


def clear_bit(n: int, i: int) -> int:
    """``n`` with its ``i``-th bit cleared."""
    return n & ~(1 << i)


def update_bit(n: int, i: int, v: int) -> int:
    """``n`` with its ``i``-th bit replaced by ``v``."""
    return clear_bit(n, i) | (v << i)


def clear_last_bits(n: int, i: int) -> int:
    """``n`` with its lowest ``i`` bits cleared."""
    return n & (-1 << i)


def clear_bit_range(n: int, i: int, j: int) -> int:
    """``n`` with bits ``i`` through ``j`` (inclusive) cleared."""
    mask = (~0 << (j + 1)) | ((1 << i) - 1)
    return n & mask


def count_bits(n: int) -> int:
    """Number of set bits of a positive ``n``, shifting one bit at a time."""
    count = 0
    while n > 0:
        count += n & 1
        n >>= 1
    return count


def count_bits_fast(n: int) -> int:
    """Number of set bits of a positive ``n``, dropping the lowest set bit each step."""
    count = 0
    while n > 0:
        n &= n - 1
        count += 1
    return count


def is_odd(n: int) -> bool:
    """True if the lowest bit of ``n`` is set."""
    return bool(n & 1)


def to_lower(ch: str) -> str:
    """Lower-case an ASCII letter by setting bit 5."""
    return chr(ord(ch) | ord(" "))


def to_upper(ch: str) -> str:
    """Upper-case an ASCII letter by clearing bit 5."""
    return chr(ord(ch) & ord("_"))


def is_power_of_two(n: int) -> bool:
    """True if ``n & (n - 1)`` is zero, which also holds for zero."""
    return n & (n - 1) == 0