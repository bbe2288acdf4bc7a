"""Bit-order reversal helpers for fixed-width unsigned integers."""

from __future__ import annotations

__all__ = [
    "reverse8bits",
    "reverse12bits",
    "reverse16bits",
    "reverse32bits",
    "reverse64bits",
]


def _reverse(value: int, width: int) -> int:
    """Reverse the order of the lowest ``width`` bits of ``value``."""
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    masked = value & ((1 << width) - 1)
    return int(format(masked, f"0{width}b")[::-1], 2)


def reverse8bits(value: int) -> int:
    """Reverse the bit order of an 8-bit value."""
    return _reverse(value, 8)


def reverse16bits(value: int) -> int:
    """Reverse the bit order of a 16-bit value."""
    return _reverse(value, 16)


def reverse12bits(value: int) -> int:
    """Reverse the low 12 bits of a value; the result fits in 12 bits."""
    return reverse16bits(value) >> 4


def reverse32bits(value: int) -> int:
    """Reverse the bit order of a 32-bit value."""
    return _reverse(value, 32)


def reverse64bits(value: int) -> int:
    """Reverse the bit order of a 64-bit value."""
    return _reverse(value, 64)