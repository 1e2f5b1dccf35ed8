"""Utilities to unspecific for other modules."""

from typing import Never


def assert_never(arg: Never) -> Never:  # noqa: ARG001
    """Help the type checker perform exhaustiveness checks."""
    raise AssertionError


def to_signed_byte(value: int) -> int:
    """Interpret a byte as a two's complement number between -128 and 127."""
    value &= 0xff
    return value - 0x100 if value & 0x80 else value


def make_word(lo: int, hi: int) -> int:
    """Combine a low and a high byte into a 16 bit little-endian word."""
    return ((hi & 0xff) << 8) | (lo & 0xff)


def split_word(word: int) -> tuple[int, int]:
    """Split a 16 bit word into its `(lo, hi)` bytes."""
    return word & 0xff, (word >> 8) & 0xff
