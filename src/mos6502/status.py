"""Processor status register."""

import enum
from typing import Self


class Flag(enum.IntEnum):
    """Bit position of a flag within the processor status byte.

    Bit 5 of the status byte is unused on the 6502 and deliberately has no member here, so it can neither be set nor
    tested through this enumeration.
    """

    CARRY = 0
    ZERO = 1
    INTERRUPT_DISABLE = 2
    DECIMAL_MODE = 3
    BREAK = 4
    OVERFLOW = 6
    NEGATIVE = 7

    @property
    def mask(self) -> int:
        """Bit mask of the flag within the status byte."""
        return 1 << self.value


UNUSED_BIT = 5
DEFINED_BITS_MASK = 0xff & ~(1 << UNUSED_BIT)


class ProcessorStatus:
    """The eight bit processor status register (P) of the 6502.

    Flags are addressed by `Flag` members. The register serializes to and from a single byte with `to_byte` and
    `from_byte`; the unused bit is always dropped.
    """

    __slots__ = ("_bits",)

    def __init__(self, *flags: Flag) -> None:
        """Initialize a status register with the given flags set and all others clear."""
        self._bits = 0
        for flag in flags:
            self.set(flag)

    @classmethod
    def from_byte(cls, byte: int) -> Self:
        """Create a status register from its byte representation."""
        status = cls()
        status.load(byte)
        return status

    def load(self, byte: int) -> None:
        """Replace all flags with the ones encoded in `byte`."""
        self._bits = byte & DEFINED_BITS_MASK

    def to_byte(self) -> int:
        """Return the byte representation of the register."""
        return self._bits

    def get(self, flag: Flag) -> bool:
        """Return whether `flag` is set."""
        return self._bits & flag.mask != 0

    def set(self, flag: Flag, value: bool = True) -> None:  # noqa: FBT001, FBT002
        """Set `flag` to `value`."""
        if value:
            self._bits |= flag.mask
        else:
            self._bits &= ~flag.mask

    def clear(self, flag: Flag) -> None:
        """Clear `flag`."""
        self.set(flag, value=False)

    def update_zero_negative(self, result: int) -> None:
        """Update the zero (Z) and negative (N) flags from the byte resulting from an operation.

        Args:
            result: Byte resulting from an operation that updates the status register.

        """
        self.set(Flag.ZERO, result & 0xff == 0)
        self.set(Flag.NEGATIVE, result & 0x80 != 0)

    def update_overflow(self, a_initial: int, operand: int, result: int) -> None:
        """Update the overflow (V) flag based on the result of an addition.

        Args:
            a_initial: Accumulator value before operation.
            operand: Operand of potentially overflowing operation.
            result: Accumulator value after operation.

        """
        self.set(Flag.OVERFLOW, (a_initial ^ result) & (operand ^ result) & 0x80 != 0)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ProcessorStatus):
            return self._bits == other._bits
        return NotImplemented

    # mutable, compared by value
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        names = [flag.name for flag in Flag if self.get(flag)]
        return f"ProcessorStatus({', '.join(names)})" if names else "ProcessorStatus()"

    def __str__(self) -> str:
        # NV-BDIZC, clear flags shown as '.'
        chars = []
        for bit, letter in zip(reversed(range(8)), "NV-BDIZC", strict=True):
            if bit == UNUSED_BIT:
                chars.append("-")
            else:
                chars.append(letter if self._bits & (1 << bit) else ".")
        return "".join(chars)
