"""Instruction set of the 6502 and the opcode decoder."""

import enum
from types import MappingProxyType
from typing import NamedTuple

from mos6502.errors import DecodeError


class AddressingMode(enum.Enum):
    """Addressing mode of a 6502 instruction."""

    IMPLICIT = enum.auto()
    ACCUMULATOR = enum.auto()
    IMMEDIATE = enum.auto()
    ZERO_PAGE = enum.auto()
    ZERO_PAGE_X = enum.auto()
    ZERO_PAGE_Y = enum.auto()
    RELATIVE = enum.auto()
    ABSOLUTE = enum.auto()
    ABSOLUTE_X = enum.auto()
    ABSOLUTE_Y = enum.auto()
    INDIRECT = enum.auto()
    INDEXED_INDIRECT = enum.auto()
    """`(zp,X)`: zero page pointer selected by adding X to the operand."""
    INDIRECT_INDEXED = enum.auto()
    """`(zp),Y`: zero page pointer at the operand, Y added to the pointer."""

    @property
    def operand_length(self) -> int:
        """Number of operand bytes following the opcode byte."""
        if self in (AddressingMode.IMPLICIT, AddressingMode.ACCUMULATOR):
            return 0
        if self in (AddressingMode.ABSOLUTE, AddressingMode.ABSOLUTE_X, AddressingMode.ABSOLUTE_Y,
                    AddressingMode.INDIRECT):
            return 2
        return 1


class Opcode(enum.Enum):
    """Operation mnemonic of a 6502 instruction."""

    ADC = enum.auto()
    AND = enum.auto()
    ASL = enum.auto()
    BCC = enum.auto()
    BCS = enum.auto()
    BEQ = enum.auto()
    BIT = enum.auto()
    BMI = enum.auto()
    BNE = enum.auto()
    BPL = enum.auto()
    BRK = enum.auto()
    BVC = enum.auto()
    BVS = enum.auto()
    CLC = enum.auto()
    CLD = enum.auto()
    CLI = enum.auto()
    CLV = enum.auto()
    CMP = enum.auto()
    CPX = enum.auto()
    CPY = enum.auto()
    DEC = enum.auto()
    DEX = enum.auto()
    DEY = enum.auto()
    EOR = enum.auto()
    INC = enum.auto()
    INX = enum.auto()
    INY = enum.auto()
    JMP = enum.auto()
    JSR = enum.auto()
    LDA = enum.auto()
    LDX = enum.auto()
    LDY = enum.auto()
    LSR = enum.auto()
    NOP = enum.auto()
    ORA = enum.auto()
    PHA = enum.auto()
    PHP = enum.auto()
    PLA = enum.auto()
    PLP = enum.auto()
    ROL = enum.auto()
    ROR = enum.auto()
    RTI = enum.auto()
    RTS = enum.auto()
    SBC = enum.auto()
    SEC = enum.auto()
    SED = enum.auto()
    SEI = enum.auto()
    STA = enum.auto()
    STX = enum.auto()
    STY = enum.auto()
    TAX = enum.auto()
    TAY = enum.auto()
    TSX = enum.auto()
    TXA = enum.auto()
    TXS = enum.auto()
    TYA = enum.auto()


class Instruction(NamedTuple):
    """Decoded form of an opcode byte."""

    opcode: Opcode
    mode: AddressingMode

    def __str__(self) -> str:
        return f"{self.opcode.name} {self.mode.name}"


_M = AddressingMode

ENCODINGS: MappingProxyType[Opcode, dict[AddressingMode, int]] = MappingProxyType({
    Opcode.ADC: {
        _M.IMMEDIATE: 0x69, _M.ZERO_PAGE: 0x65, _M.ZERO_PAGE_X: 0x75, _M.ABSOLUTE: 0x6d,
        _M.ABSOLUTE_X: 0x7d, _M.ABSOLUTE_Y: 0x79, _M.INDEXED_INDIRECT: 0x61, _M.INDIRECT_INDEXED: 0x71,
    },
    Opcode.AND: {
        _M.IMMEDIATE: 0x29, _M.ZERO_PAGE: 0x25, _M.ZERO_PAGE_X: 0x35, _M.ABSOLUTE: 0x2d,
        _M.ABSOLUTE_X: 0x3d, _M.ABSOLUTE_Y: 0x39, _M.INDEXED_INDIRECT: 0x21, _M.INDIRECT_INDEXED: 0x31,
    },
    Opcode.ASL: {
        _M.ACCUMULATOR: 0x0a, _M.ZERO_PAGE: 0x06, _M.ZERO_PAGE_X: 0x16, _M.ABSOLUTE: 0x0e, _M.ABSOLUTE_X: 0x1e,
    },
    Opcode.BCC: {_M.RELATIVE: 0x90},
    Opcode.BCS: {_M.RELATIVE: 0xb0},
    Opcode.BEQ: {_M.RELATIVE: 0xf0},
    Opcode.BIT: {_M.ZERO_PAGE: 0x24, _M.ABSOLUTE: 0x2c},
    Opcode.BMI: {_M.RELATIVE: 0x30},
    Opcode.BNE: {_M.RELATIVE: 0xd0},
    Opcode.BPL: {_M.RELATIVE: 0x10},
    Opcode.BRK: {_M.IMPLICIT: 0x00},
    Opcode.BVC: {_M.RELATIVE: 0x50},
    Opcode.BVS: {_M.RELATIVE: 0x70},
    Opcode.CLC: {_M.IMPLICIT: 0x18},
    Opcode.CLD: {_M.IMPLICIT: 0xd8},
    Opcode.CLI: {_M.IMPLICIT: 0x58},
    Opcode.CLV: {_M.IMPLICIT: 0xb8},
    Opcode.CMP: {
        _M.IMMEDIATE: 0xc9, _M.ZERO_PAGE: 0xc5, _M.ZERO_PAGE_X: 0xd5, _M.ABSOLUTE: 0xcd,
        _M.ABSOLUTE_X: 0xdd, _M.ABSOLUTE_Y: 0xd9, _M.INDEXED_INDIRECT: 0xc1, _M.INDIRECT_INDEXED: 0xd1,
    },
    Opcode.CPX: {_M.IMMEDIATE: 0xe0, _M.ZERO_PAGE: 0xe4, _M.ABSOLUTE: 0xec},
    Opcode.CPY: {_M.IMMEDIATE: 0xc0, _M.ZERO_PAGE: 0xc4, _M.ABSOLUTE: 0xcc},
    Opcode.DEC: {_M.ZERO_PAGE: 0xc6, _M.ZERO_PAGE_X: 0xd6, _M.ABSOLUTE: 0xce, _M.ABSOLUTE_X: 0xde},
    Opcode.DEX: {_M.IMPLICIT: 0xca},
    Opcode.DEY: {_M.IMPLICIT: 0x88},
    Opcode.EOR: {
        _M.IMMEDIATE: 0x49, _M.ZERO_PAGE: 0x45, _M.ZERO_PAGE_X: 0x55, _M.ABSOLUTE: 0x4d,
        _M.ABSOLUTE_X: 0x5d, _M.ABSOLUTE_Y: 0x59, _M.INDEXED_INDIRECT: 0x41, _M.INDIRECT_INDEXED: 0x51,
    },
    Opcode.INC: {_M.ZERO_PAGE: 0xe6, _M.ZERO_PAGE_X: 0xf6, _M.ABSOLUTE: 0xee, _M.ABSOLUTE_X: 0xfe},
    Opcode.INX: {_M.IMPLICIT: 0xe8},
    Opcode.INY: {_M.IMPLICIT: 0xc8},
    Opcode.JMP: {_M.ABSOLUTE: 0x4c, _M.INDIRECT: 0x6c},
    Opcode.JSR: {_M.ABSOLUTE: 0x20},
    Opcode.LDA: {
        _M.IMMEDIATE: 0xa9, _M.ZERO_PAGE: 0xa5, _M.ZERO_PAGE_X: 0xb5, _M.ABSOLUTE: 0xad,
        _M.ABSOLUTE_X: 0xbd, _M.ABSOLUTE_Y: 0xb9, _M.INDEXED_INDIRECT: 0xa1, _M.INDIRECT_INDEXED: 0xb1,
    },
    Opcode.LDX: {
        _M.IMMEDIATE: 0xa2, _M.ZERO_PAGE: 0xa6, _M.ZERO_PAGE_Y: 0xb6, _M.ABSOLUTE: 0xae, _M.ABSOLUTE_Y: 0xbe,
    },
    Opcode.LDY: {
        _M.IMMEDIATE: 0xa0, _M.ZERO_PAGE: 0xa4, _M.ZERO_PAGE_X: 0xb4, _M.ABSOLUTE: 0xac, _M.ABSOLUTE_X: 0xbc,
    },
    Opcode.LSR: {
        _M.ACCUMULATOR: 0x4a, _M.ZERO_PAGE: 0x46, _M.ZERO_PAGE_X: 0x56, _M.ABSOLUTE: 0x4e, _M.ABSOLUTE_X: 0x5e,
    },
    Opcode.NOP: {_M.IMPLICIT: 0xea},
    Opcode.ORA: {
        _M.IMMEDIATE: 0x09, _M.ZERO_PAGE: 0x05, _M.ZERO_PAGE_X: 0x15, _M.ABSOLUTE: 0x0d,
        _M.ABSOLUTE_X: 0x1d, _M.ABSOLUTE_Y: 0x19, _M.INDEXED_INDIRECT: 0x01, _M.INDIRECT_INDEXED: 0x11,
    },
    Opcode.PHA: {_M.IMPLICIT: 0x48},
    Opcode.PHP: {_M.IMPLICIT: 0x08},
    Opcode.PLA: {_M.IMPLICIT: 0x68},
    Opcode.PLP: {_M.IMPLICIT: 0x28},
    Opcode.ROL: {
        _M.ACCUMULATOR: 0x2a, _M.ZERO_PAGE: 0x26, _M.ZERO_PAGE_X: 0x36, _M.ABSOLUTE: 0x2e, _M.ABSOLUTE_X: 0x3e,
    },
    Opcode.ROR: {
        _M.ACCUMULATOR: 0x6a, _M.ZERO_PAGE: 0x66, _M.ZERO_PAGE_X: 0x76, _M.ABSOLUTE: 0x6e, _M.ABSOLUTE_X: 0x7e,
    },
    Opcode.RTI: {_M.IMPLICIT: 0x40},
    Opcode.RTS: {_M.IMPLICIT: 0x60},
    Opcode.SBC: {
        _M.IMMEDIATE: 0xe9, _M.ZERO_PAGE: 0xe5, _M.ZERO_PAGE_X: 0xf5, _M.ABSOLUTE: 0xed,
        _M.ABSOLUTE_X: 0xfd, _M.ABSOLUTE_Y: 0xf9, _M.INDEXED_INDIRECT: 0xe1, _M.INDIRECT_INDEXED: 0xf1,
    },
    Opcode.SEC: {_M.IMPLICIT: 0x38},
    Opcode.SED: {_M.IMPLICIT: 0xf8},
    Opcode.SEI: {_M.IMPLICIT: 0x78},
    Opcode.STA: {
        _M.ZERO_PAGE: 0x85, _M.ZERO_PAGE_X: 0x95, _M.ABSOLUTE: 0x8d, _M.ABSOLUTE_X: 0x9d,
        _M.ABSOLUTE_Y: 0x99, _M.INDEXED_INDIRECT: 0x81, _M.INDIRECT_INDEXED: 0x91,
    },
    Opcode.STX: {_M.ZERO_PAGE: 0x86, _M.ZERO_PAGE_Y: 0x96, _M.ABSOLUTE: 0x8e},
    Opcode.STY: {_M.ZERO_PAGE: 0x84, _M.ZERO_PAGE_X: 0x94, _M.ABSOLUTE: 0x8c},
    Opcode.TAX: {_M.IMPLICIT: 0xaa},
    Opcode.TAY: {_M.IMPLICIT: 0xa8},
    Opcode.TSX: {_M.IMPLICIT: 0xba},
    Opcode.TXA: {_M.IMPLICIT: 0x8a},
    Opcode.TXS: {_M.IMPLICIT: 0x9a},
    Opcode.TYA: {_M.IMPLICIT: 0x98},
})
"""Legal encodings of every operation, keyed by operation and addressing mode."""


def build_decode_table(
    encodings: MappingProxyType[Opcode, dict[AddressingMode, int]],
) -> MappingProxyType[int, Instruction]:
    """Invert an encoding listing into a read-only map from opcode byte to instruction.

    Raises:
        ValueError: If two encodings claim the same byte or a byte is outside of 0x00-0xff.

    """
    table: dict[int, Instruction] = {}
    for op, modes in encodings.items():
        for mode, byte in modes.items():
            if not (0 <= byte <= 0xff):  # noqa: PLR2004
                msg = f"Encoding {byte:#x} of {op.name} is not a byte."
                raise ValueError(msg)
            if byte in table:
                msg = f"Opcode 0x{byte:02x} has already been registered for {table[byte]}."
                raise ValueError(msg)
            table[byte] = Instruction(op, mode)
    return MappingProxyType(table)


DECODE_TABLE = build_decode_table(ENCODINGS)


def decode(byte: int) -> Instruction:
    """Return the instruction encoded by an opcode byte.

    Raises:
        DecodeError: If the byte is not a legal opcode. The error carries no address or register state.

    """
    try:
        return DECODE_TABLE[byte]
    except KeyError:
        raise DecodeError(byte) from None


def encode(op: Opcode, mode: AddressingMode) -> int:
    """Return the opcode byte of an operation in a given addressing mode.

    Raises:
        ValueError: If the operation has no encoding for the addressing mode.

    """
    try:
        return ENCODINGS[op][mode]
    except KeyError:
        msg = f"{op.name} has no {mode.name} addressing mode."
        raise ValueError(msg) from None
