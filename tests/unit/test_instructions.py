"""Test the opcode decoder."""

from types import MappingProxyType

import pytest

from mos6502.errors import DecodeError
from mos6502.instructions import (
    DECODE_TABLE,
    ENCODINGS,
    AddressingMode,
    Instruction,
    Opcode,
    build_decode_table,
    decode,
    encode,
)

N_LEGAL_OPCODES = 151


def test_decoder_totality():
    """Every byte either decodes to exactly one instruction or raises a DecodeError."""
    decoded = 0
    for byte in range(0x100):
        try:
            instruction = decode(byte)
        except DecodeError as e:
            assert e.opcode == byte
            assert byte not in DECODE_TABLE
        else:
            assert isinstance(instruction, Instruction)
            assert ENCODINGS[instruction.opcode][instruction.mode] == byte
            decoded += 1
    assert decoded == N_LEGAL_OPCODES


def test_every_operation_has_an_encoding():  # noqa: D103
    assert set(ENCODINGS) == set(Opcode)
    assert all(ENCODINGS[op] for op in Opcode)


@pytest.mark.parametrize(
    ("byte", "instruction"),
    [
        (0x00, Instruction(Opcode.BRK, AddressingMode.IMPLICIT)),
        (0x0a, Instruction(Opcode.ASL, AddressingMode.ACCUMULATOR)),
        (0x4a, Instruction(Opcode.LSR, AddressingMode.ACCUMULATOR)),
        (0x6c, Instruction(Opcode.JMP, AddressingMode.INDIRECT)),
        (0x61, Instruction(Opcode.ADC, AddressingMode.INDEXED_INDIRECT)),
        (0x71, Instruction(Opcode.ADC, AddressingMode.INDIRECT_INDEXED)),
        (0x96, Instruction(Opcode.STX, AddressingMode.ZERO_PAGE_Y)),
        (0xa9, Instruction(Opcode.LDA, AddressingMode.IMMEDIATE)),
        (0xbe, Instruction(Opcode.LDX, AddressingMode.ABSOLUTE_Y)),
        (0xd0, Instruction(Opcode.BNE, AddressingMode.RELATIVE)),
        (0xea, Instruction(Opcode.NOP, AddressingMode.IMPLICIT)),
        (0xfe, Instruction(Opcode.INC, AddressingMode.ABSOLUTE_X)),
    ],
)
def test_decode(byte: int, instruction: Instruction):  # noqa: D103
    assert decode(byte) == instruction


@pytest.mark.parametrize("byte", [0x02, 0x03, 0x1a, 0x80, 0x89, 0x9e, 0xeb, 0xff])
def test_decode_illegal_opcode(byte: int):  # noqa: D103
    with pytest.raises(DecodeError, match=f"0x{byte:02x}"):
        decode(byte)


def test_decode_table_is_read_only():  # noqa: D103
    with pytest.raises(TypeError):
        DECODE_TABLE[0x02] = Instruction(Opcode.NOP, AddressingMode.IMPLICIT)  # type: ignore[index]


def test_duplicate_encoding_is_rejected():  # noqa: D103
    encodings = MappingProxyType({
        Opcode.NOP: {AddressingMode.IMPLICIT: 0xea},
        Opcode.INX: {AddressingMode.IMPLICIT: 0xea},
    })
    with pytest.raises(ValueError, match="already been registered"):
        build_decode_table(encodings)


def test_encode():  # noqa: D103
    assert encode(Opcode.LDA, AddressingMode.IMMEDIATE) == 0xa9  # noqa: PLR2004
    with pytest.raises(ValueError, match="no IMMEDIATE addressing mode"):
        encode(Opcode.STA, AddressingMode.IMMEDIATE)


@pytest.mark.parametrize(
    ("mode", "length"),
    [
        (AddressingMode.IMPLICIT, 0),
        (AddressingMode.ACCUMULATOR, 0),
        (AddressingMode.IMMEDIATE, 1),
        (AddressingMode.RELATIVE, 1),
        (AddressingMode.INDIRECT_INDEXED, 1),
        (AddressingMode.ABSOLUTE_Y, 2),
        (AddressingMode.INDIRECT, 2),
    ],
)
def test_operand_length(mode: AddressingMode, length: int):  # noqa: D103
    assert mode.operand_length == length
