"""Test instructions for performing binary logic, i.e., BIT, CMP, CPX, CPY."""

import pytest

from mos6502.cpu import CPU6502
from mos6502.instructions import AddressingMode
from mos6502.status import Flag


@pytest.mark.parametrize(
    ("a", "operand", "n", "z", "v"),
    [
        (0x00, 0x00, 0, 1, 0),
        (0x00, 0x80, 1, 1, 0),
        (0x00, 0x40, 0, 1, 1),
        (0xff, 0xfe, 1, 0, 1),
        (0x01, 0x3f, 0, 0, 0),
    ],
    ids=[
        "Smoke test",
        "N flag extraction",
        "V Flag extraction",
        "Mask extraction",
        "Nonzero mask",
    ],
)
def test_bit_zero_page(cpu: CPU6502, a: int, operand: int, n: int, z: int, v: int):  # noqa: D103, PLR0913
    cpu.a = a
    cpu.memory.write(0x0000, 0x01)
    cpu.memory.write(0x0001, operand)
    cpu.bit(AddressingMode.ZERO_PAGE)

    assert cpu.status.get(Flag.NEGATIVE) == bool(n)
    assert cpu.status.get(Flag.ZERO) == bool(z)
    assert cpu.status.get(Flag.OVERFLOW) == bool(v)
    assert cpu.a == a


def test_bit_leaves_carry_alone(cpu: CPU6502):  # noqa: D103
    cpu.status.set(Flag.CARRY)
    cpu.memory.write_bytes_hex(0, "00 03")
    cpu.bit(AddressingMode.ABSOLUTE)

    assert cpu.status.get(Flag.CARRY)
    assert cpu.status.get(Flag.ZERO)


@pytest.mark.parametrize(
    ("register_value", "operand", "n", "z", "c"),
    [
        (0x00, 0x00, 0, 1, 1),
        (0x00, 0x01, 1, 0, 0),
        (0x01, 0x00, 0, 0, 1),
        (0x01, 0x01, 0, 1, 1),
        (0x7f, 0xff, 1, 0, 0),
        (0x00, 0xff, 0, 0, 0),
    ],
    ids=[
        "Smoke test",
        "Negative flag set",
        "Carry flag set",
        "Zero flag set, carry flag set",
        "Signed overflow",
        "Maximum difference",
    ],
)
def test_compare_logic(cpu: CPU6502, register_value: int, operand: int, n: int, z: int, c: int):  # noqa: D103, PLR0913
    cpu.memory.write(0x0000, operand)
    cpu.compare_logic(register_value, mode=AddressingMode.IMMEDIATE)

    assert cpu.status.get(Flag.NEGATIVE) == bool(n)
    assert cpu.status.get(Flag.ZERO) == bool(z)
    assert cpu.status.get(Flag.CARRY) == bool(c)


@pytest.mark.parametrize(
    ("register", "method"),
    [("a", "CMP"), ("x", "CPX"), ("y", "CPY")],
)
def test_compare_uses_register(cpu: CPU6502, register: str, method: str):
    """Test that each compare instruction compares its own register and leaves it unchanged."""
    setattr(cpu, register, 0x40)
    cpu.memory.write(0x0000, 0x40)
    cpu.compare(AddressingMode.IMMEDIATE, register=register)  # type: ignore[arg-type]

    assert cpu.status.get(Flag.ZERO), method
    assert cpu.status.get(Flag.CARRY), method
    assert getattr(cpu, register) == 0x40  # noqa: PLR2004
