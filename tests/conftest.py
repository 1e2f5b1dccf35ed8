"""Fixtures for testing."""

from collections.abc import Callable

import pytest

from mos6502.config import CODE_START, CPUConfig
from mos6502.cpu import CPU6502
from mos6502.memory import MemoryBlock


@pytest.fixture
def memory() -> MemoryBlock:
    """Return 64K of RAM initialized to zero."""
    return MemoryBlock()


@pytest.fixture
def cpu(memory: MemoryBlock) -> CPU6502:
    """Return a CPU with 64K of RAM initialized to zero whose program counter starts at address zero."""
    return CPU6502(memory, CPUConfig(code_start=0))


@pytest.fixture
def run_code() -> Callable[[str, int], CPU6502]:
    """Return a function that loads machine code given as hex digits at `CODE_START` and runs it."""
    def _run_code(code: str, instruction_count: int) -> CPU6502:
        memory = MemoryBlock()
        memory.write_bytes_hex(CODE_START, code)
        cpu = CPU6502(memory)
        cpu.run(instruction_count)
        return cpu
    return _run_code
