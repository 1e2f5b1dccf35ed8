"""Wiring of a complete emulated system: memory, console and CPU."""

import logging
from typing import TextIO

from mos6502.config import CODE_START, CPUConfig
from mos6502.cpu import CPU6502
from mos6502.memory import ADDRESS_SPACE_SIZE, MemoryBlock, MemoryMap
from mos6502.peripherals import CONSOLE_PORT, ConsolePeripheral

logger = logging.getLogger(__name__)

# .ORG $A000
#
#         LDA #$01
#         JSR SUB
#         JMP AFTER
# SUB:    LDX #$02
#         RTS
# AFTER:  LDY #$03
DEMO_PROGRAM = bytes.fromhex("""
a9 01 20 08 a0 4c 0b a0
a2 02 60 a0 03
""")
"""Subroutine call demo assembled for `CODE_START`; runs for six instructions."""


def build_memory_map(console: ConsolePeripheral, console_port: int = CONSOLE_PORT) -> MemoryMap:
    """Return a 64K memory map of RAM with the console output register at `console_port`."""
    memory_map = MemoryMap()
    if console_port > 0:
        memory_map.add_block(0x0000, MemoryBlock(console_port))
    memory_map.add_block(console_port, console.register)
    if console_port < ADDRESS_SPACE_SIZE - 1:
        memory_map.add_block(console_port + 1, MemoryBlock(ADDRESS_SPACE_SIZE - console_port - 1))
    return memory_map


def create_system(
    program: bytes,
    *,
    load_address: int = CODE_START,
    console_stream: TextIO | None = None,
    config: CPUConfig | None = None,
) -> CPU6502:
    """Build memory, load a program image into it and return a CPU ready to run it.

    Args:
        program: Raw program image.
        load_address: Address the first byte of `program` is placed at.
        console_stream: Stream receiving the characters written to the console port. Defaults to stdout.
        config: CPU options. Defaults to starting execution at `load_address`.

    Raises:
        ValueError: If the program does not fit into the address space at `load_address`.

    """
    if not (0 <= load_address <= 0xffff) or load_address + len(program) > ADDRESS_SPACE_SIZE:  # noqa: PLR2004
        msg = f"Program of {len(program)} bytes does not fit into memory at ${load_address:04x}."
        raise ValueError(msg)

    console = ConsolePeripheral(console_stream)
    memory = build_memory_map(console)
    memory.write_bytes(load_address, program)
    logger.debug(f"Loaded {len(program)} bytes at ${load_address:04x}")

    if config is None:
        config = CPUConfig(code_start=load_address)
    return CPU6502(memory, config)
