"""Call a subroutine on a bare CPU and print the register state after every instruction."""  # noqa: INP001

import logging

from mos6502.config import CODE_START
from mos6502.cpu import CPU6502
from mos6502.memory import MemoryBlock

# .ORG $A000
#
#         LDA #$01
#         JSR SUB
#         JMP AFTER
# SUB:    LDX #$02
#         RTS
# AFTER:  LDY #$03
PROGRAM = """
a9 01 20 08 a0 4c 0b a0
a2 02 60 a0 03
"""

INSTRUCTION_COUNT = 6


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(message)s")
    memory = MemoryBlock()
    memory.write_bytes_hex(CODE_START, PROGRAM)
    cpu = CPU6502(memory)
    for _ in range(INSTRUCTION_COUNT):
        instruction = cpu.step()
        print(f"{instruction!s:<20} {cpu.snapshot()}")  # noqa: T201
