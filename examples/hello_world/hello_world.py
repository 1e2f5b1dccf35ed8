"""Generate a Hello World output message on the console port."""  # noqa: INP001

from mos6502.system import create_system

# .ORG $A000
#
# ; MMIO register for writing to the console
# CONSOLE = $0F
#
# JMP START
#
# ; data section
#
# MSG:
#         .ASCII "Hello, World!"
#         .BYTE $0A ; newline
# MSG_END:
#
# ; text section
#
# START:
#         LDX #0
# !       LDA MSG,X
#         STA CONSOLE
#         INX
#         CPX #MSG_END-MSG
#         BNE !-
# DONE:   JMP DONE
program = bytes.fromhex("""
4C 11 A0 48 65 6C 6C 6F
2C 20 57 6F 72 6C 64 21
0A A2 00 BD 03 A0 85 0F
E8 E0 0E D0 F6 4C 1D A0
""")

# JMP, LDX and five instructions per character
INSTRUCTION_COUNT = 2 + 5 * 14


if __name__ == "__main__":
    cpu = create_system(program)
    cpu.run(INSTRUCTION_COUNT)
