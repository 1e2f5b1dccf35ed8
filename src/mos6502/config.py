"""Configuration of the CPU model."""

import enum
from dataclasses import dataclass

CODE_START = 0xa000
"""Address the program counter starts at unless the reset vector is used."""

STACK_ROOT = 0x0100
"""Base address of the stack page."""

RST_VECTOR = 0xfffc
IRQ_VECTOR = 0xfffe


class StackPolicy(enum.Enum):
    """What happens when the stack pointer runs past either end of the stack page."""

    FATAL = "fatal"
    """Raise a `StackExhaustedError` and halt the CPU."""

    WRAP = "wrap"
    """Wrap the stack pointer around within the page, like the hardware does."""


@dataclass(frozen=True)
class CPUConfig:
    """Behavioral options of a `CPU6502`."""

    code_start: int = CODE_START
    """Initial program counter."""

    use_reset_vector: bool = False
    """Read the initial program counter from `RST_VECTOR` instead of using `code_start`."""

    stack_policy: StackPolicy = StackPolicy.FATAL

    indirect_jump_page_wrap: bool = False
    """Reproduce the NMOS 6502 bug of `JMP ($xxff)` fetching the high byte of the target from `$xx00`."""

    def __post_init__(self) -> None:  # noqa: D105
        if not (0 <= self.code_start <= 0xffff):  # noqa: PLR2004
            msg = f"Code start {self.code_start:#x} is outside of the 16 bit address space."
            raise ValueError(msg)
