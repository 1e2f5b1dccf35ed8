"""Fatal emulator conditions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CPUState:
    """Snapshot of the CPU registers at one point in time."""

    pc: int
    sp: int
    a: int
    x: int
    y: int
    status: int

    def __str__(self) -> str:
        return (
            f"pc=${self.pc:04x} sp=${self.sp:02x} a=${self.a:02x} x=${self.x:02x} y=${self.y:02x} "
            f"status=${self.status:02x}"
        )


class EmulatorError(Exception):
    """Base class of all conditions that halt the CPU."""


class DecodeError(EmulatorError):
    """Raised when the CPU fetches a byte that is not a legal opcode."""

    def __init__(self, opcode: int, address: int | None = None, state: CPUState | None = None) -> None:
        """Initialize with the offending byte, the address it was fetched from and the register state."""
        self.opcode = opcode
        self.address = address
        self.state = state
        msg = f"Invalid opcode 0x{opcode:02x}"
        if address is not None:
            msg += f" at ${address:04x}"
        if state is not None:
            msg += f" ({state})"
        super().__init__(msg)


class StackExhaustedError(EmulatorError):
    """Raised when the stack pointer would leave the stack page."""

    def __init__(self, msg: str, state: CPUState | None = None) -> None:  # noqa: D107
        self.state = state
        if state is not None:
            msg += f" ({state})"
        super().__init__(msg)


class StackOverflowError(StackExhaustedError):
    """Raised on a push while the stack pointer is already at the bottom of the stack page."""


class StackUnderflowError(StackExhaustedError):
    """Raised on a pull while the stack pointer is already at the top of the stack page."""


class CPUHaltedError(EmulatorError):
    """Raised when a halted CPU is asked to execute further instructions."""
