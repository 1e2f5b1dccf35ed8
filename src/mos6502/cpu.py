"""CPU Logic."""

import dataclasses
import logging
from collections.abc import Callable
from functools import partial
from typing import Any, Literal, Protocol, cast, runtime_checkable

from mos6502.config import CODE_START, IRQ_VECTOR, RST_VECTOR, STACK_ROOT, CPUConfig, StackPolicy
from mos6502.errors import (
    CPUHaltedError,
    CPUState,
    DecodeError,
    EmulatorError,
    StackOverflowError,
    StackUnderflowError,
)
from mos6502.instructions import AddressingMode, Instruction, Opcode, decode
from mos6502.memory import Memory
from mos6502.status import Flag, ProcessorStatus
from mos6502.utils import assert_never, make_word, split_word, to_signed_byte

logger = logging.getLogger(__name__)

Register = Literal["a", "x", "y"]


@runtime_checkable
class OperationHandler(Protocol):
    """A callable with generic arguments that carries an `operations` attribute."""

    operations: list[tuple[Opcode, dict[str, Any]]]
    def __call__(self, *args: Any, **kwargs: Any) -> None:  # noqa: ANN401, D102
        ...


def operation(op: Opcode, **kwargs: Any) -> Callable[..., OperationHandler]:  # noqa: ANN401
    """Register a method as the handler of an operation, with extra keyword arguments bound to it."""
    def decorator(func: Callable[..., None]) -> OperationHandler:
        func = cast("OperationHandler", func)
        if not hasattr(func, "operations"):
            func.operations = []
        if op in (registered for registered, _ in func.operations):
            msg = f"Operation {op.name} has already been registered for this function."
            raise ValueError(msg)
        func.operations.append((op, kwargs))
        return func
    return decorator


class CPU6502:
    """A behavioral model of the MOS6502.

    The CPU executes one instruction per `step`. Registers are plain integers, the status register is a
    `ProcessorStatus`. Decimal mode is not modelled: ADC and SBC always operate in binary.
    """

    CODE_START = CODE_START
    STACK_ROOT = STACK_ROOT
    RST_VECTOR = RST_VECTOR
    IRQ_VECTOR = IRQ_VECTOR

    def __init__(self, memory: Memory, config: CPUConfig | None = None) -> None:
        """Initialize a CPU that owns `memory`.

        Args:
            memory: Memory holding the program image. The CPU reads its first instruction from it right away.
            config: Behavioral options, see `CPUConfig`.

        Raises:
            ValueError: If an operation has no handler or more than one.

        """
        self.memory = memory
        self.config = config if config is not None else CPUConfig()

        # Registers
        self.a: int = 0
        self.x: int = 0
        self.y: int = 0
        self.pc: int = 0
        self.sp: int = 0xff
        self.status = ProcessorStatus()

        self.halted_by: EmulatorError | None = None
        self.handlers = self.build_dispatch_table()
        self.reset()

    def build_dispatch_table(self) -> dict[Opcode, Callable[[AddressingMode], None]]:
        """Return a map between operation and the method that contains the logic for it.

        Raises:
            ValueError: If an operation is handled by more than one method or by none.

        """
        table: dict[Opcode, Callable[[AddressingMode], None]] = {}
        for attr_name in dir(type(self)):
            attr = getattr(self, attr_name)
            func = getattr(attr, "__func__", attr)

            if not isinstance(func, OperationHandler):
                continue

            for op, kwargs in func.operations:
                if op in table:
                    msg = f"Operation {op.name} has already been registered."
                    raise ValueError(msg)
                table[op] = partial(attr, **kwargs)

        missing = [op.name for op in Opcode if op not in table]
        if missing:
            msg = f"No handler for operations: {', '.join(missing)}."
            raise ValueError(msg)
        return table

    def reset(self) -> None:
        """Put all registers into their power-on state.

        The program counter is set to `config.code_start`, or read from the reset vector if `config.use_reset_vector`
        is set. Memory is left untouched. A halted CPU can execute instructions again after a reset.
        """
        self.a = 0
        self.x = 0
        self.y = 0
        self.sp = 0xff
        self.status = ProcessorStatus()
        self.halted_by = None
        if self.config.use_reset_vector:
            self.pc = self.read_word(self.RST_VECTOR)
        else:
            self.pc = self.config.code_start

    def snapshot(self) -> CPUState:
        """Return a copy of the current register state."""
        return CPUState(pc=self.pc, sp=self.sp, a=self.a, x=self.x, y=self.y, status=self.status.to_byte())

    def step(self) -> Instruction:
        """Fetch, decode and execute the next instruction.

        Returns:
            instruction: The instruction that has been executed.

        Raises:
            DecodeError: If the fetched byte is not a legal opcode. The CPU halts.
            StackExhaustedError: If the instruction over- or underflows the stack. The CPU halts.
            CPUHaltedError: If the CPU has halted on an earlier error.

        """
        if self.halted_by is not None:
            msg = "CPU has halted and cannot execute further instructions."
            raise CPUHaltedError(msg) from self.halted_by

        address = self.pc
        try:
            opcode_byte = self.fetch_byte()
            try:
                instruction = decode(opcode_byte)
            except DecodeError:
                state = dataclasses.replace(self.snapshot(), pc=address)
                raise DecodeError(opcode_byte, address, state) from None

            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"${address:04x}: {self.format_instruction_bytes(address, instruction):<8} {instruction}")
            self.handlers[instruction.opcode](instruction.mode)
        except EmulatorError as e:
            logger.error(f"CPU halted: {e}")  # noqa: TRY400
            self.halted_by = e
            raise

        return instruction

    def run(self, instruction_limit: int | None = None) -> int:
        """Let the CPU run its program.

        Args:
            instruction_limit: Number of instructions to execute before returning. If set to None the CPU runs until
                an error halts it. Calling `run` again resumes where the previous call stopped.

        Returns:
            executed: Number of instructions executed.

        Raises:
            ValueError: If `instruction_limit` is negative.
            EmulatorError: When a fatal error halts the CPU.

        """
        if instruction_limit is not None and instruction_limit < 0:
            msg = "Instruction limit must not be negative."
            raise ValueError(msg)

        executed = 0
        while instruction_limit is None or executed < instruction_limit:
            self.step()
            executed += 1

        logger.debug(f"Instruction limit reached after {executed} instructions at ${self.pc:04x}")
        return executed

    def format_instruction_bytes(self, address: int, instruction: Instruction) -> str:
        """Return the opcode and operand bytes of the instruction at `address` as hex digits, e.g. `a9 11`."""
        length = 1 + instruction.mode.operand_length
        return " ".join(f"{self.memory.read((address + i) & 0xffff):02x}" for i in range(length))

    # Memory access

    def fetch_byte(self) -> int:
        """Read the byte at the program counter and advance the program counter."""
        byte = self.memory.read(self.pc)
        self.pc = (self.pc + 1) & 0xffff
        return byte

    def fetch_word(self) -> int:
        """Read the little-endian word at the program counter and advance the program counter past it."""
        lo = self.fetch_byte()
        hi = self.fetch_byte()
        return make_word(lo, hi)

    def read_word(self, address: int) -> int:
        """Read the little-endian word at `address`, wrapping around at the end of the address space."""
        lo = self.memory.read(address)
        hi = self.memory.read((address + 1) & 0xffff)
        return make_word(lo, hi)

    def read_zero_page_word(self, address: int) -> int:
        """Read the little-endian pointer at a zero page `address`, wrapping around within the zero page."""
        lo = self.memory.read(address & 0xff)
        hi = self.memory.read((address + 1) & 0xff)
        return make_word(lo, hi)

    # Addressing modes

    def resolve_address(self, mode: AddressingMode) -> int:  # noqa: C901
        """Resolve the effective address for a given addressing mode.

        Consumes the operand bytes of the instruction.

        Args:
            mode: The addressing mode to resolve.

        Returns:
            addr: The effective memory address.

        Raises:
            ValueError: If the addressing mode has no memory address.

        """
        addr: int
        match mode:
            case AddressingMode.IMPLICIT | AddressingMode.ACCUMULATOR | AddressingMode.IMMEDIATE \
                    | AddressingMode.RELATIVE:
                msg = f"{mode.name} addressing mode does not have an address."
                raise ValueError(msg)
            case AddressingMode.ZERO_PAGE:
                addr = self.fetch_byte()
            case AddressingMode.ZERO_PAGE_X:
                addr = (self.fetch_byte() + self.x) & 0xff
            case AddressingMode.ZERO_PAGE_Y:
                addr = (self.fetch_byte() + self.y) & 0xff
            case AddressingMode.ABSOLUTE:
                addr = self.fetch_word()
            case AddressingMode.ABSOLUTE_X:
                addr = (self.fetch_word() + self.x) & 0xffff
            case AddressingMode.ABSOLUTE_Y:
                addr = (self.fetch_word() + self.y) & 0xffff
            case AddressingMode.INDIRECT:
                pointer = self.fetch_word()
                if self.config.indirect_jump_page_wrap:
                    # the NMOS 6502 does not carry into the high byte of the pointer
                    lo = self.memory.read(pointer)
                    hi = self.memory.read((pointer & 0xff00) | ((pointer + 1) & 0x00ff))
                    addr = make_word(lo, hi)
                else:
                    addr = self.read_word(pointer)
            case AddressingMode.INDEXED_INDIRECT:
                addr = self.read_zero_page_word(self.fetch_byte() + self.x)
            case AddressingMode.INDIRECT_INDEXED:
                addr = (self.read_zero_page_word(self.fetch_byte()) + self.y) & 0xffff
            case _:
                assert_never(mode)

        return addr

    def resolve_value(self, mode: AddressingMode) -> int:
        """Resolve the operand value for a given addressing mode.

        Immediate operands are read from the instruction stream, accumulator operands from A without consuming a
        byte, all others from the effective address.
        """
        if mode == AddressingMode.IMMEDIATE:
            return self.fetch_byte()
        if mode == AddressingMode.ACCUMULATOR:
            return self.a
        return self.memory.read(self.resolve_address(mode))

    # Stack

    def ensure_stack_space(self, n_bytes: int) -> None:
        """Check that `n_bytes` can be pushed before anything is written to the stack.

        Raises:
            StackOverflowError: If fewer than `n_bytes` are free on the stack page and the stack policy is fatal.

        """
        if self.sp < n_bytes and self.config.stack_policy == StackPolicy.FATAL:
            msg = "Stack overflow"
            raise StackOverflowError(msg, self.snapshot())

    def push_byte_to_stack(self, byte: int) -> None:
        """Push a byte to the stack and update stack pointer.

        Raises:
            StackOverflowError: If the stack pointer is at the bottom of the stack page and the stack policy is fatal.

        """
        self.ensure_stack_space(1)
        self.memory.write(self.STACK_ROOT + self.sp, byte)
        self.sp = (self.sp - 1) & 0xff

    def pull_byte_from_stack(self) -> int:
        """Pull a byte from the stack and update the stack pointer.

        Raises:
            StackUnderflowError: If the stack pointer is at the top of the stack page and the stack policy is fatal.

        """
        if self.sp == 0xff and self.config.stack_policy == StackPolicy.FATAL:  # noqa: PLR2004
            msg = "Stack underflow"
            raise StackUnderflowError(msg, self.snapshot())
        self.sp = (self.sp + 1) & 0xff
        return self.memory.read(self.STACK_ROOT + self.sp)

    def push_word_to_stack(self, word: int) -> None:
        """Push a 16 bit word to the stack, high byte first. Nothing is pushed if only one byte is free."""
        self.ensure_stack_space(2)
        lo, hi = split_word(word)
        self.push_byte_to_stack(hi)
        self.push_byte_to_stack(lo)

    def pull_word_from_stack(self) -> int:
        """Pull a 16 bit word from the stack, low byte first."""
        lo = self.pull_byte_from_stack()
        hi = self.pull_byte_from_stack()
        return make_word(lo, hi)

    # Helpers shared by several operations

    def get_register(self, register: Register) -> int:
        """Return the value of a register."""
        return getattr(self, register)

    def set_register(self, register: Register, value: int) -> None:
        """Store `value` in a register and update the zero and negative flags."""
        value &= 0xff
        setattr(self, register, value)
        self.status.update_zero_negative(value)

    def add_with_carry(self, operand: int) -> None:
        """Add `operand` and the carry flag to the accumulator and update C, V, Z and N."""
        a_initial = self.a
        total = self.a + operand + int(self.status.get(Flag.CARRY))
        result = total & 0xff

        self.status.set(Flag.CARRY, total > 0xff)  # noqa: PLR2004
        self.status.update_overflow(a_initial, operand, result)
        self.set_register("a", result)

    def read_modify_write(self, mode: AddressingMode, func: Callable[[int], tuple[int, int]]) -> None:
        """Apply a shift or rotate to the accumulator or a memory byte.

        Args:
            mode: ACCUMULATOR to operate on A, otherwise the addressing mode of the memory operand.
            func: Maps the old value to `(new_value, carry_out)`.

        """
        if mode == AddressingMode.ACCUMULATOR:
            value, carry = func(self.a)
            self.a = value
        else:
            addr = self.resolve_address(mode)
            value, carry = func(self.memory.read(addr))
            self.memory.write(addr, value)

        self.status.set(Flag.CARRY, carry != 0)
        self.status.update_zero_negative(value)

    # System instructions

    @operation(Opcode.BPL, flag=Flag.NEGATIVE, flag_value=False)
    @operation(Opcode.BMI, flag=Flag.NEGATIVE, flag_value=True)
    @operation(Opcode.BVC, flag=Flag.OVERFLOW, flag_value=False)
    @operation(Opcode.BVS, flag=Flag.OVERFLOW, flag_value=True)
    @operation(Opcode.BCC, flag=Flag.CARRY, flag_value=False)
    @operation(Opcode.BCS, flag=Flag.CARRY, flag_value=True)
    @operation(Opcode.BNE, flag=Flag.ZERO, flag_value=False)
    @operation(Opcode.BEQ, flag=Flag.ZERO, flag_value=True)
    def branch(self, mode: AddressingMode, flag: Flag, flag_value: bool) -> None:  # noqa: ARG002, FBT001
        """Branch to relative address if specified flag is set or clear.

        The signed offset is relative to the address following the offset byte.

        Args:
            mode: Always RELATIVE.
            flag: The flag in the status register to check.
            flag_value: The value the flag should have for the branch to be taken.

        """
        offset = to_signed_byte(self.fetch_byte())
        if self.status.get(flag) == flag_value:
            self.pc = (self.pc + offset) & 0xffff

    @operation(Opcode.BRK)
    def brk(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the BReaK (BRK) instruction.

        The byte following the opcode is skipped, the return address and the status with the break flag set are
        pushed, and execution continues at the address in the IRQ vector.
        """
        # return address and status
        self.ensure_stack_space(3)
        self.pc = (self.pc + 1) & 0xffff
        self.push_word_to_stack(self.pc)
        self.push_byte_to_stack(self.status.to_byte() | Flag.BREAK.mask)
        self.status.set(Flag.INTERRUPT_DISABLE)
        self.pc = self.read_word(self.IRQ_VECTOR)

    @operation(Opcode.JMP)
    def jmp(self, mode: AddressingMode) -> None:
        """Execute the JuMP (JMP) instruction in ABSOLUTE or INDIRECT mode."""
        self.pc = self.resolve_address(mode)

    @operation(Opcode.JSR)
    def jsr(self, mode: AddressingMode = AddressingMode.ABSOLUTE) -> None:
        """Execute the Jump to SubRoutine (JSR) instruction.

        The address of the last byte of the JSR instruction is pushed, RTS adds one to it when returning.
        """
        self.ensure_stack_space(2)
        target = self.resolve_address(mode)
        self.push_word_to_stack((self.pc - 1) & 0xffff)
        self.pc = target

    @operation(Opcode.NOP)
    def nop(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute No OPeration (NOP) instruction."""

    @operation(Opcode.RTI)
    def rti(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the ReTurn from Interrupt (RTI) instruction."""
        self.status.load(self.pull_byte_from_stack())
        self.pc = self.pull_word_from_stack()

    @operation(Opcode.RTS)
    def rts(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the ReTurn from Subroutine (RTS) instruction."""
        self.pc = (self.pull_word_from_stack() + 1) & 0xffff

    # Flag instructions

    @operation(Opcode.CLC)
    def clc(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the CLear Carry (CLC) instruction."""
        self.status.clear(Flag.CARRY)

    @operation(Opcode.SEC)
    def sec(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the SEt Carry (SEC) instruction."""
        self.status.set(Flag.CARRY)

    @operation(Opcode.CLI)
    def cli(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the CLear Interrupt (CLI) instruction."""
        self.status.clear(Flag.INTERRUPT_DISABLE)

    @operation(Opcode.SEI)
    def sei(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the SEt Interrupt (SEI) instruction."""
        self.status.set(Flag.INTERRUPT_DISABLE)

    @operation(Opcode.CLD)
    def cld(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the CLear Decimal (CLD) instruction."""
        self.status.clear(Flag.DECIMAL_MODE)

    @operation(Opcode.SED)
    def sed(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the SEt Decimal (SED) instruction.

        Only the flag is set, arithmetic stays binary.
        """
        self.status.set(Flag.DECIMAL_MODE)

    @operation(Opcode.CLV)
    def clv(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the CLear oVerflow (CLV) instruction."""
        self.status.clear(Flag.OVERFLOW)

    # Register loading and storing

    @operation(Opcode.LDA, register="a")
    @operation(Opcode.LDX, register="x")
    @operation(Opcode.LDY, register="y")
    def load(self, mode: AddressingMode, register: Register) -> None:
        """Execute the load instructions (LDA, LDX, LDY)."""
        self.set_register(register, self.resolve_value(mode))

    @operation(Opcode.STA, register="a")
    @operation(Opcode.STX, register="x")
    @operation(Opcode.STY, register="y")
    def store(self, mode: AddressingMode, register: Register) -> None:
        """Execute the store instructions (STA, STX, STY)."""
        addr = self.resolve_address(mode)
        self.memory.write(addr, self.get_register(register))

    # Register transfer

    @operation(Opcode.TAX)
    def tax(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the Transfer Accumulator to X (TAX) instruction."""
        self.set_register("x", self.a)

    @operation(Opcode.TAY)
    def tay(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the Transfer Accumulator to Y (TAY) instruction."""
        self.set_register("y", self.a)

    @operation(Opcode.TSX)
    def tsx(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the Transfer Stack Pointer to X (TSX) instruction."""
        self.set_register("x", self.sp)

    @operation(Opcode.TXA)
    def txa(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the Transfer X to Accumulator (TXA) instruction."""
        self.set_register("a", self.x)

    @operation(Opcode.TXS)
    def txs(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the Transfer X to Stack Pointer (TXS) instruction. No flags are affected."""
        self.sp = self.x

    @operation(Opcode.TYA)
    def tya(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the Transfer Y to Accumulator (TYA) instruction."""
        self.set_register("a", self.y)

    # Stack instructions

    @operation(Opcode.PHA)
    def pha(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the PusH Accumulator (PHA) instruction."""
        self.push_byte_to_stack(self.a)

    @operation(Opcode.PHP)
    def php(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the PusH Processor status (PHP) instruction."""
        self.push_byte_to_stack(self.status.to_byte())

    @operation(Opcode.PLA)
    def pla(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the PuLl Accumulator (PLA) instruction."""
        self.set_register("a", self.pull_byte_from_stack())

    @operation(Opcode.PLP)
    def plp(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the PuLl Processor status (PLP) instruction."""
        self.status.load(self.pull_byte_from_stack())

    # Unary arithmetic

    @operation(Opcode.DEC)
    def dec(self, mode: AddressingMode) -> None:
        """Execute the DECrement (DEC) instruction."""
        addr = self.resolve_address(mode)
        byte = (self.memory.read(addr) - 1) & 0xff
        self.memory.write(addr, byte)
        self.status.update_zero_negative(byte)

    @operation(Opcode.DEX)
    def dex(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the DEcrement X (DEX) instruction."""
        self.set_register("x", self.x - 1)

    @operation(Opcode.DEY)
    def dey(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the DEcrement Y (DEY) instruction."""
        self.set_register("y", self.y - 1)

    @operation(Opcode.INC)
    def inc(self, mode: AddressingMode) -> None:
        """Execute the INCrement (INC) instruction."""
        addr = self.resolve_address(mode)
        byte = (self.memory.read(addr) + 1) & 0xff
        self.memory.write(addr, byte)
        self.status.update_zero_negative(byte)

    @operation(Opcode.INX)
    def inx(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the INcrement X (INX) instruction."""
        self.set_register("x", self.x + 1)

    @operation(Opcode.INY)
    def iny(self, mode: AddressingMode = AddressingMode.IMPLICIT) -> None:  # noqa: ARG002
        """Execute the INcrement Y (INY) instruction."""
        self.set_register("y", self.y + 1)

    # Shifts and rotates

    @operation(Opcode.ASL)
    def asl(self, mode: AddressingMode) -> None:
        """Execute the Arithmetic Shift Left (ASL) instruction."""
        self.read_modify_write(mode, lambda value: ((value << 1) & 0xff, value >> 7))

    @operation(Opcode.LSR)
    def lsr(self, mode: AddressingMode) -> None:
        """Execute the Logic Shift Right (LSR) instruction."""
        self.read_modify_write(mode, lambda value: (value >> 1, value & 1))

    @operation(Opcode.ROL)
    def rol(self, mode: AddressingMode) -> None:
        """Execute the Rotate Left (ROL) instruction."""
        carry_in = int(self.status.get(Flag.CARRY))
        self.read_modify_write(mode, lambda value: (((value << 1) | carry_in) & 0xff, value >> 7))

    @operation(Opcode.ROR)
    def ror(self, mode: AddressingMode) -> None:
        """Execute the Rotate Right (ROR) instruction."""
        carry_in = int(self.status.get(Flag.CARRY))
        self.read_modify_write(mode, lambda value: ((carry_in << 7) | (value >> 1), value & 1))

    # Binary arithmetic and logic

    @operation(Opcode.ADC)
    def adc(self, mode: AddressingMode) -> None:
        """Execute the ADd with Carry (ADC) instruction."""
        self.add_with_carry(self.resolve_value(mode))

    @operation(Opcode.SBC)
    def sbc(self, mode: AddressingMode) -> None:
        """Execute the SuBtract with Carry / borrow (SBC) instruction.

        Subtraction is addition of the one's complement of the operand, the carry acting as inverted borrow.
        """
        self.add_with_carry(~self.resolve_value(mode) & 0xff)

    @operation(Opcode.AND)
    def and_op(self, mode: AddressingMode) -> None:
        """Execute the AND instruction."""
        self.set_register("a", self.a & self.resolve_value(mode))

    @operation(Opcode.EOR)
    def eor(self, mode: AddressingMode) -> None:
        """Execute the Exclusive OR instruction."""
        self.set_register("a", self.a ^ self.resolve_value(mode))

    @operation(Opcode.ORA)
    def ora(self, mode: AddressingMode) -> None:
        """Execute the OR with Accumulator instruction."""
        self.set_register("a", self.a | self.resolve_value(mode))

    @operation(Opcode.BIT)
    def bit(self, mode: AddressingMode) -> None:
        """Execute the BIT test (BIT) instruction."""
        operand = self.resolve_value(mode)
        self.status.set(Flag.NEGATIVE, operand & 0x80 != 0)
        self.status.set(Flag.OVERFLOW, operand & 0x40 != 0)
        self.status.set(Flag.ZERO, operand & self.a == 0)

    @operation(Opcode.CMP, register="a")
    @operation(Opcode.CPX, register="x")
    @operation(Opcode.CPY, register="y")
    def compare(self, mode: AddressingMode, register: Register) -> None:
        """Execute the compare instruction (CMP, CPX, CPY)."""
        self.compare_logic(self.get_register(register), mode)

    def compare_logic(self, register_value: int, mode: AddressingMode) -> None:
        """Subtract the operand from `register_value` and update C, Z and N without storing the difference."""
        operand = self.resolve_value(mode)
        self.status.set(Flag.CARRY, register_value >= operand)
        self.status.update_zero_negative((register_value - operand) & 0xff)
