"""Memory for running the CPU."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Self, override

logger = logging.getLogger(__name__)

ADDRESS_SPACE_SIZE = 0x10000


class Memory(ABC):
    """Abstract interface for computer memory."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of bytes in the memory object."""

    @abstractmethod
    def read(self, address: int) -> int:
        """Return the byte at the given memory location.

        Args:
            address: Memory location to read byte from.

        Returns:
            value: Value of byte read from memory.

        Raises:
            IndexError: If address is outside of memory.

        """

    @abstractmethod
    def write(self, address: int, value: int) -> None:
        """Write a value to a memory location.

        Args:
            address: Memory location to write the byte to.
            value: Value of the byte. Anything above the eight least significant bits is discarded by a bit mask.

        Raises:
            IndexError: If address is outside of memory.

        """

    def write_bytes(self, start_address: int, sequence: bytes) -> None:
        """Write a sequence of bytes to a memory region, one byte at a time.

        Args:
            start_address: First memory address to be overwritten by `sequence`.
            sequence: Sequence of bytes to write to memory region.

        """
        for offset, byte in enumerate(sequence):
            self.write(start_address + offset, byte)

    def write_bytes_hex(self, start_address: int, sequence: str) -> None:
        """Write a sequence of bytes written as a string of hexadecimal digits to a memory region.

        Whitespace between the digits is ignored.
        """
        self.write_bytes(start_address, bytes.fromhex(sequence))


class MemoryBlock(Memory):
    """Simple block of contiguous memory of configurable size."""

    def __init__(self, size: int = ADDRESS_SPACE_SIZE) -> None:
        """Initialize empty memory of given size.

        Args:
            size: Number of bytes in the memory. Defaults to the full 64K address space of the 6502.

        """
        super().__init__()
        self.mem = bytearray(size)

    def _check_address_bounds(self, address: int) -> None:
        """Check if memory address is within the bound of this memory."""
        if not (0 <= address < len(self.mem)):
            msg = f"Address {address:04x} out of memory range."
            raise IndexError(msg)

    @override
    def __len__(self) -> int:
        return len(self.mem)

    @override
    def read(self, address: int) -> int:
        self._check_address_bounds(address)
        return self.mem[address]

    @override
    def write(self, address: int, value: int) -> None:
        self._check_address_bounds(address)
        self.mem[address] = value & 0xff

    @override
    def write_bytes(self, start_address: int, sequence: bytes) -> None:
        """Write a sequence of bytes to a memory region.

        Raises:
            IndexError: If sequence at specified location exceeds the bounds of the memory.

        """
        if not sequence:
            return
        self._check_address_bounds(start_address)
        self._check_address_bounds(start_address + len(sequence) - 1)
        self.mem[start_address:start_address + len(sequence)] = sequence


class MMIORegister(Memory):
    """Single byte Memory-Mapped Input/Output register backed by callbacks.

    A register without read callback reads as zero and logs a warning; writes to a register without write callback
    are dropped with a warning.
    """

    def __init__(
        self,
        read_callback: Callable[[], int] | None = None,
        write_callback: Callable[[int], None] | None = None,
    ) -> None:
        """Initialize the register with the callbacks handling reads and writes."""
        super().__init__()
        self.read_callback = read_callback
        self.write_callback = write_callback

    @override
    def __len__(self) -> int:
        return 1

    @override
    def read(self, address: int) -> int:
        if address != 0:
            msg = f"Address {address:04x} out of memory range."
            raise IndexError(msg)
        if self.read_callback is None:
            logger.warning("Tried to read from write-only register.")
            return 0
        return self.read_callback() & 0xff

    @override
    def write(self, address: int, value: int) -> None:
        if address != 0:
            msg = f"Address {address:04x} out of memory range."
            raise IndexError(msg)
        if self.write_callback is None:
            logger.warning("Tried to write to read-only register.")
            return
        self.write_callback(value & 0xff)


@dataclass
class MemoryMapRegion:
    """One memory region entry in a `MemoryMap`."""

    offset: int
    """Offset on the region within the address space of the memory map.

    This is the first address in the memory map that falls into this region.
    """

    memory: Memory
    """Reference to the `Memory` object backing this region."""

    def __contains__(self, address: int) -> bool:
        """Check if the region contains a given address."""
        return self.offset <= address <= self.top

    @property
    def top(self) -> int:
        """Highest address within the memory region."""
        return self.offset + len(self.memory) - 1

    def overlaps(self, other: Self) -> bool:
        """Check if two memory regions overlap."""
        return other.offset <= self.top and self.offset <= other.top


class MemoryMap(Memory):
    """Memory map of multiple components."""

    def __init__(self) -> None:  # noqa: D107
        super().__init__()
        self.regions: list[MemoryMapRegion] = []

    def add_block(self, offset: int, block: Memory) -> Self:
        """Add a memory block to the map at a given offset address.

        If `offset` is 0x0100, the the first byte within the block can be found at address 0x0100 within the memory map.

        Raises:
            ValueError: If the block overlaps a region already in the map.

        """
        region = MemoryMapRegion(offset, block)
        if any(region.overlaps(r) for r in self.regions):
            msg = "Memory region overlaps existing region in memory map."
            raise ValueError(msg)
        self.regions.append(region)
        return self

    def get_containing_region(self, address: int) -> MemoryMapRegion | None:
        """Return the region containing `address` or None."""
        try:
            return next(r for r in self.regions if address in r)
        except StopIteration:
            return None

    @override
    def __len__(self) -> int:
        """Return the size of the address range from zero up to the highest mapped address."""
        if not self.regions:
            return 0
        return max(r.top for r in self.regions) + 1

    @override
    def read(self, address: int) -> int:
        region = self.get_containing_region(address)
        if region is None:
            logger.warning(f"Tried to read address 0x{address:04x} that is not part of memory map.")
            return 0
        return region.memory.read(address - region.offset)

    @override
    def write(self, address: int, value: int) -> None:
        region = self.get_containing_region(address)
        if region is None:
            logger.warning(f"Tried to write to address 0x{address:04x} that is not part of memory map.")
            return
        region.memory.write(address - region.offset, value)
