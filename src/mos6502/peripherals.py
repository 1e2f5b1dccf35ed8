"""Collection of common peripherals for emulated systems."""

import sys
from typing import TextIO

from mos6502.memory import MMIORegister

CONSOLE_PORT = 0x000f
"""Address the console output register is mapped to by `mos6502.system.create_system`."""


class ConsolePeripheral:
    """Write-only character output port.

    Every byte the emulated program stores into `register` is interpreted as a Latin-1 character and written to the
    output stream.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize the output register.

        Args:
            stream: Text stream receiving the characters. Defaults to the `sys.stdout` in effect when a character is
                written.

        """
        self._stream = stream
        self.register = MMIORegister(write_callback=self._output_character)

    @property
    def stream(self) -> TextIO:  # noqa: D102
        return self._stream if self._stream is not None else sys.stdout

    def _output_character(self, value: int) -> None:
        """Interpret value as a character and print it to the output stream."""
        self.stream.write(bytes([value]).decode("latin-1"))
        self.stream.flush()
