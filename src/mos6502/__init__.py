"""Behavioral emulator of the MOS 6502 instruction set."""
